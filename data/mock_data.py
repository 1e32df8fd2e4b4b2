"""
Mock Data
=========
Fixed portal fixtures (field visits, payments, returns)
"""

MOCK_VISIT_REPORTS = [
    {
        'id': 'vr-1001',
        'datetime': '2025-10-05T10:30:00Z',
        'employee_id': 'EMP-021',
        'employee_name': 'Anita Rao',
        'store_id': 'S-1001',
        'store_name': 'Medplus Koramangala',
        'local_head_name': 'R. Sharma',
        'store_environment': {'value': 2, 'remarks': 'Dust near billing counter'},
        'staff_grooming': {'value': 4},
        'staff_quality': {'value': 3},
        'staff_present': 6,
        'pvt_label_pharma': {'value': 2, 'remarks': 'No shelf talkers'},
        'pvt_label_non_pharma': {'value': 3},
        'to_replenishment': 'Pending',
        'outstanding_payments': 'No',
        'sop_deviations': 'Expired promo standee on floor',
        'other_observations': 'High evening footfall',
    },
    {
        'id': 'vr-1002',
        'datetime': '2025-10-06T14:10:00Z',
        'employee_id': 'EMP-033',
        'employee_name': 'Vikram Kulkarni',
        'store_id': 'S-1001',
        'store_name': 'Medplus Koramangala',
        'local_head_name': 'R. Sharma',
        'store_environment': {'value': 5},
        'staff_grooming': {'value': 5},
        'staff_quality': {'value': 4},
        'staff_present': 5,
        'pvt_label_pharma': {'value': 4},
        'pvt_label_non_pharma': {'value': 4},
        'to_replenishment': 'Completed',
        'outstanding_payments': 'No',
        'sop_deviations': '',
        'other_observations': 'All displays updated',
    },
    {
        'id': 'vr-1003',
        'datetime': '2025-10-07T05:45:00Z',
        'employee_id': 'EMP-021',
        'employee_name': 'Anita Rao',
        'store_id': 'S-1002',
        'store_name': 'Medplus Indiranagar',
        'local_head_name': 'K. Menon',
        'store_environment': {'value': 4},
        'staff_grooming': {'value': 3},
        'staff_quality': {'value': 1, 'remarks': 'Pharmacist unable to explain substitutes'},
        'staff_present': 4,
        'pvt_label_pharma': {'value': 3},
        'pvt_label_non_pharma': {'value': 3},
        'to_replenishment': 'Completed',
        'outstanding_payments': 'Yes',
        'sop_deviations': 'Cold-chain log not filled for 2 days',
    },
]

MOCK_PAYMENTS = [
    {
        'id': '1',
        'payment_id': 'PAY-2024-001',
        'name': 'Monthly Payment',
        'store_id': 'S-1001',
        'created_date': '2024-01-15',
        'approved_date': '2024-01-16',
        'status': 'Approved',
        'amount': 30000,
        'mode_of_payment': 'NEFT',
    },
    {
        'id': '2',
        'payment_id': 'PAY-2024-002',
        'name': 'Advance Payment',
        'store_id': 'S-1001',
        'created_date': '2024-01-20',
        'approved_date': None,
        'status': 'Pending',
        'amount': 15000,
        'mode_of_payment': 'UPI',
    },
    {
        'id': '3',
        'payment_id': 'PAY-2024-003',
        'name': 'Outstanding Payment',
        'store_id': 'S-1002',
        'created_date': '2024-01-22',
        'approved_date': None,
        'status': 'Rejected',
        'amount': 8250.5,
        'mode_of_payment': 'Cheque',
    },
]

MOCK_RETURNS = [
    {
        'id': '1',
        'return_id': 'RET-2024-001',
        'tax_invoice': 'INV-2024-001',
        'store_id': 'S-1001',
        'created_by': 'John Doe',
        'total': 5000,
        'received_date': '2024-01-10',
        'return_note_id': 'RN-001',
        'status': 'Approved',
    },
    {
        'id': '2',
        'return_id': 'RET-2024-002',
        'tax_invoice': 'INV-2024-002',
        'store_id': 'S-1001',
        'created_by': 'John Doe',
        'total': 3500,
        'received_date': '2024-01-15',
        'return_note_id': 'RN-002',
        'status': 'Pending',
    },
]

# Return lines, keyed by the tax invoice they were billed on
MOCK_RETURN_ITEMS = [
    {
        'product_name': 'Paracetamol 500mg',
        'product_id': 'PROD-001',
        'batch_id': 'BATCH-001',
        'pack_size': '10 tablets',
        'exp_date': '2025-12-31',
        'invoice_id': 'INV-2024-001',
        'order_id': 'ORD-2024-001',
        'price': 50,
        'returned_quantity': 20,
        'total': 1000,
    },
    {
        'product_name': 'Amoxicillin 250mg',
        'product_id': 'PROD-002',
        'batch_id': 'BATCH-002',
        'pack_size': '15 capsules',
        'exp_date': '2025-10-31',
        'invoice_id': 'INV-2024-001',
        'order_id': 'ORD-2024-001',
        'price': 100,
        'returned_quantity': 40,
        'total': 4000,
    },
    {
        'product_name': 'Cetirizine 10mg',
        'product_id': 'PROD-014',
        'batch_id': 'BATCH-117',
        'pack_size': '10 tablets',
        'exp_date': '2025-06-30',
        'invoice_id': 'INV-2024-002',
        'order_id': 'ORD-2024-007',
        'price': 35,
        'returned_quantity': 100,
        'total': 3500,
    },
]

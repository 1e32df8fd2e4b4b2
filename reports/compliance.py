"""
Compliance Flags
================
Derived flags of field-visit reports. Recomputed on every call.
"""

from typing import List

from config import NON_COMPLIANCE_THRESHOLD
from reports.models import RATING_FIELDS, FieldVisitReport


def is_low_rating(value: int) -> bool:
    """Rating at or below the non-compliance threshold"""
    return value <= NON_COMPLIANCE_THRESHOLD


def low_ratings(report: FieldVisitReport) -> List[str]:
    """Names of covered ratings at or below the threshold, in RATING_FIELDS order"""
    return [name for name, rating in report.ratings().items() if is_low_rating(rating.value)]


def is_non_compliant(report: FieldVisitReport) -> bool:
    """
    Non-compliance flag of a visit

    True if any of store environment, staff grooming, staff quality,
    pvt label pharma or pvt label non-pharma is rated 2 or lower.
    """
    return any(is_low_rating(getattr(report, name).value) for name in RATING_FIELDS)

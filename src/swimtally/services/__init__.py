"""Service layer for checks callers run on parse results."""

from swimtally.services.totals_check import (
    Severity,
    ValidationIssue,
    ValidationResult,
    check_totals,
)

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_totals",
]

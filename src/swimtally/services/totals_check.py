"""Sanity checks a caller can run on session totals.

The parser does not enforce any of these. A session total that is not a
multiple of the pool length usually means a line was misread, so front ends
show these alongside the totals.
"""

from enum import StrEnum

from pydantic import BaseModel

from swimtally.models.session import SessionTotals

# Remainders within this many metres of a pool-length multiple only warn
ROUNDING_TOLERANCE = 5
# Above this a session total is suspicious
MAX_EXPECTED_DISTANCE = 20000


class Severity(StrEnum):
    """Validation issue severity levels."""

    ERROR = "error"
    WARNING = "warning"


class ValidationIssue(BaseModel):
    """A single validation error or warning."""

    field: str
    message: str
    severity: Severity = Severity.ERROR


class ValidationResult(BaseModel):
    """Result of checking session totals."""

    valid: bool = True
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    def add_error(self, field: str, message: str) -> None:
        """Add a validation error."""
        self.errors.append(ValidationIssue(field=field, message=message, severity=Severity.ERROR))
        self.valid = False

    def add_warning(self, field: str, message: str) -> None:
        """Add a validation warning (doesn't invalidate)."""
        self.warnings.append(
            ValidationIssue(field=field, message=message, severity=Severity.WARNING)
        )


def _format_metres(value: float) -> str:
    return f"{value:g}m"


def check_totals(totals: SessionTotals, pool_length: int = 25) -> ValidationResult:
    """Check session totals against pool-length and plausibility rules.

    Args:
        totals: Totals from a parse
        pool_length: Pool length in metres (25 or 50 in practice)

    Returns:
        ValidationResult; errors mean the totals are very likely wrong,
        warnings mean they deserve a second look

    Raises:
        ValueError: If pool_length is not positive
    """
    if pool_length <= 0:
        raise ValueError(f"Pool length must be positive, got {pool_length}")

    result = ValidationResult()
    total = totals.total_distance

    if total == 0:
        result.add_error("total_distance", "Total distance is 0m - no session data parsed")
        return result

    remainder = total % pool_length
    if remainder:
        if ROUNDING_TOLERANCE < remainder < pool_length - ROUNDING_TOLERANCE:
            result.add_error(
                "total_distance",
                f"Total distance {_format_metres(total)} is not a multiple of "
                f"{pool_length}m (pool length). This suggests parsing errors.",
            )
        else:
            result.add_warning(
                "total_distance",
                f"Total distance {_format_metres(total)} is not exactly a multiple of "
                f"{pool_length}m (remainder: {_format_metres(remainder)})",
            )

    if total > MAX_EXPECTED_DISTANCE:
        result.add_warning(
            "total_distance",
            f"Total distance {_format_metres(total)} seems unusually high. Please verify.",
        )

    for name in SessionTotals.model_fields:
        value = getattr(totals, name)
        if value != int(value):
            result.add_warning(name, f"Fractional distance {value:g}m from an uneven split")

    return result

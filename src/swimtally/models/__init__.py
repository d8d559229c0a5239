"""Pydantic models for session distance tallies."""

from swimtally.models.session import (
    Contribution,
    ParsedLine,
    ParseResult,
    SessionTotals,
)
from swimtally.models.stroke import IM_ORDER, STROKE_DISPLAY, Activity, Stroke

__all__ = [
    # Stroke
    "Activity",
    "IM_ORDER",
    "STROKE_DISPLAY",
    "Stroke",
    # Session
    "Contribution",
    "ParsedLine",
    "ParseResult",
    "SessionTotals",
]

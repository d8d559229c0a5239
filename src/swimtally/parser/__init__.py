"""Rule-based parser for coach-written session text."""

from swimtally.parser.breakdown import parse_breakdown
from swimtally.parser.detectors import (
    detect_activity,
    detect_stroke,
    find_strokes,
    normalize_text,
)
from swimtally.parser.distance import DistanceMatch, extract_distance
from swimtally.parser.options import ParserOptions
from swimtally.parser.outcome import LineOutcome
from swimtally.parser.patterns import SPECIAL_PATTERNS, LineContext, default_contribution
from swimtally.parser.repeat import resolve_repeat
from swimtally.parser.session_parser import parse_line, parse_session

__all__ = [
    # Entry point
    "parse_session",
    "parse_line",
    "ParserOptions",
    # Detectors
    "detect_activity",
    "detect_stroke",
    "find_strokes",
    "normalize_text",
    # Distance
    "DistanceMatch",
    "extract_distance",
    # Rules
    "LineContext",
    "LineOutcome",
    "SPECIAL_PATTERNS",
    "default_contribution",
    "parse_breakdown",
    "resolve_repeat",
]

"""Repetition count and distance extraction from a line of session text."""

import re

from pydantic import BaseModel, ConfigDict

from swimtally.parser.detectors import normalize_text
from swimtally.parser.vocabulary import DRILL_KEYWORDS

# "4 x 100", "4x100", "4 × 100", "4*100"
REPS_PATTERN = re.compile(r"(?<![\d.])(\d+)\s*[x×*]\s*(\d+)(?![\d:])")
# "400m", "400 m", "400 metres"
UNIT_DISTANCE_PATTERN = re.compile(r"(?<![\d.a-z])(\d+)\s*(?:m|mtrs?|metres?|meters?)(?![a-z0-9])")
# "400"
BARE_DISTANCE_PATTERN = re.compile(r"(?<![\d.a-z])(\d+)(?![\d.:])")

# Fragments that carry numbers but never a distance
NOISE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Rest intervals: "@1:30", "@ 1.45", "@+10 secs", "@ 45s"
    re.compile(r"@\s*\+?\s*\d+(?:[:.]\d{1,2})?\s*(?:secs?|seconds?|s|mins?|minutes?)?"),
    # Clock times: "1:30"
    re.compile(r"\d+:\d{2}"),
    # Rest phrases: "+10 secs", "15s rest", "30 sec rest"
    re.compile(r"\+\s*\d+\s*(?:secs?|seconds?|s)\b"),
    re.compile(r"\d+\s*(?:secs?|seconds?|s)\s+rest\b"),
    # Lane fragments: "lane 1-3", "lanes 4 & 5", "lanes 2, 3 and 4"
    re.compile(r"\blanes?\s*\d+(?:\s*(?:-|&|,|/|and|to)\s*\d+)*"),
)

# Drill names containing digits ("12/1/12", "6 kick drill")
NUMERIC_DRILL_KEYWORDS: tuple[str, ...] = tuple(
    keyword for keyword in DRILL_KEYWORDS if any(ch.isdigit() for ch in keyword)
)


class DistanceMatch(BaseModel):
    """Repetitions and per-repetition distance found on a line."""

    model_config = ConfigDict(frozen=True)

    reps: int = 1
    per_rep: int

    @property
    def total(self) -> int:
        return self.reps * self.per_rep


def strip_noise(text: str) -> str:
    """Remove rest intervals, times, lane fragments and numeric drill names."""
    cleaned = normalize_text(text)
    for keyword in NUMERIC_DRILL_KEYWORDS:
        cleaned = cleaned.replace(keyword, " ")
    for pattern in NOISE_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)
    return cleaned


def extract_distance(text: str) -> DistanceMatch | None:
    """Extract a distance from a line.

    Tries, in order:
    - "reps x distance" ("4 x 100m" -> 4 reps of 100)
    - a distance with an explicit metre unit ("warm up 400m")
    - the first bare number ("400 fc")

    Args:
        text: Line text (raw or normalized)

    Returns:
        DistanceMatch, or None if no non-zero distance is present. Many lines
        are headers or notes, so None is not an error.
    """
    cleaned = strip_noise(text)

    match = REPS_PATTERN.search(cleaned)
    if match:
        reps, per_rep = int(match.group(1)), int(match.group(2))
        if reps > 0 and per_rep > 0:
            return DistanceMatch(reps=reps, per_rep=per_rep)
        return None

    for pattern in (UNIT_DISTANCE_PATTERN, BARE_DISTANCE_PATTERN):
        match = pattern.search(cleaned)
        if match:
            distance = int(match.group(1))
            return DistanceMatch(reps=1, per_rep=distance) if distance > 0 else None

    return None


def first_distance(text: str) -> int | None:
    """First distance in a fragment of text, unit preferred ('25m kick' -> 25)."""
    cleaned = strip_noise(text)
    for pattern in (UNIT_DISTANCE_PATTERN, BARE_DISTANCE_PATTERN):
        match = pattern.search(cleaned)
        if match:
            return int(match.group(1))
    return None

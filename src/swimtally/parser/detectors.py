"""Stroke and activity detection over normalized line text."""

import re
from functools import lru_cache

from swimtally.models.stroke import Activity, Stroke
from swimtally.parser.vocabulary import ACTIVITY_ALIASES, DRILL_KEYWORDS, STROKE_ALIASES

WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case, trim and collapse whitespace."""
    return WHITESPACE_PATTERN.sub(" ", text.lower().strip())


def _boundary(char: str) -> str:
    # A keyword starting or ending in a digit must not run into other digits
    return "[a-z0-9]" if char.isdigit() else "[a-z]"


@lru_cache(maxsize=256)
def keyword_pattern(keyword: str, inflected: bool = False) -> re.Pattern[str]:
    """Compile a token-bounded pattern for a keyword.

    'fc' matches in '4fc' and 'fc/bk' but 'im' does not match inside 'swim'.
    With `inflected`, plural and -ing forms match too ('kicks', 'sculling').
    """
    suffix = "(?:s|es|ing)?" if inflected else ""
    return re.compile(
        rf"(?<!{_boundary(keyword[0])}){re.escape(keyword)}{suffix}(?!{_boundary(keyword[-1])})"
    )


def contains_keyword(text: str, keyword: str, inflected: bool = False) -> bool:
    return keyword_pattern(keyword, inflected).search(text) is not None


def detect_stroke(text: str) -> Stroke | None:
    """Return the highest-precedence stroke mentioned in the text, if any."""
    normalized = normalize_text(text)
    for alias, stroke in STROKE_ALIASES.items():
        if contains_keyword(normalized, alias):
            return stroke
    return None


def detect_activity(text: str) -> Activity | None:
    """Return the activity for the text, if any.

    Drill names are checked before the plain activity words, since a drill
    description often mentions 'kick' or 'swim' in passing.
    """
    normalized = normalize_text(text)
    for keyword in DRILL_KEYWORDS:
        if contains_keyword(normalized, keyword, inflected=True):
            return Activity.DRILL
    for alias, activity in ACTIVITY_ALIASES.items():
        if contains_keyword(normalized, alias, inflected=True):
            return activity
    return None


def find_strokes(text: str) -> list[Stroke]:
    """Every distinct stroke mentioned, in order of first appearance.

    Aliases claim their spans in precedence order, so the 'fc' inside
    'not fc' is not counted as a second stroke.
    """
    normalized = normalize_text(text)
    claimed: list[tuple[int, int]] = []
    first_seen: dict[Stroke, int] = {}

    for alias, stroke in STROKE_ALIASES.items():
        for match in keyword_pattern(alias).finditer(normalized):
            start, end = match.span()
            if any(start < c_end and c_start < end for c_start, c_end in claimed):
                continue
            claimed.append((start, end))
            if stroke not in first_seen or start < first_seen[stroke]:
                first_seen[stroke] = start

    return sorted(first_seen, key=first_seen.__getitem__)


def lookup_stroke(token: str) -> Stroke | None:
    """Exact alias lookup for a single token such as 'bk' or 'free'."""
    return STROKE_ALIASES.get(normalize_text(token))

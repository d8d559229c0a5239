"""Breakdown parsing: "4 x 100m FC as 25m Kick / 25m Drill / 25m Swim"."""

import re

from swimtally.models.session import Contribution
from swimtally.parser.detectors import detect_activity, detect_stroke, normalize_text
from swimtally.parser.distance import NUMERIC_DRILL_KEYWORDS, DistanceMatch, first_distance
from swimtally.parser.outcome import LineOutcome, join_warnings
from swimtally.parser.vocabulary import DEFAULTS

RULE = "breakdown"

AS_CLAUSE_PATTERN = re.compile(r"\bas\s+(.+)")
NESTED_REPS_PATTERN = re.compile(r"(?<![\d.])\d+\s*[x×*](?![a-z])")
PAREN_NOTE_PATTERN = re.compile(r"\([^()]*\)")

# Stands in for the slashes of drill names like "12/1/12" while splitting parts
_SLASH_GUARD = "\x00"


def _split_parts(clause: str) -> list[str]:
    for keyword in NUMERIC_DRILL_KEYWORDS:
        clause = clause.replace(keyword, keyword.replace("/", _SLASH_GUARD))
    parts = []
    for part in clause.split("/"):
        part = PAREN_NOTE_PATTERN.sub(" ", part.replace(_SLASH_GUARD, "/")).strip()
        if part:
            parts.append(part)
    return parts


def parse_breakdown(text: str, distance: DistanceMatch) -> LineOutcome | None:
    """Split a line's distance across the parts of its "as" clause.

    Each part supplies its own distance and activity; every part distance is
    multiplied by the line's repetition count. The stroke written before
    "as" applies to all parts, and so does its activity where a part names
    none.

    Args:
        text: Line text
        distance: Distance extracted from the whole line

    Returns:
        None if the line has no "as a / b" clause. An unsupported outcome
        (no contributions) if any part lacks a distance or carries its own
        repeat count. Otherwise the contributions, one per part.
    """
    normalized = normalize_text(text)
    match = AS_CLAUSE_PATTERN.search(normalized)
    if not match or "/" not in match.group(1):
        return None

    clause = match.group(1)
    if NESTED_REPS_PATTERN.search(clause):
        return LineOutcome.unsupported(RULE, "Repeat count inside a breakdown is not supported")

    parts = _split_parts(clause)
    part_distances: list[int] = []
    for part in parts:
        part_distance = first_distance(part)
        if not part_distance:
            return LineOutcome.unsupported(
                RULE, "Breakdown without explicit per-part distances is not supported"
            )
        part_distances.append(part_distance)

    head = normalized[: match.start()]
    line_stroke = detect_stroke(head)
    line_activity = detect_activity(head)
    default_warning = None
    contributions = []
    for part, part_distance in zip(parts, part_distances):
        stroke = line_stroke or detect_stroke(part)
        if stroke is None:
            stroke = DEFAULTS["stroke"].value
            default_warning = DEFAULTS["stroke"].message
        activity = detect_activity(part) or line_activity or DEFAULTS["activity"].value
        contributions.append(
            Contribution(stroke=stroke, activity=activity, distance=part_distance * distance.reps)
        )

    mismatch_warning = None
    if sum(part_distances) != distance.per_rep:
        mismatch_warning = (
            f"Breakdown parts total {sum(part_distances)}m, "
            f"expected {distance.per_rep}m per repetition"
        )

    return LineOutcome(
        rule=RULE,
        contributions=tuple(contributions),
        warning=join_warnings(default_warning, mismatch_warning),
    )

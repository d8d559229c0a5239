"""Special-pattern rules tried after the breakdown parser, plus the default path.

`SPECIAL_PATTERNS` is the priority list: the orchestrator calls each rule in
order and the first one that returns an outcome wins. A rule returns None
when the line is not its shape.
"""

import re
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from swimtally.models.session import Contribution
from swimtally.models.stroke import IM_ORDER, Activity, Stroke
from swimtally.parser.detectors import detect_stroke, find_strokes, keyword_pattern, lookup_stroke
from swimtally.parser.distance import REPS_PATTERN, DistanceMatch, strip_noise
from swimtally.parser.options import ParserOptions
from swimtally.parser.outcome import LineOutcome
from swimtally.parser.vocabulary import DEFAULTS, STROKE_ALIASES


class LineContext(BaseModel):
    """Everything the rules know about a line."""

    model_config = ConfigDict(frozen=True)

    text: str  # Normalized
    distance: DistanceMatch
    stroke: Stroke | None = None
    activity: Activity | None = None
    options: ParserOptions = ParserOptions()

    @property
    def activity_or_default(self) -> Activity:
        return self.activity or DEFAULTS["activity"].value


Rule = Callable[[LineContext], LineOutcome | None]


def _even_split(
    rule: str, strokes: list[Stroke], activity: Activity, total: float
) -> LineOutcome:
    share = total / len(strokes)
    return LineOutcome(
        rule=rule,
        contributions=tuple(
            Contribution(stroke=stroke, activity=activity, distance=share) for stroke in strokes
        ),
    )


# =============================================================================
# Alternating strokes: "8 x 50m alt lengths fly/fc"
# =============================================================================

ALT_PATTERN = re.compile(r"\balt(?:ernate|ernating)?\b")
LENGTHS_PATTERN = re.compile(r"\blen(?:gth)?s?\b")


def alternating_strokes(ctx: LineContext) -> LineOutcome | None:
    """Split the distance evenly across every stroke on an "alt lengths" line."""
    if not (ALT_PATTERN.search(ctx.text) and LENGTHS_PATTERN.search(ctx.text)):
        return None

    strokes = find_strokes(ctx.text)
    if len(strokes) < 2:
        return None
    return _even_split("alternating", strokes, ctx.activity_or_default, ctx.distance.total)


# =============================================================================
# Individual Medley: "4 x 100 IM" or "400 IM per stroke"
# =============================================================================

PER_STROKE_PATTERN = re.compile(r"\bper[\s-]?stroke\b")


def individual_medley(ctx: LineContext) -> LineOutcome | None:
    """Keep IM as one contribution, or a quarter per stroke when asked."""
    if ctx.stroke != Stroke.IM:
        return None

    if PER_STROKE_PATTERN.search(ctx.text):
        return _even_split("im", list(IM_ORDER), ctx.activity_or_default, ctx.distance.total)

    return LineOutcome(
        rule="im",
        contributions=(
            Contribution(
                stroke=Stroke.IM, activity=ctx.activity_or_default, distance=ctx.distance.total
            ),
        ),
    )


# =============================================================================
# Halves: "4 x 50m 2 pull as 1 bk 1 fc"
# =============================================================================

HALVES_PATTERN = re.compile(r"(?<![\d.])(\d+)\s*(pull|kick|swim|drill)s?\s+as\s+(.+)")


def _stroke_counts(text: str, strokes: list[Stroke]) -> dict[Stroke, int]:
    counts: dict[Stroke, int] = {}
    for alias, stroke in STROKE_ALIASES.items():
        if stroke not in strokes:
            continue
        pattern = re.compile(rf"(?<![\d.])(\d+)\s*{keyword_pattern(alias).pattern}")
        for match in pattern.finditer(text):
            counts[stroke] = counts.get(stroke, 0) + int(match.group(1))
    return counts


def halves_split(ctx: LineContext) -> LineOutcome | None:
    """Split the distance across the strokes named after "<n> <activity> as".

    Weighted by the count written before each stroke when every stroke has
    one ("1 bk 3 fc"), otherwise even.
    """
    match = HALVES_PATTERN.search(ctx.text)
    if not match:
        return None

    activity = Activity(match.group(2))
    split_text = match.group(3)
    strokes = find_strokes(split_text)
    if len(strokes) < 2:
        return None

    counts = _stroke_counts(split_text, strokes)
    if not all(counts.get(stroke) for stroke in strokes):
        return _even_split("halves", strokes, activity, ctx.distance.total)

    weight = sum(counts.values())
    return LineOutcome(
        rule="halves",
        contributions=tuple(
            Contribution(
                stroke=stroke,
                activity=activity,
                distance=ctx.distance.total * counts[stroke] / weight,
            )
            for stroke in strokes
        ),
    )


# =============================================================================
# Rep-distributed: "8 x 50m 4 no1 4fc"
# =============================================================================

_CHOICE = r"(?:not ?fc|no\.?1|choice)"
_STROKE_WORD = (
    r"(?:fc|free(?:style)?|bk|bc|back(?:stroke)?|br(?:st)?|breast(?:stroke)?|fly|butterfly|im)"
)

REP_SPLIT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"(?<![\d.])(\d+)\s*({_CHOICE})\s+(\d+)\s*({_STROKE_WORD})(?![a-z])"),
    re.compile(rf"(?<![\d.])(\d+)\s*({_STROKE_WORD})\s+(\d+)\s*({_CHOICE})(?![a-z0-9])"),
)


def rep_split(ctx: LineContext) -> LineOutcome | None:
    """Give each of two stroke groups its rep count times the per-rep distance.

    Needs a "reps x distance" count to split. Group counts above that count
    are not rep counts ("4 x 100 as 50 fc 50 choice"), so the rule does not
    match; counts below it keep the line with a warning.
    """
    if ctx.distance.reps < 2:
        return None

    remainder = REPS_PATTERN.sub(" ", strip_noise(ctx.text), count=1)
    for pattern in REP_SPLIT_PATTERNS:
        match = pattern.search(remainder)
        if match:
            break
    else:
        return None

    first_reps, second_reps = int(match.group(1)), int(match.group(3))
    first_stroke = detect_stroke(match.group(2))
    second_stroke = detect_stroke(match.group(4))
    if first_stroke is None or second_stroke is None or first_stroke == second_stroke:
        return None

    if first_reps + second_reps > ctx.distance.reps:
        return None

    warning = None
    if first_reps + second_reps < ctx.distance.reps:
        warning = (
            f"Rep split {first_reps} + {second_reps} does not match "
            f"{ctx.distance.reps} repetitions"
        )

    activity = ctx.activity_or_default
    per_rep = ctx.distance.per_rep
    return LineOutcome(
        rule="rep_split",
        contributions=(
            Contribution(stroke=first_stroke, activity=activity, distance=first_reps * per_rep),
            Contribution(stroke=second_stroke, activity=activity, distance=second_reps * per_rep),
        ),
        warning=warning,
    )


# =============================================================================
# Slash-separated strokes: "4 x 100m FC/BK Swim" (opt-in)
# =============================================================================

SLASH_LIST_PATTERN = re.compile(r"(?<![a-z0-9.])([a-z][a-z0-9.]*(?:\s*/\s*[a-z][a-z0-9.]*)+)")


def slash_split(ctx: LineContext) -> LineOutcome | None:
    """Split evenly across strokes written as "fc/bk" without a breakdown."""
    if not ctx.options.split_slash_strokes:
        return None

    for match in SLASH_LIST_PATTERN.finditer(ctx.text):
        pieces = re.split(r"\s*/\s*", match.group(1))
        strokes = [lookup_stroke(piece) for piece in pieces]
        if None in strokes:
            continue
        distinct = list(dict.fromkeys(strokes))
        if len(distinct) >= 2:
            return _even_split("slash_split", distinct, ctx.activity_or_default, ctx.distance.total)
    return None


SPECIAL_PATTERNS: tuple[Rule, ...] = (
    alternating_strokes,
    individual_medley,
    halves_split,
    rep_split,
    slash_split,
)


def default_contribution(ctx: LineContext) -> LineOutcome:
    """One contribution at the detected stroke and activity.

    Missing values come from the DEFAULTS policy table; only the stroke
    default warns.
    """
    warning = None
    stroke = ctx.stroke
    if stroke is None:
        stroke = DEFAULTS["stroke"].value
        if DEFAULTS["stroke"].warn:
            warning = DEFAULTS["stroke"].message

    activity = ctx.activity
    if activity is None:
        activity = DEFAULTS["activity"].value
        if DEFAULTS["activity"].warn:
            warning = DEFAULTS["activity"].message

    return LineOutcome(
        rule="default",
        contributions=(
            Contribution(stroke=stroke, activity=activity, distance=ctx.distance.total),
        ),
        warning=warning,
    )

"""Keyword tables mapping coach shorthand to strokes and activities.

Dict order is match precedence: the detectors return the first entry found
in the text, so compound phrases sit ahead of the shorter tokens they
contain.
"""

from typing import NamedTuple

from swimtally.models.stroke import Activity, Stroke

# Stroke name aliases, in precedence order
STROKE_ALIASES: dict[str, Stroke] = {
    # Swimmer's choice ("not fc" must win over "fc")
    "not fc": Stroke.SWIMMERS_CHOICE,
    "notfc": Stroke.SWIMMERS_CHOICE,
    "no.1": Stroke.SWIMMERS_CHOICE,
    "no1": Stroke.SWIMMERS_CHOICE,
    "choice": Stroke.SWIMMERS_CHOICE,
    # Individual Medley
    "individual medley": Stroke.IM,
    "medley": Stroke.IM,
    "im": Stroke.IM,
    # Front Crawl
    "fc": Stroke.FRONT_CRAWL,
    "free": Stroke.FRONT_CRAWL,
    "freestyle": Stroke.FRONT_CRAWL,
    "frontcrawl": Stroke.FRONT_CRAWL,
    "front crawl": Stroke.FRONT_CRAWL,
    # Backstroke
    "bk": Stroke.BACKSTROKE,
    "bc": Stroke.BACKSTROKE,
    "back": Stroke.BACKSTROKE,
    "backstroke": Stroke.BACKSTROKE,
    # Breaststroke
    "br": Stroke.BREASTSTROKE,
    "brst": Stroke.BREASTSTROKE,
    "breast": Stroke.BREASTSTROKE,
    "breaststroke": Stroke.BREASTSTROKE,
    # Butterfly
    "fly": Stroke.BUTTERFLY,
    "butterfly": Stroke.BUTTERFLY,
}

# Activity keywords, in precedence order
ACTIVITY_ALIASES: dict[str, Activity] = {
    "swim": Activity.SWIM,
    "swimming": Activity.SWIM,
    "drill": Activity.DRILL,
    "kick": Activity.KICK,
    "pull": Activity.PULL,
}

# Drill names; any of these makes the line a drill regardless of other words
DRILL_KEYWORDS: tuple[str, ...] = (
    "streamline",
    "catch switch",
    "catch up",
    "catch-up",
    "doggy paddle",
    "12/1/12",
    "scull",
    "fingertip drag",
    "6 kick drill",
    "zipper",
    "single arm",
    "single-arm",
    "fist",
)


class FieldDefault(NamedTuple):
    """Value used when a field is not found in a line, and whether to warn."""

    value: Stroke | Activity
    warn: bool
    message: str | None = None


# Stroke defaults loudly, activity silently. Keep the asymmetry.
DEFAULTS: dict[str, FieldDefault] = {
    "stroke": FieldDefault(
        value=Stroke.FRONT_CRAWL,
        warn=True,
        message="No stroke specified - defaulted to Front Crawl",
    ),
    "activity": FieldDefault(value=Activity.SWIM, warn=False),
}

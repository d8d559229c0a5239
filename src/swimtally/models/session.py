"""Parse result models: contributions, per-line outcomes and session totals."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, computed_field

from swimtally.models.stroke import Activity, Stroke


class Contribution(BaseModel):
    """One atomic amount of distance attributed while parsing a line.

    Distances are metres. Fractional values only appear from uneven
    division and are kept as-is; rounding is left to the caller.
    """

    model_config = ConfigDict(frozen=True)

    stroke: Stroke
    activity: Activity
    distance: float = Field(ge=0)


class ParsedLine(BaseModel):
    """Outcome of analysing one line of session text."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)
    original_text: str
    parsed: bool = False
    contributions: tuple[Contribution, ...] = ()
    warning: str | None = None
    error: str | None = None  # Line analysis never sets this

    # Audit trail
    rule: str | None = None  # Which rule produced the contributions
    reason: str | None = None  # Why the line was not parsed

    @property
    def distance(self) -> float:
        """Total distance contributed by this line."""
        return sum(c.distance for c in self.contributions)

    @property
    def is_blank(self) -> bool:
        return not self.original_text.strip()


def _total_alias(field_name: str) -> str:
    """Map 'front_crawl_swim' -> 'totalFrontCrawlSwim', 'im_kick' -> 'totalIMKick'."""
    parts = ["IM" if part == "im" else part.capitalize() for part in field_name.split("_")]
    return "total" + "".join(parts)


class SessionTotals(BaseModel):
    """Distance per stroke and activity for a whole session.

    Always built from contributions via `from_contributions`; the fields are
    the exact field-wise sum of every contribution in the session.

    Dumping with `by_alias=True` gives the stored column names
    (e.g. 'totalFrontCrawlSwim', 'totalNo1Pull').
    """

    model_config = ConfigDict(frozen=True, alias_generator=_total_alias, populate_by_name=True)

    # Front Crawl
    front_crawl_swim: float = 0
    front_crawl_drill: float = 0
    front_crawl_kick: float = 0
    front_crawl_pull: float = 0
    # Backstroke
    backstroke_swim: float = 0
    backstroke_drill: float = 0
    backstroke_kick: float = 0
    backstroke_pull: float = 0
    # Breaststroke
    breaststroke_swim: float = 0
    breaststroke_drill: float = 0
    breaststroke_kick: float = 0
    breaststroke_pull: float = 0
    # Butterfly
    butterfly_swim: float = 0
    butterfly_drill: float = 0
    butterfly_kick: float = 0
    butterfly_pull: float = 0
    # Individual Medley
    im_swim: float = 0
    im_drill: float = 0
    im_kick: float = 0
    im_pull: float = 0
    # Swimmer's choice
    no1_swim: float = 0
    no1_drill: float = 0
    no1_kick: float = 0
    no1_pull: float = 0

    @staticmethod
    def field_for(stroke: Stroke, activity: Activity) -> str:
        """Field name holding the total for a stroke/activity pair."""
        return f"{stroke.value}_{activity.value}"

    @classmethod
    def from_contributions(cls, contributions: Iterable[Contribution]) -> "SessionTotals":
        """Sum contributions field by field."""
        sums: dict[str, float] = {}
        for contribution in contributions:
            key = cls.field_for(contribution.stroke, contribution.activity)
            sums[key] = sums.get(key, 0) + contribution.distance
        return cls(**sums)

    def get(self, stroke: Stroke, activity: Activity) -> float:
        return getattr(self, self.field_for(stroke, activity))

    @computed_field(alias="totalDistance")
    @property
    def total_distance(self) -> float:
        """Sum of every stroke/activity total."""
        return sum(self.get(stroke, activity) for stroke in Stroke for activity in Activity)

    def by_stroke(self) -> dict[Stroke, float]:
        return {
            stroke: sum(self.get(stroke, activity) for activity in Activity) for stroke in Stroke
        }

    def by_activity(self) -> dict[Activity, float]:
        return {
            activity: sum(self.get(stroke, activity) for stroke in Stroke) for activity in Activity
        }

    def nonzero(self) -> list[tuple[Stroke, Activity, float]]:
        """Stroke/activity cells with distance, in enum order."""
        return [
            (stroke, activity, self.get(stroke, activity))
            for stroke in Stroke
            for activity in Activity
            if self.get(stroke, activity)
        ]


class ParseResult(BaseModel):
    """Totals, per-line outcomes and counters for one parse of session text."""

    model_config = ConfigDict(frozen=True)

    totals: SessionTotals
    parsed_lines: tuple[ParsedLine, ...] = ()
    success_count: int = 0
    warning_count: int = 0
    error_count: int = 0

    @property
    def contributions(self) -> list[Contribution]:
        """Every contribution in line order."""
        return [c for line in self.parsed_lines for c in line.contributions]

    @property
    def unparsed_lines(self) -> list[ParsedLine]:
        """Non-blank lines that produced no distance."""
        return [line for line in self.parsed_lines if not line.parsed and not line.is_blank]

    @property
    def warnings(self) -> list[ParsedLine]:
        return [line for line in self.parsed_lines if line.warning]

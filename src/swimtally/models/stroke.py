"""Stroke and activity enums for training set classification."""

from enum import StrEnum


class Stroke(StrEnum):
    """Strokes tracked in a session tally."""

    FRONT_CRAWL = "front_crawl"
    BACKSTROKE = "backstroke"
    BREASTSTROKE = "breaststroke"
    BUTTERFLY = "butterfly"
    IM = "im"  # Individual Medley
    SWIMMERS_CHOICE = "no1"  # Swimmer's choice, written "No.1" on the board

    @property
    def display_name(self) -> str:
        """Name for display (e.g., 'Front Crawl')."""
        return STROKE_DISPLAY[self]


class Activity(StrEnum):
    """Mode of movement for a distance."""

    SWIM = "swim"
    DRILL = "drill"
    KICK = "kick"
    PULL = "pull"

    @property
    def display_name(self) -> str:
        return self.value.title()


STROKE_DISPLAY: dict[Stroke, str] = {
    Stroke.FRONT_CRAWL: "Front Crawl",
    Stroke.BACKSTROKE: "Backstroke",
    Stroke.BREASTSTROKE: "Breaststroke",
    Stroke.BUTTERFLY: "Butterfly",
    Stroke.IM: "IM",
    Stroke.SWIMMERS_CHOICE: "No.1",
}

# Order the four strokes are swum in a medley
IM_ORDER: tuple[Stroke, ...] = (
    Stroke.BUTTERFLY,
    Stroke.BACKSTROKE,
    Stroke.BREASTSTROKE,
    Stroke.FRONT_CRAWL,
)

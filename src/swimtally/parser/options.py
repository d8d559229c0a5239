"""Per-call parser options."""

from pydantic import BaseModel, ConfigDict, Field


class ParserOptions(BaseModel):
    """Behaviour switches for a single parse.

    The parser never reads settings itself; callers build these, usually via
    `Settings.parser_options()`. The defaults give the standard parse.
    """

    model_config = ConfigDict(frozen=True)

    # Split "4 x 100m FC/BK" evenly across the slash-separated strokes
    split_slash_strokes: bool = False
    # Most prior lines a "repeat" line replays
    repeat_max_lines: int = Field(default=2, ge=1)

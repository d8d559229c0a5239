"""Shared fixtures: a sample session and a LineContext builder."""

import pytest

from swimtally.parser import (
    LineContext,
    ParserOptions,
    detect_activity,
    detect_stroke,
    extract_distance,
    normalize_text,
)

SAMPLE_SESSION = """\
Warm up
400m FC Swim
4 x 50m BK Kick @1:00

Main set
4 x 100m FC as 25m Kick / 25m Drill / 25m Pull / 25m Swim
8 x 50m 4 no1 4fc
----
200 IM
4 x 50 swim
Repeat
"""


@pytest.fixture
def sample_session() -> str:
    """A short session touching most rules."""
    return SAMPLE_SESSION


@pytest.fixture
def make_context():
    """Build the LineContext the orchestrator would build for a line."""

    def _make(text: str, options: ParserOptions | None = None) -> LineContext:
        normalized = normalize_text(text)
        distance = extract_distance(normalized)
        assert distance is not None, f"no distance in {text!r}"
        return LineContext(
            text=normalized,
            distance=distance,
            stroke=detect_stroke(normalized),
            activity=detect_activity(normalized),
            options=options or ParserOptions(),
        )

    return _make

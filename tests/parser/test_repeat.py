"""Tests for "Repeat" line resolution."""

from swimtally.models import Activity, Contribution, ParsedLine, Stroke
from swimtally.parser.repeat import is_repeat, is_separator, resolve_repeat


def _line(number: int, text: str, *contributions: Contribution) -> ParsedLine:
    return ParsedLine(
        line_number=number,
        original_text=text,
        parsed=bool(contributions),
        contributions=contributions,
    )


FC_400 = Contribution(stroke=Stroke.FRONT_CRAWL, activity=Activity.SWIM, distance=400)
BK_200 = Contribution(stroke=Stroke.BACKSTROKE, activity=Activity.KICK, distance=200)
IM_200 = Contribution(stroke=Stroke.IM, activity=Activity.SWIM, distance=200)


class TestDetection:
    """Tests for repeat and separator detection."""

    def test_is_repeat(self):
        """'repeat' anywhere on the line."""
        assert is_repeat("repeat")
        assert is_repeat("repeat x2")
        assert not is_repeat("4 x 100 fc")

    def test_is_separator(self):
        """Rows of dashes, underscores or equals signs."""
        assert is_separator("----")
        assert is_separator(" ==== ")
        assert is_separator("__")
        assert not is_separator("- 200 fc")


class TestResolveRepeat:
    """Tests for resolve_repeat."""

    def test_replays_last_two_lines(self):
        """The two most recent parsed lines are replayed in order."""
        previous = [
            _line(1, "400 fc", FC_400),
            _line(2, "4 x 50 bk kick", BK_200),
            _line(3, "200 im", IM_200),
        ]
        outcome = resolve_repeat(previous)
        assert outcome.parsed
        assert outcome.rule == "repeat"
        assert outcome.contributions == (BK_200, IM_200)
        assert outcome.warning == "Repeated 2 previous line(s)"

    def test_max_lines(self):
        """The window size is configurable."""
        previous = [_line(1, "400 fc", FC_400), _line(2, "200 im", IM_200)]
        outcome = resolve_repeat(previous, max_lines=1)
        assert outcome.contributions == (IM_200,)
        assert outcome.warning == "Repeated 1 previous line(s)"

    def test_stops_at_blank_line(self):
        """A blank line ends the set being repeated."""
        previous = [_line(1, "400 fc", FC_400), _line(2, ""), _line(3, "200 im", IM_200)]
        outcome = resolve_repeat(previous)
        assert outcome.contributions == (IM_200,)

    def test_stops_at_separator(self):
        """A separator line ends the set being repeated."""
        previous = [_line(1, "400 fc", FC_400), _line(2, "----"), _line(3, "200 im", IM_200)]
        outcome = resolve_repeat(previous)
        assert outcome.contributions == (IM_200,)

    def test_passes_over_headers(self):
        """Unparsed notes inside the set are skipped, not counted."""
        previous = [
            _line(1, "400 fc", FC_400),
            _line(2, "Main set"),
            _line(3, "200 im", IM_200),
        ]
        outcome = resolve_repeat(previous)
        assert outcome.contributions == (FC_400, IM_200)

    def test_nothing_to_repeat(self):
        """No earlier parsed lines gives an unsupported outcome."""
        outcome = resolve_repeat([])
        assert not outcome.parsed
        assert outcome.reason == "Nothing to repeat"

    def test_only_blank_before(self):
        """Blank line directly above: nothing to repeat."""
        outcome = resolve_repeat([_line(1, "400 fc", FC_400), _line(2, "")])
        assert not outcome.parsed

    def test_previous_not_modified(self):
        """The earlier lines are read, never changed."""
        previous = [_line(1, "400 fc", FC_400)]
        snapshot = list(previous)
        resolve_repeat(previous)
        assert previous == snapshot

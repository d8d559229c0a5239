"""Tests for distance extraction."""

import pytest

from swimtally.parser.distance import DistanceMatch, extract_distance, first_distance, strip_noise


class TestExtractDistance:
    """Tests for extract_distance."""

    def test_reps_times_distance(self):
        """Parse '4 x 100m' -> 4 reps of 100."""
        match = extract_distance("4 x 100m FC Swim")
        assert match == DistanceMatch(reps=4, per_rep=100)
        assert match.total == 400

    @pytest.mark.parametrize("text", ["4x100 fc", "4 X 100 fc", "4 × 100 fc", "4*100 fc"])
    def test_reps_separators(self, text):
        """Different ways of writing the repeat."""
        assert extract_distance(text) == DistanceMatch(reps=4, per_rep=100)

    def test_bare_distance(self):
        """A bare distance is one repetition."""
        assert extract_distance("400m warm up") == DistanceMatch(reps=1, per_rep=400)
        assert extract_distance("Warm up 400 FC") == DistanceMatch(reps=1, per_rep=400)

    def test_unit_distance_preferred(self):
        """A distance with a unit beats an earlier bare count."""
        assert extract_distance("4 no1 4fc 50m") == DistanceMatch(reps=1, per_rep=50)

    def test_no_distance(self):
        """Headers and notes have no distance."""
        assert extract_distance("Main set") is None
        assert extract_distance("Equipment: fins, paddles") is None

    def test_zero_distance(self):
        """Zero is not a distance."""
        assert extract_distance("0 x 100 fc") is None
        assert extract_distance("0m") is None


class TestNoiseIgnored:
    """Rest intervals, times and lane fragments are never distances."""

    def test_rest_interval_clock(self):
        """Parse '8 x 50 fc @1:00' -> 8 x 50."""
        assert extract_distance("8 x 50 fc @1:00") == DistanceMatch(reps=8, per_rep=50)

    def test_rest_interval_before_distance(self):
        """A leading interval does not become the distance."""
        assert extract_distance("@1:30 fc 300") == DistanceMatch(reps=1, per_rep=300)

    def test_rest_seconds(self):
        """'@+10 secs' is rest."""
        assert extract_distance("200 fc @+10 secs") == DistanceMatch(reps=1, per_rep=200)

    def test_lane_fragment(self):
        """'Lanes 1-3' is not a distance."""
        assert extract_distance("Lanes 1-3: 400 fc") == DistanceMatch(reps=1, per_rep=400)

    def test_numeric_drill_name(self):
        """'12/1/12' is a drill name, not a distance."""
        assert extract_distance("12/1/12 drill 200m") == DistanceMatch(reps=1, per_rep=200)

    def test_strip_noise(self):
        """Noise fragments are removed from the scan text."""
        cleaned = strip_noise("4 x 50 FC @ 1:00 lane 4")
        assert "1:00" not in cleaned
        assert "lane" not in cleaned
        assert "4 x 50 fc" in cleaned


class TestFirstDistance:
    """Tests for first_distance on breakdown parts."""

    def test_part_with_unit(self):
        """Parse '25m kick' -> 25."""
        assert first_distance("25m kick") == 25

    def test_part_without_distance(self):
        """A part without a number has no distance."""
        assert first_distance("kick") is None

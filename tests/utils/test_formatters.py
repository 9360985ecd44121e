"""Tests for playlist output formatting."""

from playlist_replay.utils.formatters import format_playlist


class TestFormatPlaylist:
    """Test the bracketed, double-quoted output format."""

    def test_empty(self):
        assert format_playlist([]) == "[]"

    def test_single(self):
        assert format_playlist(["A"]) == '["A"]'

    def test_multiple_separated_by_comma_space(self):
        assert format_playlist(["A", "C"]) == '["A", "C"]'

    def test_duplicates_and_empty_names(self):
        assert format_playlist(["A", "", "A"]) == '["A", "", "A"]'

    def test_accepts_tuples(self):
        assert format_playlist(("X", "Y")) == '["X", "Y"]'

    def test_names_written_verbatim(self):
        assert format_playlist(["Don't Stop"]) == '["Don\'t Stop"]'

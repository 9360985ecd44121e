"""Tests for input line parsing."""

import pytest

from playlist_replay.core.exceptions import InputFormatError
from playlist_replay.domain.playlist import process
from playlist_replay.utils.parsers import extract_quoted, parse_action_list


class TestExtractQuoted:
    """Test quote stripping for a single list element."""

    def test_strips_surrounding_quotes_and_space(self):
        assert extract_quoted(' "undo()"') == "undo()"

    def test_keeps_single_quotes_inside(self):
        assert extract_quoted('"addSong(\'A\')"') == "addSong('A')"

    def test_uses_first_and_last_quote(self):
        assert extract_quoted('"a"b"') == 'a"b'

    def test_no_quotes_returns_piece_unchanged(self):
        assert extract_quoted("  undo() ") == "  undo() "

    def test_single_quote_char_returns_piece_unchanged(self):
        assert extract_quoted(' "undo()') == ' "undo()'


class TestParseActionList:
    """Test parsing of the full bracketed input line."""

    def test_typical_line(self):
        line = '["addSong(\'A\')", "addSong(\'B\')", "undo()"]\n'
        assert parse_action_list(line) == ["addSong('A')", "addSong('B')", "undo()"]

    def test_no_spaces(self):
        line = '["addSong(\'A\')","undo()"]'
        assert parse_action_list(line) == ["addSong('A')", "undo()"]

    def test_empty_list(self):
        assert parse_action_list("[]") == []

    def test_empty_list_with_whitespace(self):
        assert parse_action_list("  [  ]\n") == []

    def test_empty_name(self):
        assert parse_action_list('["addSong(\'\')"]') == ["addSong('')"]

    def test_unquoted_element_kept_raw(self):
        assert parse_action_list('["undo()", undo()]') == ["undo()", " undo()"]

    def test_unquoted_element_is_not_recognized(self):
        """Whitespace kept on an unquoted element makes it an unknown action."""
        actions = parse_action_list('["addSong(\'A\')", undo()]')
        assert process(actions) == ["A"]

    @pytest.mark.parametrize("line", ["", "\n", "addSong('A')", '["undo()"', '"undo()"]', "["])
    def test_missing_brackets_raise(self, line):
        with pytest.raises(InputFormatError) as exc_info:
            parse_action_list(line)
        assert exc_info.value.line == line

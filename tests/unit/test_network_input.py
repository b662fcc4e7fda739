"""
Unit tests for network description parsing.
"""

import pytest

from friendrec.network_input import parse_network, parse_tokens, NetworkInputError


SAMPLE_INPUT = """6
2
7
1 2
1 3
2 4
3 4
3 5
4 5
4 6
"""


class TestParseNetwork:
    """Tests for parse_network."""

    @pytest.mark.unit
    def test_parse(self):
        description = parse_network(SAMPLE_INPUT)

        assert description.user_count == 6
        assert description.max_distance == 2
        assert description.connections[0] == (1, 2)
        assert len(description.connections) == 7
        assert list(description.user_ids) == [0, 1, 2, 3, 4, 5]

    @pytest.mark.unit
    def test_line_breaks_ignored(self):
        """Test tokens may be laid out on any lines."""
        assert parse_network("2 1 1 0 1") == parse_network("2\n1\n1\n0\n1\n")

    @pytest.mark.unit
    def test_no_connections(self):
        description = parse_network("3 2 0")

        assert description.connections == []

    @pytest.mark.unit
    def test_trailing_tokens_ignored(self):
        description = parse_network("2 1 1 0 1 9 9")

        assert description.connections == [(0, 1)]

    @pytest.mark.unit
    def test_parse_tokens(self):
        description = parse_tokens(["1", "3", "1", "0", "0"])

        assert description.max_distance == 3
        assert description.connections == [(0, 0)]

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "3", "3 2", "3 2 2 0 1", "3 2 1 0"])
    def test_missing_tokens(self, text):
        with pytest.raises(NetworkInputError, match="Unexpected end of input"):
            parse_network(text)

    @pytest.mark.unit
    def test_non_integer(self):
        with pytest.raises(NetworkInputError, match="Expected integer") as excinfo:
            parse_network("3 two 0")

        assert "two" in str(excinfo.value)
        assert excinfo.value.__suppress_context__ is True

    @pytest.mark.unit
    def test_negative_count(self):
        with pytest.raises(NetworkInputError, match=">= 0"):
            parse_network("-1 2 0")

    @pytest.mark.unit
    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_network("x")

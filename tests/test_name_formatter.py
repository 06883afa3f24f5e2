"""Test the NameFormatter state machine."""
import io

import pytest
from patterns.state.name_formatter import NameFormatter, NameFormatterState, InvalidNameError


class TestNameFormatterState:
    """Tests for the two formatting states."""

    @pytest.mark.parametrize("first,last", [
        ("John", "Doe"),
        ("A", "B"),
        ("Émile", "Zola"),
        ("mary jane", "O'Neil"),
    ])
    def test_first_initial_and_last(self, first, last):
        state = NameFormatterState.FIRST_INITIAL_AND_LAST
        assert state.format_name(first, "X", last) == first[0] + ", " + last

    @pytest.mark.parametrize("first,last", [
        ("John", "Doe"),
        ("", "Doe"),
        ("John", ""),
    ])
    def test_first_and_last(self, first, last):
        state = NameFormatterState.FIRST_AND_LAST
        assert state.format_name(first, "X", last) == first + ", " + last

    def test_middle_is_ignored(self):
        for state in NameFormatterState:
            assert state.format_name("John", "M", "Doe") == state.format_name("John", "Quincy", "Doe")

    def test_initial_of_empty_first_raises(self):
        with pytest.raises(InvalidNameError):
            NameFormatterState.FIRST_INITIAL_AND_LAST.format_name("", "M", "Doe")

    def test_invalid_name_is_value_error(self):
        assert issubclass(InvalidNameError, ValueError)



class TestNameFormatter:
    """Tests for the NameFormatter context."""

    def test_initial_state(self, formatter):
        assert formatter.state is NameFormatterState.FIRST_INITIAL_AND_LAST
        assert formatter.toggle is True

    def test_name_parts(self, formatter):
        assert (formatter.first, formatter.middle, formatter.last) == ("John", "M", "Doe")

    def test_name_parts_are_read_only(self, formatter):
        with pytest.raises(AttributeError):
            formatter.first = "Jane"

    def test_switch_state_alternates(self, formatter):
        assert formatter.switch_state() is NameFormatterState.FIRST_AND_LAST
        assert formatter.toggle is False
        assert formatter.switch_state() is NameFormatterState.FIRST_INITIAL_AND_LAST
        assert formatter.toggle is True

    def test_two_switches_return_to_start(self, formatter):
        for _ in range(10):
            before = formatter.state
            formatter.switch_state()
            assert formatter.state is not before
            formatter.switch_state()
            assert formatter.state is before

    def test_scenario(self, formatter, capsys):
        """Print, switch, print, switch, print."""
        assert formatter.print_name() == "J, Doe"
        formatter.switch_state()
        assert formatter.print_name() == "John, Doe"
        formatter.switch_state()
        assert formatter.print_name() == "J, Doe"

        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["J, Doe", "John, Doe", "J, Doe"]

    def test_print_name_does_not_change_state(self, formatter, capsys):
        formatter.print_name()
        formatter.print_name()
        assert formatter.state is NameFormatterState.FIRST_INITIAL_AND_LAST
        assert formatter.toggle is True

    def test_format_has_no_output(self, formatter, capsys):
        assert formatter.format() == "J, Doe"
        assert capsys.readouterr().out == ""

    def test_custom_output_stream(self):
        out = io.StringIO()
        nf = NameFormatter("Ada", "K", "Lovelace", out=out)
        nf.print_name()
        nf.switch_state()
        nf.print_name()
        assert out.getvalue() == "A, Lovelace\nAda, Lovelace\n"

    def test_empty_first_rejected(self):
        with pytest.raises(InvalidNameError):
            NameFormatter("", "M", "Doe")

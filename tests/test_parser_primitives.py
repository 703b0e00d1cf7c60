"""Tests for primitive matchers.

Covers rune, run-of-runes, literal and until matchers, including their
default error messages and their behaviour on multi-byte and invalid UTF-8.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from seekparse import parse_text
from seekparse.diagnostics import DiagnosticCode, ErrorTemplate, ParseError
from seekparse.syntax.cursor import Cursor
from seekparse.syntax.parser.combinators import sequence_of
from seekparse.syntax.parser.primitives import (
    any_rune,
    digit,
    letter,
    letters,
    literal,
    literal_insensitive,
    match_rune,
    match_runes,
    rune_n,
    space,
    until,
    until_string,
)

# ============================================================================
# SINGLE RUNE
# ============================================================================


class TestMatchRune:
    """Test match_rune and its named variants."""

    def test_matches_ascii(self) -> None:
        """A matching rune is the result; offset advances by 1."""
        cursor = parse_text(match_rune(lambda r: r == "a"), "abc")

        assert not cursor.is_failure
        assert cursor.result == "a"
        assert cursor.offset == 1

    def test_advances_by_byte_length(self) -> None:
        """Multi-byte runes advance by their UTF-8 width."""
        cursor = parse_text(any_rune(), "€uro")

        assert cursor.result == "€"
        assert cursor.offset == 3

    def test_rejects_rune(self) -> None:
        """A rejected rune fails without advancing."""
        cursor = parse_text(match_rune(str.isupper), "abc")

        assert cursor.is_failure
        assert cursor.offset == 0
        assert cursor.error == ErrorTemplate.rune_mismatch(0)

    def test_fails_at_end_of_stream(self) -> None:
        """No rune left is a failure."""
        cursor = parse_text(any_rune(), "")

        assert cursor.is_failure
        assert cursor.error is not None
        assert cursor.error.code is DiagnosticCode.RUNE_MISMATCH

    def test_custom_error_message(self) -> None:
        """A str error is anchored at the failing offset."""
        cursor = parse_text(match_rune(str.isdigit, "need a digit"), "x")

        assert cursor.error == ParseError("need a digit", 0)

    def test_custom_error_record(self) -> None:
        """A ParseError keeps its message and is moved to the failing offset."""
        error = ParseError("custom", 42, expected=("digit",))

        cursor = parse_text(match_rune(str.isdigit, error), "x")

        assert cursor.error == ParseError("custom", 0, expected=("digit",))

    def test_custom_error_record_position_in_sequence(self) -> None:
        """A reused ParseError reports where the matcher failed, not where it was built."""
        digit_error = ParseError("need a digit", 0)
        parser = sequence_of(literal("ab"), match_runes(str.isdigit, digit_error))

        cursor = parse_text(parser, "abx")

        assert cursor.error == ParseError("need a digit", 2)
        assert cursor.describe_error() == "1:3: need a digit"

    def test_what_names_default_message(self) -> None:
        """The what= label appears in the default message."""
        cursor = parse_text(match_rune(str.isdigit, what="hex digit"), "x")

        assert cursor.error is not None
        assert cursor.error.message == "unable to match hex digit"

    def test_invalid_utf8_reads_replacement(self) -> None:
        """An invalid byte is U+FFFD with width 1."""
        cursor = parse_text(any_rune(), b"\xffabc")

        assert cursor.result == "\ufffd"
        assert cursor.offset == 1

    def test_parser_name_is_what(self) -> None:
        """The parser is displayed under its label."""
        assert repr(digit()) == "<Parser digit>"


class TestNamedRunes:
    """Test digit, letter, letters and space."""

    def test_digit(self) -> None:
        """digit matches decimal digits."""
        assert parse_text(digit(), "7x").result == "7"
        assert parse_text(digit(), "x7").is_failure

    def test_digit_accepts_unicode_decimals(self) -> None:
        """Arabic-Indic digits are decimal digits."""
        assert parse_text(digit(), "٣").result == "٣"

    def test_digit_rejects_superscript(self) -> None:
        """Superscripts are not decimal digits."""
        assert parse_text(digit(), "²").is_failure

    def test_letter(self) -> None:
        """letter matches Unicode letters."""
        assert parse_text(letter(), "ä1").result == "ä"
        assert parse_text(letter(), "1ä").is_failure

    def test_letters(self) -> None:
        """letters returns the whole run as a str."""
        cursor = parse_text(letters(), "héllo world")

        assert cursor.result == "héllo"
        assert cursor.offset == len("héllo".encode())

    def test_space(self) -> None:
        """space matches one whitespace rune, newline included."""
        assert parse_text(space(), " x").result == " "
        assert parse_text(space(), "\nx").result == "\n"
        assert parse_text(space(), "x").is_failure


class TestMatchRunes:
    """Test greedy one-or-more matching."""

    def test_greedy(self) -> None:
        """Matches as many runes as satisfy the predicate."""
        cursor = parse_text(match_runes(str.isdigit), "12345abc")

        assert cursor.result == "12345"
        assert cursor.offset == 5

    def test_runs_to_end_of_stream(self) -> None:
        """Stops cleanly at end of stream."""
        cursor = parse_text(match_runes(str.isalpha), "abc")

        assert cursor.result == "abc"
        assert cursor.offset == 3

    def test_zero_matches_fails(self) -> None:
        """Zero matches is a failure at the entry offset."""
        cursor = parse_text(match_runes(str.isdigit), "abc")

        assert cursor.is_failure
        assert cursor.offset == 0
        assert cursor.error == ErrorTemplate.runes_mismatch(0)

    def test_custom_error(self) -> None:
        """A str error replaces the default."""
        cursor = parse_text(match_runes(str.isdigit, "number expected"), "abc")

        assert cursor.error == ParseError("number expected", 0)

    def test_stops_before_truncated_rune(self) -> None:
        """A rune cut off by end of stream ends the run."""
        cursor = parse_text(match_runes(lambda _: True), b"ab\xe2\x82")

        assert cursor.result == "ab"
        assert cursor.offset == 2


class TestRuneN:
    """Test fixed-count rune matching."""

    def test_matches_n_runes(self) -> None:
        """Result is the n runes as a str."""
        cursor = parse_text(rune_n(3), "aé€b")

        assert cursor.result == "aé€"
        assert cursor.offset == 6

    def test_too_few_runes(self) -> None:
        """Fewer than n runes is a failure."""
        cursor = parse_text(rune_n(5), "abc")

        assert cursor.error == ErrorTemplate.rune_count_mismatch(5, 0)

    def test_zero(self) -> None:
        """rune_n(0) matches the empty string."""
        cursor = parse_text(rune_n(0), "abc")

        assert cursor.result == ""
        assert cursor.offset == 0

    def test_negative_raises(self) -> None:
        """Negative counts are rejected at construction."""
        with pytest.raises(ValueError, match="must be >= 0"):
            rune_n(-1)


# ============================================================================
# LITERALS
# ============================================================================


class TestLiteral:
    """Test exact literal matching."""

    def test_matches(self) -> None:
        """Result is the literal; offset advances by its byte length."""
        cursor = parse_text(literal("select"), "select *")

        assert cursor.result == "select"
        assert cursor.offset == 6

    def test_multibyte_literal(self) -> None:
        """Offsets count bytes."""
        cursor = parse_text(literal("né"), "née")

        assert cursor.offset == 3

    def test_mismatch(self) -> None:
        """Mismatch fails at the entry offset."""
        cursor = parse_text(literal("from"), "select")

        assert cursor.is_failure
        assert cursor.offset == 0
        assert cursor.error == ErrorTemplate.literal_mismatch("from", 0)

    def test_partial_input(self) -> None:
        """A prefix of the literal at end of stream does not match."""
        assert parse_text(literal("select"), "sel").is_failure

    def test_case_sensitive(self) -> None:
        """literal compares bytes exactly."""
        assert parse_text(literal("select"), "SELECT").is_failure

    def test_empty_raises(self) -> None:
        """Empty literals are rejected at construction."""
        with pytest.raises(ValueError, match="must not be empty"):
            literal("")


class TestLiteralInsensitive:
    """Test case-insensitive literal matching."""

    def test_matches_any_case(self) -> None:
        """Result is the literal as given, not the input."""
        cursor = parse_text(literal_insensitive("select"), "SELECT ")

        assert cursor.result == "select"
        assert cursor.offset == 6

    def test_mixed_case(self) -> None:
        """Mixed case input matches."""
        assert parse_text(literal_insensitive("FROM"), "fRoM").result == "FROM"

    def test_non_ascii_case(self) -> None:
        """Case folding covers non-ASCII letters of equal width."""
        assert parse_text(literal_insensitive("ÄBC"), "äbc").result == "ÄBC"

    def test_mismatch(self) -> None:
        """Different text fails."""
        cursor = parse_text(literal_insensitive("select"), "delete")

        assert cursor.error == ErrorTemplate.literal_mismatch("select", 0)

    def test_short_input(self) -> None:
        """Input shorter than the literal fails."""
        assert parse_text(literal_insensitive("select"), "SEL").is_failure

    def test_invalid_utf8_window(self) -> None:
        """A window that is not valid UTF-8 never matches."""
        assert parse_text(literal_insensitive("ab"), b"\xff\xfe").is_failure

    def test_different_width_case_variant(self) -> None:
        """A case variant with a different byte length does not fit."""
        # KELVIN SIGN (3 bytes) folds to "k" (1 byte)
        assert parse_text(literal_insensitive("k"), "\u212a").is_failure


# ============================================================================
# UNTIL
# ============================================================================


class TestUntil:
    """Test until and until_string."""

    def test_stops_before_marker(self) -> None:
        """Result is the body results; cursor sits before the stop marker."""
        cursor = parse_text(until(literal(";"))(any_rune()), "ab;")

        assert cursor.result == ("a", "b")
        assert cursor.offset == 2

    def test_marker_first(self) -> None:
        """Immediate stop yields an empty tuple."""
        cursor = parse_text(until(literal(";"))(any_rune()), ";rest")

        assert cursor.result == ()
        assert cursor.offset == 0

    def test_marker_then_explicit_match(self) -> None:
        """The stop marker is left for a trailing match."""
        parser = sequence_of(until(literal("*/"))(any_rune()), literal("*/"))

        cursor = parse_text(parser, "a*b*/c")

        assert cursor.result == (("a", "*", "b"), "*/")
        assert cursor.offset == 5

    def test_body_failure_reports_stop_error(self) -> None:
        """When the body fails, the last stop check's error is reported."""
        cursor = parse_text(until(literal(";"))(digit()), "12x;")

        assert cursor.is_failure
        assert cursor.error == ErrorTemplate.literal_mismatch(";", 2)

    def test_end_of_stream_without_marker(self) -> None:
        """Running out of input before the marker fails."""
        cursor = parse_text(until(literal(";"))(any_rune()), "abc")

        assert cursor.is_failure
        assert cursor.error == ErrorTemplate.literal_mismatch(";", 3)

    def test_until_string(self) -> None:
        """until_string joins rune results into a str."""
        cursor = parse_text(until_string(literal('"'), any_rune()), 'héllo"')

        assert cursor.result == "héllo"
        assert cursor.offset == len("héllo".encode())

    def test_until_string_empty(self) -> None:
        """until_string with an immediate marker is an empty str."""
        assert parse_text(until_string(literal('"'), any_rune()), '"').result == ""


# ============================================================================
# PURITY
# ============================================================================


class TestPrimitivePurity:
    """Primitive matchers never mutate their input cursor."""

    @pytest.mark.parametrize(
        "make_parser",
        [any_rune, digit, letter, letters, space, lambda: literal("x"), lambda: rune_n(2)],
    )
    def test_input_cursor_unchanged(
        self, make_parser: Callable[[], object], start: Callable[[str | bytes], Cursor]
    ) -> None:
        """The cursor passed in is the same value after the call."""
        cursor = start("ab 12")
        snapshot = (cursor.offset, cursor.result, cursor.error)

        make_parser()(cursor)  # type: ignore[operator]

        assert (cursor.offset, cursor.result, cursor.error) == snapshot

    def test_failed_cursor_passes_through(self, start: Callable[[str | bytes], Cursor]) -> None:
        """A failed cursor is returned unchanged by any parser."""
        failed = start("abc").with_error("earlier failure")

        assert any_rune()(failed) is failed
        assert literal("a")(failed) is failed

"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import DiagnosticCode, ParseError


class ErrorTemplate:
    """Centralized error message templates.

    Every default failure produced by the engine is created here, so tests
    can compare against the template rather than a copied string.
    """

    @staticmethod
    def rune_mismatch(offset: int, what: str = "rune") -> ParseError:
        """A single-rune matcher rejected the rune at offset."""
        return ParseError(
            f"unable to match {what}", offset, code=DiagnosticCode.RUNE_MISMATCH
        )

    @staticmethod
    def runes_mismatch(offset: int, what: str = "runes") -> ParseError:
        """A one-or-more rune matcher matched nothing."""
        return ParseError(
            f"failed to match any {what}", offset, code=DiagnosticCode.RUNES_MISMATCH
        )

    @staticmethod
    def literal_mismatch(text: str, offset: int) -> ParseError:
        """Literal text not found at offset."""
        return ParseError(
            f"unable to match {text!r}",
            offset,
            expected=(text,),
            code=DiagnosticCode.LITERAL_MISMATCH,
        )

    @staticmethod
    def rune_count_mismatch(count: int, offset: int) -> ParseError:
        """Fewer than count runes remain."""
        return ParseError(
            f"unable to match {count} runes",
            offset,
            code=DiagnosticCode.RUNE_COUNT_MISMATCH,
        )

    @staticmethod
    def no_choice_matched(offset: int) -> ParseError:
        """Every alternative of a choice failed.

        Individual alternative errors are not aggregated.
        """
        return ParseError(
            "did not match any choice", offset, code=DiagnosticCode.NO_CHOICE_MATCHED
        )

    @staticmethod
    def no_repetition(offset: int) -> ParseError:
        """A one-or-more repetition matched zero times."""
        return ParseError(
            "failed to match at least once", offset, code=DiagnosticCode.NO_REPETITION
        )

    @staticmethod
    def repetition_count(count: int, offset: int) -> ParseError:
        """A fixed-count repetition stopped short."""
        return ParseError(
            f"failed to match {count} times", offset, code=DiagnosticCode.REPETITION_COUNT
        )

    @staticmethod
    def would_not_match(offset: int) -> ParseError:
        """Lookahead failed."""
        return ParseError("would not match", offset, code=DiagnosticCode.WOULD_NOT_MATCH)

    @staticmethod
    def expected_start_of_input(offset: int) -> ParseError:
        return ParseError(
            "expected start of input",
            offset,
            code=DiagnosticCode.EXPECTED_START_OF_INPUT,
        )

    @staticmethod
    def expected_end_of_input(offset: int) -> ParseError:
        return ParseError(
            "expected end of input", offset, code=DiagnosticCode.EXPECTED_END_OF_INPUT
        )

    @staticmethod
    def expected_start_of_line(offset: int) -> ParseError:
        return ParseError(
            "expected start of line", offset, code=DiagnosticCode.EXPECTED_START_OF_LINE
        )

    @staticmethod
    def source_unavailable(path: str, reason: str) -> str:
        """Message for a file that could not be opened."""
        return f"unable to open {path}: {reason}"

    @staticmethod
    def source_too_large(size: int, limit: int) -> str:
        """Message for an input over the configured size limit."""
        return (
            f"Source size ({size:,} bytes) exceeds maximum ({limit:,} bytes). "
            "Configure max_source_size in ParseEngine constructor to increase limit."
        )

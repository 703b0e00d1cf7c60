"""Diagnostic codes and the parse error record.

Defines the codes attached to the engine's default failures and the
single error shape carried by failed cursors.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from enum import Enum

__all__ = ["DiagnosticCode", "ParseError"]


class DiagnosticCode(Enum):
    """Codes for the default messages produced by the engine.

    Grammar authors supply their own messages; these codes only identify
    the generic failures raised by the built-in matchers and combinators.

    Organized by category:
        1000-1999: Primitive matcher failures
        2000-2999: Combinator failures
        3000-3999: Zero-width assertion failures
        4000-4999: Source and entry-point failures
    """

    # Primitive matchers (1000-1999)
    RUNE_MISMATCH = 1001
    RUNES_MISMATCH = 1002
    LITERAL_MISMATCH = 1003
    RUNE_COUNT_MISMATCH = 1004

    # Combinators (2000-2999)
    NO_CHOICE_MATCHED = 2001
    NO_REPETITION = 2002
    REPETITION_COUNT = 2003
    WOULD_NOT_MATCH = 2004

    # Assertions (3000-3999)
    EXPECTED_START_OF_INPUT = 3001
    EXPECTED_END_OF_INPUT = 3002
    EXPECTED_START_OF_LINE = 3003

    # Sources (4000-4999)
    SOURCE_UNAVAILABLE = 4001


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with location.

    Design:
        - One shape for every failure: message plus byte offset
        - Offset is where the failing step stood, which may be ahead of the
          cursor that carries the error (sequences rewind to their entry)
        - Expected tokens tuple for richer messages (optional)
        - Code identifies engine-generated failures; None for grammar errors

    Example:
        >>> error = ParseError("Expected '}'", 7, expected=("}",))
        >>> str(error)
        "Expected '}'"
    """

    message: str
    offset: int
    expected: tuple[str, ...] = field(default_factory=tuple)
    code: DiagnosticCode | None = None

    def __str__(self) -> str:
        return self.message

    def format_error(self, line: int, column: int) -> str:
        """Format error with an already computed line:column.

        Example:
            >>> ParseError("Unexpected", 3, expected=("]", "}")).format_error(2, 2)
            "2:2: Unexpected (expected: ']', '}')"
        """
        error_msg = f"{line}:{column}: {self.message}"
        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"
        return error_msg

"""Result payload types shared by grammars.

The engine never inspects payloads; these are conveniences for grammar
authors who want labelled results with source provenance.
"""

from dataclasses import dataclass
from typing import Any

__all__ = ["Span", "Token"]


@dataclass(frozen=True, slots=True)
class Span:
    """Byte range [start, end) in the source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Token:
    """Labelled result produced by ``tagged``.

    Attributes:
        kind: Label chosen by the grammar (e.g. "SELECT", "WHITE-SPACE")
        value: Result of the wrapped parser
        span: Bytes the wrapped parser consumed
    """

    kind: str
    value: Any
    span: Span

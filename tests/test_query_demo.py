"""Tests for the tagged select-query grammar in examples/query_demo.py."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from seekparse import Span, Token, parse_text

DEMO_PATH = Path(__file__).resolve().parent.parent / "examples" / "query_demo.py"


@pytest.fixture(scope="module")
def demo() -> ModuleType:
    """Load the example script as a module without running main()."""
    module_spec = importlib.util.spec_from_file_location("query_demo", DEMO_PATH)
    assert module_spec is not None
    assert module_spec.loader is not None
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


class TestQueryDemo:
    """The demo grammar on its corpus and on bad input."""

    def test_corpus(self, demo: ModuleType) -> None:
        """The corpus parses into keyword, whitespace and words."""
        cursor = parse_text(demo.QUERY, demo.CORPUS)

        assert not cursor.is_failure
        keyword, whitespace, words = cursor.result
        assert keyword == Token("SELECT", "select", Span(0, 6))
        assert whitespace == Token("WHITE-SPACE", (" ",), Span(6, 7))
        assert words == ("this", "this is a quoted string", "from", "table")
        assert cursor.offset == len(demo.CORPUS.encode())

    def test_keyword_any_case(self, demo: ModuleType) -> None:
        """The keyword result is the canonical spelling."""
        cursor = parse_text(demo.QUERY, "SeLeCt name")

        assert cursor.result[0].value == "select"
        assert cursor.result[2] == ("name",)

    def test_missing_keyword(self, demo: ModuleType) -> None:
        """A query without SELECT gets the grammar's own message."""
        cursor = parse_text(demo.QUERY, "fetch name")

        assert cursor.is_failure
        assert cursor.error.message == "query must start with SELECT (line 1)"

    def test_trailing_garbage_position(self, demo: ModuleType) -> None:
        """Unparsed input is reported at its line and column."""
        cursor = parse_text(demo.QUERY, "select name\n  age, email from people")

        assert cursor.describe_error() == "2:6: expected end of input"

    def test_main_runs(self, demo: ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
        """The script's examples run end to end."""
        demo.main()

        output = capsys.readouterr().out
        assert "this is a quoted string" in output
        assert "2:6: expected end of input" in output

"""Tests for rich ledger rendering."""

import pytest
from rich.console import Console

from mockfn import fn
from mockfn.diagnostics import format_arguments, format_result, print_ledger, render_ledger
from mockfn.mock import INCOMPLETE, MockResult


def _console() -> Console:
    return Console(record=True, width=160, color_system=None)


class TestRenderLedger:
    def test_one_row_per_call(self, registry):
        mock = fn(registry=registry, name="fetch").mock_return_value(1)
        mock("a")
        mock("b", retry=True)

        table = render_ledger(mock)

        assert table.row_count == 2
        assert "fetch" in str(table.title)

    def test_printed_output(self, registry):
        def explode():
            raise ValueError("bad")

        mock = fn(registry=registry, name="loader").mock_implementation_once(explode)
        with pytest.raises(ValueError):
            mock()
        mock.mock_return_value(42)
        mock(1, key="v")

        console = _console()
        print_ledger(mock, console)
        output = console.export_text()

        assert "loader (2 calls)" in output
        assert "throw ValueError('bad')" in output
        assert "return 42" in output
        assert "1, key='v'" in output

    def test_constructed_caption(self, registry):
        mock = fn(registry=registry)
        mock.new()
        assert "1 instance(s)" in render_ledger(mock).caption

    def test_bound_mock_renders_underlying_mock(self, registry):
        mock = fn(registry=registry)
        bound = mock.bind("receiver")
        bound()
        table = render_ledger(bound)
        assert table.row_count == 1

    def test_uncalled_mock(self, registry):
        console = _console()
        print_ledger(fn(registry=registry, name="idle"), console)
        assert "idle was not called" in console.export_text()


class TestFormatting:
    def test_long_values_are_truncated(self):
        text = format_arguments(("x" * 200,), {})
        assert text.endswith("...")
        assert len(text) <= 60

    def test_incomplete_result(self):
        assert format_result(INCOMPLETE).plain == "incomplete"

    def test_return_result(self):
        assert format_result(MockResult.returned([1])).plain == "return [1]"

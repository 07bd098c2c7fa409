"""
Console rendering of a mock's ledger.

Values are shown with ``repr`` and truncated; nothing is serialized.
"""

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .mock.function import BoundMock, MockFunction
from .mock.ledger import MockResult, ResultType

MAX_VALUE_CHARS = 60

_RESULT_STYLES = {
    ResultType.RETURN: "green",
    ResultType.THROW: "red",
    ResultType.INCOMPLETE: "yellow",
}


def _short(value: Any, limit: int = MAX_VALUE_CHARS) -> str:
    text = repr(value)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def format_arguments(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    parts = [_short(a) for a in args]
    parts.extend(f"{k}={_short(v)}" for k, v in kwargs.items())
    return ", ".join(parts)


def format_result(result: MockResult) -> Text:
    style = _RESULT_STYLES[result.type]
    if result.type is ResultType.INCOMPLETE:
        return Text("incomplete", style=style)
    return Text(f"{result.type.value} {_short(result.value)}", style=style)


def render_ledger(mock: MockFunction | BoundMock) -> Table:
    """Build a table with one row per recorded invocation."""
    if isinstance(mock, BoundMock):
        mock = mock.__func__
    state = mock.mock

    table = Table(title=f"{mock.get_mock_name()} ({len(state)} calls)", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Order", justify="right", style="dim")
    table.add_column("Arguments", style="cyan")
    table.add_column("Receiver", style="magenta")
    table.add_column("Result")

    for index, (call, result) in enumerate(zip(state.calls, state.results)):
        receiver = state.contexts[index]
        table.add_row(
            str(index),
            str(state.invocation_call_order[index]),
            format_arguments(call.args, call.kwargs),
            "" if receiver is None else _short(receiver),
            format_result(result),
        )

    if state.instances:
        table.caption = f"{len(state.instances)} instance(s) constructed"
    return table


def print_ledger(mock: MockFunction | BoundMock, console: Console | None = None) -> None:
    """Print the ledger table for ``mock``."""
    console = console or Console()
    if not len(mock.mock):
        console.print(f"[yellow]{mock.get_mock_name()} was not called[/yellow]")
        return
    console.print(render_ledger(mock))

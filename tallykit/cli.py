"""Command-line interface for the tallykit package.

Provides convenient access to the core functionality via `typer` commands.
"""
from __future__ import annotations

from typing import Any, Callable, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .core import accumulate as accumulate_module
from .core import callbacks as callbacks_module
from .core import report as report_module
from .core.errors import InvalidInput
from .core.numeric import Number, parse_number

__all__ = ["app"]

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="tallykit – add numbers up and hand the totals to callbacks.",
    add_completion=False,
)


def _json_option() -> Any:
    return typer.Option(
        False,
        "--json/--no-json",
        envvar="TALLYKIT_JSON",
        help="Emit a JSON record instead of a one-line summary",
    )


def _parse_all(tokens: List[str]) -> List[Number]:
    return [parse_number(tok) for tok in tokens]


def _run(title: str, as_json: bool, operation: Callable[[], None]) -> None:
    """Print the banner, run *operation*, and map ``InvalidInput`` to exit code 1."""
    if not as_json:
        console.rule(f"[bold blue]{title}")
    try:
        operation()
    except InvalidInput as exc:
        err_console.print(f"[red]Invalid input: {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc


def _emit(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command("sum")
def sum_cmd(
    numbers: Optional[List[str]] = typer.Argument(None, help="Numbers to add up (none gives 0)"),
    as_json: bool = _json_option(),
) -> None:
    """Add up any number of operands."""

    def operation() -> None:
        operands = _parse_all(numbers or [])
        total = accumulate_module.sum_numbers(operands)
        _emit(report_module.render(report_module.to_payload("sum", operands, total), as_json))

    _run("Sum", as_json, operation)


@app.command()
def add(
    a: str = typer.Argument(..., help="First operand"),
    b: str = typer.Argument(..., help="Second operand"),
    as_json: bool = _json_option(),
) -> None:
    """Add two operands."""

    def operation() -> None:
        operands = _parse_all([a, b])
        total = accumulate_module.add(*operands)
        _emit(report_module.render(report_module.to_payload("add", operands, total), as_json))

    _run("Add", as_json, operation)


@app.command()
def sub(
    a: str = typer.Argument(..., help="Minuend"),
    b: str = typer.Argument(..., help="Subtrahend"),
    as_json: bool = _json_option(),
) -> None:
    """Subtract the second operand from the first (use `--` before negative numbers)."""

    def operation() -> None:
        operands = _parse_all([a, b])
        diff = accumulate_module.subtract(*operands)
        _emit(report_module.render(report_module.to_payload("sub", operands, diff), as_json))

    _run("Subtract", as_json, operation)


@app.command()
def combine(
    a: str = typer.Argument(..., help="First operand"),
    b: str = typer.Argument(..., help="Second operand"),
    as_json: bool = _json_option(),
) -> None:
    """Add two operands, pass the sum to a callback, then read back the captured result."""

    def operation() -> None:
        operands = _parse_all([a, b])
        received: List[Number] = []

        def on_total(total: Number) -> None:
            received.append(total)
            if not as_json:
                console.print(f"[green]callback received {total}")

        captured = callbacks_module.combine_then_callback(operands[0], operands[1], on_total)
        payload = report_module.to_payload("combine", operands, captured.report())
        payload["callback_calls"] = len(received)
        _emit(report_module.render(payload, as_json))

    _run("Combine", as_json, operation)


def main() -> None:  # pragma: no cover
    """Entry-point for the `python -m tallykit` or `tallykit` command."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()

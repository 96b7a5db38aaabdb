"""Run command once and display result using the 4-stage pattern."""

from collections.abc import Callable
from typing import Any, TypeVar

import typer
from rich.markup import escape

from wikiverify.api.validate_output import validate_output

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
    suppress_output: bool = False,
) -> None:
    """Run command once and display result.

    Commands must handle expected failures internally and report them
    via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if not suppress_output:
        display.status(escape(result.announce))

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if not suppress_output:
            display.info(f"[dim]Progress: {escape(message)} ({progress_percent:.0%})[/dim]")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error
    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if not suppress_output:
        if result.success:
            display.success(escape(result.result))
        else:
            display.error(escape(result.result))
        for warning in result.output.get("warnings", []):
            display.warning(escape(warning))

    # Stage 4: Output
    if result_printer:
        result_printer(result.output)
    elif not suppress_output:
        display.json_output(result.output, format=display_format)

    raise typer.Exit(0 if result.success else 1)

#!/usr/bin/env python3
import argparse
import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()


def _resolve_tool(command: list[str]) -> list[str]:
    tool_path = Path(sys.executable).parent / command[0]
    if tool_path.exists():
        return [str(tool_path), *command[1:]]
    return command


def run_command(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]Running {description}...[/bold blue]")
    try:
        result = subprocess.run(_resolve_tool(command), check=False, capture_output=True, text=True)
    except OSError as e:
        console.print(f"[bold red]Error running {description}: {e}[/bold red]")
        sys.exit(1)
    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        console.print(result.stdout)
        console.print(result.stderr)
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Run formatting, lint, type and test checks")
    parser.add_argument("--fix", action="store_true", help="Auto-fix issues where possible")
    parser.add_argument("--no-tests", action="store_true", help="Skip the pytest run")
    args = parser.parse_args()

    if args.fix:
        steps = [
            (["ruff", "format", "."], "Ruff Formatting (Fix)"),
            (["ruff", "check", "--fix", "."], "Ruff Linting (Fix)"),
        ]
    else:
        steps = [
            (["ruff", "format", "--check", "."], "Ruff Formatting (Check)"),
            (["ruff", "check", "."], "Ruff Linting (Check)"),
        ]
    steps.append((["mypy", "wikiverify"], "Mypy Type Checking"))
    if not args.no_tests:
        steps.append((["pytest", "tests", "-n", "auto", "--timeout", "60"], "Pytest (unit and integration)"))

    # Run every step so one report lists all failures.
    results = [run_command(command, description) for command, description in steps]
    if not all(results):
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Command-line interface for doubleseq.

Replays operation scripts against a sequence and renders value lists.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from doubleseq.core.config.loader import configure_logging, load_app_config, load_script
from doubleseq.core.script import ScriptResult, ScriptStepError, run_script
from doubleseq.core.sequence import DoubleLinkedSeq

console = Console()
logger = logging.getLogger(__name__)


def _print_records(result: ScriptResult) -> None:
    table = Table(title="Steps")
    table.add_column("#", justify="right")
    table.add_column("Operation")
    table.add_column("Size", justify="right")
    table.add_column("Sequence")

    for record in result.records:
        table.add_row(str(record.index), record.op.value, str(record.size), escape(record.rendering))

    console.print(table)


def replay(args: argparse.Namespace) -> int:
    """Replay a script file and print each step.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    script_path = Path(args.script).resolve()
    if not script_path.exists():
        console.print(f"[red]ERROR: Script not found: {script_path}[/red]")
        return 1

    try:
        app_config = load_app_config(args.app_config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    configure_logging(app_config)
    debug_markers = args.debug_markers or app_config.display.debug_markers

    try:
        script = load_script(script_path)
    except (ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Invalid script: {escape(str(e))}[/red]")
        return 1

    logger.info(f"Replaying {len(script.steps)} steps from {script_path.name}")

    try:
        result = run_script(script, debug_markers=debug_markers)
    except ScriptStepError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    _print_records(result)
    final = result.sequence.to_debug_string() if debug_markers else str(result.sequence)
    console.print(f"[bold]Final:[/bold] {escape(final)} (size {result.sequence.size()})")
    return 0


def render(args: argparse.Namespace) -> int:
    """Print the display string of the given values."""
    seq = DoubleLinkedSeq.from_iterable(args.values)
    console.print(escape(seq.to_display_string()), highlight=False)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="doubleseq",
        description="doubleseq - linked float sequences with a current element",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    rep = sub.add_parser("replay", help="Replay an operation script (JSON or YAML)")
    rep.add_argument("script", help="Path to script file")
    rep.add_argument(
        "--app-config",
        default=None,
        help="Path to app config (default: doubleseq.yaml if present)",
    )
    rep.add_argument(
        "--debug-markers",
        action="store_true",
        help="Mark precursor (x) and tail {x} in renderings",
    )

    ren = sub.add_parser("render", help="Render a list of values")
    ren.add_argument("values", nargs="*", type=float, help="Values in order")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "replay":
        return replay(args)
    return render(args)


if __name__ == "__main__":
    raise SystemExit(main())

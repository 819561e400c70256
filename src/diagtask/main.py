import sys
import os
import argparse
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .parsing import DiagnosticLine, parse_diagnostic_line
from .utils.config import ConfigManager, TASK_TYPES, resolve_task_type
from .utils.log import setup_logging

# Theme colors
C_PATH = "#45d3ee"
C_KIND = "#fecd91"
C_MISSING = "#9FBFC5"

ParsedLine = Tuple[str, Optional[DiagnosticLine]]


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(description="diagtask: extract task requests from diagnostic lines")
    parser.add_argument("file", nargs="?", help="Log file to scan (reads stdin when omitted)")
    parser.add_argument("--task-type", choices=sorted(TASK_TYPES), help="Payload record type to decode")
    parser.add_argument("--only-tasks", action="store_true", help="Only show lines that carry a decoded task")
    parser.add_argument("--log-level", help="Logging level (DEBUG shows why a stage did not match)")
    return parser


def _cell(value) -> Text:
    if value is None:
        return Text("-", style=C_MISSING)
    return Text(str(value))


def build_table(results: List[ParsedLine], show_unmatched: bool = True, only_tasks: bool = False) -> Table:
    """Render one row per input line, leaving a dash for every stage that did not match."""
    table = Table(title="Diagnostic Tasks")
    for header in ("Path", "Line", "Col", "Kind", "Queue", "Summary"):
        table.add_column(header)

    for raw, parsed in results:
        if only_tasks and (parsed is None or parsed.task is None):
            continue

        if parsed is None:
            if show_unmatched:
                table.add_row(Text(raw, style=C_MISSING), *(_cell(None) for _ in range(5)))
            continue

        position = parsed.position
        classified = position.classified if position else None
        task = parsed.task
        table.add_row(
            Text(parsed.path, style=C_PATH),
            _cell(position.line if position else None),
            _cell(position.column if position else None),
            Text(classified.kind.value, style=C_KIND) if classified else _cell(None),
            _cell(task.task_queue() if task else None),
            _cell(task.task_summary() if task else None),
        )

    return table


def scan(text: str, task_type) -> List[ParsedLine]:
    return [(line, parse_diagnostic_line(line, task_type)) for line in text.splitlines()]


def run():
    parser = _build_parser()
    args = parser.parse_args()

    config = ConfigManager()
    setup_logging(args.log_level or config.get("log_level", "WARNING"))

    type_name = args.task_type or config.get("task_type", "warning")
    task_type = resolve_task_type(type_name)
    if task_type is None:
        print(f"Error: Unknown task type '{type_name}'. Use one of: {', '.join(sorted(TASK_TYPES))}")
        sys.exit(1)

    try:
        if args.file:
            abs_path = os.path.abspath(args.file)
            if not os.path.exists(abs_path):
                print(f"Error: File not found: {abs_path}")
                sys.exit(1)
            with open(abs_path, "r", errors="replace") as f:
                text = f.read()
        else:
            text = sys.stdin.read()
    except KeyboardInterrupt:
        return

    results = scan(text, task_type)
    console = Console()
    console.print(build_table(results, config.get("show_unmatched", True), args.only_tasks))

    found = sum(1 for _, parsed in results if parsed is not None and parsed.task is not None)
    console.print(f"{found} task(s) found in {len(results)} line(s)")


if __name__ == "__main__":
    run()

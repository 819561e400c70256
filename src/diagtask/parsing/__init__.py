from typing import List, Optional, Type

from .base import RegexParse
from .location import DiagnosticLine
from .message import (
    MESSAGE_VARIANTS,
    ClassifiedMessage,
    Classifier,
    MessageKind,
    WarningMessage,
    classify,
)
from .position import MAX_POSITION, PositionInfo
from .task import TaskMessage, WarningTask


def parse_diagnostic_line(text: str, task_type: Type[TaskMessage] = WarningTask) -> Optional[DiagnosticLine]:
    """
    Parse a single line such as
        path/to/file.log:123:456: warning: s#{"queue": "Q", "summary": "S"}#s
    Returns None only when the line has no path: prefix at all.
    """
    return DiagnosticLine.from_text(text, task_type)


def parse_diagnostics(text: str, task_type: Type[TaskMessage] = WarningTask) -> List[DiagnosticLine]:
    """
    Parses every line of a multi-line blob (e.g. compiler stderr).
    Lines without a path: prefix are skipped.
    """
    results = []
    for line in text.splitlines():
        parsed = parse_diagnostic_line(line, task_type)
        if parsed is not None:
            results.append(parsed)
    return results

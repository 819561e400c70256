import logging
import re
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar

from .base import RegexParse
from .message import ClassifiedMessage, Classifier
from .task import TaskMessage, WarningTask

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TaskMessage)

# Pattern: line:col:rest -- searched, not anchored, so tool prefixes are tolerated
RE_POSITION = re.compile(r"(\d+):(\d+):(.*)?")

# Largest value of an unsigned 64-bit word
MAX_POSITION = 2 ** 64 - 1


def _parse_position_int(digits: str) -> Optional[int]:
    # \d also matches non-ASCII digits, which are not valid positions
    if not digits.isascii():
        return None
    # int() refuses very long digit strings, so bound the length first
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_POSITION)):
        return None
    value = int(significant)
    if value > MAX_POSITION:
        return None
    return value


@dataclass(frozen=True)
class PositionInfo(RegexParse, Generic[T]):
    """Line/column pair plus whatever diagnostic message followed it."""
    line: int
    column: int
    classified: Optional[ClassifiedMessage] = None

    PATTERN = RE_POSITION

    @classmethod
    def from_text(cls, text: str, task_type: Type[T] = WarningTask) -> Optional["PositionInfo[T]"]:
        match = cls.search(text)
        if not match:
            logger.debug("No line:column: block in %r", text)
            return None

        line = _parse_position_int(match.group(1))
        column = _parse_position_int(match.group(2))
        if line is None or column is None:
            logger.debug("Position out of range in %r", match.group(0))
            return None

        return cls(
            line=line,
            column=column,
            classified=Classifier.from_text(match.group(3) or "", task_type),
        )

import logging
import re
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar

from .base import RegexParse
from .position import PositionInfo
from .task import TaskMessage, WarningTask

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TaskMessage)

# Pattern: path up to the first colon, then the rest of the line
RE_LOCATION = re.compile(r"^(.+?):(.*)?")


@dataclass(frozen=True)
class DiagnosticLine(RegexParse, Generic[T]):
    """
    One parsed diagnostic line.
    Example: path/to/file.log:123:456: warning: s#{"queue": "Q", "summary": "S"}#s

    The path is taken verbatim. Each nested field is None when its stage did
    not match, so callers can tell exactly how far the line was understood.
    """
    path: str
    position: Optional[PositionInfo[T]] = None

    PATTERN = RE_LOCATION

    @classmethod
    def from_text(cls, text: str, task_type: Type[T] = WarningTask) -> Optional["DiagnosticLine[T]"]:
        match = cls.search(text)
        if not match:
            logger.debug("No path: prefix in %r", text)
            return None

        return cls(
            path=match.group(1),
            position=PositionInfo.from_text(match.group(2) or "", task_type),
        )

    @property
    def task(self) -> Optional[T]:
        """The decoded task, if every stage matched."""
        if self.position is None or self.position.classified is None:
            return None
        return self.position.classified.task

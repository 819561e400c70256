"""
Diagnostic-class keyword ("warning", ...) and the task it carries.
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Optional, Type, TypeVar, Union

from .base import RegexParse
from .task import TaskMessage, WarningTask

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TaskMessage)

# Pattern: [whitespace]keyword:[space]rest
RE_MESSAGE = re.compile(r"\s*(.+?):\s?(.+)")


class MessageKind(str, Enum):
    WARNING = "warning"


@dataclass(frozen=True)
class WarningMessage(Generic[T]):
    task: T
    kind = MessageKind.WARNING


ClassifiedMessage = Union[WarningMessage]

# Keyword -> variant. Keywords are compared exactly, case-sensitively.
MESSAGE_VARIANTS: Dict[str, Type] = {
    MessageKind.WARNING.value: WarningMessage,
}


class Classifier(RegexParse):
    PATTERN = RE_MESSAGE

    @classmethod
    def from_text(cls, text: str, task_type: Type[T] = WarningTask) -> Optional[ClassifiedMessage]:
        """
        Recognise the keyword and decode the payload after it.
        Both must succeed; there is no "classified but no task" result.
        """
        match = cls.search(text)
        if not match:
            return None

        keyword, rest = match.group(1), match.group(2)
        variant = MESSAGE_VARIANTS.get(keyword)
        if variant is None:
            logger.debug("Unrecognised diagnostic class %r", keyword)
            return None

        task = task_type.from_text(rest)
        if task is None:
            return None
        return variant(task)


def classify(text: str, task_type: Type[T] = WarningTask) -> Optional[ClassifiedMessage]:
    return Classifier.from_text(text, task_type)

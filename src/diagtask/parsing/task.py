"""
Task payloads embedded in diagnostic lines.

A payload is a JSON object wrapped in s#...#s markers, e.g.
    s#{"queue": "TESTAPI", "summary": "Create a task"}#s
New task record types subclass TaskMessage and implement from_json() plus
the three accessors; nothing in the extraction stages has to change.
"""
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import RegexParse

logger = logging.getLogger(__name__)

# Shortest run between the first s# and the next #s
RE_TASK_BLOB = re.compile(r"s#(.+?)#s(.+)?")


def _reject_duplicate_keys(pairs):
    data = {}
    for key, value in pairs:
        if key in data:
            raise ValueError(f"Duplicate key {key!r}")
        data[key] = value
    return data


class TaskMessage(RegexParse):
    """Base for any record that can be decoded from a delimited JSON blob."""
    PATTERN = RE_TASK_BLOB

    @classmethod
    def from_text(cls, text: str) -> Optional["TaskMessage"]:
        match = cls.search(text)
        if not match:
            logger.debug("No s#...#s payload in %.80r", text)
            return None

        try:
            data = json.loads(match.group(1), object_pairs_hook=_reject_duplicate_keys)
        except (ValueError, RecursionError) as e:
            logger.debug("Payload is not valid JSON: %s", e)
            return None

        if not isinstance(data, dict):
            logger.debug("Payload is not a JSON object: %r", data)
            return None

        return cls.from_json(data)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Optional["TaskMessage"]:
        raise NotImplementedError(f"{cls.__name__} must implement from_json()")

    def task_summary(self) -> str:
        raise NotImplementedError

    def task_queue(self) -> str:
        raise NotImplementedError

    def warning_message_after_created(self) -> str:
        """Message to display once the task has been created."""
        raise NotImplementedError


@dataclass(frozen=True)
class WarningTask(TaskMessage):
    summary: str
    queue: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Optional["WarningTask"]:
        summary = data.get("summary")
        queue = data.get("queue")
        if not isinstance(summary, str) or not isinstance(queue, str):
            logger.debug("Payload is missing 'summary' or 'queue': %r", data)
            return None
        return cls(summary=summary, queue=queue)

    def task_summary(self) -> str:
        return self.summary

    def task_queue(self) -> str:
        return self.queue

    def warning_message_after_created(self) -> str:
        return ""

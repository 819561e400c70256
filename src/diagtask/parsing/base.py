"""
Shared regex-extraction base for every parsing stage.
Each stage matches its own slice of a diagnostic line and hands whatever it
did not consume to the next stage.
"""
import re
from typing import Optional


class RegexParse:
    """
    A type that can be built from a span of text by a single regex search.

    Subclasses set PATTERN and implement from_text(). Patterns are never
    anchored at the end: the trailing capture group is always the leftover
    text for the next stage.
    """
    PATTERN: re.Pattern = None

    @classmethod
    def search(cls, text: str) -> Optional[re.Match]:
        if cls.PATTERN is None or not text:
            return None
        return cls.PATTERN.search(text)

    @classmethod
    def from_text(cls, text: str):
        """Return a populated instance, or None when the text does not match."""
        raise NotImplementedError(f"{cls.__name__} must implement from_text()")

from __future__ import annotations

import re
from typing import Sequence

from .config_schema import FiltersConfig
from .errors import PatternError


def compile_pattern(pattern: str | None, *, name: str) -> re.Pattern[str] | None:
    if pattern is None or not pattern.strip():
        return None
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise PatternError(f"Invalid {name} pattern {pattern!r}: {e}") from e


class PostFilter:
    """
    Include/exclude gate over the text of a post.

    A post passes when the include pattern (if any) matches and the exclude
    pattern (if any) does not. Matching is case-insensitive and runs against the
    post's text fragments joined by newlines.
    """

    def __init__(self, include: str | None = None, exclude: str | None = None) -> None:
        self._include = compile_pattern(include, name="include")
        self._exclude = compile_pattern(exclude, name="exclude")

    @classmethod
    def from_config(cls, filters: FiltersConfig) -> "PostFilter":
        return cls(include=filters.include, exclude=filters.exclude)

    @property
    def is_noop(self) -> bool:
        return self._include is None and self._exclude is None

    def allows(self, fragments: Sequence[str]) -> bool:
        if self.is_noop:
            return True

        subject = "\n".join(fragments)
        if self._include is not None and self._include.search(subject) is None:
            return False
        if self._exclude is not None and self._exclude.search(subject) is not None:
            return False
        return True

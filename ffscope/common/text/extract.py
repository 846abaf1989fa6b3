# ffscope/common/text/extract.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ExtractionPattern:
    """A named regex together with the number of groups callers rely on."""
    name: str
    regex: re.Pattern[str]
    arity: int

    @classmethod
    def compile(cls, name: str, pattern: str, arity: int) -> "ExtractionPattern":
        return cls(name=name, regex=re.compile(pattern), arity=arity)


class NoMatch(LookupError):
    """Pattern did not match, or matched with fewer groups than expected."""

    def __init__(self, pattern: ExtractionPattern):
        super().__init__(f"no match for pattern {pattern.name!r}")
        self.pattern = pattern


def _groups(pattern: ExtractionPattern, m: re.Match[str] | None) -> Tuple[str, ...]:
    if m is None:
        raise NoMatch(pattern)
    groups = m.groups()
    if len(groups) < pattern.arity or any(g is None for g in groups[: pattern.arity]):
        raise NoMatch(pattern)
    return groups[: pattern.arity]


def first_match(pattern: ExtractionPattern, text: str) -> Tuple[str, ...]:
    """Groups of the first match in `text`."""
    return _groups(pattern, pattern.regex.search(text))


def last_match(pattern: ExtractionPattern, text: str) -> Tuple[str, ...]:
    """
    Groups of the last match in `text`.
    For progress lines that repeat; only the final one holds the total.
    """
    last = None
    for last in pattern.regex.finditer(text):
        pass
    return _groups(pattern, last)

"""Glob-style ignore patterns for recent-file tracking.

Supports ``*``, ``?`` and a leading ``/`` that anchors a pattern to the root.
Unanchored patterns are tried at several positions in the path; any hit wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

PATTERN_CACHE_MAX = 256

# A match has to stop where a path segment stops.
_SEGMENT_END = r"(?=/|$)"


def glob_to_regex(pattern: str) -> str:
    """Translate ``*`` and ``?`` to regex, escaping every other character."""
    out: list[str] = []
    for char in pattern:
        if char == "*":
            out.append(".*")
        elif char == "?":
            out.append(".")
        else:
            out.append(re.escape(char))
    return "".join(out)


@dataclass(frozen=True)
class CompiledPattern:
    """One ignore pattern reduced to the regexes that are tried against a path.

    ``literal`` is set instead of ``regexes`` when the translated pattern did
    not compile; matching then falls back to plain substring checks.
    """

    source: str
    anchored: bool
    regexes: tuple[re.Pattern[str], ...]
    literal: str | None = None

    def matches(self, path: str) -> bool:
        """Return whether ``path`` is hit by this pattern."""
        if self.anchored:
            path = path[1:] if path.startswith("/") else path
        if self.literal is not None:
            if self.anchored:
                return path.startswith(self.literal)
            return self.literal in path
        if self.anchored:
            return self.regexes[0].match(path) is not None
        return any(regex.search(path) is not None for regex in self.regexes)


@lru_cache(maxsize=PATTERN_CACHE_MAX)
def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile ``pattern`` once; results are cached by pattern text."""
    anchored = pattern.startswith("/")
    body = pattern[1:] if anchored else pattern
    translated = glob_to_regex(body)
    try:
        if anchored:
            regexes = (re.compile(translated + _SEGMENT_END),)
        else:
            regexes = (
                re.compile(translated + _SEGMENT_END),
                re.compile("/" + translated + _SEGMENT_END),
                re.compile("/" + translated + "/"),
            )
    except re.error:
        return CompiledPattern(source=pattern, anchored=anchored, regexes=(), literal=body)
    return CompiledPattern(source=pattern, anchored=anchored, regexes=regexes)


def clear_pattern_cache() -> None:
    """Drop all cached compiled patterns."""
    compile_pattern.cache_clear()


def matches_ignore_pattern(path: str, patterns: Iterable[str]) -> bool:
    """Return whether ``path`` matches any of ``patterns``.

    Empty pattern strings are skipped, so an empty or blank pattern set never
    ignores anything.
    """
    for pattern in patterns:
        if not pattern:
            continue
        if compile_pattern(pattern).matches(path):
            return True
    return False


def should_track(path: str, patterns: Iterable[str]) -> bool:
    """Return whether a visited ``path`` belongs in the recent-files list."""
    if not path:
        return False
    return not matches_ignore_pattern(path, patterns)

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Pattern, Tuple

log = logging.getLogger(__name__)

SEP = "/"


@dataclass(frozen=True)
class IgnorePatterns:
    """Ignore patterns loaded once per run.

    Semantics are single-level globs, not full ``.gitignore``:
    - ``*`` and ``?`` never match ``/``; ``**`` behaves like ``*``
    - ``!pattern`` is a literal glob, there is no negation
    - a leading or trailing ``/`` marks a pattern as directory-shaped
    """

    patterns: Tuple[str, ...] = ()

    @staticmethod
    def from_lines(lines: Iterable[str]) -> "IgnorePatterns":
        """Keep non-blank, non-comment lines, stripped of whitespace."""
        out = []
        for line in lines:
            line = line.strip()
            if line and not line.startswith("#"):
                out.append(line)
        return IgnorePatterns(tuple(out))

    def extended(self, extra: Iterable[str]) -> "IgnorePatterns":
        return IgnorePatterns(self.patterns + IgnorePatterns.from_lines(extra).patterns)

    def __iter__(self):
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)


def load_ignore_file(path: Path) -> IgnorePatterns:
    """Read an ignore file; any failure yields an empty pattern set."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("No usable ignore file at %s (%s); using built-in rules only.", path, e)
        return IgnorePatterns()
    patterns = IgnorePatterns.from_lines(text.splitlines())
    log.debug("Loaded %d ignore patterns from %s", len(patterns), path)
    return patterns


# ---- glob matching ----
@lru_cache(maxsize=1024)
def compile_glob(pattern: str) -> Optional[Pattern[str]]:
    """Translate a shell glob into an anchored regex.

    Returns None for malformed patterns (unterminated ``[`` class or trailing
    escape); such patterns never match.
    """
    out = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            while i < n and pattern[i] == "*":
                i += 1
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "\\":
            if i >= n:
                return None
            out.append(re.escape(pattern[i]))
            i += 1
        elif c == "[":
            cls, i = _translate_class(pattern, i)
            if cls is None:
                return None
            out.append(cls)
        else:
            out.append(re.escape(c))
    return re.compile("".join(out) + r"\Z")


def _translate_class(pattern: str, i: int) -> Tuple[Optional[str], int]:
    n = len(pattern)
    negate = False
    if i < n and pattern[i] in "!^":
        negate = True
        i += 1
    items = []
    first = True
    while i < n and (pattern[i] != "]" or first):
        first = False
        c = pattern[i]
        if c == "\\":
            i += 1
            if i >= n:
                return None, i
            c = pattern[i]
        lo = c
        i += 1
        if i + 1 < n and pattern[i] == "-" and pattern[i + 1] != "]":
            hi = pattern[i + 1]
            if hi == "\\":
                if i + 2 >= n:
                    return None, i
                hi = pattern[i + 2]
                i += 1
            i += 2
            if hi < lo:
                return None, i
            items.append(f"{re.escape(lo)}-{re.escape(hi)}")
        else:
            items.append(re.escape(lo))
    if i >= n:
        return None, i
    body = "".join(items)
    # Classes never match the separator.
    if negate:
        return f"[^/{body}]", i + 1
    return f"(?!/)[{body}]", i + 1


def glob_match(pattern: str, name: str) -> bool:
    """Shell-glob match where wildcards do not cross ``/``."""
    rx = compile_glob(pattern)
    if rx is None:
        log.debug("Ignoring malformed pattern %r", pattern)
        return False
    return rx.match(name) is not None

"""Include/exclude decisions for directories and files.

Everything here is pure: paths are POSIX-style strings relative to the
traversal root and no filesystem access happens.
"""

from __future__ import annotations

import enum
from typing import Iterable

from .patterns import SEP, glob_match
from .tables import (
    BINARY_OUTPUT_DIR,
    BUILTIN_SKIP_DIRS,
    GENERATED_FILE_NAMES,
    has_skip_extension,
)


class Decision(enum.Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


def is_root(rel_path: str) -> bool:
    return rel_path in ("", ".")


def base_name(rel_path: str) -> str:
    return rel_path.rstrip(SEP).rsplit(SEP, 1)[-1]


def _segments(rel_path: str) -> list[str]:
    return [s for s in rel_path.split(SEP) if s and s != "."]


def should_skip_dir(rel_path: str, patterns: Iterable[str]) -> bool:
    """Return True when the directory at ``rel_path`` must not be descended into.

    - ``/build``, ``build/``: separators stripped, matched against the relative path
    - ``build``: matched against the directory's base name
    - ``src/gen``: matched against the relative path
    Directory names in ``BUILTIN_SKIP_DIRS`` are excluded at any depth.
    """
    if any(seg in BUILTIN_SKIP_DIRS for seg in _segments(rel_path)):
        return True

    name = base_name(rel_path)
    for pattern in patterns:
        if pattern.startswith(SEP) or pattern.endswith(SEP):
            stripped = pattern.strip(SEP)
            if stripped and glob_match(stripped, rel_path):
                return True
        elif SEP in pattern:
            if glob_match(pattern, rel_path):
                return True
        elif glob_match(pattern, name):
            return True
    return False


def should_skip_file(rel_path: str, name: str, patterns: Iterable[str]) -> bool:
    """Return True when the file must not be emitted.

    Patterns ending with ``/`` only name directories and are ignored here.
    A leading ``/`` anchors the pattern to the root; any pattern containing
    ``/`` is matched against the relative path, others against ``name``.
    """
    segments = _segments(rel_path)
    if BINARY_OUTPUT_DIR in segments[:-1]:
        return True
    if name in GENERATED_FILE_NAMES:
        return True

    for pattern in patterns:
        if pattern.endswith(SEP):
            continue
        if pattern.startswith(SEP):
            if glob_match(pattern.lstrip(SEP), rel_path):
                return True
        elif SEP in pattern:
            if glob_match(pattern, rel_path):
                return True
        elif glob_match(pattern, name):
            return True
    return False


def classify(rel_path: str, is_dir: bool, patterns: Iterable[str]) -> Decision:
    """Combine the hidden-name, skip-extension, built-in and pattern rules.

    The traversal root (``""`` or ``"."``) is always included. A path below
    a directory that would itself be excluded is excluded too.
    """
    if is_root(rel_path):
        return Decision.INCLUDE

    patterns = tuple(patterns)
    segments = _segments(rel_path)
    for i in range(1, len(segments)):
        if segments[i - 1].startswith(".") or should_skip_dir(
            SEP.join(segments[:i]), patterns
        ):
            return Decision.EXCLUDE

    name = base_name(rel_path)
    if name.startswith("."):
        return Decision.EXCLUDE

    if is_dir:
        skip = should_skip_dir(rel_path, patterns)
    else:
        skip = has_skip_extension(name) or should_skip_file(rel_path, name, patterns)
    return Decision.EXCLUDE if skip else Decision.INCLUDE

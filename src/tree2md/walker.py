from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Collection, Iterable, Iterator, List, Literal, Optional, Tuple

from .classify import Decision, classify
from .errors import TraversalError

log = logging.getLogger(__name__)

ReadErrorPolicy = Literal["fail", "skip"]


@dataclass(frozen=True)
class SourceFile:
    rel_path: str  # POSIX-style, relative to the root
    path: Path


def _rel(parent_rel: str, name: str) -> str:
    return f"{parent_rel}/{name}" if parent_rel else name


def walk(
    root: Path,
    patterns: Iterable[str],
    *,
    exclude_paths: Collection[Path] = (),
) -> Iterator[SourceFile]:
    """Yield included files below ``root``, depth-first in lexical order.

    Entries of each directory are sorted by name; a subdirectory is descended
    at its position in that order. Excluded directories are never listed.
    """
    patterns = tuple(patterns)
    excluded = {os.path.normcase(os.path.abspath(p)) for p in exclude_paths}
    yield from _walk_dir(Path(root), "", patterns, excluded)


def _walk_dir(
    directory: Path, rel_dir: str, patterns: Tuple[str, ...], excluded: set
) -> Iterator[SourceFile]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise TraversalError(
            f"failed to list directory '{directory}': {e}", path=str(directory)
        ) from e

    for entry in entries:
        rel_path = _rel(rel_dir, entry.name)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_link_to_dir = not is_dir and entry.is_symlink() and entry.is_dir()
        except OSError as e:
            raise TraversalError(
                f"failed to stat '{entry.path}': {e}", path=entry.path
            ) from e

        if is_link_to_dir:
            log.debug("Not following directory symlink %s", rel_path)
            continue

        if classify(rel_path, is_dir, patterns) is Decision.EXCLUDE:
            log.debug("Excluded %s%s", rel_path, "/" if is_dir else "")
            continue

        if is_dir:
            yield from _walk_dir(Path(entry.path), rel_path, patterns, excluded)
        elif os.path.normcase(os.path.abspath(entry.path)) in excluded:
            log.debug("Skipping output file %s", rel_path)
        else:
            yield SourceFile(rel_path=rel_path, path=Path(entry.path))


def read_sources(
    files: Iterable[SourceFile],
    *,
    on_read_error: ReadErrorPolicy = "fail",
    skipped: Optional[List[str]] = None,
) -> Iterator[Tuple[SourceFile, bytes]]:
    """Read each file fully into memory.

    A read failure raises ``TraversalError`` unless ``on_read_error`` is
    ``"skip"``, in which case it is logged, appended to ``skipped`` and the
    file is passed over.
    """
    for src in files:
        try:
            content = src.path.read_bytes()
        except OSError as e:
            if on_read_error != "skip":
                raise TraversalError(
                    f"failed to read file '{src.path}': {e}", path=str(src.path)
                ) from e
            log.warning("Skipping unreadable file %s: %s", src.rel_path, e)
            if skipped is not None:
                skipped.append(src.rel_path)
            continue
        yield src, content

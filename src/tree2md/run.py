from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .emitter import MarkdownEmitter
from .errors import ConfigurationError, OutputOpenError, TraversalError
from .options import DumpOptions
from .patterns import IgnorePatterns, load_ignore_file
from .walker import read_sources, walk

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class DumpReport:
    """What a single run appended."""

    root: Path
    output: Path
    patterns: IgnorePatterns
    files: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files)


def load_patterns(root: Path, options: DumpOptions) -> IgnorePatterns:
    return load_ignore_file(root / options.ignore_file).extended(options.extra_patterns)


def dump(
    root: PathLike, output: PathLike, options: Optional[DumpOptions] = None
) -> DumpReport:
    """Append every included file below ``root`` to the Markdown ``output``.

    The output is opened once in append mode; earlier content is kept, so
    running twice over the same tree yields two full copies. A failure to
    list, read (unless ``on_read_error="skip"``) or write raises
    ``TraversalError``.
    """
    options = options or DumpOptions()
    root = Path(root)
    output = Path(output)
    if not root.is_dir():
        raise ConfigurationError(f"Directory '{root}' does not exist.")

    patterns = load_patterns(root, options)
    report = DumpReport(root=root, output=output, patterns=patterns)

    try:
        stream = output.open("ab")
    except OSError as e:
        raise OutputOpenError(f"Failed to open or create the output file: {e}") from e

    try:
        with stream:
            emitter = MarkdownEmitter(stream)
            files = walk(root, patterns, exclude_paths=(output,))
            for src, content in read_sources(
                files, on_read_error=options.on_read_error, skipped=report.skipped
            ):
                emitter.emit(src.rel_path, content)
                report.files.append(src.rel_path)
                log.info("Processed file: %s", src.path)
    except OSError as e:
        # Buffered data that could not be flushed on close.
        raise TraversalError(
            f"failed to write output file '{output}': {e}", path=str(output)
        ) from e

    return report

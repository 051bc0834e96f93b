from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Tuple

from .walker import ReadErrorPolicy

DEFAULT_IGNORE_FILE = ".gitignore"


@dataclass(frozen=True)
class DumpOptions:
    """Run configuration for :func:`tree2md.dump`."""

    ignore_file: str = DEFAULT_IGNORE_FILE  # looked up in the root
    extra_patterns: Tuple[str, ...] = ()  # appended to the ignore file's patterns
    on_read_error: ReadErrorPolicy = "fail"

    def __post_init__(self) -> None:
        if self.on_read_error not in ("fail", "skip"):
            raise ValueError(
                f"on_read_error must be 'fail' or 'skip', got {self.on_read_error!r}."
            )
        object.__setattr__(self, "extra_patterns", tuple(self.extra_patterns))

    def with_(self, **changes: Any) -> "DumpOptions":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

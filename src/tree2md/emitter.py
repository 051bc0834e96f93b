from __future__ import annotations

from typing import BinaryIO

from .classify import base_name
from .errors import TraversalError
from .tables import language_for

FENCE = "```"


def fence_for(rel_path: str) -> str:
    """Opening fence line for a file, e.g. ``"```python\\n"``."""
    return f"{FENCE}{language_for(base_name(rel_path))}\n"


class MarkdownEmitter:
    """Append (heading, fenced block) pairs to a binary stream.

    Content is written verbatim; nothing is escaped or re-encoded.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.count = 0

    def emit(self, rel_path: str, content: bytes) -> None:
        parts = (
            ("header", f"\n# {rel_path}\n".encode("utf-8")),
            ("opening fence", fence_for(rel_path).encode("utf-8")),
            ("content", content),
            ("closing fence", f"\n{FENCE}\n".encode("utf-8")),
        )
        for what, data in parts:
            try:
                self.stream.write(data)
            except OSError as e:
                raise TraversalError(
                    f"failed to write {what} for file '{rel_path}': {e}", path=rel_path
                ) from e
        # The block only counts once it has left the buffer.
        try:
            self.stream.flush()
        except OSError as e:
            raise TraversalError(
                f"failed to flush output for file '{rel_path}': {e}", path=rel_path
            ) from e
        self.count += 1

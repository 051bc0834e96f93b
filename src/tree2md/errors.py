"""Error taxonomy. Each class carries the process exit code the CLI uses."""

from __future__ import annotations

from typing import Optional


class Tree2mdError(Exception):
    exit_code = 1


class ConfigurationError(Tree2mdError):
    """Bad arguments or an unusable traversal root. Nothing is written."""

    exit_code = 2


class OutputOpenError(Tree2mdError):
    """The output document could not be created or opened for appending."""

    exit_code = 3


class TraversalError(Tree2mdError):
    """Listing, reading or writing failed mid-run; the run is aborted."""

    exit_code = 4

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class CloneError(Tree2mdError):
    exit_code = 5

"""Resolve the root argument to a local directory, cloning remote Git URLs."""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Tuple

from .errors import CloneError, ConfigurationError

log = logging.getLogger(__name__)

_SCHEME_URL = re.compile(r"^(?:https?|ssh|git|file)://[^/]*/.+")
_SCP_URL = re.compile(r"^[\w.-]+@[\w.-]+:.+")


def is_remote(target: str) -> bool:
    return bool(_SCHEME_URL.match(target) or _SCP_URL.match(target))


def split_branch(target: str) -> Tuple[str, Optional[str]]:
    """Split ``url@branch`` into ``(url, branch)``.

    The suffix only counts as a branch when the part before the last ``@``
    is itself a complete remote URL, so ``git@host:org/repo.git`` and
    ``https://user@host/repo`` are left alone.
    """
    url, sep, branch = target.rpartition("@")
    if sep and branch and ":" not in branch and is_remote(url):
        return url, branch
    return target, None


def _noop() -> None:
    return None


@dataclass
class ResolvedRoot:
    path: Path
    cleanup: Callable[[], None] = field(default=_noop)
    url: Optional[str] = None
    branch: Optional[str] = None

    def __enter__(self) -> "ResolvedRoot":
        return self

    def __exit__(self, *exc) -> None:
        self.cleanup()


def _remove_tree(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except OSError as e:
        log.warning("Could not remove temporary clone %s: %s", path, e)
    else:
        log.debug("Removed temporary clone %s", path)


def clone(url: str, branch: Optional[str] = None, *, git: str = "git") -> ResolvedRoot:
    """Shallow-clone ``url`` into a fresh temporary directory."""
    tmp = Path(tempfile.mkdtemp(prefix="tree2md-"))
    cmd: list = [git, "clone", "--depth", "1"]
    if branch:
        cmd += ["--branch", branch]
    cmd += [url, str(tmp)]

    log.info("Cloning %s%s", url, f" (branch {branch})" if branch else "")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        _remove_tree(tmp)
        raise CloneError(f"could not run {git!r}: {e}") from e
    if proc.returncode != 0:
        _remove_tree(tmp)
        raise CloneError(
            f"git clone of {url} failed (exit {proc.returncode}): {proc.stderr.strip()}"
        )
    return ResolvedRoot(path=tmp, cleanup=lambda: _remove_tree(tmp), url=url, branch=branch)


def resolve(target: str, *, git: str = "git") -> ResolvedRoot:
    """Turn the root argument into a local directory plus a cleanup hook."""
    url, branch = split_branch(target)
    if is_remote(url):
        return clone(url, branch, git=git)

    path = Path(target)
    if not path.exists():
        raise ConfigurationError(f"Directory '{target}' does not exist.")
    if not path.is_dir():
        raise ConfigurationError(f"'{target}' is not a directory.")
    return ResolvedRoot(path=path)

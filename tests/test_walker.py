import os

import pytest

from tree2md import walker
from tree2md.errors import TraversalError
from tree2md.walker import SourceFile, read_sources, walk


def _make_tree(root, files):
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)


def _rels(root, patterns=(), **kwargs):
    return [f.rel_path for f in walk(root, patterns, **kwargs)]


def test_walk_is_depth_first_lexical(tmp_path):
    _make_tree(
        tmp_path,
        {
            "b.py": b"",
            "a/z.py": b"",
            "a/b/c.py": b"",
            "a.txt": b"",
            "c/d.go": b"",
        },
    )
    # "a" < "a.txt" < "b.py" < "c"; directories are descended in place.
    assert _rels(tmp_path) == ["a/b/c.py", "a/z.py", "a.txt", "b.py", "c/d.go"]


def test_excluded_directory_subtree_contributes_nothing(tmp_path):
    _make_tree(
        tmp_path,
        {
            "keep.py": b"",
            "dist/app.py": b"",
            "dist/deep/nested/readme.md": b"",
        },
    )
    assert _rels(tmp_path, ["dist/"]) == ["keep.py"]


def test_excluded_directory_is_never_listed(tmp_path, monkeypatch):
    _make_tree(tmp_path, {"keep.py": b"", "node_modules/x/index.js": b""})
    listed = []
    real_scandir = os.scandir

    def spy(path):
        listed.append(os.path.basename(os.fspath(path)))
        return real_scandir(path)

    monkeypatch.setattr(walker.os, "scandir", spy)
    assert _rels(tmp_path) == ["keep.py"]
    assert "node_modules" not in listed


def test_hidden_entries_skipped_but_hidden_root_walked(tmp_path):
    root = tmp_path / ".project"
    _make_tree(
        root,
        {
            "main.py": b"",
            ".env": b"SECRET=1",
            ".git/HEAD": b"ref: refs/heads/main",
            "src/.cache/x.py": b"",
        },
    )
    assert _rels(root) == ["main.py"]


def test_exclude_paths_skips_output_file(tmp_path):
    _make_tree(tmp_path, {"a.py": b"", "out.md": b"old"})
    assert _rels(tmp_path, exclude_paths=[tmp_path / "out.md"]) == ["a.py"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_directory_symlinks_not_followed(tmp_path):
    _make_tree(tmp_path, {"real/a.py": b""})
    try:
        os.symlink(tmp_path / "real", tmp_path / "link", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")
    assert _rels(tmp_path) == ["real/a.py"]


def test_listing_failure_is_fatal(tmp_path, monkeypatch):
    _make_tree(tmp_path, {"a.py": b"", "sub/b.py": b""})
    real_scandir = os.scandir

    def failing(path):
        if os.path.basename(os.fspath(path)) == "sub":
            raise PermissionError("denied")
        return real_scandir(path)

    monkeypatch.setattr(walker.os, "scandir", failing)
    with pytest.raises(TraversalError, match="failed to list directory") as info:
        list(walk(tmp_path, ()))
    assert info.value.path.endswith("sub")


def test_read_sources_returns_bytes(tmp_path):
    _make_tree(tmp_path, {"a.py": b"print(1)", "b.py": b"\xffraw"})
    got = [(src.rel_path, content) for src, content in read_sources(walk(tmp_path, ()))]
    assert got == [("a.py", b"print(1)"), ("b.py", b"\xffraw")]


def test_read_failure_is_fatal(tmp_path):
    missing = SourceFile(rel_path="gone.py", path=tmp_path / "gone.py")
    with pytest.raises(TraversalError, match="failed to read file") as info:
        list(read_sources([missing]))
    assert info.value.path == str(tmp_path / "gone.py")


def test_read_failure_skipped_when_requested(tmp_path):
    (tmp_path / "ok.py").write_text("x = 1\n")
    files = [
        SourceFile(rel_path="gone.py", path=tmp_path / "gone.py"),
        SourceFile(rel_path="ok.py", path=tmp_path / "ok.py"),
    ]
    skipped = []
    got = list(read_sources(files, on_read_error="skip", skipped=skipped))
    assert [src.rel_path for src, _ in got] == ["ok.py"]
    assert skipped == ["gone.py"]

import os

import pytest

from tree2md import cli
from tree2md.errors import CloneError


def test_dump_and_exit_zero(tmp_path):
    (tmp_path / "repo").mkdir()
    (tmp_path / "repo" / "a.py").write_text("print(1)")
    out = tmp_path / "out.md"

    assert cli.main([str(tmp_path / "repo"), str(out)]) == 0
    assert out.read_text() == "\n# a.py\n```python\nprint(1)\n```\n"


@pytest.mark.parametrize("argv", [[], ["only-root"], ["a", "b", "c"]])
def test_wrong_argument_count_is_an_error(argv, capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(argv)
    assert info.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_missing_root_exit_code(tmp_path):
    out = tmp_path / "out.md"
    assert cli.main([str(tmp_path / "missing"), str(out)]) == 2
    assert not out.exists()


def test_output_open_error_exit_code(tmp_path):
    assert cli.main([str(tmp_path), str(tmp_path / "no" / "out.md")]) == 3


def test_clone_error_exit_code(tmp_path, monkeypatch):
    def failing_resolve(target):
        raise CloneError("git clone failed")

    monkeypatch.setattr(cli, "resolve", failing_resolve)
    assert cli.main(["https://example.com/org/repo", str(tmp_path / "out.md")]) == 5


def test_exclude_and_ignore_file_flags(tmp_path):
    repo = tmp_path / "repo"
    (repo / "gen").mkdir(parents=True)
    (repo / "a.py").write_text("a")
    (repo / "b.txt").write_text("b")
    (repo / "gen" / "c.py").write_text("c")
    (repo / "patterns").write_text("*.txt\n")
    out = tmp_path / "out.md"

    argv = [str(repo), str(out), "--ignore-file", "patterns", "--exclude", "gen/", "-q"]
    assert cli.main(argv) == 0
    text = out.read_text()
    assert "# a.py" in text
    assert "# patterns" in text
    assert "b.txt" not in text
    assert "gen/c.py" not in text


def test_verbose_and_quiet_are_exclusive(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path), str(tmp_path / "out.md"), "-v", "-q"])


def test_run_raises_system_exit(tmp_path):
    with pytest.raises(SystemExit) as info:
        cli.run([str(tmp_path / "missing"), str(tmp_path / "out.md")])
    assert info.value.code == 2


@pytest.mark.skipif(not os.path.exists("/dev/full"), reason="/dev/full unavailable")
def test_full_disk_exit_code(tmp_path):
    (tmp_path / "a.py").write_text("print(1)")
    assert cli.main([str(tmp_path), "/dev/full"]) == 4

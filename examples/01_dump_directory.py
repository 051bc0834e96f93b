import tempfile
from pathlib import Path

from tree2md import dump

with tempfile.TemporaryDirectory() as tmp:
    root = Path(tmp) / "project"
    (root / "pkg").mkdir(parents=True)
    (root / "node_modules" / "left-pad").mkdir(parents=True)
    (root / "pkg" / "core.py").write_text("def answer():\n    return 42\n")
    (root / "main.go").write_text("package main\n")
    (root / "logo.png").write_bytes(b"\x89PNG")
    (root / "node_modules" / "left-pad" / "index.js").write_text("module.exports = 1\n")
    (root / ".gitignore").write_text("# build output\n/dist\n*.log\n")
    (root / "debug.log").write_text("noise\n")

    out = Path(tmp) / "project.md"
    report = dump(root, out)

    # Only main.go and pkg/core.py survive the filters, in lexical order.
    print(report.files)
    print(out.read_text())

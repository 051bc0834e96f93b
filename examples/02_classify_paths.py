from tree2md import IgnorePatterns, classify

patterns = IgnorePatterns.from_lines(
    [
        "# comment lines and blanks are dropped",
        "",
        "build/",
        "/docs/generated",
        "*.min.js",
        "src/*.gen.ts",
    ]
)

for rel_path, is_dir in [
    ("build", True),
    ("src/build", True),
    ("docs/generated", True),
    ("app.min.js", False),
    ("web/app.min.js", False),
    ("src/api.gen.ts", False),
    ("src/nested/api.gen.ts", False),  # '*' does not cross '/'
    ("photo.PNG", False),
    (".env", False),
    ("README.md", False),
]:
    print(f"{rel_path:<24} {classify(rel_path, is_dir, patterns).value}")

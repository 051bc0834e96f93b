from __future__ import annotations

import os
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

# Extensions whose files are never emitted.
SKIP_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        # images
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tif", ".tiff", ".svg",
        ".ico", ".webp", ".psd",
        # audio / video
        ".mp3", ".wav", ".ogg", ".flac", ".mp4", ".mov", ".avi", ".mkv", ".webm",
        # fonts
        ".woff", ".woff2", ".ttf", ".otf", ".eot",
        # archives and binaries
        ".zip", ".tar", ".gz", ".tgz", ".bz2", ".xz", ".7z", ".rar",
        ".exe", ".dll", ".so", ".dylib", ".a", ".o", ".lib", ".class", ".jar",
        ".pyc", ".pyo", ".pyd", ".wasm", ".bin", ".pdf",
        # lockfile-like config
        ".config", ".ini", ".yaml", ".yml", ".toml", ".json", ".lock",
    }
)

# Multi-part suffixes; a plain last-extension lookup never sees these.
SKIP_COMPOUND_SUFFIXES: Tuple[str, ...] = (".config.ts", ".config.mjs", ".config.js")

LANGUAGE_TAGS: Mapping[str, str] = MappingProxyType(
    {
        ".py": "python",
        ".pyi": "python",
        ".js": "javascript",
        ".mjs": "javascript",
        ".cjs": "javascript",
        ".jsx": "jsx",
        ".ts": "typescript",
        ".tsx": "tsx",
        ".go": "go",
        ".rs": "rust",
        ".c": "c",
        ".h": "c",
        ".cc": "cpp",
        ".cpp": "cpp",
        ".hpp": "cpp",
        ".cs": "csharp",
        ".java": "java",
        ".kt": "kotlin",
        ".swift": "swift",
        ".rb": "ruby",
        ".php": "php",
        ".lua": "lua",
        ".sh": "bash",
        ".bash": "bash",
        ".zsh": "zsh",
        ".ps1": "powershell",
        ".sql": "sql",
        ".html": "html",
        ".htm": "html",
        ".css": "css",
        ".scss": "scss",
        ".vue": "vue",
        ".svelte": "svelte",
        ".md": "markdown",
        ".rst": "rst",
        ".xml": "xml",
        ".proto": "protobuf",
        ".graphql": "graphql",
        ".r": "r",
        ".dart": "dart",
        ".scala": "scala",
        ".ex": "elixir",
        ".exs": "elixir",
        ".hs": "haskell",
        ".tf": "hcl",
        ".mod": "go",
    }
)

# Directory names excluded at any depth, whatever the ignore file says.
BUILTIN_SKIP_DIRS: FrozenSet[str] = frozenset(
    {"node_modules", "vendor", "tmp", "temp", "log", "logs"}
)

# Binary output directory; files anywhere below it are never emitted.
BINARY_OUTPUT_DIR = "bin"

GENERATED_FILE_NAMES: FrozenSet[str] = frozenset(
    {"db.sqlite3", "database.sqlite", "database.db"}
)


def extension_of(name: str) -> str:
    """Lowercase final extension of ``name`` including the dot, or ``""``."""
    return os.path.splitext(name)[1].lower()


def has_skip_extension(name: str) -> bool:
    lowered = name.lower()
    if extension_of(lowered) in SKIP_EXTENSIONS:
        return True
    return lowered.endswith(SKIP_COMPOUND_SUFFIXES)


def language_for(name: str) -> str:
    """Fence language tag for a file name (empty when unmapped)."""
    return LANGUAGE_TAGS.get(extension_of(name), "")

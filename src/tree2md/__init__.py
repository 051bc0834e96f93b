"""tree2md public API."""
from .classify import Decision, classify, should_skip_dir, should_skip_file
from .emitter import MarkdownEmitter
from .errors import (
    CloneError,
    ConfigurationError,
    OutputOpenError,
    TraversalError,
    Tree2mdError,
)
from .options import DumpOptions
from .patterns import IgnorePatterns, glob_match, load_ignore_file
from .run import DumpReport, dump
from .source import ResolvedRoot, resolve
from .walker import SourceFile, walk

__all__ = [
    "Decision",
    "classify",
    "should_skip_dir",
    "should_skip_file",
    "MarkdownEmitter",
    "CloneError",
    "ConfigurationError",
    "OutputOpenError",
    "TraversalError",
    "Tree2mdError",
    "DumpOptions",
    "IgnorePatterns",
    "glob_match",
    "load_ignore_file",
    "DumpReport",
    "dump",
    "ResolvedRoot",
    "resolve",
    "SourceFile",
    "walk",
]

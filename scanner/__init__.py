"""Scanner module for markdown discovery and link extraction."""

from .discovery import iter_markdown_files
from .parser import extract_links, context_window
from .resolver import resolve_link_target, relative_path
from .builder import build_graph, BuildResult

__all__ = [
    "iter_markdown_files",
    "extract_links",
    "context_window",
    "resolve_link_target",
    "relative_path",
    "build_graph",
    "BuildResult",
]

"""Graph builder that orchestrates scanning and graph construction."""

import logging
import os
from pathlib import Path
from typing import NamedTuple, Union

from graph.model import MentionGraph
from .discovery import iter_markdown_files
from .errors import InternalInvariantError, WalkError
from .parser import context_window, extract_links
from .resolver import canonical_path, resolve_link_target

logger = logging.getLogger(__name__)


class BuildResult(NamedTuple):
    """The built graph and the number of markdown files read."""

    graph: MentionGraph
    files_scanned: int


def build_graph(root: Union[str, Path]) -> BuildResult:
    """
    Scan a directory tree and build the mention graph.

    Every ``.md`` file becomes a node. Every link in it becomes an edge to
    the node of its resolved target, which is created if it was not seen
    yet. The first error stops the walk.

    Args:
        root: Directory to scan. Node paths are relative to it.

    Returns:
        BuildResult with the graph and the count of files read. The graph
        may hold more nodes than files read: targets that were never
        scanned still get a node.

    Raises:
        WalkError: If listing the tree or reading a file fails.
        DecodeError: If a link target has malformed percent-encoding.
    """
    root = Path(os.path.abspath(root))
    graph = MentionGraph()
    files_scanned = 0

    for file_path in iter_markdown_files(root):
        files_scanned += 1
        try:
            content = file_path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            raise WalkError(f"cannot read {file_path}: {e}") from e

        source = graph.mark_scanned(canonical_path(root, file_path))
        lines = content.split("\n")
        found = 0
        for row, line in enumerate(lines):
            for raw in extract_links(line):
                target = graph.get_or_create(resolve_link_target(root, file_path, raw.target))
                window = context_window(row, len(lines))
                graph.record_link(
                    source,
                    target,
                    row=row,
                    column=raw.column,
                    context=lines[window.start:window.stop],
                    context_start=window.start,
                )
                found += 1
        logger.debug("scanned %s: %d links", source.path, found)

    if len(graph) < files_scanned:
        raise InternalInvariantError(
            f"graph has {len(graph)} nodes but {files_scanned} files were scanned"
        )

    orphans = graph.orphans()
    if orphans:
        logger.info("%d linked paths were never scanned", len(orphans))
    logger.debug(
        "built graph: %d files, %d nodes, %d links",
        files_scanned, len(graph), len(graph.links),
    )
    return BuildResult(graph, files_scanned)

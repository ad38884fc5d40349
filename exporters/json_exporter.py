"""JSON exporter for mention graphs (machine-friendly format)."""

import json
from typing import Any, Dict, List, Optional

from graph.model import MentionGraph


def to_json(
    graph: MentionGraph,
    files_scanned: Optional[int] = None,
    indent: int = 2,
) -> str:
    """
    Convert a mention graph to JSON format.

    Args:
        graph: The mention graph to export.
        files_scanned: Number of files read, included when given.
        indent: JSON indentation level.

    Returns:
        JSON string with ``nodes``, ``links`` and ``orphans``.
    """
    nodes: List[Dict[str, Any]] = [
        {"path": node.path, "scanned": node.scanned}
        for node in graph.nodes
    ]

    links: List[Dict[str, Any]] = []
    for link in graph.links:
        links.append({
            "source": link.source,
            "target": link.target,
            "row": link.row,
            "column": link.column,
            "context": list(link.context),
        })

    data: Dict[str, Any] = {
        "nodes": nodes,
        "links": links,
        "orphans": [node.path for node in graph.orphans()],
    }
    if files_scanned is not None:
        data["files_scanned"] = files_scanned

    return json.dumps(data, indent=indent)

"""Mermaid flowchart exporter for mention graphs."""

import re
from typing import Dict, Set, Tuple

from graph.model import MentionGraph


def to_mermaid(graph: MentionGraph, orientation: str = "LR") -> str:
    """
    Convert a mention graph to Mermaid flowchart syntax.

    Repeated mentions between the same two files are drawn as one edge.
    Orphan nodes (linked but never scanned) get a dashed outline.

    Args:
        graph: The mention graph to export.
        orientation: Flowchart orientation (LR, TD, TB, RL, BT).

    Returns:
        Mermaid flowchart string.
    """
    lines = [f"flowchart {orientation}"]

    node_ids: Dict[str, str] = {}
    used: Set[str] = set()
    for node in graph.nodes:
        node_id = _sanitize_id(node.path)
        # Distinct paths can sanitize to the same id.
        candidate, n = node_id, 1
        while candidate in used:
            n += 1
            candidate = f"{node_id}_{n}"
        used.add(candidate)
        node_ids[node.path] = candidate

    for node in graph.nodes:
        lines.append(f'    {node_ids[node.path]}["{node.path}"]')

    orphans = graph.orphans()
    if orphans:
        lines.append("")
        lines.append("    %% Never scanned")
        for node in orphans:
            lines.append(f"    style {node_ids[node.path]} stroke:#ff0000,stroke-dasharray: 5 5")

    edges: Set[Tuple[str, str]] = set()
    for source, target, _row, _column in graph.iter_edges():
        edges.add((source, target))

    lines.append("")
    for source, target in sorted(edges):
        lines.append(f"    {node_ids[source]} --> {node_ids[target]}")

    return "\n".join(lines)


def _sanitize_id(value: str) -> str:
    """Sanitize a path to be a valid Mermaid ID."""
    # Replace path separators and dots with underscores
    sanitized = re.sub(r"[/\\.\-]", "_", value)
    # Remove any remaining invalid characters
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "", sanitized)
    # Ensure it starts with a letter
    if sanitized and not sanitized[0].isalpha():
        sanitized = "n_" + sanitized
    return sanitized or "unknown"

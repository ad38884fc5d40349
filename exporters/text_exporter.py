"""Plain-text inbound mention reports."""

from typing import List

from graph.model import MentionGraph, Node


def describe_inbound(graph: MentionGraph, node: Node) -> str:
    """
    Describe which files mention ``node``.

    Each inbound link lists its source file followed by the context lines,
    numbered ``row + i`` for the i-th context line. A node with
    no inbound links gives an empty report.

    Args:
        graph: Graph owning the node.
        node: Node to report on.

    Returns:
        The report, or an empty string.
    """
    links = graph.inbound_links(node)
    if not links:
        return ""

    lines: List[str] = [f"{node.path} is mentioned in"]
    for link in links:
        lines.append(f"  {link.source}")
        for i, context_line in enumerate(link.context):
            lines.append(f"    {link.row + i}: {context_line}")
    return "\n".join(lines)


def describe_all(graph: MentionGraph) -> str:
    """Describe inbound mentions of every mentioned node, sorted by path."""
    reports = [describe_inbound(graph, node) for node in graph.nodes if node.inbound]
    return "\n".join(reports)


def describe_orphans(graph: MentionGraph) -> str:
    """List linked paths that were never scanned, one per line."""
    return "\n".join(node.path for node in graph.orphans())

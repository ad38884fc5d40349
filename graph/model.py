"""Graph data model for storing markdown mention relationships."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


@dataclass
class Node:
    """
    One markdown file path in the graph.

    ``outbound`` and ``inbound`` hold link ids into the owning graph's
    link arena, in the order the links were recorded.
    """

    path: str
    outbound: List[int] = field(default_factory=list)
    inbound: List[int] = field(default_factory=list)
    scanned: bool = False


@dataclass(frozen=True)
class Link:
    """A directed mention of ``target`` made by ``source``."""

    id: int
    source: str
    target: str
    row: int
    column: int
    context: Tuple[str, ...]
    context_start: int


class MentionGraph:
    """
    A directed graph of markdown files mentioning each other.

    Nodes are keyed by canonical root-relative path and created lazily the
    first time a path is seen, as a scanned file or as a link target.
    Links live in a single arena; each node only keeps link ids.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._links: List[Link] = []

    @property
    def nodes(self) -> List[Node]:
        """Return all nodes sorted by path."""
        return [self._nodes[path] for path in sorted(self._nodes)]

    @property
    def links(self) -> List[Link]:
        """Return all links in the order they were recorded."""
        return list(self._links)

    def get(self, path: str) -> Optional[Node]:
        """Return the node for ``path``, or None if it was never referenced."""
        return self._nodes.get(path)

    def get_or_create(self, path: str) -> Node:
        """Return the node for ``path``, registering an empty one if needed."""
        node = self._nodes.get(path)
        if node is None:
            node = Node(path=path)
            self._nodes[path] = node
        return node

    def mark_scanned(self, path: str) -> Node:
        """Register ``path`` as a file that was read during the walk."""
        node = self.get_or_create(path)
        node.scanned = True
        return node

    def record_link(
        self,
        source: Node,
        target: Node,
        row: int,
        column: int,
        context: Sequence[str],
        context_start: int,
    ) -> Link:
        """
        Record that ``source`` mentions ``target`` at ``row``/``column``.

        The link is stored once and its id is added to both
        ``source.outbound`` and ``target.inbound``. Self-mentions are kept.

        Args:
            source: Node of the file containing the link.
            target: Node the link points at.
            row: 0-based line index of the match.
            column: 0-based offset of the opening bracket.
            context: Raw lines surrounding the match.
            context_start: Line index of the first context line.

        Returns:
            The new Link.
        """
        link = Link(
            id=len(self._links),
            source=source.path,
            target=target.path,
            row=row,
            column=column,
            context=tuple(context),
            context_start=context_start,
        )
        self._links.append(link)
        source.outbound.append(link.id)
        target.inbound.append(link.id)
        return link

    def link(self, link_id: int) -> Link:
        """Return the link with the given id."""
        return self._links[link_id]

    def inbound_links(self, node: Node) -> List[Link]:
        """Get the links mentioning ``node``, in recorded order."""
        return [self._links[link_id] for link_id in node.inbound]

    def outbound_links(self, node: Node) -> List[Link]:
        """Get the links ``node`` makes to other files, in recorded order."""
        return [self._links[link_id] for link_id in node.outbound]

    def orphans(self) -> List[Node]:
        """
        Get nodes that exist only because something links to them.

        These were never scanned: the target is missing, outside the root,
        or not a ``.md`` file on disk.
        """
        return [node for node in self.nodes if not node.scanned]

    def iter_edges(self) -> Iterator[Tuple[str, str, int, int]]:
        """Iterate over all links as (source, target, row, column) tuples."""
        for link in self._links:
            yield link.source, link.target, link.row, link.column

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, path: str) -> bool:
        """Check if a path has a node in the graph."""
        return path in self._nodes

    def __iter__(self) -> Iterator[Tuple[str, Node]]:
        """Iterate over (path, node) registry entries."""
        return iter(self._nodes.items())

    def __repr__(self) -> str:
        scanned = sum(1 for node in self._nodes.values() if node.scanned)
        return f"MentionGraph(nodes={len(self._nodes)}, links={len(self._links)}, scanned={scanned})"

"""Tests for graph data model."""

import pytest

from graph.model import MentionGraph, Link


class TestMentionGraph:
    """Tests for MentionGraph class."""

    def test_empty_graph(self):
        """Test empty graph initialization."""
        graph = MentionGraph()
        assert len(graph) == 0
        assert graph.nodes == []
        assert graph.links == []
        assert graph.orphans() == []

    def test_get_or_create_is_lazy_and_unique(self):
        """Test that a path maps to exactly one node."""
        graph = MentionGraph()

        first = graph.get_or_create("docs/a.md")
        second = graph.get_or_create("docs/a.md")

        assert first is second
        assert len(graph) == 1
        assert "docs/a.md" in graph
        assert graph.get("docs/b.md") is None
        assert "docs/b.md" not in graph

    def test_node_path_equals_key(self):
        """Test that every node's path equals its registry key."""
        graph = MentionGraph()
        for path in ["a.md", "b/c.md", "../outside.md"]:
            graph.get_or_create(path)

        for key, node in graph:
            assert node.path == key

    def test_record_link_shared_by_both_sides(self):
        """Test that one link is visible from source and target."""
        graph = MentionGraph()
        source = graph.get_or_create("a.md")
        target = graph.get_or_create("b.md")

        link = graph.record_link(source, target, row=2, column=5, context=["x", "y"], context_start=1)

        assert source.outbound == [link.id]
        assert target.inbound == [link.id]
        assert graph.outbound_links(source) == [link]
        assert graph.inbound_links(target) == [link]
        assert graph.link(link.id) is link
        assert link.context == ("x", "y")

    def test_link_is_immutable(self):
        """Test that recorded links cannot be changed."""
        graph = MentionGraph()
        node = graph.get_or_create("a.md")
        link = graph.record_link(node, node, row=0, column=0, context=[], context_start=0)

        with pytest.raises(AttributeError):
            link.row = 3

    def test_self_link_kept(self):
        """Test that a file mentioning itself records a link on both lists."""
        graph = MentionGraph()
        node = graph.get_or_create("a.md")

        graph.record_link(node, node, row=0, column=0, context=["[me](a.md)"], context_start=0)
        graph.record_link(node, node, row=0, column=10, context=["[me](a.md)"], context_start=0)

        assert len(node.outbound) == 2
        assert len(node.inbound) == 2

    def test_links_keep_recorded_order(self):
        """Test that inbound links come back in the order they were added."""
        graph = MentionGraph()
        target = graph.get_or_create("t.md")
        for name in ["z.md", "a.md", "m.md"]:
            graph.record_link(graph.get_or_create(name), target, row=0, column=0, context=[], context_start=0)

        assert [link.source for link in graph.inbound_links(target)] == ["z.md", "a.md", "m.md"]

    def test_nodes_sorted_by_path(self):
        """Test that nodes are listed lexicographically."""
        graph = MentionGraph()
        for path in ["c.md", "a.md", "b/a.md"]:
            graph.get_or_create(path)

        assert [node.path for node in graph.nodes] == ["a.md", "b/a.md", "c.md"]

    def test_orphans(self):
        """Test that nodes never marked scanned are orphans."""
        graph = MentionGraph()
        source = graph.mark_scanned("a.md")
        missing = graph.get_or_create("missing.md")
        graph.record_link(source, missing, row=0, column=0, context=[], context_start=0)

        assert source.scanned
        assert [node.path for node in graph.orphans()] == ["missing.md"]

    def test_mark_scanned_existing_orphan(self):
        """Test that a target seen before its file is scanned stops being an orphan."""
        graph = MentionGraph()
        target = graph.get_or_create("b.md")

        assert graph.mark_scanned("b.md") is target
        assert graph.orphans() == []

    def test_iter_edges(self):
        """Test iterating over edges."""
        graph = MentionGraph()
        a = graph.get_or_create("a.md")
        b = graph.get_or_create("b.md")
        graph.record_link(a, b, row=1, column=4, context=[], context_start=0)
        graph.record_link(b, a, row=0, column=0, context=[], context_start=0)

        assert list(graph.iter_edges()) == [("a.md", "b.md", 1, 4), ("b.md", "a.md", 0, 0)]

    def test_repr(self):
        """Test string representation."""
        graph = MentionGraph()
        a = graph.mark_scanned("a.md")
        graph.record_link(a, graph.get_or_create("b.md"), row=0, column=0, context=[], context_start=0)

        assert "nodes=2" in repr(graph)
        assert "links=1" in repr(graph)
        assert "scanned=1" in repr(graph)

    def test_links_property_returns_copy(self):
        """Test that the links property cannot be used to mutate the arena."""
        graph = MentionGraph()
        a = graph.get_or_create("a.md")
        graph.record_link(a, a, row=0, column=0, context=[], context_start=0)

        links = graph.links
        links.append(Link(id=9, source="x", target="y", row=0, column=0, context=(), context_start=0))

        assert len(graph.links) == 1

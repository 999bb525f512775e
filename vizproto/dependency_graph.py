"""Directed graph of named dependencies with cycle detection and ordering."""

from __future__ import annotations


class DependencyGraph:
    """A directed graph over string nodes.

    Nodes and edges keep their insertion order, so traversals are deterministic.
    """

    def __init__(self) -> None:
        self._edges: dict[str, dict[str, None]] = {}
        self._acyclic: bool | None = None

    def add_node(self, item: str) -> None:
        """Add ``item`` as a node, keeping any edges it already has."""
        self._edges.setdefault(item, {})
        self._acyclic = None

    def contains_node(self, item: str) -> bool:
        return item in self._edges

    def contains_edge(self, source: str, target: str) -> bool:
        return target in self._edges.get(source, {})

    def add_edge(self, source: str, target: str) -> None:
        """Add an edge from ``source`` to ``target``, adding both nodes if needed."""
        self._edges.setdefault(source, {})[target] = None
        self._edges.setdefault(target, {})
        self._acyclic = None

    def is_acyclic(self) -> bool:
        """Return whether the graph has no cycle. An empty graph is acyclic."""
        if not self._edges:
            return True
        if self._acyclic is None:
            visited: set[str] = set()
            stack: set[str] = set()
            self._acyclic = not any(
                self._has_cycle(node, visited, stack)
                for node in self._edges
                if node not in visited
            )
        return self._acyclic

    def _has_cycle(self, node: str, visited: set[str], stack: set[str]) -> bool:
        if node in visited:
            return False
        visited.add(node)
        stack.add(node)
        for neighbor in self._edges[node]:
            if neighbor not in visited and self._has_cycle(neighbor, visited, stack):
                return True
            if neighbor in stack:
                return True
        stack.discard(node)
        return False

    def topology_sort(self) -> list[str]:
        """Return nodes so that every node comes after all it depends on.

        A graph with a cycle yields an empty list.
        """
        if not self.is_acyclic():
            return []
        visited: set[str] = set()
        ordered: list[str] = []
        for node in self._edges:
            if node not in visited:
                self._visit(node, visited, ordered)
        return ordered

    def _visit(self, node: str, visited: set[str], ordered: list[str]) -> None:
        visited.add(node)
        for neighbor in self._edges[node]:
            if neighbor not in visited:
                self._visit(neighbor, visited, ordered)
        ordered.append(node)

    def clear(self) -> None:
        self._edges.clear()
        self._acyclic = None

    def __str__(self) -> str:
        lines = ["Dependency Graph:"]
        lines.extend(
            f"\t{source} -> {target}"
            for source, targets in self._edges.items()
            for target in targets
        )
        return "\n".join(lines)
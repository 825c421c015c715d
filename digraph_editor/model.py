"""
In-memory directed graph model for the editor.

GraphModel owns the vertex ids and the edge list and is the single source of
truth for the page. Every view (diagram, adjacency list/matrix, property
panel, dropdowns) is re-derived from it after each mutation.

Display positions are NOT stored here. Pass a LayoutTable to keep one in sync;
the model works the same without it.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import networkx as nx

from digraph_editor.labels import label_sequence
from digraph_editor.layout import LayoutTable

logger = logging.getLogger(__name__)


class GraphError(Exception):
    """Base class for graph model errors."""
    pass


class InvalidReference(GraphError):
    """Raised when an edge refers to a vertex that does not exist."""

    def __init__(self, source: str, target: str, missing: List[str]):
        self.source = source
        self.target = target
        self.missing = missing
        super().__init__(
            f"Cannot add edge {source} -> {target}: unknown vertex {', '.join(missing)}"
        )


@dataclass(frozen=True)
class Edge:
    """Directed edge between two vertex ids."""
    source: str
    target: str


@dataclass
class GraphProperties:
    """
    Summary statistics for the property panel.

    density is None when it is not applicable (fewer than two vertices).
    sources/sinks are None when the graph has no vertices.
    """
    vertex_count: int
    edge_count: int
    density: Optional[float]
    sources: Optional[List[str]]
    sinks: Optional[List[str]]


class GraphModel:
    """Vertex set plus edge list with linear-scan CRUD."""

    def __init__(self, layout: Optional[LayoutTable] = None):
        self._vertices: List[str] = []
        self._edges: List[Edge] = []
        # Only ever advances, so ids are not reused after deletion
        self._labels = label_sequence()
        self.layout = layout

    # --- Read access ---

    @property
    def vertices(self) -> List[str]:
        return list(self._vertices)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def has_vertex(self, vertex_id: str) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, source: str, target: str) -> bool:
        return any(e.source == source and e.target == target for e in self._edges)

    def degree(self, vertex_id: str) -> Tuple[int, int]:
        """Return (in_degree, out_degree) for a vertex."""
        if not self.has_vertex(vertex_id):
            raise KeyError(vertex_id)
        in_deg = sum(1 for e in self._edges if e.target == vertex_id)
        out_deg = sum(1 for e in self._edges if e.source == vertex_id)
        return in_deg, out_deg

    # --- Mutations ---

    def add_vertex(self) -> str:
        vertex_id = next(self._labels)
        self._vertices.append(vertex_id)
        if self.layout is not None:
            self.layout.place(vertex_id)
        logger.debug(f"Added vertex {vertex_id}")
        return vertex_id

    def remove_vertex(self, vertex_id: str) -> None:
        """Remove a vertex and every edge touching it. Unknown ids are ignored."""
        if vertex_id not in self._vertices:
            return
        self._vertices.remove(vertex_id)
        before = len(self._edges)
        self._edges = [
            e for e in self._edges
            if e.source != vertex_id and e.target != vertex_id
        ]
        if self.layout is not None:
            self.layout.forget(vertex_id)
        logger.debug(f"Removed vertex {vertex_id} and {before - len(self._edges)} edges")

    def add_edge(self, source: str, target: str) -> bool:
        """
        Add the directed edge source -> target.

        Raises InvalidReference if either endpoint is missing. Adding an edge
        that already exists does nothing. Returns True if an edge was added.
        """
        missing = [v for v in (source, target) if v not in self._vertices]
        if missing:
            # dict.fromkeys keeps order and drops the duplicate in X -> X
            raise InvalidReference(source, target, list(dict.fromkeys(missing)))

        if self.has_edge(source, target):
            return False

        self._edges.append(Edge(source, target))
        logger.debug(f"Added edge {source} -> {target}")
        return True

    def remove_edge(self, source: str, target: str) -> int:
        """Remove the edge source -> target if present. Returns the number removed."""
        before = len(self._edges)
        self._edges = [
            e for e in self._edges
            if not (e.source == source and e.target == target)
        ]
        return before - len(self._edges)

    # --- Derived views ---

    def adjacency_list(self) -> Dict[str, List[str]]:
        adjacency = {vid: [] for vid in self._vertices}
        for e in self._edges:
            adjacency[e.source].append(e.target)
        return adjacency

    def adjacency_matrix(self) -> Tuple[List[List[int]], List[str]]:
        """
        Return (matrix, ids) with ids sorted lexicographically.
        matrix[i][j] is 1 when ids[i] -> ids[j] exists.
        """
        ids = sorted(self._vertices)
        index = {vid: i for i, vid in enumerate(ids)}
        matrix = [[0] * len(ids) for _ in ids]
        for e in self._edges:
            matrix[index[e.source]][index[e.target]] = 1
        return matrix, ids

    def properties(self) -> GraphProperties:
        v = len(self._vertices)
        e = len(self._edges)

        # Directed simple graph: at most V * (V - 1) edges
        density = e / (v * (v - 1)) if v > 1 else None

        if v == 0:
            return GraphProperties(vertex_count=0, edge_count=e, density=density, sources=None, sinks=None)

        has_incoming = {edge.target for edge in self._edges}
        has_outgoing = {edge.source for edge in self._edges}
        ids = sorted(self._vertices)

        return GraphProperties(
            vertex_count=v,
            edge_count=e,
            density=density,
            sources=[vid for vid in ids if vid not in has_incoming],
            sinks=[vid for vid in ids if vid not in has_outgoing],
        )

    def to_networkx(self) -> nx.DiGraph:
        G = nx.DiGraph()
        G.add_nodes_from(self._vertices)
        G.add_edges_from((e.source, e.target) for e in self._edges)
        return G

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"GraphModel(vertices={len(self._vertices)}, edges={len(self._edges)})"

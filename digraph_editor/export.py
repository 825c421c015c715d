"""
Graphviz export of the current graph.

Produces DOT text for the "Download DOT" button. Only the source is generated,
so the Graphviz binaries are not needed.
"""

from graphviz import Digraph

from digraph_editor.model import GraphModel


def to_graphviz(model: GraphModel, name: str = "digraph_editor") -> Digraph:
    """
    Build a graphviz.Digraph with one node per vertex (sorted) and one edge
    per model edge (insertion order).
    """
    dot = Digraph(name=name, comment="Digraph Editor export")
    for vid in sorted(model.vertices):
        dot.node(vid, label=vid)
    for edge in model.edges:
        dot.edge(edge.source, edge.target)
    return dot


def to_dot_source(model: GraphModel, name: str = "digraph_editor") -> str:
    return to_graphviz(model, name=name).source

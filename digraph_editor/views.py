"""
HTML fragments and display strings for the side panels.

Everything here is a pure function of model output, so the page can rebuild
all panels after each mutation without keeping any state of its own.
"""

from html import escape
from typing import Dict, List, Optional

from digraph_editor.model import GraphModel, GraphProperties

EMPTY_GRAPH_HTML = "<p>Graph is empty.</p>"
NOT_APPLICABLE = "N/A"


def render_adjacency_list(adjacency: Dict[str, List[str]]) -> str:
    """Render {id: [neighbours]} as an HTML <ul>."""
    if not adjacency:
        return EMPTY_GRAPH_HTML

    rows = []
    for vid, neighbours in adjacency.items():
        joined = ", ".join(escape(n) for n in neighbours)
        rows.append(f"<li><strong>{escape(vid)}</strong> → [ {joined} ]</li>")
    return "<ul>" + "".join(rows) + "</ul>"


def render_adjacency_matrix(matrix: List[List[int]], ids: List[str]) -> str:
    """Render the 0/1 matrix as an HTML table with ids as row and column headers."""
    if not ids:
        return EMPTY_GRAPH_HTML

    parts = ["<table>", "<tr><th>&nbsp;</th>"]
    parts.extend(f"<th>{escape(vid)}</th>" for vid in ids)
    parts.append("</tr>")

    for i, vid in enumerate(ids):
        parts.append(f"<tr><th>{escape(vid)}</th>")
        parts.extend(f"<td>{cell}</td>" for cell in matrix[i])
        parts.append("</tr>")

    parts.append("</table>")
    return "".join(parts)


def format_density(density: Optional[float]) -> str:
    if density is None:
        return NOT_APPLICABLE
    return f"{density:.3f}"


def format_vertex_set(ids: Optional[List[str]]) -> str:
    # None means no vertices at all; [] means vertices exist but none qualify
    if ids is None:
        return NOT_APPLICABLE
    if not ids:
        return "None"
    return ", ".join(ids)


def format_properties(props: GraphProperties) -> Dict[str, str]:
    """Display strings for the property panel."""
    return {
        'vertices': str(props.vertex_count),
        'edges': str(props.edge_count),
        'density': format_density(props.density),
        'sources': format_vertex_set(props.sources),
        'sinks': format_vertex_set(props.sinks),
    }


def vertex_options(model: GraphModel) -> List[str]:
    """Sorted vertex ids for the dropdowns."""
    return sorted(model.vertices)


def restore_selection(options: List[str], current: Optional[str]) -> Optional[str]:
    """Keep the previous dropdown choice if it is still a valid option."""
    if current and current in options:
        return current
    return None

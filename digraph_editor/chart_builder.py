"""
ECharts options builder for the graph diagram.

Converts the model plus its layout table into an ECharts option dict with a
single 'graph' series. Positions are fixed (layout 'none'), so the diagram
only changes when the graph does.
"""

from typing import Dict, Any, Optional

from digraph_editor.layout import LayoutTable
from digraph_editor.model import GraphModel


BACKGROUND_COLOR = '#1e293b'
VERTEX_COLOR = '#3b82f6'
SELECTED_COLOR = '#f59e0b'
EDGE_COLOR = '#94a3b8'
VERTEX_SIZE = 30


def build_echart_options(
    model: GraphModel,
    layout: LayoutTable,
    selected: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build ECharts options from the model.

    Args:
        model: Graph to draw
        layout: Positions for every vertex in the model
        selected: Vertex id to highlight, if any

    Returns:
        ECharts options dict ready for ui.echart()
    """
    G = model.to_networkx()

    e_nodes = []
    for vid in G.nodes:
        pos = layout.get(vid) or layout.place(vid)
        is_selected = vid == selected
        in_deg, out_deg = model.degree(vid)

        e_nodes.append({
            'id': vid,
            'name': vid,
            'x': pos.x,
            'y': pos.y,
            'symbol': 'circle',
            'symbolSize': VERTEX_SIZE,
            'itemStyle': {
                'color': SELECTED_COLOR if is_selected else VERTEX_COLOR,
                'borderColor': '#ffffff' if is_selected else VERTEX_COLOR,
                'borderWidth': 3 if is_selected else 0,
            },
            'label': {
                'show': True,
                'formatter': vid,
                'position': 'inside',
                'fontWeight': 'bold',
                'color': '#ffffff',
            },
            'tooltip': {'formatter': f"{vid}<br/>in: {in_deg} · out: {out_deg}"},
        })

    e_links = []
    for src, tgt in G.edges():
        # Bend the two directions of a 2-cycle apart so both arrows are visible
        is_mutual = src != tgt and G.has_edge(tgt, src)
        e_links.append({
            'source': src,
            'target': tgt,
            'lineStyle': {
                'color': EDGE_COLOR,
                'width': 2,
                'curveness': 0.2 if is_mutual else 0,
            },
            'tooltip': {'formatter': f"{src} → {tgt}"},
        })

    return {
        'backgroundColor': BACKGROUND_COLOR,
        'tooltip': {},
        'animation': False,
        'series': [{
            'type': 'graph',
            'layout': 'none',
            'roam': False,
            'edgeSymbol': ['none', 'arrow'],
            'edgeSymbolSize': [0, 10],
            'data': e_nodes,
            'links': e_links,
        }]
    }


def resolve_clicked_vertex(event: Any, model: GraphModel) -> Optional[str]:
    """
    Return the vertex id behind an ECharts point click, or None for edges,
    other components and vertices that no longer exist.

    event is the EChartPointClickEventArguments passed to on_point_click.
    """
    if getattr(event, 'component_type', None) != 'series':
        return None
    if getattr(event, 'data_type', None) == 'edge':
        return None

    vertex_id = getattr(event, 'name', None)
    if vertex_id and model.has_vertex(vertex_id):
        return vertex_id
    return None

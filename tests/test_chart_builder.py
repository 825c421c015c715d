import random
from types import SimpleNamespace

import pytest

from digraph_editor.chart_builder import build_echart_options, resolve_clicked_vertex
from digraph_editor.layout import LayoutTable
from digraph_editor.model import GraphModel


@pytest.fixture
def graph():
    layout = LayoutTable(rng=random.Random(0))
    model = GraphModel(layout=layout)
    for _ in range(3):
        model.add_vertex()
    model.add_edge('A', 'B')
    model.add_edge('B', 'A')
    model.add_edge('B', 'C')
    return model, layout


def find_link(links, src, tgt):
    for l in links:
        if l.get("source") == src and l.get("target") == tgt:
            return l
    return None


def test_series_structure(graph):
    model, layout = graph
    options = build_echart_options(model, layout)

    series = options['series'][0]
    assert series['type'] == 'graph'
    assert series['layout'] == 'none'
    assert series['edgeSymbol'] == ['none', 'arrow']

    data = {d['id']: d for d in series['data']}
    assert set(data) == {'A', 'B', 'C'}
    assert data['A']['x'] == layout.get('A').x
    assert data['A']['y'] == layout.get('A').y
    assert 'in: 1 · out: 2' in data['B']['tooltip']['formatter']
    assert len(series['links']) == 3


def test_mutual_edges_are_curved(graph):
    model, layout = graph
    links = build_echart_options(model, layout)['series'][0]['links']
    assert find_link(links, 'A', 'B')['lineStyle']['curveness'] > 0
    assert find_link(links, 'B', 'A')['lineStyle']['curveness'] > 0
    assert find_link(links, 'B', 'C')['lineStyle']['curveness'] == 0


def test_selected_vertex_is_highlighted(graph):
    model, layout = graph
    data = build_echart_options(model, layout, selected='C')['series'][0]['data']
    colors = {d['id']: d['itemStyle']['color'] for d in data}
    assert colors['C'] != colors['A']
    assert colors['A'] == colors['B']


def test_empty_graph_options():
    model = GraphModel()
    options = build_echart_options(model, LayoutTable())
    assert options['series'][0]['data'] == []
    assert options['series'][0]['links'] == []


def click(component_type='series', name=None, data_type='node'):
    """Stand-in for the EChartPointClickEventArguments NiceGUI passes to on_point_click."""
    return SimpleNamespace(component_type=component_type, name=name, data_type=data_type)


def test_click_on_vertex_resolves_id(graph):
    model, _ = graph
    assert resolve_clicked_vertex(click(name='A'), model) == 'A'


def test_click_on_edge_or_other_component_is_ignored(graph):
    model, _ = graph
    assert resolve_clicked_vertex(click(name='A > B', data_type='edge'), model) is None
    assert resolve_clicked_vertex(click(component_type='title', name='A'), model) is None


def test_click_on_removed_vertex_is_ignored(graph):
    model, _ = graph
    model.remove_vertex('C')
    assert resolve_clicked_vertex(click(name='C'), model) is None
    assert resolve_clicked_vertex(SimpleNamespace(), model) is None


def test_tooltip_degrees_match_model(graph):
    model, layout = graph
    model.add_edge('C', 'C')
    data = build_echart_options(model, layout)['series'][0]['data']
    for d in data:
        in_deg, out_deg = model.degree(d['id'])
        assert f"in: {in_deg} · out: {out_deg}" in d['tooltip']['formatter']

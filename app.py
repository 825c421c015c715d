"""
Main NiceGUI application for the Digraph Editor.

Each browser page owns one GraphModel (plus its LayoutTable and GraphActions).
Every control calls an action and then render_all(), which rebuilds the
diagram (ui.echart), the adjacency list/matrix panels, the dropdowns and the
property panel from the model. No graph state lives at module level.
"""

import logging
import sys

from nicegui import ui
from dotenv import load_dotenv
load_dotenv()

from digraph_editor import GraphModel, LayoutTable, GraphActions
from digraph_editor.config import load_settings
from digraph_editor.chart_builder import build_echart_options, resolve_clicked_vertex
from digraph_editor.export import to_dot_source
from digraph_editor.views import (
    render_adjacency_list,
    render_adjacency_matrix,
    format_properties,
    vertex_options,
    restore_selection,
)

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

ui.add_head_html('''
    <style>
        .adjacency-panel table { border-collapse: collapse; }
        .adjacency-panel th, .adjacency-panel td {
            border: 1px solid #475569; /* slate-600 */
            padding: 4px 10px;
            text-align: center;
        }
        .adjacency-panel ul { margin: 0; padding-left: 1.2em; }
    </style>
''', shared=True)


def notify_result(result, quiet_success: bool = True):
    """Show an action result. Failures always surface; successes only when asked."""
    if not result['success']:
        ui.notify(result['message'], type='negative', position='bottom-right')
    elif not quiet_success:
        ui.notify(result['message'], type='positive', position='bottom-right')


def run_edge_action(action, from_select, to_select):
    """
    Run an edge action on the values of a from/to select pair, then put both
    selects back on their placeholder, whether or not the edge was accepted.
    """
    result = action(from_select.value, to_select.value)
    notify_result(result)
    from_select.set_value(None)
    to_select.set_value(None)
    return result


@ui.page('/')
def main_page():
    if settings.dark_mode:
        ui.dark_mode().enable()

    layout = LayoutTable(
        width=settings.canvas_width,
        height=settings.canvas_height,
        margin=settings.vertex_margin,
    )
    model = GraphModel(layout=layout)
    actions = GraphActions(model)

    # We use a container for mutable page state to be accessible in closures
    state = {
        'selected_vertex': None,
        'chart': None,
        'list_html': None,
        'matrix_html': None,
        'selects': [],
        'props': {},
    }

    # --- Rendering ---

    def render_graph():
        chart = state['chart']
        if not chart:
            return
        chart.options.clear()
        chart.options.update(build_echart_options(model, layout, selected=state['selected_vertex']))
        chart.update()

    def render_views():
        state['list_html'].set_content(render_adjacency_list(model.adjacency_list()))
        matrix, ids = model.adjacency_matrix()
        state['matrix_html'].set_content(render_adjacency_matrix(matrix, ids))

    def update_vertex_selects():
        options = vertex_options(model)
        for select in state['selects']:
            select.set_options(options, value=restore_selection(options, select.value))

    def render_properties():
        for key, text in format_properties(model.properties()).items():
            state['props'][key].set_text(text)

    def render_all():
        if state['selected_vertex'] and not model.has_vertex(state['selected_vertex']):
            state['selected_vertex'] = None
        render_graph()
        render_views()
        update_vertex_selects()
        render_properties()

    # --- Actions ---

    def do_add_vertex():
        result = actions.add_vertex()
        notify_result(result)
        render_all()

    def do_remove_vertex():
        result = actions.remove_vertex(remove_vertex_select.value)
        notify_result(result)
        render_all()

    def do_add_edge():
        run_edge_action(actions.add_edge, add_from_select, add_to_select)
        render_all()

    def do_remove_edge():
        run_edge_action(actions.remove_edge, remove_from_select, remove_to_select)
        render_all()

    def do_download_dot():
        ui.download(to_dot_source(model).encode('utf-8'), 'graph.dot')

    def handle_chart_click(event):
        vertex_id = resolve_clicked_vertex(event, model)
        if not vertex_id:
            return
        state['selected_vertex'] = vertex_id
        remove_vertex_select.set_value(vertex_id)
        render_graph()

    def set_view_mode(e):
        is_list = e.value == 'list'
        list_card.set_visibility(is_list)
        matrix_card.set_visibility(not is_list)

    # --- Layout Construction ---

    ui.label(settings.title).classes('text-2xl font-bold')

    with ui.row().classes('w-full gap-6 items-start no-wrap'):

        # 1. Controls
        with ui.card().classes('w-72 gap-3'):
            ui.label('Vertices').classes('text-lg font-bold')
            ui.button('Add Vertex', icon='add_circle', on_click=do_add_vertex).classes('w-full')
            with ui.row().classes('w-full items-center no-wrap gap-2'):
                remove_vertex_select = ui.select([], label='Select Vertex').classes('grow')
                ui.button(icon='delete', on_click=do_remove_vertex).props('color=negative').tooltip('Remove Vertex')

            ui.separator()
            ui.label('Edges').classes('text-lg font-bold')
            with ui.row().classes('w-full items-center no-wrap gap-2'):
                add_from_select = ui.select([], label='From Vertex').classes('grow')
                add_to_select = ui.select([], label='To Vertex').classes('grow')
            ui.button('Add Edge', icon='trending_flat', on_click=do_add_edge).classes('w-full')
            with ui.row().classes('w-full items-center no-wrap gap-2'):
                remove_from_select = ui.select([], label='From Vertex').classes('grow')
                remove_to_select = ui.select([], label='To Vertex').classes('grow')
            ui.button('Remove Edge', icon='link_off', on_click=do_remove_edge).props('color=negative').classes('w-full')

            ui.separator()
            ui.button('Download DOT', icon='download', on_click=do_download_dot).props('flat').classes('w-full')

        state['selects'] = [
            remove_vertex_select,
            add_from_select,
            add_to_select,
            remove_from_select,
            remove_to_select,
        ]

        # 2. Diagram
        with ui.card().classes('p-0'):
            state['chart'] = ui.echart(
                build_echart_options(model, layout),
                on_point_click=handle_chart_click,
            ).style(f'width: {settings.canvas_width}px; height: {settings.canvas_height}px;')

        # 3. Representations and properties
        with ui.column().classes('gap-4 min-w-[280px]'):
            ui.toggle(
                {'list': 'Adjacency List', 'matrix': 'Adjacency Matrix'},
                value='list',
                on_change=set_view_mode,
            )
            list_card = ui.card().classes('w-full adjacency-panel')
            with list_card:
                state['list_html'] = ui.html('')
            matrix_card = ui.card().classes('w-full adjacency-panel')
            with matrix_card:
                state['matrix_html'] = ui.html('')
            matrix_card.set_visibility(False)

            with ui.card().classes('w-full'):
                ui.label('Graph Properties').classes('text-lg font-bold')
                with ui.grid(columns=2).classes('gap-x-6 gap-y-1'):
                    for key, caption in [
                        ('vertices', 'Vertices'),
                        ('edges', 'Edges'),
                        ('density', 'Density'),
                        ('sources', 'Source Nodes'),
                        ('sinks', 'Sink Nodes'),
                    ]:
                        ui.label(caption).classes('text-gray-400')
                        state['props'][key] = ui.label('')

    # Initial render
    render_all()
    logger.debug("Editor page ready")


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title=settings.title,
        port=settings.port,
        reload=not getattr(sys, 'frozen', False),
    )

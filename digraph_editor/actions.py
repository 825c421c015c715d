"""
Graph Actions - user-facing commands for the editor page.

Translates button clicks into GraphModel mutations. Results come back as
small dicts ({'success': bool, 'message': str}) so the page only has to show
them with ui.notify; nothing here imports NiceGUI.
"""

import logging
from typing import Dict, Any, Optional

from digraph_editor.model import GraphModel, InvalidReference

logger = logging.getLogger(__name__)

MISSING_ENDPOINT_MESSAGE = "Both vertices must exist to add an edge."


class GraphActions:
    """
    Executes editor commands against a GraphModel.

    Selections from the dropdowns arrive as strings, with None or "" when the
    placeholder is still selected. Those are rejected here and never reach
    the model.
    """

    def __init__(self, model: GraphModel):
        self.model = model

    def add_vertex(self) -> Dict[str, Any]:
        vertex_id = self.model.add_vertex()
        logger.info(f"Vertex {vertex_id} added ({len(self.model)} total)")
        return {'success': True, 'message': f"Added vertex {vertex_id}", 'vertex_id': vertex_id}

    def remove_vertex(self, vertex_id: Optional[str]) -> Dict[str, Any]:
        if not vertex_id:
            return {'success': False, 'message': "Select a vertex to remove."}

        existed = self.model.has_vertex(vertex_id)
        self.model.remove_vertex(vertex_id)
        if existed:
            logger.info(f"Vertex {vertex_id} removed")
            return {'success': True, 'message': f"Removed vertex {vertex_id}"}
        return {'success': True, 'message': f"Vertex {vertex_id} was already gone"}

    def add_edge(self, source: Optional[str], target: Optional[str]) -> Dict[str, Any]:
        """
        Add source -> target.

        A missing endpoint is a user error and is reported back; a duplicate
        edge is accepted quietly.
        """
        if not source or not target:
            return {'success': False, 'message': "Select both vertices first."}

        try:
            added = self.model.add_edge(source, target)
        except InvalidReference as e:
            logger.warning(f"Rejected edge: {e}")
            return {'success': False, 'message': MISSING_ENDPOINT_MESSAGE}

        if added:
            logger.info(f"Edge {source} -> {target} added")
            return {'success': True, 'message': f"Added edge {source} → {target}"}
        return {'success': True, 'message': f"Edge {source} → {target} already exists"}

    def remove_edge(self, source: Optional[str], target: Optional[str]) -> Dict[str, Any]:
        if not source or not target:
            return {'success': False, 'message': "Select both vertices first."}

        removed = self.model.remove_edge(source, target)
        if removed:
            logger.info(f"Edge {source} -> {target} removed")
            return {'success': True, 'message': f"Removed edge {source} → {target}"}
        return {'success': True, 'message': f"No edge {source} → {target}"}

"""
Digraph Editor - interactive editor for small directed graphs.

Core objects:
- GraphModel: vertices, edges and derived views (list, matrix, properties)
- LayoutTable: display positions kept beside the model
- GraphActions: user-facing commands used by the NiceGUI page
"""

__version__ = "0.1.0"

from digraph_editor.model import GraphModel, GraphProperties, Edge, GraphError, InvalidReference
from digraph_editor.layout import LayoutTable, Position
from digraph_editor.actions import GraphActions

__all__ = [
    'GraphModel',
    'GraphProperties',
    'Edge',
    'GraphError',
    'InvalidReference',
    'LayoutTable',
    'Position',
    'GraphActions',
]

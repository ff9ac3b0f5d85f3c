"""
Import/export formats for graphs.
"""

from .base import GraphFormat, GraphModel
from .edge_list import EdgeListModel, TextFormat

__all__ = ['GraphFormat', 'GraphModel', 'EdgeListModel', 'TextFormat']

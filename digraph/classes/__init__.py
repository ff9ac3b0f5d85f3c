"""
Core data classes for graph representation.

This module contains the vertex and edge types used throughout the
digraph library.
"""

from .vertex import pyvertex
from .edge import pyedge
from .utils import GraphUtils

__all__ = [
    'pyvertex',
    'pyedge',
    'GraphUtils',
]

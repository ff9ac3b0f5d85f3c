"""
Traversal algorithms for directed graphs.
"""

from .traversal import GraphTraversal

__all__ = ['GraphTraversal']

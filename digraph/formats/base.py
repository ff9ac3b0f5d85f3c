"""
Base contracts for graph import/export formats.

A format reads a stream into a format-specific model, and writes a model back
out. Models know how to compile themselves into a Graph for analysis.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from ..core.graph import Graph


class GraphModel(ABC):
    """Format-specific intermediate representation of a graph."""

    @abstractmethod
    def compile(self) -> Graph:
        """Convert this model to a uniform Graph representation."""


class GraphFormat(ABC):
    """A readable and writable graph serialization format."""

    @abstractmethod
    def get_supported_content_types(self) -> List[str]:
        """MIME types this format can handle."""

    @abstractmethod
    def read(self, source: Any, model_consumer: Optional[Callable[[GraphModel], Any]] = None) -> GraphModel:
        """
        Read a model from a path or text stream.

        Args:
            source: Filesystem path or open text stream
            model_consumer: Optional callback receiving the parsed model

        Returns:
            The parsed model
        """

    @abstractmethod
    def write(self, target: Any, model: GraphModel) -> None:
        """Write a model to a path or text stream."""

"""
Abstract base classes for dependency inference.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import Component, DependencyEdge, InferenceResult
from .index import InventoryIndex


class DependencyInferencer(ABC):
    """
    Abstract base class for per-type dependency inference.

    One implementation exists per component type so a parser-backed
    implementation can replace the naming heuristics for a single type without
    touching the closure resolver.
    """

    @abstractmethod
    def infer_dependencies(self, component: Component, index: InventoryIndex) -> InferenceResult:
        """
        Derive the components a component requires.

        Args:
            component: Component to analyze
            index: Lookup index over the full inventory

        Returns:
            InferenceResult with outward edges and human-readable notes
        """
        pass

    @staticmethod
    def declared_edges(component: Component) -> List[DependencyEdge]:
        """Edges taken verbatim from the component's declared requires list."""
        return [
            DependencyEdge(source=component.id, target=dep.id, required=dep.required)
            for dep in component.dependencies
        ]

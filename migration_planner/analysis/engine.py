"""
Entry points of the resolution engine: closure analysis and migration planning.
"""

import logging
import time
from typing import Dict, Iterable, List, Optional

from ..config import Config
from ..models import AnalysisResult, Component, InferenceResult
from .categorizer import categorize
from .classifier import ComponentClassifier
from .graph import DependencyGraph, MigrationPlan
from .index import InventoryIndex
from .inferencers import InferencerRegistry
from .resolver import ClosureResolver

logger = logging.getLogger(__name__)


class MigrationAnalyzer:
    """
    Resolves, categorizes and orders components of an inventory snapshot.

    Holds no state between calls; every call builds its own index or graph
    from the inventory it is given.
    """

    def __init__(self, classifier: Optional[ComponentClassifier] = None,
                 registry: Optional[InferencerRegistry] = None,
                 config: Optional[Config] = None):
        """
        Initialize the analyzer.

        Args:
            classifier: Optional ComponentClassifier. Built from config when omitted.
            registry: Optional InferencerRegistry with one inferencer per component type
            config: Optional Config used for the default classifier
        """
        self.config = config or Config()
        self.classifier = classifier or ComponentClassifier.from_config(self.config.classifier)
        self.registry = registry or InferencerRegistry.default()
        self.resolver = ClosureResolver(self.registry)

    def analyze(self, selected_ids: Iterable[str], inventory: Iterable[Component]) -> AnalysisResult:
        """
        Resolve the closure of a selection and categorize it.

        Args:
            selected_ids: Ids of the components the user selected
            inventory: Full component inventory of the source org

        Returns:
            AnalysisResult for the selection
        """
        start_time = time.time()
        selected_ids = list(selected_ids)
        logger.info(f"Analyzing dependencies for {len(selected_ids)} selected components")

        index = InventoryIndex(inventory, self.classifier)
        logger.debug(f"Indexed {len(index)} inventory components")

        closure = self.resolver.resolve(selected_ids, index)
        result = categorize(
            closure.components,
            closure.notes,
            classifier=self.classifier,
            selected=closure.roots,
        )

        processing_time = time.time() - start_time
        logger.info(
            f"Analysis complete: {len(result.closure)} in closure, "
            f"{len(result.custom_to_migrate)} custom dependencies, "
            f"{len(result.standard_groups)} standard objects with custom fields "
            f"({processing_time:.2f}s)"
        )
        return result

    def infer_batch(self, components: Iterable[Component],
                    inventory: Iterable[Component]) -> Dict[str, InferenceResult]:
        """
        Run each component's inferencer once, without following edges.

        Returns:
            Inference results keyed by component id
        """
        index = InventoryIndex(inventory, self.classifier)
        return {component.id: self.registry.infer(component, index) for component in components}

    def plan_order(self, inventory: Iterable[Component]) -> MigrationPlan:
        """
        Build the declared-edge graph and compute cycles and a migration order.

        Args:
            inventory: Full component inventory

        Returns:
            MigrationPlan whose graph answers readiness queries
        """
        graph = DependencyGraph(inventory)
        cycles = graph.find_cycles()
        order = graph.migration_order()

        logger.info(
            f"Planned migration order for {len(order)} components "
            f"({len(graph.edges)} edges, {len(cycles)} cycles)"
        )
        return MigrationPlan(
            order=order,
            cycles=cycles,
            notes={component_id: list(entries) for component_id, entries in graph.notes.items()},
            graph=graph,
        )


def create_analyzer(config: Optional[Config] = None,
                    registry: Optional[InferencerRegistry] = None) -> MigrationAnalyzer:
    """
    Create a MigrationAnalyzer from configuration.

    Args:
        config: Optional Config. Defaults are used when omitted.
        registry: Optional InferencerRegistry overriding the default inferencers

    Returns:
        Configured MigrationAnalyzer
    """
    return MigrationAnalyzer(config=config, registry=registry)


def analyze(selected_ids: Iterable[str], inventory: List[Component],
            config: Optional[Config] = None) -> AnalysisResult:
    """Closure and categorization pipeline with default inferencers."""
    return create_analyzer(config).analyze(selected_ids, inventory)


def plan_order(inventory: List[Component]) -> MigrationPlan:
    """Graph pipeline: cycles, migration order and readiness queries."""
    return MigrationAnalyzer().plan_order(inventory)

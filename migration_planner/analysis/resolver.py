"""
Transitive dependency closure over an inventory snapshot.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..models import Component, InferenceResult
from .classifier import ComponentClassifier
from .index import InventoryIndex
from .inferencers import InferencerRegistry

logger = logging.getLogger(__name__)


@dataclass
class ClosureResult:
    """Closure members in discovery order plus everything noted on the way."""
    roots: List[Component] = field(default_factory=list)
    components: List[Component] = field(default_factory=list)
    notes: Dict[str, List[str]] = field(default_factory=dict)
    inferences: Dict[str, InferenceResult] = field(default_factory=dict)


class ClosureResolver:
    """Breadth-first expansion of a root selection through inferred edges."""

    def __init__(self, registry: Optional[InferencerRegistry] = None):
        self.registry = registry or InferencerRegistry.default()

    def resolve(self, root_ids: Iterable[str], index: InventoryIndex) -> ClosureResult:
        """
        Compute every component the roots transitively require.

        Roots are visited in inventory order so repeated runs produce the same
        discovery order. Unknown roots and unresolved targets are noted and
        skipped; this method never raises for missing data.

        Args:
            root_ids: Ids of the selected components
            index: Lookup index over the full inventory

        Returns:
            ClosureResult with the roots first, then discovered components
        """
        wanted = set(root_ids)
        result = ClosureResult()

        for missing_id in sorted(wanted - set(index.by_id)):
            logger.warning(f"Selected component {missing_id} not found in inventory")
            result.notes.setdefault(missing_id, []).append(
                "Selected component not found in inventory; skipped"
            )

        visited = set()
        queue = deque()
        for component_id, component in index.by_id.items():
            if component_id in wanted:
                visited.add(component_id)
                queue.append(component)
                result.roots.append(component)

        while queue:
            component = queue.popleft()
            result.components.append(component)

            inference = self.registry.infer(component, index)
            result.inferences[component.id] = inference
            component_notes = result.notes.setdefault(component.id, [])
            component_notes.extend(inference.notes)

            for edge in inference.edges:
                target = index.get(edge.target)
                if target is None:
                    component_notes.append(
                        f"Dependency '{edge.target}' not found in inventory; skipped"
                    )
                    continue
                if edge.target in visited:
                    continue
                visited.add(edge.target)
                queue.append(target)
                logger.debug(f"Discovered dependency: {target.name} ({target.type.value}) via {component.name}")

        logger.info(
            f"Resolved closure of {len(result.roots)} selected components: "
            f"{len(result.components)} components total"
        )
        return result


def resolve_closure(root_ids: Iterable[str], inventory: Iterable[Component],
                    classifier: Optional[ComponentClassifier] = None) -> List[Component]:
    """
    Resolve the dependency closure of a selection with the default inferencers.

    Args:
        root_ids: Ids of the selected components
        inventory: Full component inventory

    Returns:
        Closure members in discovery order, roots first
    """
    index = InventoryIndex(inventory, classifier or ComponentClassifier())
    return ClosureResolver().resolve(root_ids, index).components

"""
Per-type dependency inferencers.

Declared requires edges always come first and are returned verbatim. Objects
and fields add naming-convention edges on top; code-bearing types would need
their bodies parsed, which is not attempted.
"""

import logging
from typing import Dict, List, Optional

from ..models import Component, ComponentType, DependencyEdge, InferenceResult
from .base import DependencyInferencer
from .index import InventoryIndex

logger = logging.getLogger(__name__)

BODY_PARSING_NOTE = (
    "Note: true dependency discovery requires parsing the component body, not implemented"
)


def _start_result(component: Component) -> InferenceResult:
    result = InferenceResult(component_id=component.id)
    declared = DependencyInferencer.declared_edges(component)
    if declared:
        result.edges.extend(declared)
        result.notes.append(f"Using {len(declared)} declared dependencies")
    return result


def _add_edge(result: InferenceResult, edge: DependencyEdge) -> bool:
    """Append an inferred edge unless a declared edge already targets it."""
    if any(existing.target == edge.target for existing in result.edges):
        return False
    result.edges.append(edge)
    return True


class ObjectDependencyInferencer(DependencyInferencer):
    """An object requires every field whose qualified name it prefixes."""

    def infer_dependencies(self, component: Component, index: InventoryIndex) -> InferenceResult:
        result = _start_result(component)
        result.notes.append("Object dependency analysis: finding related fields")

        found = 0
        for field in index.fields_of(component.api_name):
            if _add_edge(result, DependencyEdge(source=component.id, target=field.id, required=True)):
                found += 1

        if found:
            result.notes.append(f"Found {found} custom fields for this object")

        return result


class FieldDependencyInferencer(DependencyInferencer):
    """A field requires the object named by its parent segment."""

    def infer_dependencies(self, component: Component, index: InventoryIndex) -> InferenceResult:
        result = _start_result(component)
        result.notes.append("Field dependency analysis: finding parent object")

        object_name = index.classifier.parent_name(component)
        if object_name is None:
            result.notes.append(
                f"Qualified name '{component.api_name}' has no parent separator; "
                f"parent inference skipped"
            )
            return result

        parent = index.object_named(object_name)
        if parent is None:
            result.notes.append(
                f"Parent object '{object_name}' not found in inventory; assumed to pre-exist in the target org"
            )
            return result

        _add_edge(result, DependencyEdge(source=component.id, target=parent.id, required=True))
        result.notes.append(f"Found parent object: {parent.name}")
        return result


class MetadataOnlyInferencer(DependencyInferencer):
    """Types whose dependencies live in their bodies; only declared edges are used."""

    def __init__(self, label: str):
        self.label = label

    def infer_dependencies(self, component: Component, index: InventoryIndex) -> InferenceResult:
        result = _start_result(component)
        result.notes.append(f"{self.label} dependency analysis: basic metadata-based analysis")
        result.notes.append(BODY_PARSING_NOTE)
        return result


class InferencerRegistry:
    """Maps component types to their inferencer."""

    def __init__(self, inferencers: Optional[Dict[ComponentType, DependencyInferencer]] = None):
        self._inferencers: Dict[ComponentType, DependencyInferencer] = dict(inferencers or {})

    @classmethod
    def default(cls) -> 'InferencerRegistry':
        return cls({
            ComponentType.OBJECT: ObjectDependencyInferencer(),
            ComponentType.FIELD: FieldDependencyInferencer(),
            ComponentType.APEX: MetadataOnlyInferencer("Apex"),
            ComponentType.TRIGGER: MetadataOnlyInferencer("Trigger"),
            ComponentType.VISUALFORCE: MetadataOnlyInferencer("Visualforce"),
            ComponentType.FLOW: MetadataOnlyInferencer("Flow"),
            ComponentType.LWC: MetadataOnlyInferencer("LWC"),
        })

    def register(self, component_type: ComponentType, inferencer: DependencyInferencer) -> None:
        """Replace the inferencer used for one component type."""
        self._inferencers[component_type] = inferencer

    def get(self, component_type: ComponentType) -> Optional[DependencyInferencer]:
        return self._inferencers.get(component_type)

    def supported_types(self) -> List[ComponentType]:
        return list(self._inferencers.keys())

    def infer(self, component: Component, index: InventoryIndex) -> InferenceResult:
        inferencer = self.get(component.type)
        if inferencer is None:
            logger.debug(f"No inferencer registered for type {component.type}")
            result = _start_result(component)
            result.notes.append(f"No dependency inferencer available for type '{_type_label(component)}'")
            return result
        return inferencer.infer_dependencies(component, index)


def _type_label(component: Component) -> str:
    return getattr(component.type, 'value', str(component.type))


_default_registry = InferencerRegistry.default()


def infer_dependencies(component: Component, index: InventoryIndex) -> InferenceResult:
    """Infer dependencies with the default per-type inferencers."""
    return _default_registry.infer(component, index)

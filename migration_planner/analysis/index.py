"""
Read-only lookup index over an inventory snapshot.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..models import Component, ComponentType
from .classifier import ComponentClassifier


class InventoryIndex:
    """
    Lookup tables built once per analysis run.

    The index only aliases the caller's component records and never mutates
    them. Later duplicates of an id replace earlier ones.
    """

    def __init__(self, inventory: Iterable[Component], classifier: ComponentClassifier):
        by_id: Dict[str, Component] = {}
        for component in inventory:
            by_id[component.id] = component

        objects_by_name: Dict[str, Component] = {}
        fields_by_parent: Dict[str, List[Component]] = {}

        for component in by_id.values():
            if component.type == ComponentType.OBJECT:
                objects_by_name.setdefault(component.api_name, component)
            elif component.type == ComponentType.FIELD:
                parent = classifier.parent_name(component)
                if parent is not None:
                    fields_by_parent.setdefault(parent, []).append(component)

        self._by_id = MappingProxyType(by_id)
        self._objects_by_name = MappingProxyType(objects_by_name)
        self._fields_by_parent = MappingProxyType(
            {parent: tuple(fields) for parent, fields in fields_by_parent.items()}
        )
        self.classifier = classifier

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, component_id: str) -> bool:
        return component_id in self._by_id

    @property
    def by_id(self) -> Mapping[str, Component]:
        return self._by_id

    def get(self, component_id: str) -> Optional[Component]:
        return self._by_id.get(component_id)

    def object_named(self, api_name: str) -> Optional[Component]:
        return self._objects_by_name.get(api_name)

    def fields_of(self, object_name: str) -> Tuple[Component, ...]:
        return self._fields_by_parent.get(object_name, ())

"""
Partition of a dependency closure into what has to be migrated.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..models import AnalysisResult, Component, ComponentType, StandardObjectGroup
from .classifier import ComponentClassifier

logger = logging.getLogger(__name__)


def group_fields_by_parent(fields: Iterable[Component],
                           classifier: ComponentClassifier) -> List[StandardObjectGroup]:
    """
    Group fields under their parent object name.

    First-seen order is kept for groups and for fields within a group. Fields
    without a parent segment are dropped.
    """
    groups: Dict[str, StandardObjectGroup] = {}
    for field in fields:
        object_name = classifier.parent_name(field)
        if object_name is None:
            continue
        if object_name not in groups:
            groups[object_name] = StandardObjectGroup(object_name=object_name)
        groups[object_name].custom_fields.append(field)
    return list(groups.values())


def categorize(closure: Iterable[Component],
               notes: Optional[Dict[str, List[str]]] = None,
               classifier: Optional[ComponentClassifier] = None,
               selected: Optional[Iterable[Component]] = None) -> AnalysisResult:
    """
    Categorize a closure into custom components and standard objects with custom fields.

    Every component lands in exactly one of: excluded (platform-standard),
    custom_to_migrate, or one standard-object group.

    Args:
        closure: Closure members, in the order they should be reported
        notes: Analysis notes keyed by component id; copied, not mutated
        classifier: Classifier to use. Defaults to the standard naming conventions.
        selected: Originally selected components, carried into the result

    Returns:
        AnalysisResult for the closure
    """
    classifier = classifier or ComponentClassifier()
    closure = list(closure)
    result_notes = {component_id: list(entries) for component_id, entries in (notes or {}).items()}

    custom_to_migrate: List[Component] = []
    staged_fields: List[Component] = []
    excluded = 0

    for component in closure:
        if classifier.is_platform_standard(component):
            excluded += 1
            continue

        if component.type == ComponentType.FIELD and classifier.is_custom_field_on_standard_parent(component):
            staged_fields.append(component)
        else:
            custom_to_migrate.append(component)

        if component.is_packaged:
            result_notes.setdefault(component.id, []).append(
                f"Installed package component (namespace '{component.namespace}'); "
                f"the package must be present in the target org"
            )

    standard_groups = group_fields_by_parent(staged_fields, classifier)

    logger.info(
        f"Categorized {len(closure)} components: {len(custom_to_migrate)} custom, "
        f"{len(staged_fields)} custom fields on {len(standard_groups)} standard objects, "
        f"{excluded} standard excluded"
    )

    return AnalysisResult(
        selected=list(selected) if selected is not None else [],
        closure=closure,
        custom_to_migrate=custom_to_migrate,
        standard_groups=standard_groups,
        notes=result_notes,
    )

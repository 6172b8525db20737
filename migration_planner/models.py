"""
Core data models for the Org Migration Planner.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set


class ComponentType(Enum):
    """Kinds of migratable configuration components."""
    APEX = "apex"                # Code module
    TRIGGER = "trigger"          # Trigger rule
    OBJECT = "object"            # Data object
    FIELD = "field"              # Data field
    FLOW = "flow"                # Automation flow
    VISUALFORCE = "visualforce"  # Page
    LWC = "lwc"                  # UI bundle


class MigrationStatus(Enum):
    """Enumeration of possible migration statuses."""
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    BLOCKED = "blocked"
    SKIPPED = "skipped"


@dataclass
class DependencyRef:
    """One entry of a declared requires / required-by list."""
    id: str
    name: str
    type: Optional[ComponentType] = None
    required: bool = True


@dataclass
class Component:
    """Represents a single configuration component from an org inventory."""
    id: str
    name: str
    api_name: str        # Qualified name, e.g. Account.Loyalty__c
    type: ComponentType
    namespace: Optional[str] = None
    dependencies: List[DependencyRef] = None  # Declared requires
    dependents: List[DependencyRef] = None    # Declared required-by
    migration_status: MigrationStatus = MigrationStatus.NOT_STARTED
    description: Optional[str] = None
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        """Initialize list and dict fields as empty if None."""
        if self.dependencies is None:
            self.dependencies = []
        if self.dependents is None:
            self.dependents = []
        if self.metadata is None:
            self.metadata = {}

    @property
    def is_packaged(self) -> bool:
        """True when the component comes from an installed package."""
        return bool(self.namespace)


@dataclass(frozen=True)
class DependencyEdge:
    """Directed edge meaning 'source requires target'."""
    source: str
    target: str
    required: bool = True


@dataclass
class InferenceResult:
    """Edges and notes derived for one component by its inferencer."""
    component_id: str
    edges: List[DependencyEdge] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)


@dataclass
class StandardObjectGroup:
    """Custom fields grouped under the platform-standard object that owns them."""
    object_name: str
    custom_fields: List[Component] = field(default_factory=list)


@dataclass
class AnalysisResult:
    """Complete result of a closure and categorization run."""
    selected: List[Component]
    closure: List[Component]
    custom_to_migrate: List[Component]
    standard_groups: List[StandardObjectGroup]
    notes: Dict[str, List[str]]

    @property
    def closure_ids(self) -> Set[str]:
        return {component.id for component in self.closure}

    @property
    def discovered(self) -> List[Component]:
        """Closure members that were not part of the original selection."""
        selected_ids = {component.id for component in self.selected}
        return [c for c in self.closure if c.id not in selected_ids]

    @property
    def total_custom_fields(self) -> int:
        """Number of custom fields across all standard-object groups."""
        return sum(len(group.custom_fields) for group in self.standard_groups)


@dataclass
class TypeStats:
    """Per component type migration progress."""
    total: int = 0
    done: int = 0


@dataclass
class MigrationStats:
    """Migration progress over a whole inventory."""
    total: int
    by_status: Dict[MigrationStatus, int]
    by_type: Dict[ComponentType, TypeStats]

    @property
    def completion_percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return round(self.by_status.get(MigrationStatus.DONE, 0) / self.total * 100, 2)

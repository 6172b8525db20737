"""
Dependency graph over a full inventory: cycle detection, migration ordering
and readiness queries.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Union

from ..models import (
    Component,
    ComponentType,
    DependencyEdge,
    MigrationStats,
    MigrationStatus,
    TypeStats,
)

logger = logging.getLogger(__name__)

ComponentRef = Union[Component, str]

_VISITING = 1
_DONE = 2


class DependencyGraph:
    """
    Declared requires edges over every component of an inventory.

    Built once per planning run. Edges whose target is not in the inventory
    are dropped and noted. Migration statuses are read from the caller's
    component records at query time and never written.
    """

    def __init__(self, inventory: Iterable[Component]):
        self.nodes: Dict[str, Component] = {}
        for component in inventory:
            self.nodes[component.id] = component

        self.edges: List[DependencyEdge] = []
        self.notes: Dict[str, List[str]] = {}
        self._requires: Dict[str, List[DependencyEdge]] = {node_id: [] for node_id in self.nodes}
        self._adjacency: Dict[str, List[str]] = {node_id: [] for node_id in self.nodes}
        self._reverse: Dict[str, List[str]] = {node_id: [] for node_id in self.nodes}

        for component in self.nodes.values():
            for dep in component.dependencies:
                if dep.id not in self.nodes:
                    self.notes.setdefault(component.id, []).append(
                        f"Declared dependency '{dep.id}' ({dep.name}) not found in inventory; edge dropped"
                    )
                    continue
                edge = DependencyEdge(source=component.id, target=dep.id, required=dep.required)
                self.edges.append(edge)
                self._requires[component.id].append(edge)
                if dep.id not in self._adjacency[component.id]:
                    self._adjacency[component.id].append(dep.id)
                    self._reverse[dep.id].append(component.id)

        # Declared required-by entries extend the reverse walk only
        for component in self.nodes.values():
            for dependent in component.dependents:
                reverse = self._reverse[component.id]
                if dependent.id in self.nodes and dependent.id not in reverse:
                    reverse.append(dependent.id)

        if self.notes:
            dropped = sum(len(entries) for entries in self.notes.values())
            logger.warning(f"Dropped {dropped} dangling dependency edges while building graph")
        logger.debug(f"Built dependency graph with {len(self.nodes)} nodes and {len(self.edges)} edges")

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, component_id: str) -> Optional[Component]:
        return self.nodes.get(component_id)

    def _walk(self, on_back_edge: Optional[Callable[[List[str], str], None]] = None,
              on_finish: Optional[Callable[[str], None]] = None) -> None:
        """
        Iterative depth-first traversal from every node in inventory order.

        A node is finished only after all of its dependencies. Reaching a node
        that is still on the current path calls on_back_edge with that path and
        does not re-enter it.
        """
        state: Dict[str, int] = {}

        for start in self.nodes:
            if start in state:
                continue

            path = [start]
            position = {start: 0}
            state[start] = _VISITING
            iterators = [iter(self._adjacency[start])]

            while iterators:
                for next_id in iterators[-1]:
                    next_state = state.get(next_id)
                    if next_state is None:
                        state[next_id] = _VISITING
                        position[next_id] = len(path)
                        path.append(next_id)
                        iterators.append(iter(self._adjacency[next_id]))
                        break
                    if next_state == _VISITING and on_back_edge is not None:
                        on_back_edge(path[position[next_id]:], next_id)
                else:
                    iterators.pop()
                    node_id = path.pop()
                    del position[node_id]
                    state[node_id] = _DONE
                    if on_finish is not None:
                        on_finish(node_id)

    def find_cycles(self) -> List[List[str]]:
        """
        Find circular dependencies.

        Returns:
            One id list per back edge found, from the first occurrence of the
            repeated node to the node that closes the loop
        """
        cycles: List[List[str]] = []
        self._walk(on_back_edge=lambda cycle, _: cycles.append(list(cycle)))
        if cycles:
            logger.warning(f"Found {len(cycles)} circular dependencies")
        return cycles

    def migration_order(self) -> List[Component]:
        """
        Components in the order they should be migrated, dependencies first.

        Inside a cycle the edge that closes the loop is ignored, so that
        subgraph's order cannot honour every edge.
        """
        order: List[Component] = []
        self._walk(on_finish=lambda node_id: order.append(self.nodes[node_id]))
        return order

    def can_migrate(self, component: ComponentRef) -> bool:
        """
        Check if a component can be migrated (all required dependencies are done).

        Unknown components cannot be migrated.
        """
        component_id = component.id if isinstance(component, Component) else component
        if component_id not in self.nodes:
            return False

        for edge in self._requires[component_id]:
            if edge.required and self.nodes[edge.target].migration_status != MigrationStatus.DONE:
                return False
        return True

    def blocked_components(self) -> List[Component]:
        """Pending or in-progress components whose required dependencies are not done."""
        return [
            component for component in self.nodes.values()
            if component.migration_status in (MigrationStatus.NOT_STARTED, MigrationStatus.IN_PROGRESS)
            and not self.can_migrate(component.id)
        ]

    def ready_to_migrate(self) -> List[Component]:
        """Components not started yet whose required dependencies are all done."""
        return [
            component for component in self.nodes.values()
            if component.migration_status == MigrationStatus.NOT_STARTED
            and self.can_migrate(component.id)
        ]

    def _transitive(self, start_id: str, adjacency: Dict[str, List[str]]) -> List[Component]:
        if start_id not in self.nodes:
            return []
        found: List[Component] = []
        seen = {start_id}
        stack = list(reversed(adjacency[start_id]))
        while stack:
            node_id = stack.pop()
            if node_id in seen:
                continue
            seen.add(node_id)
            found.append(self.nodes[node_id])
            stack.extend(reversed(adjacency[node_id]))
        return found

    def all_dependencies(self, component_id: str) -> List[Component]:
        """Every component the given one requires, directly or transitively."""
        return self._transitive(component_id, self._adjacency)

    def all_dependents(self, component_id: str) -> List[Component]:
        """Every component that requires the given one, directly or transitively."""
        return self._transitive(component_id, self._reverse)

    def stats(self) -> MigrationStats:
        """Counts per migration status and per component type."""
        by_status = {status: 0 for status in MigrationStatus}
        by_type: Dict[ComponentType, TypeStats] = {}
        for component in self.nodes.values():
            by_status[component.migration_status] = by_status.get(component.migration_status, 0) + 1
            type_stats = by_type.setdefault(component.type, TypeStats())
            type_stats.total += 1
            if component.migration_status == MigrationStatus.DONE:
                type_stats.done += 1
        return MigrationStats(total=len(self.nodes), by_status=by_status, by_type=by_type)


@dataclass
class MigrationPlan:
    """Migration order and cycles for an inventory, plus the graph they came from."""
    order: List[Component]
    cycles: List[List[str]]
    graph: DependencyGraph = field(compare=False, repr=False)
    notes: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def has_cycles(self) -> bool:
        return bool(self.cycles)

    def can_migrate(self, component: ComponentRef) -> bool:
        return self.graph.can_migrate(component)

    def blocked_components(self) -> List[Component]:
        return self.graph.blocked_components()

    def ready_to_migrate(self) -> List[Component]:
        return self.graph.ready_to_migrate()

"""
Inventory loader for reading component snapshots from JSON or YAML files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..exceptions import InventoryLoadError
from ..models import Component, ComponentType, DependencyRef, MigrationStatus

logger = logging.getLogger(__name__)

# Status values used by the org sync layer
STATUS_ALIASES = {
    'pending': MigrationStatus.NOT_STARTED,
    'completed': MigrationStatus.DONE,
}

# camelCase spellings accepted alongside snake_case keys
KEY_ALIASES = {
    'apiName': 'api_name',
    'migrationStatus': 'migration_status',
    'componentId': 'component_id',
}


def parse_component_type(value: Any) -> ComponentType:
    if isinstance(value, ComponentType):
        return value
    try:
        return ComponentType(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown component type '{value}'")


def parse_migration_status(value: Any) -> MigrationStatus:
    if value is None:
        return MigrationStatus.NOT_STARTED
    if isinstance(value, MigrationStatus):
        return value
    normalized = str(value).lower().replace('_', '-')
    if normalized in STATUS_ALIASES:
        return STATUS_ALIASES[normalized]
    try:
        return MigrationStatus(normalized)
    except ValueError:
        raise ValueError(f"Unknown migration status '{value}'")


def parse_required(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
        return value.strip().lower() == 'true'
    raise ValueError(f"'required' must be a boolean, got '{value}'")


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _parse_refs(entries: Any, key: str) -> List[DependencyRef]:
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError(f"'{key}' must be an array")

    refs = []
    for entry in entries:
        if not isinstance(entry, dict) or 'id' not in entry:
            raise ValueError(f"Each '{key}' entry must be an object with an 'id'")
        refs.append(DependencyRef(
            id=str(entry['id']),
            name=entry.get('name') or str(entry['id']),
            type=parse_component_type(entry['type']) if entry.get('type') else None,
            required=parse_required(entry.get('required')),
        ))
    return refs


def component_from_dict(record: Dict[str, Any]) -> Component:
    """
    Build a Component from one inventory record.

    Raises:
        ValueError: If a mandatory key is missing or a value is not recognized
    """
    if not isinstance(record, dict):
        raise ValueError("Component record must be an object")

    data = {KEY_ALIASES.get(key, key): value for key, value in record.items()}

    for key in ('id', 'type'):
        if not data.get(key):
            raise ValueError(f"Missing '{key}'")

    name = _optional_str(data, 'name')
    api_name = _optional_str(data, 'api_name') or name
    if not api_name:
        raise ValueError("Missing 'api_name'")
    namespace = _optional_str(data, 'namespace')

    metadata = data.get('metadata') or {}
    if data.get('component_id'):
        metadata = dict(metadata, component_id=data['component_id'])

    return Component(
        id=str(data['id']),
        name=name or api_name,
        api_name=api_name,
        type=parse_component_type(data['type']),
        namespace=namespace or None,
        dependencies=_parse_refs(data.get('dependencies'), 'dependencies'),
        dependents=_parse_refs(data.get('dependents'), 'dependents'),
        migration_status=parse_migration_status(data.get('migration_status')),
        description=data.get('description'),
        metadata=metadata,
    )


def component_to_dict(component: Component) -> Dict[str, Any]:
    """Serialize a Component back into an inventory record."""
    def refs(entries: List[DependencyRef]) -> List[Dict[str, Any]]:
        return [
            {
                "id": ref.id,
                "name": ref.name,
                "type": ref.type.value if ref.type else None,
                "required": ref.required,
            }
            for ref in entries
        ]

    return {
        "id": component.id,
        "name": component.name,
        "api_name": component.api_name,
        "type": component.type.value,
        "namespace": component.namespace,
        "description": component.description,
        "dependencies": refs(component.dependencies),
        "dependents": refs(component.dependents),
        "migration_status": component.migration_status.value,
        "metadata": component.metadata,
    }


class InventoryLoader:
    """Loads and merges inventory snapshots."""

    def __init__(self):
        self.components: Dict[str, Component] = {}

    @property
    def inventory(self) -> List[Component]:
        return list(self.components.values())

    def load_file(self, file_path: str) -> List[Component]:
        """
        Load an inventory snapshot from a JSON or YAML file.

        Args:
            file_path: Path to the snapshot; .yaml/.yml files are read as YAML

        Returns:
            Components read from this file

        Raises:
            InventoryLoadError: If the file is missing, unparsable or holds invalid records
        """
        path = Path(file_path)
        if not path.exists():
            raise InventoryLoadError("File not found", file_path=file_path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix.lower() in ('.yaml', '.yml'):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except UnicodeDecodeError as e:
            raise InventoryLoadError(f"Invalid encoding: {e}", file_path=file_path)
        except json.JSONDecodeError as e:
            raise InventoryLoadError(f"Invalid JSON: {e}", file_path=file_path)
        except yaml.YAMLError as e:
            raise InventoryLoadError(f"Invalid YAML: {e}", file_path=file_path)
        except OSError as e:
            raise InventoryLoadError(str(e), file_path=file_path)

        records = self._extract_records(data, file_path)
        components = []
        for position, record in enumerate(records):
            try:
                components.append(component_from_dict(record))
            except ValueError as e:
                raise InventoryLoadError(str(e), file_path=file_path, record_index=position)

        replaced = sum(1 for component in components if component.id in self.components)
        for component in components:
            self.components[component.id] = component

        if replaced:
            logger.info(f"{replaced} components from {file_path} replaced previously loaded entries")
        logger.info(f"Loaded {len(components)} components from {file_path}")
        return components

    def load_from_multiple_files(self, file_paths: List[str]) -> List[Component]:
        """
        Load and merge several snapshots; later files win on duplicate ids.

        Returns:
            The merged inventory
        """
        for file_path in file_paths:
            self.load_file(file_path)

        logger.info(f"Loaded total of {len(self.components)} components from {len(file_paths)} files")
        return self.inventory

    @staticmethod
    def _extract_records(data: Any, file_path: str) -> List[Any]:
        if isinstance(data, dict):
            if 'components' not in data:
                raise InventoryLoadError("Missing 'components' key", file_path=file_path)
            data = data['components']

        if data is None:
            return []
        if not isinstance(data, list):
            raise InventoryLoadError("Inventory must be an array of components", file_path=file_path)
        return data


def load_inventory(file_paths: List[str]) -> List[Component]:
    """Load and merge inventory snapshots from files."""
    return InventoryLoader().load_from_multiple_files(file_paths)

"""
Inventory loading from JSON or YAML component snapshots.
"""

from .loader import InventoryLoader, component_from_dict, component_to_dict, load_inventory

__all__ = ['InventoryLoader', 'component_from_dict', 'component_to_dict', 'load_inventory']

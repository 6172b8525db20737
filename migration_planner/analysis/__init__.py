"""
Analysis Module

Contains the classifier, per-type dependency inferencers, closure resolver,
categorizer and the dependency graph planner.
"""

from .base import DependencyInferencer
from .categorizer import categorize, group_fields_by_parent
from .classifier import (
    STANDARD_OBJECTS,
    ComponentCategory,
    ComponentClassifier,
    is_custom_field_on_standard_parent,
    is_platform_standard,
    parent_name,
)
from .engine import MigrationAnalyzer, analyze, create_analyzer, plan_order
from .graph import DependencyGraph, MigrationPlan
from .index import InventoryIndex
from .inferencers import InferencerRegistry, infer_dependencies
from .resolver import ClosureResolver, resolve_closure

__all__ = [
    # Base classes
    'DependencyInferencer',

    # Classification
    'STANDARD_OBJECTS',
    'ComponentCategory',
    'ComponentClassifier',
    'is_platform_standard',
    'is_custom_field_on_standard_parent',
    'parent_name',

    # Closure and categorization
    'InventoryIndex',
    'InferencerRegistry',
    'infer_dependencies',
    'ClosureResolver',
    'resolve_closure',
    'categorize',
    'group_fields_by_parent',

    # Planning
    'DependencyGraph',
    'MigrationPlan',

    # Entry points
    'MigrationAnalyzer',
    'analyze',
    'create_analyzer',
    'plan_order',
]

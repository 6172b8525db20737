"""
Tests for per-type dependency inference.
"""

from migration_planner.analysis.base import DependencyInferencer
from migration_planner.analysis.classifier import ComponentClassifier
from migration_planner.analysis.index import InventoryIndex
from migration_planner.analysis.inferencers import (
    BODY_PARSING_NOTE,
    InferencerRegistry,
    infer_dependencies,
)
from migration_planner.models import ComponentType, DependencyEdge, InferenceResult
from tests.factories import apex, field, make_component, obj


def build_index(inventory):
    return InventoryIndex(inventory, ComponentClassifier())


def targets(result):
    return [edge.target for edge in result.edges]


def test_object_requires_its_fields(invoice_inventory):
    index = build_index(invoice_inventory)
    result = infer_dependencies(index.get('obj-invoice'), index)

    assert targets(result) == ['fld-total', 'fld-notes']
    assert all(edge.required for edge in result.edges)
    assert all(edge.source == 'obj-invoice' for edge in result.edges)
    assert "Found 2 custom fields for this object" in result.notes


def test_object_does_not_match_name_prefix_of_other_object():
    inventory = [
        obj('o1', 'Invoice__c'),
        obj('o2', 'Invoice__cx'),
        field('f1', 'Invoice__cx.Amount__c'),
    ]
    index = build_index(inventory)
    assert targets(infer_dependencies(index.get('o1'), index)) == []


def test_field_requires_parent_object(invoice_inventory):
    index = build_index(invoice_inventory)
    result = infer_dependencies(index.get('fld-total'), index)

    assert result.edges == [DependencyEdge(source='fld-total', target='obj-invoice', required=True)]
    assert "Found parent object: Invoice__c" in result.notes


def test_field_with_missing_parent_produces_note_only():
    index = build_index([field('f1', 'Account.Loyalty__c')])
    result = infer_dependencies(index.get('f1'), index)

    assert result.edges == []
    assert any("Parent object 'Account' not found" in note for note in result.notes)


def test_field_with_malformed_name_produces_note_only():
    index = build_index([obj('o1', 'Loyalty__c'), field('f1', 'Loyalty__c')])
    result = infer_dependencies(index.get('f1'), index)

    assert result.edges == []
    assert any("no parent separator" in note for note in result.notes)


def test_parent_lookup_ignores_non_object_components():
    index = build_index([apex('a1', 'Invoice__c'), field('f1', 'Invoice__c.Total__c')])
    assert infer_dependencies(index.get('f1'), index).edges == []


def test_code_module_without_declarations_returns_placeholder_note():
    index = build_index([apex('a1', 'InvoiceService')])
    result = infer_dependencies(index.get('a1'), index)

    assert result.edges == []
    assert BODY_PARSING_NOTE in result.notes


def test_code_module_declared_edges_returned_verbatim():
    inventory = [
        apex('a1', 'InvoiceService', requires=['o1', ('o2', False)]),
        obj('o1', 'Invoice__c'),
        obj('o2', 'Payment__c'),
    ]
    index = build_index(inventory)
    result = infer_dependencies(index.get('a1'), index)

    assert result.edges == [
        DependencyEdge(source='a1', target='o1', required=True),
        DependencyEdge(source='a1', target='o2', required=False),
    ]
    assert "Using 2 declared dependencies" in result.notes


def test_declared_edge_wins_over_heuristic_duplicate():
    inventory = [
        obj('o1', 'Invoice__c', requires=[('f1', False)]),
        field('f1', 'Invoice__c.Total__c'),
        field('f2', 'Invoice__c.Notes__c'),
    ]
    index = build_index(inventory)
    result = infer_dependencies(index.get('o1'), index)

    assert result.edges == [
        DependencyEdge(source='o1', target='f1', required=False),
        DependencyEdge(source='o1', target='f2', required=True),
    ]


def test_every_component_type_has_an_inferencer():
    registry = InferencerRegistry.default()
    assert set(registry.supported_types()) == set(ComponentType)


def test_registry_without_inferencer_returns_note():
    registry = InferencerRegistry()
    index = build_index([apex('a1', 'InvoiceService')])
    result = registry.infer(index.get('a1'), index)

    assert result.edges == []
    assert result.notes == ["No dependency inferencer available for type 'apex'"]


def test_registered_inferencer_replaces_default():
    class FixedInferencer(DependencyInferencer):
        def infer_dependencies(self, component, index):
            return InferenceResult(
                component_id=component.id,
                edges=[DependencyEdge(source=component.id, target='o1')],
            )

    registry = InferencerRegistry.default()
    registry.register(ComponentType.LWC, FixedInferencer())
    inventory = [make_component('l1', 'invoiceCard', ComponentType.LWC), obj('o1', 'Invoice__c')]
    index = build_index(inventory)

    assert targets(registry.infer(index.get('l1'), index)) == ['o1']


def test_index_skips_fields_without_parent_segment():
    index = build_index([obj('o-inv', 'Invoice__c'), field('f-bad', 'Orphan__c')])

    assert 'f-bad' in index
    assert index.fields_of('Orphan__c') == ()
    assert index.fields_of('Invoice__c') == ()

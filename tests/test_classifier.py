"""
Tests for component classification.
"""

import pytest

from migration_planner.analysis.classifier import (
    ComponentCategory,
    ComponentClassifier,
    is_custom_field_on_standard_parent,
    is_platform_standard,
    parent_name,
)
from migration_planner.config import ClassifierConfig
from migration_planner.models import ComponentType
from tests.factories import field, make_component, obj


class TestPlatformStandard:

    def test_well_known_object_is_standard(self):
        assert is_platform_standard(obj('o1', 'Account'))

    def test_custom_suffix_object_is_not_standard(self):
        assert not is_platform_standard(obj('o1', 'Invoice__c'))

    def test_namespaced_object_is_not_standard(self):
        assert not is_platform_standard(obj('o1', 'Account', namespace='acme'))

    def test_unknown_object_without_suffix_is_not_standard(self):
        assert not is_platform_standard(obj('o1', 'SomethingElse'))

    def test_standard_field_is_standard(self):
        assert is_platform_standard(field('f1', 'Account.Name'))

    def test_custom_field_is_not_standard(self):
        assert not is_platform_standard(field('f1', 'Account.Loyalty__c'))

    def test_field_without_suffix_on_custom_parent_is_standard(self):
        # Classification follows the field's own segment, not its parent
        assert is_platform_standard(field('f1', 'Widget__c.Color'))

    def test_malformed_field_is_not_standard(self):
        assert not is_platform_standard(field('f1', 'NoSeparator__c'))

    @pytest.mark.parametrize('component_type', [
        ComponentType.APEX,
        ComponentType.TRIGGER,
        ComponentType.FLOW,
        ComponentType.VISUALFORCE,
        ComponentType.LWC,
    ])
    def test_code_kinds_are_never_standard(self, component_type):
        assert not is_platform_standard(make_component('x', 'Account', component_type))
        assert not is_platform_standard(make_component('y', 'Account', component_type, namespace='ns'))


class TestCustomFieldOnStandardParent:

    def test_custom_field_on_standard_object(self):
        assert is_custom_field_on_standard_parent(field('f1', 'Account.Loyalty__c'))

    def test_custom_field_on_custom_object(self):
        assert not is_custom_field_on_standard_parent(field('f1', 'Invoice__c.Total__c'))

    def test_custom_field_on_unknown_object(self):
        assert not is_custom_field_on_standard_parent(field('f1', 'Mystery.Total__c'))

    def test_standard_field_on_standard_object(self):
        assert not is_custom_field_on_standard_parent(field('f1', 'Account.Name'))

    def test_non_field_is_never_matched(self):
        assert not is_custom_field_on_standard_parent(obj('o1', 'Account.Loyalty__c'))

    def test_malformed_name(self):
        assert not is_custom_field_on_standard_parent(field('f1', 'Loyalty__c'))


class TestParentName:

    def test_parent_is_token_before_first_separator(self):
        assert parent_name(field('f1', 'Account.Loyalty__c')) == 'Account'
        assert parent_name(field('f2', 'Account.Sub.Part__c')) == 'Account'

    @pytest.mark.parametrize('api_name', ['Loyalty__c', '.Loyalty__c', 'Account.'])
    def test_malformed_names_have_no_parent(self, api_name):
        assert parent_name(field('f1', api_name)) is None


class TestComponentClassifier:

    def test_categories(self):
        classifier = ComponentClassifier()
        assert classifier.categorize_component(obj('o1', 'Account')) == ComponentCategory.PLATFORM_STANDARD
        assert classifier.categorize_component(field('f1', 'Account.X__c')) == ComponentCategory.CUSTOM_FIELD_ON_STANDARD
        assert classifier.categorize_component(obj('o2', 'Invoice__c')) == ComponentCategory.CUSTOM
        assert classifier.categorize_component(obj('o3', 'ns__Thing__c', namespace='ns')) == ComponentCategory.PACKAGED

    def test_custom_conventions(self):
        classifier = ComponentClassifier(custom_suffix='_x', separator=':', standard_objects=['Widget'])
        assert classifier.is_platform_standard(obj('o1', 'Widget'))
        assert not classifier.is_platform_standard(obj('o2', 'Account'))
        assert classifier.is_custom_field_on_standard_parent(field('f1', 'Widget:Size_x'))
        assert classifier.parent_name(field('f2', 'Widget:Size_x')) == 'Widget'

    def test_from_config_extends_reference_list(self):
        config = ClassifierConfig(additional_standard_objects=['ServiceAppointment'])
        classifier = ComponentClassifier.from_config(config)
        assert classifier.is_platform_standard(obj('o1', 'ServiceAppointment'))
        assert classifier.is_platform_standard(obj('o2', 'Account'))

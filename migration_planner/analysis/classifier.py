"""
Component classification for telling platform-standard components apart from
custom and packaged ones.
"""

from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple

from ..models import Component, ComponentType


# Well-known built-in objects present in every org. Not exhaustive, covers the
# common ones; extend through classifier.additional_standard_objects.
STANDARD_OBJECTS: FrozenSet[str] = frozenset([
    'Account',
    'Contact',
    'Lead',
    'Opportunity',
    'Case',
    'Task',
    'Event',
    'Campaign',
    'User',
    'Profile',
    'PermissionSet',
    'Group',
    'Role',
    'Territory',
    'Product2',
    'Pricebook2',
    'PricebookEntry',
    'Quote',
    'Contract',
    'Order',
    'OrderItem',
    'Asset',
    'Solution',
    'Idea',
    'Question',
    'Reply',
    'Attachment',
    'Document',
    'Folder',
    'ContentDocument',
    'ContentVersion',
    'ContentWorkspace',
    'FeedItem',
    'FeedComment',
    'ChatterMessage',
    'EmailMessage',
    'EmailTemplate',
    'Report',
    'Dashboard',
    'DashboardComponent',
])

DEFAULT_CUSTOM_SUFFIX = "__c"
DEFAULT_SEPARATOR = "."


class ComponentCategory(Enum):
    """Migration category of a single component."""
    PLATFORM_STANDARD = "platform_standard"
    CUSTOM = "custom"
    CUSTOM_FIELD_ON_STANDARD = "custom_field_on_standard"
    PACKAGED = "packaged"


class ComponentClassifier:
    """Pure naming-convention predicates over single component records."""

    def __init__(self, custom_suffix: str = DEFAULT_CUSTOM_SUFFIX,
                 separator: str = DEFAULT_SEPARATOR,
                 standard_objects: Optional[Iterable[str]] = None):
        """
        Initialize the classifier.

        Args:
            custom_suffix: Marker ending the names of locally authored objects and fields
            separator: Separator between parent object and field in qualified names
            standard_objects: Built-in object names. Defaults to STANDARD_OBJECTS.
        """
        self.custom_suffix = custom_suffix
        self.separator = separator
        self.standard_objects = frozenset(
            STANDARD_OBJECTS if standard_objects is None else standard_objects
        )

    @classmethod
    def from_config(cls, classifier_config) -> 'ComponentClassifier':
        """Build a classifier from a ClassifierConfig."""
        return cls(
            custom_suffix=classifier_config.custom_suffix,
            separator=classifier_config.name_separator,
            standard_objects=STANDARD_OBJECTS | frozenset(classifier_config.additional_standard_objects),
        )

    def split_field_name(self, api_name: str) -> Optional[Tuple[str, str]]:
        """
        Split a qualified field name into (parent, local name).

        Returns None for names without a separator or with an empty segment.
        """
        parent, sep, local = api_name.partition(self.separator)
        if not sep or not parent or not local:
            return None
        return parent, local

    def parent_name(self, field: Component) -> Optional[str]:
        """Name of the object owning a field, or None when the name is malformed."""
        parts = self.split_field_name(field.api_name)
        return parts[0] if parts else None

    def is_custom_name(self, name: str) -> bool:
        return name.endswith(self.custom_suffix)

    def is_standard_object_name(self, name: str) -> bool:
        return not self.is_custom_name(name) and name in self.standard_objects

    def is_platform_standard(self, component: Component) -> bool:
        """
        Determine if a component pre-exists in every org and is never migrated.

        Args:
            component: The component to check

        Returns:
            True if the component is platform-standard
        """
        if component.type == ComponentType.OBJECT:
            if component.is_packaged:
                return False
            return self.is_standard_object_name(component.api_name)

        if component.type == ComponentType.FIELD:
            parts = self.split_field_name(component.api_name)
            if parts is not None:
                # Standard field: the local segment lacks the custom suffix
                return not self.is_custom_name(parts[1])

        # Code modules, triggers, pages, flows and bundles are never standard
        return False

    def is_custom_field_on_standard_parent(self, field: Component) -> bool:
        """
        Determine if a field is custom while its owning object is platform-standard.

        Args:
            field: The field component to check

        Returns:
            True for a custom field on a standard object
        """
        if field.type != ComponentType.FIELD:
            return False

        parts = self.split_field_name(field.api_name)
        if parts is None:
            return False

        parent, local = parts
        return self.is_custom_name(local) and self.is_standard_object_name(parent)

    def categorize_component(self, component: Component) -> ComponentCategory:
        if self.is_platform_standard(component):
            return ComponentCategory.PLATFORM_STANDARD
        if self.is_custom_field_on_standard_parent(component):
            return ComponentCategory.CUSTOM_FIELD_ON_STANDARD
        if component.is_packaged:
            return ComponentCategory.PACKAGED
        return ComponentCategory.CUSTOM


_default_classifier = ComponentClassifier()


def is_platform_standard(component: Component) -> bool:
    """Check a component against the default naming conventions."""
    return _default_classifier.is_platform_standard(component)


def is_custom_field_on_standard_parent(field: Component) -> bool:
    """Check a field against the default naming conventions."""
    return _default_classifier.is_custom_field_on_standard_parent(field)


def parent_name(field: Component) -> Optional[str]:
    return _default_classifier.parent_name(field)

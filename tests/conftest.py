"""
Shared fixtures for the Org Migration Planner tests.
"""

import pytest

from tests.factories import apex, field, obj


@pytest.fixture
def invoice_inventory():
    """Custom object Invoice__c with two custom fields and an unrelated class."""
    return [
        obj('obj-invoice', 'Invoice__c'),
        field('fld-total', 'Invoice__c.Total__c', name='Total__c'),
        field('fld-notes', 'Invoice__c.Notes__c', name='Notes__c'),
        apex('apex-unrelated', 'UnrelatedService'),
    ]


@pytest.fixture
def account_inventory():
    """Standard Account object carrying a custom field."""
    return [
        obj('obj-account', 'Account'),
        field('fld-loyalty', 'Account.Loyalty__c', name='Loyalty__c'),
    ]


@pytest.fixture
def cyclic_inventory():
    """A requires B, B requires C, C requires A."""
    return [
        apex('A', 'ClassA', requires=['B']),
        apex('B', 'ClassB', requires=['C']),
        apex('C', 'ClassC', requires=['A']),
    ]

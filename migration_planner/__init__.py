"""
Org Migration Planner

A Python tool for resolving the dependency closure of a component selection,
classifying what needs migrating between Salesforce orgs, and planning a safe
migration order.
"""

__version__ = "0.1.0"
__author__ = "Org Migration Team"

# Make version easily importable
def get_version():
    """Get the current version of the Org Migration Planner."""
    return __version__

__all__ = ['get_version']

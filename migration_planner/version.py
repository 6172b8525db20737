"""
Version management for the Org Migration Planner.

This module provides centralized version information to avoid hardcoding
version numbers throughout the codebase.
"""

from packaging.version import Version

from . import __version__


def get_version() -> str:
    """
    Get the current version of the Org Migration Planner.
    
    Returns:
        Version string (e.g., "0.1.0")
    """
    return __version__


def get_version_info() -> dict:
    """
    Get detailed version information.
    
    Returns:
        Dictionary with version details
    """
    parsed = Version(__version__)
    
    return {
        "version": __version__,
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.micro,
        "is_prerelease": parsed.is_prerelease or parsed.major == 0,
        "is_stable": parsed.major >= 1 and not parsed.is_prerelease
    }


def get_full_name_with_version() -> str:
    """
    Get the full tool name with version.
    
    Returns:
        Full name string (e.g., "Org Migration Planner v0.1.0")
    """
    return f"Org Migration Planner v{__version__}"

"""
Reporting Module

Contains report generators for dependency analyses and migration plans (JSON, text).
"""

from .base import ReportGenerator
from .json_reporter import JSONReporter
from .text_reporter import HumanReadableReporter

__all__ = ['ReportGenerator', 'JSONReporter', 'HumanReadableReporter', 'get_reporter']


def get_reporter(format_name: str, **kwargs) -> ReportGenerator:
    """
    Get a report generator by format name.
    
    Raises:
        ValueError: If the format is not supported
    """
    reporters = {
        'json': JSONReporter,
        'text': HumanReadableReporter,
    }
    if format_name not in reporters:
        raise ValueError(f"Unsupported report format: {format_name}")
    return reporters[format_name](**kwargs)

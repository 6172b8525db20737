"""
Custom exceptions for the Org Migration Planner.

The resolution engine itself never raises for anomalous inventory data; these
exceptions belong to the surfaces around it (file loading, configuration,
report output).
"""


class MigrationPlannerError(Exception):
    """Base exception class for all Org Migration Planner errors."""
    pass


class InventoryLoadError(MigrationPlannerError):
    """Raised when an inventory snapshot cannot be read or parsed."""
    
    def __init__(self, message: str, file_path: str = None, record_index: int = None):
        self.file_path = file_path
        self.record_index = record_index
        
        if file_path:
            message = f"Error loading inventory file '{file_path}': {message}"
            if record_index is not None:
                message += f" (record {record_index})"
        
        super().__init__(message)


class ConfigurationError(MigrationPlannerError):
    """Raised when configuration is invalid."""
    pass


class ReportGenerationError(MigrationPlannerError):
    """Raised when report generation fails."""
    
    def __init__(self, message: str, format_name: str = None, output_path: str = None):
        self.format_name = format_name
        self.output_path = output_path
        
        if format_name:
            message = f"Report generation error for format '{format_name}': {message}"
            if output_path:
                message += f" (output: {output_path})"
        
        super().__init__(message)

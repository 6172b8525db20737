"""
Abstract base classes for report generation.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..analysis.graph import MigrationPlan
from ..exceptions import ReportGenerationError
from ..models import AnalysisResult


class ReportGenerator(ABC):
    """Abstract base class for report generators."""
    
    @abstractmethod
    def generate_report(self, analysis_result: AnalysisResult, output_path: Optional[str] = None) -> str:
        """
        Generate a report from a dependency analysis.
        
        Args:
            analysis_result: AnalysisResult to generate report from
            output_path: Optional path to write report to file
            
        Returns:
            Report content as string
        """
        pass
    
    @abstractmethod
    def generate_plan_report(self, plan: MigrationPlan, output_path: Optional[str] = None) -> str:
        """
        Generate a report from a migration plan.
        
        Args:
            plan: MigrationPlan to generate report from
            output_path: Optional path to write report to file
            
        Returns:
            Report content as string
        """
        pass
    
    @abstractmethod
    def get_format_name(self) -> str:
        """
        Get the name of the report format.
        
        Returns:
            String identifier for the report format (e.g., "json", "text")
        """
        pass
    
    def _write_output(self, content: str, output_path: Optional[str]) -> None:
        if not output_path:
            return
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise ReportGenerationError(str(e), format_name=self.get_format_name(), output_path=output_path)

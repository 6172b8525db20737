"""
JSON report generator for dependency analyses and migration plans.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .base import ReportGenerator
from ..analysis.graph import MigrationPlan
from ..models import AnalysisResult, Component


class JSONReporter(ReportGenerator):
    """
    JSON report generator that serves as the foundation for the other report formats.
    """

    def __init__(self, include_metadata: bool = True, pretty_print: bool = True, include_notes: bool = True):
        """
        Initialize JSON reporter.

        Args:
            include_metadata: Whether to include metadata like timestamps
            pretty_print: Whether to format JSON with indentation
            include_notes: Whether to include per-component analysis notes
        """
        self.include_metadata = include_metadata
        self.pretty_print = pretty_print
        self.include_notes = include_notes

    def generate_report(self, analysis_result: AnalysisResult, output_path: Optional[str] = None) -> str:
        """
        Generate JSON report from a dependency analysis.

        Args:
            analysis_result: AnalysisResult to generate report from
            output_path: Optional path to write report to file

        Returns:
            JSON report content as string
        """
        content = self._dump(self.get_structured_data(analysis_result))
        self._write_output(content, output_path)
        return content

    def generate_plan_report(self, plan: MigrationPlan, output_path: Optional[str] = None) -> str:
        """Generate JSON report from a migration plan."""
        content = self._dump(self.get_plan_data(plan))
        self._write_output(content, output_path)
        return content

    def get_format_name(self) -> str:
        """Get the name of the report format."""
        return "json"

    def get_structured_data(self, analysis_result: AnalysisResult) -> Dict[str, Any]:
        """
        Get structured analysis data without converting to JSON string.
        Used by other reporters that need the data structure.
        """
        selected_ids = {component.id for component in analysis_result.selected}
        report = {
            "summary": {
                "selected": len(analysis_result.selected),
                "closure": len(analysis_result.closure),
                "discovered": len(analysis_result.discovered),
                "custom_to_migrate": len(analysis_result.custom_to_migrate),
                "standard_objects_with_fields": len(analysis_result.standard_groups),
                "custom_fields_on_standard_objects": analysis_result.total_custom_fields,
            },
            "selected_components": self._build_components_list(analysis_result.selected),
            "custom_dependencies": self._build_components_list(
                [c for c in analysis_result.custom_to_migrate if c.id not in selected_ids]
            ),
            "custom_to_migrate": self._build_components_list(analysis_result.custom_to_migrate),
            "standard_objects_with_fields": [
                {
                    "object_name": group.object_name,
                    "custom_fields": self._build_components_list(group.custom_fields),
                }
                for group in analysis_result.standard_groups
            ],
        }

        if self.include_notes:
            report["analysis_notes"] = analysis_result.notes

        if self.include_metadata:
            report["metadata"] = self._build_metadata("analysis")

        return report

    def get_plan_data(self, plan: MigrationPlan) -> Dict[str, Any]:
        """Get structured migration plan data."""
        report: Dict[str, Any] = {
            "summary": {
                "total_components": len(plan.order),
                "cycles": len(plan.cycles),
            },
            "order": [
                dict(self._component_data(component), position=position)
                for position, component in enumerate(plan.order, 1)
            ],
            "cycles": plan.cycles,
        }

        stats = plan.graph.stats()
        report["summary"].update({
            "ready_to_migrate": len(plan.ready_to_migrate()),
            "blocked": len(plan.blocked_components()),
            "completion_percentage": stats.completion_percentage,
        })
        report["ready_to_migrate"] = [c.id for c in plan.ready_to_migrate()]
        report["blocked"] = [c.id for c in plan.blocked_components()]
        report["statistics"] = {
            "by_status": {status.value: count for status, count in stats.by_status.items()},
            "by_type": {
                component_type.value: {"total": type_stats.total, "done": type_stats.done}
                for component_type, type_stats in stats.by_type.items()
            },
        }

        if self.include_notes:
            report["notes"] = plan.notes

        if self.include_metadata:
            report["metadata"] = self._build_metadata("plan")

        return report

    def _dump(self, data: Dict[str, Any]) -> str:
        if self.pretty_print:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    def _build_components_list(self, components: List[Component]) -> List[Dict[str, Any]]:
        return [self._component_data(component) for component in components]

    @staticmethod
    def _component_data(component: Component) -> Dict[str, Any]:
        data = {
            "id": component.id,
            "name": component.name,
            "api_name": component.api_name,
            "type": component.type.value,
            "migration_status": component.migration_status.value,
        }
        if component.namespace:
            data["namespace"] = component.namespace
        return data

    def _build_metadata(self, report_kind: str) -> Dict[str, Any]:
        """Build metadata section of the report."""
        return {
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "generator": "Org Migration Planner",
            "version": self._get_tool_version(),
            "report_format": self.get_format_name(),
            "report_kind": report_kind,
        }

    def _get_tool_version(self) -> str:
        """Get the tool version from the centralized version module."""
        from ..version import get_version
        return get_version()

"""
Human-readable text report generator for dependency analyses and migration plans.
"""

import os
import re
import sys
from typing import Any, Dict, List, Optional

from .base import ReportGenerator
from .json_reporter import JSONReporter
from ..analysis.graph import MigrationPlan
from ..models import AnalysisResult


class HumanReadableReporter(ReportGenerator):
    """
    Human-readable text report generator for console output.
    Uses JSONReporter internally for data structuring and includes color coding.
    """

    # ANSI color codes
    COLORS = {
        'RED': '\033[91m',
        'GREEN': '\033[92m',
        'YELLOW': '\033[93m',
        'BLUE': '\033[94m',
        'MAGENTA': '\033[95m',
        'CYAN': '\033[96m',
        'BOLD': '\033[1m',
        'RESET': '\033[0m'
    }

    STATUS_COLORS = {
        'not-started': 'BLUE',
        'in-progress': 'CYAN',
        'done': 'GREEN',
        'blocked': 'RED',
        'skipped': 'MAGENTA'
    }

    def __init__(self, use_colors: bool = None, width: int = 80, show_notes: bool = True):
        """
        Initialize human-readable text reporter.

        Args:
            use_colors: Whether to use ANSI color codes. Auto-detects if None.
            width: Console width for formatting (default: 80)
            show_notes: Whether to list per-component analysis notes
        """
        if use_colors is None:
            self.use_colors = self._supports_color()
        else:
            self.use_colors = use_colors

        self.width = width
        self.show_notes = show_notes
        self.json_reporter = JSONReporter(include_metadata=True)

    def generate_report(self, analysis_result: AnalysisResult, output_path: Optional[str] = None) -> str:
        """
        Generate human-readable text report from a dependency analysis.

        Args:
            analysis_result: AnalysisResult to generate report from
            output_path: Optional path to write report to file

        Returns:
            Text report content as string
        """
        data = self.json_reporter.get_structured_data(analysis_result)

        sections = [
            self._build_header("DEPENDENCY ANALYSIS"),
            self._build_analysis_summary(data["summary"]),
            self._build_component_section("SELECTED COMPONENTS", data["selected_components"]),
            self._build_component_section("CUSTOM COMPONENTS TO MIGRATE", data["custom_to_migrate"]),
            self._build_standard_objects_section(data["standard_objects_with_fields"]),
        ]
        if self.show_notes and data.get("analysis_notes"):
            sections.append(self._build_notes_section(data["analysis_notes"]))
        sections.append(self._build_footer(data["metadata"]))

        return self._finish("\n\n".join(sections), output_path)

    def generate_plan_report(self, plan: MigrationPlan, output_path: Optional[str] = None) -> str:
        """Generate human-readable text report from a migration plan."""
        data = self.json_reporter.get_plan_data(plan)

        sections = [
            self._build_header("MIGRATION PLAN"),
            self._build_plan_summary(data["summary"]),
            self._build_order_section(data["order"]),
        ]
        if data["cycles"]:
            sections.append(self._build_cycles_section(data["cycles"]))
        if self.show_notes and data.get("notes"):
            sections.append(self._build_notes_section(data["notes"]))
        sections.append(self._build_footer(data["metadata"]))

        return self._finish("\n\n".join(sections), output_path)

    def get_format_name(self) -> str:
        """Get the name of the report format."""
        return "text"

    def _finish(self, text_content: str, output_path: Optional[str]) -> str:
        # Files never get color codes
        self._write_output(self._strip_colors(text_content), output_path)
        return text_content

    def _supports_color(self) -> bool:
        """
        Auto-detect if the terminal supports color output.

        Returns:
            True if colors are supported, False otherwise
        """
        if os.environ.get('NO_COLOR'):
            return False

        if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
            return False

        term = os.environ.get('TERM', '').lower()
        return 'color' in term or term in ['xterm', 'xterm-256color', 'screen']

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors or color not in self.COLORS:
            return text

        return f"{self.COLORS[color]}{text}{self.COLORS['RESET']}"

    def _strip_colors(self, text: str) -> str:
        """Remove ANSI color codes from text."""
        ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
        return ansi_escape.sub('', text)

    def _build_header(self, title: str) -> str:
        separator = "=" * self.width
        return "\n".join([
            self._colorize(separator, 'BOLD'),
            self._colorize(title, 'BOLD'),
            self._colorize(separator, 'BOLD')
        ])

    def _build_analysis_summary(self, summary: Dict[str, Any]) -> str:
        return "\n".join([
            self._colorize('SUMMARY', 'BOLD'),
            "",
            f"   Selected Components:          {summary['selected']}",
            f"   Components In Closure:        {summary['closure']}",
            f"   Discovered Dependencies:      {summary['discovered']}",
            f"   Custom Components To Migrate: {self._colorize(str(summary['custom_to_migrate']), 'YELLOW')}",
            f"   Standard Objects With Fields: {summary['standard_objects_with_fields']}"
            f" ({summary['custom_fields_on_standard_objects']} custom fields)",
        ])

    def _format_component(self, component: Dict[str, Any]) -> str:
        status = component["migration_status"]
        line = (
            f"   - {component['api_name']} [{component['type']}] "
            f"{self._colorize(status, self.STATUS_COLORS.get(status, 'RESET'))}"
        )
        if component.get("namespace"):
            line += f" (package: {component['namespace']})"
        return line

    def _build_component_section(self, title: str, components: List[Dict[str, Any]]) -> str:
        lines = [self._colorize(title, 'BOLD'), ""]
        if not components:
            lines.append("   (none)")
        lines.extend(self._format_component(component) for component in components)
        return "\n".join(lines)

    def _build_standard_objects_section(self, groups: List[Dict[str, Any]]) -> str:
        lines = [self._colorize('STANDARD OBJECTS WITH CUSTOM FIELDS', 'BOLD'), ""]
        if not groups:
            lines.append("   (none)")
        for group in groups:
            lines.append(f"   {self._colorize(group['object_name'], 'CYAN')} (standard, not migrated)")
            for field in group["custom_fields"]:
                lines.append(f"     - {field['name']}")
        return "\n".join(lines)

    def _build_plan_summary(self, summary: Dict[str, Any]) -> str:
        lines = [
            self._colorize('SUMMARY', 'BOLD'),
            "",
            f"   Total Components: {summary['total_components']}",
        ]
        if 'ready_to_migrate' in summary:
            lines.extend([
                f"   Ready To Migrate: {self._colorize(str(summary['ready_to_migrate']), 'GREEN')}",
                f"   Blocked:          {self._colorize(str(summary['blocked']), 'RED')}",
                f"   Completion:       {summary['completion_percentage']}%",
            ])
        cycle_color = 'RED' if summary['cycles'] else 'GREEN'
        lines.append(f"   Cycles:           {self._colorize(str(summary['cycles']), cycle_color)}")
        return "\n".join(lines)

    def _build_order_section(self, order: List[Dict[str, Any]]) -> str:
        lines = [self._colorize('MIGRATION ORDER', 'BOLD'), ""]
        for component in order:
            lines.append(f"{component['position']:>4}." + self._format_component(component)[4:])
        return "\n".join(lines)

    def _build_cycles_section(self, cycles: List[List[str]]) -> str:
        lines = [self._colorize('CIRCULAR DEPENDENCIES', 'RED'), ""]
        for cycle in cycles:
            lines.append("   " + " -> ".join(cycle + cycle[:1]))
        return "\n".join(lines)

    def _build_notes_section(self, notes: Dict[str, List[str]]) -> str:
        lines = [self._colorize('ANALYSIS NOTES', 'BOLD'), ""]
        for component_id, entries in notes.items():
            if not entries:
                continue
            lines.append(f"   {component_id}:")
            lines.extend(f"     - {entry}" for entry in entries)
        return "\n".join(lines)

    def _build_footer(self, metadata: Dict[str, Any]) -> str:
        """Build report footer."""
        separator = "-" * self.width

        return "\n".join([
            self._colorize(separator, 'BOLD'),
            f"Generated by {metadata['generator']} v{metadata['version']}",
            f"Report created: {metadata['generated_at']}",
            f"Format: {self.get_format_name()}",
            self._colorize(separator, 'BOLD')
        ])

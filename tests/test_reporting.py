"""
Tests for JSON and text report generation.
"""

import json

import pytest

from migration_planner.analysis.engine import analyze, plan_order
from migration_planner.reporting import HumanReadableReporter, JSONReporter, get_reporter
from tests.factories import apex


@pytest.fixture
def analysis(invoice_inventory, account_inventory):
    return analyze({'obj-invoice', 'fld-loyalty'}, invoice_inventory + account_inventory)


def test_json_analysis_report(analysis):
    data = json.loads(JSONReporter().generate_report(analysis))

    assert data["summary"]["closure"] == 5
    assert data["summary"]["custom_to_migrate"] == 3
    assert data["summary"]["custom_fields_on_standard_objects"] == 1
    assert [c["id"] for c in data["custom_dependencies"]] == ['fld-total', 'fld-notes']
    assert data["standard_objects_with_fields"][0]["object_name"] == 'Account'
    assert data["metadata"]["report_kind"] == 'analysis'
    assert 'obj-invoice' in data["analysis_notes"]


def test_json_report_without_notes_or_metadata(analysis):
    reporter = JSONReporter(include_metadata=False, include_notes=False)
    data = json.loads(reporter.generate_report(analysis))
    assert "metadata" not in data
    assert "analysis_notes" not in data


def test_json_plan_report(cyclic_inventory):
    data = json.loads(JSONReporter().generate_plan_report(plan_order(cyclic_inventory)))

    assert data["summary"]["cycles"] == 1
    assert data["cycles"] == [['A', 'B', 'C']]
    assert [entry["id"] for entry in data["order"]] == ['C', 'B', 'A']
    assert data["order"][0]["position"] == 1
    assert data["blocked"] == ['A', 'B', 'C']
    assert data["statistics"]["by_status"]["not-started"] == 3


def test_json_report_written_to_file(analysis, tmp_path):
    output = tmp_path / 'analysis.json'
    content = JSONReporter().generate_report(analysis, str(output))
    assert output.read_text(encoding='utf-8') == content


def test_text_analysis_report(analysis):
    text = HumanReadableReporter(use_colors=False).generate_report(analysis)

    assert 'DEPENDENCY ANALYSIS' in text
    assert 'Invoice__c.Total__c [field]' in text
    assert 'Account (standard, not migrated)' in text
    assert '- Loyalty__c' in text
    assert 'ANALYSIS NOTES' in text


def test_text_plan_report_lists_cycles(cyclic_inventory):
    text = HumanReadableReporter(use_colors=False).generate_plan_report(plan_order(cyclic_inventory))

    assert 'MIGRATION PLAN' in text
    assert 'A -> B -> C -> A' in text
    assert '   1. ClassC [apex]' in text


def test_text_report_file_has_no_colors(tmp_path):
    output = tmp_path / 'plan.txt'
    reporter = HumanReadableReporter(use_colors=True)
    content = reporter.generate_plan_report(plan_order([apex('X', 'X')]), str(output))

    assert '\033[' in content
    assert '\033[' not in output.read_text(encoding='utf-8')


def test_get_reporter():
    assert get_reporter('json').get_format_name() == 'json'
    assert get_reporter('text', use_colors=False).get_format_name() == 'text'
    with pytest.raises(ValueError):
        get_reporter('pdf')

"""
Tests for the command line interface.
"""

import json
import logging

import pytest

from migration_planner.cli import main


INVENTORY = [
    {"id": "obj-invoice", "name": "Invoice__c", "api_name": "Invoice__c", "type": "object"},
    {"id": "fld-total", "name": "Total__c", "api_name": "Invoice__c.Total__c", "type": "field"},
    {"id": "svc", "name": "InvoiceService", "api_name": "InvoiceService", "type": "apex",
     "dependencies": [{"id": "obj-invoice", "name": "Invoice__c", "type": "object", "required": True}]},
]


@pytest.fixture
def inventory_file(tmp_path):
    path = tmp_path / 'inventory.json'
    path.write_text(json.dumps(INVENTORY), encoding='utf-8')
    return str(path)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger('migration_planner').handlers.clear()


def test_analyze_json(inventory_file, capsys):
    assert main(['analyze', '-i', inventory_file, '-s', 'svc', '--format', 'json']) == 0

    data = json.loads(capsys.readouterr().out)
    assert [c["id"] for c in data["custom_to_migrate"]] == ['svc', 'obj-invoice', 'fld-total']


def test_plan_text_to_file(inventory_file, tmp_path):
    output = tmp_path / 'plan.txt'
    assert main(['plan', '-i', inventory_file, '--format', 'text', '-o', str(output)]) == 0

    text = output.read_text(encoding='utf-8')
    assert 'MIGRATION ORDER' in text
    assert text.index('Invoice__c [object]') < text.index('InvoiceService [apex]')


def test_missing_inventory_returns_error(tmp_path):
    assert main(['plan', '-i', str(tmp_path / 'absent.json')]) == 1


def test_invalid_config_returns_error(inventory_file, tmp_path):
    config = tmp_path / 'bad.yaml'
    config.write_text("output:\n  default_format: pdf\n", encoding='utf-8')
    assert main(['plan', '-i', inventory_file, '-c', str(config)]) == 1


def test_select_is_required(inventory_file):
    with pytest.raises(SystemExit):
        main(['analyze', '-i', inventory_file])


def test_undecodable_inventory_returns_error(tmp_path):
    path = tmp_path / 'latin1.json'
    path.write_bytes(b'[{"id": "a", "name": "Caf\xe9", "api_name": "Cafe__c", "type": "object"}]')
    assert main(['plan', '-i', str(path)]) == 1


def test_non_string_log_level_in_config_returns_error(inventory_file, tmp_path):
    config = tmp_path / 'levels.yaml'
    config.write_text("logging:\n  level: 10\n", encoding='utf-8')
    assert main(['plan', '-i', inventory_file, '-c', str(config)]) == 1

"""
Tests for logging setup and version helpers.
"""

import logging

from migration_planner import __version__
from migration_planner.logging_config import ColoredFormatter, get_logger, setup_logging
from migration_planner.version import get_full_name_with_version, get_version, get_version_info


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / 'planner.log'
    logger = setup_logging(level='WARNING', log_file=str(log_file))
    try:
        assert len(logger.handlers) == 2
        get_logger('tests').debug('debug line for the file')
        for handler in logger.handlers:
            handler.flush()
        assert 'debug line for the file' in log_file.read_text(encoding='utf-8')
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_colored_formatter_leaves_record_untouched():
    record = logging.LogRecord('migration_planner', logging.ERROR, __file__, 1, 'boom', None, None)
    formatted = ColoredFormatter('%(levelname)s - %(message)s').format(record)

    assert formatted == '\033[31mERROR\033[0m - boom'
    assert record.levelname == 'ERROR'


def test_version_helpers():
    info = get_version_info()
    assert get_version() == __version__
    assert info['version'] == __version__
    assert (info['major'], info['minor'], info['patch']) == tuple(int(p) for p in __version__.split('.'))
    assert get_full_name_with_version() == f"Org Migration Planner v{__version__}"

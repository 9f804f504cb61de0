import logging

import pytest

from expense_recap.log import resolve_level, setup_logging


def test_resolve_level_accepts_names_and_numbers():
    assert resolve_level('debug') == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING


@pytest.mark.parametrize('level', ['verbose', 15])
def test_resolve_level_rejects_unknown(level):
    with pytest.raises(ValueError):
        resolve_level(level)


def test_setup_logging_does_not_duplicate_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging('INFO')
        setup_logging('DEBUG')
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

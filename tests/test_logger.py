from __future__ import annotations

import logging

from argus.utils.logger import get_logger, setup_logger


def test_setup_logger_is_idempotent_and_updates_level() -> None:
    log = setup_logger("DEBUG")
    handlers = list(log.handlers)

    again = setup_logger(logging.WARNING)

    assert again is log
    assert again.handlers == handlers
    assert len(handlers) == 1
    assert again.level == logging.WARNING
    assert again.propagate is False
    setup_logger(logging.INFO)


def test_component_loggers_are_children() -> None:
    root = logging.getLogger("argus")
    child = get_logger("dispatch")

    assert child.name == "argus.dispatch"
    assert child.parent is root

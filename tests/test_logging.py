from __future__ import annotations

import logging

from fuzzdata.utils.logging import ROOT_LOGGER, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("fuzzdata.sampling").name == "fuzzdata.sampling"
    assert get_logger("tests").name == "fuzzdata.tests"


def test_configure_logging_idempotent() -> None:
    root = configure_logging(verbose=True)
    configure_logging(verbose=True)
    named = [h for h in root.handlers if h.get_name() == "fuzzdata-stderr"]
    assert len(named) == 1
    assert root.level == logging.DEBUG
    configure_logging(verbose=False)
    assert logging.getLogger(ROOT_LOGGER).level == logging.WARNING

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

from jsondelta import log


def test_init_logging():
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    root.handlers[:] = []
    try:
        log.init_logging(level=logging.DEBUG)
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == log.LOG_FORMAT
    finally:
        root.handlers[:] = saved
        root.setLevel(saved_level)


def test_set_log_level(reset_log):
    root = logging.getLogger()
    root_level = root.level
    try:
        log.set_jsondelta_log_level(logging.ERROR, set_main=False)
        assert log.logger.level == logging.ERROR
        assert root.level == root_level
        log.set_jsondelta_log_level(logging.WARNING)
        assert root.level == logging.WARNING
    finally:
        root.setLevel(root_level)


def test_module_aliases(caplog):
    with caplog.at_level(logging.INFO, logger="jsondelta"):
        log.info("hello %s", "there")
        log.warning("careful")
    assert [r.getMessage() for r in caplog.records] == ["hello there", "careful"]
    assert all(r.name == "jsondelta" for r in caplog.records)

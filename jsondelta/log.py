# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'

logger = logging.getLogger('jsondelta')


def init_logging(level=logging.INFO):
    """Configure root logging for a jsondelta command line entry point.

    Installs a stderr handler with the jsondelta format (a no-op when the
    root logger already has handlers) and routes warnings through logging.
    """
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.captureWarnings(True)


def set_jsondelta_log_level(level, set_main=True):
    """Set the level of the jsondelta logger, and of the root logger when set_main is true."""
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical

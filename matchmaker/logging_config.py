"""Logging for the matchmaker server and simulator.

Everything under the ``matchmaker`` package logs through module loggers
(``logging.getLogger(__name__)``); this wires them to stdout once at
startup. Chatty HTTP/blockchain client loggers are capped at WARNING so
per-message progress stays readable.
"""

import logging
import sys

from config import LOG_LEVEL

PACKAGE_LOGGER = "matchmaker"
LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that flood INFO with per-request lines
QUIET_LOGGERS = ("urllib3", "httpx", "openai", "web3", "dkg")


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a stdout handler to the ``matchmaker`` logger tree.

    Calling it again replaces the handler instead of stacking a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger

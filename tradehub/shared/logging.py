"""
Process-wide logging setup for the TradeHub API.

One line format for our loggers and uvicorn's. Account and wallet code
logs user ids and outcomes only: never passwords, tokens, addresses
or withdrawal amounts.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler at `level` (the LOG_LEVEL setting)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Request lines and SQL echo drown out application events.
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

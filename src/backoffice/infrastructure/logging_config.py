"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send records from the ``backoffice`` loggers to stderr.

    SQLAlchemy's own loggers are left at WARNING; use ``echo_sql`` in the
    settings to see statements.
    """
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "backoffice": {"handlers": ["console"], "level": level.upper(), "propagate": False},
            "sqlalchemy": {"level": "WARNING"},
        },
    })

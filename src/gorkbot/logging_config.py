"""Structured JSON logging configuration.

Emits one JSON object per line on stdout with ``severity``/``timestamp``/``logger``
field names, which most log collectors pick up without extra parsing.

Usage:
    from gorkbot.logging_config import configure_logging
    configure_logging("INFO")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "gorkbot",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration at the given root level.

    Call once at application startup (the FastAPI lifespan does this).
    Unknown level names fall back to INFO.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    level = level.upper()
    config["root"]["level"] = level if level in logging.getLevelNamesMapping() else "INFO"
    logging.config.dictConfig(config)

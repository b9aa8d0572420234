import logging.config
from typing import Any

from crud_backend.config import get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

# Third-party loggers routed to the console handler: name -> level
THIRD_PARTY_LOGGERS: dict[str, str] = {
    "uvicorn": "INFO",
    "uvicorn.error": "INFO",
    "uvicorn.access": "INFO",
    # pymongo logs every command and heartbeat at DEBUG
    "pymongo": "WARNING",
    "apscheduler": "INFO",
    # SQL echo is controlled by DEBUG on the engine
    "sqlalchemy.engine": "WARNING",
}


def build_logging_config(level: str) -> dict[str, Any]:
    """Return the dictConfig for the given application log level"""
    loggers: dict[str, Any] = {
        name: {"handlers": ["console"], "level": lib_level, "propagate": False}
        for name, lib_level in THIRD_PARTY_LOGGERS.items()
    }
    # Application loggers propagate to root, which owns the console handler
    loggers["crud_backend"] = {"level": level, "propagate": True}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": loggers,
    }


def setup_logging():
    """
    Configure global log format

    LOG_LEVEL wins over DEBUG when set.
    """
    settings = get_settings()
    level = settings.LOG_LEVEL or ("DEBUG" if settings.DEBUG else "INFO")
    logging.config.dictConfig(build_logging_config(level.upper()))

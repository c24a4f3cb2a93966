"""
Logging configuration using Python dictConfig
"""
import os
import logging
import logging.config

SERVICE_LOGGER = "passport"

def build_config(level: str = None) -> dict:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level},
            "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "httpx": {"handlers": ["console"], "level": "WARNING", "propagate": False},
            SERVICE_LOGGER: {"handlers": ["console"], "level": level, "propagate": False},
        },
    }

def setup_logging(level: str = None) -> logging.Logger:
    """Apply the console logging config and return the service logger."""
    logging.config.dictConfig(build_config(level))
    return get_logger(SERVICE_LOGGER)

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

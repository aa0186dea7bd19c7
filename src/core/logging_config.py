"""Logging setup for the API process."""
import logging.config


def configure_logging(level: str = "INFO") -> None:
    """Route all application logs to stderr at the given level."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s %(levelname)s:%(name)s:%(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "root": {
            "level": level.upper(),
            "handlers": ["console"],
        },
        "loggers": {
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    })

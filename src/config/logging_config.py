import logging
import logging.config
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
# Empty LOG_FILE disables the file handler
LOG_FILE = os.getenv("LOG_FILE", "logs/pingprobe.log")
# httpx logs every request at INFO; one line per HEAD request drowns the probe log
HTTP_CLIENT_LOG_LEVEL = os.getenv("HTTP_CLIENT_LOG_LEVEL", "WARNING")


def build_logging_config(log_file: str = LOG_FILE, level: str = LOG_LEVEL) -> dict:
    """
    Build the dictConfig mapping: console always, file when log_file is set,
    and the HTTP client loggers held at HTTP_CLIENT_LOG_LEVEL.
    """
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "formatter": "default",
            "level": level,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "loggers": {
            name: {"level": HTTP_CLIENT_LOG_LEVEL}
            for name in ("httpx", "httpcore")
        },
        "root": {"handlers": list(handlers), "level": level},
    }


def setup_logging(log_file: str = LOG_FILE):
    if log_file and os.path.dirname(log_file):
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_file))

"""Logging setup for applications embedding kubeferry."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Configure the ``kubeferry`` logger.

    Calling it again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger("kubeferry")
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if getattr(existing, "_kubeferry", False):
            logger.removeHandler(existing)
            existing.close()

    handler: logging.Handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._kubeferry = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger

"""Structured logger setup shared across the booking form."""

import logging

from pythonjsonlogger import jsonlogger

from booking_form.config.settings import Settings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Field values typed by the user never go into log records; pass field
    names and states through ``extra`` instead.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(Settings.from_environment().log_level)
    logger.propagate = False
    return logger

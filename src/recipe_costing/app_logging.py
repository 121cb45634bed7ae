"""Logging setup for the recipe costing service."""

import logging

_LOGGER_NAME = "recipe_costing"


def configure_logging(level: str = "INFO") -> None:
    """Route ``recipe_costing`` loggers to one stream handler at ``level``.

    Repeated calls only adjust the level, so app factories can call this freely.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False

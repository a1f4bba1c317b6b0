"""Debug logging for argument checks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from alchemy_arguments.builder import LOGGER_NAME

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Trace failed checks at DEBUG level.

    Builders write to the ``alchemy_arguments`` logger, or to the logger
    handed to ``check_that(..., logger=...)``. Traces go to ``debug_file``
    when given and to stderr when ``verbose`` is set.

    Raises:
        RuntimeError: If ``logger_name`` already has handlers attached.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger_name"
        )

    handlers: list[logging.Handler] = []
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    return logger

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/logging_utils.py
"""Logging setup for the ofmark command line.

Only the ``ofmark`` package logger is configured, so applications embedding
the library keep control of the root logger. Individual transform modules
can be raised to a more verbose level than the rest of the package::

    configure_logging("WARNING", stage_levels={"callouts": "DEBUG"})

"""

from __future__ import annotations

import logging
import sys
from typing import Mapping, Optional

PACKAGE_LOGGER = "ofmark"
STAGE_LOGGER_PREFIX = "ofmark.transforms."

_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """Convert a level name or number to a numeric logging level.

    Unknown names fall back to ``INFO``.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stage_levels: Optional[Mapping[str, int | str]] = None,
) -> logging.Logger:
    """Attach console and optional file handlers to the package logger.

    Parameters
    ----------
    log_level : int | str
        Level for the package logger, as a number or a name such as "INFO".
    log_file : str, optional
        Path of a file that receives the same records as the console.
    trace_mode : bool, default False
        Include timestamps and logger names in every record.
    stage_levels : Mapping[str, int | str], optional
        Per-module overrides keyed by transform module name (``"wikilinks"``,
        ``"callouts"``, ...).

    Returns
    -------
    logging.Logger
        The configured ``ofmark`` logger.

    """
    package_level = resolve_level(log_level)
    overrides = {name: resolve_level(level) for name, level in (stage_levels or {}).items()}
    # Handlers must pass the most verbose record any stage logger lets through
    handler_level = min([package_level, *overrides.values()])

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(package_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(handler_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    for name, level in overrides.items():
        logging.getLogger(f"{STAGE_LOGGER_PREFIX}{name}").setLevel(level)

    return package_logger

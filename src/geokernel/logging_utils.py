"""Logging utilities for geokernel.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. Kernel modules obtain their loggers via get_logger().
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "geokernel"

_FORMAT = logging.Formatter("%(levelname)s %(name)s: %(message)s")


def _ensure_root() -> logging.Logger:
    """Attach a single stdout handler to the 'geokernel' logger.

    NullHandlers added by the package __init__ are replaced; the logger is
    isolated from the process root logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Configure the 'geokernel' logger family level.

    This does NOT modify the process root logger.
    """
    root = _ensure_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'geokernel' namespace.

    Without an explicit level the logger is NOTSET and inherits from the
    'geokernel' parent configured via configure_logging(). Library modules do
    not attach handlers themselves.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    log = logging.getLogger(name)
    log.setLevel(_to_level(level, default=logging.NOTSET))
    return log

"""Logging utilities for projgeom.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All projgeom code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'projgeom'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_projgeom_root() -> logging.Logger:
    """Ensure the 'projgeom' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'projgeom' logger.
    """
    root = logging.getLogger(_ROOT_NAME)
    # NullHandlers from the package __init__ would swallow records
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        for h in list(root.handlers):
            root.removeHandler(h)
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


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Configure the 'projgeom' logger family level.

    This does NOT modify the process root logger.
    """
    _ensure_projgeom_root().setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'projgeom' namespace.

    Without an explicit level the logger is left at NOTSET so it inherits
    whatever configure_logging() set on the 'projgeom' parent.
    """
    _ensure_projgeom_root()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']

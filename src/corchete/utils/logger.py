"""Loggers for the corchete package.

Every module logs under the ``corchete`` namespace, so applications can
enable engine diagnostics with one switch:

    >>> import logging
    >>> logging.getLogger("corchete").setLevel(logging.DEBUG)

Rejected registrations and the expansion pass limit are reported at DEBUG;
invalid validation rules at WARNING. Nothing is configured at import time.
"""

from __future__ import annotations

import logging

_ROOT = "corchete"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name inside the corchete namespace.

    Module names already under ``corchete`` are used as-is; anything else
    is nested below it.

    Example:
        >>> get_logger("corchete.engine").name
        'corchete.engine'
        >>> get_logger("myhandlers").name
        'corchete.myhandlers'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)

"""Call-site instrumentation hook."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def r_log(data: T = None, label: str = "r_log") -> T:  # type: ignore[assignment]
    """Log ``data`` at DEBUG level and return it unchanged.

    Drop it into an expression to trace a value without changing behavior:

        >>> payload = r_log({"search": "truck"}, "find payload")
    """
    if data is None:
        data = {}  # type: ignore[assignment]
    logger.debug("%s: %r", label, data)
    return data

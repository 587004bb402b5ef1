"""Logging setup shared by strip_nontext modules."""

from __future__ import annotations

import logging

_PACKAGE_LOGGER = "strip_nontext"

# Library code stays silent unless the host application configures logging.
logging.getLogger(_PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package namespace."""
    if name != _PACKAGE_LOGGER and not name.startswith(_PACKAGE_LOGGER + "."):
        name = f"{_PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)

"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

from . import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging() -> None:
    # basicConfig is a no-op when a handler is already installed (uvicorn, pytest).
    logging.basicConfig(level=settings.log_level(), format=_LOG_FORMAT)

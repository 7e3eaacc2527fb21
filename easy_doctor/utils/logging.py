"""
Logging helpers.
"""

import logging

from ..config import get_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    level = get_settings().log_level.upper()
    root = logging.getLogger("easy_doctor")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a named logger under the ``easy_doctor`` hierarchy."""
    _configure_root()
    if not name.startswith("easy_doctor"):
        name = f"easy_doctor.{name}"
    return logging.getLogger(name)

"""
HTTP surface for the Easy Doctor core.
"""

from .app import create_app

__all__ = ["create_app"]

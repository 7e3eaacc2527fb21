"""
Session continuity module.
"""

from .gate import SessionGate
from .storage import KeyValueStore, InMemoryKeyValueStore, SQLiteKeyValueStore

__all__ = [
    "SessionGate",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SQLiteKeyValueStore",
]

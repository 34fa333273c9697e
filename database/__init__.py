"""
Database package for VolleyStats system.
"""

from .database_manager import DatabaseManager, InMemoryStorage
from .snapshot_store import SnapshotStore, Snapshot

__all__ = ['DatabaseManager', 'InMemoryStorage', 'SnapshotStore', 'Snapshot']

"""
Database module - pooled PostgreSQL access.
"""
from placement_api.db.postgres import PlacementStore, get_engine, get_store

__all__ = [
    "PlacementStore",
    "get_engine",
    "get_store"
]

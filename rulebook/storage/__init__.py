"""SQLite-backed persistence."""

from rulebook.storage.database import get_connection, initialize_database
from rulebook.storage.favorites import FavoritesStore

__all__ = ["FavoritesStore", "get_connection", "initialize_database"]

"""Favorite rules, stored per program and season."""

import logging
from pathlib import Path

from rulebook.models.manual import manual_key
from rulebook.storage.database import get_connection, initialize_database

logger = logging.getLogger(__name__)


class FavoritesStore:
    """Persists favorite rule ids in SQLite.

    Ids are returned in the order they were favorited.

    Args:
        db_path: Path to the SQLite database file; the schema is created
            if missing.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        initialize_database(self._db_path)

    def list_ids(self, program: str, season: str) -> list[str]:
        conn = get_connection(self._db_path)
        try:
            rows = conn.execute(
                "SELECT rule_id FROM favorite_rules WHERE manual_key = ? ORDER BY rowid",
                (manual_key(program, season),),
            ).fetchall()
        finally:
            conn.close()
        return [row["rule_id"] for row in rows]

    def is_favorite(self, program: str, season: str, rule_id: str) -> bool:
        conn = get_connection(self._db_path)
        try:
            row = conn.execute(
                "SELECT 1 FROM favorite_rules WHERE manual_key = ? AND rule_id = ?",
                (manual_key(program, season), rule_id),
            ).fetchone()
        finally:
            conn.close()
        return row is not None

    def add(self, program: str, season: str, rule_id: str) -> None:
        conn = get_connection(self._db_path)
        try:
            conn.execute(
                "INSERT OR IGNORE INTO favorite_rules (manual_key, rule_id) VALUES (?, ?)",
                (manual_key(program, season), rule_id),
            )
            conn.commit()
        finally:
            conn.close()

    def remove(self, program: str, season: str, rule_id: str) -> None:
        conn = get_connection(self._db_path)
        try:
            conn.execute(
                "DELETE FROM favorite_rules WHERE manual_key = ? AND rule_id = ?",
                (manual_key(program, season), rule_id),
            )
            conn.commit()
        finally:
            conn.close()

    def toggle(self, program: str, season: str, rule_id: str) -> bool:
        """Flip a rule's favorite state.

        Returns:
            True if the rule is now a favorite.
        """
        if self.is_favorite(program, season, rule_id):
            self.remove(program, season, rule_id)
            logger.debug("Unfavorited %s for %s %s", rule_id, program, season)
            return False
        self.add(program, season, rule_id)
        logger.debug("Favorited %s for %s %s", rule_id, program, season)
        return True

    def clear(self, program: str, season: str) -> None:
        conn = get_connection(self._db_path)
        try:
            conn.execute(
                "DELETE FROM favorite_rules WHERE manual_key = ?",
                (manual_key(program, season),),
            )
            conn.commit()
        finally:
            conn.close()

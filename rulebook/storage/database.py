"""SQLite connection and schema for the favorites store."""

import sqlite3
from pathlib import Path


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """Open the favorites database in WAL mode.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A sqlite3 Connection whose rows are addressable by column name.
    """
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def initialize_database(db_path: str | Path) -> None:
    """Create the ``favorite_rules`` table if it doesn't exist.

    One row per favorited rule, keyed by manual key and rule id; ``rowid``
    keeps the order rules were favorited in.

    Args:
        db_path: Path to the SQLite database file.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS favorite_rules (
                manual_key TEXT NOT NULL,
                rule_id TEXT NOT NULL,
                added_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (manual_key, rule_id)
            );
            """
        )
        conn.commit()
    finally:
        conn.close()

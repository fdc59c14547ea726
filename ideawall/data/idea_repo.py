from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from ideawall.db.database import get_conn
from ideawall.errors import StorageError
from ideawall.models.idea import Idea

logger = logging.getLogger(__name__)

def _row_to_idea(row: sqlite3.Row) -> Idea:
    return Idea(id=row["id"], text=row["text"], created_at=row["createdAt"])

class IdeaRepo:
    """SQL for the ideas table. One statement round trip per operation."""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path

    def list_all(self) -> List[Idea]:
        try:
            with get_conn(self.db_path) as conn:
                rows = conn.execute(
                    """SELECT id, text, createdAt
                         FROM ideas
                         ORDER BY createdAt DESC, id DESC"""
                ).fetchall()
        except sqlite3.Error as e:
            logger.exception("Listing ideas failed")
            raise StorageError(str(e)) from e
        logger.debug("Listed %d ideas", len(rows))
        return [_row_to_idea(r) for r in rows]

    def create(self, text: str) -> Idea:
        try:
            with get_conn(self.db_path) as conn:
                cur = conn.execute("INSERT INTO ideas (text) VALUES (?)", (text,))
                row = conn.execute(
                    "SELECT id, text, createdAt FROM ideas WHERE id = ?",
                    (cur.lastrowid,),
                ).fetchone()
        except sqlite3.Error as e:
            logger.exception("Inserting idea failed")
            raise StorageError(str(e)) from e
        if not row:
            raise StorageError("Insert did not report success.")
        idea = _row_to_idea(row)
        logger.info("Created idea %d", idea.id)
        return idea

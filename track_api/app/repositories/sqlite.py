"""
SQLite track store.

All queries use parameterized statements.  Each operation opens its
own connection through ``core.db.get_cursor`` so the repository can be
shared between requests without sharing a connection.
"""

import sqlite3
from typing import List, Optional

from track_api.app.core.db import get_cursor
from track_api.app.repositories.base import TrackRepository
from track_api.app.schemas.track import Track


class SqliteTrackRepository(TrackRepository):
    """Stores tracks in the ``tracks`` table of a SQLite database."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def find_all(self) -> List[Track]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute("SELECT * FROM tracks ORDER BY rowid").fetchall()
        return [self._row_to_track(row) for row in rows]

    def find_by_id(self, track_id: str) -> Optional[Track]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute("SELECT * FROM tracks WHERE id = ?", (track_id,)).fetchone()
        if not row:
            return None
        return self._row_to_track(row)

    def save(self, track: Track) -> Track:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                """
                INSERT INTO tracks (id, title, artist, duration, creation_date)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title = excluded.title,
                    artist = excluded.artist,
                    duration = excluded.duration,
                    creation_date = excluded.creation_date
                """,
                (
                    track.id,
                    track.title,
                    track.artist,
                    track.duration,
                    track.creation_date.isoformat(),
                ),
            )
            row = cursor.execute("SELECT * FROM tracks WHERE id = ?", (track.id,)).fetchone()
        return self._row_to_track(row)

    def exists_by_id(self, track_id: str) -> bool:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute("SELECT 1 FROM tracks WHERE id = ?", (track_id,)).fetchone()
        return row is not None

    def delete_by_id(self, track_id: str) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM tracks WHERE id = ?", (track_id,))

    def count(self) -> int:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute("SELECT COUNT(*) AS total FROM tracks").fetchone()
        return row["total"]

    @staticmethod
    def _row_to_track(row: sqlite3.Row) -> Track:
        """Convert a database row to a ``Track``.

        ``creation_date`` is stored as ISO text; Pydantic parses it back
        into a ``datetime``.
        """
        return Track(
            id=row["id"],
            title=row["title"],
            artist=row["artist"],
            duration=row["duration"],
            creation_date=row["creation_date"],
        )

from typing import Any

from psycopg.rows import dict_row

from legaldesk.database.connection import get_connection
from legaldesk.database.models import SavedQueryRecord
from legaldesk.errors import ValidationError
from legaldesk.processor.exceptions import SavedQueryNotFoundError


class SavedQueriesRepository:
    """Database operations for the saved_queries table.

    Every statement filters on user_id, so one user can never read or delete
    another user's saved searches.
    """

    def save(self, user_id: str, name: str, query: str, jurisdiction: str) -> SavedQueryRecord:
        if not name.strip():
            raise ValidationError("Saved search name is required.")
        if not query.strip():
            raise ValidationError("Search query is required.")
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO saved_queries (user_id, name, query, jurisdiction)
                    VALUES (%s, %s, %s, %s)
                    RETURNING id, user_id, name, query, jurisdiction, created_at
                    """,
                    (user_id, name.strip(), query, jurisdiction),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT ... RETURNING produced no row")
        return _to_record(row)

    def list_for_user(self, user_id: str) -> list[SavedQueryRecord]:
        """Return the user's saved queries, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, user_id, name, query, jurisdiction, created_at
                    FROM saved_queries
                    WHERE user_id = %s
                    ORDER BY created_at DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()
        return [_to_record(row) for row in rows]

    def delete(self, query_id: str, user_id: str) -> None:
        """Delete one of the user's saved queries.

        Raises:
            SavedQueryNotFoundError: if the query does not exist for this user.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM saved_queries WHERE id = %s AND user_id = %s",
                    (query_id, user_id),
                )
                if cur.rowcount == 0:
                    raise SavedQueryNotFoundError(f"Saved query {query_id} not found")
            conn.commit()


def _to_record(row: dict[str, Any]) -> SavedQueryRecord:
    return SavedQueryRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        name=row["name"],
        query=row["query"],
        jurisdiction=row["jurisdiction"],
        created_at=row["created_at"],
    )

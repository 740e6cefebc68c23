from typing import Any

from psycopg.rows import dict_row

from legaldesk.database.connection import get_connection
from legaldesk.database.models import DocumentRecord, NewDocument
from legaldesk.processor.exceptions import DocumentNotFoundError

_COLUMNS = """
    id, user_id, name, type, state, status, source, content,
    feedback_is_useful, feedback_comment, created_at
"""


class DocumentsRepository:
    """Database operations for the documents table. Rows are never deleted here."""

    def insert(self, document: NewDocument) -> DocumentRecord:
        """Insert a document and return the stored row."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO documents (user_id, name, type, state, status, source, content)
                    VALUES (%s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_COLUMNS}
                    """,
                    (
                        document.user_id,
                        document.name,
                        document.type,
                        document.state,
                        document.status,
                        document.source,
                        document.content,
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT ... RETURNING produced no row")
        return _to_record(row)

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Find a document by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM documents WHERE id = %s",
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return _to_record(row)

    def list_for_user(self, user_id: str) -> list[DocumentRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM documents
                    WHERE user_id = %s
                    ORDER BY created_at DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()
        return [_to_record(row) for row in rows]

    def update_feedback(
        self,
        document_id: str,
        is_useful: bool | None,
        comment: str | None,
    ) -> None:
        """Attach user feedback to a document.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE documents
                    SET feedback_is_useful = %s,
                        feedback_comment = %s
                    WHERE id = %s
                    """,
                    (is_useful, comment, document_id),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()


def _to_record(row: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        name=row["name"],
        type=row["type"],
        state=row["state"],
        status=row["status"],
        source=row["source"],
        content=row["content"],
        feedback_is_useful=row["feedback_is_useful"],
        feedback_comment=row["feedback_comment"],
        created_at=row["created_at"],
    )

from legaldesk.database.models import NewDocument
from legaldesk.services.models import DraftRequest


def drafted_document(request: DraftRequest, text: str, user_id: str) -> NewDocument:
    """Build the documents row for a freshly drafted contract."""
    return NewDocument(
        user_id=user_id,
        name=request.document_name,
        type=request.document_type,
        state=request.state,
        status="drafted",
        source="generated",
        content=text,
    )

from collab_editor.domains.documents.entities import Document, DocumentPatch
from collab_editor.domains.documents.policy import (
    apply_mutation, can_delete, can_read, can_write
)
from collab_editor.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentSharingUpdate,
    DocumentSummary, DocumentResponse
)
from collab_editor.domains.documents.services import DocumentService

__all__ = [
    "Document", "DocumentPatch",
    "apply_mutation", "can_delete", "can_read", "can_write",
    "DocumentCreate", "DocumentUpdate", "DocumentSharingUpdate",
    "DocumentSummary", "DocumentResponse",
    "DocumentService"
]

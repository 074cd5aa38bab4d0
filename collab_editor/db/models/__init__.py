from collab_editor.db.models.document import DocumentModel, DocumentCollaboratorModel
from collab_editor.db.models.session import UserSessionModel

__all__ = [
    "DocumentModel",
    "DocumentCollaboratorModel",
    "UserSessionModel"
]

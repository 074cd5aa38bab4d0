from collab_editor.domains.sessions.entities import UserSession
from collab_editor.domains.sessions.schemas import SessionCreate, SessionActivity, SessionResponse
from collab_editor.domains.sessions.services import SessionService
from collab_editor.domains.sessions.reaper import SessionReaper

__all__ = [
    "UserSession",
    "SessionCreate", "SessionActivity", "SessionResponse",
    "SessionService",
    "SessionReaper"
]

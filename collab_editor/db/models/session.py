from sqlalchemy import Boolean, Column, DateTime, String

from collab_editor.db.base import Base


class UserSessionModel(Base):
    __tablename__ = "user_sessions"

    session_id = Column(String(36), primary_key=True)
    username = Column(String(50), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    last_activity = Column(DateTime(timezone=True), nullable=False, index=True)
    # Слабая ссылка на документ, без внешнего ключа
    current_document = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

# backend/app/models/chat_message.py
import enum

from sqlalchemy import Column, Integer, Text, ForeignKey, Enum, JSON
from sqlalchemy.orm import relationship
from ..database import Base, UTCDateTime, utcnow


class MessageRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(Base):
    __tablename__ = "chat_messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(Enum(MessageRole, values_callable=lambda roles: [r.value for r in roles]), nullable=False)
    content = Column(Text, nullable=False)
    # "metadata" is reserved on declarative classes
    message_metadata = Column("metadata", JSON, nullable=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)

    project = relationship("Project", back_populates="chat_messages")

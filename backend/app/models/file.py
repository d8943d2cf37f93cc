# backend/app/models/file.py
from sqlalchemy import Boolean, Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base, UTCDateTime, utcnow

class File(Base):
    __tablename__ = "files"
    __table_args__ = (
        UniqueConstraint("project_id", "path", name="uq_files_project_path"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    path = Column(String(1024), nullable=False)
    content = Column(Text, nullable=True)
    language = Column(String(50), nullable=True)
    # None until the client reports a state, then True/False
    is_modified = Column(Boolean, nullable=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)

    project = relationship("Project", back_populates="files")

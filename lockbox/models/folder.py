from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from datetime import datetime
import uuid

from lockbox.database import Base


class Folder(Base):
    __tablename__ = "folders"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class ItemFolder(Base):
    """Link between an item and a folder; the composite key allows one row per pair."""

    __tablename__ = "item_folders"

    item_id = Column(UUID(as_uuid=True), ForeignKey("items.id"), primary_key=True)
    folder_id = Column(UUID(as_uuid=True), ForeignKey("folders.id"), primary_key=True, index=True)

from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
import uuid
from datetime import datetime

from lockbox.database import Base


class Item(Base):
    """A secret record stored inside a vault.

    ``user_id`` duplicates the owning vault's ``user_id`` so that a single
    ``id = ? AND user_id = ?`` lookup authorizes access to the item.
    ``data`` holds the JSON-encoded payload exactly as the client sent it.
    """

    __tablename__ = "items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    vault_id = Column(UUID(as_uuid=True), ForeignKey("vaults.id"), nullable=False)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False)
    type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    favorite = Column(Boolean, default=False, nullable=False)
    data = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_items_vault_user", "vault_id", "user_id"),
        Index("ix_items_user_type", "user_id", "type"),
    )

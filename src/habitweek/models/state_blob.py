"""Key-value blob storage for serialized application state."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class StateBlob(SQLModel, table=True):
    """One serialized document per key (the whole habit collection as JSON)."""

    __tablename__: ClassVar[str] = "state_blob"

    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(sa_column=Column(Text, nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, nullable=False)

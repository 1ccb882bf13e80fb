"""StoreEntry model: one named JSON document in the journal's key-value store."""

from datetime import datetime, timezone

from sqlalchemy import Text
from sqlmodel import SQLModel, Field, Column


class StoreEntry(SQLModel, table=True):
    __tablename__ = "store_entry"

    key: str = Field(primary_key=True)  # "qe_accounts" or "qe_trades"
    value: str = Field(sa_column=Column(Text, nullable=False))  # JSON array
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

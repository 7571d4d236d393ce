"""
Organisation Entity

Tenant container that accounts join through account roles.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Organisation(SQLModel, table=True):
    """
    Organisation entity - tenant container.

    Business Rules:
    - owner_id may be empty: an ownerless organisation is a valid state
    - owner_id is a pointer into the account roles, not an ownership grant
    - Organisations are never deleted by provisioning
    """

    __tablename__ = "organisations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    avatar: Optional[str] = Field(default=None, max_length=1024)

    owner_id: Optional[UUID] = Field(default=None, foreign_key="accounts.id", index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

"""
Account Entity

Identity record for a person.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Account(SQLModel, table=True):
    """
    Account entity - identity record for a person.

    Business Rules:
    - Created once per person, together with its first login credential
    - name is the display name, "<first_name> <last_name>"
    - Identity attributes are not updated after creation
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    first_name: str = Field(default="", max_length=255)
    last_name: str = Field(default="", max_length=255)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

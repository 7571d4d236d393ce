"""
AccountRole Entity

Links Account to Organisation with a role.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import Role


class AccountRole(SQLModel, table=True):
    """
    AccountRole entity - membership of an account in an organisation.

    Business Rules:
    - One account can be member of multiple organisations
    - (account_id, organisation_id) must be unique: one role per organisation
    """

    __tablename__ = "account_roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)
    organisation_id: UUID = Field(
        foreign_key="organisations.id", nullable=False, index=True
    )

    role: Role = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index(
            "idx_account_role_account_organisation",
            "account_id",
            "organisation_id",
            unique=True,
        ),
    )

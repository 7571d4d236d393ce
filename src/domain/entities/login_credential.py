"""
LoginCredential Entity

Authentication method bound to an account.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import AuthProvider


class LoginCredential(SQLModel, table=True):
    """
    LoginCredential entity - authentication method bound to an account.

    Business Rules:
    - One account can have several credentials (password, OAuth providers)
    - (provider, email) must be unique: at most one password credential per email
    - password_hash is only set for username_password credentials (bcrypt)
    """

    __tablename__ = "login_credentials"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)

    provider: AuthProvider = Field(nullable=False)
    provider_user_id: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    password_hash: Optional[str] = Field(default=None, max_length=60)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_login_credential_provider_email", "provider", "email", unique=True),
    )

"""
Account Store - application layer contract

Persistence primitives consumed by the provisioning use cases. Every
primitive is its own transaction; create_owner_account and
create_organisation_with_members are atomic across all the rows they write.
"""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import (
    Account,
    AccountRole,
    AuthProvider,
    LoginCredential,
    Organisation,
    Role,
)


class AccountStoreError(Exception):
    """Base error for any account store failure"""


class EmailAlreadyExistsError(AccountStoreError):
    """A credential for (provider, email) already exists"""


class OrganisationNotFoundError(AccountStoreError):
    """The referenced organisation does not exist"""


class CreateOwnerAccountInput(BaseModel):
    """
    Input for create_owner_account.

    provider_user_id may be left empty; for username_password credentials
    the store uses the email.
    """

    name: str
    first_name: str
    last_name: str
    provider: AuthProvider
    email: str
    password_hash: Optional[str] = None
    provider_user_id: str = ""


class AddOrganisationMemberInput(BaseModel):
    organisation_id: UUID
    account_id: UUID
    role: Role


class CreateOrganisationInput(BaseModel):
    name: str
    owner_id: UUID
    description: Optional[str] = None
    avatar: Optional[str] = None


class UpdateOrganisationInput(BaseModel):
    """Only the fields that are set (not None) are written"""

    id: UUID
    name: Optional[str] = None
    description: Optional[str] = None
    avatar: Optional[str] = None


class MemberGrant(BaseModel):
    """A role to grant to an account in an organisation being created"""

    account_id: UUID
    role: Role


class OwnerAccount(NamedTuple):
    account: Account
    organisation: Organisation
    login_credential: LoginCredential
    account_role: AccountRole


class ReplacementOrganisation(NamedTuple):
    organisation: Organisation
    owner_role: AccountRole
    member_roles: List[AccountRole]


class IAccountStore(ABC):
    """Account store interface - application layer"""

    @abstractmethod
    async def login_credentials_user_email_exists(self, email: str) -> bool:
        """Check whether a username/password credential exists for an email"""
        pass

    @abstractmethod
    async def get_organisation(self, organisation_id: UUID) -> Organisation:
        """Get organisation by ID. Raises OrganisationNotFoundError."""
        pass

    @abstractmethod
    async def create_owner_account(self, data: CreateOwnerAccountInput) -> OwnerAccount:
        """
        Create an account together with its login credential, a new
        organisation named after the account and an owner role in it.

        Raises:
            EmailAlreadyExistsError: (provider, email) already taken
        """
        pass

    @abstractmethod
    async def add_organisation_member(
        self, data: AddOrganisationMemberInput
    ) -> AccountRole:
        """Grant an account a role in an organisation"""
        pass

    @abstractmethod
    async def create_organisation(self, data: CreateOrganisationInput) -> Organisation:
        """Create an organisation owned by data.owner_id, with its owner role"""
        pass

    @abstractmethod
    async def create_organisation_with_members(
        self, data: CreateOrganisationInput, members: List[MemberGrant]
    ) -> ReplacementOrganisation:
        """Create an owned organisation and grant all members their roles atomically"""
        pass

    @abstractmethod
    async def update_organisation(self, data: UpdateOrganisationInput) -> Organisation:
        """Update an organisation. Raises OrganisationNotFoundError."""
        pass

    @abstractmethod
    async def list_organisation_members(self, organisation_id: UUID) -> List[AccountRole]:
        """List all account roles of an organisation"""
        pass

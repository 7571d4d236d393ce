"""
Provisioning Use Case DTOs (Data Transfer Objects)

All Command, Settings and Response classes for admin provisioning.
Responses are built once, at the end of a use case, from the final state.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Account, Organisation


# ============================================================================
# Command DTOs
# ============================================================================


class CreateAdminUserCommand(BaseModel):
    """Create an admin account inside an existing organisation"""

    email: str
    password: str
    first_name: str
    last_name: str
    organisation_id: UUID


class CreateAdminUserWithNewOrganisationCommand(BaseModel):
    """Create an admin account owning a brand-new organisation"""

    email: str
    password: str
    first_name: str
    last_name: str
    org_name: str


class BootstrapAdminSettings(BaseModel):
    """
    Static admin configuration consumed by the bootstrap.

    An empty email disables the bootstrap, an empty password skips it.
    """

    email: str = ""
    password: str = ""
    name: str = ""
    org_name: str = ""

    @classmethod
    def from_config(cls, config) -> "BootstrapAdminSettings":
        return cls(
            email=config.BOOTSTRAP_ADMIN_EMAIL or "",
            password=config.BOOTSTRAP_ADMIN_PASSWORD or "",
            name=config.BOOTSTRAP_ADMIN_NAME or "",
            org_name=config.BOOTSTRAP_ADMIN_ORG_NAME or "",
        )


# ============================================================================
# Response DTOs
# ============================================================================


class AccountInfo(BaseModel):
    """Account information in provisioning responses"""

    id: str
    name: str
    first_name: str
    last_name: str

    @classmethod
    def from_entity(cls, account: Account) -> "AccountInfo":
        return cls(
            id=str(account.id),
            name=account.name,
            first_name=account.first_name,
            last_name=account.last_name,
        )


class OrganisationInfo(BaseModel):
    """Organisation information in provisioning responses"""

    id: str
    name: str
    description: Optional[str] = None
    avatar: Optional[str] = None
    owner_id: Optional[str] = None

    @classmethod
    def from_entity(cls, organisation: Organisation) -> "OrganisationInfo":
        return cls(
            id=str(organisation.id),
            name=organisation.name,
            description=organisation.description,
            avatar=organisation.avatar,
            owner_id=str(organisation.owner_id) if organisation.owner_id else None,
        )


class CreateAdminUserResponse(BaseModel):
    """
    Result of CreateAdminUserUseCase.

    organisation and role describe where the account ended up: the requested
    organisation, or its replacement when the requested one had no owner
    (replaced_organisation_id is then the requested organisation's id).
    """

    account: AccountInfo
    organisation: OrganisationInfo
    role: str
    replaced_organisation_id: Optional[str] = None


class CreateAdminUserWithNewOrganisationResponse(BaseModel):
    """Result of CreateAdminUserWithNewOrganisationUseCase"""

    account: AccountInfo
    organisation: OrganisationInfo


class BootstrapAdminResponse(BaseModel):
    """
    Result of BootstrapAdminUseCase.

    status is one of: disabled, already_exists, skipped, created
    """

    status: str
    account: Optional[AccountInfo] = None
    organisation: Optional[OrganisationInfo] = None

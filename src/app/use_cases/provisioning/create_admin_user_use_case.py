"""
Create Admin User Use Case

Attaches a new admin account to an existing organisation, replacing the
organisation with a freshly-owned copy when it has no owner.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.account_store import (
    AccountStoreError,
    AddOrganisationMemberInput,
    CreateOrganisationInput,
    CreateOwnerAccountInput,
    EmailAlreadyExistsError,
    IAccountStore,
    MemberGrant,
    OrganisationNotFoundError,
)
from src.app.services.password_hasher import IPasswordHasher, PasswordHashError
from src.domain.entities import AuthProvider, Role

from .dtos import (
    AccountInfo,
    CreateAdminUserCommand,
    CreateAdminUserResponse,
    OrganisationInfo,
)

logger = logging.getLogger(__name__)


class CreateAdminUserUseCase:
    """
    Use case for creating an admin account in a specified organisation.

    Business Logic:
    1. Fail with EMAIL_ALREADY_EXISTS if a password credential exists for the email
    2. Hash password
    3. Fail with ORGANISATION_NOT_FOUND if the requested organisation is missing
    4. Create the owner account (account, credential, personal organisation, owner role)
    5. Grant the account the admin role in the requested organisation
    6. If the requested organisation has no owner, create a replacement
       organisation owned by the account and copy every other member's role
       onto it; the original organisation is left as is
    7. Return the account with the organisation and role it ended up with

    Store failures are returned as INTERNAL_ERROR with context; nothing
    already written is undone.
    """

    def __init__(self, store: IAccountStore, hasher: IPasswordHasher):
        self.store = store
        self.hasher = hasher

    async def execute(
        self, command: CreateAdminUserCommand
    ) -> Result[CreateAdminUserResponse]:
        """
        Execute create admin user use case.

        Args:
            command: CreateAdminUserCommand with credentials, names and organisation_id

        Returns:
            Result[CreateAdminUserResponse], or Error with code
            EMAIL_ALREADY_EXISTS, ORGANISATION_NOT_FOUND or INTERNAL_ERROR
        """
        try:
            exists = await self.store.login_credentials_user_email_exists(command.email)
        except AccountStoreError as e:
            return Return.err(
                Error("INTERNAL_ERROR", f"error checking if user exists: {e}")
            )
        if exists:
            return Return.err(
                Error(
                    "EMAIL_ALREADY_EXISTS",
                    f"user with email {command.email} already exists",
                )
            )

        try:
            password_hash = self.hasher.hash_password(command.password)
        except PasswordHashError as e:
            return Return.err(Error("INTERNAL_ERROR", f"failed to hash password: {e}"))

        try:
            organisation = await self.store.get_organisation(command.organisation_id)
        except OrganisationNotFoundError as e:
            return Return.err(Error("ORGANISATION_NOT_FOUND", str(e)))
        except AccountStoreError as e:
            return Return.err(
                Error("INTERNAL_ERROR", f"failed to get organisation: {e}")
            )

        full_name = f"{command.first_name} {command.last_name}"

        try:
            owner_account = await self.store.create_owner_account(
                CreateOwnerAccountInput(
                    name=full_name,
                    first_name=command.first_name,
                    last_name=command.last_name,
                    provider=AuthProvider.username_password,
                    email=command.email,
                    password_hash=password_hash,
                )
            )
        except EmailAlreadyExistsError as e:
            return Return.err(Error("EMAIL_ALREADY_EXISTS", str(e)))
        except AccountStoreError as e:
            return Return.err(
                Error("INTERNAL_ERROR", f"failed to create admin user: {e}")
            )

        account = owner_account.account

        # The owner role already lives in the requested organisation
        if owner_account.account_role.organisation_id == organisation.id:
            return Return.ok(
                CreateAdminUserResponse(
                    account=AccountInfo.from_entity(account),
                    organisation=OrganisationInfo.from_entity(
                        owner_account.organisation
                    ),
                    role=owner_account.account_role.role.value,
                )
            )

        try:
            admin_role = await self.store.add_organisation_member(
                AddOrganisationMemberInput(
                    organisation_id=organisation.id,
                    account_id=account.id,
                    role=Role.admin,
                )
            )
        except AccountStoreError as e:
            return Return.err(
                Error(
                    "INTERNAL_ERROR",
                    f"failed to create admin role in organisation: {e}",
                )
            )

        if organisation.owner_id is not None:
            logger.info(
                "Added admin %s to organisation %s", account.id, organisation.id
            )
            return Return.ok(
                CreateAdminUserResponse(
                    account=AccountInfo.from_entity(account),
                    organisation=OrganisationInfo.from_entity(organisation),
                    role=admin_role.role.value,
                )
            )

        # Ownerless organisation: the owner pointer is not mutable, so the
        # account becomes owner of a copy that receives every other member
        try:
            members = await self.store.list_organisation_members(organisation.id)
        except AccountStoreError as e:
            return Return.err(
                Error("INTERNAL_ERROR", f"failed to list organisation members: {e}")
            )

        grants = [
            MemberGrant(account_id=member.account_id, role=member.role)
            for member in members
            if member.account_id != account.id
        ]

        try:
            replacement = await self.store.create_organisation_with_members(
                CreateOrganisationInput(
                    name=organisation.name,
                    owner_id=account.id,
                    description=organisation.description,
                    avatar=organisation.avatar,
                ),
                grants,
            )
        except AccountStoreError as e:
            return Return.err(
                Error(
                    "INTERNAL_ERROR",
                    f"failed to create organisation with new owner: {e}",
                )
            )

        logger.warning(
            "Organisation %s had no owner; replaced by %s owned by %s with %d members copied",
            organisation.id,
            replacement.organisation.id,
            account.id,
            len(replacement.member_roles),
        )

        return Return.ok(
            CreateAdminUserResponse(
                account=AccountInfo.from_entity(account),
                organisation=OrganisationInfo.from_entity(replacement.organisation),
                role=replacement.owner_role.role.value,
                replaced_organisation_id=str(organisation.id),
            )
        )

"""
Create Admin User With New Organisation Use Case

Creates a brand-new organisation together with its first admin/owner account.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.account_store import (
    AccountStoreError,
    CreateOwnerAccountInput,
    EmailAlreadyExistsError,
    IAccountStore,
    UpdateOrganisationInput,
)
from src.app.services.password_hasher import IPasswordHasher, PasswordHashError
from src.domain.entities import AuthProvider

from .dtos import (
    AccountInfo,
    CreateAdminUserWithNewOrganisationCommand,
    CreateAdminUserWithNewOrganisationResponse,
    OrganisationInfo,
)

logger = logging.getLogger(__name__)


class CreateAdminUserWithNewOrganisationUseCase:
    """
    Use case for creating an owner account and its organisation.

    Business Logic:
    1. Fail with EMAIL_ALREADY_EXISTS if a password credential exists for the email
    2. Hash password
    3. Create the owner account; the store names the organisation after the account
    4. Rename the organisation to org_name when it differs

    The returned organisation is always owned by the returned account.
    """

    def __init__(self, store: IAccountStore, hasher: IPasswordHasher):
        self.store = store
        self.hasher = hasher

    async def execute(
        self, command: CreateAdminUserWithNewOrganisationCommand
    ) -> Result[CreateAdminUserWithNewOrganisationResponse]:
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
                Error(
                    "INTERNAL_ERROR",
                    f"failed to create admin user with organisation: {e}",
                )
            )

        organisation = OrganisationInfo.from_entity(owner_account.organisation)

        if organisation.name != command.org_name:
            try:
                await self.store.update_organisation(
                    UpdateOrganisationInput(
                        id=owner_account.organisation.id, name=command.org_name
                    )
                )
            except AccountStoreError as e:
                return Return.err(
                    Error("INTERNAL_ERROR", f"failed to update organisation name: {e}")
                )
            organisation = organisation.model_copy(update={"name": command.org_name})

        logger.info(
            "Created admin %s owning organisation %s",
            owner_account.account.id,
            organisation.id,
        )

        return Return.ok(
            CreateAdminUserWithNewOrganisationResponse(
                account=AccountInfo.from_entity(owner_account.account),
                organisation=organisation,
            )
        )

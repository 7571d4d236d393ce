"""
Use Case: Bootstrap Admin

Run once at process start-up: makes sure the configured admin account and
its organisation exist.
"""

import logging
from typing import Tuple

from libs.result import Error, Result, Return
from src.app.services.account_store import AccountStoreError, IAccountStore
from src.app.services.password_hasher import IPasswordHasher

from .create_admin_user_with_new_organisation_use_case import (
    CreateAdminUserWithNewOrganisationUseCase,
)
from .dtos import (
    BootstrapAdminResponse,
    BootstrapAdminSettings,
    CreateAdminUserWithNewOrganisationCommand,
)

logger = logging.getLogger(__name__)

DEFAULT_FIRST_NAME = "Admin"
DEFAULT_LAST_NAME = "User"
DEFAULT_ORG_NAME = "Default Organization"


def parse_admin_name(full_name: str) -> Tuple[str, str]:
    """
    Split a configured full name into (first_name, last_name).

    The first whitespace-separated token is the first name, the remaining
    tokens joined by single spaces are the last name. Missing parts fall
    back to "Admin" / "User".
    """
    first_name, last_name = DEFAULT_FIRST_NAME, DEFAULT_LAST_NAME
    parts = full_name.split()
    if parts:
        first_name = parts[0]
        if len(parts) > 1:
            last_name = " ".join(parts[1:])
    return first_name, last_name


class BootstrapAdminUseCase:
    """
    Ensure the configured admin account/organisation pair exists.

    Business Logic:
    1. No admin email configured: nothing to do (disabled), no store calls
    2. Admin email already registered: nothing to do (already_exists)
    3. No admin password configured: skip with a warning (skipped)
    4. Otherwise create the admin with a new organisation (created)

    Idempotent: a second run with the same settings reports already_exists.
    Provisioning failures are logged and returned; the caller decides
    whether they are fatal.
    """

    def __init__(
        self,
        store: IAccountStore,
        hasher: IPasswordHasher,
        settings: BootstrapAdminSettings,
    ):
        self.store = store
        self.hasher = hasher
        self.settings = settings

    async def execute(self) -> Result[BootstrapAdminResponse]:
        admin_email = self.settings.email
        if not admin_email:
            return Return.ok(BootstrapAdminResponse(status="disabled"))

        try:
            exists = await self.store.login_credentials_user_email_exists(admin_email)
        except AccountStoreError as e:
            logger.error("Failed to check bootstrap admin user: %s", e)
            return Return.err(
                Error("INTERNAL_ERROR", f"error checking if user exists: {e}")
            )

        if exists:
            logger.info("Admin user already exists, skipping bootstrap")
            return Return.ok(BootstrapAdminResponse(status="already_exists"))

        if not self.settings.password:
            logger.warning("Admin bootstrap password not set, skipping admin creation")
            return Return.ok(BootstrapAdminResponse(status="skipped"))

        first_name, last_name = parse_admin_name(self.settings.name)
        org_name = self.settings.org_name or DEFAULT_ORG_NAME

        use_case = CreateAdminUserWithNewOrganisationUseCase(self.store, self.hasher)
        result = await use_case.execute(
            CreateAdminUserWithNewOrganisationCommand(
                email=admin_email,
                password=self.settings.password,
                first_name=first_name,
                last_name=last_name,
                org_name=org_name,
            )
        )

        if result.is_err():
            logger.error(
                "Failed to create bootstrap admin user: %s: %s",
                result.error.code,
                result.error.message,
            )
            return result

        created = result.value
        logger.info(
            "Created bootstrap admin user %s (%s) with organisation %s (%s)",
            created.account.name,
            created.account.id,
            created.organisation.name,
            created.organisation.id,
        )

        return Return.ok(
            BootstrapAdminResponse(
                status="created",
                account=created.account,
                organisation=created.organisation,
            )
        )

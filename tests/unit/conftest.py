from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.entities import (
    Account,
    AccountRole,
    AuthProvider,
    LoginCredential,
    Organisation,
    Role,
)
from src.app.services.account_store import OwnerAccount


@pytest.fixture
def mock_store():
    """Mock account store with every primitive as an AsyncMock"""
    store = MagicMock()
    store.login_credentials_user_email_exists = AsyncMock(return_value=False)
    store.get_organisation = AsyncMock()
    store.create_owner_account = AsyncMock()
    store.add_organisation_member = AsyncMock()
    store.create_organisation = AsyncMock()
    store.create_organisation_with_members = AsyncMock()
    store.update_organisation = AsyncMock()
    store.list_organisation_members = AsyncMock(return_value=[])
    return store


@pytest.fixture
def mock_hasher():
    hasher = MagicMock()
    hasher.hash_password = MagicMock(return_value="hashed_password")
    return hasher


def make_owner_account(
    first_name: str = "Jane", last_name: str = "Doe", email: str = "admin@x.com"
) -> OwnerAccount:
    """Build what create_owner_account returns: a fresh personal organisation"""
    full_name = f"{first_name} {last_name}"
    account = Account(
        id=uuid4(), name=full_name, first_name=first_name, last_name=last_name
    )
    organisation = Organisation(id=uuid4(), name=full_name, owner_id=account.id)
    credential = LoginCredential(
        id=uuid4(),
        account_id=account.id,
        provider=AuthProvider.username_password,
        provider_user_id=email,
        email=email,
        password_hash="hashed_password",
    )
    account_role = AccountRole(
        id=uuid4(),
        account_id=account.id,
        organisation_id=organisation.id,
        role=Role.owner,
    )
    return OwnerAccount(
        account=account,
        organisation=organisation,
        login_credential=credential,
        account_role=account_role,
    )


@pytest.fixture
def owner_account_factory():
    return make_owner_account

from uuid import UUID

import pytest
from sqlalchemy import func
from sqlmodel import select

from src.app.use_cases.provisioning import (
    BootstrapAdminSettings,
    BootstrapAdminUseCase,
    CreateAdminUserCommand,
    CreateAdminUserUseCase,
    CreateAdminUserWithNewOrganisationCommand,
    CreateAdminUserWithNewOrganisationUseCase,
)
from src.domain.entities import LoginCredential, Organisation, Role


async def count(db_session, model):
    result = await db_session.exec(select(func.count()).select_from(model))
    return result.one()


@pytest.mark.asyncio
async def test_admin_with_new_organisation_example(account_store, hasher, db_session):
    """admin@x.com / Jane Doe / Acme gives an Acme organisation owned by Jane"""
    use_case = CreateAdminUserWithNewOrganisationUseCase(account_store, hasher)

    result = await use_case.execute(
        CreateAdminUserWithNewOrganisationCommand(
            email="admin@x.com",
            password="secret",
            first_name="Jane",
            last_name="Doe",
            org_name="Acme",
        )
    )

    assert result.is_ok()
    response = result.value
    assert response.account.first_name == "Jane"
    assert response.account.last_name == "Doe"
    assert response.organisation.name == "Acme"
    assert response.organisation.owner_id == response.account.id

    stored = await account_store.get_organisation(UUID(response.organisation.id))
    assert stored.name == "Acme"
    assert await count(db_session, Organisation) == 1

    credential = (
        await db_session.exec(
            select(LoginCredential).where(LoginCredential.email == "admin@x.com")
        )
    ).one()
    assert credential.password_hash != "secret"
    assert hasher.verify_password("secret", credential.password_hash)


@pytest.mark.asyncio
async def test_same_email_twice_is_conflict(account_store, hasher, seed_organisation):
    """Second creation with the same email fails for both operations"""
    with_org = CreateAdminUserWithNewOrganisationUseCase(account_store, hasher)
    command = CreateAdminUserWithNewOrganisationCommand(
        email="admin@x.com",
        password="secret",
        first_name="Jane",
        last_name="Doe",
        org_name="Acme",
    )
    assert (await with_org.execute(command)).is_ok()

    second = await with_org.execute(command)
    assert second.is_err()
    assert second.error.code == "EMAIL_ALREADY_EXISTS"

    organisation = await seed_organisation("Other", owner=True)
    admin = CreateAdminUserUseCase(account_store, hasher)
    third = await admin.execute(
        CreateAdminUserCommand(
            email="admin@x.com",
            password="secret",
            first_name="Jane",
            last_name="Doe",
            organisation_id=organisation.id,
        )
    )
    assert third.is_err()
    assert third.error.code == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_admin_joins_owned_organisation(
    account_store, hasher, db_session, seed_organisation, test_data
):
    """Owned organisation gains exactly one admin role; no replacement organisation"""
    organisation = await seed_organisation(
        "Acme", owner=True, member_roles=[Role.member]
    )
    members_before = await account_store.list_organisation_members(organisation.id)
    organisations_before = await count(db_session, Organisation)

    new_admin = test_data.get_copy("new_admin")
    result = await CreateAdminUserUseCase(account_store, hasher).execute(
        CreateAdminUserCommand(organisation_id=organisation.id, **new_admin)
    )

    assert result.is_ok()
    response = result.value
    assert response.organisation.id == str(organisation.id)
    assert response.role == "admin"
    assert response.replaced_organisation_id is None

    members_after = await account_store.list_organisation_members(organisation.id)
    assert len(members_after) == len(members_before) + 1

    # Only the personal organisation of the new account was created
    assert await count(db_session, Organisation) == organisations_before + 1
    acme_count = (
        await db_session.exec(
            select(func.count())
            .select_from(Organisation)
            .where(Organisation.name == "Acme")
        )
    ).one()
    assert acme_count == 1


@pytest.mark.asyncio
async def test_admin_replaces_ownerless_organisation(
    account_store, hasher, seed_organisation, test_data
):
    """
    Ownerless organisation with N members yields a replacement with N+1 roles.

    The original keeps its members and stays ownerless: members are
    duplicated into the replacement, not moved.
    """
    original = await seed_organisation(
        "Acme",
        member_roles=[Role.member, Role.admin, Role.member],
        description="Widgets",
        avatar="https://cdn.example.com/acme.png",
    )
    original_members = await account_store.list_organisation_members(original.id)
    assert len(original_members) == 3

    new_admin = test_data.get_copy("new_admin")
    result = await CreateAdminUserUseCase(account_store, hasher).execute(
        CreateAdminUserCommand(organisation_id=original.id, **new_admin)
    )

    assert result.is_ok()
    response = result.value
    assert response.replaced_organisation_id == str(original.id)
    assert response.organisation.id != str(original.id)
    assert response.organisation.owner_id == response.account.id
    assert response.role == "owner"

    replacement = await account_store.get_organisation(UUID(response.organisation.id))
    assert replacement.name == "Acme"
    assert replacement.description == "Widgets"
    assert replacement.avatar == "https://cdn.example.com/acme.png"

    replacement_members = await account_store.list_organisation_members(replacement.id)
    assert len(replacement_members) == len(original_members) + 1
    copied = sorted(
        (str(m.account_id), m.role.value)
        for m in replacement_members
        if str(m.account_id) != response.account.id
    )
    assert copied == sorted(
        (str(m.account_id), m.role.value) for m in original_members
    )

    # Original is left as is, plus the admin role granted before the replacement
    untouched = await account_store.get_organisation(original.id)
    assert untouched.owner_id is None
    after = await account_store.list_organisation_members(original.id)
    assert len(after) == len(original_members) + 1
    assert {m.role for m in after if str(m.account_id) == response.account.id} == {
        Role.admin
    }


@pytest.mark.asyncio
async def test_bootstrap_twice_provisions_once(
    account_store, hasher, db_session, test_data
):
    settings = BootstrapAdminSettings(**test_data.get_copy("bootstrap_admin"))
    use_case = BootstrapAdminUseCase(account_store, hasher, settings)

    first = await use_case.execute()
    second = await use_case.execute()

    assert first.is_ok()
    assert first.value.status == "created"
    assert first.value.account.first_name == "Jane"
    assert first.value.organisation.name == "Acme"
    assert second.is_ok()
    assert second.value.status == "already_exists"

    assert await count(db_session, LoginCredential) == 1
    assert await count(db_session, Organisation) == 1

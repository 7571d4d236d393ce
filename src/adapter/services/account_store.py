from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.app.services.account_store import (
    AccountStoreError,
    AddOrganisationMemberInput,
    CreateOrganisationInput,
    CreateOwnerAccountInput,
    EmailAlreadyExistsError,
    IAccountStore,
    MemberGrant,
    OrganisationNotFoundError,
    OwnerAccount,
    ReplacementOrganisation,
    UpdateOrganisationInput,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    Account,
    AccountRole,
    AuthProvider,
    LoginCredential,
    Organisation,
    Role,
)


class SqlAlchemyAccountStore(IAccountStore):
    """
    Account store implementation on top of the SQLModel UnitOfWork.

    Each primitive opens the unit of work, commits once and translates
    SQLAlchemy failures into AccountStoreError subclasses.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def login_credentials_user_email_exists(self, email: str) -> bool:
        try:
            async with self.uow:
                return await self.uow.login_credentials.email_exists(
                    AuthProvider.username_password, email
                )
        except SQLAlchemyError as e:
            raise AccountStoreError(f"failed to check login credentials: {e}") from e

    async def get_organisation(self, organisation_id: UUID) -> Organisation:
        try:
            async with self.uow:
                organisation = await self.uow.organisations.get_by_id(organisation_id)
        except SQLAlchemyError as e:
            raise AccountStoreError(f"failed to get organisation: {e}") from e

        if organisation is None:
            raise OrganisationNotFoundError(f"organisation {organisation_id} not found")
        return organisation

    async def create_owner_account(self, data: CreateOwnerAccountInput) -> OwnerAccount:
        provider_user_id = data.provider_user_id
        if not provider_user_id and data.provider == AuthProvider.username_password:
            provider_user_id = data.email

        try:
            async with self.uow:
                account = await self.uow.accounts.create(
                    Account(
                        name=data.name,
                        first_name=data.first_name,
                        last_name=data.last_name,
                    )
                )
                credential = await self.uow.login_credentials.create(
                    LoginCredential(
                        account_id=account.id,
                        provider=data.provider,
                        provider_user_id=provider_user_id,
                        email=data.email,
                        password_hash=data.password_hash,
                    )
                )
                organisation = await self.uow.organisations.create(
                    Organisation(name=data.name, owner_id=account.id)
                )
                account_role = await self.uow.account_roles.create(
                    AccountRole(
                        account_id=account.id,
                        organisation_id=organisation.id,
                        role=Role.owner,
                    )
                )
                await self.uow.commit()
        except IntegrityError as e:
            # The (provider, email) unique index is the authoritative guard
            raise EmailAlreadyExistsError(
                f"user with email {data.email} already exists"
            ) from e
        except SQLAlchemyError as e:
            raise AccountStoreError(f"failed to create owner account: {e}") from e

        return OwnerAccount(
            account=account,
            organisation=organisation,
            login_credential=credential,
            account_role=account_role,
        )

    async def add_organisation_member(
        self, data: AddOrganisationMemberInput
    ) -> AccountRole:
        try:
            async with self.uow:
                account_role = await self.uow.account_roles.create(
                    AccountRole(
                        account_id=data.account_id,
                        organisation_id=data.organisation_id,
                        role=data.role,
                    )
                )
                await self.uow.commit()
        except IntegrityError as e:
            raise AccountStoreError(
                f"account {data.account_id} already has a role in "
                f"organisation {data.organisation_id}"
            ) from e
        except SQLAlchemyError as e:
            raise AccountStoreError(f"failed to add organisation member: {e}") from e
        return account_role

    async def create_organisation(self, data: CreateOrganisationInput) -> Organisation:
        replacement = await self.create_organisation_with_members(data, [])
        return replacement.organisation

    async def create_organisation_with_members(
        self, data: CreateOrganisationInput, members: List[MemberGrant]
    ) -> ReplacementOrganisation:
        try:
            async with self.uow:
                organisation = await self.uow.organisations.create(
                    Organisation(
                        name=data.name,
                        description=data.description,
                        avatar=data.avatar,
                        owner_id=data.owner_id,
                    )
                )
                owner_role = await self.uow.account_roles.create(
                    AccountRole(
                        account_id=data.owner_id,
                        organisation_id=organisation.id,
                        role=Role.owner,
                    )
                )
                member_roles = []
                for member in members:
                    if member.account_id == data.owner_id:
                        continue
                    member_roles.append(
                        await self.uow.account_roles.create(
                            AccountRole(
                                account_id=member.account_id,
                                organisation_id=organisation.id,
                                role=member.role,
                            )
                        )
                    )
                await self.uow.commit()
        except SQLAlchemyError as e:
            raise AccountStoreError(f"failed to create organisation: {e}") from e

        return ReplacementOrganisation(
            organisation=organisation,
            owner_role=owner_role,
            member_roles=member_roles,
        )

    async def update_organisation(self, data: UpdateOrganisationInput) -> Organisation:
        try:
            async with self.uow:
                organisation = await self.uow.organisations.get_by_id(data.id)
                if organisation is None:
                    raise OrganisationNotFoundError(f"organisation {data.id} not found")

                if data.name is not None:
                    organisation.name = data.name
                if data.description is not None:
                    organisation.description = data.description
                if data.avatar is not None:
                    organisation.avatar = data.avatar

                organisation = await self.uow.organisations.update(organisation)
                await self.uow.commit()
        except SQLAlchemyError as e:
            raise AccountStoreError(f"failed to update organisation: {e}") from e
        return organisation

    async def list_organisation_members(self, organisation_id: UUID) -> List[AccountRole]:
        try:
            async with self.uow:
                return await self.uow.account_roles.get_by_organisation_id(
                    organisation_id
                )
        except SQLAlchemyError as e:
            raise AccountStoreError(f"failed to list organisation members: {e}") from e

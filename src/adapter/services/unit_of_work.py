from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.account_repository import AccountRepository
from src.adapter.repositories.account_role_repository import AccountRoleRepository
from src.adapter.repositories.login_credential_repository import LoginCredentialRepository
from src.adapter.repositories.organisation_repository import OrganisationRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.login_credentials = LoginCredentialRepository(self.session)
        self.organisations = OrganisationRepository(self.session)
        self.account_roles = AccountRoleRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        # Discard uncommitted work when the block fails
        if exc_type is not None:
            await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_role_repository import IAccountRoleRepository
from src.domain.entities import AccountRole


class AccountRoleRepository(IAccountRoleRepository):
    """AccountRole repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_organisation_id(self, organisation_id: UUID) -> List[AccountRole]:
        """Get all account roles for an organisation"""
        stmt = (
            select(AccountRole)
            .where(AccountRole.organisation_id == organisation_id)
            .order_by(AccountRole.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, account_role: AccountRole) -> AccountRole:
        """Create a new account role"""
        self.session.add(account_role)
        await self.session.flush()
        await self.session.refresh(account_role)
        return account_role

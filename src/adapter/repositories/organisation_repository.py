from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.organisation_repository import IOrganisationRepository
from src.domain.entities import Organisation


class OrganisationRepository(IOrganisationRepository):
    """Organisation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, organisation_id: UUID) -> Optional[Organisation]:
        """Get organisation by ID"""
        stmt = select(Organisation).where(Organisation.id == organisation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, organisation: Organisation) -> Organisation:
        """Create a new organisation"""
        self.session.add(organisation)
        await self.session.flush()
        await self.session.refresh(organisation)
        return organisation

    async def update(self, organisation: Organisation) -> Organisation:
        """Update existing organisation"""
        self.session.add(organisation)
        await self.session.flush()
        await self.session.refresh(organisation)
        return organisation

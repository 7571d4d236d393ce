from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Organisation


class IOrganisationRepository(ABC):
    """Organisation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organisation_id: UUID) -> Optional[Organisation]:
        """Get organisation by ID"""
        pass

    @abstractmethod
    @abstractmethod
    async def create(self, organisation: Organisation) -> Organisation:
        """Create a new organisation"""
        pass

    @abstractmethod
    async def update(self, organisation: Organisation) -> Organisation:
        """Update existing organisation"""
        pass

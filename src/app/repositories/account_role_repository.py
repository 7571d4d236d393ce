from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import AccountRole


class IAccountRoleRepository(ABC):
    """AccountRole repository interface - application layer"""

    @abstractmethod
    async def get_by_organisation_id(self, organisation_id: UUID) -> List[AccountRole]:
        """Get all account roles for an organisation"""
        pass

    @abstractmethod
    async def create(self, account_role: AccountRole) -> AccountRole:
        """Create a new account role"""
        pass

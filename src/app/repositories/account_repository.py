from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        pass

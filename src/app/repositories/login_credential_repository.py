from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import AuthProvider, LoginCredential


class ILoginCredentialRepository(ABC):
    """LoginCredential repository interface - application layer"""

    @abstractmethod
    async def get_by_provider_and_email(
        self, provider: AuthProvider, email: str
    ) -> Optional[LoginCredential]:
        """Get login credential by provider and email"""
        pass

    @abstractmethod
    async def email_exists(self, provider: AuthProvider, email: str) -> bool:
        """Check whether a credential for (provider, email) exists"""
        pass

    @abstractmethod
    async def create(self, credential: LoginCredential) -> LoginCredential:
        """Create a new login credential"""
        pass

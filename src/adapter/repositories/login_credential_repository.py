from typing import Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.login_credential_repository import ILoginCredentialRepository
from src.domain.entities import AuthProvider, LoginCredential


class LoginCredentialRepository(ILoginCredentialRepository):
    """LoginCredential repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_provider_and_email(
        self, provider: AuthProvider, email: str
    ) -> Optional[LoginCredential]:
        """Get login credential by provider and email"""
        stmt = select(LoginCredential).where(
            LoginCredential.provider == provider, LoginCredential.email == email
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def email_exists(self, provider: AuthProvider, email: str) -> bool:
        """Check whether a credential for (provider, email) exists"""
        stmt = select(func.count(LoginCredential.id)).where(
            LoginCredential.provider == provider, LoginCredential.email == email
        )
        result = await self.session.exec(stmt)
        return result.one() > 0

    async def create(self, credential: LoginCredential) -> LoginCredential:
        """Create a new login credential"""
        self.session.add(credential)
        await self.session.flush()
        await self.session.refresh(credential)
        return credential

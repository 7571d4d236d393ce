from abc import ABC, abstractmethod

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.account_role_repository import IAccountRoleRepository
from src.app.repositories.login_credential_repository import ILoginCredentialRepository
from src.app.repositories.organisation_repository import IOrganisationRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    login_credentials: ILoginCredentialRepository
    organisations: IOrganisationRepository
    account_roles: IAccountRoleRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

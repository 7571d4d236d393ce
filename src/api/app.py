from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.result import Result
from src.adapter.services.account_store import SqlAlchemyAccountStore
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.provisioning import (
    BootstrapAdminResponse,
    BootstrapAdminSettings,
    BootstrapAdminUseCase,
)
import logging

logger = logging.getLogger(__name__)


async def run_bootstrap_admin(
    ApplicationConfig, session_factory
) -> Result[BootstrapAdminResponse]:
    """Run the admin bootstrap with settings read once from the config"""
    settings = BootstrapAdminSettings.from_config(ApplicationConfig)
    async with session_factory() as session:
        store = SqlAlchemyAccountStore(SqlAlchemyUnitOfWork(session))
        use_case = BootstrapAdminUseCase(store, BcryptPasswordHasher(), settings)
        return await use_case.execute()


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.depends import AsyncSessionLocal, create_tables

        if ApplicationConfig.AUTO_CREATE_TABLES:
            await create_tables()

        result = await run_bootstrap_admin(ApplicationConfig, AsyncSessionLocal)
        if result.is_err():
            # Not fatal for the server
            logger.error(f"Admin bootstrap failed: {result.error.code}")
        else:
            logger.info(f"Admin bootstrap: {result.value.status}")
        yield

    app = FastAPI(title="Provisioning API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import health_check

    app.include_router(health_check.router, tags=["Health"])

    return app

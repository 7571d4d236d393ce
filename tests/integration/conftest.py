import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.adapter.services.account_store import SqlAlchemyAccountStore
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.entities import Account, AccountRole, Organisation, Role


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def account_store(db_session):
    return SqlAlchemyAccountStore(SqlAlchemyUnitOfWork(db_session))


@pytest_asyncio.fixture
def hasher():
    # Lowest bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def seed_organisation(db_session):
    """Insert an organisation with the given members directly, bypassing the store"""

    async def _seed(name, owner=False, member_roles=(), description=None, avatar=None):
        owner_account = None
        if owner:
            owner_account = Account(name="Olga Owner", first_name="Olga", last_name="Owner")
            db_session.add(owner_account)
            await db_session.flush()

        organisation = Organisation(
            name=name,
            description=description,
            avatar=avatar,
            owner_id=owner_account.id if owner_account else None,
        )
        db_session.add(organisation)
        await db_session.flush()

        if owner_account:
            db_session.add(
                AccountRole(
                    account_id=owner_account.id,
                    organisation_id=organisation.id,
                    role=Role.owner,
                )
            )

        for index, role in enumerate(member_roles):
            member = Account(
                name=f"Member {index}", first_name="Member", last_name=str(index)
            )
            db_session.add(member)
            await db_session.flush()
            db_session.add(
                AccountRole(
                    account_id=member.id, organisation_id=organisation.id, role=role
                )
            )

        await db_session.commit()
        return organisation

    return _seed


@pytest_asyncio.fixture
async def client():
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

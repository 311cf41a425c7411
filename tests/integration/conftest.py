import pytest
import pytest_asyncio
from fakeredis import aioredis
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.redis_cache import RedisCache
from src.adapter.services.security import BcryptPasswordHasher, JoseTokenIssuer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.availability import StaticAvailability
from src.domain import Project, Task, TaskPriority, TaskStatus, User


@pytest_asyncio.fixture
async def engine(tmp_path):
    # File database so every request session sees committed rows
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def redis_client():
    client = aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def cache(redis_client):
    return RedisCache(redis_client)


@pytest.fixture
def availability():
    """Queue broker reported down: exports run inline unless a test flips it"""
    return StaticAvailability(False)


@pytest.fixture
def job_queue():
    return None


@pytest.fixture
def file_storage(tmp_path):
    return LocalFileStorage(base_path=str(tmp_path / "exports"))


@pytest.fixture
def hasher():
    # Minimum cost keeps registration tests fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return JoseTokenIssuer(
        secret=ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
        expires_in_seconds=3600,
    )


@pytest_asyncio.fixture
async def client(engine, cache, availability, job_queue, file_storage, hasher, token_issuer):
    from src.api.app import create_app
    from src.depends import (
        get_availability,
        get_cache,
        get_file_storage,
        get_job_queue,
        get_password_hasher,
        get_token_issuer,
        get_unit_of_work,
    )

    app = create_app(ApplicationConfig)

    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    # Override to create a new session per request
    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_availability] = lambda: availability
    app.dependency_overrides[get_job_queue] = lambda: job_queue
    app.dependency_overrides[get_file_storage] = lambda: file_storage
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_user(db_session, token_issuer):
    """Create a user directly in the store; returns (user, auth headers)"""

    async def _make_user(name: str, email: str):
        user = User(name=name, email=email, password_hash="not-used")
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        headers = {"Authorization": f"Bearer {token_issuer.issue(user.id, user.email)}"}
        return user, headers

    return _make_user


@pytest_asyncio.fixture
async def alice(make_user):
    return await make_user("Alice", "alice@example.com")


@pytest_asyncio.fixture
async def bob(make_user):
    return await make_user("Bob", "bob@example.com")


@pytest_asyncio.fixture
async def alice_project(db_session, alice):
    user, _ = alice
    project = Project(owner_id=user.id, name="Website Redesign", description="Q3 refresh")
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest_asyncio.fixture
async def alice_tasks(db_session, alice, alice_project):
    user, _ = alice
    tasks = [
        Task(project_id=alice_project.id, title="Wireframes", status=TaskStatus.DONE, priority=TaskPriority.HIGH,
             assigned_to=user.id),
        Task(project_id=alice_project.id, title="Copywriting", status=TaskStatus.IN_PROGRESS,
             priority=TaskPriority.MEDIUM),
        Task(project_id=alice_project.id, title="QA pass", status=TaskStatus.TODO, priority=TaskPriority.LOW),
    ]
    for task in tasks:
        db_session.add(task)
        await db_session.commit()
        await db_session.refresh(task)
    return tasks

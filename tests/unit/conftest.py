import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from src.app.services.cache import CacheLookup
from src.domain import Export, Project, Task, User
from src.domain.enums import ExportStatus, TaskPriority, TaskStatus


@pytest.fixture
def mock_uow():
    """Create a mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.users = MagicMock()
    uow.projects = MagicMock()
    uow.tasks = MagicMock()
    uow.exports = MagicMock()
    return uow


@pytest.fixture
def mock_cache():
    """Cache double that misses by default"""
    cache = MagicMock()
    cache.available = True
    cache.get = AsyncMock(return_value=CacheLookup.miss())
    cache.set = AsyncMock(return_value=True)
    cache.delete = AsyncMock(return_value=1)
    cache.delete_pattern = AsyncMock(return_value=0)
    return cache


@pytest.fixture
def mock_invalidator():
    invalidator = MagicMock()
    invalidator.project_created = AsyncMock(return_value=1)
    invalidator.project_updated = AsyncMock(return_value=2)
    invalidator.project_deleted = AsyncMock(return_value=2)
    invalidator.task_changed = AsyncMock(return_value=2)
    return invalidator


@pytest.fixture
def owner():
    return User(
        id="user-1",
        name="Ada Lovelace",
        email="ada@example.com",
        password_hash="hashed",
        created_at=datetime(2025, 1, 1, 9, 0, 0),
    )


@pytest.fixture
def sample_project(owner):
    """Create a sample project"""
    return Project(
        id="project-123",
        owner_id=owner.id,
        name="Test Project",
        description="Test Description",
        created_at=datetime(2025, 1, 2, 10, 0, 0),
        updated_at=datetime(2025, 1, 2, 10, 0, 0),
    )


@pytest.fixture
def sample_tasks(sample_project, owner):
    return [
        Task(
            id="task-1",
            project_id=sample_project.id,
            title="Write docs",
            status=TaskStatus.TODO,
            priority=TaskPriority.HIGH,
            assigned_to=owner.id,
            created_at=datetime(2025, 1, 3, 8, 0, 0),
            updated_at=datetime(2025, 1, 3, 8, 0, 0),
        ),
        Task(
            id="task-2",
            project_id=sample_project.id,
            title="Ship release",
            status=TaskStatus.DONE,
            priority=TaskPriority.LOW,
            created_at=datetime(2025, 1, 4, 8, 0, 0),
            updated_at=datetime(2025, 1, 4, 8, 0, 0),
        ),
    ]


@pytest.fixture
def pending_export(sample_project, owner):
    return Export(
        id="export-1",
        project_id=sample_project.id,
        user_id=owner.id,
        status=ExportStatus.PENDING,
        created_at=datetime(2025, 1, 5, 12, 0, 0),
    )


@pytest.fixture
def processing_export(pending_export):
    pending_export.start_processing()
    return pending_export

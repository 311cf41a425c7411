"""Unit tests for CacheInvalidator over a fake Redis"""
import pytest
from fakeredis.aioredis import FakeRedis
from unittest.mock import AsyncMock, MagicMock
from src.adapter.services.redis_cache import RedisCache
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.cache_keys import CacheKeys


@pytest.fixture
async def cache():
    client = FakeRedis(decode_responses=True)
    yield RedisCache(client)
    await client.flushall()
    await client.aclose()


async def _seed(cache, *keys):
    for key in keys:
        await cache.set(key, "{}", 300)


async def test_project_created_drops_owner_list_only(cache):
    await _seed(cache, "projects:user:u1", "projects:user:u2", "project:p1")

    removed = await CacheInvalidator(cache).project_created("u1")

    assert removed == 1
    assert (await cache.get("projects:user:u1")).status == "miss"
    assert (await cache.get("projects:user:u2")).is_hit
    assert (await cache.get("project:p1")).is_hit


async def test_project_updated_drops_list_and_detail(cache):
    await _seed(cache, CacheKeys.user_projects("u1"), CacheKeys.project_detail("p1"))

    removed = await CacheInvalidator(cache).project_updated("u1", "p1")

    assert removed == 2
    assert not (await cache.get(CacheKeys.user_projects("u1"))).is_hit
    assert not (await cache.get(CacheKeys.project_detail("p1"))).is_hit


async def test_task_changed_drops_detail_and_owner_list(cache):
    await _seed(cache, CacheKeys.user_projects("u1"), CacheKeys.project_detail("p1"), "project:p2")

    await CacheInvalidator(cache).task_changed("u1", "p1")

    assert not (await cache.get(CacheKeys.user_projects("u1"))).is_hit
    assert not (await cache.get(CacheKeys.project_detail("p1"))).is_hit
    assert (await cache.get("project:p2")).is_hit


async def test_pattern_key_removes_every_match(cache):
    await _seed(cache, "projects:user:u1", "projects:user:u2", "project:p1")

    removed = await CacheInvalidator(cache).invalidate("projects:user:*")

    assert removed == 2
    assert (await cache.get("project:p1")).is_hit


async def test_cache_errors_never_reach_the_caller():
    broken = MagicMock()
    broken.delete = AsyncMock(side_effect=RuntimeError("boom"))
    broken.delete_pattern = AsyncMock(side_effect=RuntimeError("boom"))

    removed = await CacheInvalidator(broken).invalidate("project:p1", "projects:user:*")

    assert removed == 0

import fakeredis
import pytest

from app.core.cache import DiskCache, RedisCache, build_cache


@pytest.fixture
def redis_cache():
    return RedisCache(fakeredis.FakeRedis(decode_responses=True))


def test_disk_cache_set_and_get(cache):
    cache.set("a", {"x": "1"}, ttl=60)
    assert cache.get("a") == {"x": "1"}
    assert cache.get("missing") is None


def test_disk_cache_expired_entry_is_a_miss(cache):
    cache.set("a", "value", ttl=0)
    assert cache.get("a") is None


def test_disk_cache_delete_prefix_only_removes_matching_keys(cache):
    cache.set("translations_export:en:1", 1, ttl=60)
    cache.set("translations_export:en:2", 2, ttl=60)
    cache.set("translations_export:fr:1", 3, ttl=60)

    assert cache.delete_prefix("translations_export:en:") == 2
    assert cache.get("translations_export:en:1") is None
    assert cache.get("translations_export:fr:1") == 3


def test_disk_cache_delete_and_clear(cache):
    cache.set("a", 1, ttl=60)
    cache.set("b", 2, ttl=60)
    cache.delete("a")
    cache.delete("not-there")
    assert cache.get("a") is None

    cache.clear()
    assert cache.get("b") is None


def test_disk_cache_is_shared_through_its_directory(tmp_path):
    first = DiskCache(str(tmp_path / "shared"))
    second = DiskCache(str(tmp_path / "shared"))
    try:
        first.set("translations_export:en:abc", {"greeting": "Hello"}, ttl=60)
        assert second.get("translations_export:en:abc") == {"greeting": "Hello"}
    finally:
        first.close()
        second.close()


def test_remember_computes_once(cache):
    calls = []

    def factory():
        calls.append(1)
        return {"k": "v"}

    assert cache.remember("key", 60, factory) == {"k": "v"}
    assert cache.remember("key", 60, factory) == {"k": "v"}
    assert len(calls) == 1


def test_remember_caches_empty_dict(cache):
    calls = []

    def factory():
        calls.append(1)
        return {}

    cache.remember("key", 60, factory)
    cache.remember("key", 60, factory)
    assert len(calls) == 1


def test_redis_cache_round_trips_json_with_ttl(redis_cache):
    redis_cache.set("translations_export:fr:abc", {"greeting": "Bonjour"}, ttl=120)

    assert 0 < redis_cache._client.ttl("translations_export:fr:abc") <= 120
    assert redis_cache.get("translations_export:fr:abc") == {"greeting": "Bonjour"}
    assert redis_cache.get("other") is None


def test_redis_cache_delete_prefix(redis_cache):
    redis_cache.set("translations_export:en:1", {}, ttl=60)
    redis_cache.set("translations_export:en:2", {}, ttl=60)
    redis_cache.set("translations_export:de:1", {}, ttl=60)

    assert redis_cache.delete_prefix("translations_export:en:") == 2
    assert redis_cache.delete_prefix("translations_export:es:") == 0
    assert redis_cache._client.keys("*") == ["translations_export:de:1"]


def test_redis_cache_remember(redis_cache):
    calls = []

    def factory():
        calls.append(1)
        return {"a.b": "X"}

    assert redis_cache.remember("translations_export:en:k", 60, factory) == {"a.b": "X"}
    assert redis_cache.remember("translations_export:en:k", 60, factory) == {"a.b": "X"}
    assert len(calls) == 1


def test_build_cache_selects_backend_from_url(tmp_path):
    disk = build_cache(f"disk://{tmp_path / 'exports'}")
    try:
        assert isinstance(disk, DiskCache)
        assert disk.directory == str(tmp_path / "exports")
    finally:
        disk.close()

    assert isinstance(build_cache("redis://localhost:6379/0"), RedisCache)


def test_build_cache_rejects_unknown_scheme():
    with pytest.raises(ValueError):
        build_cache("memcached://localhost")

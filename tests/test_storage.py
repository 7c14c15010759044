"""Tests for cart storage backends"""
import pytest

from storefront import config, storage
from storefront.storage import MemoryStorage, RedisStorage, create_storage


class TestMemoryStorage:
    """Dict-backed slot"""

    def test_get_missing(self):
        assert MemoryStorage().get("cart_v1") is None

    def test_set_get_delete(self):
        slot = MemoryStorage()
        slot.set("cart_v1", "{}")

        assert slot.get("cart_v1") == "{}"

        slot.delete("cart_v1")
        assert slot.get("cart_v1") is None

    def test_delete_missing_is_noop(self):
        MemoryStorage().delete("cart_v1")

    def test_initial_data_is_copied(self):
        seed = {"cart_v1": '{"hr-policy-kit": 1}'}
        slot = MemoryStorage(seed)
        slot.set("cart_v1", "{}")

        assert seed["cart_v1"] == '{"hr-policy-kit": 1}'


class TestRedisStorage:
    """Upstash Redis adapter"""

    def test_get(self, mock_redis):
        mock_redis.get.return_value = '{"hr-policy-kit": 2}'

        assert RedisStorage(mock_redis).get("cart_v1") == '{"hr-policy-kit": 2}'
        mock_redis.get.assert_called_once_with("cart_v1")

    def test_get_bytes(self, mock_redis):
        mock_redis.get.return_value = b'{"a": 1}'

        assert RedisStorage(mock_redis).get("cart_v1") == '{"a": 1}'

    def test_get_missing(self, mock_redis):
        assert RedisStorage(mock_redis).get("cart_v1") is None

    def test_get_failure_reads_as_absent(self, mock_redis):
        mock_redis.get.side_effect = ConnectionError("redis down")

        assert RedisStorage(mock_redis).get("cart_v1") is None

    def test_set_without_ttl(self, mock_redis):
        RedisStorage(mock_redis, ttl_seconds=0).set("cart_v1", "{}")

        mock_redis.set.assert_called_once_with("cart_v1", "{}")

    def test_set_with_ttl(self, mock_redis):
        RedisStorage(mock_redis, ttl_seconds=86400).set("cart_v1", "{}")

        mock_redis.set.assert_called_once_with("cart_v1", "{}", ex=86400)

    def test_set_failure_propagates(self, mock_redis):
        mock_redis.set.side_effect = ConnectionError("redis down")

        with pytest.raises(ConnectionError):
            RedisStorage(mock_redis).set("cart_v1", "{}")

    def test_delete(self, mock_redis):
        RedisStorage(mock_redis).delete("cart_v1")

        mock_redis.delete.assert_called_once_with("cart_v1")

    def test_cart_store_over_redis(self, mock_redis, catalog):
        """Cart store writes JSON through the Redis client"""
        from storefront.cart import CartStore

        mock_redis.get.return_value = '{"org-design-pack": 3}'
        store = CartStore(RedisStorage(mock_redis, ttl_seconds=0), catalog)
        store.load()
        store.add("org-design-pack")

        assert store.total() == 1196
        mock_redis.set.assert_called_with("cart_v1", '{"org-design-pack": 4}')


class TestRedisClient:
    """Client construction from environment"""

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_URL", "")
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_TOKEN", "")
        monkeypatch.setattr(storage, "_sync_redis_client", None)

        with pytest.raises(ValueError):
            storage.get_redis_sync()

    def test_lazy_client_not_built_until_used(self, monkeypatch):
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_URL", "")
        monkeypatch.setattr(storage, "_sync_redis_client", None)

        slot = RedisStorage()

        with pytest.raises(ValueError):
            slot.set("cart_v1", "{}")


class TestCreateStorage:
    """Backend selection"""

    def test_memory_when_unconfigured(self, monkeypatch):
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_URL", "")
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_TOKEN", "")

        assert isinstance(create_storage(), MemoryStorage)

    def test_redis_when_configured(self, monkeypatch):
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_URL", "https://example.upstash.io")
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_TOKEN", "token")

        assert isinstance(create_storage(), RedisStorage)

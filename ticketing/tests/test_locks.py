"""
Test Redis entity locks.
"""
import pytest

from ticketing.core import config
from ticketing.core.errors import ConflictError
from ticketing.core.locks import entity_lock, entity_locks


class TestEntityLock:
    """Test lock acquisition and release through fake Redis."""

    def test_lock_released_after_block(self, fake_redis):
        with entity_lock("event:1"):
            assert fake_redis.exists("ticketing_lock:event:1") == 1

        assert fake_redis.exists("ticketing_lock:event:1") == 0

    def test_lock_released_on_error(self, fake_redis):
        with pytest.raises(RuntimeError):
            with entity_lock("event:2"):
                raise RuntimeError("boom")

        assert fake_redis.exists("ticketing_lock:event:2") == 0

    def test_held_lock_times_out(self, fake_redis, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "LOCK_BLOCKING_TIMEOUT", 0.2)
        other = fake_redis.lock("ticketing_lock:user:7", timeout=10)
        assert other.acquire(blocking=False) is True

        with pytest.raises(ConflictError, match="Could not acquire lock"):
            with entity_lock("user:7"):
                pass

        other.release()

    def test_multiple_locks(self, fake_redis):
        with entity_locks("organizer:1", "event_type:2"):
            assert fake_redis.exists("ticketing_lock:organizer:1") == 1
            assert fake_redis.exists("ticketing_lock:event_type:2") == 1

        assert fake_redis.exists("ticketing_lock:organizer:1") == 0
        assert fake_redis.exists("ticketing_lock:event_type:2") == 0

    def test_partial_acquire_releases_earlier_locks(self, fake_redis, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "LOCK_BLOCKING_TIMEOUT", 0.2)
        blocker = fake_redis.lock("ticketing_lock:user:1", timeout=10)
        assert blocker.acquire(blocking=False) is True

        with pytest.raises(ConflictError):
            with entity_locks("event:1", "user:1"):
                pass

        assert fake_redis.exists("ticketing_lock:event:1") == 0
        blocker.release()

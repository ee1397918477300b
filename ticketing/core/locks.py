import logging
from contextlib import ExitStack, contextmanager
from typing import Iterator

import redis

from ticketing.core import config
from ticketing.core.errors import ConflictError

logger = logging.getLogger(__name__)

BUSY_MESSAGE = "Could not acquire lock, please try again."


def get_redis_client():
    """Get Redis client for locking."""
    return redis.from_url(
        config.get_redis_url(),
        decode_responses=True,
        socket_timeout=config.REDIS_SOCKET_TIMEOUT,
    )


@contextmanager
def entity_lock(name: str) -> Iterator[None]:
    """
    Hold a Redis lock named after one row (e.g. "event:3") for the duration
    of a read-then-write sequence. Only one request can hold it at a time.
    """
    client = get_redis_client()
    lock = client.lock(
        f"ticketing_lock:{name}",
        timeout=config.LOCK_TIMEOUT,
        blocking_timeout=config.LOCK_BLOCKING_TIMEOUT,
    )
    try:
        acquired = lock.acquire(blocking=True)
    except redis.exceptions.LockError as exc:  # type: ignore
        raise ConflictError(BUSY_MESSAGE) from exc
    if not acquired:
        logger.warning("Timed out waiting for lock %s", name)
        raise ConflictError(BUSY_MESSAGE)

    try:
        yield
    finally:
        try:
            lock.release()
        except redis.exceptions.LockError:  # type: ignore
            # the lock expired while held; the next holder already owns it
            logger.warning("Lock %s expired before release", name)


@contextmanager
def entity_locks(*names: str) -> Iterator[None]:
    """Acquire several entity locks in the given order and release them in reverse."""
    with ExitStack() as stack:
        for name in names:
            stack.enter_context(entity_lock(name))
        yield

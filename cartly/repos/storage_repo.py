# cartly/repos/storage_repo.py
import redis

from cartly.utils.retry import redis_retry
from cartly.utils.settings import REDIS_URL
from cartly.utils.logging import get_logger

logger = get_logger(__name__)


class StorageRepo:
    """
    Trwaly magazyn klucz-wartosc (Redis).
    Trzyma tylko tekst - serializacja po stronie serwisu.
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def get(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def set(self, key: str, value: str) -> None:
        logger.debug(f"Storage SET {key} ({len(value)} chars)")
        self.redis.set(name=key, value=value)

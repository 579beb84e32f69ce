# storefront/services/lock_service.py
import redis

from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#compare-and-delete, redis runs the script atomically
#nothing can run between GET and DEL, so only the owner's token removes the key
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""


class LockService:
    """
    -per-user checkout lock, guards against a double-submitted checkout
    -release only by the token that acquired it (lua)
    -ttl so a crashed worker never blocks a user for good
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _key(user_id: int) -> str:
        return f"checkout:{user_id}:lock"

    @redis_retry()
    def acquire_checkout_lock(self, user_id: int, token: str, ttl: int) -> bool:
        key = self._key(user_id)
        logger.info(f"Acquire lock {key}")
        #SET checkout:1:lock "<token>" NX EX 30
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True,
                ex=ttl,
            )
        )

    @redis_retry()
    def release_checkout_lock(self, user_id: int, token: str) -> bool:
        key = self._key(user_id)
        logger.info(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

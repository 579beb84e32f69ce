# storefront/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests
import redis

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _log_retry(retry_state):
    logger.warning(
        f"{retry_state.fn.__qualname__} failed "
        f"(attempt {retry_state.attempt_number}): {retry_state.outcome.exception()!r}, retrying"
    )


def http_retry(attempts: int = 3):
    """Catalog lookups run outside any transaction and can afford to wait."""
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(requests.RequestException),
        before_sleep=_log_retry,
    )


def redis_retry(attempts: int = 2):
    """The checkout lock sits in front of a user request, fail fast."""
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
        retry=retry_if_exception_type(redis.RedisError),
        before_sleep=_log_retry,
    )

"""Tests for the shared retry and logging helpers."""

from unittest import mock

import pytest
import requests
from structlog.testing import capture_logs

from storefront.utils import retry as retry_module
from storefront.utils.logging import get_logger
from storefront.utils.retry import http_retry, redis_retry


class TestRetry:
    def test_http_retry_attempts_are_configurable(self):
        calls = []

        @http_retry(attempts=2)
        def fetch():
            calls.append(1)
            raise requests.ConnectionError("reset")

        with mock.patch("tenacity.nap.time.sleep"), pytest.raises(requests.ConnectionError):
            fetch()

        assert len(calls) == 2

    def test_other_errors_are_not_retried(self):
        calls = []

        @redis_retry()
        def acquire():
            calls.append(1)
            raise ValueError("bad ttl")

        with pytest.raises(ValueError):
            acquire()

        assert len(calls) == 1

    def test_each_retry_is_logged(self):
        @http_retry()
        def fetch():
            raise requests.Timeout("slow")

        with mock.patch("tenacity.nap.time.sleep"), mock.patch.object(retry_module, "logger") as logger:
            with pytest.raises(requests.Timeout):
                fetch()

        # two retries before the third and last attempt
        assert logger.warning.call_count == 2
        assert "fetch" in logger.warning.call_args.args[0]


class TestLogging:
    def test_get_logger_is_structlog(self):
        logger = get_logger("storefront.test")

        with capture_logs() as logs:
            logger.warning("cart changed", user_id=1)

        assert logs == [{"event": "cart changed", "user_id": 1, "log_level": "warning"}]

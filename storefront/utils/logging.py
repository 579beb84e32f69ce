# storefront/utils/logging.py
import logging

import structlog
from structlog.typing import FilteringBoundLogger

from storefront.utils.settings import LOG_LEVEL

_LEVEL = logging.getLevelName(LOG_LEVEL.upper())

logging.basicConfig(level=_LEVEL, format="%(message)s")
# requests/urllib3 log every retry attempt on their own
logging.getLogger("urllib3").setLevel(logging.WARNING)

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(_LEVEL),
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def get_logger(name: str) -> FilteringBoundLogger:
    return structlog.get_logger(name)

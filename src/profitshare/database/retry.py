"""Bounded retry for transient store conditions."""

import functools
import logging
import time
from typing import Any, Callable, TypeVar

from sqlalchemy.exc import OperationalError, SQLAlchemyError

from profitshare.domain.errors import TransientStoreError

logger = logging.getLogger(__name__)

DEFAULT_RETRY_ATTEMPTS = 2
DEFAULT_RETRY_DELAY = 0.5

TRANSIENT_MARKERS = ("database is locked", "database is busy", "database schema has changed")

F = TypeVar("F", bound=Callable[..., Any])


def is_transient_error(error: OperationalError) -> bool:
    """Check whether an OperationalError means the store is busy or upgrading."""
    message = str(error.orig if error.orig is not None else error).lower()
    return any(marker in message for marker in TRANSIENT_MARKERS)


def with_store_retry(method: F) -> F:
    """Retry a store method after a fixed delay when the store is busy.

    The decorated method's owner provides ``retry_attempts``, ``retry_delay``
    and ``_reset_session()``. Any SQLAlchemy error resets the session so the
    store stays usable; non-transient errors then propagate immediately.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        attempts = max(1, self.retry_attempts)
        for attempt in range(1, attempts + 1):
            try:
                return method(self, *args, **kwargs)
            except OperationalError as exc:
                self._reset_session()
                if not is_transient_error(exc):
                    raise
                if attempt == attempts:
                    raise TransientStoreError(
                        f"Store busy during {method.__name__} after {attempts} attempts"
                    ) from exc
                logger.warning(
                    "Store busy during %s (attempt %d/%d), retrying in %.2fs",
                    method.__name__,
                    attempt,
                    attempts,
                    self.retry_delay,
                )
                time.sleep(self.retry_delay)
            except SQLAlchemyError:
                self._reset_session()
                raise

    return wrapper  # type: ignore[return-value]

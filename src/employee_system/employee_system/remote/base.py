from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, TypeVar

from ..core.exceptions import AuthError, RemoteOperationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def remote_call(operation: str) -> Iterator[None]:
    """Translate any backend failure into RemoteOperationError.

    The raw error is logged here; callers only ever see the wrapped one.
    """

    try:
        yield
    except (AuthError, RemoteOperationError):
        raise
    except Exception as e:
        logger.warning("remote %s failed: %s", operation, e)
        raise RemoteOperationError(f"{operation} failed") from e


def rows(response: Any) -> List[Dict[str, Any]]:
    data = getattr(response, "data", None)
    return list(data or [])


def parse_rows(table: str, data: Iterable[Mapping[str, Any]], factory: Callable[[Mapping[str, Any]], T]) -> List[T]:
    """Build models from fetched rows; one unreadable row fails the whole read."""

    try:
        return [factory(r) for r in data]
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("unreadable %s row: %s", table, e)
        raise RemoteOperationError(f"read {table} failed") from e

from contextlib import contextmanager
from typing import Iterator

import anyio

from src.platform.exception.exceptions import StorageFailureError


@contextmanager
def ledger_deadline(*, timeout_seconds: float, operation: str) -> Iterator[None]:
    """Abort the enclosed unit of work after timeout_seconds; it rolls back on exit."""
    try:
        with anyio.fail_after(timeout_seconds):
            yield
    except TimeoutError as e:
        raise StorageFailureError(f'{operation} timed out after {timeout_seconds}s') from e

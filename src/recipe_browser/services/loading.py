"""Load lifecycle tracking for UI consumers of the catalog service."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from recipe_browser.domain.errors import FetchError

T = TypeVar("T")


class LoadStatus(str, Enum):
    """States a single fetch invocation moves through."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class LoadTracker(Generic[T]):
    """Tracks Idle -> Loading -> Success | Failed for one screen's data.

    Each `run` starts a fresh cycle. Fetch failures are recorded rather
    than raised so the caller is never left waiting. Anything else that
    escapes (bad arguments, cancellation) still ends the cycle as FAILED
    before it propagates.
    """

    status: LoadStatus = LoadStatus.IDLE
    data: T | None = None
    error: FetchError | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def is_finished(self) -> bool:
        return self.status in {LoadStatus.SUCCESS, LoadStatus.FAILED}

    async def run(self, operation: Callable[[], Awaitable[T]]) -> T | None:
        """Await the operation, recording the outcome."""
        self.status = LoadStatus.LOADING
        self.data = None
        self.error = None
        try:
            result = await operation()
        except FetchError as exc:
            self.error = exc
            self.status = LoadStatus.FAILED
            return None
        except BaseException:
            self.status = LoadStatus.FAILED
            raise
        self.data = result
        self.status = LoadStatus.SUCCESS
        return result

"""Outcome type for calls whose failure must not abort an item."""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

from vercel_deployer.core.exceptions import UpstreamError
from vercel_deployer.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True)
class BestEffort(Generic[T]):
    """Either a value or an ignored upstream failure."""

    value: T | None = None
    error: UpstreamError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def skipped(self) -> bool:
        """True when the call failed and the caller fell back."""
        return self.error is not None


async def best_effort(call: Awaitable[T], event: str, **context: object) -> BestEffort[T]:
    """Await *call*, turning an ``UpstreamError`` into an ignorable outcome.

    Any other exception propagates.
    """
    try:
        return BestEffort(value=await call)
    except UpstreamError as e:
        logger.warning(event, error=e.message, status_code=e.status_code, **context)
        return BestEffort(error=e)

"""Write-side counterpart of the query cache: ``{mutate, mutate_async, is_pending}``."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ibms.application.query.query_client import QueryStatus

logger = logging.getLogger(__name__)

V = TypeVar("V")
T = TypeVar("T")


@dataclass
class MutationResult:
    status: QueryStatus
    data: Any = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        return self.status == QueryStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == QueryStatus.ERROR


class Mutation(Generic[V, T]):
    """One write operation with success/error callbacks.

    ``mutate`` reports failures through the returned result;
    ``mutate_async`` re-raises them after the callbacks have run.
    """

    def __init__(
        self,
        fn: Callable[[V], Awaitable[T]],
        *,
        on_success: Callable[[T, V], None] | None = None,
        on_error: Callable[[Exception, V], None] | None = None,
    ):
        self._fn = fn
        self._on_success = on_success
        self._on_error = on_error
        self._pending = 0
        self.status = QueryStatus.IDLE
        self.data: T | None = None
        self.error: Exception | None = None

    @property
    def is_pending(self) -> bool:
        return self._pending > 0

    async def mutate_async(self, variables: V) -> T:
        self._pending += 1
        self.status = QueryStatus.LOADING
        try:
            data = await self._fn(variables)
            if self._on_success:
                self._on_success(data, variables)
        except Exception as exc:
            self.status = QueryStatus.ERROR
            self.error = exc
            if self._on_error:
                self._on_error(exc, variables)
            raise
        finally:
            self._pending -= 1
        self.status = QueryStatus.SUCCESS
        self.data = data
        self.error = None
        return data

    async def mutate(self, variables: V) -> MutationResult:
        try:
            data = await self.mutate_async(variables)
        except Exception as exc:
            logger.debug("Mutation failed: %s", exc)
            return MutationResult(QueryStatus.ERROR, error=exc)
        return MutationResult(QueryStatus.SUCCESS, data=data)

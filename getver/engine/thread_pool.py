"""Bounded worker pool running one lookup per batch member."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

import structlog

from ..config.models import DEFAULT_MAX_WORKERS
from ..errors import ConfigError
from ..models import Batch, Failed, LookupOutcome


class LookupPool:
    """Fixed set of worker threads draining the batch's pending names.

    At most ``max_workers`` lookups are in flight at once. ``unbounded``
    starts one worker per name and is meant for small batches only.
    """

    def __init__(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        unbounded: bool = False,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        if max_workers < 1:
            raise ConfigError("max_workers must be >= 1")
        self.max_workers = max_workers
        self.unbounded = unbounded
        self.logger = logger or structlog.get_logger("getver.pool")

    def workers_for(self, batch_size: int) -> int:
        if batch_size <= 0:
            return 0
        if self.unbounded:
            return batch_size
        return min(self.max_workers, batch_size)

    def run(
        self,
        batch: Batch,
        lookup: Callable[[str], LookupOutcome],
        sink: Callable[[LookupOutcome], None],
    ) -> None:
        """Run ``lookup`` for every name, handing each outcome to ``sink``.

        Returns only once every lookup has produced an outcome.
        """

        workers = self.workers_for(len(batch))
        if not workers:
            return
        self.logger.debug("pool_started", workers=workers, batch_size=len(batch))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="getver") as executor:
            futures = [executor.submit(self._guarded, lookup, name) for name in batch]
            for future in as_completed(futures):
                sink(future.result())

    def _guarded(self, lookup: Callable[[str], LookupOutcome], name: str) -> LookupOutcome:
        try:
            return lookup(name)
        except Exception as exc:  # noqa: BLE001
            self.logger.error("lookup_crashed", package=name, error=str(exc), exc_info=True)
            return Failed(name, f"unexpected error: {exc}")


__all__ = ["LookupPool"]

"""Coordinator wiring dedup, pooled lookups and aggregation together."""

from __future__ import annotations

from typing import Iterable

import structlog

from .engine import Lookup, LookupPool, ResultAggregator, deduplicate
from .models import Report


class Resolver:
    """Resolve a batch of package names into a complete :class:`Report`."""

    def __init__(
        self,
        lookup: Lookup,
        pool: LookupPool,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.lookup = lookup
        self.pool = pool
        self.logger = logger or structlog.get_logger("getver").bind(component="resolver")

    def resolve(self, names: Iterable[str]) -> Report:
        batch = deduplicate(names)
        if not batch:
            return Report()
        self.logger.info(
            "batch_started",
            batch_size=len(batch),
            workers=self.pool.workers_for(len(batch)),
        )
        aggregator = ResultAggregator(batch)
        self.pool.run(batch, self.lookup, aggregator.add)
        report = aggregator.build()
        self.logger.info("batch_finished", **report.summary())
        return report


__all__ = ["Resolver"]

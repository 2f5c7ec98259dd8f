"""Collect outcomes for a batch and assemble the final report."""

from __future__ import annotations

from threading import Lock

from ..errors import AggregationError
from ..models import Batch, Failed, Found, LookupOutcome, NotFound, Report


class ResultAggregator:
    """Thread-safe collector enforcing one outcome per batch member."""

    def __init__(self, batch: Batch) -> None:
        self.batch = batch
        self._outcomes: dict[str, LookupOutcome] = {}
        self._lock = Lock()

    def add(self, outcome: LookupOutcome) -> None:
        with self._lock:
            if outcome.name not in self.batch:
                raise AggregationError(f"outcome for unknown package '{outcome.name}'")
            if outcome.name in self._outcomes:
                raise AggregationError(f"duplicate outcome for package '{outcome.name}'")
            self._outcomes[outcome.name] = outcome

    def pending(self) -> frozenset[str]:
        with self._lock:
            return self.batch.difference(self._outcomes)

    def build(self) -> Report:
        missing = self.pending()
        if missing:
            raise AggregationError(
                "no outcome for: " + ", ".join(sorted(missing))
            )
        found: list[Found] = []
        not_found: list[str] = []
        failed: list[Failed] = []
        with self._lock:
            for name in sorted(self._outcomes):
                outcome = self._outcomes[name]
                if isinstance(outcome, Found):
                    found.append(outcome)
                elif isinstance(outcome, NotFound):
                    not_found.append(outcome.name)
                else:
                    failed.append(outcome)
        return Report(found=tuple(found), not_found=tuple(not_found), failed=tuple(failed))


__all__ = ["ResultAggregator"]

"""Reduce raw command line names to a batch of distinct lookup targets."""

from __future__ import annotations

from typing import Iterable

from ..models import Batch


def deduplicate(names: Iterable[str]) -> Batch:
    """Return the distinct names in ``names``.

    Names are compared by exact string equality, so ``Serde`` and ``serde``
    are two lookups. Feeding a batch back in returns an equal batch.
    """

    return frozenset(names)


__all__ = ["deduplicate"]

"""Lookup outcomes and the aggregated report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Literal, Union

from pydantic import BaseModel

Batch = frozenset[str]


@dataclass(frozen=True, slots=True)
class Found:
    """Registry confirmed the package and returned its newest version."""

    name: str
    max_version: str
    # Canonical spelling reported by the registry, used for display only
    registry_name: str | None = field(default=None, compare=False)

    status: ClassVar[Literal["found"]] = "found"

    @property
    def display_name(self) -> str:
        return self.registry_name or self.name


@dataclass(frozen=True, slots=True)
class NotFound:
    """Registry explicitly reported the package as absent."""

    name: str

    status: ClassVar[Literal["not_found"]] = "not_found"


@dataclass(frozen=True, slots=True)
class Failed:
    """Outcome could not be determined; ``cause`` describes why."""

    name: str
    cause: str

    status: ClassVar[Literal["failed"]] = "failed"


LookupOutcome = Union[Found, NotFound, Failed]


@dataclass(frozen=True, slots=True)
class Report:
    """Complete classification of a batch, one outcome per distinct name.

    Each partition is sorted by package name so rendering does not depend on
    the order in which lookups completed.
    """

    found: tuple[Found, ...] = ()
    not_found: tuple[str, ...] = ()
    failed: tuple[Failed, ...] = ()

    def __len__(self) -> int:
        return len(self.found) + len(self.not_found) + len(self.failed)

    def outcomes(self) -> Iterator[LookupOutcome]:
        yield from self.found
        for name in self.not_found:
            yield NotFound(name)
        yield from self.failed

    def names(self) -> frozenset[str]:
        return frozenset(outcome.name for outcome in self.outcomes())

    @property
    def has_errors(self) -> bool:
        return bool(self.not_found or self.failed)

    def summary(self) -> dict[str, int]:
        return {
            "found": len(self.found),
            "not_found": len(self.not_found),
            "failed": len(self.failed),
        }


class PackageMetadata(BaseModel):
    """Subset of the registry's package object needed for a lookup."""

    name: str
    max_version: str


__all__ = [
    "Batch",
    "Failed",
    "Found",
    "LookupOutcome",
    "NotFound",
    "PackageMetadata",
    "Report",
]

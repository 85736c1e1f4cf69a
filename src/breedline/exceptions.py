from __future__ import annotations

from dataclasses import dataclass


class BreedlineError(Exception):
    """Base class for breedline errors."""


@dataclass
class InvalidGenotypeError(BreedlineError, ValueError):
    """Raised when an allele does not belong to its locus or a locus is missing."""

    locus: str
    value: object = None
    reason: str = "allele does not belong to locus"

    def __str__(self) -> str:  # pragma: no cover - human readable
        if self.value is None:
            return f"{self.locus}: {self.reason}"
        return f"{self.locus}: {self.reason} ({self.value!r})"


@dataclass
class InvalidParentLinkError(BreedlineError):
    """Raised by a store when a parent link is rejected.

    Scenarios:
    - A female linked as sire, or a male linked as dam
    - An individual linked as its own parent
    - A parent id the store does not know
    """

    child_id: str
    parent_id: str
    role: str
    reason: str

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"cannot link {self.parent_id} as {self.role} of {self.child_id}: {self.reason}"


@dataclass
class TraversalCancelled(BreedlineError):
    """Raised when a traversal observes its cancel signal.

    Partial results are discarded.
    """

    root_id: str
    operation: str

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"{self.operation} for {self.root_id} cancelled"

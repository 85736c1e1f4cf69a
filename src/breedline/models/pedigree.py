"""Pedigree result models.

Provides the value objects returned by pedigree queries:
- Pedigree trees with sire/dam subtrees and chart positions
- Ancestor/descendant entries with generation distance
- Pairing analysis and lineage completeness scores

All results are immutable and computed fresh per call.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .individual import Individual


class PedigreePosition(str, Enum):
    """Chart position of a node relative to the subject."""
    SUBJECT = "subject"
    SIRE = "sire"
    DAM = "dam"
    PATERNAL_GRANDSIRE = "paternal_grandsire"
    PATERNAL_GRANDDAM = "paternal_granddam"
    MATERNAL_GRANDSIRE = "maternal_grandsire"
    MATERNAL_GRANDDAM = "maternal_granddam"
    ANCESTOR = "ancestor"  # Great-grandparents and beyond

    def sire_position(self) -> PedigreePosition:
        """Position of this node's sire."""
        if self is PedigreePosition.SUBJECT:
            return PedigreePosition.SIRE
        elif self is PedigreePosition.SIRE:
            return PedigreePosition.PATERNAL_GRANDSIRE
        elif self is PedigreePosition.DAM:
            return PedigreePosition.MATERNAL_GRANDSIRE
        return PedigreePosition.ANCESTOR

    def dam_position(self) -> PedigreePosition:
        """Position of this node's dam."""
        if self is PedigreePosition.SUBJECT:
            return PedigreePosition.DAM
        elif self is PedigreePosition.SIRE:
            return PedigreePosition.PATERNAL_GRANDDAM
        elif self is PedigreePosition.DAM:
            return PedigreePosition.MATERNAL_GRANDDAM
        return PedigreePosition.ANCESTOR


class PairingRisk(str, Enum):
    """Inbreeding risk category of a prospective pairing."""
    EXCELLENT = "excellent"
    GOOD = "good"
    CAUTION = "caution"
    WARNING = "warning"
    AVOID = "avoid"


@dataclass(frozen=True)
class PedigreeNode:
    """One individual in a pedigree tree.

    ``generation`` is 0 for the subject; a subtree is always one generation
    deeper than its parent node.
    """
    individual: Individual
    generation: int = 0
    position: PedigreePosition = PedigreePosition.SUBJECT
    sire: PedigreeNode | None = None
    dam: PedigreeNode | None = None

    def iter_nodes(self) -> Iterator[PedigreeNode]:
        """Pre-order walk: self, then the sire subtree, then the dam subtree."""
        yield self
        if self.sire is not None:
            yield from self.sire.iter_nodes()
        if self.dam is not None:
            yield from self.dam.iter_nodes()

    @property
    def depth(self) -> int:
        """Deepest generation present below (and including) this node."""
        return max(node.generation for node in self.iter_nodes())

    @property
    def known_count(self) -> int:
        """Number of known individuals in the tree, subject included."""
        return sum(1 for _ in self.iter_nodes())


def _ancestor_label(generation: int) -> str:
    if generation == 1:
        return "parent"
    elif generation == 2:
        return "grandparent"
    else:
        return f"{'great-' * (generation - 2)}grandparent"


def _descendant_label(generation: int) -> str:
    if generation == 1:
        return "child"
    elif generation == 2:
        return "grandchild"
    else:
        return f"{'great-' * (generation - 2)}grandchild"


@dataclass(frozen=True)
class AncestorEntry:
    """Single ancestor with generation distance."""
    individual: Individual
    generation: int  # 1=parent, 2=grandparent, etc.

    @property
    def relationship_label(self) -> str:
        """Human-readable relationship label."""
        return _ancestor_label(self.generation)


@dataclass(frozen=True)
class DescendantEntry:
    """Single descendant with generation distance."""
    individual: Individual
    generation: int  # 1=child, 2=grandchild, etc.

    @property
    def relationship_label(self) -> str:
        """Human-readable relationship label."""
        return _descendant_label(self.generation)


@dataclass(frozen=True)
class PairingAnalysis:
    """Projected inbreeding of the offspring of two candidate mates."""
    coefficient: float
    shared_ancestor_count: int
    risk: PairingRisk
    message: str
    shared_ancestor_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def percent(self) -> float:
        return self.coefficient * 100


@dataclass(frozen=True)
class LineageScore:
    """How completely an individual's ancestry is documented."""
    completeness_percent: int  # 0-100
    generations_complete: int
    known_ancestors: int
    max_possible_ancestors: int
    recommendation: str

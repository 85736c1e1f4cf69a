"""Inbreeding coefficient estimation by path counting.

Approximates Wright's F from two ancestor maps: every id present in both
contributes ``0.5 ** (n1 + n2 + 1)``, where n1 and n2 are its nearest
distances from each side. Only the nearest path per ancestor is counted, and
the ancestor's own inbreeding is ignored.
"""
from __future__ import annotations

import asyncio

from ..config import CONFIG, RiskConfig
from ..logging import get_logger
from ..models.pedigree import PairingAnalysis, PairingRisk
from .store import IndividualLookup
from .traversal import AncestorMap, PedigreeTraversal

logger = get_logger(__name__)


_PAIRING_MESSAGES = {
    PairingRisk.EXCELLENT: "No common ancestry detected. Genetic diversity is maximized.",
    PairingRisk.GOOD: "Distant common ancestry ({percent}). Pairing is safe.",
    PairingRisk.CAUTION: "Some common ancestry ({percent}). Monitor offspring health.",
    PairingRisk.WARNING: "Significant common ancestry ({percent}). Consider alternative pairings.",
    PairingRisk.AVOID: "High inbreeding risk ({percent}). Pairing not recommended.",
}


def pairing_message(risk: PairingRisk, coefficient: float) -> str:
    """Breeder-facing explanation of a risk category."""
    return _PAIRING_MESSAGES[risk].format(percent=f"{coefficient * 100:.2f}%")


def shared_contribution(first: AncestorMap, second: AncestorMap) -> float:
    """Sum path contributions of ids present in both maps, clamped to [0, 1]."""
    total = sum(0.5 ** (first[a] + second[a] + 1) for a in first.keys() & second.keys())
    return min(max(total, 0.0), 1.0)


class InbreedingCalculator:
    """Inbreeding coefficients for individuals and prospective pairings.

    Example:
        >>> calc = InbreedingCalculator(store)
        >>> await calc.coefficient("pullet-9")
        0.25
        >>> (await calc.pairing_analysis("rooster-1", "hen-7")).risk
        <PairingRisk.EXCELLENT: 'excellent'>
    """

    def __init__(
        self,
        lookup: IndividualLookup,
        config: RiskConfig | None = None,
        traversal: PedigreeTraversal | None = None,
    ) -> None:
        self.lookup = lookup
        self.config = config or CONFIG.risk
        self.traversal = traversal or PedigreeTraversal(lookup)

    async def _candidate_map(
        self,
        individual_id: str,
        max_distance: int,
        cancel_event: asyncio.Event | None,
    ) -> AncestorMap:
        distances = await self.traversal.ancestor_map(individual_id, max_distance, cancel_event)
        # A candidate counts as its own ancestor even when the store has no record
        distances.setdefault(individual_id, 0)
        return distances

    async def _maps(
        self,
        first_id: str,
        second_id: str,
        max_distance: int,
        cancel_event: asyncio.Event | None,
    ) -> tuple[AncestorMap, AncestorMap]:
        first, second = await asyncio.gather(
            self._candidate_map(first_id, max_distance, cancel_event),
            self._candidate_map(second_id, max_distance, cancel_event),
        )
        return first, second

    async def coefficient(
        self,
        individual_id: str,
        max_depth: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> float:
        """Estimate the inbreeding coefficient F of an individual.

        Args:
            individual_id: Subject whose parents are compared
            max_depth: Generations above the subject to search

        Returns:
            F in [0, 1]; 0.0 when the subject or either parent is unrecorded
        """
        if max_depth is None:
            max_depth = self.config.coefficient_depth

        individual = await self.lookup.get_individual(individual_id)
        if individual is None or individual.sire_id is None or individual.dam_id is None:
            return 0.0

        # Parents sit one generation above the subject
        sire_map, dam_map = await asyncio.gather(
            self.traversal.ancestor_map(individual.sire_id, max_depth - 1, cancel_event),
            self.traversal.ancestor_map(individual.dam_id, max_depth - 1, cancel_event),
        )
        value = shared_contribution(sire_map, dam_map)

        logger.info(
            "inbreeding.coefficient",
            individual_id=individual_id,
            max_depth=max_depth,
            coefficient=value,
        )
        return value

    async def common_ancestors(
        self,
        first_id: str,
        second_id: str,
        max_depth: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> list[str]:
        """Ids found in both candidates' ancestor maps, sorted."""
        if max_depth is None:
            max_depth = self.config.pairing_depth
        first, second = await self._maps(first_id, second_id, max_depth, cancel_event)
        return sorted(first.keys() & second.keys())

    async def pairing_analysis(
        self,
        male_id: str,
        female_id: str,
        max_depth: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> PairingAnalysis:
        """Project the inbreeding of offspring from a prospective pairing.

        Args:
            male_id: Candidate sire
            female_id: Candidate dam
            max_depth: Generations searched above each candidate

        Returns:
            PairingAnalysis with coefficient, risk band and message
        """
        if max_depth is None:
            max_depth = self.config.pairing_depth

        male_map, female_map = await self._maps(male_id, female_id, max_depth, cancel_event)
        shared = sorted(male_map.keys() & female_map.keys())
        value = shared_contribution(male_map, female_map)
        risk = self.config.classify(value)

        logger.info(
            "inbreeding.pairing",
            male_id=male_id,
            female_id=female_id,
            coefficient=value,
            shared_ancestors=len(shared),
            risk=risk.value,
        )
        return PairingAnalysis(
            coefficient=value,
            shared_ancestor_count=len(shared),
            risk=risk,
            message=pairing_message(risk, value),
            shared_ancestor_ids=tuple(shared),
        )

"""Lineage completeness scoring."""
from __future__ import annotations

import asyncio
from collections import Counter

from ..config import CONFIG, LineageConfig
from ..logging import get_logger
from ..models.pedigree import LineageScore
from .store import IndividualLookup
from .traversal import PedigreeTraversal

logger = get_logger(__name__)


def max_possible_ancestors(generations: int) -> int:
    """Slots in a full pedigree: 2 + 4 + ... + 2**generations."""
    return sum(2 ** g for g in range(1, generations + 1))


class LineageScorer:
    """Scores how much of an individual's ancestry is on record."""

    def __init__(
        self,
        lookup: IndividualLookup,
        config: LineageConfig | None = None,
        traversal: PedigreeTraversal | None = None,
    ) -> None:
        self.lookup = lookup
        self.config = config or CONFIG.lineage
        self.traversal = traversal or PedigreeTraversal(lookup)

    async def score(
        self,
        individual_id: str,
        generations: int = 3,
        cancel_event: asyncio.Event | None = None,
    ) -> LineageScore:
        """Compare known ancestors against a full pedigree of ``generations``.

        ``generations_complete`` stops at the first generation with a gap.
        """
        ancestors = await self.traversal.collect_ancestors(individual_id, generations, cancel_event)
        known = len(ancestors)
        possible = max_possible_ancestors(generations)
        percent = round(known / possible * 100) if possible > 0 else 0

        per_generation = Counter(entry.generation for entry in ancestors)
        complete = 0
        for generation in range(1, generations + 1):
            if per_generation[generation] != 2 ** generation:
                break
            complete = generation

        result = LineageScore(
            completeness_percent=percent,
            generations_complete=complete,
            known_ancestors=known,
            max_possible_ancestors=possible,
            recommendation=self.config.recommendation(percent),
        )
        logger.info(
            "lineage.scored",
            individual_id=individual_id,
            generations=generations,
            completeness_percent=percent,
            known_ancestors=known,
        )
        return result

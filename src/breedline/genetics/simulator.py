"""Mendelian breeding simulation.

Each locus segregates independently: the offspring receives one allele drawn
uniformly from the sire's pair and one from the dam's. Linkage between loci
is not modeled, and the sex-linked loci segregate like autosomes.
"""
from __future__ import annotations

import random
from collections import Counter
from dataclasses import astuple
from typing import Protocol, runtime_checkable

from ..config import CONFIG, SimulationConfig
from ..logging import get_logger
from ..models.genotype import Allele, Genotype, Locus, canonical_pair
from .phenotype import PhenotypeSummary, summarize

logger = get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can pick an index; ``random.Random`` qualifies."""

    def randrange(self, stop: int) -> int:
        ...


class BreedingSimulator:
    """Monte-Carlo offspring generator with an injectable random source.

    Example:
        >>> sim = BreedingSimulator(random.Random(42))
        >>> chick = sim.simulate_offspring(sire, dam, "chick-1")
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        config: SimulationConfig | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.config = config or CONFIG.simulation

    def _draw(self, pair: tuple[Allele, Allele]) -> Allele:
        return pair[self.rng.randrange(2)]

    def simulate_offspring(
        self,
        sire_genotype: Genotype,
        dam_genotype: Genotype,
        offspring_id: str | None = None,
    ) -> Genotype:
        """Produce one offspring genotype.

        Loci are drawn in ``Locus`` order, sire allele before dam allele.
        """
        pairs: dict[str, tuple[Allele, Allele]] = {}
        for locus in Locus:
            from_sire = self._draw(sire_genotype.pair(locus))
            from_dam = self._draw(dam_genotype.pair(locus))
            pairs[locus.value] = canonical_pair(from_sire, from_dam)
        return Genotype(individual_id=offspring_id, **pairs)

    def simulate_clutch(
        self,
        sire_genotype: Genotype,
        dam_genotype: Genotype,
        count: int,
        id_prefix: str = "chick",
    ) -> list[Genotype]:
        """Produce ``count`` independent offspring ids ``{prefix}-1``, ``{prefix}-2``..."""
        return [
            self.simulate_offspring(sire_genotype, dam_genotype, f"{id_prefix}-{n}")
            for n in range(1, max(count, 0) + 1)
        ]

    def predict_distribution(
        self,
        sire_genotype: Genotype,
        dam_genotype: Genotype,
        sample_size: int | None = None,
    ) -> list[tuple[PhenotypeSummary, float]]:
        """Estimate offspring phenotype frequencies by repeated simulation.

        Returns:
            (summary, probability) pairs sorted by descending probability,
            ties broken by label.
        """
        sample_size = sample_size if sample_size is not None else self.config.sample_size
        if sample_size <= 0:
            return []

        counts: Counter[PhenotypeSummary] = Counter()
        for n in range(sample_size):
            offspring = self.simulate_offspring(sire_genotype, dam_genotype, f"sim_{n}")
            counts[summarize(offspring)] += 1

        logger.debug(
            "simulation.distribution",
            sample_size=sample_size,
            phenotypes=len(counts),
        )
        # Summaries that share a label (e.g. differ only in melanotic) stay separate
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].label, astuple(item[0])))
        return [(summary, count / sample_size) for summary, count in ranked]


def locus_probabilities(
    sire_genotype: Genotype,
    dam_genotype: Genotype,
    locus: Locus,
) -> dict[str, float]:
    """Exact Punnett-square genotype probabilities at one locus.

    Keys are symbol notation (``"Co/co+"``), most dominant allele first.
    """
    sire_pair = sire_genotype.pair(locus)
    dam_pair = dam_genotype.pair(locus)
    counts: Counter[str] = Counter()
    for a in sire_pair:
        for b in dam_pair:
            first, second = canonical_pair(a, b)
            counts[f"{first.symbol}/{second.symbol}"] += 1
    return {key: value / 4 for key, value in counts.items()}


def simulate_offspring(
    sire_genotype: Genotype,
    dam_genotype: Genotype,
    offspring_id: str | None = None,
    rng: RandomSource | None = None,
) -> Genotype:
    """Convenience wrapper around ``BreedingSimulator.simulate_offspring``."""
    return BreedingSimulator(rng).simulate_offspring(sire_genotype, dam_genotype, offspring_id)

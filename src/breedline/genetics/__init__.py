"""Heredity: Mendelian breeding simulation and phenotype resolution."""
from .phenotype import (
    RULES,
    PhenotypeMapper,
    PhenotypeSummary,
    resolve_appearance,
    summarize,
)
from .simulator import (
    BreedingSimulator,
    RandomSource,
    locus_probabilities,
    simulate_offspring,
)

__all__ = [
    "BreedingSimulator",
    "RandomSource",
    "simulate_offspring",
    "locus_probabilities",
    "PhenotypeMapper",
    "PhenotypeSummary",
    "RULES",
    "resolve_appearance",
    "summarize",
]

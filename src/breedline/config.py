"""Unified configuration for traversal limits, risk bands and phenotype rules.

Environment Variables:
    BREEDLINE_TREE_GENERATIONS: Default depth of pedigree trees (default 3)
    BREEDLINE_ANCESTOR_GENERATIONS: Default ancestor collection depth (default 5)
    BREEDLINE_DESCENDANT_GENERATIONS: Default descendant collection depth (default 3)

    BREEDLINE_RISK_GOOD_BELOW: Upper bound (exclusive) for GOOD (default 0.0625)
    BREEDLINE_RISK_CAUTION_BELOW: Upper bound (exclusive) for CAUTION (default 0.125)
    BREEDLINE_RISK_WARNING_BELOW: Upper bound (exclusive) for WARNING (default 0.25)
    BREEDLINE_COEFFICIENT_DEPTH: Generations searched for an individual's F (default 6)
    BREEDLINE_PAIRING_DEPTH: Generations searched for a prospective pairing (default 5)

    BREEDLINE_LINEAGE_EXCELLENT: Completeness band for "excellent" (default 90)
    BREEDLINE_LINEAGE_GOOD: Completeness band for "good" (default 70)
    BREEDLINE_LINEAGE_MODERATE: Completeness band for "moderate" (default 50)
    BREEDLINE_LINEAGE_LIMITED: Completeness band for "limited" (default 25)

    BREEDLINE_MATURITY_WEEKS: Age at which adult plumage is shown (default 16)
    BREEDLINE_SAMPLE_SIZE: Monte-Carlo offspring per prediction (default 1000)

Example:
    >>> from breedline.config import CONFIG
    >>> CONFIG.risk.classify(0.125)
    <PairingRisk.WARNING: 'warning'>
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from .models.pedigree import PairingRisk


def _f(name: str, default: float) -> float:
    """Parse float from environment variable with fallback."""
    try:
        return float(os.getenv(name, default))
    except Exception:
        return default


def _i(name: str, default: int) -> int:
    """Parse int from environment variable with fallback."""
    try:
        return int(os.getenv(name, default))
    except Exception:
        return default


@dataclass(frozen=True)
class TraversalConfig:
    """Default generation limits for pedigree walks."""

    tree_generations: int = field(default_factory=lambda: _i("BREEDLINE_TREE_GENERATIONS", 3))
    ancestor_generations: int = field(default_factory=lambda: _i("BREEDLINE_ANCESTOR_GENERATIONS", 5))
    descendant_generations: int = field(default_factory=lambda: _i("BREEDLINE_DESCENDANT_GENERATIONS", 3))


@dataclass(frozen=True)
class RiskConfig:
    """Inbreeding risk bands for prospective pairings."""

    # Upper bounds are exclusive; a coefficient of exactly 0 is always EXCELLENT
    good_below: float = field(default_factory=lambda: _f("BREEDLINE_RISK_GOOD_BELOW", 0.0625))
    caution_below: float = field(default_factory=lambda: _f("BREEDLINE_RISK_CAUTION_BELOW", 0.125))
    warning_below: float = field(default_factory=lambda: _f("BREEDLINE_RISK_WARNING_BELOW", 0.25))

    coefficient_depth: int = field(default_factory=lambda: _i("BREEDLINE_COEFFICIENT_DEPTH", 6))
    pairing_depth: int = field(default_factory=lambda: _i("BREEDLINE_PAIRING_DEPTH", 5))

    def classify(self, coefficient: float) -> PairingRisk:
        """Convert a projected coefficient to a risk category."""
        if coefficient == 0.0:
            return PairingRisk.EXCELLENT
        elif coefficient < self.good_below:
            return PairingRisk.GOOD
        elif coefficient < self.caution_below:
            return PairingRisk.CAUTION
        elif coefficient < self.warning_below:
            return PairingRisk.WARNING
        else:
            return PairingRisk.AVOID


@dataclass(frozen=True)
class LineageConfig:
    """Completeness bands for lineage documentation."""

    excellent: int = field(default_factory=lambda: _i("BREEDLINE_LINEAGE_EXCELLENT", 90))
    good: int = field(default_factory=lambda: _i("BREEDLINE_LINEAGE_GOOD", 70))
    moderate: int = field(default_factory=lambda: _i("BREEDLINE_LINEAGE_MODERATE", 50))
    limited: int = field(default_factory=lambda: _i("BREEDLINE_LINEAGE_LIMITED", 25))

    def recommendation(self, percent: int) -> str:
        if percent >= self.excellent:
            return "Excellent lineage documentation"
        elif percent >= self.good:
            return "Good lineage, some gaps"
        elif percent >= self.moderate:
            return "Moderate lineage, consider researching parents"
        elif percent >= self.limited:
            return "Limited lineage, significant gaps"
        else:
            return "Minimal lineage data available"


@dataclass(frozen=True)
class PhenotypeConfig:
    """Phenotype rendering settings."""

    maturity_weeks: int = field(default_factory=lambda: _i("BREEDLINE_MATURITY_WEEKS", 16))


@dataclass(frozen=True)
class SimulationConfig:
    """Monte-Carlo settings for offspring prediction."""

    sample_size: int = field(default_factory=lambda: _i("BREEDLINE_SAMPLE_SIZE", 1000))


@dataclass(frozen=True)
class BreedlineConfig:
    """All configuration sections."""

    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    risk: RiskConfig = field(default_factory=RiskConfig)
    lineage: LineageConfig = field(default_factory=LineageConfig)
    phenotype: PhenotypeConfig = field(default_factory=PhenotypeConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)


CONFIG = BreedlineConfig()

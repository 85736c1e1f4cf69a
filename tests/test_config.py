"""Tests for configuration and risk bands."""
from __future__ import annotations

import pytest

from breedline.config import (
    CONFIG,
    BreedlineConfig,
    LineageConfig,
    RiskConfig,
    SimulationConfig,
    TraversalConfig,
)
from breedline.models import PairingRisk


class TestRiskConfig:
    """Risk bands are exact and non-overlapping."""

    @pytest.mark.parametrize(
        ("coefficient", "expected"),
        [
            (0.0, PairingRisk.EXCELLENT),
            (0.0001, PairingRisk.GOOD),
            (0.0624, PairingRisk.GOOD),
            (0.0625, PairingRisk.CAUTION),
            (0.1249, PairingRisk.CAUTION),
            (0.125, PairingRisk.WARNING),
            (0.2499, PairingRisk.WARNING),
            (0.25, PairingRisk.AVOID),
            (1.0, PairingRisk.AVOID),
        ],
    )
    def test_classify(self, coefficient, expected):
        assert RiskConfig().classify(coefficient) == expected

    def test_depth_defaults(self):
        risk = RiskConfig()
        assert risk.coefficient_depth == 6
        assert risk.pairing_depth == 5


class TestLineageConfig:

    @pytest.mark.parametrize(
        ("percent", "expected"),
        [
            (100, "Excellent lineage documentation"),
            (90, "Excellent lineage documentation"),
            (89, "Good lineage, some gaps"),
            (70, "Good lineage, some gaps"),
            (50, "Moderate lineage, consider researching parents"),
            (25, "Limited lineage, significant gaps"),
            (24, "Minimal lineage data available"),
            (0, "Minimal lineage data available"),
        ],
    )
    def test_recommendation(self, percent, expected):
        assert LineageConfig().recommendation(percent) == expected


class TestEnvironment:
    """Defaults are read from the environment at construction time."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BREEDLINE_TREE_GENERATIONS", "7")
        monkeypatch.setenv("BREEDLINE_RISK_GOOD_BELOW", "0.05")
        monkeypatch.setenv("BREEDLINE_SAMPLE_SIZE", "250")

        assert TraversalConfig().tree_generations == 7
        assert RiskConfig().good_below == 0.05
        assert SimulationConfig().sample_size == 250

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("BREEDLINE_ANCESTOR_GENERATIONS", "many")
        monkeypatch.setenv("BREEDLINE_RISK_WARNING_BELOW", "high")

        assert TraversalConfig().ancestor_generations == 5
        assert RiskConfig().warning_below == 0.25

    def test_bundle(self):
        config = BreedlineConfig()
        assert config.phenotype.maturity_weeks == 16
        assert isinstance(CONFIG.risk, RiskConfig)

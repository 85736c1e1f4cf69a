"""Value objects for pedigrees, genotypes and appearances."""
from .appearance import (
    AppearanceDescription,
    BodySize,
    CombStyle,
    PartColor,
    PlumagePattern,
    TailStyle,
)
from .genotype import (
    ALLELES,
    Allele,
    Barring,
    BaseColor,
    BlueDilution,
    Columbian,
    Genotype,
    Locus,
    Melanotic,
    Mottling,
    Pattern,
    SilverGold,
)
from .individual import Individual, Sex
from .pedigree import (
    AncestorEntry,
    DescendantEntry,
    LineageScore,
    PairingAnalysis,
    PairingRisk,
    PedigreeNode,
    PedigreePosition,
)

__all__ = [
    # Individuals
    "Individual",
    "Sex",
    # Genotype
    "Locus",
    "Allele",
    "ALLELES",
    "BaseColor",
    "SilverGold",
    "Barring",
    "Columbian",
    "Pattern",
    "Melanotic",
    "Mottling",
    "BlueDilution",
    "Genotype",
    # Pedigree results
    "PedigreeNode",
    "PedigreePosition",
    "AncestorEntry",
    "DescendantEntry",
    "PairingAnalysis",
    "PairingRisk",
    "LineageScore",
    # Appearance
    "AppearanceDescription",
    "PartColor",
    "PlumagePattern",
    "TailStyle",
    "CombStyle",
    "BodySize",
]

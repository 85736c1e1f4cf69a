"""Genotype model: eight plumage loci, each holding a diploid allele pair.

Dominance hierarchy per locus (highest first):
- Base color (E): E > ER > eWh > e+ > eb
- Silver/gold (S, sex-linked): S > s+
- Barring (B, sex-linked): B > b+
- Columbian restriction (Co): Co > co+
- Pattern (Pg): Pg > pg+
- Melanotic (Ml): Ml > ml+
- Mottling (Mo): Mo+ > mo (mottled is recessive)
- Blue dilution (Bl): Bl > bl+ (incomplete; Bl/Bl is splash)
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import InvalidGenotypeError


class Locus(str, Enum):
    """Heredity positions tracked by the genotype."""
    BASE_COLOR = "base_color"
    SILVER_GOLD = "silver_gold"
    BARRING = "barring"
    COLUMBIAN = "columbian"
    PATTERN = "pattern"
    MELANOTIC = "melanotic"
    MOTTLING = "mottling"
    BLUE_DILUTION = "blue_dilution"

    @property
    def sex_linked(self) -> bool:
        """Silver/gold and barring sit on the Z chromosome."""
        return self in (Locus.SILVER_GOLD, Locus.BARRING)

    @property
    def allele_type(self) -> type[Allele]:
        return ALLELES[self]


class Allele(str, Enum):
    """Base for per-locus allele enums.

    Members are declared as ``(value, symbol, dominance)``.
    """

    symbol: str
    dominance: int

    def __new__(cls, value: str, symbol: str, dominance: int):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.symbol = symbol
        obj.dominance = dominance
        return obj

    @classmethod
    def _missing_(cls, value: object) -> Allele | None:
        # Accept genetic symbols ("Co") and member names ("COLUMBIAN")
        if isinstance(value, str):
            for member in cls:
                if value == member.symbol or value.upper() == member.name:
                    return member
        return None

    def __str__(self) -> str:
        return self.symbol


class BaseColor(Allele):
    EXTENDED = ("extended", "E", 5)
    BIRCHEN = ("birchen", "ER", 4)
    DOMINANT_WHEATEN = ("dominant_wheaten", "eWh", 3)
    WILD_TYPE = ("wild_type", "e+", 2)
    BROWN = ("brown", "eb", 1)


class SilverGold(Allele):
    SILVER = ("silver", "S", 2)
    GOLD = ("gold", "s+", 1)


class Barring(Allele):
    BARRED = ("barred", "B", 2)
    NON_BARRED = ("non_barred", "b+", 1)


class Columbian(Allele):
    COLUMBIAN = ("columbian", "Co", 2)
    NON_COLUMBIAN = ("non_columbian", "co+", 1)


class Pattern(Allele):
    PATTERNED = ("patterned", "Pg", 2)
    NON_PATTERNED = ("non_patterned", "pg+", 1)


class Melanotic(Allele):
    MELANOTIC = ("melanotic", "Ml", 2)
    NON_MELANOTIC = ("non_melanotic", "ml+", 1)


class Mottling(Allele):
    NON_MOTTLED = ("non_mottled", "Mo+", 2)
    MOTTLED = ("mottled", "mo", 1)


class BlueDilution(Allele):
    BLUE = ("blue", "Bl", 2)
    BLACK = ("black", "bl+", 1)


ALLELES: dict[Locus, type[Allele]] = {
    Locus.BASE_COLOR: BaseColor,
    Locus.SILVER_GOLD: SilverGold,
    Locus.BARRING: Barring,
    Locus.COLUMBIAN: Columbian,
    Locus.PATTERN: Pattern,
    Locus.MELANOTIC: Melanotic,
    Locus.MOTTLING: Mottling,
    Locus.BLUE_DILUTION: BlueDilution,
}


def coerce_allele(locus: Locus, value: Any) -> Allele:
    """Resolve ``value`` to a member of ``locus``'s allele set.

    Raises:
        InvalidGenotypeError: if the value names an allele of another locus
            or nothing at all.
    """
    allele_type = ALLELES[locus]
    if isinstance(value, Allele):
        if not isinstance(value, allele_type):
            raise InvalidGenotypeError(locus.value, value, "allele belongs to another locus")
        return value
    try:
        return allele_type(value)
    except ValueError:
        raise InvalidGenotypeError(locus.value, value) from None


def coerce_pair(locus: Locus, value: Any) -> tuple[Allele, Allele]:
    """Resolve a two-allele sequence (or "a/b" string) in canonical order."""
    if isinstance(value, str):
        value = value.split("/")
    if isinstance(value, Allele) or not isinstance(value, Iterable):
        raise InvalidGenotypeError(locus.value, value, "expected a pair of alleles")
    alleles = [coerce_allele(locus, item) for item in value]
    if len(alleles) != 2:
        raise InvalidGenotypeError(locus.value, value, "expected exactly two alleles")
    return canonical_pair(alleles[0], alleles[1])


def canonical_pair(first: Allele, second: Allele) -> tuple[Allele, Allele]:
    """Order a pair with the more dominant allele first."""
    if second.dominance > first.dominance:
        return (second, first)
    return (first, second)


class Genotype(BaseModel):
    """Allele pairs for all eight loci of one individual.

    Pairs are unordered; they are stored most-dominant first so equal allele
    content compares equal. Defaults describe a solid black bird (E/E with no
    modifiers).
    """
    model_config = ConfigDict(frozen=True)

    individual_id: str | None = None
    base_color: tuple[BaseColor, BaseColor] = (BaseColor.EXTENDED, BaseColor.EXTENDED)
    silver_gold: tuple[SilverGold, SilverGold] = (SilverGold.GOLD, SilverGold.GOLD)
    barring: tuple[Barring, Barring] = (Barring.NON_BARRED, Barring.NON_BARRED)
    columbian: tuple[Columbian, Columbian] = (Columbian.NON_COLUMBIAN, Columbian.NON_COLUMBIAN)
    pattern: tuple[Pattern, Pattern] = (Pattern.NON_PATTERNED, Pattern.NON_PATTERNED)
    melanotic: tuple[Melanotic, Melanotic] = (Melanotic.NON_MELANOTIC, Melanotic.NON_MELANOTIC)
    mottling: tuple[Mottling, Mottling] = (Mottling.NON_MOTTLED, Mottling.NON_MOTTLED)
    blue_dilution: tuple[BlueDilution, BlueDilution] = (BlueDilution.BLACK, BlueDilution.BLACK)

    @field_validator(*(locus.value for locus in Locus), mode="before")
    @classmethod
    def _validate_pair(cls, value: Any, info) -> tuple[Allele, Allele]:
        return coerce_pair(Locus(info.field_name), value)

    @classmethod
    def from_pairs(
        cls,
        pairs: Mapping[Locus | str, Any],
        individual_id: str | None = None,
    ) -> Genotype:
        """Build a genotype from a complete locus -> pair mapping.

        Raises:
            InvalidGenotypeError: if a locus is missing or an allele is invalid.
        """
        resolved: dict[str, tuple[Allele, Allele]] = {}
        for key, value in pairs.items():
            try:
                locus = Locus(key)
            except ValueError:
                raise InvalidGenotypeError(str(key), None, "unknown locus") from None
            resolved[locus.value] = coerce_pair(locus, value)
        for locus in Locus:
            if locus.value not in resolved:
                raise InvalidGenotypeError(locus.value, None, "locus missing from genotype")
        return cls(individual_id=individual_id, **resolved)

    @classmethod
    def wild_type(cls, individual_id: str | None = None) -> Genotype:
        """Red junglefowl pattern: e+/e+ with no modifiers."""
        return cls(individual_id=individual_id, base_color=(BaseColor.WILD_TYPE, BaseColor.WILD_TYPE))

    def pair(self, locus: Locus) -> tuple[Allele, Allele]:
        return getattr(self, Locus(locus).value)

    def pairs(self) -> dict[Locus, tuple[Allele, Allele]]:
        return {locus: self.pair(locus) for locus in Locus}

    def dominant(self, locus: Locus) -> Allele:
        """Highest-dominance allele present at ``locus``."""
        return self.pair(locus)[0]

    def count(self, locus: Locus, allele: Allele) -> int:
        """Copies (0, 1 or 2) of ``allele`` at ``locus``."""
        return sum(1 for a in self.pair(locus) if a is allele)

    def has(self, locus: Locus, allele: Allele) -> bool:
        return self.count(locus, allele) > 0

    def is_homozygous(self, locus: Locus) -> bool:
        first, second = self.pair(locus)
        return first is second

    def notation(self) -> str:
        """Conventional symbol notation, e.g. ``E/ER S/s+ ...``."""
        return " ".join(f"{a.symbol}/{b.symbol}" for a, b in self.pairs().values())

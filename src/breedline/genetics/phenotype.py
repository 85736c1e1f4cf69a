"""Genotype to phenotype resolution.

Rules run in a fixed order because later loci mask or restrict earlier ones:

    base color ; silver/gold ; columbian ; pattern+melanotic ;
    barring ; mottling ; blue dilution ; maturity

Each rule is a pure function ``(appearance, genotype, sex) -> appearance``
that only touches the fields it owns and returns a new value.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..config import CONFIG, PhenotypeConfig
from ..models.appearance import (
    AppearanceDescription,
    BodySize,
    CombStyle,
    PartColor,
    PlumagePattern,
    TailStyle,
)
from ..models.genotype import (
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
from ..models.individual import Sex

Rule = Callable[[AppearanceDescription, Genotype, Sex], AppearanceDescription]


def _is_silver(genotype: Genotype) -> bool:
    # S is dominant: one copy is enough
    return genotype.has(Locus.SILVER_GOLD, SilverGold.SILVER)


def _is_columbian(genotype: Genotype) -> bool:
    return genotype.has(Locus.COLUMBIAN, Columbian.COLUMBIAN)


# =============================================================================
# Rules
# =============================================================================


def apply_base_color(appearance: AppearanceDescription, genotype: Genotype, sex: Sex) -> AppearanceDescription:
    """E locus: pick one of four body templates from the dominant allele."""
    dominant = genotype.dominant(Locus.BASE_COLOR)
    male = sex is Sex.MALE

    if dominant is BaseColor.EXTENDED:
        return appearance.model_copy(update={
            "chest_color": PartColor.BLACK,
            "back_color": PartColor.BLACK,
            "wing_color": PartColor.BLACK,
            "tail_color": PartColor.GREEN_BLACK,
            "chest_pattern": PlumagePattern.SOLID,
            "wing_pattern": PlumagePattern.SOLID,
        })
    elif dominant is BaseColor.BIRCHEN:
        return appearance.model_copy(update={
            "chest_color": PartColor.BLACK,
            "back_color": PartColor.WHITE,
            "wing_color": PartColor.BLACK,
            "tail_color": PartColor.BLACK,
            "chest_pattern": PlumagePattern.LACED,
        })
    elif dominant is BaseColor.DOMINANT_WHEATEN:
        return appearance.model_copy(update={
            "chest_color": PartColor.BLACK if male else PartColor.WHEATEN,
            "back_color": PartColor.RED if male else PartColor.WHEATEN,
            "wing_color": PartColor.RED if male else PartColor.WHEATEN,
            "tail_color": PartColor.BLACK,
        })
    # Wild type and brown share the partridge template
    return appearance.model_copy(update={
        "chest_color": PartColor.BLACK if male else PartColor.BROWN,
        "back_color": PartColor.RED if male else PartColor.BROWN,
        "wing_color": PartColor.RED if male else PartColor.BROWN,
        "tail_color": PartColor.BLACK,
    })


def apply_silver_gold(appearance: AppearanceDescription, genotype: Genotype, sex: Sex) -> AppearanceDescription:
    """S locus: silver washes red/gold to white; birchen takes it as an accent."""
    birchen = genotype.dominant(Locus.BASE_COLOR) is BaseColor.BIRCHEN

    if _is_silver(genotype):
        appearance = appearance.recolor(PartColor.RED, PartColor.WHITE).recolor(PartColor.GOLD, PartColor.WHITE)
        if birchen:
            appearance = appearance.model_copy(update={
                "chest_color": PartColor.BLACK,
                "secondary_color": PartColor.SILVER,
            })
        return appearance

    if birchen:
        return appearance.model_copy(update={"secondary_color": PartColor.GOLD})
    return appearance


def apply_columbian(appearance: AppearanceDescription, genotype: Genotype, sex: Sex) -> AppearanceDescription:
    """Co locus: restrict black to neck and tail."""
    if not _is_columbian(genotype):
        return appearance
    body = PartColor.WHITE if _is_silver(genotype) else PartColor.BUFF
    return appearance.model_copy(update={
        "chest_pattern": PlumagePattern.COLUMBIAN,
        "chest_color": body,
        "back_color": body,
        "wing_color": body,
        "tail_color": PartColor.BLACK,
    })


def apply_pattern(appearance: AppearanceDescription, genotype: Genotype, sex: Sex) -> AppearanceDescription:
    """Pg + Ml: lacing when both are present; Pg alone has no visible effect."""
    patterned = genotype.count(Locus.PATTERN, Pattern.PATTERNED)
    melanotic = genotype.count(Locus.MELANOTIC, Melanotic.MELANOTIC)
    if patterned == 0 or melanotic == 0:
        return appearance

    silver = _is_silver(genotype)
    if _is_columbian(genotype):
        # Wyandotte lacing: light center, black rim
        return appearance.model_copy(update={
            "chest_pattern": PlumagePattern.LACED,
            "wing_pattern": PlumagePattern.LACED,
            "chest_color": PartColor.WHITE if silver else PartColor.BUFF,
            "secondary_color": PartColor.BLACK,
        })
    # Barnevelder double lacing
    return appearance.model_copy(update={
        "chest_pattern": PlumagePattern.DOUBLE_LACED,
        "wing_pattern": PlumagePattern.DOUBLE_LACED,
        "chest_color": PartColor.WHITE if silver else PartColor.MAHOGANY,
        "secondary_color": PartColor.BLACK,
    })


def apply_barring(appearance: AppearanceDescription, genotype: Genotype, sex: Sex) -> AppearanceDescription:
    """B locus: barring overrides any pattern."""
    if not genotype.has(Locus.BARRING, Barring.BARRED):
        return appearance
    return appearance.model_copy(update={
        "chest_pattern": PlumagePattern.BARRED,
        "wing_pattern": PlumagePattern.BARRED,
        "tail_style": TailStyle.SHORT,
        "chest_color": PartColor.BLACK,
        "secondary_color": PartColor.WHITE,
    })


def apply_mottling(appearance: AppearanceDescription, genotype: Genotype, sex: Sex) -> AppearanceDescription:
    """Mo locus: recessive, only mo/mo shows."""
    if genotype.count(Locus.MOTTLING, Mottling.MOTTLED) != 2:
        return appearance
    return appearance.model_copy(update={
        "chest_pattern": PlumagePattern.MOTTLED,
        "wing_pattern": PlumagePattern.MOTTLED,
        "secondary_color": PartColor.WHITE,
    })


def apply_blue(appearance: AppearanceDescription, genotype: Genotype, sex: Sex) -> AppearanceDescription:
    """Bl locus: Bl/bl+ dilutes black to blue, Bl/Bl is splash."""
    copies = genotype.count(Locus.BLUE_DILUTION, BlueDilution.BLUE)
    if copies == 1:
        return appearance.recolor(PartColor.BLACK, PartColor.BLUE).recolor(PartColor.GREEN_BLACK, PartColor.BLUE)
    elif copies == 2:
        return appearance.model_copy(update={
            "chest_pattern": PlumagePattern.SPLASH,
            "wing_pattern": PlumagePattern.SPLASH,
            "chest_color": PartColor.WHITE,
            "secondary_color": PartColor.BLUE,
        })
    return appearance


RULES: tuple[tuple[str, Rule], ...] = (
    ("base_color", apply_base_color),
    ("silver_gold", apply_silver_gold),
    ("columbian", apply_columbian),
    ("pattern", apply_pattern),
    ("barring", apply_barring),
    ("mottling", apply_mottling),
    ("blue_dilution", apply_blue),
)


# =============================================================================
# Summary
# =============================================================================


_BASE_COLOR_NAMES = {
    BaseColor.EXTENDED: "Extended Black",
    BaseColor.BIRCHEN: "Birchen",
    BaseColor.DOMINANT_WHEATEN: "Wheaten",
    BaseColor.WILD_TYPE: "Wild Type",
    BaseColor.BROWN: "Brown",
}


@dataclass(frozen=True)
class PhenotypeSummary:
    """Per-locus phenotype names for one genotype."""
    base_color: str
    silver_gold: str
    blue_effect: str
    barred: bool
    columbian: bool
    melanotic: bool
    mottled: bool

    @property
    def label(self) -> str:
        """Composite color name, e.g. ``"Blue Silver Columbian Wild Type"``."""
        parts: list[str] = []
        if self.blue_effect != "Non-Blue":
            parts.append(self.blue_effect)
        # Solid extended black hides the silver/gold locus
        if self.base_color != "Extended Black" or self.columbian:
            parts.append(self.silver_gold)
        if self.columbian:
            parts.append("Columbian")
        if self.barred:
            parts.append("Barred")
        if self.mottled:
            parts.append("Mottled")
        parts.append(self.base_color)
        return " ".join(parts)


def summarize(genotype: Genotype) -> PhenotypeSummary:
    """Name the visible effect of each locus."""
    blue = genotype.count(Locus.BLUE_DILUTION, BlueDilution.BLUE)
    return PhenotypeSummary(
        base_color=_BASE_COLOR_NAMES[genotype.dominant(Locus.BASE_COLOR)],
        silver_gold="Silver" if _is_silver(genotype) else "Gold",
        blue_effect=("Non-Blue", "Blue", "Splash")[blue],
        barred=genotype.has(Locus.BARRING, Barring.BARRED),
        columbian=_is_columbian(genotype),
        melanotic=genotype.has(Locus.MELANOTIC, Melanotic.MELANOTIC),
        mottled=genotype.count(Locus.MOTTLING, Mottling.MOTTLED) == 2,
    )


# =============================================================================
# Mapper
# =============================================================================


class PhenotypeMapper:
    """Translates a genotype into an appearance description.

    Example:
        >>> mapper = PhenotypeMapper()
        >>> mapper.resolve_appearance(Genotype(), age_weeks=20).chest_color
        <PartColor.BLACK: 'black'>
    """

    def __init__(self, config: PhenotypeConfig | None = None) -> None:
        self.config = config or CONFIG.phenotype

    def resolve_steps(
        self,
        genotype: Genotype,
        age_weeks: int,
        sex: Sex | None = None,
    ) -> list[tuple[str, AppearanceDescription]]:
        """Run every rule and return the appearance after each one.

        Males are rendered when ``sex`` is unknown.
        """
        sex = sex or Sex.MALE
        appearance = AppearanceDescription()
        steps: list[tuple[str, AppearanceDescription]] = []
        for name, rule in RULES:
            appearance = rule(appearance, genotype, sex)
            steps.append((name, appearance))
        steps.append(("maturity", self._apply_maturity(appearance, age_weeks)))
        return steps

    def resolve_appearance(
        self,
        genotype: Genotype,
        age_weeks: int,
        sex: Sex | None = None,
    ) -> AppearanceDescription:
        """Resolve the final appearance of ``genotype`` at ``age_weeks``."""
        return self.resolve_steps(genotype, age_weeks, sex)[-1][1]

    def _apply_maturity(self, appearance: AppearanceDescription, age_weeks: int) -> AppearanceDescription:
        if age_weeks >= self.config.maturity_weeks:
            return appearance
        # Chicks: no comb or sickles yet
        return appearance.model_copy(update={
            "is_mature": False,
            "comb": CombStyle.NONE,
            "tail_style": TailStyle.SHORT,
            "body_size": BodySize.CHICK,
        })


def resolve_appearance(genotype: Genotype, age_weeks: int, sex: Sex | None = None) -> AppearanceDescription:
    """Convenience wrapper using the default configuration."""
    return PhenotypeMapper().resolve_appearance(genotype, age_weeks, sex)

"""Tests for genotype to appearance resolution."""
from __future__ import annotations

import pytest

from breedline.config import PhenotypeConfig
from breedline.genetics import PhenotypeMapper, resolve_appearance, summarize
from breedline.genetics.phenotype import apply_pattern
from breedline.models import (
    AppearanceDescription,
    BodySize,
    CombStyle,
    Genotype,
    PartColor,
    PlumagePattern,
    Sex,
    TailStyle,
)

ADULT = 20


@pytest.fixture
def mapper():
    return PhenotypeMapper(PhenotypeConfig(maturity_weeks=16))


class TestBaseColor:
    """E locus templates."""

    def test_extended_black(self, mapper):
        look = mapper.resolve_appearance(Genotype(), ADULT)

        assert look.chest_color == PartColor.BLACK
        assert look.back_color == PartColor.BLACK
        assert look.wing_color == PartColor.BLACK
        assert look.tail_color == PartColor.GREEN_BLACK
        assert look.chest_pattern == PlumagePattern.SOLID
        assert look.wing_pattern == PlumagePattern.SOLID

    def test_birchen(self, mapper):
        look = mapper.resolve_appearance(Genotype(base_color="ER/ER"), ADULT)

        assert look.chest_color == PartColor.BLACK
        assert look.back_color == PartColor.WHITE
        assert look.chest_pattern == PlumagePattern.LACED
        assert look.secondary_color == PartColor.GOLD

    def test_silver_birchen_keeps_black_chest(self, mapper):
        look = mapper.resolve_appearance(Genotype(base_color="ER/e+", silver_gold="S/s+"), ADULT)

        assert look.chest_color == PartColor.BLACK
        assert look.secondary_color == PartColor.SILVER

    def test_wheaten_depends_on_sex(self, mapper):
        genotype = Genotype(base_color="eWh/eWh")
        male = mapper.resolve_appearance(genotype, ADULT, Sex.MALE)
        female = mapper.resolve_appearance(genotype, ADULT, Sex.FEMALE)

        assert male.chest_color == PartColor.BLACK
        assert male.back_color == PartColor.RED
        assert female.chest_color == PartColor.WHEATEN
        assert female.back_color == PartColor.WHEATEN

    def test_wild_type(self, mapper):
        look = mapper.resolve_appearance(Genotype.wild_type(), ADULT)

        assert look.chest_color == PartColor.BLACK
        assert look.back_color == PartColor.RED
        assert look.wing_color == PartColor.RED
        assert look.tail_color == PartColor.BLACK

    def test_unknown_sex_renders_male(self, mapper):
        genotype = Genotype.wild_type()
        assert mapper.resolve_appearance(genotype, ADULT) == mapper.resolve_appearance(genotype, ADULT, Sex.MALE)

    def test_dominant_allele_wins(self, mapper):
        het = mapper.resolve_appearance(Genotype(base_color="e+/E"), ADULT)
        assert het == mapper.resolve_appearance(Genotype(), ADULT)


class TestSilverGold:

    def test_silver_whitens_red(self, mapper):
        look = mapper.resolve_appearance(Genotype(base_color="e+/e+", silver_gold="S/S"), ADULT)

        assert look.back_color == PartColor.WHITE
        assert look.wing_color == PartColor.WHITE
        assert look.chest_color == PartColor.BLACK

    def test_gold_leaves_red(self, mapper):
        look = mapper.resolve_appearance(Genotype(base_color="e+/e+", silver_gold="s+/s+"), ADULT)
        assert look.back_color == PartColor.RED


class TestColumbian:

    def test_gold_columbian(self, mapper):
        look = mapper.resolve_appearance(Genotype(base_color="e+/e+", columbian="Co/co+"), ADULT)

        assert look.chest_pattern == PlumagePattern.COLUMBIAN
        assert look.chest_color == PartColor.BUFF
        assert look.back_color == PartColor.BUFF
        assert look.tail_color == PartColor.BLACK

    def test_silver_columbian(self, mapper):
        look = mapper.resolve_appearance(
            Genotype(base_color="e+/e+", silver_gold="S/s+", columbian="Co/Co"), ADULT
        )
        assert look.chest_color == PartColor.WHITE
        assert look.wing_color == PartColor.WHITE


class TestPattern:
    """Pg + Ml lacing."""

    def test_pattern_without_melanotic_is_invisible(self, mapper):
        genotype = Genotype(base_color="e+/e+", pattern="Pg/Pg")
        assert mapper.resolve_appearance(genotype, ADULT) == mapper.resolve_appearance(Genotype.wild_type(), ADULT)

    def test_laced_with_columbian(self, mapper):
        look = mapper.resolve_appearance(
            Genotype(
                base_color="e+/e+",
                silver_gold="S/S",
                columbian="Co/Co",
                pattern="Pg/Pg",
                melanotic="Ml/ml+",
            ),
            ADULT,
        )
        assert look.chest_pattern == PlumagePattern.LACED
        assert look.wing_pattern == PlumagePattern.LACED
        assert look.chest_color == PartColor.WHITE
        assert look.secondary_color == PartColor.BLACK

    def test_double_laced_without_columbian(self, mapper):
        look = mapper.resolve_appearance(
            Genotype(base_color="e+/e+", pattern="Pg/pg+", melanotic="Ml/Ml"), ADULT
        )
        assert look.chest_pattern == PlumagePattern.DOUBLE_LACED
        assert look.chest_color == PartColor.MAHOGANY
        assert look.secondary_color == PartColor.BLACK

    def test_rule_returns_new_value(self):
        genotype = Genotype(pattern="Pg/Pg", melanotic="Ml/Ml")
        before = AppearanceDescription()
        after = apply_pattern(before, genotype, Sex.MALE)

        assert after is not before
        assert before.chest_pattern == PlumagePattern.SOLID


class TestBarring:

    def test_barring_overrides_pattern(self, mapper):
        look = mapper.resolve_appearance(
            Genotype(base_color="e+/e+", barring="B/b+", pattern="Pg/Pg", melanotic="Ml/Ml"), ADULT
        )
        assert look.chest_pattern == PlumagePattern.BARRED
        assert look.wing_pattern == PlumagePattern.BARRED
        assert look.chest_color == PartColor.BLACK
        assert look.secondary_color == PartColor.WHITE
        assert look.tail_style == TailStyle.SHORT


class TestMottling:

    def test_homozygous_mottled(self, mapper):
        look = mapper.resolve_appearance(Genotype(mottling="mo/mo"), ADULT)
        assert look.chest_pattern == PlumagePattern.MOTTLED
        assert look.secondary_color == PartColor.WHITE

    def test_carrier_not_mottled(self, mapper):
        look = mapper.resolve_appearance(Genotype(mottling="Mo+/mo"), ADULT)
        assert look.chest_pattern == PlumagePattern.SOLID


class TestBlueDilution:

    def test_one_copy_dilutes_black(self, mapper):
        look = mapper.resolve_appearance(Genotype(blue_dilution="Bl/bl+"), ADULT)

        assert look.chest_color == PartColor.BLUE
        assert look.back_color == PartColor.BLUE
        assert look.wing_color == PartColor.BLUE
        assert look.tail_color == PartColor.BLUE

    def test_two_copies_splash(self, mapper):
        look = mapper.resolve_appearance(Genotype(blue_dilution="Bl/Bl"), ADULT)

        assert look.chest_pattern == PlumagePattern.SPLASH
        assert look.chest_color == PartColor.WHITE
        assert look.secondary_color == PartColor.BLUE

    def test_splash_overrides_mottling(self, mapper):
        look = mapper.resolve_appearance(Genotype(blue_dilution="Bl/Bl", mottling="mo/mo"), ADULT)
        assert look.chest_pattern == PlumagePattern.SPLASH
        assert look.wing_pattern == PlumagePattern.SPLASH


class TestMaturity:

    def test_chick(self, mapper):
        look = mapper.resolve_appearance(Genotype(), 8)

        assert look.is_mature is False
        assert look.comb == CombStyle.NONE
        assert look.tail_style == TailStyle.SHORT
        assert look.body_size == BodySize.CHICK
        # Colors still follow the genotype
        assert look.chest_color == PartColor.BLACK

    def test_adult_at_threshold(self, mapper):
        look = mapper.resolve_appearance(Genotype(), 16)

        assert look.is_mature is True
        assert look.comb == CombStyle.SINGLE
        assert look.tail_style == TailStyle.SICKLE


class TestMapper:
    """Tests for rule ordering and determinism."""

    def test_deterministic(self, mapper):
        genotype = Genotype(
            base_color="ER/e+",
            silver_gold="S/s+",
            columbian="Co/co+",
            pattern="Pg/Pg",
            melanotic="Ml/Ml",
            blue_dilution="Bl/bl+",
        )
        assert mapper.resolve_appearance(genotype, 30) == mapper.resolve_appearance(genotype, 30)
        assert resolve_appearance(genotype, 30) == resolve_appearance(genotype, 30)

    def test_step_order(self, mapper):
        steps = mapper.resolve_steps(Genotype(), ADULT)
        assert [name for name, _ in steps] == [
            "base_color",
            "silver_gold",
            "columbian",
            "pattern",
            "barring",
            "mottling",
            "blue_dilution",
            "maturity",
        ]
        assert steps[-1][1] == mapper.resolve_appearance(Genotype(), ADULT)

    def test_part_color_hex(self):
        assert PartColor.BLACK.hex == "#212121"


class TestSummarize:

    def test_composite_label(self):
        genotype = Genotype(
            base_color="e+/e+",
            silver_gold="S/s+",
            columbian="Co/co+",
            blue_dilution="Bl/bl+",
        )
        summary = summarize(genotype)

        assert summary.base_color == "Wild Type"
        assert summary.silver_gold == "Silver"
        assert summary.blue_effect == "Blue"
        assert summary.columbian is True
        assert summary.label == "Blue Silver Columbian Wild Type"

    def test_solid_black_hides_silver_gold(self):
        assert summarize(Genotype()).label == "Extended Black"
        assert summarize(Genotype(barring="B/B")).label == "Barred Extended Black"

    def test_splash(self):
        assert summarize(Genotype(blue_dilution="Bl/Bl")).blue_effect == "Splash"

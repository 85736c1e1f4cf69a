"""Shared pedigree fixtures."""
from __future__ import annotations

import pytest

from breedline.models import Individual
from breedline.pedigree import InMemoryIndividualStore


def full_pedigree(root_id: str, generations: int) -> list[Individual]:
    """Complete pedigree where every ancestor slot is filled.

    Ids encode the path from the root: ``C.s`` is C's sire, ``C.s.d`` its
    paternal granddam, and so on.
    """
    individuals: list[Individual] = []

    def build(individual_id: str, sex: str | None, depth: int) -> None:
        if depth < generations:
            sire_id, dam_id = f"{individual_id}.s", f"{individual_id}.d"
            build(sire_id, "male", depth + 1)
            build(dam_id, "female", depth + 1)
        else:
            sire_id = dam_id = None
        individuals.append(Individual(id=individual_id, sex=sex, sire_id=sire_id, dam_id=dam_id))

    build(root_id, None, 0)
    return individuals


@pytest.fixture
def full_store():
    """Factory for a store holding a complete pedigree of ``generations``."""
    def make(root_id: str = "C", generations: int = 3) -> InMemoryIndividualStore:
        return InMemoryIndividualStore(full_pedigree(root_id, generations))
    return make


@pytest.fixture
def family_store():
    """Three generations with all slots filled.

    - GS1 + GD1 -> SIRE
    - GS2 + GD2 -> DAM
    - SIRE + DAM -> CHICK
    """
    return InMemoryIndividualStore([
        Individual(id="GS1", sex="male", name="Grandsire 1"),
        Individual(id="GD1", sex="female", name="Granddam 1"),
        Individual(id="GS2", sex="male", name="Grandsire 2"),
        Individual(id="GD2", sex="female", name="Granddam 2"),
        Individual(id="SIRE", sex="male", sire_id="GS1", dam_id="GD1"),
        Individual(id="DAM", sex="female", sire_id="GS2", dam_id="GD2"),
        Individual(id="CHICK", sire_id="SIRE", dam_id="DAM"),
    ])


@pytest.fixture
def sibling_store():
    """Full and half siblings for inbreeding cases.

    - A + B -> BROTHER, SISTER (full siblings)
    - A + E -> HALF_SISTER
    - BROTHER + SISTER -> INBRED
    - BROTHER + HALF_SISTER -> HALF_INBRED
    """
    return InMemoryIndividualStore([
        Individual(id="A", sex="male"),
        Individual(id="B", sex="female"),
        Individual(id="E", sex="female"),
        Individual(id="BROTHER", sex="male", sire_id="A", dam_id="B"),
        Individual(id="SISTER", sex="female", sire_id="A", dam_id="B"),
        Individual(id="HALF_SISTER", sex="female", sire_id="A", dam_id="E"),
        Individual(id="INBRED", sire_id="BROTHER", dam_id="SISTER"),
        Individual(id="HALF_INBRED", sire_id="BROTHER", dam_id="HALF_SISTER"),
        Individual(id="OUTSIDER", sex="female"),
    ])


@pytest.fixture
def cyclic_store():
    """Corrupt data: X is recorded as the sire of its own sire."""
    return InMemoryIndividualStore([
        Individual(id="X", sex="male", sire_id="Y", dam_id="Z"),
        Individual(id="Y", sex="male", sire_id="X"),
        Individual(id="Z", sex="female"),
    ])


@pytest.fixture
def linebred_store():
    """X is both the dam of C and the granddam of C's sire.

    - XS + XD -> X
    - X -> P (dam)
    - P -> S (sire)
    - S + X -> C
    """
    return InMemoryIndividualStore([
        Individual(id="XS", sex="male"),
        Individual(id="XD", sex="female"),
        Individual(id="X", sex="female", sire_id="XS", dam_id="XD"),
        Individual(id="P", sex="male", dam_id="X"),
        Individual(id="S", sex="male", sire_id="P"),
        Individual(id="C", sire_id="S", dam_id="X"),
    ])

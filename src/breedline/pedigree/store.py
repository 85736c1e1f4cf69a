"""Individual lookup contract and an in-memory reference store.

Pedigree services only ever read through ``IndividualLookup``. Production
callers adapt their database; tests and small tools use
``InMemoryIndividualStore``.
"""
from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ..exceptions import InvalidParentLinkError
from ..logging import get_logger
from ..models.individual import Individual, Sex

logger = get_logger(__name__)


@runtime_checkable
class IndividualLookup(Protocol):
    """Protocol the storage collaborator must implement."""

    async def get_individual(self, individual_id: str) -> Individual | None:
        """Retrieve an individual by id.

        Returns:
            The individual, or None if unknown. Never raises for a missing id.
        """
        ...

    async def get_offspring_of(self, individual_id: str) -> list[Individual]:
        """Individuals whose sire_id or dam_id equals ``individual_id``.

        Returns:
            Offspring list, empty if none
        """
        ...


class InMemoryIndividualStore:
    """Dict-backed store with a reverse parent index.

    Example:
        >>> store = InMemoryIndividualStore()
        >>> store.add_many([
        ...     Individual(id="A", sex="male"),
        ...     Individual(id="B", sex="female"),
        ...     Individual(id="C", sire_id="A", dam_id="B"),
        ... ])
        >>> await store.get_offspring_of("A")
        [Individual(id='C', ...)]
    """

    def __init__(self, individuals: Iterable[Individual] = ()) -> None:
        self._individuals: dict[str, Individual] = {}
        self._offspring: defaultdict[str, list[str]] = defaultdict(list)
        self.add_many(individuals)

    def __len__(self) -> int:
        return len(self._individuals)

    def __contains__(self, individual_id: object) -> bool:
        return individual_id in self._individuals

    def add(self, individual: Individual) -> Individual:
        """Insert or replace an individual, keeping the offspring index current."""
        previous = self._individuals.get(individual.id)
        if previous is not None:
            self._unindex(previous)
        self._individuals[individual.id] = individual
        for parent_id in dict.fromkeys(individual.parent_ids):
            self._offspring[parent_id].append(individual.id)
        return individual

    def add_many(self, individuals: Iterable[Individual]) -> None:
        for individual in individuals:
            self.add(individual)

    def _unindex(self, individual: Individual) -> None:
        for parent_id in dict.fromkeys(individual.parent_ids):
            children = self._offspring.get(parent_id)
            if children and individual.id in children:
                children.remove(individual.id)

    def link_parents(
        self,
        child_id: str,
        sire_id: str | None = None,
        dam_id: str | None = None,
    ) -> Individual:
        """Set the sire and/or dam of an existing individual.

        Raises:
            InvalidParentLinkError: unknown child or parent, a self link, or a
                parent whose recorded sex contradicts the role.
        """
        child = self._individuals.get(child_id)
        if child is None:
            raise InvalidParentLinkError(child_id, sire_id or dam_id or "", "parent", "child not found")

        updates: dict[str, str] = {}
        for role, parent_id, forbidden in (
            ("sire", sire_id, Sex.FEMALE),
            ("dam", dam_id, Sex.MALE),
        ):
            if parent_id is None:
                continue
            if parent_id == child_id:
                raise InvalidParentLinkError(child_id, parent_id, role, "individual cannot be its own parent")
            parent = self._individuals.get(parent_id)
            if parent is None:
                raise InvalidParentLinkError(child_id, parent_id, role, "parent not found")
            if parent.sex is forbidden:
                raise InvalidParentLinkError(child_id, parent_id, role, f"{role} cannot be {forbidden.value}")
            updates[f"{role}_id"] = parent_id

        linked = child.model_copy(update=updates)
        logger.info("store.parents_linked", child_id=child_id, **updates)
        return self.add(linked)

    async def get_individual(self, individual_id: str) -> Individual | None:
        return self._individuals.get(individual_id)

    async def get_offspring_of(self, individual_id: str) -> list[Individual]:
        return [self._individuals[i] for i in self._offspring.get(individual_id, ()) if i in self._individuals]

"""Pedigree traversal over an individual lookup.

Provides:
- Pedigree tree construction (sire/dam subtrees up to N generations)
- Ancestor collection (depth-first, sire line before dam line)
- Descendant collection via the store's offspring index
- Ancestor maps (nearest distance per ancestor id) for inbreeding math

Every walk tracks the ids it has reached, so malformed data where an
individual is its own ancestor terminates at the repeated id instead of
looping.
"""
from __future__ import annotations

import asyncio
from collections import deque

from ..config import CONFIG, TraversalConfig
from ..exceptions import TraversalCancelled
from ..logging import get_logger
from ..models.individual import Individual
from ..models.pedigree import (
    AncestorEntry,
    DescendantEntry,
    PedigreeNode,
    PedigreePosition,
)
from .store import IndividualLookup

logger = get_logger(__name__)

# ancestor id -> nearest generation distance from the root
AncestorMap = dict[str, int]


class PedigreeTraversal:
    """Pedigree graph traversal engine.

    Every method accepts an optional ``cancel_event``; it is checked between
    recursion levels and raises ``TraversalCancelled`` once set.

    Example:
        >>> traversal = PedigreeTraversal(store)
        >>> tree = await traversal.build_tree("rooster-17", max_generations=3)
        >>> tree.sire.individual.id
        'rooster-4'
    """

    def __init__(self, lookup: IndividualLookup, config: TraversalConfig | None = None) -> None:
        """Initialize traversal engine.

        Args:
            lookup: Collaborator that resolves individuals and offspring
            config: Default generation limits
        """
        self.lookup = lookup
        self.config = config or CONFIG.traversal

    # -------------------------------------------------------------------------
    # Pedigree tree
    # -------------------------------------------------------------------------

    async def build_tree(
        self,
        individual_id: str,
        max_generations: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> PedigreeNode | None:
        """Build a pedigree tree rooted at ``individual_id``.

        Args:
            individual_id: Subject of the pedigree
            max_generations: Ancestor generations to include (1=parents)
            cancel_event: Optional cancellation signal

        Returns:
            Root PedigreeNode, or None if the subject is unknown
        """
        if max_generations is None:
            max_generations = self.config.tree_generations

        root = await self.lookup.get_individual(individual_id)
        if root is None:
            return None

        tree = await self._build_node(
            root,
            generation=0,
            max_generations=max_generations,
            position=PedigreePosition.SUBJECT,
            path=frozenset({root.id}),
            cancel_event=cancel_event,
            root_id=individual_id,
        )
        logger.info(
            "pedigree.tree_built",
            root_id=individual_id,
            max_generations=max_generations,
            depth=tree.depth,
            known=tree.known_count,
        )
        return tree

    async def _build_node(
        self,
        individual: Individual,
        generation: int,
        max_generations: int,
        position: PedigreePosition,
        path: frozenset[str],
        cancel_event: asyncio.Event | None,
        root_id: str,
    ) -> PedigreeNode:
        self._check_cancelled(cancel_event, root_id, "build_tree")

        if generation >= max_generations:
            return PedigreeNode(individual=individual, generation=generation, position=position)

        # Sire and dam lines are independent reads; build them concurrently
        results = await asyncio.gather(
            self._build_parent(
                individual, individual.sire_id, generation + 1, max_generations,
                position.sire_position(), path, cancel_event, root_id,
            ),
            self._build_parent(
                individual, individual.dam_id, generation + 1, max_generations,
                position.dam_position(), path, cancel_event, root_id,
            ),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        sire, dam = results

        return PedigreeNode(
            individual=individual,
            generation=generation,
            position=position,
            sire=sire,
            dam=dam,
        )

    async def _build_parent(
        self,
        child: Individual,
        parent_id: str | None,
        generation: int,
        max_generations: int,
        position: PedigreePosition,
        path: frozenset[str],
        cancel_event: asyncio.Event | None,
        root_id: str,
    ) -> PedigreeNode | None:
        if parent_id is None:
            return None
        if parent_id in path:
            self._log_cycle(root_id, child.id, parent_id, "build_tree")
            return None

        parent = await self.lookup.get_individual(parent_id)
        if parent is None:
            return None

        return await self._build_node(
            parent,
            generation=generation,
            max_generations=max_generations,
            position=position,
            path=path | {parent_id},
            cancel_event=cancel_event,
            root_id=root_id,
        )

    # -------------------------------------------------------------------------
    # Ancestors / descendants
    # -------------------------------------------------------------------------

    async def collect_ancestors(
        self,
        individual_id: str,
        max_generations: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> list[AncestorEntry]:
        """Get all known ancestors up to ``max_generations``.

        Depth-first, sire line before dam line. Each ancestor id appears once,
        at its nearest generation; an id reached again by a shorter route is
        moved up and its parents are walked from there.

        Returns:
            Ancestor entries with 1-based generation distance
        """
        if max_generations is None:
            max_generations = self.config.ancestor_generations

        ancestors: list[AncestorEntry] = []
        # ancestor id -> position in ``ancestors``
        index: dict[str, int] = {}

        root = await self.lookup.get_individual(individual_id)
        if root is None:
            return ancestors

        await self._collect_ancestors(
            root, 1, max_generations, ancestors, index, (individual_id,), cancel_event, individual_id,
        )
        return ancestors

    async def _collect_ancestors(
        self,
        individual: Individual,
        generation: int,
        max_generations: int,
        ancestors: list[AncestorEntry],
        index: dict[str, int],
        path: tuple[str, ...],
        cancel_event: asyncio.Event | None,
        root_id: str,
    ) -> None:
        if generation > max_generations:
            return
        self._check_cancelled(cancel_event, root_id, "collect_ancestors")

        for parent_id in individual.parent_ids:
            if parent_id in path:
                self._log_cycle(root_id, individual.id, parent_id, "collect_ancestors")
                continue

            position = index.get(parent_id)
            if position is not None:
                # Shared ancestor: only revisit when this route is shorter
                seen = ancestors[position]
                if seen.generation <= generation:
                    continue
                ancestors[position] = AncestorEntry(individual=seen.individual, generation=generation)
                parent = seen.individual
            else:
                parent = await self.lookup.get_individual(parent_id)
                if parent is None:
                    continue
                index[parent_id] = len(ancestors)
                ancestors.append(AncestorEntry(individual=parent, generation=generation))

            await self._collect_ancestors(
                parent, generation + 1, max_generations, ancestors, index,
                path + (parent_id,), cancel_event, root_id,
            )

    async def collect_descendants(
        self,
        individual_id: str,
        max_generations: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> list[DescendantEntry]:
        """Get all known descendants down to ``max_generations``.

        Uses the lookup's offspring index since parent links only point up.
        Like ``collect_ancestors``, each id is kept once at its nearest
        generation.

        Returns:
            Descendant entries with 1-based generation distance
        """
        if max_generations is None:
            max_generations = self.config.descendant_generations

        descendants: list[DescendantEntry] = []
        index: dict[str, int] = {}
        await self._collect_descendants(
            individual_id, 1, max_generations, descendants, index, (individual_id,), cancel_event, individual_id,
        )
        return descendants

    async def _collect_descendants(
        self,
        individual_id: str,
        generation: int,
        max_generations: int,
        descendants: list[DescendantEntry],
        index: dict[str, int],
        path: tuple[str, ...],
        cancel_event: asyncio.Event | None,
        root_id: str,
    ) -> None:
        if generation > max_generations:
            return
        self._check_cancelled(cancel_event, root_id, "collect_descendants")

        for child in await self.lookup.get_offspring_of(individual_id):
            if child.id in path:
                self._log_cycle(root_id, individual_id, child.id, "collect_descendants")
                continue

            position = index.get(child.id)
            if position is not None:
                if descendants[position].generation <= generation:
                    continue
                descendants[position] = DescendantEntry(individual=child, generation=generation)
            else:
                index[child.id] = len(descendants)
                descendants.append(DescendantEntry(individual=child, generation=generation))

            await self._collect_descendants(
                child.id, generation + 1, max_generations, descendants, index,
                path + (child.id,), cancel_event, root_id,
            )

    # -------------------------------------------------------------------------
    # Ancestor maps
    # -------------------------------------------------------------------------

    async def ancestor_map(
        self,
        individual_id: str,
        max_distance: int,
        cancel_event: asyncio.Event | None = None,
    ) -> AncestorMap:
        """Map every known ancestor id to its nearest distance.

        The root is recorded at distance 0 when it is known. Uses BFS, so the
        first time an id is reached is also its minimum distance.

        Returns:
            Dict mapping ancestor_id -> generation distance (<= max_distance)
        """
        distances: AncestorMap = {}
        if max_distance < 0:
            return distances

        root = await self.lookup.get_individual(individual_id)
        if root is None:
            return distances

        distances[individual_id] = 0
        # id -> the id it was first reached from, back to the root
        reached_from: dict[str, str | None] = {individual_id: None}
        queue: deque[tuple[Individual, int]] = deque([(root, 0)])
        level = -1

        while queue:
            current, distance = queue.popleft()
            if distance != level:
                level = distance
                self._check_cancelled(cancel_event, individual_id, "ancestor_map")
            if distance >= max_distance:
                continue

            for parent_id in current.parent_ids:
                if parent_id in distances:
                    # A repeat on the chain back to the root is a cycle; elsewhere
                    # it is a shared ancestor
                    if self._on_chain(reached_from, current.id, parent_id):
                        self._log_cycle(individual_id, current.id, parent_id, "ancestor_map")
                    continue

                parent = await self.lookup.get_individual(parent_id)
                if parent is None:
                    continue

                distances[parent_id] = distance + 1
                reached_from[parent_id] = current.id
                queue.append((parent, distance + 1))

        return distances

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_cancelled(
        self,
        cancel_event: asyncio.Event | None,
        root_id: str,
        operation: str,
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.info("traversal.cancelled", root_id=root_id, operation=operation)
            raise TraversalCancelled(root_id=root_id, operation=operation)

    @staticmethod
    def _on_chain(reached_from: dict[str, str | None], start: str, target: str) -> bool:
        node: str | None = start
        while node is not None:
            if node == target:
                return True
            node = reached_from.get(node)
        return False

    def _log_cycle(self, root_id: str, child_id: str, repeated_id: str, operation: str) -> None:
        logger.warning(
            "pedigree.cycle_detected",
            root_id=root_id,
            child_id=child_id,
            repeated_id=repeated_id,
            operation=operation,
        )

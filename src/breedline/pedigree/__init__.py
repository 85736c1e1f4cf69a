"""Pedigree graph services: traversal, inbreeding and lineage completeness."""
from .completeness import LineageScorer, max_possible_ancestors
from .inbreeding import InbreedingCalculator, pairing_message, shared_contribution
from .store import IndividualLookup, InMemoryIndividualStore
from .traversal import AncestorMap, PedigreeTraversal

__all__ = [
    "IndividualLookup",
    "InMemoryIndividualStore",
    "PedigreeTraversal",
    "AncestorMap",
    "InbreedingCalculator",
    "pairing_message",
    "shared_contribution",
    "LineageScorer",
    "max_possible_ancestors",
]

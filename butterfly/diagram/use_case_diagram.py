"""
USE-CASE DIAGRAM

Graph of actors, use cases and the associations between them. Portals are
built from it by butterfly.diagram.portal_builder.

Rules:
- Ids are unique per diagram, allocated sequentially from 0
- Associations must reference existing actors and use cases
- Iteration follows insertion order
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Set, Tuple

# Association failure reasons
NONEXISTENT_ACTOR = "NONEXISTENT_ACTOR"
NONEXISTENT_USE_CASE = "NONEXISTENT_USE_CASE"


@dataclass(frozen=True, order=True)
class ActorId:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class UseCaseId:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DiagramActor:
    """An actor of zero or more use cases."""
    name: str


@dataclass(frozen=True)
class UseCase:
    title: str


class AssociationError(Exception):
    """Raised when an association refers to a nonexistent actor or use case."""

    def __init__(self, reason: str, target):
        self.reason = reason
        self.target = target
        what = "actor" if reason == NONEXISTENT_ACTOR else "use case"
        super().__init__(f"invalid association: nonexistent {what} {target}")


class UseCaseDiagram:
    """
    A use-case diagram is a graph containing actors, use cases, and
    associations.
    """

    def __init__(self):
        self._next_actor_id = 0
        self._next_use_case_id = 0

        self._actors: Dict[ActorId, DiagramActor] = {}
        self._use_cases: Dict[UseCaseId, UseCase] = {}
        self._associations: Set[Tuple[ActorId, UseCaseId]] = set()

        self._assert_invariants()

    # --------------------------------------------------
    # Lookups
    # --------------------------------------------------

    def actor(self, actor_id: ActorId) -> Optional[DiagramActor]:
        return self._actors.get(actor_id)

    def use_case(self, use_case_id: UseCaseId) -> Optional[UseCase]:
        return self._use_cases.get(use_case_id)

    def actors(self) -> Iterator[Tuple[ActorId, DiagramActor]]:
        return iter(list(self._actors.items()))

    def use_cases(self) -> Iterator[Tuple[UseCaseId, UseCase]]:
        return iter(list(self._use_cases.items()))

    def associations(self) -> Iterator[Tuple[ActorId, UseCaseId]]:
        """All (actor, use case) pairs, ordered by actor then use case id."""
        return iter(sorted(self._associations))

    def actors_of(self, use_case_id: UseCaseId) -> Iterator[DiagramActor]:
        """Actors associated with a use case, in actor id order."""
        for actor_id, assoc_use_case_id in self.associations():
            if assoc_use_case_id == use_case_id:
                yield self._actors[actor_id]

    # --------------------------------------------------
    # Mutations
    # --------------------------------------------------

    def insert_actor(self, actor: DiagramActor) -> ActorId:
        """Insert a new actor, returning its identifier."""
        actor_id = ActorId(self._next_actor_id)
        self._next_actor_id += 1
        self._actors[actor_id] = actor
        self._assert_invariants()
        return actor_id

    def insert_use_case(self, use_case: UseCase) -> UseCaseId:
        """Insert a new use case, returning its identifier."""
        use_case_id = UseCaseId(self._next_use_case_id)
        self._next_use_case_id += 1
        self._use_cases[use_case_id] = use_case
        self._assert_invariants()
        return use_case_id

    def insert_association(self, actor_id: ActorId, use_case_id: UseCaseId) -> None:
        """
        Associate an actor with a use case.

        Inserting an existing association is a no-op.

        Raises:
            AssociationError: if either side does not exist
        """
        if actor_id not in self._actors:
            raise AssociationError(NONEXISTENT_ACTOR, actor_id)
        if use_case_id not in self._use_cases:
            raise AssociationError(NONEXISTENT_USE_CASE, use_case_id)

        self._associations.add((actor_id, use_case_id))
        self._assert_invariants()

    def _assert_invariants(self) -> None:
        assert all(a.value < self._next_actor_id for a in self._actors)
        assert all(u.value < self._next_use_case_id for u in self._use_cases)
        for actor_id, use_case_id in self._associations:
            assert actor_id in self._actors
            assert use_case_id in self._use_cases

"""
PORTAL MODEL

Declarative description of the actions a portal offers and who may see them.

Rules:
- Buttons are immutable values
- Only the visibility set can be replaced, and only as a whole
- Portal keeps construction order, no dedup, no merging
- No validation (duplicate labels, empty portals, empty visibility
  sets are all legal)
"""

from dataclasses import dataclass, replace
from typing import FrozenSet, Generic, Iterable, Iterator, Tuple, TypeVar

from butterfly.core.actor import Actor

Effect = TypeVar("Effect")


@dataclass(frozen=True)
class Button(Generic[Effect]):
    """
    One action entry of a portal.

    Attributes:
        label: Display text
        allowed_actors: Actors the button is shown to (empty = never shown)
        action: Effect executed when the button is activated
    """
    label: str
    allowed_actors: FrozenSet[Actor]
    action: Effect

    def __post_init__(self):
        # Accept any iterable of actors, store it frozen
        object.__setattr__(self, "allowed_actors", frozenset(self.allowed_actors))


@dataclass(frozen=True)
class Portal(Generic[Effect]):
    """Ordered, read-only sequence of buttons."""
    buttons: Tuple[Button[Effect], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "buttons", tuple(self.buttons))

    def __iter__(self) -> Iterator[Button[Effect]]:
        return iter(self.buttons)

    def __len__(self) -> int:
        return len(self.buttons)


# ==================================================
# VISIBILITY ACCESSOR
# ==================================================

def allowed_actors(button: Button[Effect]) -> FrozenSet[Actor]:
    """Actors the button is visible to."""
    return button.allowed_actors


def with_allowed_actors(
    button: Button[Effect],
    actors: Iterable[Actor],
) -> Button[Effect]:
    """
    Return a copy of the button with its visibility set replaced.

    Label and action are carried over unchanged. Intended for code that
    builds or edits portals; the engine only reads.
    """
    return replace(button, allowed_actors=frozenset(actors))

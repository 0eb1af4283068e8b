# butterfly/core/actor.py

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Actor:
    """
    Identity of a role in a use-case diagram (e.g. "Administrator").

    Equality and ordering are those of the wrapped name.
    """
    name: str

    def __str__(self) -> str:
        return self.name

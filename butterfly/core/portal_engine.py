"""
PORTAL ENGINE

Actor-scoped rendering and interaction for a single mounted portal.

State:
- current actor (the ONLY state, replaced wholesale)

Events:
- ActorChanged(actor)   → state := actor, no effect
- ButtonClicked(action) → state unchanged, action emitted once

Rules:
- Render is a pure function of (portal, actor), recomputed every call
- Hidden buttons are absent, never rendered disabled
- Effects are fire-and-forget, results are discarded
- No default actor is ever invented
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, Union

from butterfly.core.actor import Actor
from butterfly.core.portal import Effect, Portal

logger = logging.getLogger(__name__)


class PortalEventError(Exception):
    """Raised when something other than a portal event is dispatched."""
    pass


# ==================================================
# EVENTS
# ==================================================

@dataclass(frozen=True)
class ActorChanged:
    """The host reports a new viewing actor."""
    actor: Actor


@dataclass(frozen=True)
class ButtonClicked(Generic[Effect]):
    """A visible button was activated; carries its bound action."""
    action: Effect


PortalEvent = Union[ActorChanged, ButtonClicked]


# ==================================================
# RENDERING
# ==================================================

@dataclass(frozen=True)
class RenderedButton(Generic[Effect]):
    """
    One interactive element of the rendered portal.

    Attributes:
        label: Text to display
        event: Event to raise when the element is activated
    """
    label: str
    event: ButtonClicked[Effect]


def render_portal(
    portal: Portal[Effect],
    actor: Actor,
) -> Tuple[RenderedButton[Effect], ...]:
    """
    Render the buttons visible to `actor`, in portal order.

    An actor that appears in no visibility set gets an empty tree.
    """
    return tuple(
        RenderedButton(label=button.label, event=ButtonClicked(button.action))
        for button in portal.buttons
        if actor in button.allowed_actors
    )


# ==================================================
# REDUCER
# ==================================================

def reduce_portal(
    state: Actor,
    event: PortalEvent,
) -> Tuple[Actor, Tuple[Any, ...]]:
    """
    Apply one event to the engine state.

    Returns:
        (new_state, effects) where effects are the actions to hand to
        the effect runner, in order
    """
    if isinstance(event, ActorChanged):
        return event.actor, ()

    if isinstance(event, ButtonClicked):
        return state, (event.action,)

    raise PortalEventError(
        f"Unsupported portal event: {type(event).__name__}"
    )


# ==================================================
# ENGINE
# ==================================================

class PortalEngine(Generic[Effect]):
    """
    Stateful wrapper around the reducer for one mounted portal.

    Usage:
        engine = PortalEngine(portal, Actor("Subscriber"), run_callable)

        for element in engine.render():
            ...
        engine.click(element)
        engine.change_actor(Actor("Administrator"))

    The host is expected to deliver events one at a time.
    """

    def __init__(
        self,
        portal: Portal[Effect],
        initial_actor: Actor,
        run_effect: Callable[[Effect], Any],
    ):
        self._portal = portal
        self._actor = initial_actor
        self._run_effect = run_effect

    @property
    def portal(self) -> Portal[Effect]:
        return self._portal

    @property
    def current_actor(self) -> Actor:
        return self._actor

    def render(self) -> Tuple[RenderedButton[Effect], ...]:
        """Render the portal for the current actor."""
        rendered = render_portal(self._portal, self._actor)
        logger.debug(
            f"Rendered {len(rendered)}/{len(self._portal)} buttons for {self._actor}"
        )
        return rendered

    def dispatch(self, event: PortalEvent) -> None:
        """Apply an event and run the effects it produces."""
        new_actor, effects = reduce_portal(self._actor, event)

        if new_actor != self._actor:
            logger.info(f"Portal actor changed: {self._actor} → {new_actor}")
        self._actor = new_actor

        for effect in effects:
            logger.debug(f"Running portal effect for {self._actor}")
            self._run_effect(effect)

    def change_actor(self, actor: Actor) -> None:
        self.dispatch(ActorChanged(actor))

    def click(self, element: RenderedButton[Effect]) -> None:
        self.dispatch(element.event)

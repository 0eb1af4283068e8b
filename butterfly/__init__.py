# Butterfly: actor-scoped portals generated from use-case diagrams

from butterfly.core.actor import Actor
from butterfly.core.portal import Button, Portal, allowed_actors, with_allowed_actors
from butterfly.core.portal_engine import (
    ActorChanged,
    ButtonClicked,
    PortalEngine,
    PortalEventError,
    RenderedButton,
    reduce_portal,
    render_portal,
)

__all__ = [
    'Actor',
    'Button',
    'Portal',
    'allowed_actors',
    'with_allowed_actors',
    'ActorChanged',
    'ButtonClicked',
    'PortalEngine',
    'PortalEventError',
    'RenderedButton',
    'reduce_portal',
    'render_portal',
]

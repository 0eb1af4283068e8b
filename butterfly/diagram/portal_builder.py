"""
PORTAL BUILDER

Turns a use-case diagram into a Portal.

Rules:
- One button per use case, in diagram order
- Label = use case title
- Visible to every actor associated with the use case
- Action looked up by title in the supplied mapping
"""

import logging
from typing import Mapping

import pandas as pd

from butterfly.core.actor import Actor
from butterfly.core.portal import Button, Effect, Portal
from butterfly.diagram.use_case_diagram import UseCaseDiagram

logger = logging.getLogger(__name__)


class MissingActionError(Exception):
    """Raised when a use case has no action bound to its title."""
    pass


def build_portal(
    diagram: UseCaseDiagram,
    actions: Mapping[str, Effect],
) -> Portal[Effect]:
    """
    Build a portal from a diagram.

    Args:
        diagram: Source use-case diagram
        actions: Effect to bind per use case title

    Returns:
        Portal with one button per use case

    Raises:
        MissingActionError: if a use case title has no entry in `actions`
    """
    buttons = []

    for use_case_id, use_case in diagram.use_cases():
        if use_case.title not in actions:
            raise MissingActionError(
                f"No action bound for use case '{use_case.title}'"
            )

        buttons.append(Button(
            label=use_case.title,
            allowed_actors={Actor(a.name) for a in diagram.actors_of(use_case_id)},
            action=actions[use_case.title],
        ))

    logger.info(f"Built portal with {len(buttons)} buttons")
    return Portal(tuple(buttons))


def visibility_matrix(portal: Portal) -> pd.DataFrame:
    """
    Who sees what: one row per button (portal order), one boolean column
    per actor (sorted by name).
    """
    actors = sorted({actor for button in portal for actor in button.allowed_actors})

    return pd.DataFrame(
        [[actor in button.allowed_actors for actor in actors] for button in portal],
        index=pd.Index([button.label for button in portal], name="button"),
        columns=[actor.name for actor in actors],
        dtype=bool,
    )

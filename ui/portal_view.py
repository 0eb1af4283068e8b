"""
Portal View - Streamlit adapter for the portal engine
Engine lives in session state, widgets map straight onto engine events
"""
from typing import Any, Callable

import streamlit as st

from butterfly.core.actor import Actor
from butterfly.core.portal import Portal
from butterfly.core.portal_engine import PortalEngine


def sync_actor(
    engine_key: str,
    portal: Portal,
    actor: Actor,
    run_effect: Callable[[Any], Any],
) -> PortalEngine:
    """
    Get the session's engine for `engine_key`, seeding it on first use.

    The portal and effect runner are fixed by the first call; later calls
    only report the (possibly unchanged) actor.
    """
    engine = st.session_state.get(engine_key)

    if engine is None:
        engine = PortalEngine(portal, actor, run_effect)
        st.session_state[engine_key] = engine
    else:
        engine.change_actor(actor)

    return engine


def render_portal_view(engine: PortalEngine, key_prefix: str = "portal") -> None:
    """Render one button per action visible to the engine's current actor"""
    elements = engine.render()

    if not elements:
        st.info(f"No actions available for {engine.current_actor}")
        return

    for i, element in enumerate(elements):
        st.button(
            element.label,
            key=f"{key_prefix}_{i}_{element.label}",
            on_click=engine.click,
            args=(element,),
        )

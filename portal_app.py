"""
Butterfly Portal - Streamlit entry point
Run with: streamlit run portal_app.py
"""
import streamlit as st
from datetime import datetime

from butterfly.config import DEFAULT_ACTOR, PAGE_TITLE, configure_logging
from butterfly.core.actor import Actor
from butterfly.core.effect_runners import run_callable
from butterfly.diagram import (
    DiagramActor,
    UseCase,
    UseCaseDiagram,
    build_portal,
    visibility_matrix,
)
from ui.portal_view import render_portal_view, sync_actor

# ═══════════════════════════════════════════════════════════════
# PAGE CONFIG (MUST BE FIRST)
# ═══════════════════════════════════════════════════════════════
st.set_page_config(page_title=PAGE_TITLE, layout="centered")
configure_logging()

# ═══════════════════════════════════════════════════════════════
# SESSION STATE (MINIMAL)
# ═══════════════════════════════════════════════════════════════
if "activity_log" not in st.session_state:
    st.session_state.activity_log = []


# ═══════════════════════════════════════════════════════════════
# EXAMPLE DIAGRAM
# ═══════════════════════════════════════════════════════════════
def blog_diagram():
    """Administrators moderate, subscribers post"""
    diagram = UseCaseDiagram()
    admin = diagram.insert_actor(DiagramActor("Administrator"))
    subscriber = diagram.insert_actor(DiagramActor("Subscriber"))

    ban = diagram.insert_use_case(UseCase("Ban subscriber"))
    create = diagram.insert_use_case(UseCase("Create subscriber"))
    post = diagram.insert_use_case(UseCase("Post comment"))

    diagram.insert_association(admin, ban)
    diagram.insert_association(admin, create)
    diagram.insert_association(admin, post)
    diagram.insert_association(subscriber, create)
    diagram.insert_association(subscriber, post)
    return diagram


def record(title):
    def effect():
        st.session_state.activity_log.append(
            f"{datetime.now().strftime('%H:%M:%S')} • {title}"
        )
    return effect


diagram = blog_diagram()
portal = build_portal(
    diagram,
    {use_case.title: record(use_case.title) for _, use_case in diagram.use_cases()},
)

# ═══════════════════════════════════════════════════════════════
# HEADER
# ═══════════════════════════════════════════════════════════════
st.title(f"🦋 {PAGE_TITLE}")
st.caption("Actions scoped to the current actor")

actor_names = sorted(actor.name for _, actor in diagram.actors())
default_index = actor_names.index(DEFAULT_ACTOR) if DEFAULT_ACTOR in actor_names else 0
actor_name = st.selectbox("Acting as", actor_names, index=default_index)

# ═══════════════════════════════════════════════════════════════
# PORTAL
# ═══════════════════════════════════════════════════════════════
engine = sync_actor("blog_portal", portal, Actor(actor_name), run_callable)

st.markdown("## Actions")
render_portal_view(engine, key_prefix="blog")

# ═══════════════════════════════════════════════════════════════
# ACTIVITY
# ═══════════════════════════════════════════════════════════════
st.divider()
st.markdown("### 📜 Activity")
if st.session_state.activity_log:
    for line in reversed(st.session_state.activity_log[-10:]):
        st.write(line)
else:
    st.info("No actions run yet")

with st.expander("Visibility matrix"):
    st.dataframe(visibility_matrix(portal))

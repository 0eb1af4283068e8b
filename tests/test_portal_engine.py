"""
Portal engine: filtering, reducer transitions, engine dispatch
"""
import pytest

from butterfly.core.actor import Actor
from butterfly.core.portal import Button, Portal
from butterfly.core.portal_engine import (
    ActorChanged,
    ButtonClicked,
    PortalEngine,
    PortalEventError,
    reduce_portal,
    render_portal,
)

ADMIN = Actor("Administrator")
SUBSCRIBER = Actor("Subscriber")
GUEST = Actor("Guest")


class Recorder:
    """Collects effects handed to the runner"""

    def __init__(self):
        self.calls = []

    def __call__(self, effect):
        self.calls.append(effect)
        effect()


def make_blog_portal(calls):
    ban = lambda: calls.append("ban")
    post = lambda: calls.append("post")
    portal = Portal([
        Button("Ban subscriber", {ADMIN}, ban),
        Button("Post comment", {ADMIN, SUBSCRIBER}, post),
    ])
    return portal, ban, post


def labels(rendered):
    return [element.label for element in rendered]


# ==================================================
# RENDER
# ==================================================

def test_render_filters_by_actor_in_portal_order():
    portal = Portal([
        Button("A", {ADMIN}, "a"),
        Button("B", {SUBSCRIBER}, "b"),
        Button("C", {ADMIN, SUBSCRIBER}, "c"),
        Button("D", set(), "d"),
        Button("E", {ADMIN}, "e"),
    ])

    for actor in [ADMIN, SUBSCRIBER, GUEST]:
        expected = [b.label for b in portal.buttons if actor in b.allowed_actors]
        assert labels(render_portal(portal, actor)) == expected


def test_rendered_element_raises_its_buttons_action():
    portal = Portal([Button("Post comment", {SUBSCRIBER}, "post-fx")])
    (element,) = render_portal(portal, SUBSCRIBER)
    assert element.event == ButtonClicked("post-fx")


def test_empty_portal_renders_nothing():
    assert render_portal(Portal([]), ADMIN) == ()


def test_unknown_actor_renders_nothing():
    """An actor in no visibility set is not an error"""
    portal, _, _ = make_blog_portal([])
    assert render_portal(portal, GUEST) == ()


# ==================================================
# REDUCER
# ==================================================

def test_actor_changed_replaces_state_without_effects():
    assert reduce_portal(SUBSCRIBER, ActorChanged(ADMIN)) == (ADMIN, ())


def test_actor_changed_is_idempotent():
    once, _ = reduce_portal(SUBSCRIBER, ActorChanged(ADMIN))
    twice, effects = reduce_portal(once, ActorChanged(ADMIN))
    assert once == twice == ADMIN
    assert effects == ()


def test_button_clicked_keeps_state_and_emits_action_once():
    state, effects = reduce_portal(SUBSCRIBER, ButtonClicked("post-fx"))
    assert state == SUBSCRIBER
    assert effects == ("post-fx",)


def test_unknown_event_is_rejected():
    with pytest.raises(PortalEventError):
        reduce_portal(SUBSCRIBER, "not-an-event")


# ==================================================
# ENGINE
# ==================================================

def test_blog_scenario():
    calls = []
    portal, _, post = make_blog_portal(calls)
    runner = Recorder()
    engine = PortalEngine(portal, SUBSCRIBER, runner)

    rendered = engine.render()
    assert labels(rendered) == ["Post comment"]

    engine.click(rendered[0])
    assert calls == ["post"]
    assert runner.calls == [post]
    assert engine.current_actor == SUBSCRIBER

    engine.change_actor(ADMIN)
    assert labels(engine.render()) == ["Ban subscriber", "Post comment"]
    assert calls == ["post"]


def test_actor_switch_leaves_no_stale_buttons():
    portal = Portal([
        Button("Ban subscriber", {ADMIN}, "ban"),
        Button("Post comment", {SUBSCRIBER}, "post"),
    ])
    engine = PortalEngine(portal, ADMIN, Recorder())
    assert labels(engine.render()) == ["Ban subscriber"]

    engine.change_actor(SUBSCRIBER)
    assert labels(engine.render()) == ["Post comment"]


def test_repeated_actor_change_runs_no_effects():
    calls = []
    portal, _, _ = make_blog_portal(calls)
    runner = Recorder()
    engine = PortalEngine(portal, SUBSCRIBER, runner)

    engine.change_actor(ADMIN)
    first = engine.render()
    engine.change_actor(ADMIN)

    assert engine.current_actor == ADMIN
    assert engine.render() == first
    assert runner.calls == []


def test_engine_discards_effect_results():
    portal = Portal([Button("Post comment", {SUBSCRIBER}, lambda: "ignored")])
    engine = PortalEngine(portal, SUBSCRIBER, lambda effect: effect())
    assert engine.dispatch(engine.render()[0].event) is None


if __name__ == "__main__":
    test_blog_scenario()
    print("✅ Blog scenario passed")

"""Tests for the hover state machine, tooltip formatting and hit-testing."""

from chordview.engine.context import Relationship
from chordview.models.interaction import HoverPhase, InteractionState, PointerEvent, RibbonRef
from chordview.pipeline import build_diagram
from chordview.render.hit_test import RibbonHitIndex, ribbon_polygon
from chordview.render.interaction import (
    IDLE,
    format_tooltip,
    pointer_events,
    ribbon_ref,
    tooltip_for,
    track_pointer,
    transition,
)

AB = RibbonRef(source="A", target="B", value=3)
BA = RibbonRef(source="B", target="A", value=1.5)


def _enter(ref: RibbonRef, x: float = 100, y: float = 200) -> PointerEvent:
    return PointerEvent(kind="enter", x=x, y=y, ribbon=ref)


def test_idle_by_default():
    assert IDLE.phase is HoverPhase.IDLE
    assert tooltip_for(IDLE).visible is False


def test_enter_shows_tooltip_near_pointer():
    state = transition(IDLE, _enter(AB))
    assert state.phase is HoverPhase.HOVER
    tip = tooltip_for(state)
    assert tip.visible
    assert (tip.x, tip.y) == (90, 150)
    assert tip.lines == ["A → B", "Value: 3"]


def test_move_updates_position_only_while_hovering():
    state = transition(IDLE, _enter(AB))
    moved = transition(state, PointerEvent(kind="move", x=300, y=400))
    assert moved.ribbon == AB
    assert (moved.pointer_x, moved.pointer_y) == (300, 400)
    assert transition(IDLE, PointerEvent(kind="move", x=1, y=1)) == IDLE


def test_leave_returns_to_idle():
    state = transition(IDLE, _enter(AB))
    state = transition(state, PointerEvent(kind="leave", ribbon=AB))
    assert state == IDLE
    assert tooltip_for(state).visible is False


def test_only_one_ribbon_hovered():
    state = transition(IDLE, _enter(AB))
    state = transition(state, _enter(BA))
    assert state.ribbon == BA
    # A late leave for the previous ribbon must not hide the new tooltip
    state = transition(state, PointerEvent(kind="leave", ribbon=AB))
    assert state.phase is HoverPhase.HOVER
    assert state.ribbon == BA


def test_transitions_do_not_mutate():
    state = InteractionState()
    transition(state, _enter(AB))
    assert state == IDLE


def test_format_tooltip_is_directional():
    assert format_tooltip(BA) == ["B → A", "Value: 1.5"]


def test_ribbon_polygon_for_self_loop():
    diagram = build_diagram([Relationship("A", "A", 3)])
    poly = ribbon_polygon(diagram.scene.ribbons[0])
    assert poly is not None
    assert poly.area > 0


def test_hit_test_and_pointer_tracking():
    diagram = build_diagram([Relationship("A", "B", 1)])
    scene = diagram.scene
    index = RibbonHitIndex(scene)
    assert len(index) == 1

    inside = (scene.center_x + scene.inner_radius / 2, scene.center_y)
    hit = index.ribbon_at(*inside)
    assert hit is not None
    assert ribbon_ref(hit) == RibbonRef(source="A", target="B", value=1)
    assert index.ribbon_at(1, 1) is None

    state = track_pointer(IDLE, index, *inside)
    assert state.phase is HoverPhase.HOVER
    assert [e.kind for e in pointer_events(state, index, inside[0] + 1, inside[1])] == ["move"]

    state = track_pointer(state, index, 1, 1)
    assert state == IDLE
    assert pointer_events(state, index, 1, 1) == []

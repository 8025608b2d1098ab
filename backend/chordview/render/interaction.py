"""Hover state machine for ribbons.

    Idle --enter(r)--> Hover(r)
    Hover(r) --move--> Hover(r)       pointer position updated
    Hover(r) --enter(r2)--> Hover(r2) only one ribbon hovered at a time
    Hover(r) --leave(r)--> Idle
    Idle --move/leave--> Idle

Transitions are pure: each returns a new InteractionState. Tooltip text is
built by ``format_tooltip`` from the ribbon reference alone; geometry never
sees it.
"""

from __future__ import annotations

import logging

from chordview.models.interaction import (
    HoverPhase,
    InteractionState,
    PointerEvent,
    RibbonRef,
    Tooltip,
)
from chordview.render.hit_test import RibbonHitIndex
from chordview.render.scene import RibbonShape

logger = logging.getLogger(__name__)

# Tooltip sits up and to the left of the pointer
TOOLTIP_OFFSET_X = -10.0
TOOLTIP_OFFSET_Y = -50.0

IDLE = InteractionState()


def ribbon_ref(ribbon: RibbonShape) -> RibbonRef:
    return RibbonRef(source=ribbon.source_label, target=ribbon.target_label, value=ribbon.value)


def transition(state: InteractionState, event: PointerEvent) -> InteractionState:
    if event.kind == "enter":
        if event.ribbon is None:
            return state
        return InteractionState(
            phase=HoverPhase.HOVER,
            ribbon=event.ribbon,
            pointer_x=event.x,
            pointer_y=event.y,
        )

    if event.kind == "move":
        if state.phase is HoverPhase.IDLE:
            return state
        return state.model_copy(update={"pointer_x": event.x, "pointer_y": event.y})

    # leave
    if state.phase is HoverPhase.IDLE:
        return state
    if event.ribbon is not None and event.ribbon != state.ribbon:
        logger.debug("Ignoring leave for %s → %s: not hovered", event.ribbon.source, event.ribbon.target)
        return state
    return IDLE


def format_tooltip(ribbon: RibbonRef) -> list[str]:
    return [
        f"{ribbon.source} → {ribbon.target}",
        f"Value: {ribbon.value:.12g}",
    ]


def tooltip_for(state: InteractionState) -> Tooltip:
    if state.phase is HoverPhase.IDLE or state.ribbon is None:
        return Tooltip()
    return Tooltip(
        visible=True,
        x=state.pointer_x + TOOLTIP_OFFSET_X,
        y=state.pointer_y + TOOLTIP_OFFSET_Y,
        lines=format_tooltip(state.ribbon),
    )


def pointer_events(
    state: InteractionState,
    index: RibbonHitIndex,
    x: float,
    y: float,
) -> list[PointerEvent]:
    """Events a pointer at (x, y) produces given what is currently hovered."""
    hit = index.ribbon_at(x, y)
    current = state.ribbon if state.phase is HoverPhase.HOVER else None

    if hit is None:
        if current is None:
            return []
        return [PointerEvent(kind="leave", x=x, y=y, ribbon=current)]

    ref = ribbon_ref(hit)
    if current == ref:
        return [PointerEvent(kind="move", x=x, y=y, ribbon=ref)]

    events: list[PointerEvent] = []
    if current is not None:
        events.append(PointerEvent(kind="leave", x=x, y=y, ribbon=current))
    events.append(PointerEvent(kind="enter", x=x, y=y, ribbon=ref))
    return events


def track_pointer(
    state: InteractionState,
    index: RibbonHitIndex,
    x: float,
    y: float,
) -> InteractionState:
    for event in pointer_events(state, index, x, y):
        state = transition(state, event)
    return state

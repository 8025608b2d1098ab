"""POST /api/interaction — apply one pointer event to a hover state."""

from __future__ import annotations

from fastapi import APIRouter

from chordview.models.requests import InteractionRequest
from chordview.models.responses import InteractionResponse
from chordview.render.interaction import tooltip_for, transition

router = APIRouter()


@router.post("/interaction", response_model=InteractionResponse)
async def interaction(req: InteractionRequest) -> InteractionResponse:
    state = transition(req.state, req.event)
    return InteractionResponse(state=state, tooltip=tooltip_for(state))

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError

from rankly.api.dispatch import dispatch_or_raise
from rankly.models.actions import parse_action
from rankly.services.state_holder import state_holder

router = APIRouter(tags=["state"])


@router.get("/state")
async def get_state() -> dict:
    """Return the whole state tree."""
    return state_holder.state.model_dump(mode="json")


@router.post("/actions")
async def post_action(payload: dict[str, Any] = Body(...)) -> dict:
    """
    Apply one action and return the new state.

    The payload's `type` selects the action; unknown types are rejected
    before anything is dispatched.
    """
    try:
        action = parse_action(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False))

    new_state = dispatch_or_raise(action)
    return new_state.model_dump(mode="json")

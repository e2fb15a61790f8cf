from fastapi import HTTPException
from loguru import logger

from rankly.core.exceptions import (
    IndexOutOfRangeError,
    InvalidProfileError,
    NoCurrentProfileError,
    RanklyError,
    UnknownCandidateError,
)
from rankly.models.actions import Action
from rankly.models.profile import ProfileState
from rankly.services.state_holder import state_holder

STATUS_CODES: dict[type[RanklyError], int] = {
    InvalidProfileError: 404,
    IndexOutOfRangeError: 404,
    NoCurrentProfileError: 409,
    UnknownCandidateError: 422,
}


def dispatch_or_raise(action: Action) -> ProfileState:
    """Dispatch to the shared state holder, turning domain errors into HTTP errors."""
    try:
        return state_holder.dispatch(action)
    except RanklyError as exc:
        status_code = next((code for kind, code in STATUS_CODES.items() if isinstance(exc, kind)), 400)
        logger.warning(f"Rejected {action.type}: {exc}")
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc

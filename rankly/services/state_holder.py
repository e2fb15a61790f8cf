import threading

from loguru import logger

from rankly.models.actions import Action
from rankly.models.profile import ProfileState
from rankly.services.reducer import ProfileReducer


class StateHolder:
    """
    In-process host for a single ProfileState.

    Transitions are serialized with a lock so at most one is in flight.
    Readers get whole snapshots and never see a half-applied action.
    """

    def __init__(self, reducer: ProfileReducer | None = None, state: ProfileState | None = None) -> None:
        self._reducer = reducer or ProfileReducer()
        self._state = state or ProfileState()
        self._lock = threading.Lock()

    @property
    def state(self) -> ProfileState:
        return self._state

    def dispatch(self, action: Action) -> ProfileState:
        """Apply `action` to the held snapshot and keep the result.

        On error the held snapshot is left as it was and the error propagates.
        """
        with self._lock:
            new_state = self._reducer.apply(self._state, action)
            self._state = new_state
        return new_state

    def reset(self, state: ProfileState | None = None, reducer: ProfileReducer | None = None) -> None:
        with self._lock:
            if reducer is not None:
                self._reducer = reducer
            self._state = state or ProfileState()
        logger.info("Profile state reset")


state_holder = StateHolder()

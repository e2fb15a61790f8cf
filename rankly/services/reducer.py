from collections.abc import Callable

from loguru import logger

from rankly.core.exceptions import UnknownActionError
from rankly.models.actions import Action, AddProfile, MergeCandidates, SetCurrentProfile, Skip, Vote
from rankly.models.profile import ProfileState
from rankly.services.profile import ProfileStore, VotingEngine


class ProfileReducer:
    """
    Dispatches actions to the profile store and voting engine.

    `apply` is a pure transition: (snapshot, action) -> new snapshot. Errors
    propagate to the caller and the input snapshot stays valid.
    """

    def __init__(self, store: ProfileStore | None = None, voting: VotingEngine | None = None):
        self.store = store or ProfileStore()
        self.voting = voting or VotingEngine()
        self._handlers: dict[type, Callable[[ProfileState, Action], ProfileState]] = {
            AddProfile: lambda state, action: self.store.create_profile(state, action.name, action.raw_items),
            SetCurrentProfile: lambda state, action: self.store.set_current_profile(state, action.id),
            MergeCandidates: lambda state, action: self.store.merge_candidates(state, action.raw_items),
            Vote: lambda state, action: self.voting.vote(state, action.pair_index, action.winner_candidate_id),
            Skip: lambda state, action: self.voting.skip(state, action.pair_index),
        }

    def apply(self, state: ProfileState, action: Action) -> ProfileState:
        handler = self._handlers.get(type(action))
        if handler is None:
            raise UnknownActionError(action)
        logger.debug(f"Applying {action.type}")
        return handler(state, action)


_default_reducer: ProfileReducer | None = None


def get_reducer() -> ProfileReducer:
    """Get or create the reducer configured from settings."""
    global _default_reducer
    if _default_reducer is None:
        _default_reducer = ProfileReducer()
    return _default_reducer


def apply(state: ProfileState, action: Action) -> ProfileState:
    """Apply one action with the default reducer."""
    return get_reducer().apply(state, action)

"""
Domain errors raised by profile transitions.

Every error is raised before a new snapshot is built, so the caller's state
is always left exactly as it was.
"""


class RanklyError(Exception):
    """Base class for rejected transitions."""


class InvalidProfileError(RanklyError):
    """The referenced profile id is not a key of the profile map."""

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(f"Invalid profile supplied: '{profile_id}'")


class NoCurrentProfileError(RanklyError):
    """A profile-scoped action was issued while no profile is selected."""

    def __init__(self):
        super().__init__("No profile selected!")


class IndexOutOfRangeError(RanklyError, IndexError):
    """Vote or skip targeted a pending pair that does not exist."""

    def __init__(self, pair_index: int, pending: int):
        self.pair_index = pair_index
        self.pending = pending
        super().__init__(f"Pair index {pair_index} is out of range for {pending} pending pairs")


class UnknownCandidateError(RanklyError):
    """The vote winner is not part of the pair or not a known candidate."""

    def __init__(self, candidate_id: str, reason: str):
        self.candidate_id = candidate_id
        super().__init__(f"Unknown candidate '{candidate_id}': {reason}")


class UnknownActionError(RanklyError, TypeError):
    """An object that is not one of the known actions reached the reducer."""

    def __init__(self, action: object):
        self.action = action
        super().__init__(f"Unknown action: {type(action).__name__}")

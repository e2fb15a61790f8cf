from loguru import logger

from rankly.core.config import settings
from rankly.core.exceptions import IndexOutOfRangeError, UnknownCandidateError
from rankly.models.profile import Profile, ProfileState, VotedPair, VotingPair
from rankly.services.profile.constants import SKIP_POLICY_REQUEUE, VOTE_POINTS, SkipPolicy
from rankly.services.profile.store import Clock, replace_profile, require_current_profile
from rankly.utils import utc_now


class VotingEngine:
    """
    Applies votes and skips to the current profile's pending queue.

    A vote is the only way a pair leaves the queue. A skip bumps the pair's
    counter and, under the requeue policy, moves it to the back.
    """

    def __init__(self, skip_policy: SkipPolicy | None = None, clock: Clock | None = None):
        self.skip_policy = skip_policy or settings.SKIP_POLICY
        self.clock = clock or utc_now

    @staticmethod
    def _pair_at(profile: Profile, pair_index: int) -> VotingPair:
        if not 0 <= pair_index < len(profile.pairs):
            raise IndexOutOfRangeError(pair_index, len(profile.pairs))
        return profile.pairs[pair_index]

    def vote(self, state: ProfileState, pair_index: int, winner_id: str) -> ProfileState:
        """
        Resolve the pending pair at `pair_index` in favour of `winner_id`.

        Args:
            state: Current snapshot
            pair_index: Position of the pair in the pending queue
            winner_id: Candidate id of the winner, must belong to the pair

        Returns:
            New snapshot with the pair moved to history and the winner's score raised

        Raises:
            NoCurrentProfileError: No profile is selected
            IndexOutOfRangeError: No pending pair at `pair_index`
            UnknownCandidateError: Winner is not in the pair or not a candidate
        """
        profile = require_current_profile(state)
        pair = self._pair_at(profile, pair_index)
        if not pair.has_member(winner_id):
            raise UnknownCandidateError(winner_id, f"not part of pair {pair.left_id!r} vs {pair.right_id!r}")
        winner = profile.candidates.get(winner_id)
        if winner is None:
            raise UnknownCandidateError(winner_id, f"not a candidate of profile '{profile.id}'")

        pairs = [*profile.pairs[:pair_index], *profile.pairs[pair_index + 1 :]]
        updated = profile.model_copy(
            update={
                "candidates": {
                    **profile.candidates,
                    winner_id: winner.model_copy(update={"score": winner.score + VOTE_POINTS}),
                },
                "pairs": pairs,
                "voted": [*profile.voted, VotedPair(**pair.model_dump(), winner_id=winner_id)],
                "date_time": self.clock(),
            }
        )
        logger.debug(f"[{profile.id}] '{winner_id}' won {pair.left_id!r} vs {pair.right_id!r}, {len(pairs)} left")
        return replace_profile(state, updated)

    def skip(self, state: ProfileState, pair_index: int) -> ProfileState:
        """
        Postpone the pending pair at `pair_index`.

        The pair stays pending with its `skipped` counter raised by one. No
        score and no queue length changes.

        Raises:
            NoCurrentProfileError: No profile is selected
            IndexOutOfRangeError: No pending pair at `pair_index`
        """
        profile = require_current_profile(state)
        pair = self._pair_at(profile, pair_index)
        skipped = pair.model_copy(update={"skipped": pair.skipped + 1})

        if self.skip_policy == SKIP_POLICY_REQUEUE:
            pairs = [*profile.pairs[:pair_index], *profile.pairs[pair_index + 1 :], skipped]
        else:
            pairs = [*profile.pairs[:pair_index], skipped, *profile.pairs[pair_index + 1 :]]

        updated = profile.model_copy(update={"pairs": pairs, "date_time": self.clock()})
        logger.debug(f"[{profile.id}] Skipped {pair.left_id!r} vs {pair.right_id!r} ({skipped.skipped}x)")
        return replace_profile(state, updated)

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from loguru import logger

from rankly.core.config import settings
from rankly.core.exceptions import InvalidProfileError, NoCurrentProfileError
from rankly.models.profile import Profile, ProfileState
from rankly.services.profile.normalizer import CandidateNormalizer
from rankly.services.profile.pairs import PairGenerator
from rankly.shared.ids import ProfileIdGenerator, make_timestamp_id_generator
from rankly.utils import utc_now

Clock = Callable[[], datetime]


def require_current_profile(state: ProfileState) -> Profile:
    """Return the selected profile or raise NoCurrentProfileError."""
    if state.current_profile is None or state.current_profile not in state.profiles:
        raise NoCurrentProfileError()
    return state.profiles[state.current_profile]


def replace_profile(state: ProfileState, profile: Profile) -> ProfileState:
    """New snapshot with `profile` stored under its id; other profiles are shared, not copied."""
    return state.model_copy(update={"profiles": {**state.profiles, profile.id: profile}})


class ProfileStore:
    """
    Creates profiles, switches the current one and merges new candidates in.

    Every method takes a snapshot and returns a new one; the input is never
    modified, so a rejected call leaves the caller's state untouched.
    """

    def __init__(
        self,
        id_generator: ProfileIdGenerator | None = None,
        max_id_attempts: int | None = None,
        clock: Clock | None = None,
    ):
        """
        Initialize profile store.

        Args:
            id_generator: Strategy producing a fresh profile id from a name
            max_id_attempts: How many ids to try before accepting a collision
            clock: Source of profile timestamps
        """
        self.id_generator = id_generator or make_timestamp_id_generator(
            prefix_length=settings.PROFILE_ID_NAME_PREFIX,
            suffix_length=settings.PROFILE_ID_RANDOM_SUFFIX,
        )
        self.max_id_attempts = settings.PROFILE_ID_MAX_ATTEMPTS if max_id_attempts is None else max_id_attempts
        self.clock = clock or utc_now

    def allocate_profile_id(self, name: str, existing: Mapping[str, Any]) -> str:
        """
        Generate an id not present in `existing`.

        Gives up after `max_id_attempts` tries and returns the last generated
        id even though it collides; this is logged, not raised.
        """
        profile_id = self.id_generator(name)
        attempts = 1
        while profile_id in existing:
            if attempts >= self.max_id_attempts:
                logger.warning(
                    f"Failed to generate a unique profile id after {attempts} attempts, "
                    f"reusing '{profile_id}'"
                )
                break
            profile_id = self.id_generator(name)
            attempts += 1
        return profile_id

    def create_profile(self, state: ProfileState, name: str, raw_items: Iterable[Any]) -> ProfileState:
        """
        Add a new profile built from `raw_items` and make it the current one.

        Args:
            state: Current snapshot
            name: Display name of the profile
            raw_items: Items to rank

        Returns:
            New snapshot with the profile selected
        """
        candidates = CandidateNormalizer.normalize(raw_items)
        pairs = PairGenerator.generate_pairs(candidates)
        profile_id = self.allocate_profile_id(name, state.profiles)

        profile = Profile(
            id=profile_id,
            name=name,
            candidates=candidates,
            pairs=pairs,
            date_time=self.clock(),
            total_comparisons=len(pairs),
        )
        logger.info(f"Created profile '{profile_id}' with {len(candidates)} candidates and {len(pairs)} pairs")

        return state.model_copy(
            update={
                "current_profile": profile_id,
                "profiles": {**state.profiles, profile_id: profile},
            }
        )

    def set_current_profile(self, state: ProfileState, profile_id: str) -> ProfileState:
        if profile_id not in state.profiles:
            raise InvalidProfileError(profile_id)
        return state.model_copy(update={"current_profile": profile_id})

    def merge_candidates(self, state: ProfileState, raw_items: Iterable[Any]) -> ProfileState:
        """
        Add new candidates to the current profile without losing any votes.

        Existing candidates keep their record and score. Pairs are generated
        against the full candidate set and skipped when the profile has already
        seen them, pending or voted, so merging the same items twice is a no-op.

        Args:
            state: Current snapshot
            raw_items: Items to add

        Returns:
            New snapshot, or `state` itself when nothing was added

        Raises:
            NoCurrentProfileError: No profile is selected
        """
        profile = require_current_profile(state)
        incoming = CandidateNormalizer.normalize(raw_items)
        added = {cid: candidate for cid, candidate in incoming.items() if cid not in profile.candidates}

        candidates = {**profile.candidates, **added}
        new_pairs = PairGenerator.generate_pairs(candidates, profile.pair_history_ids)
        if not added and not new_pairs:
            logger.debug(f"Merge into '{profile.id}' added nothing")
            return state

        updated = profile.model_copy(
            update={
                "candidates": candidates,
                "pairs": [*profile.pairs, *new_pairs],
                "total_comparisons": profile.total_comparisons + len(new_pairs),
                "date_time": self.clock(),
            }
        )
        logger.info(f"Merged {len(added)} candidates into '{profile.id}', {len(new_pairs)} new pairs")
        return replace_profile(state, updated)

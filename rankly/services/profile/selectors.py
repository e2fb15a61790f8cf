"""
Read-side helpers over a ProfileState snapshot.

Nothing here is stored: progress, completion and ranking are derived from
the pending queue and candidate scores on every call.
"""

from rankly.models.profile import Candidate, Profile, ProfileState, VotingPair


def get_profiles(state: ProfileState) -> list[Profile]:
    """All profiles in creation order."""
    return list(state.profiles.values())


def get_current_profile(state: ProfileState) -> Profile | None:
    if state.current_profile is None:
        return None
    return state.profiles.get(state.current_profile)


def get_total_comparisons(profile: Profile) -> int:
    return profile.total_comparisons


def get_progress(profile: Profile) -> int:
    """Number of pairs resolved so far. Skips never change it."""
    return profile.progress


def get_completion_ratio(profile: Profile) -> float:
    """Progress as a 0-1 ratio. The denominator is floored at 1 so an empty profile reads 0.0."""
    return profile.progress / max(profile.total_comparisons, 1)


def is_complete(profile: Profile) -> bool:
    return profile.is_complete


def get_ranking(profile: Profile) -> list[Candidate]:
    """Candidates by score, highest first. Equal scores keep insertion order."""
    return sorted(profile.candidates.values(), key=lambda candidate: candidate.score, reverse=True)


def get_next_pair(profile: Profile) -> VotingPair | None:
    """The pair to present next, or None once every pair is voted."""
    return profile.pairs[0] if profile.pairs else None

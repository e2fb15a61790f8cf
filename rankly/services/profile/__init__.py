"""
Profile System - pairwise ranking state machine.

Candidates are normalized from raw items, every unordered pair is generated
once, and votes accumulate into per-candidate scores. All operations map an
immutable ProfileState snapshot to a new one.
"""

from rankly.services.profile.normalizer import CandidateNormalizer
from rankly.services.profile.pairs import PairGenerator
from rankly.services.profile.store import ProfileStore
from rankly.services.profile.voting import VotingEngine

__all__ = [
    "CandidateNormalizer",
    "PairGenerator",
    "ProfileStore",
    "VotingEngine",
]

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Candidate(BaseModel):
    """A single rankable item within a profile."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: str | None = None
    score: int = Field(default=0, ge=0, description="Number of votes won")


class VotingPair(BaseModel):
    """A pending head-to-head comparison between two candidates."""

    model_config = ConfigDict(frozen=True)

    id: str  # order-independent, see rankly.shared.ids.pair_id
    left_id: str
    right_id: str
    skipped: int = Field(default=0, ge=0, description="How many times the pair was skipped")

    @model_validator(mode="after")
    def _check_distinct(self) -> "VotingPair":
        if self.left_id == self.right_id:
            raise ValueError(f"A pair needs two different candidates, got '{self.left_id}' twice")
        return self

    def has_member(self, candidate_id: str) -> bool:
        return candidate_id in (self.left_id, self.right_id)


class VotedPair(VotingPair):
    """A pair that has been resolved by a vote."""

    winner_id: str


class Profile(BaseModel):
    """
    One ranking session: a named list of candidates, the pairs still to be
    voted on and the history of resolved pairs.

    `total_comparisons` counts every pair ever generated for the profile
    (initial list plus merges) and is the stable denominator for progress.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    candidates: dict[str, Candidate] = Field(default_factory=dict)
    pairs: list[VotingPair] = Field(default_factory=list, description="Pending queue")
    voted: list[VotedPair] = Field(default_factory=list, description="Resolved pairs, oldest first")
    date_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    total_comparisons: int = Field(default=0, ge=0)

    @property
    def pair_history_ids(self) -> set[str]:
        """Ids of every pair the profile has seen, pending or voted."""
        return {pair.id for pair in self.pairs} | {pair.id for pair in self.voted}

    @property
    def progress(self) -> int:
        return self.total_comparisons - len(self.pairs)

    @property
    def is_complete(self) -> bool:
        return not self.pairs


class ProfileState(BaseModel):
    """Root of the state tree: every profile plus the selected one."""

    model_config = ConfigDict(frozen=True)

    current_profile: str | None = None
    profiles: dict[str, Profile] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_current(self) -> "ProfileState":
        if self.current_profile is not None and self.current_profile not in self.profiles:
            raise ValueError(f"current_profile '{self.current_profile}' is not a known profile")
        return self

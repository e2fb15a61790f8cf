from typing import Final, Literal

SkipPolicy = Literal["requeue", "in_place"]

# Skipped pair goes to the back of the pending queue
SKIP_POLICY_REQUEUE: Final[SkipPolicy] = "requeue"
# Skipped pair keeps its position
SKIP_POLICY_IN_PLACE: Final[SkipPolicy] = "in_place"

# Score every candidate starts with
INITIAL_SCORE: Final[int] = 0
# Points a vote adds to the winner
VOTE_POINTS: Final[int] = 1

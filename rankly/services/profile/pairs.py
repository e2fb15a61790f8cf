from collections.abc import Collection, Iterable

from rankly.models.profile import VotingPair
from rankly.shared.ids import pair_id


class PairGenerator:
    """
    Generates the unordered comparison pairs for a set of candidates.

    Output order follows the insertion order of the ids: the outer loop walks
    every id, the inner loop the ids after it. The same input always yields
    the same pairs in the same order.
    """

    @staticmethod
    def generate_pairs(
        candidate_ids: Iterable[str],
        existing_pair_ids: Collection[str] = frozenset(),
    ) -> list[VotingPair]:
        """
        Build every pair of distinct candidates not already in `existing_pair_ids`.

        Args:
            candidate_ids: Candidate ids, in the order pairs should be generated
            existing_pair_ids: Pair ids the profile already has (pending or voted)

        Returns:
            New pairs only. n ids and no history give n * (n - 1) / 2 pairs.
        """
        ids = list(dict.fromkeys(candidate_ids))
        seen = set(existing_pair_ids)
        pairs: list[VotingPair] = []

        for index, left_id in enumerate(ids):
            for right_id in ids[index + 1 :]:
                pid = pair_id(left_id, right_id)
                if pid in seen:
                    continue
                seen.add(pid)
                pairs.append(VotingPair(id=pid, left_id=left_id, right_id=right_id))
        return pairs

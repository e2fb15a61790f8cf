"""Tests for derived reads: progress, completion and ranking."""

from rankly.models.actions import Skip, Vote
from rankly.models.profile import Profile
from rankly.services.profile import selectors


class TestSelectors:
    def test_current_profile_none_when_unselected(self, empty_state):
        assert selectors.get_current_profile(empty_state) is None
        assert selectors.get_profiles(empty_state) == []

    def test_progress_and_completion(self, reducer, abc_state):
        state = reducer.apply(abc_state, Vote(pair_index=0, winner_candidate_id="A"))
        state = reducer.apply(state, Skip(pair_index=0))

        profile = selectors.get_current_profile(state)
        assert selectors.get_total_comparisons(profile) == 3
        assert selectors.get_progress(profile) == 1
        assert round(selectors.get_completion_ratio(profile), 4) == 0.3333
        assert not selectors.is_complete(profile)

    def test_empty_profile_ratio_is_zero(self):
        profile = Profile(id="p", name="Empty")

        assert selectors.get_completion_ratio(profile) == 0.0
        assert selectors.is_complete(profile)
        assert selectors.get_next_pair(profile) is None

    def test_ranking_by_score_then_insertion_order(self, reducer, abc_state):
        state = reducer.apply(abc_state, Vote(pair_index=2, winner_candidate_id="C"))

        ranking = selectors.get_ranking(selectors.get_current_profile(state))

        assert [c.id for c in ranking] == ["C", "A", "B"]

    def test_next_pair_is_queue_head(self, reducer, abc_state):
        state = reducer.apply(abc_state, Skip(pair_index=0))

        next_pair = selectors.get_next_pair(selectors.get_current_profile(state))

        assert (next_pair.left_id, next_pair.right_id) == ("A", "C")

    def test_profiles_in_creation_order(self, store, empty_state):
        state = store.create_profile(empty_state, "One", ["A", "B"])
        state = store.create_profile(state, "Two", ["A", "B"])

        assert [p.name for p in selectors.get_profiles(state)] == ["One", "Two"]

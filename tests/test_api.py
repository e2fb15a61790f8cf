"""Tests for the HTTP host."""

import pytest
from fastapi.testclient import TestClient

from rankly.core.app import app
from rankly.core.config import APP_VERSION
from rankly.core.version import __version__
from rankly.services.reducer import ProfileReducer
from rankly.services.state_holder import state_holder


@pytest.fixture
def client(reducer):
    state_holder.reset(reducer=reducer)
    with TestClient(app) as test_client:
        yield test_client
    state_holder.reset(reducer=ProfileReducer())


def add_letters(client):
    return client.post(
        "/actions",
        json={"type": "profile/add", "name": "Letters", "raw_items": [{"name": "A"}, {"name": "B"}, {"name": "C"}]},
    )


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_app_reports_package_version(self):
        assert app.version == APP_VERSION == __version__

    def test_metrics(self, client):
        add_letters(client)

        assert client.get("/metrics").json() == {"profiles": 1, "pending_pairs": 3, "voted_pairs": 0}


class TestActions:
    def test_add_profile_returns_state(self, client):
        response = add_letters(client)

        assert response.status_code == 200
        body = response.json()
        assert body["current_profile"] == "Letters-1"
        assert body["profiles"]["Letters-1"]["total_comparisons"] == 3

    def test_vote_then_read_current(self, client):
        add_letters(client)

        response = client.post("/actions", json={"type": "pair/vote", "pair_index": 0, "winner_candidate_id": "B"})
        assert response.status_code == 200

        current = client.get("/profiles/current").json()
        assert current["progress"] == 1
        assert current["total_comparisons"] == 3
        assert current["complete"] is False
        assert [c["id"] for c in current["ranking"]] == ["B", "A", "C"]
        assert (current["next_pair"]["left_id"], current["next_pair"]["right_id"]) == ("A", "C")

    def test_get_state(self, client):
        add_letters(client)

        assert client.get("/state").json()["current_profile"] == "Letters-1"

    def test_unknown_action_type(self, client):
        response = client.post("/actions", json={"type": "profile/delete", "id": "x"})

        assert response.status_code == 422

    def test_invalid_profile(self, client):
        response = client.post("/actions", json={"type": "profile/set_current", "id": "nonexistent"})

        assert response.status_code == 404
        assert "nonexistent" in response.json()["detail"]

    def test_no_current_profile(self, client):
        response = client.post("/actions", json={"type": "pair/skip", "pair_index": 0})

        assert response.status_code == 409

    def test_bad_index_and_unknown_candidate(self, client):
        add_letters(client)

        bad_index = client.post("/actions", json={"type": "pair/vote", "pair_index": 7, "winner_candidate_id": "A"})
        bad_winner = client.post("/actions", json={"type": "pair/vote", "pair_index": 0, "winner_candidate_id": "C"})

        assert bad_index.status_code == 404
        assert bad_winner.status_code == 422
        assert client.get("/profiles/current").json()["progress"] == 0


class TestProfiles:
    def test_parse_creates_profile(self, client):
        response = client.post(
            "/profiles/parse",
            json={"name": "Food", "text": "Pizza    http://img/pizza.png\nPho\n\nPizza"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": "Food-1",
            "name": "Food",
            "candidates": 2,
            "progress": 0,
            "total_comparisons": 1,
            "complete": False,
        }

    def test_parse_requires_items(self, client):
        response = client.post("/profiles/parse", json={"name": "Food", "text": "\n \n"})

        assert response.status_code == 400

    def test_list_profiles(self, client):
        add_letters(client)
        client.post("/actions", json={"type": "profile/merge_candidates", "raw_items": [{"name": "D"}]})

        profiles = client.get("/profiles").json()

        assert [(p["id"], p["candidates"], p["total_comparisons"]) for p in profiles] == [("Letters-1", 4, 6)]

    def test_current_without_selection(self, client):
        assert client.get("/profiles/current").status_code == 409

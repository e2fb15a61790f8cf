import itertools
from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger

from rankly.models.actions import AddProfile, RawItem
from rankly.models.profile import ProfileState
from rankly.services.profile import ProfileStore, VotingEngine
from rankly.services.reducer import ProfileReducer


class TickingClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def sequential_ids():
    counter = itertools.count(1)
    return lambda name: f"{name}-{next(counter)}"


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def store(clock) -> ProfileStore:
    return ProfileStore(id_generator=sequential_ids(), max_id_attempts=100, clock=clock)


@pytest.fixture
def voting(clock) -> VotingEngine:
    return VotingEngine(skip_policy="requeue", clock=clock)


@pytest.fixture
def reducer(store, voting) -> ProfileReducer:
    return ProfileReducer(store=store, voting=voting)


@pytest.fixture
def empty_state() -> ProfileState:
    return ProfileState()


@pytest.fixture
def abc_state(reducer, empty_state) -> ProfileState:
    """A single selected profile ranking A, B and C."""
    items = [RawItem(name=name) for name in ("A", "B", "C")]
    return reducer.apply(empty_state, AddProfile(name="Letters", raw_items=items))


@pytest.fixture
def log_messages():
    """Collect loguru output as 'LEVEL|message' strings."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)

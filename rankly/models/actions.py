from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class RawItem(BaseModel):
    """An item as entered by the user, before normalization."""

    model_config = ConfigDict(frozen=True)

    name: str
    image: str | None = None


class AddProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["profile/add"] = "profile/add"
    name: str
    raw_items: list[RawItem] = Field(default_factory=list)


class SetCurrentProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["profile/set_current"] = "profile/set_current"
    id: str


class MergeCandidates(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["profile/merge_candidates"] = "profile/merge_candidates"
    raw_items: list[RawItem] = Field(default_factory=list)


class Vote(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["pair/vote"] = "pair/vote"
    pair_index: int
    winner_candidate_id: str


class Skip(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["pair/skip"] = "pair/skip"
    pair_index: int


Action = Annotated[
    AddProfile | SetCurrentProfile | MergeCandidates | Vote | Skip,
    Field(discriminator="type"),
]

_action_adapter = TypeAdapter(Action)


def parse_action(payload: dict[str, Any]) -> Action:
    """Validate a raw payload into one of the known actions.

    Unknown `type` tags raise pydantic.ValidationError.
    """
    return _action_adapter.validate_python(payload)

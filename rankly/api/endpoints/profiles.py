from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from rankly.api.dispatch import dispatch_or_raise
from rankly.core.config import settings
from rankly.models.actions import AddProfile
from rankly.models.profile import Profile
from rankly.services.profile import selectors
from rankly.services.state_holder import state_holder
from rankly.utils import parse_item_lines

router = APIRouter(prefix="/profiles", tags=["profiles"])


class ParseProfileRequest(BaseModel):
    name: str = Field(min_length=1, description="Name of the new list")
    text: str = Field(description="One item per line: name, then optionally the separator and an image URL")


class ProfileSummary(BaseModel):
    id: str
    name: str
    candidates: int
    progress: int
    total_comparisons: int
    complete: bool


def _summarize(profile: Profile) -> ProfileSummary:
    return ProfileSummary(
        id=profile.id,
        name=profile.name,
        candidates=len(profile.candidates),
        progress=selectors.get_progress(profile),
        total_comparisons=selectors.get_total_comparisons(profile),
        complete=selectors.is_complete(profile),
    )


@router.get("", response_model=list[ProfileSummary])
async def list_profiles() -> list[ProfileSummary]:
    return [_summarize(profile) for profile in selectors.get_profiles(state_holder.state)]


@router.post("/parse", response_model=ProfileSummary)
async def create_from_text(payload: ParseProfileRequest) -> ProfileSummary:
    """Create a profile from the free-text list format and select it."""
    name = payload.name.strip()
    items = parse_item_lines(payload.text, separator=settings.ITEM_LINE_SEPARATOR)
    if not name or not items:
        raise HTTPException(status_code=400, detail="Provide a list name and at least one item.")

    new_state = dispatch_or_raise(AddProfile(name=name, raw_items=items))
    return _summarize(selectors.get_current_profile(new_state))


@router.get("/current")
async def get_current() -> dict:
    """Current profile with derived progress, ranking and the next pair to vote on."""
    profile = selectors.get_current_profile(state_holder.state)
    if profile is None:
        raise HTTPException(status_code=409, detail="No profile selected!")

    next_pair = selectors.get_next_pair(profile)
    return {
        "profile": profile.model_dump(mode="json"),
        "progress": selectors.get_progress(profile),
        "total_comparisons": selectors.get_total_comparisons(profile),
        "completion": round(selectors.get_completion_ratio(profile), 4),
        "complete": selectors.is_complete(profile),
        "ranking": [candidate.model_dump(mode="json") for candidate in selectors.get_ranking(profile)],
        "next_pair": next_pair.model_dump(mode="json") if next_pair else None,
    }

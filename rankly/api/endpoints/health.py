from fastapi import APIRouter

from rankly.services.state_holder import state_holder

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness probe")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/metrics", summary="Runtime metrics (lightweight)")
async def metrics() -> dict:
    """Return counts describing the in-memory state."""
    state = state_holder.state
    return {
        "profiles": len(state.profiles),
        "pending_pairs": sum(len(profile.pairs) for profile in state.profiles.values()),
        "voted_pairs": sum(len(profile.voted) for profile in state.profiles.values()),
    }

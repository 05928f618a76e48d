"""Food logging endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, status

from fitness_tracker.api.dependencies import get_container, require_user, store_action
from fitness_tracker.api.models import FoodEntryRequest, QuickAddRequest
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import SessionUser
from fitness_tracker.services.food import search_quick_add

router = APIRouter(prefix="/food", tags=["food"])


@router.get("")
async def list_food(
    day: date | None = None,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a day's food entries with their totals."""
    with store_action("Failed to load food entries", user):
        entries = container.food_service.list_day(user.id, day)
        summary, progress, count = container.food_service.summarize_day(user.id, day)
    return {"entries": entries, "totals": summary, "progress": progress, "count": count}


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_food(
    payload: FoodEntryRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a manually entered food."""
    with store_action("Failed to add food entry. Please try again.", user):
        entry = container.food_service.add_entry(
            user.id,
            name=payload.name,
            calories=payload.calories,
            protein=payload.protein,
            carbs=payload.carbs,
            fat=payload.fat,
        )
    return {"entry": entry, "refresh": ["food"]}


@router.get("/quick-add")
async def quick_add_catalog(q: str | None = None) -> dict[str, object]:
    """Return catalog foods matching a search term."""
    return {"foods": search_quick_add(q)}


@router.post("/quick-add", status_code=status.HTTP_201_CREATED)
async def quick_add(
    payload: QuickAddRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a catalog food."""
    with store_action("Failed to add food entry. Please try again.", user):
        entry = container.food_service.quick_add(user.id, payload.name)
    return {"entry": entry, "refresh": ["food"]}


@router.get("/summary")
async def food_summary(
    day: date | None = None,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a day's macro totals and progress against goals."""
    with store_action("Failed to load nutrition summary", user):
        summary, progress, count = container.food_service.summarize_day(user.id, day)
    return {"totals": summary, "progress": progress, "count": count}


@router.delete("/{entry_id}")
async def delete_food(
    entry_id: int,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete a food entry."""
    with store_action("Failed to delete food entry", user):
        container.food_service.delete_entry(user.id, entry_id)
    return {"status": "deleted", "refresh": ["food"]}

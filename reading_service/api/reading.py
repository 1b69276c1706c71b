import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.dependencies import get_reading_service, get_user_id
from ..models.reading_models import (
    DailyVerseResponse,
    JumpRequest,
    PartVersesResponse,
    ProgressSummaryResponse,
    ReadingStateResponse,
    ResetRequest,
)
from ..services.reading.service import ReadingService

logger = logging.getLogger(__name__)
router = APIRouter()

# --- Reading State & Navigation Endpoints ---

@router.get("/state", response_model=ReadingStateResponse)
async def reading_get_state_handler(
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Get the current reading position for the caller."""
    return await reading_service.get_state(user_id)

@router.post("/next", response_model=ReadingStateResponse)
async def reading_next_handler(
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Move forward one verse; ``committed`` is false at the last verse or mid-move."""
    return await reading_service.next(user_id)

@router.post("/previous", response_model=ReadingStateResponse)
async def reading_previous_handler(
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Move back one verse."""
    return await reading_service.previous(user_id)

@router.post("/jump", response_model=ReadingStateResponse)
async def reading_jump_handler(
    request: JumpRequest,
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Jump directly to a global verse index."""
    return await reading_service.jump(user_id, request.index)

@router.post("/reset", response_model=ReadingStateResponse)
async def reading_reset_handler(
    request: ResetRequest,
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Return to the first verse and clear read verses. Requires ``confirm``."""
    return await reading_service.reset(user_id, confirm=request.confirm)

@router.post("/mark_read", response_model=ReadingStateResponse)
async def reading_mark_read_handler(
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    return await reading_service.mark_read(user_id)

# --- Progress ---

@router.get("/progress", response_model=ProgressSummaryResponse)
async def reading_progress_handler(
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Read count, streaks and completion percentages."""
    return await reading_service.get_progress_summary(user_id)

# --- Daily Verse ---

@router.get("/daily", response_model=DailyVerseResponse)
async def reading_daily_handler(
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Get today's verse for the caller."""
    return await reading_service.get_daily_verse(user_id)

@router.post("/daily/mark_read", response_model=DailyVerseResponse)
async def reading_daily_mark_read_handler(
    user_id: str = Depends(get_user_id),
    reading_service: ReadingService = Depends(get_reading_service),
):
    """Mark today's verse read and advance the daily cursor."""
    return await reading_service.mark_daily_read(user_id)

# --- Reference ---

@router.get("/parts/{number}", response_model=PartVersesResponse)
async def reading_part_handler(
    number: int,
    reading_service: ReadingService = Depends(get_reading_service),
):
    """List every verse position inside a structural part."""
    part = reading_service.verses_in_part(number)
    if part is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Part {number} not found")
    return part

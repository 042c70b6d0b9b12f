"""Generate router — thin HTTP layer, delegates all logic to generation_controller."""

from fastapi import APIRouter, Depends

from app.api.deps import get_session_factory
from app.controllers import generation_controller
from app.core.deck_generator import SessionFactory
from app.schemas.generation import ErrorResponse, GenerateDeckResponse, PitchDeckRequest

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post(
    "",
    response_model=GenerateDeckResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_pitch_deck(
    payload: PitchDeckRequest,
    session_factory: SessionFactory = Depends(get_session_factory),
):
    """Build a shareable Google Slides pitch deck from the submitted pitch."""
    return await generation_controller.generate_deck(payload, session_factory)

import logging
from collections.abc import Mapping
from typing import Any

from app.core.deck_generator import SessionFactory, generate_pitch_deck
from app.core.exceptions import DeckError, DeckGenerationError, ValidationError
from app.schemas.generation import GenerateDeckResponse, PitchDeckData, PitchDeckRequest

logger = logging.getLogger(__name__)

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS = [
    "companyName",
    "tagline",
    "problem",
    "solution",
    "market",
    "businessModel",
    "traction",
    "team",
    "askAmount",
]


def first_missing_field(values: Mapping[str, Any]) -> str | None:
    """First required camelCase key whose value is absent or falsy."""
    for field in REQUIRED_FIELDS:
        if not values.get(field):
            return field
    return None


def validate_pitch_data(payload: PitchDeckRequest) -> PitchDeckData:
    """Reject the first absent or empty field, else freeze the pitch."""
    field = first_missing_field(payload.model_dump(by_alias=True))
    if field is not None:
        raise ValidationError(field)
    return PitchDeckData.model_validate(payload.model_dump())


async def generate_deck(
    payload: PitchDeckRequest,
    session_factory: SessionFactory,
) -> GenerateDeckResponse:
    """Validate a submitted pitch and build its Google Slides deck."""
    data = validate_pitch_data(payload)

    try:
        deck = await generate_pitch_deck(data, session_factory)
    except DeckError:
        raise
    except Exception as e:
        logger.exception("Deck generation failed for %r", data.company_name)
        raise DeckGenerationError(str(e)) from e

    return GenerateDeckResponse(**deck.model_dump())

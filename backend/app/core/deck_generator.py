"""
Pitch deck generator.

Renders ``PITCH_DECK_SECTIONS`` into a new Google Slides presentation, one
sequential remote call at a time, then opens it for public viewing.

There is no rollback: if a call fails after the presentation was created,
the partial deck stays in the owning Drive account and the error propagates.
"""

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from app.core.config import Settings, settings
from app.core.deck_template import PITCH_DECK_SECTIONS
from app.core.google_client import SlidesSession, slides_session
from app.core.slides import add_slide, add_text_box, build_links, create_presentation, make_public
from app.schemas.deck_content import SectionSpec
from app.schemas.generation import GeneratedDeck, PitchDeckData

logger = logging.getLogger(__name__)

SessionFactory = Callable[[Settings], AbstractAsyncContextManager[SlidesSession]]


async def _render_section(
    session: SlidesSession,
    presentation_id: str,
    section: SectionSpec,
    data: PitchDeckData,
) -> None:
    slide_id = await add_slide(session, presentation_id, section.layout)
    for box in section.text_boxes:
        await add_text_box(
            session,
            presentation_id,
            slide_id,
            box.resolve(data),
            box.position,
            box.font_size,
            box.bold,
        )


async def generate_pitch_deck(
    data: PitchDeckData,
    session_factory: SessionFactory = slides_session,
    config: Settings = settings,
) -> GeneratedDeck:
    """Build the full deck for *data* and return its id and links."""
    async with session_factory(config) as session:
        presentation_id = await create_presentation(session, f"{data.company_name} - Pitch Deck")
        logger.info("Building pitch deck %s for %r", presentation_id, data.company_name)

        try:
            for section in PITCH_DECK_SECTIONS:
                await _render_section(session, presentation_id, section, data)
            await make_public(session, presentation_id)
        except Exception as e:
            logger.warning("Pitch deck %s left incomplete: %s", presentation_id, e)
            raise

    links = build_links(presentation_id, config.GOOGLE_SLIDES_HOST)
    logger.info("Pitch deck %s ready", presentation_id)
    return GeneratedDeck(
        presentation_id=presentation_id,
        edit_url=links.edit_url,
        view_url=links.view_url,
    )

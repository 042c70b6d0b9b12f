"""
Presentation primitives: the four atomic Google calls a deck is built from.

Each primitive issues exactly one remote request against an explicit
``SlidesSession``. Failures surface as ``RemoteServiceError`` (or its
``AuthenticationError`` subclass) from ``app.core.google_client.execute``.
"""

import logging
import uuid

from pydantic import BaseModel

from app.core.config import settings
from app.core.google_client import SlidesSession, execute
from app.schemas.deck_content import Position

logger = logging.getLogger(__name__)


class DeckLinks(BaseModel):
    edit_url: str
    view_url: str


def _object_id(prefix: str) -> str:
    # Slides object ids must be 5-50 chars of [A-Za-z0-9_-:]
    return f"{prefix}_{uuid.uuid4().hex}"


async def create_presentation(session: SlidesSession, title: str) -> str:
    """Create an empty presentation and return its id."""
    response = await execute(session.slides.presentations().create(body={"title": title}))
    presentation_id = response["presentationId"]
    logger.debug("Created presentation %s (%r)", presentation_id, title)
    return presentation_id


async def add_slide(session: SlidesSession, presentation_id: str, layout: str = "BLANK") -> str:
    """Append a slide using a predefined layout and return its id."""
    slide_id = _object_id("slide")
    await execute(
        session.slides.presentations().batchUpdate(
            presentationId=presentation_id,
            body={
                "requests": [
                    {
                        "createSlide": {
                            "objectId": slide_id,
                            "slideLayoutReference": {"predefinedLayout": layout},
                        }
                    }
                ]
            },
        )
    )
    logger.debug("Added slide %s to %s", slide_id, presentation_id)
    return slide_id


async def add_text_box(
    session: SlidesSession,
    presentation_id: str,
    slide_id: str,
    text: str,
    position: Position,
    font_size: float = 24,
    bold: bool = False,
) -> str:
    """Create, fill and style a text box in a single batch update."""
    text_box_id = _object_id("text")
    requests = [
        {
            "createShape": {
                "objectId": text_box_id,
                "shapeType": "TEXT_BOX",
                "elementProperties": {
                    "pageObjectId": slide_id,
                    "size": {
                        "width": {"magnitude": position.width, "unit": "PT"},
                        "height": {"magnitude": position.height, "unit": "PT"},
                    },
                    "transform": {
                        "scaleX": 1,
                        "scaleY": 1,
                        "translateX": position.x,
                        "translateY": position.y,
                        "unit": "PT",
                    },
                },
            }
        },
        {
            "insertText": {
                "objectId": text_box_id,
                "text": text,
                "insertionIndex": 0,
            }
        },
        {
            "updateTextStyle": {
                "objectId": text_box_id,
                "style": {
                    "fontSize": {"magnitude": font_size, "unit": "PT"},
                    "bold": bold,
                },
                "textRange": {"type": "ALL"},
                "fields": "fontSize,bold",
            }
        },
    ]
    await execute(
        session.slides.presentations().batchUpdate(
            presentationId=presentation_id,
            body={"requests": requests},
        )
    )
    logger.debug("Added text box %s to slide %s", text_box_id, slide_id)
    return text_box_id


async def make_public(session: SlidesSession, presentation_id: str) -> None:
    """Grant anyone-with-the-link read access."""
    await execute(
        session.drive.permissions().create(
            fileId=presentation_id,
            body={"type": "anyone", "role": "reader"},
        )
    )
    logger.debug("Presentation %s is now publicly readable", presentation_id)


def build_links(presentation_id: str, host: str = settings.GOOGLE_SLIDES_HOST) -> DeckLinks:
    base = f"https://{host}/presentation/d/{presentation_id}"
    return DeckLinks(edit_url=f"{base}/edit", view_url=f"{base}/embed")

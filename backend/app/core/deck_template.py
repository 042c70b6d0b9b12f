"""
The fixed 8-slide pitch deck template.

Coordinates and font sizes are in points on a standard 720x405 Google Slides
page. Every section is a blank slide with two text boxes.
"""

from app.schemas.deck_content import Position, SectionSpec, TextBoxSpec

HEADING_POSITION = Position(x=50, y=30, width=620, height=50)
BODY_POSITION = Position(x=50, y=100, width=620, height=300)
HERO_POSITION = Position(x=50, y=150, width=620, height=80)
SUBTITLE_POSITION = Position(x=50, y=250, width=620, height=50)

HEADING_FONT_SIZE = 36
BODY_FONT_SIZE = 18


def _content_section(name: str, heading: str, field: str) -> SectionSpec:
    return SectionSpec(
        name=name,
        text_boxes=(
            TextBoxSpec(text=heading, position=HEADING_POSITION, font_size=HEADING_FONT_SIZE, bold=True),
            TextBoxSpec(field=field, position=BODY_POSITION, font_size=BODY_FONT_SIZE),
        ),
    )


PITCH_DECK_SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec(
        name="Title",
        text_boxes=(
            TextBoxSpec(field="company_name", position=HERO_POSITION, font_size=48, bold=True),
            TextBoxSpec(field="tagline", position=SUBTITLE_POSITION, font_size=24),
        ),
    ),
    _content_section("Problem", "The Problem", "problem"),
    _content_section("Solution", "Our Solution", "solution"),
    _content_section("Market", "Market Opportunity", "market"),
    _content_section("Business Model", "Business Model", "business_model"),
    _content_section("Traction", "Traction", "traction"),
    _content_section("Team", "The Team", "team"),
    SectionSpec(
        name="Ask",
        text_boxes=(
            TextBoxSpec(text="The Ask", position=HEADING_POSITION, font_size=HEADING_FONT_SIZE, bold=True),
            TextBoxSpec(field="ask_amount", position=HERO_POSITION, font_size=32, bold=True),
        ),
    ),
)

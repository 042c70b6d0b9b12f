"""
Pydantic models describing the fixed slide template.

A deck is an ordered sequence of ``SectionSpec`` descriptors; each one
becomes a slide holding its ``TextBoxSpec`` boxes. The concrete template
lives in ``app.core.deck_template``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.schemas.generation import PitchDeckData


class Position(BaseModel):
    """A text box rectangle, in points."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class TextBoxSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: Position
    font_size: float = Field(gt=0)
    bold: bool = False
    text: str | None = None
    field: str | None = None

    @model_validator(mode="after")
    def _one_text_source(self) -> TextBoxSpec:
        if (self.text is None) == (self.field is None):
            raise ValueError("exactly one of 'text' or 'field' must be set")
        if self.field is not None and self.field not in PitchDeckData.model_fields:
            raise ValueError(f"unknown pitch field: {self.field}")
        return self

    def resolve(self, data: PitchDeckData) -> str:
        """Text to place in the box for this pitch."""
        if self.field is not None:
            return getattr(data, self.field)
        return self.text


class SectionSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    layout: str = "BLANK"
    text_boxes: tuple[TextBoxSpec, ...]

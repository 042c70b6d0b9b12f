import pydantic
from pydantic.alias_generators import to_camel


class _CamelModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PitchDeckRequest(_CamelModel):
    # Every field is optional here so a missing one yields a 400 naming it,
    # not a 422 from request parsing.
    company_name: str | None = None
    tagline: str | None = None
    problem: str | None = None
    solution: str | None = None
    market: str | None = None
    business_model: str | None = None
    traction: str | None = None
    team: str | None = None
    ask_amount: str | None = None


class PitchDeckData(_CamelModel):
    """Validated pitch, consumed read-only by the deck generator."""

    model_config = pydantic.ConfigDict(frozen=True)

    company_name: str
    tagline: str
    problem: str
    solution: str
    market: str
    business_model: str
    traction: str
    team: str
    ask_amount: str


class GeneratedDeck(_CamelModel):
    presentation_id: str
    edit_url: str
    view_url: str


class GenerateDeckResponse(GeneratedDeck):
    success: bool = True


class ErrorResponse(pydantic.BaseModel):
    error: str

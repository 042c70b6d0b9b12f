"""
Shared FastAPI dependencies — single source of truth for DI.

Routers take the Google session factory from HERE so tests can swap it
through ``app.dependency_overrides``.
"""

from app.core.deck_generator import SessionFactory
from app.core.google_client import slides_session

__all__ = ["get_session_factory"]


def get_session_factory() -> SessionFactory:
    """Return the factory for authenticated Google sessions.

    Nothing is acquired here; the session is opened by the deck generator
    only after the submitted pitch has been validated.
    """
    return slides_session

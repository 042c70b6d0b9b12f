"""
Authenticated access to the Google Slides and Drive APIs.

A ``SlidesSession`` is acquired once per deck run through
``slides_session()`` and passed explicitly to every primitive in
``app.core.slides``. ``googleapiclient`` is synchronous, so requests are
executed in a worker thread to keep the event loop free.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.core.config import Settings, settings
from app.core.exceptions import AuthenticationError, ConfigurationError, RemoteServiceError

logger = logging.getLogger(__name__)


class SlidesSession:
    """The two discovery resources a deck run talks to."""

    def __init__(self, slides: Any, drive: Any):
        self.slides = slides
        self.drive = drive

    def close(self) -> None:
        for resource in (self.slides, self.drive):
            close = getattr(resource, "close", None)
            if close is not None:
                close()


def build_credentials(config: Settings = settings) -> Credentials:
    """Build refreshable user credentials from the configured OAuth client."""
    missing = config.missing_google_credentials()
    if missing:
        raise ConfigurationError(
            f"Missing Google OAuth credentials in environment variables: {', '.join(missing)}"
        )

    # No access token yet; google-auth refreshes on the first request.
    return Credentials(
        token=None,
        refresh_token=config.GOOGLE_REFRESH_TOKEN,
        client_id=config.GOOGLE_CLIENT_ID,
        client_secret=config.GOOGLE_CLIENT_SECRET,
        token_uri=config.GOOGLE_TOKEN_URI,
    )


@asynccontextmanager
async def slides_session(config: Settings = settings) -> AsyncIterator[SlidesSession]:
    """Acquire one authenticated session for the duration of a deck run."""
    credentials = build_credentials(config)
    session = SlidesSession(
        slides=build("slides", "v1", credentials=credentials, cache_discovery=False),
        drive=build("drive", "v3", credentials=credentials, cache_discovery=False),
    )
    logger.debug("Google Slides session opened")
    try:
        yield session
    finally:
        session.close()
        logger.debug("Google Slides session closed")


async def execute(request: Any) -> dict:
    """Run a prepared API request off the event loop and map its failures."""
    try:
        return await asyncio.to_thread(request.execute)
    except RefreshError as exc:
        raise AuthenticationError(str(exc)) from exc
    except HttpError as exc:
        status = exc.resp.status
        reason = exc.reason or str(exc)
        if status == 401:
            raise AuthenticationError(reason, status=status) from exc
        raise RemoteServiceError(reason, status=status) from exc

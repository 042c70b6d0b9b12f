"""Global test configuration and fixtures."""

import json
from contextlib import asynccontextmanager
from typing import Any

import httplib2
import pytest
import pytest_asyncio
from googleapiclient.errors import HttpError
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_session_factory
from app.core.google_client import SlidesSession
from app.main import app


def _http_error(status: int, message: str) -> HttpError:
    """An HttpError shaped like a real Google API rejection."""
    content = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
    return HttpError(httplib2.Response({"status": status}), content)


class FakeRequest:
    """A prepared API request; records itself in the call log on execute()."""

    def __init__(self, google: "FakeGoogle", method: str, kwargs: dict, response: dict):
        self._google = google
        self._method = method
        self._kwargs = kwargs
        self._response = response

    def execute(self) -> dict:
        self._google.calls.append((self._method, self._kwargs))
        error = self._google._next_failure(self._operation())
        if error is not None:
            raise error
        return self._response

    def _operation(self) -> str:
        if self._method == "presentations.batchUpdate":
            return next(iter(self._kwargs["body"]["requests"][0]))
        return self._method


class _FakePresentations:
    def __init__(self, google: "FakeGoogle"):
        self._google = google

    def create(self, body: dict) -> FakeRequest:
        return FakeRequest(
            self._google,
            "presentations.create",
            {"body": body},
            {"presentationId": self._google.presentation_id, "title": body["title"]},
        )

    def batchUpdate(self, presentationId: str, body: dict) -> FakeRequest:
        return FakeRequest(
            self._google,
            "presentations.batchUpdate",
            {"presentationId": presentationId, "body": body},
            {"presentationId": presentationId, "replies": [{} for _ in body["requests"]]},
        )


class _FakeSlidesService:
    def __init__(self, google: "FakeGoogle"):
        self._presentations = _FakePresentations(google)

    def presentations(self) -> _FakePresentations:
        return self._presentations


class _FakePermissions:
    def __init__(self, google: "FakeGoogle"):
        self._google = google

    def create(self, fileId: str, body: dict) -> FakeRequest:
        return FakeRequest(
            self._google,
            "permissions.create",
            {"fileId": fileId, "body": body},
            {"id": "anyoneWithLink", **body},
        )


class _FakeDriveService:
    def __init__(self, google: "FakeGoogle"):
        self._permissions = _FakePermissions(google)

    def permissions(self) -> _FakePermissions:
        return self._permissions


class FakeGoogle:
    """In-memory Slides + Drive services that record every executed call in order.

    Operations are named ``presentations.create``, ``permissions.create`` or,
    for batch updates, after their first request (``createSlide``,
    ``createShape``).
    """

    def __init__(self, presentation_id: str = "pres_abc123"):
        self.presentation_id = presentation_id
        self.calls: list[tuple[str, dict]] = []
        self.opened = 0
        self.closed = 0
        self.slides = _FakeSlidesService(self)
        self.drive = _FakeDriveService(self)
        self._failures: dict[str, list[Any]] = {}

    def fail_on(self, operation: str, error: Exception, after: int = 0) -> None:
        """Raise *error* on the call to *operation* that follows *after* successful ones."""
        self._failures[operation] = [after, error]

    def _next_failure(self, operation: str) -> Exception | None:
        rule = self._failures.get(operation)
        if rule is None:
            return None
        if rule[0] == 0:
            return rule[1]
        rule[0] -= 1
        return None

    def operations(self) -> list[str]:
        names = []
        for method, kwargs in self.calls:
            if method == "presentations.batchUpdate":
                names.append(next(iter(kwargs["body"]["requests"][0])))
            else:
                names.append(method)
        return names

    def batches(self, operation: str) -> list[list[dict]]:
        return [
            kwargs["body"]["requests"]
            for method, kwargs in self.calls
            if method == "presentations.batchUpdate"
            and next(iter(kwargs["body"]["requests"][0])) == operation
        ]

    def session_factory(self):
        @asynccontextmanager
        async def factory(config):
            self.opened += 1
            try:
                yield SlidesSession(slides=self.slides, drive=self.drive)
            finally:
                self.closed += 1

        return factory


@pytest.fixture
def fake_google() -> FakeGoogle:
    return FakeGoogle()


@pytest.fixture
def session(fake_google: FakeGoogle) -> SlidesSession:
    return SlidesSession(slides=fake_google.slides, drive=fake_google.drive)


@pytest.fixture
def pitch_payload() -> dict[str, str]:
    return {
        "companyName": "Acme",
        "tagline": "We fix it",
        "problem": "X",
        "solution": "Y",
        "market": "Z",
        "businessModel": "W",
        "traction": "T",
        "team": "U",
        "askAmount": "$1M for 10%",
    }


@pytest_asyncio.fixture
async def client(fake_google: FakeGoogle):
    app.dependency_overrides[get_session_factory] = fake_google.session_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def http_error():
    return _http_error

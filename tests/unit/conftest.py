"""
Unit Test Fixtures.

Provides a deterministic in-memory Buttondown backend served through
httpx.MockTransport, plus email fixtures shared by client, schema and
CLI tests.
"""

import copy
import json
from typing import Any

import httpx
import pytest

from buttondown_cli.client import ButtondownClient

BASE_URL = "https://api.buttondown.email/v1"
TEST_API_KEY = "test-key"

EMAIL_FIXTURES: list[dict[str, Any]] = [
    {
        "id": "em_draft",
        "subject": "Draft issue",
        "body": "Work in progress",
        "status": "draft",
        "creation_date": "2025-01-02T10:00:00Z",
        "created_at": "2024-12-31T00:00:00Z",
        "modification_date": "2025-01-02T11:00:00Z",
        "scheduled_for": None,
        "slug": "draft-issue",
    },
    {
        "id": "em_scheduled",
        "subject": "",
        "body": "Coming soon",
        "status": "scheduled",
        "created_at": "2025-01-03T08:00:00Z",
        "updated_at": "2025-01-03T09:00:00Z",
        "scheduled_for": "2025-02-01T09:00:00Z",
        "publish_date": "2025-02-01T09:00:00Z",
    },
    {
        "id": "em_sent",
        "subject": "Sent issue",
        "body": "Already out",
        "status": "sent",
        "creation_date": "2025-01-04T08:00:00Z",
        "published_at": "2025-01-05T09:00:00Z",
        "analytics": {
            "recipients": 120,
            "deliveries": 118,
            "opens": 60,
            "clicks": 12,
            "open_rate": 0.5,
            "click_rate": 0.1,
            "unsubscribe_rate": 0.0,
        },
    },
]

ANALYTICS_FIXTURE: dict[str, Any] = {
    "recipients": 120,
    "deliveries": 118,
    "opens": 60,
    "clicks": 12,
    "unsubscribes": 1,
    "open_rate": 0.5,
    "click_rate": 0.1,
    "unsubscribe_rate": 0.01,
}


class FakeButtondownAPI:
    """
    In-memory stand-in for the Buttondown email endpoints.

    Every request is recorded in ``requests``. ``fail_next`` makes the
    next request answer with a canned response instead of the normal route.
    """

    def __init__(self, emails: list[dict[str, Any]] | None = None) -> None:
        source = EMAIL_FIXTURES if emails is None else emails
        self.emails = {email["id"]: copy.deepcopy(email) for email in source}
        self.requests: list[httpx.Request] = []
        self._next_response: httpx.Response | None = None

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, api_key: str = TEST_API_KEY) -> ButtondownClient:
        return ButtondownClient(api_key=api_key, base_url=BASE_URL, transport=self.transport)

    def fail_next(self, status_code: int, content: bytes | str) -> None:
        self._next_response = httpx.Response(status_code, content=content)

    def sent_json(self, index: int = -1) -> Any:
        """Decode the JSON body of a recorded request."""
        return json.loads(self.requests[index].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self._next_response is not None:
            response, self._next_response = self._next_response, None
            return response

        parts = request.url.path.removeprefix("/v1/").strip("/").split("/")

        if parts == ["emails"]:
            if request.method == "GET":
                return self._list(request)
            if request.method == "POST":
                return self._create(request)

        if len(parts) >= 2 and parts[0] == "emails":
            email = self.emails.get(parts[1])
            if email is None:
                return httpx.Response(404, json={"detail": "Not found"})
            if parts[2:] == ["analytics"] and request.method == "GET":
                return httpx.Response(200, json=ANALYTICS_FIXTURE)
            if len(parts) == 2:
                if request.method == "GET":
                    return httpx.Response(200, json=email)
                if request.method == "PATCH":
                    email.update(json.loads(request.content))
                    return httpx.Response(200, json=email)
                if request.method == "DELETE":
                    del self.emails[parts[1]]
                    return httpx.Response(204)

        return httpx.Response(405, json={"detail": "Method not allowed"})

    def _list(self, request: httpx.Request) -> httpx.Response:
        status = request.url.params.get("status")
        results = [e for e in self.emails.values() if status is None or e["status"] == status]
        return httpx.Response(
            200,
            json={"count": len(results), "next": None, "previous": None, "results": results},
        )

    def _create(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        email = {"id": f"em_{len(self.emails) + 1}", "creation_date": "2025-01-10T00:00:00Z", **payload}
        self.emails[email["id"]] = email
        return httpx.Response(201, json=email)


@pytest.fixture
def fake_api() -> FakeButtondownAPI:
    """Fresh fake backend loaded with EMAIL_FIXTURES."""
    return FakeButtondownAPI()


@pytest.fixture
def email_fixtures() -> list[dict[str, Any]]:
    """Raw email payloads as the API returns them."""
    return copy.deepcopy(EMAIL_FIXTURES)


@pytest.fixture
def analytics_fixture() -> dict[str, Any]:
    return dict(ANALYTICS_FIXTURE)

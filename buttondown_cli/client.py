"""
Buttondown API Client.

Async HTTP client for the Buttondown newsletter API. Every call carries
``Authorization: Token <key>`` and a JSON content type. Responses are
decoded into the models in ``buttondown_cli.schemas``; failures are
raised as ``RemoteError``, ``TransportError`` or ``DecodeError``.

The client never reads the environment. Callers pass the API key in.

Usage:
    async with ButtondownClient(api_key="...") as client:
        page = await client.list_emails(EmailStatus.DRAFT)
        draft = await client.create_draft("Hello", title="Weekly")
"""

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from buttondown_cli.core.config_schema import DEFAULT_BASE_URL
from buttondown_cli.core.exceptions import (
    ConfigurationError,
    DecodeError,
    RemoteError,
    TransportError,
)
from buttondown_cli.core.logging import get_logger, log_with_source
from buttondown_cli.schemas.email import (
    ApiErrorPayload,
    Email,
    EmailAnalytics,
    EmailCreate,
    EmailPage,
    EmailSchedule,
    EmailStatus,
    EmailUnschedule,
    EmailUpdate,
)

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode(model: type[ModelT], data: Any) -> ModelT:
    """Validate parsed JSON against a response model."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Unexpected {model.__name__} payload from the Buttondown API: "
            f"{e.error_count()} validation error(s)"
        ) from e


def _error_message(response: httpx.Response) -> str:
    """Extract the detail string from an error response, or a status fallback."""
    try:
        detail = ApiErrorPayload.model_validate(response.json()).detail.strip()
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError):
        detail = ""
    return detail or f"API request failed: {response.status_code}"


class ButtondownClient:
    """
    HTTP client for the Buttondown API.

    Features:
    - Token authentication on every request
    - One request primitive, typed operations on top of it
    - Structured logging of requests/responses (the key is never logged)
    - Errors mapped to the application exception taxonomy

    Args:
        api_key: Buttondown API key. Raises ConfigurationError if empty.
        base_url: API base URL.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests pass httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError()

        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Token {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.default_headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ButtondownClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make an authenticated request and return the parsed JSON body.

        Args:
            endpoint: API path appended to the base URL (e.g., /emails)
            method: HTTP method (GET, POST, PATCH, DELETE)
            body: JSON body to send
            params: Query parameters
            headers: Extra headers, merged over the defaults

        Returns:
            Parsed JSON, or None when the response has no body

        Raises:
            RemoteError: On a non-2xx response
            TransportError: When no response was received
            DecodeError: When a 2xx body is not valid JSON
        """
        client = await self._get_client()
        url = f"{self.base_url}{endpoint}"

        log_with_source(logger, "api", "debug", "API request", method=method, endpoint=endpoint)

        try:
            response = await client.request(
                method,
                url,
                json=body,
                params=params,
                headers=headers,
            )
        except httpx.TransportError as e:
            log_with_source(
                logger,
                "api",
                "info",
                "API request failed",
                method=method,
                endpoint=endpoint,
                error=str(e) or type(e).__name__,
            )
            raise TransportError(
                f"Could not reach the Buttondown API: {str(e) or type(e).__name__}"
            ) from e

        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise RemoteError(_error_message(response), status_code=response.status_code)

        if not response.content:
            return None

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(
                f"Invalid JSON in response from {endpoint} (status {response.status_code})"
            ) from e

    # -------------------------------------------------------------------------
    # Emails
    # -------------------------------------------------------------------------

    async def list_emails(self, status: EmailStatus | None = None) -> EmailPage:
        """List emails, optionally filtered by status. Returns the first page only."""
        params = {"status": EmailStatus(status).value} if status else None
        data = await self.request("/emails", params=params)
        return _decode(EmailPage, data)

    async def list_drafts(self) -> EmailPage:
        return await self.list_emails(EmailStatus.DRAFT)

    async def list_scheduled(self) -> EmailPage:
        return await self.list_emails(EmailStatus.SCHEDULED)

    async def list_sent(self) -> EmailPage:
        return await self.list_emails(EmailStatus.SENT)

    async def create_draft(self, content: str, title: str | None = None) -> Email:
        """Create a draft. The subject defaults to "Untitled Draft"."""
        payload = EmailCreate(body=content, subject=title) if title else EmailCreate(body=content)
        data = await self.request("/emails", method="POST", body=payload.model_dump(mode="json"))
        return _decode(Email, data)

    async def get_analytics(self, email_id: str) -> EmailAnalytics:
        data = await self.request(f"/emails/{email_id}/analytics")
        return _decode(EmailAnalytics, data)

    async def get_email(self, email_id: str) -> Email:
        data = await self.request(f"/emails/{email_id}")
        return _decode(Email, data)

    async def schedule_draft(self, email_id: str, scheduled_time: str) -> Email:
        """
        Schedule an email.

        ``scheduled_time`` is an ISO-8601 timestamp. It is not validated
        here; the API decides whether it is acceptable.
        """
        payload = EmailSchedule(scheduled_for=scheduled_time, publish_date=scheduled_time)
        data = await self.request(
            f"/emails/{email_id}", method="PATCH", body=payload.model_dump(mode="json")
        )
        return _decode(Email, data)

    async def unschedule_draft(self, email_id: str) -> Email:
        """Clear the schedule and move the email back to draft."""
        payload = EmailUnschedule()
        data = await self.request(
            f"/emails/{email_id}", method="PATCH", body=payload.model_dump(mode="json")
        )
        return _decode(Email, data)

    async def update_email(
        self,
        email_id: str,
        subject: str | None = None,
        body: str | None = None,
    ) -> Email:
        """Partially update an email. Only the provided fields are sent."""
        payload = EmailUpdate(subject=subject, body=body)
        data = await self.request(
            f"/emails/{email_id}",
            method="PATCH",
            body=payload.model_dump(mode="json", exclude_none=True),
        )
        return _decode(Email, data)

    async def delete_email(self, email_id: str) -> None:
        await self.request(f"/emails/{email_id}", method="DELETE")

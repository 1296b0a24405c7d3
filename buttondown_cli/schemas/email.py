"""
Email Schemas.

Pydantic models for the Buttondown email resource, its analytics, the
paginated list envelope, request payloads, and the reduced summary view
printed by the ``list`` command.

Response models keep unknown fields (``extra="allow"``) so results can be
echoed back exactly as the API returned them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UNTITLED_DRAFT = "Untitled Draft"
UNTITLED = "Untitled"


class EmailStatus(str, Enum):
    """Lifecycle status of an email."""

    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"
    SENT = "sent"


class _ResponseBase(BaseModel):
    """Base for API responses. Unknown fields are preserved."""

    model_config = ConfigDict(extra="allow")

    def to_output(self) -> dict:
        """Serialize to JSON-compatible data containing only what the API sent."""
        return self.model_dump(mode="json", exclude_unset=True)


# =============================================================================
# Responses
# =============================================================================


class EmbeddedAnalytics(_ResponseBase):
    """Analytics summary embedded in an email resource."""

    recipients: int | None = None
    deliveries: int | None = None
    opens: int | None = None
    clicks: int | None = None
    open_rate: float | None = None
    click_rate: float | None = None
    unsubscribe_rate: float | None = None


class Email(_ResponseBase):
    """
    Email resource.

    Timestamps come under a primary name and a legacy alias depending on
    the account's API version. Both are accepted; the ``created``,
    ``modified`` and ``published`` properties prefer the primary name.
    """

    id: str
    subject: str | None = None
    body: str | None = None
    status: EmailStatus

    creation_date: str | None = None
    created_at: str | None = None
    modification_date: str | None = None
    updated_at: str | None = None
    publish_date: str | None = None
    published_at: str | None = None
    sent_at: str | None = None
    scheduled_for: str | None = None

    analytics: EmbeddedAnalytics | None = None

    @property
    def created(self) -> str | None:
        return self.creation_date or self.created_at

    @property
    def modified(self) -> str | None:
        return self.modification_date or self.updated_at

    @property
    def published(self) -> str | None:
        return self.publish_date or self.published_at


class EmailAnalytics(_ResponseBase):
    """Analytics for a single email. Recipients/deliveries depend on email age."""

    opens: int
    clicks: int
    unsubscribes: int
    open_rate: float
    click_rate: float
    unsubscribe_rate: float
    recipients: int | None = None
    deliveries: int | None = None


class EmailPage(_ResponseBase):
    """One page of the email list. Cursors are exposed but never followed."""

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[Email] = Field(default_factory=list)


class ApiErrorPayload(BaseModel):
    """Error body returned on non-2xx responses."""

    model_config = ConfigDict(extra="ignore")

    detail: str


# =============================================================================
# Requests
# =============================================================================


class EmailCreate(BaseModel):
    """Payload for creating a draft."""

    subject: str = Field(default=UNTITLED_DRAFT, description="Email subject")
    body: str = Field(description="Email body (markdown)")
    status: EmailStatus = EmailStatus.DRAFT


class EmailUpdate(BaseModel):
    """Partial update. Only fields that are set get sent."""

    subject: str | None = None
    body: str | None = None


class EmailSchedule(BaseModel):
    """Schedule payload. The timestamp is passed through unvalidated."""

    scheduled_for: str
    publish_date: str
    status: EmailStatus = EmailStatus.SCHEDULED


class EmailUnschedule(BaseModel):
    """Unschedule payload. ``scheduled_for`` is sent as an explicit null."""

    scheduled_for: None = None
    status: EmailStatus = EmailStatus.DRAFT


# =============================================================================
# List summary view
# =============================================================================


class AnalyticsSummary(BaseModel):
    recipients: int | None = None
    opens: int | None = None
    clicks: int | None = None


class EmailSummary(BaseModel):
    """Reduced view of an email used by the ``list`` command."""

    id: str
    subject: str
    status: EmailStatus
    created: str | None = None
    sent_at: str | None = None
    scheduled_for: str | None = None
    analytics: AnalyticsSummary | None = None

    @classmethod
    def from_email(cls, email: Email) -> "EmailSummary":
        analytics = None
        if email.analytics is not None:
            analytics = AnalyticsSummary(
                recipients=email.analytics.recipients,
                opens=email.analytics.opens,
                clicks=email.analytics.clicks,
            )
        return cls(
            id=email.id,
            subject=email.subject or UNTITLED,
            status=email.status,
            created=email.created,
            sent_at=email.published,
            scheduled_for=email.scheduled_for or None,
            analytics=analytics,
        )


class EmailListSummary(BaseModel):
    """Output of the ``list`` command."""

    total: int
    emails: list[EmailSummary]

    @classmethod
    def from_page(cls, page: EmailPage) -> "EmailListSummary":
        return cls(
            total=page.count,
            emails=[EmailSummary.from_email(email) for email in page.results],
        )

"""
Schemas Module.

Pydantic models for Buttondown API resources and request payloads.
"""

from buttondown_cli.schemas.email import (
    ApiErrorPayload,
    Email,
    EmailAnalytics,
    EmailCreate,
    EmailListSummary,
    EmailPage,
    EmailSchedule,
    EmailStatus,
    EmailSummary,
    EmailUnschedule,
    EmailUpdate,
)

__all__ = [
    "ApiErrorPayload",
    "Email",
    "EmailAnalytics",
    "EmailCreate",
    "EmailListSummary",
    "EmailPage",
    "EmailSchedule",
    "EmailStatus",
    "EmailSummary",
    "EmailUnschedule",
    "EmailUpdate",
]

"""
Email Commands.

One command per Buttondown email operation. Each command checks its
required arguments, runs a single API call, and prints the result as
pretty-printed JSON on stdout. Failures are reported once, on stderr,
with exit code 1.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from buttondown_cli.client import ButtondownClient
from buttondown_cli.core.config import get_api_base_url, get_settings
from buttondown_cli.core.exceptions import ApplicationError, UsageError
from buttondown_cli.core.logging import get_logger, log_with_source
from buttondown_cli.schemas.email import EmailListSummary, EmailStatus

logger = get_logger(__name__)
err_console = Console(stderr=True)


class StatusFilter(str, Enum):
    """Statuses accepted by ``list --status``."""

    DRAFT = "draft"
    SCHEDULED = "scheduled"
    SENT = "sent"


def build_client(api_key: str | None) -> ButtondownClient:
    """
    Build the API client for a command.

    The key comes from --api-key, else BUTTONDOWN_API_KEY (environment or
    config/.env). Base URL and timeout come from application.yaml.
    """
    key = api_key or get_settings().buttondown_api_key
    base_url, timeout = get_api_base_url()
    return ButtondownClient(api_key=key, base_url=base_url, timeout=timeout)


def print_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def report_error(error: ApplicationError) -> None:
    """Write a single-line error message to stderr."""
    log_with_source(logger, "cli", "debug", "Command failed", code=error.code, error=error.message)
    message = " ".join(error.message.split())
    err_console.print(f"Error: {escape(message)}", style="red", soft_wrap=True, highlight=False)


async def _call(api_key: str | None, operation: Callable[[ButtondownClient], Awaitable[Any]]) -> Any:
    async with build_client(api_key) as client:
        return await operation(client)


def _execute(
    ctx: typer.Context,
    operation: Callable[[ButtondownClient], Awaitable[Any]],
    *,
    usage: str,
    required: tuple[Any, ...] = (),
) -> Any:
    """Validate arguments, run the operation, and map failures to exit code 1."""
    api_key = (ctx.obj or {}).get("api_key")
    try:
        if not all(required):
            raise UsageError(f"Usage: {usage}")
        return asyncio.run(_call(api_key, operation))
    except ApplicationError as e:
        report_error(e)
        raise typer.Exit(1) from e


def list_command(
    ctx: typer.Context,
    status: Optional[StatusFilter] = typer.Option(
        None, "--status", "-s", help="Only list emails with this status", case_sensitive=False,
    ),
) -> None:
    """
    List emails (first page) as a summary view.

    Examples:
        buttondown list
        buttondown list --status draft
    """
    email_status = EmailStatus(status.value) if status else None
    page = _execute(
        ctx,
        lambda client: client.list_emails(email_status),
        usage="list [--status draft|scheduled|sent]",
    )
    print_json(EmailListSummary.from_page(page).model_dump(mode="json"))


def create_command(
    ctx: typer.Context,
    title: Optional[str] = typer.Argument(None, help="Draft subject"),
    content: Optional[str] = typer.Argument(None, help="Draft body (markdown)"),
) -> None:
    """
    Create a draft.

    Examples:
        buttondown create "Weekly update" "Hello readers"
    """
    draft = _execute(
        ctx,
        lambda client: client.create_draft(content, title),
        usage="create <title> <content>",
        required=(content,),
    )
    print_json(draft.to_output())


def analytics_command(
    ctx: typer.Context,
    email_id: Optional[str] = typer.Argument(None, metavar="EMAIL_ID", help="Email identifier"),
) -> None:
    """Show analytics for an email."""
    analytics = _execute(
        ctx,
        lambda client: client.get_analytics(email_id),
        usage="analytics <email-id>",
        required=(email_id,),
    )
    print_json(analytics.to_output())


def schedule_command(
    ctx: typer.Context,
    email_id: Optional[str] = typer.Argument(None, metavar="EMAIL_ID", help="Email identifier"),
    scheduled_time: Optional[str] = typer.Argument(
        None, metavar="ISO_DATETIME", help="Send time, e.g. 2025-01-01T09:00:00Z",
    ),
) -> None:
    """
    Schedule an email for sending.

    Examples:
        buttondown schedule 3f1c... 2025-01-01T09:00:00Z
    """
    email = _execute(
        ctx,
        lambda client: client.schedule_draft(email_id, scheduled_time),
        usage="schedule <email-id> <iso-datetime>",
        required=(email_id, scheduled_time),
    )
    print_json(email.to_output())


def unschedule_command(
    ctx: typer.Context,
    email_id: Optional[str] = typer.Argument(None, metavar="EMAIL_ID", help="Email identifier"),
) -> None:
    """Unschedule an email and move it back to draft."""
    email = _execute(
        ctx,
        lambda client: client.unschedule_draft(email_id),
        usage="unschedule <email-id>",
        required=(email_id,),
    )
    print_json(email.to_output())


def get_command(
    ctx: typer.Context,
    email_id: Optional[str] = typer.Argument(None, metavar="EMAIL_ID", help="Email identifier"),
) -> None:
    """Show email details."""
    email = _execute(
        ctx,
        lambda client: client.get_email(email_id),
        usage="get <email-id>",
        required=(email_id,),
    )
    print_json(email.to_output())


def update_command(
    ctx: typer.Context,
    email_id: Optional[str] = typer.Argument(None, metavar="EMAIL_ID", help="Email identifier"),
    subject: Optional[str] = typer.Option(None, "--subject", help="New subject"),
    body: Optional[str] = typer.Option(None, "--body", help="New body"),
) -> None:
    """
    Update an email's subject and/or body.

    Only the options given are sent.

    Examples:
        buttondown update 3f1c... --subject "New subject"
    """
    email = _execute(
        ctx,
        lambda client: client.update_email(email_id, subject=subject, body=body),
        usage="update <email-id> [--subject <subject>] [--body <body>]",
        required=(email_id, subject is not None or body is not None),
    )
    print_json(email.to_output())


def delete_command(
    ctx: typer.Context,
    email_id: Optional[str] = typer.Argument(None, metavar="EMAIL_ID", help="Email identifier"),
) -> None:
    """Delete an email."""
    _execute(
        ctx,
        lambda client: client.delete_email(email_id),
        usage="delete <email-id>",
        required=(email_id,),
    )
    typer.echo(f"Email {email_id} deleted")

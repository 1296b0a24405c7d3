"""
Buttondown CLI Application.

Typer app wiring the email commands, global options, and logging setup.

Usage:
    buttondown                                     # Show help
    buttondown list [--status draft|scheduled|sent]
    buttondown create <title> <content>
    buttondown analytics <email-id>
    buttondown schedule <email-id> <iso-datetime>
    buttondown unschedule <email-id>
    buttondown get <email-id>
    buttondown update <email-id> [--subject <s>] [--body <b>]
    buttondown delete <email-id>

Options:
    --api-key         Buttondown API key (default: BUTTONDOWN_API_KEY)
    --verbose, -v     Enable verbose output (INFO logging on stderr)
    --debug, -d       Enable debug mode (DEBUG logging on stderr)
    --help            Show help message
"""

from typing import Any, Optional

import typer
from typer.core import TyperGroup

from buttondown_cli.cli.commands import COMMANDS
from buttondown_cli.cli.commands.emails import err_console, report_error
from buttondown_cli.core.exceptions import ApplicationError, UsageError
from buttondown_cli.core.logging import setup_logging


class CommandGroup(TyperGroup):
    """
    Group that keeps every command-line mistake at exit code 1.

    Unknown commands print ``Unknown command: <name>``. Parser errors
    (bad option values, unknown options, extra arguments) print a single
    ``Error: ...`` line instead of the framework's usage box.
    """

    def resolve_command(self, ctx: typer.Context, args: list[str]):
        if args and not args[0].startswith("-") and not ctx.resilient_parsing:
            name = args[0]
            if self.get_command(ctx, name) is None:
                err_console.print(f"Unknown command: {name}", style="red", soft_wrap=True, highlight=False, markup=False)
                raise typer.Exit(1)
        return super().resolve_command(ctx, args)

    def make_context(self, info_name: Optional[str], args: list[str], parent: Any = None, **extra: Any):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except typer.TyperException as e:
            _report_usage(e)

    def invoke(self, ctx: typer.Context) -> Any:
        try:
            return super().invoke(ctx)
        except typer.TyperException as e:
            _report_usage(e)


def _report_usage(error: typer.TyperException) -> None:
    report_error(UsageError(error.format_message()))
    raise typer.Exit(1) from error


app = typer.Typer(
    name="buttondown",
    cls=CommandGroup,
    help="Buttondown CLI - manage newsletter drafts, schedules and analytics.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
)

for _name, _command in COMMANDS.items():
    app.command(_name)(_command)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="Buttondown API key. Defaults to BUTTONDOWN_API_KEY.",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Buttondown CLI.

    Every command prints JSON on stdout. Errors go to stderr with exit code 1.
    """
    if ctx.invoked_subcommand is None:
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
        raise typer.Exit(0)

    try:
        if debug:
            setup_logging(level="DEBUG", format_type="console")
            err_console.print("[dim]Debug mode enabled[/dim]")
        elif verbose:
            setup_logging(level="INFO", format_type="console")
        else:
            setup_logging()
    except ApplicationError as e:
        report_error(e)
        raise typer.Exit(1) from e

    ctx.obj = {"api_key": api_key}


def run() -> None:
    """Console script entry point."""
    app()

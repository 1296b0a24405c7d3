"""
CLI Module.

Command-line client built with Typer for the Buttondown newsletter API.

Architecture:
- CLI is a thin presentation layer over ButtondownClient
- One command, one API call per run
- Results as JSON on stdout, errors and logs on stderr

Usage:
    buttondown --help
    buttondown list --status draft
    buttondown get <email-id>
"""

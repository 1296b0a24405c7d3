"""
CLI Commands.

Maps each command name to its implementation.
"""

from buttondown_cli.cli.commands.emails import (
    analytics_command,
    create_command,
    delete_command,
    get_command,
    list_command,
    schedule_command,
    unschedule_command,
    update_command,
)

COMMANDS = {
    "list": list_command,
    "create": create_command,
    "analytics": analytics_command,
    "schedule": schedule_command,
    "unschedule": unschedule_command,
    "get": get_command,
    "update": update_command,
    "delete": delete_command,
}

__all__ = ["COMMANDS"]

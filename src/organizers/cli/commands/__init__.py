"""CLI command implementations for the organizers application.

This package contains subcommands for the organizers CLI, including:
- validate: Validate a design file
"""

from organizers.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]

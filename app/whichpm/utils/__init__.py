"""Utility modules for whichpm.

Only the subprocess helpers are re-exported here; the Rich consoles in
``whichpm.utils.formatting`` load the theme and are imported explicitly.
"""

from whichpm.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "run_command",
]

"""Exception hierarchy for whichpm."""


class WhichpmError(Exception):
    """Base exception for all whichpm errors."""


class CommandNotFoundError(WhichpmError):
    """Raised when a command does not resolve to any executable.

    Attributes:
        command: The command name that could not be resolved.
    """

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command '{command}' not found in PATH")

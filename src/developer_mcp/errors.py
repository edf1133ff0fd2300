"""Error types raised by the developer MCP server."""


class ToolError(Exception):
    """Base exception for tool-related errors."""
    pass


class UnknownToolError(ToolError):
    """The requested tool is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown or invalid tool name: {name}")


class InvalidArgumentError(ToolError):
    """A tool argument is missing, mistyped or outside its allowed values."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid argument '{field}': {message}")


class CommandRefusedError(ToolError):
    """The policy filter refused to run a command."""

    def __init__(self, command: str, rationale: str = "") -> None:
        self.command = command
        self.rationale = rationale
        super().__init__(f"Refused to run potentially dangerous command:\n`{command}`")


class CommandExecutionError(ToolError):
    """Command execution errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Command failed:\n{message}")


class FileOperationError(ToolError):
    """A filesystem operation failed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(message)

"""Developer MCP - local developer tools exposed over the Model Context Protocol."""

__version__ = "1.0.0"

from .filesystem import FileSystem
from .handlers import DeveloperTools
from .registry import Dispatcher, ToolRegistry, ToolRequest, build_registry
from .security import CommandPolicy
from .shell import ShellExecutor

__all__ = [
    "CommandPolicy",
    "DeveloperTools",
    "Dispatcher",
    "FileSystem",
    "ShellExecutor",
    "ToolRegistry",
    "ToolRequest",
    "build_registry",
]

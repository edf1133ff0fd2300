"""Tool registry and dispatcher.

The registry maps tool names to a descriptor (name, description, input model)
and a handler. It is filled once at startup by ``build_registry`` and sealed.
The dispatcher validates arguments against the descriptor's input model before
the handler runs, then wraps whatever the handler returns in a ToolResult.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type

from pydantic import ValidationError

from .errors import InvalidArgumentError, UnknownToolError
from .handlers import DeveloperTools
from .models import (
    CreateFileInput,
    CreateProjectInput,
    ExplainCodeInput,
    GenerateComponentInput,
    GetFileListInput,
    HandlerResult,
    RunCommandInDirInput,
    RunCommandInput,
    SearchCodeInput,
    ToolInput,
    ToolResult,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[HandlerResult]]


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_model: Type[ToolInput]

    @property
    def argument_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema()


@dataclass(frozen=True)
class ToolRequest:
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolRegistration:
    descriptor: ToolDescriptor
    handler: Handler


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, ToolRegistration] = {}
        self._sealed = False

    def register(self, descriptor: ToolDescriptor, handler: Handler) -> None:
        if self._sealed:
            raise RuntimeError(f"Cannot register '{descriptor.name}': registry is sealed")
        if descriptor.name in self._tools:
            raise ValueError(f"Tool '{descriptor.name}' is already registered")
        self._tools[descriptor.name] = ToolRegistration(descriptor, handler)

    def seal(self) -> "ToolRegistry":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, name: str) -> Optional[ToolRegistration]:
        return self._tools.get(name)

    def descriptors(self) -> List[ToolDescriptor]:
        """Descriptors in registration order."""
        return [registration.descriptor for registration in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def _validate_arguments(descriptor: ToolDescriptor, arguments: Optional[Dict[str, Any]]) -> ToolInput:
    try:
        return descriptor.input_model.model_validate(arguments if arguments is not None else {})
    except ValidationError as e:
        # Report the first offending field only
        error = e.errors()[0]
        field_name = ".".join(str(part) for part in error["loc"]) or "<arguments>"
        raise InvalidArgumentError(field_name, error["msg"]) from e


class Dispatcher:
    """Routes a ToolRequest to its handler and returns a uniform ToolResult."""

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    async def dispatch(self, request: ToolRequest) -> ToolResult:
        """Dispatch one request.

        Raises UnknownToolError or InvalidArgumentError before any handler runs.
        Every other outcome, including handler failures, is returned as text.
        """
        registration = self.registry.get(request.name)
        if registration is None:
            logger.warning("Unknown tool requested: %s", request.name)
            raise UnknownToolError(request.name)

        validated = _validate_arguments(registration.descriptor, request.arguments)
        logger.info("Dispatching %s", request.name)

        try:
            result = await registration.handler(validated)
        except Exception as e:
            logger.exception("Handler for %s raised", request.name)
            return ToolResult.from_text(f"❌ Internal error while running {request.name}: {e}")

        if not result.success:
            logger.info("%s failed: %s", request.name, result.error)
            return ToolResult.from_text(f"❌ {result.error}")
        return ToolResult.from_text(result.text, result.follow_ups)


def build_registry(tools: DeveloperTools) -> ToolRegistry:
    """Register every tool against its handler and seal the registry."""
    registry = ToolRegistry()
    registry.register(
        ToolDescriptor("create-file", "Create a file with given content", CreateFileInput),
        tools.create_file,
    )
    registry.register(
        ToolDescriptor("get-file-list", "List files in a directory", GetFileListInput),
        tools.get_file_list,
    )
    registry.register(
        ToolDescriptor("search-code", "Search for a keyword in code files", SearchCodeInput),
        tools.search_code,
    )
    registry.register(
        ToolDescriptor("explain-code", "Read code from a file and explain it", ExplainCodeInput),
        tools.explain_code,
    )
    registry.register(
        ToolDescriptor("run-command", "Run a safe shell command and return output", RunCommandInput),
        tools.run_command,
    )
    registry.register(
        ToolDescriptor(
            "run-command-in-dir",
            "Run a safe shell command inside a given directory and return output",
            RunCommandInDirInput,
        ),
        tools.run_command_in_dir,
    )
    registry.register(
        ToolDescriptor(
            "generate-component", "Generate a component for a chosen framework", GenerateComponentInput
        ),
        tools.generate_component,
    )
    registry.register(
        ToolDescriptor("create-project", "Generate a starter project", CreateProjectInput),
        tools.create_project,
    )
    return registry.seal()

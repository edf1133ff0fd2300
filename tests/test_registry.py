"""
Tests for ToolRegistry and Dispatcher.

The dispatcher must reject unknown tools and malformed arguments before any
handler runs, and must turn every handler outcome into a text envelope.
"""

import pytest

from developer_mcp.errors import FileOperationError, InvalidArgumentError, UnknownToolError
from developer_mcp.models import CreateFileInput, GenerateComponentInput, HandlerResult, ToolResult
from developer_mcp.registry import Dispatcher, ToolDescriptor, ToolRegistry, ToolRequest


EXPECTED_TOOLS = [
    "create-file",
    "get-file-list",
    "search-code",
    "explain-code",
    "run-command",
    "run-command-in-dir",
    "generate-component",
    "create-project",
]


async def _echo_handler(args):
    return HandlerResult.ok(f"got {args.filename}")


class TestToolRegistry:
    """Test registration rules."""

    def test_catalog(self, dispatcher):
        """All tools are registered in catalog order and the registry is sealed."""
        registry = dispatcher.registry

        assert [d.name for d in registry.descriptors()] == EXPECTED_TOOLS
        assert registry.sealed

    def test_duplicate_name_rejected(self):
        """Tool names are unique."""
        registry = ToolRegistry()
        descriptor = ToolDescriptor("create-file", "Create", CreateFileInput)
        registry.register(descriptor, _echo_handler)

        with pytest.raises(ValueError):
            registry.register(descriptor, _echo_handler)

    def test_sealed_registry_rejects_registration(self):
        """Nothing can be added after sealing."""
        registry = ToolRegistry().seal()

        with pytest.raises(RuntimeError):
            registry.register(ToolDescriptor("create-file", "Create", CreateFileInput), _echo_handler)

    def test_argument_schema(self):
        """The schema carries required fields, defaults and allowed values."""
        schema = ToolDescriptor("generate-component", "Generate", GenerateComponentInput).argument_schema

        assert list(schema["properties"]) == ["name", "folder", "framework"]
        assert schema["required"] == ["name", "framework"]
        assert schema["properties"]["folder"]["default"] == "src/components"
        assert schema["$defs"]["ComponentFramework"]["enum"] == ["react", "angular", "svelte"]


class TestDispatcherValidation:
    """Test validation happens before any side effect."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher, executor):
        """Unknown tool names fail fast."""
        with pytest.raises(UnknownToolError) as exc_info:
            await dispatcher.dispatch(ToolRequest("delete-everything", {"command": "ls"}))

        assert exc_info.value.name == "delete-everything"
        assert executor.calls == []

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, dispatcher, workdir):
        """A missing required argument names the field."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await dispatcher.dispatch(ToolRequest("create-file", {"content": "hello"}))

        assert exc_info.value.field == "filename"
        assert list(workdir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_wrong_type(self, dispatcher, workdir):
        """Numbers are not silently turned into strings."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await dispatcher.dispatch(ToolRequest("create-file", {"filename": 5, "content": "x"}))

        assert exc_info.value.field == "filename"
        assert list(workdir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_value_outside_enumeration(self, dispatcher, workdir):
        """Framework must be one of the allowed values."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await dispatcher.dispatch(
                ToolRequest("generate-component", {"name": "card", "framework": "vue"})
            )

        assert exc_info.value.field == "framework"
        assert list(workdir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_malformed_command_never_runs(self, dispatcher, executor):
        """A malformed run-command never reaches the executor."""
        with pytest.raises(InvalidArgumentError):
            await dispatcher.dispatch(ToolRequest("run-command", {"command": ["ls"]}))

        assert executor.calls == []

    @pytest.mark.asyncio
    async def test_defaults_applied(self, dispatcher, workdir):
        """Absent optional arguments take their defaults."""
        (workdir / "a.txt").write_text("a")

        result = await dispatcher.dispatch(ToolRequest("get-file-list", {}))

        assert result.text == f"📂 Files in {workdir}:\na.txt"

    @pytest.mark.asyncio
    async def test_extra_arguments_ignored(self, dispatcher, workdir):
        """Unknown extra arguments are dropped."""
        result = await dispatcher.dispatch(
            ToolRequest("create-file", {"filename": "x.txt", "content": "hi", "mode": "0600"})
        )

        assert result.text.startswith("✅ File created:")
        assert (workdir / "x.txt").read_text() == "hi"


class TestDispatcherEnvelope:
    """Test every outcome comes back as a ToolResult."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,arguments",
        [
            ("create-file", {"filename": "a.ts", "content": "x"}),
            ("get-file-list", {"folder": "."}),
            ("search-code", {"keyword": "x"}),
            ("explain-code", {"path": "missing.ts"}),
            ("run-command", {"command": "echo hi"}),
            ("run-command-in-dir", {"path": ".", "command": "echo hi"}),
            ("generate-component", {"name": "card", "framework": "svelte"}),
            ("create-project", {"name": "demo", "framework": "svelte"}),
        ],
    )
    async def test_each_tool_produces_one_result(self, dispatcher, name, arguments):
        """Valid requests for every tool produce exactly one text result."""
        result = await dispatcher.dispatch(ToolRequest(name, arguments))

        assert isinstance(result, ToolResult)
        assert len(result.content) == 1
        assert result.content[0].type == "text"

    @pytest.mark.asyncio
    async def test_handler_failure_rendered_as_text(self):
        """A failed HandlerResult becomes a text result without follow-ups."""
        async def failing(args):
            return HandlerResult.failed(FileOperationError(args.filename, "disk full"))

        registry = ToolRegistry()
        registry.register(ToolDescriptor("create-file", "Create", CreateFileInput), failing)

        result = await Dispatcher(registry.seal()).dispatch(
            ToolRequest("create-file", {"filename": "a", "content": "b"})
        )

        assert result.text == "❌ disk full"
        assert result.suggested_follow_ups is None

    @pytest.mark.asyncio
    async def test_handler_crash_converted(self):
        """An unexpected exception is reported as text, not raised."""
        async def crashing(args):
            raise KeyError("boom")

        registry = ToolRegistry()
        registry.register(ToolDescriptor("create-file", "Create", CreateFileInput), crashing)

        result = await Dispatcher(registry.seal()).dispatch(
            ToolRequest("create-file", {"filename": "a", "content": "b"})
        )

        assert result.text.startswith("❌ Internal error while running create-file:")
        assert "boom" in result.text

    @pytest.mark.asyncio
    async def test_handler_receives_validated_model(self):
        """Handlers get the validated input model."""
        registry = ToolRegistry()
        registry.register(ToolDescriptor("create-file", "Create", CreateFileInput), _echo_handler)

        result = await Dispatcher(registry.seal()).dispatch(
            ToolRequest("create-file", {"filename": "notes.md", "content": ""})
        )

        assert result.text == "got notes.md"

"""Shared fixtures: a dispatcher rooted in a temporary workspace with a recording executor."""

from typing import List, Optional, Tuple

import pytest

from developer_mcp.errors import CommandExecutionError
from developer_mcp.filesystem import FileSystem
from developer_mcp.handlers import DeveloperTools
from developer_mcp.models import CommandOutput
from developer_mcp.registry import Dispatcher, build_registry


class RecordingExecutor:
    """Stands in for ShellExecutor and records every command it is asked to run."""

    def __init__(self, output: Optional[CommandOutput] = None, error: Optional[str] = None) -> None:
        self.calls: List[Tuple[str, Optional[str]]] = []
        self.output = output if output is not None else CommandOutput(stdout="ok\n")
        self.error = error

    async def execute_command(self, command: str, working_dir: Optional[str] = None) -> CommandOutput:
        self.calls.append((command, working_dir))
        if self.error is not None:
            raise CommandExecutionError(self.error)
        return self.output


@pytest.fixture
def workdir(tmp_path):
    return tmp_path.resolve()


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def tools(workdir, executor):
    return DeveloperTools(filesystem=FileSystem(base_dir=str(workdir)), shell=executor)


@pytest.fixture
def dispatcher(tools):
    return Dispatcher(build_registry(tools))

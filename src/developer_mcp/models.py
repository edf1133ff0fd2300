"""Pydantic models for tool inputs, handler results and response envelopes."""

from enum import Enum
from typing import Any, List, Optional

from mcp.types import TextContent
from pydantic import BaseModel, ConfigDict, Field

from .errors import ToolError


# --- Framework choices ---

class ComponentFramework(str, Enum):
    REACT = "react"
    ANGULAR = "angular"
    SVELTE = "svelte"


class ProjectFramework(str, Enum):
    REACT = "react"
    SPRINGBOOT = "springboot"
    SVELTE = "svelte"


class ReactTooling(str, Enum):
    VITE = "vite"
    CRA = "cra"


# --- Pydantic Models for Tool Inputs ---

class ToolInput(BaseModel):
    # Unknown extra arguments are dropped rather than rejected
    model_config = ConfigDict(extra="ignore")


class CreateFileInput(ToolInput):
    filename: str = Field(..., description="Path of the file to create")
    content: str = Field(..., description="Content to write")


class GetFileListInput(ToolInput):
    folder: str = Field(".", description="Directory to list")


class SearchCodeInput(ToolInput):
    keyword: str = Field(..., description="Literal text to search for")
    folder: str = Field(".", description="Directory whose code files are searched (not recursive)")


class ExplainCodeInput(ToolInput):
    path: str = Field(..., description="Path to the code file")


class RunCommandInput(ToolInput):
    command: str = Field(..., description="Shell command to execute (safe only)")


class RunCommandInDirInput(ToolInput):
    path: str = Field(..., description="Directory to run the command in")
    command: str = Field(..., description="Shell command to execute (safe only)")


class GenerateComponentInput(ToolInput):
    name: str = Field(..., description="Component name")
    folder: str = Field("src/components", description="Folder to create the component in")
    framework: ComponentFramework = Field(..., description="Framework to use")


class CreateProjectInput(ToolInput):
    name: str = Field(..., description="Project name")
    framework: ProjectFramework = Field(..., description="Framework to scaffold")
    tooling: Optional[ReactTooling] = Field(None, description="Tooling for React projects")

# --- End Pydantic Models ---


class FollowUp(BaseModel):
    """A next tool call proposed to the agent. Never executed by the server."""
    name: str
    description: str
    tool_choice: str
    parameters: dict[str, Any]


class CommandOutput(BaseModel):
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


class HandlerResult(BaseModel):
    """Outcome of a single handler call: either text (and follow-ups) or an error."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    text: str = ""
    error: Optional[ToolError] = None
    follow_ups: List[FollowUp] = Field(default_factory=list)

    @classmethod
    def ok(cls, text: str, follow_ups: Optional[List[FollowUp]] = None) -> "HandlerResult":
        return cls(success=True, text=text, follow_ups=follow_ups or [])

    @classmethod
    def failed(cls, error: ToolError) -> "HandlerResult":
        return cls(success=False, error=error)


class ToolResult(BaseModel):
    """The envelope returned for every dispatched request."""
    content: List[TextContent]
    suggested_follow_ups: Optional[List[FollowUp]] = None

    @classmethod
    def from_text(cls, text: str, follow_ups: Optional[List[FollowUp]] = None) -> "ToolResult":
        return cls(
            content=[TextContent(type="text", text=text)],
            suggested_follow_ups=follow_ups or None,
        )

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

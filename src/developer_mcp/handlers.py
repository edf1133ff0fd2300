"""Tool implementations.

Each handler takes its validated input model and returns a HandlerResult.
Expected failures (refusals, command failures, filesystem errors) come back as
failed results; anything else raising out of a handler is a bug.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from . import templates
from .errors import CommandExecutionError, CommandRefusedError, FileOperationError
from .filesystem import FileSystem
from .models import (
    ComponentFramework,
    CreateFileInput,
    CreateProjectInput,
    ExplainCodeInput,
    FollowUp,
    GenerateComponentInput,
    GetFileListInput,
    HandlerResult,
    ProjectFramework,
    ReactTooling,
    RunCommandInDirInput,
    RunCommandInput,
    SearchCodeInput,
)
from .security import CommandPolicy
from .shell import ShellExecutor

logger = logging.getLogger(__name__)

CODE_FILE_EXTENSIONS = (".js", ".ts", ".tsx")
NO_OUTPUT = "(no output)"
RUN_IN_DIR_TOOL = "run-command-in-dir"


def to_component_name(name: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    return name[:1].upper() + name[1:]


class DeveloperTools:
    def __init__(
        self,
        filesystem: FileSystem,
        shell: ShellExecutor,
        policy: Optional[CommandPolicy] = None,
    ) -> None:
        self.filesystem = filesystem
        self.shell = shell
        self.policy = policy or CommandPolicy()

    # --- File tools ---

    async def create_file(self, args: CreateFileInput) -> HandlerResult:
        """Create or overwrite a file."""
        try:
            full_path = await self.filesystem.write_file(args.filename, args.content)
        except FileOperationError as e:
            return HandlerResult.failed(e)
        return HandlerResult.ok(f"✅ File created: {full_path}")

    async def get_file_list(self, args: GetFileListInput) -> HandlerResult:
        """List the immediate entries of a folder."""
        full_path = self.filesystem.resolve(args.folder)
        try:
            names = await self.filesystem.list_directory(args.folder)
        except FileOperationError as e:
            return HandlerResult.failed(
                FileOperationError(e.path, f"Error reading directory: {e.message}")
            )
        listing = "\n".join(names)
        return HandlerResult.ok(f"📂 Files in {full_path}:\n{listing}")

    async def search_code(self, args: SearchCodeInput) -> HandlerResult:
        """Search code files directly inside a folder for a literal keyword."""
        full_path = self.filesystem.resolve(args.folder)
        try:
            names = await self.filesystem.list_directory(args.folder)
        except FileOperationError as e:
            return HandlerResult.failed(e)

        matches: List[str] = []
        for name in names:
            if os.path.splitext(name)[1] not in CODE_FILE_EXTENSIONS:
                continue
            matches.extend(await self.filesystem.search_keyword_in_file(full_path / name, args.keyword))

        if not matches:
            return HandlerResult.ok(f'🔍 No matches for "{args.keyword}" in {full_path}')
        return HandlerResult.ok(f'🔍 Matches for "{args.keyword}":\n' + "\n".join(matches))

    async def explain_code(self, args: ExplainCodeInput) -> HandlerResult:
        """Return a file's content for the agent to analyze."""
        try:
            content = await self.filesystem.read_file(args.path)
        except FileOperationError as e:
            return HandlerResult.failed(e)
        return HandlerResult.ok(f"📄 File content for analysis:\n\n{content}")

    # --- Command tools ---

    async def run_command(self, args: RunCommandInput) -> HandlerResult:
        """Run a shell command that passes the policy filter."""
        return await self._run_checked(args.command)

    async def run_command_in_dir(self, args: RunCommandInDirInput) -> HandlerResult:
        """Run a shell command that passes the policy filter inside a directory."""
        return await self._run_checked(args.command, self.filesystem.resolve(args.path))

    async def _run_checked(self, command: str, working_dir: Optional[Path] = None) -> HandlerResult:
        # The policy check must precede any process creation
        try:
            self.policy.check(command)
        except CommandRefusedError as e:
            return HandlerResult.failed(e)

        if working_dir is not None and not working_dir.is_dir():
            return HandlerResult.failed(
                FileOperationError(str(working_dir), f"Path is not a directory: {working_dir}")
            )

        try:
            output = await self.shell.execute_command(
                command, str(working_dir) if working_dir is not None else None
            )
        except CommandExecutionError as e:
            return HandlerResult.failed(e)

        return HandlerResult.ok(f"🖥️ Output:\n{output.stdout or output.stderr or NO_OUTPUT}")

    # --- Scaffolding tools ---

    async def generate_component(self, args: GenerateComponentInput) -> HandlerResult:
        """Generate a component for a chosen framework."""
        component_name = to_component_name(args.name)
        try:
            target_folder = await self.filesystem.create_directory(args.folder)

            if args.framework is ComponentFramework.ANGULAR:
                await self._write(target_folder / f"{args.name}.component.ts",
                                  templates.angular_component_ts(args.name, component_name))
                await self._write(target_folder / f"{args.name}.component.html",
                                  templates.angular_component_html(component_name))
                await self._write(target_folder / f"{args.name}.component.css",
                                  templates.angular_component_css(component_name))
                return HandlerResult.ok(f"✅ Angular component created in: {target_folder}")

            if args.framework is ComponentFramework.REACT:
                file_path = target_folder / f"{component_name}.tsx"
                content = templates.react_component(component_name)
            else:
                file_path = target_folder / f"{component_name}.svelte"
                content = templates.svelte_component(component_name)
            await self._write(file_path, content)
        except FileOperationError as e:
            return HandlerResult.failed(e)

        framework_label = to_component_name(args.framework.value)
        return HandlerResult.ok(f"✅ {framework_label} component created: {file_path}")

    async def create_project(self, args: CreateProjectInput) -> HandlerResult:
        """Generate a starter project, or propose the external generator for CRA."""
        name = args.name
        try:
            root_path = await self.filesystem.create_directory(name)

            if args.framework is ProjectFramework.REACT and args.tooling is ReactTooling.CRA:
                # CRA is not scaffolded here; the generator command is only proposed
                generator = f"npx create-react-app {name} --template typescript"
                return HandlerResult.ok(
                    f'📦 To scaffold a Create React App project named "{name}", run:\n\n'
                    f"`{generator}`\n\nWould you like me to run that now?",
                    [FollowUp(
                        name="Run Create React App",
                        description=f"Run CRA init for {name}",
                        tool_choice=RUN_IN_DIR_TOOL,
                        parameters={"path": str(root_path.parent), "command": generator},
                    )],
                )

            if args.framework is ProjectFramework.REACT:
                await self._scaffold_vite_react(root_path, name)
            elif args.framework is ProjectFramework.SVELTE:
                await self._scaffold_svelte(root_path, name)
            else:
                await self._scaffold_springboot(root_path, name)
        except FileOperationError as e:
            return HandlerResult.failed(
                FileOperationError(e.path, f"Failed to create project: {e.message}")
            )

        install_command = "mvn install" if args.framework is ProjectFramework.SPRINGBOOT else "npm install"
        return HandlerResult.ok(
            f"✅ {args.framework.value} project created at: {root_path}\n\n"
            f"Would you like to run `{install_command}` now?",
            [FollowUp(
                name="Run install command",
                description=f"Run {install_command} in {name}",
                tool_choice=RUN_IN_DIR_TOOL,
                parameters={"path": str(root_path), "command": install_command},
            )],
        )

    async def _scaffold_vite_react(self, root_path: Path, name: str) -> None:
        await self.filesystem.create_directory(str(root_path / "src"))
        await self._write(root_path / "package.json", templates.vite_react_package_json(name))
        await self._write(root_path / "index.html", templates.vite_react_index_html(name))
        await self._write(root_path / "src" / "main.tsx", templates.vite_react_main_tsx(name))

    async def _scaffold_svelte(self, root_path: Path, name: str) -> None:
        await self.filesystem.create_directory(str(root_path / "src"))
        await self._write(root_path / "package.json", templates.svelte_package_json(name))
        await self._write(root_path / "index.html", templates.svelte_index_html(name))
        await self._write(root_path / "src" / "App.svelte", templates.svelte_app(name))
        await self._write(root_path / "src" / "main.js", templates.SVELTE_MAIN_JS)

    async def _scaffold_springboot(self, root_path: Path, name: str) -> None:
        java_root = root_path / "src" / "main" / "java" / "com" / "example" / name.lower()
        resources = root_path / "src" / "main" / "resources"
        await self.filesystem.create_directory(str(java_root))
        await self.filesystem.create_directory(str(resources))
        await self._write(root_path / "pom.xml", templates.springboot_pom(name))
        await self._write(java_root / f"{name}Application.java", templates.springboot_application(name))
        await self._write(resources / "application.properties", "")

    async def _write(self, path: Path, content: str) -> None:
        await self.filesystem.write_file(str(path), content)

"""Shell command execution."""

import asyncio
import logging
from typing import Optional

from .errors import CommandExecutionError
from .models import CommandOutput

logger = logging.getLogger(__name__)


class ShellExecutor:
    """Runs commands through the host's default shell and waits for them to finish.

    There is no timeout: a command that never exits blocks the request that
    started it.
    """

    def __init__(self, working_dir: Optional[str] = None) -> None:
        self.working_dir = working_dir

    async def execute_command(self, command: str, working_dir: Optional[str] = None) -> CommandOutput:
        cwd = working_dir or self.working_dir
        logger.info("Running command %r in %s", command, cwd or "<cwd>")
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
            stdout_bytes, stderr_bytes = await process.communicate()
        except OSError as e:
            logger.error("Failed to start command %r: %s", command, e)
            raise CommandExecutionError(str(e)) from e

        stdout = stdout_bytes.decode("utf-8", errors="replace")
        stderr = stderr_bytes.decode("utf-8", errors="replace")
        exit_code = process.returncode if process.returncode is not None else -1

        if exit_code != 0:
            logger.info("Command %r exited with code %d", command, exit_code)
            raise CommandExecutionError(f"Command failed: {command}\n{stderr}".rstrip())

        return CommandOutput(stdout=stdout, stderr=stderr, exit_code=exit_code)

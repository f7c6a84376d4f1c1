"""External command execution for stellar-initialize."""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .exceptions import CommandFailedError, ToolNotFoundError
from .types import ProcessResult

LOG = logging.getLogger(__name__)


class ProcessRunner:
    """
    Runs external tools synchronously.

    Output is streamed to the terminal unless `capture` is requested. Every
    command is logged before it starts. Tests substitute any object with a
    compatible `run` method.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        """
        Args:
            env: Environment passed to every command (defaults to inheriting
                 the current process environment)
        """
        self._env = dict(env) if env is not None else None

    def run(
        self,
        command: List[str],
        cwd: Optional[Union[Path, str]] = None,
        capture: bool = False,
        check: bool = True,
    ) -> ProcessResult:
        """
        Execute a command and wait for it to exit.

        Args:
            command: Executable and arguments
            cwd: Working directory
            capture: Capture stdout as text instead of streaming it
            check: Raise on nonzero exit status

        Returns:
            ProcessResult with exit status and captured stdout (if any)

        Raises:
            CommandFailedError: If check is set and the command fails
            ToolNotFoundError: If the executable does not exist
        """
        LOG.info(shlex.join(command))

        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd) if cwd is not None else None,
                env=self._env,
                stdout=subprocess.PIPE if capture else None,
                text=True,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(f"Executable not found: {command[0]}") from e

        if check and completed.returncode != 0:
            raise CommandFailedError(command, completed.returncode)

        return ProcessResult(returncode=completed.returncode, stdout=completed.stdout)

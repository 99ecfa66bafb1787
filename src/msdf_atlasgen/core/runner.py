"""Subprocess execution of msdf-atlas-gen."""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog

from msdf_atlasgen.core.arguments import format_command_line
from msdf_atlasgen.exceptions import ToolExecutionError, ToolLaunchError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProcessOutput:
    """Captured result of a finished msdf-atlas-gen run."""

    returncode: int
    stdout: str
    stderr: str


class ProcessRunner:
    """Runs msdf-atlas-gen and waits for it to finish.

    Both output streams are drained completely before the exit status is
    read. There is no timeout: the call blocks for as long as the tool runs.
    """

    def run(self, binary_path: Path, args: Sequence[str]) -> ProcessOutput:
        """Execute the tool.

        Args:
            binary_path: Executable to launch
            args: Arguments following the executable

        Returns:
            Captured output of a successful run

        Raises:
            ToolLaunchError: If the process could not be started
            ToolExecutionError: If the process exited with a non-zero status
        """
        command = [str(binary_path), *args]
        logger.debug("Running msdf-atlas-gen", command=format_command_line(command))

        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise ToolLaunchError(str(binary_path), str(e)) from e

        with process:
            stdout, stderr = process.communicate()

        output = ProcessOutput(returncode=process.returncode, stdout=stdout, stderr=stderr)

        if output.returncode != 0:
            logger.error(
                "msdf-atlas-gen failed",
                exit_code=output.returncode,
                stderr=output.stderr,
            )
            raise ToolExecutionError(output.returncode, output.stderr)

        if output.stdout:
            logger.debug("msdf-atlas-gen output", stdout=output.stdout)

        return output

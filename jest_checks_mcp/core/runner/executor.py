"""Build and execute the Jest command that writes the JSON result file."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ...constants import ARGS_PLACEHOLDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JestRun:
    """Outcome of running the test command.

    The exit code is informational only: a failing test run exits non-zero,
    and pass/fail is decided from the parsed result file.
    """
    command: str
    returncode: int | None = None
    error_message: str | None = None

    @property
    def started(self) -> bool:
        return self.returncode is not None


def build_jest_command(
    template: str,
    results_file: str | Path,
    coverage: bool = False,
    changed_since: str | None = None
) -> str:
    """Substitute the computed Jest flags into the operator's command template."""

    options = f'--testLocationInResults --json --outputFile="{results_file}"'
    if coverage:
        options += " --coverage"
    if changed_since:
        options += f" --changedSince={changed_since}"

    return template.replace(ARGS_PLACEHOLDER, options, 1)


class JestRunner:
    """Run a Jest command through the shell, streaming its output to the job log."""

    def __init__(self, command: str, cwd: str | Path | None = None):
        self.command = command
        self.cwd = Path(cwd) if cwd else Path.cwd()

    async def run(self) -> JestRun:
        """Run to completion. Never raises for process failures."""

        try:
            process = await asyncio.create_subprocess_shell(
                self.command,
                cwd=str(self.cwd),
                stdin=asyncio.subprocess.DEVNULL,
                env={**os.environ},
            )
            returncode = await process.wait()
        except Exception as e:
            logger.debug(f"Jest execution failed. Tests have likely failed. ({e})")
            return JestRun(
                command=self.command,
                returncode=None,
                error_message=f"Execution error: {str(e)}"
            )

        logger.debug(f"Jest command executed (exit code {returncode})")
        return JestRun(command=self.command, returncode=returncode)


async def run_jest(command: str, cwd: str | Path | None = None) -> JestRun:
    """Convenience wrapper that runs the command via JestRunner."""
    runner = JestRunner(command, cwd)
    return await runner.run()

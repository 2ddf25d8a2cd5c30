"""
CI entry point: run Jest, then publish its results to GitHub.

Reads the action inputs from the environment, runs the configured test
command, creates the check run and (optionally) the coverage comment. Exits
non-zero when configuration is missing, a step fails, or tests failed.
"""


from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path

from . import workflow
from .config import ActionConfig, GitHubContext
from .constants import RESULTS_FILENAME
from .core.runner import JestRun, build_jest_command, run_jest
from .errors import ConfigurationError
from .services import GitHubService, PlatformClient, PublishingService

logger = logging.getLogger(__name__)

Runner = Callable[[str, Path], Awaitable[JestRun]]


async def run(
    env: Mapping[str, str] | None = None,
    cwd: str | Path | None = None,
    client: PlatformClient | None = None,
    runner: Runner = run_jest
) -> int:
    """Run the whole action and return the process exit code.

    Any unexpected error is reported as a workflow error and exits 1.
    """
    try:
        return await _run(env, cwd, client, runner)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        workflow.error(str(e) or type(e).__name__)
        return 1


async def _run(
    env: Mapping[str, str] | None,
    cwd: str | Path | None,
    client: PlatformClient | None,
    runner: Runner
) -> int:
    base_dir = Path(cwd) if cwd else Path.cwd()
    results_file = base_dir / RESULTS_FILENAME

    try:
        config = ActionConfig.from_env(env)
        token = config.require_token()
        context = GitHubContext.from_env(env)
    except ConfigurationError as e:
        workflow.error(str(e))
        return 1

    command = build_jest_command(
        config.test_command,
        results_file,
        coverage=config.coverage_comment,
        changed_since=context.pr_base_ref if config.changes_only else None,
    )

    # The exit code is ignored; the result file decides pass/fail
    with workflow.group(command):
        await runner(command, base_dir)

    if client is None:
        client = GitHubService(token=token, repository=context.repository)
    service = PublishingService(client, bot_login=config.bot_login)

    published = await service.publish(
        results_file=results_file,
        base_dir=str(base_dir),
        head_sha=context.head_sha,
        check_name=config.check_name,
        coverage_comment=config.coverage_comment,
        pr_number=context.pr_number,
    )

    if not published.success:
        workflow.error(published.error.message)
        return 1

    if not published.data.tests_passed:
        workflow.error("Some tests failed.")
        return 1

    return 0


def configure_logging() -> None:
    """Plain messages on stdout, where the runner reads workflow commands."""
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)


def main():
    """Entry point."""
    configure_logging()
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()

"""Operator configuration and GitHub Actions context.

Both are read once from the environment by the entry points and then passed
around explicitly, so nothing below the entry points touches os.environ.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_BOT_LOGIN, DEFAULT_CHECK_NAME, DEFAULT_TEST_COMMAND
from .errors import ConfigurationError


def get_input(name: str, env: Mapping[str, str] | None = None) -> str:
    """Read an action input the way the Actions runner exposes it (INPUT_<NAME>)."""
    env = os.environ if env is None else env
    key = "INPUT_" + name.replace(" ", "_").upper()
    return env.get(key, "").strip()


def parse_bool_input(name: str, value: str) -> bool:
    """Parse a JSON boolean input ('true'/'false'); empty means false."""
    if not value:
        return False
    try:
        return bool(json.loads(value))
    except json.JSONDecodeError:
        raise ConfigurationError(
            f"Input '{name}' must be true or false, got {value!r}"
        ) from None


@dataclass(frozen=True)
class ActionConfig:
    """Operator-supplied settings for one run."""
    token: str | None
    coverage_comment: bool = False
    changes_only: bool = False
    test_command: str = DEFAULT_TEST_COMMAND
    check_name: str = DEFAULT_CHECK_NAME
    bot_login: str = DEFAULT_BOT_LOGIN

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ActionConfig:
        """Build the config from GITHUB_TOKEN and the action's INPUT_* variables."""
        env = os.environ if env is None else env

        token = env.get("GITHUB_TOKEN")
        if token is None:
            token = get_input("GITHUB_TOKEN", env)

        return cls(
            token=token or None,
            coverage_comment=parse_bool_input(
                "coverage-comment", get_input("coverage-comment", env)
            ),
            changes_only=parse_bool_input(
                "changes-only", get_input("changes-only", env)
            ),
            test_command=get_input("test-command", env) or DEFAULT_TEST_COMMAND,
            check_name=get_input("command-name", env) or DEFAULT_CHECK_NAME,
            bot_login=get_input("bot-login", env) or DEFAULT_BOT_LOGIN,
        )

    def require_token(self) -> str:
        """Return the token or raise ConfigurationError."""
        if not self.token:
            raise ConfigurationError("GITHUB_TOKEN not set.")
        return self.token


@dataclass(frozen=True)
class GitHubContext:
    """Where the results get published: repository, commit and pull request."""
    repository: str
    sha: str
    pr_number: int | None = None
    pr_head_sha: str | None = None
    pr_base_ref: str | None = None

    @property
    def head_sha(self) -> str:
        """The PR head commit when running on a pull request, else the triggering commit."""
        return self.pr_head_sha or self.sha

    @property
    def is_pull_request(self) -> bool:
        return bool(self.pr_number)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> GitHubContext:
        """Read GITHUB_REPOSITORY, GITHUB_SHA and the event payload."""
        env = os.environ if env is None else env

        payload = _load_event_payload(env.get("GITHUB_EVENT_PATH"))
        pull_request = payload.get("pull_request") or {}

        return cls(
            repository=env.get("GITHUB_REPOSITORY", ""),
            sha=env.get("GITHUB_SHA", ""),
            pr_number=pull_request.get("number"),
            pr_head_sha=(pull_request.get("head") or {}).get("sha"),
            pr_base_ref=(pull_request.get("base") or {}).get("ref"),
        )


def _load_event_payload(event_path: str | None) -> dict:
    """Load the webhook payload the runner writes to GITHUB_EVENT_PATH."""
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.exists():
        return {}

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read event payload {event_path}: {e}") from e

    return payload if isinstance(payload, dict) else {}

"""Shared fixtures: Jest result documents and a recording platform client."""

import json

import pytest

from jest_checks_mcp.constants import COVERAGE_HEADER, DEFAULT_BOT_LOGIN
from jest_checks_mcp.services.base import ErrorCode, ServiceResult
from jest_checks_mcp.services.platform import CheckRunInfo, CommentInfo, CommentRecord

BASE_DIR = "/home/runner/work/app"


class FakePlatformClient:
    """In-memory PlatformClient that records every call."""

    def __init__(self, comments=None, bot_login=DEFAULT_BOT_LOGIN):
        self.bot_login = bot_login
        self.comments = {c.id: c for c in comments or []}
        self.check_runs = []
        self.deleted = []
        self.calls = []
        self.fail_on = set()
        self.fail_delete_ids = set()
        self._next_id = max(self.comments, default=0) + 1

    def create_check_run(self, payload):
        self.calls.append(("create_check_run", payload.head_sha))
        if "create_check_run" in self.fail_on:
            return ServiceResult.fail(ErrorCode.GITHUB_API_ERROR, "Failed to create check run: boom")
        self.check_runs.append(payload)
        run_id = len(self.check_runs)
        return ServiceResult.ok(CheckRunInfo(id=run_id, url=f"https://github.com/o/r/runs/{run_id}"))

    def list_issue_comments(self, issue_number):
        self.calls.append(("list_issue_comments", issue_number))
        if "list_issue_comments" in self.fail_on:
            return ServiceResult.fail(ErrorCode.GITHUB_API_ERROR, "Failed to list comments: boom")
        return ServiceResult.ok(list(self.comments.values()))

    def delete_issue_comment(self, comment_id):
        self.calls.append(("delete_issue_comment", comment_id))
        if comment_id in self.fail_delete_ids:
            return ServiceResult.fail(ErrorCode.GITHUB_API_ERROR, f"Failed to delete comment {comment_id}: boom")
        self.comments.pop(comment_id)
        self.deleted.append(comment_id)
        return ServiceResult.ok(comment_id)

    def create_issue_comment(self, issue_number, body):
        self.calls.append(("create_issue_comment", issue_number))
        if "create_issue_comment" in self.fail_on:
            return ServiceResult.fail(ErrorCode.GITHUB_API_ERROR, "Failed to post comment: boom")
        comment = CommentRecord(id=self._next_id, author=self.bot_login, body=body)
        self._next_id += 1
        self.comments[comment.id] = comment
        return ServiceResult.ok(CommentInfo(
            id=comment.id,
            url=f"https://github.com/o/r/pull/{issue_number}#issuecomment-{comment.id}"
        ))

    @property
    def coverage_comments(self):
        return [
            c for c in self.comments.values()
            if c.author == self.bot_login and c.body.startswith(COVERAGE_HEADER)
        ]


def _file_coverage(path, s, f, b, lines):
    """Istanbul FileCoverage data; `lines` gives each statement's start line."""
    return {
        "path": path,
        "statementMap": {
            key: {"start": {"line": line, "column": 0}, "end": {"line": line, "column": 10}}
            for key, line in zip(s, lines)
        },
        "fnMap": {key: {"name": f"fn{key}"} for key in f},
        "branchMap": {key: {"type": "if"} for key in b},
        "s": s,
        "f": f,
        "b": b,
    }


@pytest.fixture
def fake_client():
    return FakePlatformClient()


@pytest.fixture
def file_coverage():
    """Factory for raw Istanbul file coverage entries."""
    return _file_coverage


@pytest.fixture
def math_coverage():
    """3 statements on 2 lines (2 hit), 2 functions (1 hit), 1 branch pair (1 hit)."""
    return _file_coverage(
        f"{BASE_DIR}/src/math.js",
        s={"0": 1, "1": 0, "2": 3},
        f={"0": 1, "1": 0},
        b={"0": [1, 0]},
        lines=[1, 2, 2],
    )


@pytest.fixture
def jest_document():
    """Factory for Jest --json documents; keyword args override top-level fields."""

    def build(**overrides):
        document = {
            "success": True,
            "numTotalTests": 3,
            "numPassedTests": 3,
            "numFailedTests": 0,
            "numPendingTests": 0,
            "numTotalTestSuites": 2,
            "numPassedTestSuites": 2,
            "numFailedTestSuites": 0,
            "testResults": [
                {
                    "name": f"{BASE_DIR}/src/math.test.js",
                    "message": "",
                    "status": "passed",
                    "assertionResults": [
                        {
                            "ancestorTitles": ["math"],
                            "title": "adds",
                            "status": "passed",
                            "location": {"line": 4, "column": 3},
                            "failureMessages": [],
                        },
                    ],
                },
            ],
        }
        document.update(overrides)
        return document

    return build


@pytest.fixture
def failing_document(jest_document):
    """Two files; three failed assertions, one of them without a location."""
    return jest_document(
        success=False,
        numTotalTests=10,
        numPassedTests=7,
        numFailedTests=3,
        numTotalTestSuites=3,
        numPassedTestSuites=1,
        numFailedTestSuites=2,
        testResults=[
            {
                "name": f"{BASE_DIR}/src/auth.test.js",
                "message": "\u001b[1m\u001b[31m  ● Auth › login › rejects bad password\u001b[39m\u001b[22m\n\n",
                "assertionResults": [
                    {
                        "ancestorTitles": ["Auth", "login"],
                        "title": "rejects bad password",
                        "status": "failed",
                        "location": {"line": 12, "column": 5},
                        "failureMessages": [
                            "Error: \u001b[2mexpect(\u001b[22m\u001b[31mreceived\u001b[39m\u001b[2m).toBe(\u001b[22mfalse)",
                        ],
                    },
                    {
                        "ancestorTitles": ["Auth", "login"],
                        "title": "accepts good password",
                        "status": "passed",
                        "location": {"line": 20, "column": 5},
                        "failureMessages": [],
                    },
                    {
                        "ancestorTitles": ["Auth", "logout"],
                        "title": "clears session",
                        "status": "failed",
                        "location": {"line": 31, "column": 5},
                        "failureMessages": ["first failure", "second failure"],
                    },
                ],
            },
            {
                "name": f"{BASE_DIR}/src/cart.test.js",
                "message": "",
                "assertionResults": [
                    {
                        "ancestorTitles": [],
                        "title": "totals items",
                        "status": "failed",
                        "location": None,
                        "failureMessages": [],
                    },
                    {
                        "ancestorTitles": [],
                        "title": "later",
                        "status": "pending",
                        "location": None,
                        "failureMessages": [],
                    },
                ],
            },
        ],
    )


@pytest.fixture
def write_results(tmp_path):
    """Write a document to a result file and return its path."""

    def write(document, name="jest.results.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return write

"""Services package.

Service classes and shared result types used by the CLI and the MCP handlers.
"""


from .base import (
    ErrorCode,
    ServiceError,
    ServiceResult,
)
from .comments import CoverageCommentService
from .github import GitHubService, parse_repository
from .platform import CheckRunInfo, CommentInfo, CommentRecord, PlatformClient
from .publishing import CoverageStatus, PublishingService, PublishReport
from .results import ResultsService, ResultsSummary

__all__ = [
    # Base
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    # Platform
    "PlatformClient",
    "CheckRunInfo",
    "CommentRecord",
    "CommentInfo",
    # Services
    "ResultsService",
    "ResultsSummary",
    "CoverageCommentService",
    "PublishingService",
    "PublishReport",
    "CoverageStatus",
    # GitHub
    "GitHubService",
    "parse_repository",
]


# =============================================================================
# Convenience factory functions
# =============================================================================

def create_publishing_service(
    token: str,
    repository: str,
    bot_login: str | None = None
) -> PublishingService:
    """Factory for PublishingService backed by the GitHub API."""

    client = GitHubService(token=token, repository=repository)
    if bot_login:
        return PublishingService(client, bot_login=bot_login)
    return PublishingService(client)

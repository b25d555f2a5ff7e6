"""Scan requests handed to filters and authorities."""

from typing import List, Optional

from github.PullRequest import PullRequest
from github.Repository import Repository

from ..models import ScanContext
from ..utils import get_logger


class ScanRequest:
    """A single scan over a source, with the context traits decorated."""

    def __init__(self, context: ScanContext):
        self.context = context


class GitHubScanRequest(ScanRequest):
    """
    Scan request for a GitHub repository.

    The open pull requests are fetched once, on first use, and reused for
    every head evaluated during this request.
    """

    def __init__(
        self,
        repository: Repository,
        context: ScanContext,
        base: Optional[str] = None
    ):
        """
        Args:
            repository: PyGithub repository being scanned
            context: Sealed scan context
            base: Only consider PRs targeting this branch
        """
        super().__init__(context)
        self.repository = repository
        self.base = base
        self.logger = get_logger()
        self._pull_requests: Optional[List[PullRequest]] = None

    def get_pull_requests(self) -> List[PullRequest]:
        """Open pull requests of the repository, in API order."""
        if self._pull_requests is None:
            if self.base:
                pulls = self.repository.get_pulls(state="open", base=self.base)
            else:
                pulls = self.repository.get_pulls(state="open")
            self._pull_requests = list(pulls)
            self.logger.info(
                f"Fetched {len(self._pull_requests)} open PRs from {self.repository.full_name}"
            )
        return self._pull_requests

"""Head filters applied before a pull request is built."""

from typing import Iterable

from github import GithubException
from github.PullRequest import PullRequest

from ..config import DEFAULT_PIPELINE_FILE
from ..models import (
    AuthorStatus,
    AuthorVerdict,
    ChangeHead,
    LookupFailurePolicy,
    PullRequestHead,
    pull_request_head_name,
)
from ..utils import get_logger
from .request import GitHubScanRequest, ScanRequest

# Transport errors from requests subclass OSError
LOOKUP_ERRORS = (GithubException, OSError)


class ExcludeModifiedPipelineFilter:
    """
    Excludes pull requests that change the pipeline file.

    A pull request that edits its own build recipe is not built
    automatically unless its author is on the trusted allow-list.
    """

    def __init__(
        self,
        trusted_authors: Iterable[str] = (),
        pipeline_file: str = DEFAULT_PIPELINE_FILE,
        on_lookup_failure: LookupFailurePolicy = LookupFailurePolicy.CHECK_FILES
    ):
        """
        Args:
            trusted_authors: Logins whose pipeline changes never exclude a PR
            pipeline_file: Path of the pipeline file relative to the repo root
            on_lookup_failure: What to do when the author or file list cannot be read
        """
        self.trusted_authors = frozenset(trusted_authors)
        self.pipeline_file = pipeline_file
        self.on_lookup_failure = on_lookup_failure
        self.logger = get_logger()

    def is_excluded(self, request: ScanRequest, head: ChangeHead) -> bool:
        """
        Decide whether a head must be dropped from the buildable set.

        Args:
            request: Current scan request
            head: Head under evaluation

        Returns:
            True if the head's pull request modifies the pipeline file
        """
        if not isinstance(head, PullRequestHead) or not isinstance(request, GitHubScanRequest):
            return False

        try:
            pull_requests = request.get_pull_requests()
        except LOOKUP_ERRORS as e:
            self.logger.warning(
                f"Could not list pull requests while evaluating {head.name}: {e}",
                extra={"head": head.name, "reason": str(e)},
            )
            return self.on_lookup_failure == LookupFailurePolicy.EXCLUDE

        for pr in pull_requests:
            if pull_request_head_name(pr.number) != head.name:
                continue

            verdict = self.classify_author(pr)
            if verdict.is_trusted:
                self.logger.debug(f"{head.name} authored by trusted {verdict.login}; not checking files")
                continue
            if verdict.lookup_failed and self.on_lookup_failure == LookupFailurePolicy.EXCLUDE:
                self.logger.info(f"Excluding {head.name}: author unknown")
                return True

            if self._modifies_pipeline(pr, head):
                self.logger.info(f"Excluding {head.name}: {self.pipeline_file} modified in PR")
                return True

        return False

    def classify_author(self, pr: PullRequest) -> AuthorVerdict:
        """Check a pull request's author against the trusted allow-list."""
        try:
            user = pr.user
            login = user.login if user is not None else None
        except LOOKUP_ERRORS as e:
            return self._author_lookup_failed(pr, str(e))

        # GitHub reports "user": null for deleted accounts
        if login is None:
            return self._author_lookup_failed(pr, "author missing")

        if login in self.trusted_authors:
            return AuthorVerdict(AuthorStatus.TRUSTED, login=login)
        return AuthorVerdict(AuthorStatus.NOT_TRUSTED, login=login)

    def _author_lookup_failed(self, pr: PullRequest, reason: str) -> AuthorVerdict:
        self.logger.warning(
            f"Could not read author of PR #{pr.number}: {reason}",
            extra={"pr_number": pr.number, "reason": reason},
        )
        return AuthorVerdict(AuthorStatus.LOOKUP_FAILED, reason=reason)

    def _modifies_pipeline(self, pr: PullRequest, head: ChangeHead) -> bool:
        try:
            for f in pr.get_files():
                if f.filename == self.pipeline_file and (f.additions > 0 or f.deletions > 0):
                    return True
        except LOOKUP_ERRORS as e:
            self.logger.warning(
                f"Could not list files of PR #{pr.number} for {head.name}: {e}",
                extra={"pr_number": pr.number, "reason": str(e)},
            )
            return self.on_lookup_failure == LookupFailurePolicy.EXCLUDE
        return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pipeline_file={self.pipeline_file!r}, "
            f"trusted_authors={sorted(self.trusted_authors)!r})"
        )

"""Scan a GitHub repository for buildable pull request heads."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from github.PullRequest import PullRequest
from github.Repository import Repository

from ..models import (
    ChangeRequestStrategy,
    DEFAULT_ORIGIN,
    ForkOrigin,
    HeadCategory,
    HeadOrigin,
    PullRequestHead,
    ScanContext,
)
from ..models.strategy import ordered
from ..utils import get_logger
from .request import GitHubScanRequest


@dataclass(frozen=True)
class BuildCandidate:
    """One checkout variant of a discovered head."""
    head: PullRequestHead
    strategy: ChangeRequestStrategy
    trusted: bool
    name: str


class SourceScanner:
    """
    Discovers pull request heads and applies the decorated scan context.

    Flow:
    1. Decorate a fresh ScanContext with every applicable trait, then seal it
    2. Fetch open pull requests and turn them into heads
    3. Drop heads any filter excludes
    4. Ask applicable authorities whether the head is trusted
    5. Emit one BuildCandidate per registered checkout strategy
    """

    def __init__(
        self,
        repository: Repository,
        traits: Iterable,
        categories: Optional[Iterable[HeadCategory]] = None,
        base: Optional[str] = None
    ):
        """
        Args:
            repository: PyGithub repository to scan
            traits: Discovery traits to decorate the context with
            categories: Head categories to scan for (default: all)
            base: Only consider PRs targeting this branch
        """
        self.repository = repository
        self.traits = list(traits)
        self.categories = frozenset(categories) if categories is not None else frozenset(HeadCategory)
        self.base = base
        self.logger = get_logger()

    def build_context(self) -> ScanContext:
        """Decorate and seal a context for one scan."""
        context = ScanContext(categories=self.categories)
        for trait in self.traits:
            if not any(trait.include_category(c) for c in self.categories):
                self.logger.debug(f"Skipping {trait!r}: no matching category")
                continue
            trait.decorate(context)
        return context.seal()

    def discover_heads(self, request: GitHubScanRequest) -> List[PullRequestHead]:
        """Turn the request's open pull requests into heads."""
        return [
            PullRequestHead.for_pull_request(
                pr.number,
                origin=self._origin_of(pr),
                source_branch=pr.head.ref,
                target_branch=pr.base.ref,
            )
            for pr in request.get_pull_requests()
        ]

    def scan(self) -> List[BuildCandidate]:
        """
        Run a scan.

        Returns:
            Buildable candidates, in pull request order
        """
        context = self.build_context()
        if HeadCategory.CHANGE_REQUEST not in context.categories or not context.want_origin_prs:
            self.logger.info("No trait asked for origin pull requests; nothing to scan")
            return []

        request = GitHubScanRequest(self.repository, context, base=self.base)
        candidates: List[BuildCandidate] = []

        for head in self.discover_heads(request):
            if head.origin != DEFAULT_ORIGIN:
                self.logger.debug(f"Skipping {head.name}: fork origin {head.origin!r}")
                continue

            if any(f.is_excluded(request, head) for f in context.filters):
                self.logger.info(f"{head.name} excluded by filter")
                continue

            trusted = self._is_trusted(context, request, head)
            strategies = ordered(context.origin_strategies)
            for strategy in strategies:
                name = head.name if len(strategies) == 1 else f"{head.name}-{strategy.value}"
                candidates.append(BuildCandidate(head, strategy, trusted, name))

        self.logger.info(f"Scan complete: {len(candidates)} build candidates")
        return candidates

    def _is_trusted(
        self,
        context: ScanContext,
        request: GitHubScanRequest,
        head: PullRequestHead
    ) -> bool:
        return any(
            authority.check_trusted(request, head)
            for authority in context.authorities
            if authority.is_applicable_to_origin(type(head.origin))
        )

    def _origin_of(self, pr: PullRequest) -> HeadOrigin:
        head_repo = pr.head.repo
        if head_repo is not None and head_repo.full_name == pr.base.repo.full_name:
            return DEFAULT_ORIGIN
        owner = pr.head.user.login if pr.head.user is not None else ""
        return ForkOrigin(owner)

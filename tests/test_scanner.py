"""Tests for scanning a repository with the decorated context.

- Client-perspective behavior verification
- Given-When-Then structure
- Minimal mocking (only external APIs)
"""

from pr_discovery.discovery import GitHubScanRequest, OriginPullRequestDiscoveryTrait, SourceScanner
from pr_discovery.models import (
    ChangeRequestStrategy,
    DEFAULT_ORIGIN,
    ForkOrigin,
    HeadCategory,
)

from fakes import FakeFile, FakePullRequest, FakeRepository

MERGE = ChangeRequestStrategy.MERGE
HEAD = ChangeRequestStrategy.HEAD


class TestSourceScanner:
    """Tests for the scan flow."""

    def test_merge_only_yields_one_trusted_candidate_per_pr(self):
        """Given origin PRs and strategy id 1, should emit one trusted MERGE candidate each."""
        # Given
        repository = FakeRepository(pulls=[FakePullRequest(1), FakePullRequest(2)])
        scanner = SourceScanner(repository, [OriginPullRequestDiscoveryTrait(1)])

        # When
        candidates = scanner.scan()

        # Then
        assert [c.name for c in candidates] == ["PR-1", "PR-2"]
        assert all(c.strategy == MERGE for c in candidates)
        assert all(c.trusted for c in candidates)

    def test_both_strategies_yield_suffixed_candidates(self):
        """Given strategy id 3, should emit merge then head variants."""
        repository = FakeRepository(pulls=[FakePullRequest(5)])

        candidates = SourceScanner(repository, [OriginPullRequestDiscoveryTrait(3)]).scan()

        assert [(c.name, c.strategy) for c in candidates] == [
            ("PR-5-merge", MERGE),
            ("PR-5-head", HEAD),
        ]

    def test_fork_pull_requests_are_skipped(self):
        """Given a PR from a fork and one from a deleted fork, should skip both."""
        # Given
        repository = FakeRepository(pulls=[
            FakePullRequest(1),
            FakePullRequest(2, head_repo="mallory/widgets"),
            FakePullRequest(3, head_repo=None),
        ])

        # When
        candidates = SourceScanner(repository, [OriginPullRequestDiscoveryTrait(1)]).scan()

        # Then
        assert [c.name for c in candidates] == ["PR-1"]

    def test_extended_strategy_drops_modified_pipeline(self):
        """Given strategy id 4, should drop the PR that edits the Jenkinsfile."""
        # Given
        repository = FakeRepository(pulls=[
            FakePullRequest(1, files=[FakeFile("Jenkinsfile", additions=2)]),
            FakePullRequest(2, files=[FakeFile("src/app.py", additions=2)]),
            FakePullRequest(3, author="ci-bot", files=[FakeFile("Jenkinsfile", deletions=1)]),
        ])
        trait = OriginPullRequestDiscoveryTrait(4, trusted_authors=["ci-bot"])

        # When
        candidates = SourceScanner(repository, [trait]).scan()

        # Then
        assert [c.name for c in candidates] == ["PR-2", "PR-3"]
        assert repository.get_pulls_calls == 1

    def test_branch_only_scan_applies_no_trait(self):
        """Given a scan for branches only, should not decorate or fetch PRs."""
        # Given
        repository = FakeRepository(pulls=[FakePullRequest(1)])
        scanner = SourceScanner(
            repository,
            [OriginPullRequestDiscoveryTrait(1)],
            categories=[HeadCategory.BRANCH],
        )

        # When
        context = scanner.build_context()
        candidates = scanner.scan()

        # Then
        assert context.want_origin_prs is False
        assert context.authorities == []
        assert candidates == []
        assert repository.get_pulls_calls == 0

    def test_context_is_sealed_after_build(self):
        """Should seal the context before discovery starts."""
        scanner = SourceScanner(FakeRepository(), [OriginPullRequestDiscoveryTrait(1)])

        assert scanner.build_context().is_sealed is True

    def test_base_branch_limits_pull_requests(self):
        """Given a base branch, should only consider PRs targeting it."""
        repository = FakeRepository(pulls=[
            FakePullRequest(1, base="main"),
            FakePullRequest(2, base="release"),
        ])

        candidates = SourceScanner(
            repository, [OriginPullRequestDiscoveryTrait(1)], base="release"
        ).scan()

        assert [c.name for c in candidates] == ["PR-2"]

    def test_discover_heads_sets_origin_and_branches(self):
        """Should map PRs to heads with origin and branch names."""
        # Given
        repository = FakeRepository(pulls=[
            FakePullRequest(8, branch="fix-login", base="main"),
            FakePullRequest(9, head_repo="mallory/widgets"),
        ])
        scanner = SourceScanner(repository, [OriginPullRequestDiscoveryTrait(1)])
        request = GitHubScanRequest(repository, scanner.build_context())

        # When
        origin_head, fork_head = scanner.discover_heads(request)

        # Then
        assert origin_head.name == "PR-8"
        assert origin_head.origin == DEFAULT_ORIGIN
        assert origin_head.source_branch == "fix-login"
        assert origin_head.target_branch == "main"
        assert fork_head.origin == ForkOrigin("mallory")

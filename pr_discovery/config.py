"""Configuration for pull request discovery."""

from dataclasses import dataclass
from typing import Optional, Tuple
import os

from .models import StrategyId, LookupFailurePolicy


DEFAULT_PIPELINE_FILE = "Jenkinsfile"


@dataclass
class DiscoveryConfig:
    """Configuration for discovering origin pull requests."""

    # GitHub settings
    repo: str = ""
    github_token: Optional[str] = None
    base: Optional[str] = None  # Only PRs targeting this branch

    # Checkout strategy (see StrategyId)
    strategy_id: int = StrategyId.MERGE_ONLY

    # Modified pipeline exclusion (strategy id 4)
    trusted_authors: Tuple[str, ...] = ()   # Authors whose pipeline edits are allowed
    pipeline_file: str = DEFAULT_PIPELINE_FILE
    lookup_failure_policy: str = LookupFailurePolicy.CHECK_FILES.value

    @property
    def lookup_failure(self) -> LookupFailurePolicy:
        return LookupFailurePolicy.parse(self.lookup_failure_policy)

    def validate(self) -> None:
        """Raise ValueError on settings that cannot drive a scan."""
        if not self.repo or "/" not in self.repo:
            raise ValueError(f"Repository must be in format owner/repo, got {self.repo!r}")
        if not self.pipeline_file:
            raise ValueError("Pipeline file name must not be empty")
        # Raises on unknown policy names
        self.lookup_failure

    @classmethod
    def from_env(cls) -> "DiscoveryConfig":
        """Create config from environment variables."""
        return cls(
            repo=os.environ.get("GITHUB_REPOSITORY", ""),
            github_token=os.environ.get("GITHUB_TOKEN"),
            base=os.environ.get("PR_BASE") or None,
            strategy_id=int(os.environ.get("STRATEGY_ID", str(int(StrategyId.MERGE_ONLY)))),
            trusted_authors=parse_authors(os.environ.get("TRUSTED_PR_AUTHORS", "")),
            pipeline_file=os.environ.get("PIPELINE_FILE", DEFAULT_PIPELINE_FILE),
            lookup_failure_policy=os.environ.get(
                "LOOKUP_FAILURE_POLICY", LookupFailurePolicy.CHECK_FILES.value
            ),
        )


def parse_authors(value: str) -> Tuple[str, ...]:
    """Split a comma separated author list, dropping blanks."""
    return tuple(a.strip() for a in value.split(",") if a.strip())


# Default configuration
DEFAULT_CONFIG = DiscoveryConfig()

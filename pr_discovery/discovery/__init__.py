"""Origin pull request discovery.

This module provides:
- OriginPullRequestDiscoveryTrait: Registers strategies, trust and filters on a scan context
- OriginChangeRequestAuthority: Trusts pull requests from the repository itself
- ExcludeModifiedPipelineFilter: Drops pull requests that change the pipeline file
- SourceScanner: Applies the decorated context to a repository's open pull requests
"""

from .request import ScanRequest, GitHubScanRequest
from .authority import OriginChangeRequestAuthority
from .filters import ExcludeModifiedPipelineFilter
from .trait import OriginPullRequestDiscoveryTrait
from .scanner import BuildCandidate, SourceScanner

__all__ = [
    "ScanRequest",
    "GitHubScanRequest",
    "OriginChangeRequestAuthority",
    "ExcludeModifiedPipelineFilter",
    "OriginPullRequestDiscoveryTrait",
    "BuildCandidate",
    "SourceScanner",
]

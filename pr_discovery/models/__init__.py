"""Data models for pull request discovery."""

from .strategy import (
    ChangeRequestStrategy,
    StrategyId,
    StrategySet,
    STRATEGY_LABELS,
    decode_strategies,
    encode_strategies,
    excludes_modified_pipeline,
    strategy_options,
)
from .head import (
    HeadCategory,
    HeadOrigin,
    DefaultOrigin,
    ForkOrigin,
    DEFAULT_ORIGIN,
    ChangeHead,
    BranchHead,
    PullRequestHead,
    pull_request_head_name,
)
from .context import ScanContext
from .verdict import AuthorStatus, AuthorVerdict, LookupFailurePolicy

__all__ = [
    "ChangeRequestStrategy",
    "StrategyId",
    "StrategySet",
    "STRATEGY_LABELS",
    "decode_strategies",
    "encode_strategies",
    "excludes_modified_pipeline",
    "strategy_options",
    "HeadCategory",
    "HeadOrigin",
    "DefaultOrigin",
    "ForkOrigin",
    "DEFAULT_ORIGIN",
    "ChangeHead",
    "BranchHead",
    "PullRequestHead",
    "pull_request_head_name",
    "ScanContext",
    "AuthorStatus",
    "AuthorVerdict",
    "LookupFailurePolicy",
]

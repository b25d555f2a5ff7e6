"""Discovery trait for pull requests originating from the repository itself."""

from typing import Iterable

from ..config import DEFAULT_PIPELINE_FILE, DiscoveryConfig
from ..models import (
    ChangeRequestStrategy,
    HeadCategory,
    LookupFailurePolicy,
    ScanContext,
    StrategySet,
    decode_strategies,
    encode_strategies,
    excludes_modified_pipeline,
)
from .authority import OriginChangeRequestAuthority
from .filters import ExcludeModifiedPipelineFilter


class OriginPullRequestDiscoveryTrait:
    """
    Discovers pull requests whose source branch lives in the scanned repository.

    Decorating a scan context:
    - asks the scanner for origin pull requests
    - trusts them via OriginChangeRequestAuthority
    - registers the checkout strategies for the configured id
    - adds ExcludeModifiedPipelineFilter when the id is
      MERGE_AND_HEAD_EXCLUDING_MODIFIED_PIPELINE
    """

    display_name = "Discover pull requests from origin"

    def __init__(
        self,
        strategy_id: int,
        trusted_authors: Iterable[str] = (),
        pipeline_file: str = DEFAULT_PIPELINE_FILE,
        lookup_failure: LookupFailurePolicy = LookupFailurePolicy.CHECK_FILES
    ):
        """
        Args:
            strategy_id: Persisted strategy id (see StrategyId)
            trusted_authors: Authors allowed to modify the pipeline file
            pipeline_file: Pipeline file checked by the exclusion filter
            lookup_failure: Policy for unreadable authors or file lists
        """
        # Kept as given; decoding treats anything unknown as no strategies
        self._strategy_id = strategy_id
        self.trusted_authors = tuple(trusted_authors)
        self.pipeline_file = pipeline_file
        self.lookup_failure = lookup_failure

    @classmethod
    def from_strategies(
        cls,
        strategies: Iterable[ChangeRequestStrategy],
        **kwargs
    ) -> "OriginPullRequestDiscoveryTrait":
        """Build from a strategy set; never enables the pipeline exclusion."""
        return cls(encode_strategies(strategies), **kwargs)

    @classmethod
    def from_config(cls, config: DiscoveryConfig) -> "OriginPullRequestDiscoveryTrait":
        return cls(
            config.strategy_id,
            trusted_authors=config.trusted_authors,
            pipeline_file=config.pipeline_file,
            lookup_failure=config.lookup_failure,
        )

    @property
    def strategy_id(self):
        return self._strategy_id

    @property
    def strategies(self) -> StrategySet:
        return decode_strategies(self._strategy_id)

    @property
    def excludes_modified_pipeline(self) -> bool:
        return excludes_modified_pipeline(self._strategy_id)

    def decorate(self, context: ScanContext) -> None:
        """Register this trait's behavior on the scan context."""
        if self.excludes_modified_pipeline:
            context.add_filter(
                ExcludeModifiedPipelineFilter(
                    trusted_authors=self.trusted_authors,
                    pipeline_file=self.pipeline_file,
                    on_lookup_failure=self.lookup_failure,
                )
            )
        context.request_origin_prs()
        context.add_authority(OriginChangeRequestAuthority())
        context.add_origin_strategies(self.strategies)

    @staticmethod
    def include_category(category: HeadCategory) -> bool:
        return category == HeadCategory.CHANGE_REQUEST

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strategy_id={self._strategy_id})"

"""Scan-scoped configuration shared by discovery traits."""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, List

from .head import HeadCategory
from .strategy import ChangeRequestStrategy


@dataclass
class ScanContext:
    """
    Collects what traits register for one scan.

    Traits decorate the context one after another; every write adds to what
    is already there. Once sealed, the context is read-only for the
    discovery phase.
    """
    categories: FrozenSet[HeadCategory] = frozenset(HeadCategory)
    want_origin_prs: bool = False
    authorities: List[Any] = field(default_factory=list)
    filters: List[Any] = field(default_factory=list)
    origin_strategies: FrozenSet[ChangeRequestStrategy] = frozenset()
    _sealed: bool = field(default=False, repr=False)

    def request_origin_prs(self) -> "ScanContext":
        """Ask the scanner to consider pull requests from the repository itself."""
        self._check_writable()
        self.want_origin_prs = True
        return self

    def add_authority(self, authority) -> "ScanContext":
        self._check_writable()
        self.authorities.append(authority)
        return self

    def add_filter(self, head_filter) -> "ScanContext":
        self._check_writable()
        self.filters.append(head_filter)
        return self

    def add_origin_strategies(
        self,
        strategies: Iterable[ChangeRequestStrategy]
    ) -> "ScanContext":
        self._check_writable()
        self.origin_strategies = self.origin_strategies | frozenset(strategies)
        return self

    def seal(self) -> "ScanContext":
        """End the decoration phase."""
        self._sealed = True
        return self

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def _check_writable(self) -> None:
        if self._sealed:
            raise RuntimeError("Scan context is sealed; decoration phase is over")

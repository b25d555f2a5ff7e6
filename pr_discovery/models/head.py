"""Data models for discovered heads."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class HeadCategory(Enum):
    """Kinds of heads a scan can look for."""
    BRANCH = "branch"
    CHANGE_REQUEST = "change_request"
    TAG = "tag"


class HeadOrigin:
    """Where a head's source branch lives."""


@dataclass(frozen=True)
class DefaultOrigin(HeadOrigin):
    """The repository being scanned."""

    def __repr__(self) -> str:
        return "DEFAULT_ORIGIN"


@dataclass(frozen=True)
class ForkOrigin(HeadOrigin):
    """A fork of the repository being scanned."""
    owner: str


DEFAULT_ORIGIN = DefaultOrigin()


@dataclass(frozen=True)
class ChangeHead:
    """A discovered branch-like head."""
    name: str
    origin: Optional[HeadOrigin] = DEFAULT_ORIGIN

    @property
    def is_change_request(self) -> bool:
        return False


@dataclass(frozen=True)
class BranchHead(ChangeHead):
    """A plain branch."""


@dataclass(frozen=True)
class PullRequestHead(ChangeHead):
    """A head backed by an open pull request."""
    number: int = 0
    source_branch: str = ""
    target_branch: str = ""

    @classmethod
    def for_pull_request(
        cls,
        number: int,
        origin: Optional[HeadOrigin] = DEFAULT_ORIGIN,
        source_branch: str = "",
        target_branch: str = "",
    ) -> "PullRequestHead":
        return cls(
            name=pull_request_head_name(number),
            origin=origin,
            number=number,
            source_branch=source_branch,
            target_branch=target_branch,
        )

    @property
    def is_change_request(self) -> bool:
        return True


def pull_request_head_name(number: int) -> str:
    """Display name of the head for pull request ``number``."""
    return f"PR-{number}"

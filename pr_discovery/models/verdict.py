"""Author classification results for pull request filters."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AuthorStatus(Enum):
    """Outcome of checking a pull request author against the allow-list."""
    TRUSTED = "trusted"              # Author is allow-listed
    NOT_TRUSTED = "not_trusted"      # Author was read and is not allow-listed
    LOOKUP_FAILED = "lookup_failed"  # Author could not be read


class LookupFailurePolicy(Enum):
    """What an unreadable author or file list means for exclusion."""
    CHECK_FILES = "check_files"  # Treat as untrusted and keep checking
    EXCLUDE = "exclude"          # Exclude the head outright

    @classmethod
    def parse(cls, value: str) -> "LookupFailurePolicy":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown lookup failure policy {value!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class AuthorVerdict:
    """Author check for one pull request."""
    status: AuthorStatus
    login: str = ""
    reason: Optional[str] = None

    @property
    def is_trusted(self) -> bool:
        return self.status == AuthorStatus.TRUSTED

    @property
    def lookup_failed(self) -> bool:
        return self.status == AuthorStatus.LOOKUP_FAILED

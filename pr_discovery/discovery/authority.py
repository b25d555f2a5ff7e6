"""Trust authority for pull requests from the scanned repository."""

from typing import Optional, Type

from ..models import ChangeHead, DefaultOrigin, DEFAULT_ORIGIN, HeadOrigin
from .request import ScanRequest


class OriginChangeRequestAuthority:
    """Trusts pull requests whose source branch lives in the repository itself."""

    display_name = "Trust origin pull requests"

    def check_trusted(self, request: Optional[ScanRequest], head: ChangeHead) -> bool:
        """
        Check whether a pull request head is trusted.

        Args:
            request: Current scan request (unused)
            head: Pull request head under evaluation

        Returns:
            True only when the head comes from the default origin
        """
        return getattr(head, "origin", None) == DEFAULT_ORIGIN

    @staticmethod
    def is_applicable_to_origin(origin_class: Type[HeadOrigin]) -> bool:
        """Only default-origin heads may be judged by this authority."""
        return isinstance(origin_class, type) and issubclass(origin_class, DefaultOrigin)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

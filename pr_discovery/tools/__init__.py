"""Tools for pull request discovery."""

from .github_tool import GitHubTool

__all__ = [
    "GitHubTool",
]

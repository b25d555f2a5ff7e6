"""GitHub API wrapper for pull request discovery."""

import os
from typing import Optional
from github import Github
from github.Repository import Repository


class GitHubTool:
    """
    GitHub API wrapper for scanning a repository.

    Handles:
    - Connecting with a token
    - Resolving the repository being scanned
    """

    def __init__(self, repo: str, token: Optional[str] = None):
        """
        Initialize GitHub tool.

        Args:
            repo: Repository in format "owner/repo"
            token: GitHub token (defaults to GITHUB_TOKEN env var)
        """
        self.token = token or os.environ.get("GITHUB_TOKEN")
        if not self.token:
            raise ValueError("GitHub token required. Set GITHUB_TOKEN env var or pass token parameter.")

        self.gh = Github(self.token)
        self.repo_name = repo
        self._repo: Optional[Repository] = None

    @property
    def repository(self) -> Repository:
        """Get the repository object (cached)."""
        if self._repo is None:
            self._repo = self.gh.get_repo(self.repo_name)
        return self._repo

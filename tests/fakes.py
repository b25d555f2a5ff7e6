"""In-memory stand-ins for the PyGithub objects the scanner touches."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FakeFile:
    filename: str
    additions: int = 0
    deletions: int = 0


@dataclass
class FakeUser:
    login: str


@dataclass
class FakeRepo:
    full_name: str


@dataclass
class FakeRef:
    ref: str
    repo: Optional[FakeRepo]
    user: Optional[FakeUser] = None


class FakePullRequest:
    """PullRequest with counted remote calls and injectable failures."""

    def __init__(
        self,
        number: int,
        author: str = "alice",
        files: Optional[List[FakeFile]] = None,
        repo: str = "acme/widgets",
        head_repo: Optional[str] = "",
        branch: str = "feature",
        base: str = "main",
        author_error: Optional[Exception] = None,
        files_error: Optional[Exception] = None,
        no_user: bool = False,
    ):
        self.number = number
        self._author = author
        self._files = files or []
        self._author_error = author_error
        self._files_error = files_error
        self._no_user = no_user
        self.user_calls = 0
        self.files_calls = 0

        head_full_name = repo if head_repo == "" else head_repo
        head_owner = (head_full_name or "ghost/x").split("/")[0]
        self.head = FakeRef(
            ref=branch,
            repo=FakeRepo(head_full_name) if head_full_name else None,
            user=FakeUser(head_owner),
        )
        self.base = FakeRef(ref=base, repo=FakeRepo(repo))

    @property
    def user(self) -> Optional[FakeUser]:
        self.user_calls += 1
        if self._author_error is not None:
            raise self._author_error
        if self._no_user:
            return None
        return FakeUser(self._author)

    def get_files(self) -> List[FakeFile]:
        self.files_calls += 1
        if self._files_error is not None:
            raise self._files_error
        return list(self._files)


@dataclass
class FakeRepository:
    full_name: str = "acme/widgets"
    pulls: List[FakePullRequest] = field(default_factory=list)
    get_pulls_calls: int = 0
    error: Optional[Exception] = None

    def get_pulls(self, state: str = "open", base: Optional[str] = None):
        self.get_pulls_calls += 1
        if self.error is not None:
            raise self.error
        assert state == "open"
        return [p for p in self.pulls if base is None or p.base.ref == base]

"""
Result types reported back across the process boundary.

All of these live only for one worker invocation: the batch runner builds
them, the protocol encoder writes them to stdout, and the orchestrator-side
decoder rebuilds them from the document.
"""

from dataclasses import dataclass, field
from enum import Enum

from .constants import STATUS_ERROR, STATUS_SUCCESS
from .library.base import AlbumMembership


class ResultStatus(Enum):
    """Status of a batch, a delete, or a single photo."""

    SUCCESS = STATUS_SUCCESS
    ERROR = STATUS_ERROR


@dataclass
class SingleImportResult:
    """Outcome of importing one manifest entry."""

    path: str
    status: ResultStatus
    local_identifier: str | None = None
    url: str | None = None
    albums_restored: list[AlbumMembership] = field(default_factory=list)
    favorite_restored: bool = False
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def success(
        cls,
        path: str,
        local_identifier: str,
        albums_restored: list[AlbumMembership] | None = None,
        favorite_restored: bool = False,
    ) -> "SingleImportResult":
        return cls(
            path=path,
            status=ResultStatus.SUCCESS,
            local_identifier=local_identifier,
            albums_restored=list(albums_restored or []),
            favorite_restored=favorite_restored,
        )

    @classmethod
    def error(cls, path: str, code: str, message: str) -> "SingleImportResult":
        return cls(path=path, status=ResultStatus.ERROR, error_code=code, error_message=message)

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS


@dataclass
class BatchOutcome:
    """
    Outcome of a whole import batch.

    A batch-level error means no photo was attempted; per-photo failures only
    appear inside a successful outcome's ``results``, keyed by manifest path.
    """

    status: ResultStatus
    results: dict[str, SingleImportResult] = field(default_factory=dict)
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def success(cls, results: list[SingleImportResult] | None = None) -> "BatchOutcome":
        return cls(status=ResultStatus.SUCCESS, results={r.path: r for r in results or []})

    @classmethod
    def error(cls, code: str, message: str) -> "BatchOutcome":
        return cls(status=ResultStatus.ERROR, error_code=code, error_message=message)

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def imported_count(self) -> int:
        return sum(1 for r in self.results.values() if r.ok)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results.values() if not r.ok)


@dataclass
class DeleteOutcome:
    """Outcome of a delete request."""

    status: ResultStatus
    deleted_count: int | None = None
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def success(cls, deleted_count: int) -> "DeleteOutcome":
        return cls(status=ResultStatus.SUCCESS, deleted_count=deleted_count)

    @classmethod
    def error(cls, code: str, message: str) -> "DeleteOutcome":
        return cls(status=ResultStatus.ERROR, error_code=code, error_message=message)

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS

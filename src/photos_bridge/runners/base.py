"""Base runner classes and protocols."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from ..manifest import ManifestEntry
from ..results import BatchOutcome, SingleImportResult


@dataclass
class ImportCallbacks:
    """
    Callbacks for batch progress reporting.

    Allows the CLI to report progress on stderr without coupling the runner
    to Rich. All callbacks are optional - if None, no callback is made.
    """

    on_batch_start: Callable[[int], None] | None = None  # total photos
    on_photo_start: Callable[[str, int, int], None] | None = None  # path, index, total
    on_photo_complete: Callable[[SingleImportResult], None] | None = None
    on_batch_complete: Callable[[BatchOutcome], None] | None = None


class ImportRunnerProtocol(Protocol):
    """Protocol for batch import runners."""

    def run(self, photos: list[ManifestEntry], callbacks: ImportCallbacks | None = None) -> BatchOutcome:
        """
        Import a batch of photos.

        Args:
            photos: Manifest entries, in manifest order
            callbacks: Optional callbacks for progress reporting

        Returns:
            BatchOutcome with one result per photo, or a batch-level error
        """
        ...

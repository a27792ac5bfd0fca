"""Batch import runner - Imports a manifest's photos one at a time."""

import logging
import time
from collections.abc import Callable

from ..actions import import_single_photo
from ..constants import AUTH_ERROR, DEFAULT_URL_SCHEME, VERIFY_ATTEMPTS, VERIFY_DELAY_SECONDS
from ..identifiers import asset_url
from ..library.base import AssetLibrary
from ..library.errors import LibraryError
from ..manifest import ManifestEntry
from ..results import BatchOutcome, SingleImportResult
from .base import ImportCallbacks

logger = logging.getLogger(__name__)


class BatchImportRunner:
    """
    Sequential batch import runner.

    Authorizes once for the whole batch, then imports entries strictly in
    manifest order, never overlapping calls into the library.
    """

    def __init__(
        self,
        library: AssetLibrary,
        verify_attempts: int = VERIFY_ATTEMPTS,
        verify_delay: float = VERIFY_DELAY_SECONDS,
        url_scheme: str = DEFAULT_URL_SCHEME,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the runner.

        Args:
            library: Asset library to import into
            verify_attempts: Accessibility polls after each import
            verify_delay: Seconds between accessibility polls
            url_scheme: Scheme for the deep links reported per photo
            sleep: Sleep function (injectable for tests)
        """
        self.library = library
        self.verify_attempts = verify_attempts
        self.verify_delay = verify_delay
        self.url_scheme = url_scheme
        self.sleep = sleep

    def run(self, photos: list[ManifestEntry], callbacks: ImportCallbacks | None = None) -> BatchOutcome:
        """
        Import a batch of photos.

        An empty batch succeeds without asking for authorization. A refused
        authorization fails the batch before any photo is touched. After that,
        each photo succeeds or fails on its own.

        Args:
            photos: Manifest entries, in manifest order
            callbacks: Optional callbacks for progress reporting

        Returns:
            BatchOutcome with one result per photo, or a batch-level error
        """
        cb = callbacks or ImportCallbacks()

        if not photos:
            outcome = BatchOutcome.success([])
            if cb.on_batch_complete:
                cb.on_batch_complete(outcome)
            return outcome

        try:
            self.library.ensure_write_access()
        except LibraryError as e:
            return self._fail(BatchOutcome.error(e.code, e.message), cb)
        except Exception as e:
            return self._fail(BatchOutcome.error(AUTH_ERROR, str(e)), cb)

        if cb.on_batch_start:
            cb.on_batch_start(len(photos))

        total = len(photos)
        results: list[SingleImportResult] = []
        for index, entry in enumerate(photos, start=1):
            if cb.on_photo_start:
                cb.on_photo_start(entry.path, index, total)

            result = import_single_photo(
                self.library,
                entry,
                verify_attempts=self.verify_attempts,
                verify_delay=self.verify_delay,
                sleep=self.sleep,
            )
            results.append(result)

            if cb.on_photo_complete:
                cb.on_photo_complete(result)

        self._attach_urls(results)

        outcome = BatchOutcome.success(results)
        logger.info(f"Batch complete: {outcome.imported_count} imported, {outcome.failed_count} failed")

        if cb.on_batch_complete:
            cb.on_batch_complete(outcome)

        return outcome

    def _attach_urls(self, results: list[SingleImportResult]) -> None:
        """Fill in deep links for successful imports."""
        try:
            collection = self.library.default_collection_identifier()
        except Exception as e:
            logger.warning(f"Warning: Failed to resolve user library collection: {e}")
            collection = None

        for result in results:
            if result.ok and result.local_identifier:
                result.url = asset_url(result.local_identifier, collection, self.url_scheme)

    def _fail(self, outcome: BatchOutcome, cb: ImportCallbacks) -> BatchOutcome:
        logger.error(f"Batch aborted: {outcome.error_code}: {outcome.error_message}")
        if cb.on_batch_complete:
            cb.on_batch_complete(outcome)
        return outcome

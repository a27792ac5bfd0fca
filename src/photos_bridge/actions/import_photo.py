"""Import actions - Bring one rendered photo into the asset library."""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from ..constants import FILE_NOT_FOUND, IMPORT_FAILED, VERIFY_ATTEMPTS, VERIFY_DELAY_SECONDS
from ..library.base import AssetLibrary
from ..library.errors import LibraryError
from ..manifest import ManifestEntry
from ..results import SingleImportResult
from .restore import fetch_previous_metadata, restore_metadata

logger = logging.getLogger(__name__)


def wait_until_accessible(
    library: AssetLibrary,
    identifier: str,
    attempts: int = VERIFY_ATTEMPTS,
    delay: float = VERIFY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Poll until a freshly created asset resolves.

    The library accepts creation requests before the asset is queryable, so
    this absorbs that lag with a fixed number of polls and a fixed delay
    between them (none after the last poll). A poll that raises counts as
    not accessible yet.

    Returns:
        True if the asset became accessible within the attempts
    """
    for attempt in range(1, attempts + 1):
        try:
            if library.is_asset_accessible(identifier):
                return True
        except Exception as e:
            logger.warning(f"Warning: Accessibility check failed for {identifier}: {e}")
        if attempt < attempts:
            sleep(delay)
    return False


def import_single_photo(
    library: AssetLibrary,
    entry: ManifestEntry,
    verify_attempts: int = VERIFY_ATTEMPTS,
    verify_delay: float = VERIFY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> SingleImportResult:
    """
    Import one manifest entry, restoring metadata from its previous version.

    File check and import are hard gates; restoring favorite status and album
    membership is best-effort and never turns a successful import into an
    error.

    Args:
        library: Asset library to import into (write access already granted)
        entry: Manifest entry with the file path and optional previous identifier
        verify_attempts: Accessibility polls after import
        verify_delay: Seconds between polls
        sleep: Sleep function (injectable for tests)

    Returns:
        SingleImportResult for the entry
    """
    path = entry.path
    if not Path(path).exists():
        return SingleImportResult.error(path, FILE_NOT_FOUND, f"File does not exist: {path}")

    previous = fetch_previous_metadata(library, entry.previous_identifier)

    try:
        identifier = library.import_photo(Path(path))
    except LibraryError as e:
        return SingleImportResult.error(path, e.code, e.message)
    except Exception as e:
        return SingleImportResult.error(path, IMPORT_FAILED, str(e))

    if not wait_until_accessible(library, identifier, verify_attempts, verify_delay, sleep):
        # Creation was accepted, so the identifier is reported anyway
        logger.debug(f"Asset {identifier} not yet accessible after {verify_attempts} attempts")

    restored = restore_metadata(library, identifier, previous)
    if not restored.complete:
        logger.debug(
            f"Partial restore for {identifier}: favorite failed={restored.favorite_failed}, "
            f"albums failed={restored.albums_failed}"
        )

    return SingleImportResult.success(
        path=path,
        local_identifier=identifier,
        albums_restored=restored.albums_restored,
        favorite_restored=restored.favorite_restored,
    )

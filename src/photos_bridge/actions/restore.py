"""Restore actions - Carry album membership and favorite status to a re-imported photo."""

import logging
from dataclasses import dataclass, field

from ..identifiers import canonical
from ..library.base import AlbumMembership, AssetLibrary

logger = logging.getLogger(__name__)


@dataclass
class PreviousMetadata:
    """What the previously published version of a photo looked like."""

    albums: list[AlbumMembership] = field(default_factory=list)
    is_favorite: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.albums and not self.is_favorite


@dataclass
class RestoreResult:
    """
    What was actually re-applied to the new asset.

    Only successes are recorded: an album missing from ``albums_restored``
    (or ``favorite_restored`` staying False) means that step failed or was
    not needed.
    """

    albums_restored: list[AlbumMembership] = field(default_factory=list)
    favorite_restored: bool = False
    albums_failed: int = 0
    favorite_failed: bool = False

    @property
    def complete(self) -> bool:
        return self.albums_failed == 0 and not self.favorite_failed


def fetch_previous_metadata(library: AssetLibrary, previous_identifier: str | None) -> PreviousMetadata:
    """
    Look up albums and favorite status of a previous asset.

    The identifier is canonicalized first. Lookups are best-effort: an
    unknown asset or a failing lookup yields empty metadata.
    """
    previous_uuid = canonical(previous_identifier or "")
    if not previous_uuid:
        return PreviousMetadata()

    try:
        albums = list(library.fetch_albums_containing(previous_uuid))
    except Exception as e:
        logger.warning(f"Warning: Failed to fetch albums for {previous_uuid}: {e}")
        albums = []

    try:
        is_favorite = bool(library.is_favorite(previous_uuid))
    except Exception as e:
        logger.warning(f"Warning: Failed to fetch favorite status for {previous_uuid}: {e}")
        is_favorite = False

    return PreviousMetadata(albums=albums, is_favorite=is_favorite)


def restore_metadata(library: AssetLibrary, identifier: str, previous: PreviousMetadata) -> RestoreResult:
    """
    Re-apply previous metadata to a newly imported asset.

    Favorite first, then each album independently. Failures are logged as
    warnings and never raised.

    Args:
        library: Asset library to modify
        identifier: Full identifier of the new asset
        previous: Metadata fetched from the previous asset

    Returns:
        RestoreResult listing only what succeeded
    """
    result = RestoreResult()
    if previous.is_empty:
        return result

    if previous.is_favorite:
        try:
            library.set_favorite(True, identifier)
            result.favorite_restored = True
        except Exception as e:
            result.favorite_failed = True
            logger.warning(f"Warning: Failed to restore favorite status: {e}")

    for album in previous.albums:
        try:
            library.add_asset(identifier, album.uuid)
            result.albums_restored.append(album)
        except Exception as e:
            result.albums_failed += 1
            logger.warning(f"Warning: Failed to restore album {album.display_name}: {e}")

    return result

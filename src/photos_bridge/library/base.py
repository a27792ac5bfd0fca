"""Asset library capability protocol and the values it exchanges."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class AlbumMembership:
    """
    One album (user collection) containing an asset.

    Two memberships are the same album when their ``uuid`` matches; the title
    is informational and may be absent for untitled albums.
    """

    uuid: str
    title: str | None = field(default=None, compare=False)

    @property
    def display_name(self) -> str:
        return self.title or self.uuid


class AssetLibrary(Protocol):
    """
    Operations the worker needs from the photo library.

    Lookup methods take the canonical (UUID-only) identifier and never raise;
    mutating methods take the full identifier and raise ``LibraryError``
    subclasses on failure.
    """

    def ensure_write_access(self) -> None:
        """
        Make sure the process may modify the library, prompting if needed.

        Raises:
            WriteAuthorizationDenied: Access is missing or was refused
        """
        ...

    def fetch_albums_containing(self, identifier: str) -> list[AlbumMembership]:
        """Return the albums containing an asset (empty if it is not found)."""
        ...

    def is_favorite(self, identifier: str) -> bool:
        """Return whether an asset is a favorite (False if it is not found)."""
        ...

    def set_favorite(self, favorite: bool, identifier: str) -> None:
        """
        Set or clear the favorite flag on an asset.

        Raises:
            AssetNotFound: The identifier does not resolve
        """
        ...

    def import_photo(self, path: Path) -> str:
        """
        Import an image file, returning the new asset's full identifier.

        Raises:
            ImportFailed: The library rejected the file
        """
        ...

    def is_asset_accessible(self, identifier: str) -> bool:
        """Return whether an identifier resolves to an asset yet."""
        ...

    def delete_assets(self, identifiers: list[str]) -> None:
        """
        Delete assets as one request (one user confirmation), all or nothing.

        Raises:
            DeleteFailed: Nothing was deleted
        """
        ...

    def add_asset(self, identifier: str, album_identifier: str) -> None:
        """
        Add an asset to an album.

        Raises:
            AssetNotFound: The asset does not resolve
            AlbumNotFound: The album does not resolve
            AddToAlbumFailed: The library rejected the change
        """
        ...

    def default_collection_identifier(self) -> str | None:
        """Return the identifier of the user library collection, if available."""
        ...

"""Errors raised by asset library implementations."""

from pathlib import Path


class LibraryError(Exception):
    """Base class for known asset library failures, carrying a wire error code."""

    code = "LIBRARY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReadAuthorizationDenied(LibraryError):
    code = "READ_AUTH_DENIED"

    def __init__(self):
        super().__init__("Photos library read access not authorized")


class WriteAuthorizationDenied(LibraryError):
    code = "WRITE_AUTH_DENIED"

    def __init__(self):
        super().__init__("Photos library write access not authorized")


class AssetNotFound(LibraryError):
    code = "ASSET_NOT_FOUND"

    def __init__(self, identifier: str):
        super().__init__(f"Asset not found: {identifier}")
        self.identifier = identifier


class AlbumNotFound(LibraryError):
    code = "ALBUM_NOT_FOUND"

    def __init__(self, identifier: str):
        super().__init__(f"Album not found: {identifier}")
        self.identifier = identifier


class ImportFailed(LibraryError):
    code = "IMPORT_FAILED"

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Failed to import {Path(path).name}: {reason}")
        self.path = Path(path)
        self.reason = reason


class DeleteFailed(LibraryError):
    code = "DELETE_FAILED"

    def __init__(self, identifiers: list[str], reason: str):
        super().__init__(f"Failed to delete {len(identifiers)} assets: {reason}")
        self.identifiers = list(identifiers)
        self.reason = reason


class AddToAlbumFailed(LibraryError):
    code = "ADD_TO_ALBUM_FAILED"

    def __init__(self, asset_id: str, album_id: str, reason: str):
        super().__init__(f"Failed to add {asset_id} to album {album_id}: {reason}")
        self.asset_id = asset_id
        self.album_id = album_id
        self.reason = reason

"""
Library layer - The asset library capability the worker drives.

The real binding lives outside this package. It only has to satisfy
``AssetLibrary`` and raise ``LibraryError`` subclasses for known failures.
"""

from .base import AlbumMembership, AssetLibrary
from .errors import (
    AddToAlbumFailed,
    AlbumNotFound,
    AssetNotFound,
    DeleteFailed,
    ImportFailed,
    LibraryError,
    ReadAuthorizationDenied,
    WriteAuthorizationDenied,
)
from .loader import LibraryLoadError, load_library

__all__ = [
    "AlbumMembership",
    "AssetLibrary",
    "LibraryError",
    "ReadAuthorizationDenied",
    "WriteAuthorizationDenied",
    "AssetNotFound",
    "AlbumNotFound",
    "ImportFailed",
    "DeleteFailed",
    "AddToAlbumFailed",
    "LibraryLoadError",
    "load_library",
]

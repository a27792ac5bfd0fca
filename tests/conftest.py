"""Shared pytest fixtures for photos-bridge tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from photos_bridge.library import AlbumMembership


class FakeAssetLibrary:
    """Configurable in-memory asset library that records every call."""

    def __init__(self):
        # Configuration
        self.ensure_write_access_error: Exception | None = None
        self.albums_to_return: list[AlbumMembership] = []
        self.is_favorite_return = False
        self.set_favorite_error: Exception | None = None
        self.import_photo_return = "mock-identifier"
        self.import_photo_error: Exception | None = None
        self.accessible_after = 1  # accessibility polls until the asset resolves
        self.is_asset_accessible_error: Exception | None = None
        self.delete_assets_error: Exception | None = None
        self.add_asset_errors: dict[str, Exception] = {}
        self.default_collection_return: str | None = "user-library-id"

        # Call tracking
        self.calls: list[str] = []
        self.ensure_write_access_calls = 0
        self.fetch_albums_calls: list[str] = []
        self.is_favorite_calls: list[str] = []
        self.set_favorite_calls: list[tuple[bool, str]] = []
        self.import_photo_calls: list[Path] = []
        self.accessible_calls: list[str] = []
        self.delete_assets_calls: list[list[str]] = []
        self.add_asset_calls: list[tuple[str, str]] = []

    def ensure_write_access(self) -> None:
        self.calls.append("ensure_write_access")
        self.ensure_write_access_calls += 1
        if self.ensure_write_access_error:
            raise self.ensure_write_access_error

    def fetch_albums_containing(self, identifier: str) -> list[AlbumMembership]:
        self.calls.append("fetch_albums_containing")
        self.fetch_albums_calls.append(identifier)
        return list(self.albums_to_return)

    def is_favorite(self, identifier: str) -> bool:
        self.calls.append("is_favorite")
        self.is_favorite_calls.append(identifier)
        return self.is_favorite_return

    def set_favorite(self, favorite: bool, identifier: str) -> None:
        self.calls.append("set_favorite")
        self.set_favorite_calls.append((favorite, identifier))
        if self.set_favorite_error:
            raise self.set_favorite_error

    def import_photo(self, path: Path) -> str:
        self.calls.append("import_photo")
        self.import_photo_calls.append(path)
        if self.import_photo_error:
            raise self.import_photo_error
        return self.import_photo_return

    def is_asset_accessible(self, identifier: str) -> bool:
        self.calls.append("is_asset_accessible")
        self.accessible_calls.append(identifier)
        if self.is_asset_accessible_error:
            raise self.is_asset_accessible_error
        return len(self.accessible_calls) >= self.accessible_after

    def delete_assets(self, identifiers: list[str]) -> None:
        self.calls.append("delete_assets")
        self.delete_assets_calls.append(list(identifiers))
        if self.delete_assets_error:
            raise self.delete_assets_error

    def add_asset(self, identifier: str, album_identifier: str) -> None:
        self.calls.append("add_asset")
        self.add_asset_calls.append((identifier, album_identifier))
        if album_identifier in self.add_asset_errors:
            raise self.add_asset_errors[album_identifier]

    def default_collection_identifier(self) -> str | None:
        self.calls.append("default_collection_identifier")
        return self.default_collection_return


@pytest.fixture
def fake_library():
    """Fresh fake asset library."""
    return FakeAssetLibrary()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def photo_file(tmp_path):
    """A rendered photo on disk."""
    photo = tmp_path / "IMG_0001.jpg"
    photo.write_bytes(b"\xff\xd8fake jpeg data")
    return photo


@pytest.fixture
def photo_files(tmp_path):
    """Two rendered photos on disk."""
    paths = []
    for name in ("IMG_0001.jpg", "IMG_0002.jpg"):
        photo = tmp_path / name
        photo.write_bytes(b"\xff\xd8fake jpeg data")
        paths.append(photo)
    return paths


@pytest.fixture
def no_sleep():
    """Sleep replacement that records requested delays."""
    delays: list[float] = []

    def sleep(seconds: float):
        delays.append(seconds)

    sleep.delays = delays
    return sleep

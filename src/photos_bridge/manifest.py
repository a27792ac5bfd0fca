"""
Batch import manifest - the request half of the worker protocol.

The orchestrator writes one manifest per batch and hands its path to the
worker::

    <manifest>
      <photos>
        <photo>
          <path>/tmp/export/IMG_0001.jpg</path>
          <previousIdentifier>B84E8479-.../L0/001</previousIdentifier>
        </photo>
      </photos>
    </manifest>
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    MANIFEST_NOT_FOUND,
    MANIFEST_PARSE_ERROR,
    MANIFEST_PATH,
    MANIFEST_PHOTO,
    MANIFEST_PHOTOS,
    MANIFEST_PREVIOUS_IDENTIFIER,
    MANIFEST_ROOT,
)


class ManifestError(Exception):
    """Manifest is missing or structurally invalid; aborts the whole batch."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class ManifestEntry:
    """A photo to import, optionally replacing a previously published version."""

    path: str
    previous_identifier: str | None = None


def parse_manifest(document: str | bytes) -> list[ManifestEntry]:
    """
    Parse a manifest document into entries, in document order.

    A missing ``photos`` element means an empty batch. Photos without a
    non-empty ``path`` are skipped rather than reported.

    Raises:
        ManifestError: If the document is not XML or the root is not ``manifest``
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise ManifestError(MANIFEST_PARSE_ERROR, f"Failed to parse manifest: {e}") from e

    if root.tag != MANIFEST_ROOT:
        raise ManifestError(MANIFEST_PARSE_ERROR, "Failed to parse manifest: Invalid manifest: missing root element")

    photos = root.find(MANIFEST_PHOTOS)
    if photos is None:
        return []

    entries = []
    for photo in photos.findall(MANIFEST_PHOTO):
        path = photo.findtext(MANIFEST_PATH)
        if not path:
            continue
        previous = photo.findtext(MANIFEST_PREVIOUS_IDENTIFIER) or None
        entries.append(ManifestEntry(path=path, previous_identifier=previous))

    return entries


def load_manifest(path: Path) -> list[ManifestEntry]:
    """
    Read and parse a manifest file.

    Raises:
        ManifestError: If the file does not exist, cannot be read, or is malformed
    """
    if not path.exists():
        raise ManifestError(MANIFEST_NOT_FOUND, f"Manifest file does not exist: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ManifestError(MANIFEST_PARSE_ERROR, f"Failed to parse manifest: {e}") from e

    return parse_manifest(data)


def build_manifest(entries: list[ManifestEntry]) -> str:
    """Serialize entries to a manifest document (the orchestrator side of the request)."""
    root = ET.Element(MANIFEST_ROOT)
    photos = ET.SubElement(root, MANIFEST_PHOTOS)
    for entry in entries:
        photo = ET.SubElement(photos, MANIFEST_PHOTO)
        ET.SubElement(photo, MANIFEST_PATH).text = entry.path
        if entry.previous_identifier:
            ET.SubElement(photo, MANIFEST_PREVIOUS_IDENTIFIER).text = entry.previous_identifier

    return ET.tostring(root, encoding="unicode")


def write_manifest(entries: list[ManifestEntry], path: Path) -> Path:
    """Write a manifest file for the worker and return its path."""
    path.write_text(build_manifest(entries), encoding="utf-8")
    return path

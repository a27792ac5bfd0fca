"""
Result documents - the response half of the worker protocol.

The worker writes exactly one document to stdout per invocation; the
orchestrator decodes it with the functions below. Both sides share the
element names in ``constants`` so the schema cannot drift.

Batch import::

    <?xml version="1.0" encoding="UTF-8"?>
    <batchImportResult>
      <status>success</status>
      <results>
        <result path="/tmp/a.jpg">
          <status>success</status>
          <localIdentifier>B84E8479-.../L0/001</localIdentifier>
          <url>photos:albums?albumUuid=...&amp;assetUuid=B84E8479-...</url>
          <favoriteRestored>true</favoriteRestored>
          <albumsRestored>
            <album><identifier>...</identifier><title>Vacation</title></album>
          </albumsRestored>
        </result>
        <result path="/tmp/b.jpg">
          <status>error</status>
          <errorCode>FILE_NOT_FOUND</errorCode>
          <errorMessage>File does not exist: /tmp/b.jpg</errorMessage>
        </result>
      </results>
    </batchImportResult>

Delete::

    <deleteResult><status>success</status><deletedCount>3</deletedCount></deleteResult>
"""

import logging
import xml.etree.ElementTree as ET

from .constants import BATCH_IMPORT_ROOT, DELETE_ROOT, PARSE_ERROR, STATUS_ERROR, STATUS_SUCCESS
from .library.base import AlbumMembership
from .results import BatchOutcome, DeleteOutcome, ResultStatus, SingleImportResult

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _text_element(parent: ET.Element, tag: str, text: str | None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text or ""
    return element


def _serialize(root: ET.Element) -> str:
    ET.indent(root, space="  ")
    return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"


def _error_document(root_tag: str, code: str | None, message: str | None) -> str:
    root = ET.Element(root_tag)
    _text_element(root, "status", STATUS_ERROR)
    _text_element(root, "errorCode", code)
    _text_element(root, "errorMessage", message)
    return _serialize(root)


# =============================================================================
# Encoding (worker side)
# =============================================================================


def _encode_single_result(parent: ET.Element, result: SingleImportResult) -> None:
    element = ET.SubElement(parent, "result", {"path": result.path})
    _text_element(element, "status", result.status.value)

    if result.ok:
        if result.local_identifier:
            _text_element(element, "localIdentifier", result.local_identifier)
            if result.url:
                _text_element(element, "url", result.url)

        if result.favorite_restored:
            _text_element(element, "favoriteRestored", "true")

        if result.albums_restored:
            albums = ET.SubElement(element, "albumsRestored")
            for album in result.albums_restored:
                album_element = ET.SubElement(albums, "album")
                _text_element(album_element, "identifier", album.uuid)
                _text_element(album_element, "title", album.title)
    else:
        if result.error_code:
            _text_element(element, "errorCode", result.error_code)
        if result.error_message:
            _text_element(element, "errorMessage", result.error_message)


def encode_batch_outcome(outcome: BatchOutcome) -> str:
    """Serialize a batch outcome to a UTF-8 XML document ending in a newline."""
    if not outcome.ok:
        return _error_document(BATCH_IMPORT_ROOT, outcome.error_code, outcome.error_message)

    root = ET.Element(BATCH_IMPORT_ROOT)
    _text_element(root, "status", STATUS_SUCCESS)
    results = ET.SubElement(root, "results")
    for result in outcome.results.values():
        _encode_single_result(results, result)

    return _serialize(root)


def encode_delete_outcome(outcome: DeleteOutcome) -> str:
    """Serialize a delete outcome to a UTF-8 XML document ending in a newline."""
    if not outcome.ok:
        return _error_document(DELETE_ROOT, outcome.error_code, outcome.error_message)

    root = ET.Element(DELETE_ROOT)
    _text_element(root, "status", STATUS_SUCCESS)
    _text_element(root, "deletedCount", str(outcome.deleted_count or 0))
    return _serialize(root)


# =============================================================================
# Decoding (orchestrator side)
# =============================================================================


def _parse_error_message(exit_code: int | None, output: str | None) -> str:
    if exit_code is None:
        message = "Failed to parse importer response"
    else:
        message = f"Failed to parse importer response (exit code: {exit_code})"
    if output:
        message += f"\nOutput: {output}"
    return message


def _find_root(document: str | None, root_tag: str) -> ET.Element | None:
    """Locate the result element, either as the document root or its direct child."""
    if not document or not document.strip():
        return None

    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        logger.debug(f"Unparseable result document: {e}")
        return None

    if root.tag == root_tag:
        return root
    return root.find(root_tag)


def _decode_single_result(element: ET.Element) -> SingleImportResult | None:
    path = element.get("path")
    if path is None:
        return None

    if element.findtext("status") != STATUS_SUCCESS:
        return SingleImportResult(
            path=path,
            status=ResultStatus.ERROR,
            error_code=element.findtext("errorCode"),
            error_message=element.findtext("errorMessage"),
        )

    albums = [
        AlbumMembership(uuid=album.findtext("identifier") or "", title=album.findtext("title") or None)
        for album in element.iterfind("albumsRestored/album")
    ]
    return SingleImportResult(
        path=path,
        status=ResultStatus.SUCCESS,
        local_identifier=element.findtext("localIdentifier"),
        url=element.findtext("url"),
        albums_restored=albums,
        favorite_restored=element.findtext("favoriteRestored") == "true",
    )


def decode_batch_outcome(document: str | None, exit_code: int | None = None) -> BatchOutcome:
    """
    Parse a batch import result document.

    Empty or unparseable output becomes a ``PARSE_ERROR`` outcome rather than
    an exception, so the caller always gets something to reconcile against.

    Args:
        document: Raw worker stdout
        exit_code: Worker exit code, quoted in the parse error message

    Returns:
        The decoded BatchOutcome
    """
    root = _find_root(document, BATCH_IMPORT_ROOT)
    status = root.findtext("status") if root is not None else None

    if status == STATUS_SUCCESS:
        results = {}
        for element in root.iterfind("results/result"):
            result = _decode_single_result(element)
            if result is not None:
                results[result.path] = result
        return BatchOutcome(status=ResultStatus.SUCCESS, results=results)

    if status == STATUS_ERROR:
        return BatchOutcome.error(root.findtext("errorCode"), root.findtext("errorMessage"))

    return BatchOutcome.error(PARSE_ERROR, _parse_error_message(exit_code, document))


def decode_delete_outcome(document: str | None, exit_code: int | None = None) -> DeleteOutcome:
    """Parse a delete result document; see ``decode_batch_outcome`` for error handling."""
    root = _find_root(document, DELETE_ROOT)
    status = root.findtext("status") if root is not None else None

    if status == STATUS_SUCCESS:
        try:
            deleted_count = int(root.findtext("deletedCount") or 0)
        except ValueError:
            deleted_count = 0
        return DeleteOutcome.success(deleted_count)

    if status == STATUS_ERROR:
        return DeleteOutcome.error(root.findtext("errorCode"), root.findtext("errorMessage"))

    return DeleteOutcome.error(PARSE_ERROR, _parse_error_message(exit_code, document))

"""Tests for result document encoding and decoding."""

import xml.etree.ElementTree as ET

from photos_bridge.constants import PARSE_ERROR
from photos_bridge.library import AlbumMembership
from photos_bridge.protocol import (
    decode_batch_outcome,
    decode_delete_outcome,
    encode_batch_outcome,
    encode_delete_outcome,
)
from photos_bridge.results import BatchOutcome, DeleteOutcome, ResultStatus, SingleImportResult


def _mixed_outcome() -> BatchOutcome:
    success = SingleImportResult.success(
        path="/a.jpg",
        local_identifier="B84E8479-474C-4727-8B95-B2CE1FFE2E0D/L0/001",
        albums_restored=[AlbumMembership("alb-1", "Vacation"), AlbumMembership("alb-2", None)],
        favorite_restored=True,
    )
    success.url = "photos:albums?albumUuid=lib-uuid&assetUuid=B84E8479-474C-4727-8B95-B2CE1FFE2E0D"
    failure = SingleImportResult.error("/b.jpg", "FILE_NOT_FOUND", "File does not exist: /b.jpg")
    return BatchOutcome.success([success, failure])


class TestEncodeBatchOutcome:
    """Tests for encode_batch_outcome()."""

    def test_document_shape(self):
        """Test the success document carries per-path results."""
        document = encode_batch_outcome(_mixed_outcome())
        assert document.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert document.endswith("</batchImportResult>\n")

        root = ET.fromstring(document)
        assert root.tag == "batchImportResult"
        assert root.findtext("status") == "success"

        results = root.findall("results/result")
        assert [r.get("path") for r in results] == ["/a.jpg", "/b.jpg"]

        first, second = results
        assert first.findtext("status") == "success"
        assert first.findtext("localIdentifier") == "B84E8479-474C-4727-8B95-B2CE1FFE2E0D/L0/001"
        assert first.findtext("url").endswith("assetUuid=B84E8479-474C-4727-8B95-B2CE1FFE2E0D")
        assert first.findtext("favoriteRestored") == "true"
        assert [a.findtext("identifier") for a in first.iterfind("albumsRestored/album")] == ["alb-1", "alb-2"]
        assert first.find("errorCode") is None

        assert second.findtext("status") == "error"
        assert second.findtext("errorCode") == "FILE_NOT_FOUND"
        assert second.find("localIdentifier") is None

    def test_omits_optional_elements(self):
        """Test favoriteRestored and albumsRestored only appear when something was restored."""
        outcome = BatchOutcome.success([SingleImportResult.success("/a.jpg", "id-1")])
        result = ET.fromstring(encode_batch_outcome(outcome)).find("results/result")
        assert result.find("favoriteRestored") is None
        assert result.find("albumsRestored") is None
        assert result.find("url") is None

    def test_empty_batch(self):
        """Test an empty batch still has an empty results element."""
        root = ET.fromstring(encode_batch_outcome(BatchOutcome.success([])))
        assert root.findtext("status") == "success"
        assert root.find("results") is not None
        assert root.findall("results/result") == []

    def test_batch_error(self):
        """Test a fatal batch error carries no results."""
        document = encode_batch_outcome(BatchOutcome.error("WRITE_AUTH_DENIED", "denied"))
        root = ET.fromstring(document)
        assert root.findtext("status") == "error"
        assert root.findtext("errorCode") == "WRITE_AUTH_DENIED"
        assert root.findtext("errorMessage") == "denied"
        assert root.find("results") is None
        assert document.endswith("\n")

    def test_escapes_special_characters(self):
        """Test paths and messages with markup characters survive encoding."""
        outcome = BatchOutcome.success([SingleImportResult.error('/x/"a" & <b>.jpg', "ERR", "bad <thing> & more")])
        decoded = decode_batch_outcome(encode_batch_outcome(outcome))
        result = decoded.results['/x/"a" & <b>.jpg']
        assert result.error_message == "bad <thing> & more"


class TestDecodeBatchOutcome:
    """Tests for decode_batch_outcome()."""

    def test_round_trip(self):
        """Test decoding an encoded outcome gives back the same outcome."""
        outcome = _mixed_outcome()
        decoded = decode_batch_outcome(encode_batch_outcome(outcome))
        assert decoded == outcome
        assert decoded.results["/a.jpg"].albums_restored[0].title == "Vacation"
        assert decoded.results["/a.jpg"].albums_restored[1].title is None

    def test_round_trip_error(self):
        """Test a batch-level error round-trips."""
        outcome = BatchOutcome.error("AUTH_ERROR", "something went wrong")
        assert decode_batch_outcome(encode_batch_outcome(outcome)) == outcome

    def test_empty_output(self):
        """Test empty worker output becomes a PARSE_ERROR outcome."""
        decoded = decode_batch_outcome("", exit_code=1)
        assert decoded.status == ResultStatus.ERROR
        assert decoded.error_code == PARSE_ERROR
        assert "exit code: 1" in decoded.error_message

    def test_garbage_output(self):
        """Test unparseable output is quoted in the error message."""
        decoded = decode_batch_outcome("Segmentation fault", exit_code=139)
        assert decoded.error_code == PARSE_ERROR
        assert "Output: Segmentation fault" in decoded.error_message

    def test_wrong_document(self):
        """Test a delete document is not accepted as an import result."""
        decoded = decode_batch_outcome(encode_delete_outcome(DeleteOutcome.success(1)))
        assert decoded.error_code == PARSE_ERROR

    def test_nested_root(self):
        """Test the result element is found as a child of a wrapper element."""
        document = "<wrapper><batchImportResult><status>success</status><results/></batchImportResult></wrapper>"
        decoded = decode_batch_outcome(document)
        assert decoded.ok
        assert decoded.results == {}

    def test_duplicate_paths_last_wins(self):
        """Test results are keyed by path, later entries replacing earlier ones."""
        document = """<batchImportResult><status>success</status><results>
            <result path="/a.jpg"><status>error</status><errorCode>X</errorCode></result>
            <result path="/a.jpg"><status>success</status><localIdentifier>id-2</localIdentifier></result>
            <result><status>success</status></result>
        </results></batchImportResult>"""
        decoded = decode_batch_outcome(document)
        assert list(decoded.results) == ["/a.jpg"]
        assert decoded.results["/a.jpg"].local_identifier == "id-2"


class TestDeleteDocuments:
    """Tests for delete result documents."""

    def test_success(self):
        """Test delete success document."""
        root = ET.fromstring(encode_delete_outcome(DeleteOutcome.success(3)))
        assert root.tag == "deleteResult"
        assert root.findtext("status") == "success"
        assert root.findtext("deletedCount") == "3"

    def test_error(self):
        """Test delete error document."""
        root = ET.fromstring(encode_delete_outcome(DeleteOutcome.error("DELETE_FAILED", "Oops")))
        assert root.findtext("status") == "error"
        assert root.findtext("errorCode") == "DELETE_FAILED"
        assert root.find("deletedCount") is None

    def test_round_trip(self):
        """Test delete outcomes round-trip."""
        for outcome in (DeleteOutcome.success(0), DeleteOutcome.success(2), DeleteOutcome.error("E", "m")):
            assert decode_delete_outcome(encode_delete_outcome(outcome)) == outcome

    def test_unparseable(self):
        """Test unparseable delete output becomes PARSE_ERROR."""
        decoded = decode_delete_outcome(None)
        assert decoded.error_code == PARSE_ERROR
        assert decoded.error_message == "Failed to parse importer response"

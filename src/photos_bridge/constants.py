"""
Centralized constants for Photos Bridge.

Status values, error codes and element names are shared by the worker and
the orchestrator-side decoder, so both ends of the wire read them from here.
"""

# Result status values
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

# Batch / worker level error codes
AUTH_ERROR = "AUTH_ERROR"
MANIFEST_NOT_FOUND = "MANIFEST_NOT_FOUND"
MANIFEST_PARSE_ERROR = "MANIFEST_PARSE_ERROR"
LIBRARY_UNAVAILABLE = "LIBRARY_UNAVAILABLE"
CONFIG_ERROR = "CONFIG_ERROR"
PARSE_ERROR = "PARSE_ERROR"

# Per-photo and delete error codes
FILE_NOT_FOUND = "FILE_NOT_FOUND"
IMPORT_FAILED = "IMPORT_FAILED"
DELETE_FAILED = "DELETE_FAILED"

# Manifest document
MANIFEST_ROOT = "manifest"
MANIFEST_PHOTOS = "photos"
MANIFEST_PHOTO = "photo"
MANIFEST_PATH = "path"
MANIFEST_PREVIOUS_IDENTIFIER = "previousIdentifier"

# Result documents
BATCH_IMPORT_ROOT = "batchImportResult"
DELETE_ROOT = "deleteResult"

# Deep links into the photo library app
DEFAULT_URL_SCHEME = "photos"

# Post-import accessibility check
VERIFY_ATTEMPTS = 3
VERIFY_DELAY_SECONDS = 0.1

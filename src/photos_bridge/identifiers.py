"""
Asset identifier helpers.

The photo library hands out identifiers like
``B84E8479-474C-4727-8B95-B2CE1FFE2E0D/L0/001``. Lookups are keyed by the
UUID portion before the first ``/``; the full form is what gets persisted
and reported back to the caller.
"""

from .constants import DEFAULT_URL_SCHEME


def canonical(identifier: str) -> str:
    """
    Return the UUID portion of an identifier, stripping any ``/...`` suffix.

    Examples:
        "ABC/L0/001" -> "ABC"
        "ABC"        -> "ABC"
        ""           -> ""
    """
    return identifier.split("/", 1)[0]


def asset_url(identifier: str, collection_identifier: str | None = None, scheme: str = DEFAULT_URL_SCHEME) -> str:
    """
    Build a deep link that opens an asset in the photo library app.

    Args:
        identifier: Asset identifier (full or canonical form)
        collection_identifier: Default/user library collection, if known
        scheme: URL scheme owned by the photo library app

    Returns:
        Album-relative link when the collection is known, identifier-only link otherwise
    """
    asset_uuid = canonical(identifier)
    if collection_identifier:
        return f"{scheme}:albums?albumUuid={canonical(collection_identifier)}&assetUuid={asset_uuid}"
    return f"{scheme}://asset?assetLocalIdentifier={asset_uuid}"

"""Locate actions - Resolve an asset identifier to a deep link."""

from ..constants import DEFAULT_URL_SCHEME
from ..identifiers import asset_url
from ..library.base import AssetLibrary


def locate_asset(library: AssetLibrary, identifier: str, scheme: str = DEFAULT_URL_SCHEME) -> str | None:
    """
    Build the link that shows an asset inside the user library.

    Returns:
        The deep link, or None if the user library collection is unavailable
    """
    collection = library.default_collection_identifier()
    if not collection:
        return None
    return asset_url(identifier, collection, scheme)

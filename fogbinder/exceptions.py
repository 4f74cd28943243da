"""Exceptions for Fogbinder.

The analytic core raises nothing; these cover the document-library
boundary.
"""


class FogbinderError(Exception):
    """Base exception for Fogbinder."""

    pass


class LibraryError(FogbinderError):
    """Raised when the document library cannot be reached or answers badly."""

    def __init__(self, message: str = "Document library request failed."):
        super().__init__(message)


class CollectionNotFoundError(LibraryError):
    """Raised when a collection id is not present in the library."""

    def __init__(self, collection_id: str = ""):
        message = f"Collection not found: {collection_id}" if collection_id else "Collection not found."
        super().__init__(message)


class LibraryNotConfiguredError(LibraryError):
    """Raised when library credentials or ids are missing."""

    def __init__(self, message: str = "Zotero library is not configured. Set ZOTERO_LIBRARY_ID."):
        super().__init__(message)

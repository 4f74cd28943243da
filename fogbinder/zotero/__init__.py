"""Document-library integration (Zotero)."""

from .client import ZoteroClient
from .library import (
    DocumentLibrary,
    InMemoryLibrary,
    create_fog_trail_note,
    extract_citations,
    find_collection,
    get_collection,
    item_to_text,
    tag_with_analysis,
)
from .models import ZoteroCollection, ZoteroItem

__all__ = [
    # Client
    "ZoteroClient",
    # Port and helpers
    "DocumentLibrary",
    "InMemoryLibrary",
    "create_fog_trail_note",
    "extract_citations",
    "find_collection",
    "get_collection",
    "item_to_text",
    "tag_with_analysis",
    # Models
    "ZoteroCollection",
    "ZoteroItem",
]

"""Document-library port and citation helpers.

The analyzer only needs a flat list of citation strings in and a way to
tag or annotate items afterwards. Anything providing the
``DocumentLibrary`` methods will do; ``InMemoryLibrary`` is the offline
stand-in.
"""

from typing import Optional, Protocol

from ..exceptions import CollectionNotFoundError
from .models import ZoteroCollection, ZoteroItem


TAG_PREFIX = "fogbinder:"
NOTE_HEADER = "<h2>FogTrail Visualization</h2>\n"


class DocumentLibrary(Protocol):
    """What the analyzer needs from a reference manager."""

    def get_items(self) -> list[ZoteroItem]:
        ...

    def get_collections(self) -> list[ZoteroCollection]:
        ...

    def add_tag(self, item_id: str, tag: str) -> None:
        ...

    def create_note(self, item_id: str, html: str) -> None:
        ...


def item_to_text(item: ZoteroItem) -> str:
    """Citation text: title, ". ", then the abstract (empty if absent)."""
    return f"{item.title}. {item.abstract_text or ''}"


def extract_citations(collection: ZoteroCollection) -> list[str]:
    """Citation text for every item in the collection."""
    return [item_to_text(item) for item in collection.items]


def find_collection(
    library: DocumentLibrary,
    collection_id: str,
) -> Optional[ZoteroCollection]:
    """Look up a collection by id."""
    for collection in library.get_collections():
        if collection.id == collection_id:
            return collection
    return None


def get_collection(library: DocumentLibrary, collection_id: str) -> ZoteroCollection:
    """Like find_collection, but raises CollectionNotFoundError when absent."""
    collection = find_collection(library, collection_id)
    if collection is None:
        raise CollectionNotFoundError(collection_id)
    return collection


def tag_with_analysis(library: DocumentLibrary, item_id: str, analysis_type: str) -> str:
    """Tag an item as ``fogbinder:<analysis_type>``. Returns the tag."""
    tag = f"{TAG_PREFIX}{analysis_type}"
    library.add_tag(item_id, tag)
    return tag


def create_fog_trail_note(library: DocumentLibrary, item_id: str, svg_content: str) -> str:
    """Attach an SVG FogTrail to an item as an HTML note. Returns the note."""
    note = NOTE_HEADER + svg_content
    library.create_note(item_id, note)
    return note


class InMemoryLibrary:
    """A library held in memory.

    Records every tag and note written so callers can inspect them.
    """

    def __init__(self, collections: Optional[list[ZoteroCollection]] = None):
        self.collections: list[ZoteroCollection] = list(collections or [])
        self.tags: dict[str, list[str]] = {}
        self.notes: dict[str, list[str]] = {}

    def get_items(self) -> list[ZoteroItem]:
        items: list[ZoteroItem] = []
        for collection in self.collections:
            items.extend(collection.items)
        return items

    def get_collections(self) -> list[ZoteroCollection]:
        return list(self.collections)

    def add_tag(self, item_id: str, tag: str) -> None:
        self.tags.setdefault(item_id, []).append(tag)
        for item in self.get_items():
            if item.id == item_id and tag not in item.tags:
                item.tags.append(tag)

    def create_note(self, item_id: str, html: str) -> None:
        self.notes.setdefault(item_id, []).append(html)

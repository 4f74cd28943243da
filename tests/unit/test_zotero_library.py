"""Tests for library models and citation helpers."""

from datetime import datetime, timezone

import pytest

from fogbinder.exceptions import CollectionNotFoundError
from fogbinder.zotero import (
    ZoteroItem,
    create_fog_trail_note,
    extract_citations,
    find_collection,
    get_collection,
    item_to_text,
    tag_with_analysis,
)


class TestZoteroItem:
    """Tests for the item model."""

    def test_from_api(self):
        """API payloads map to items, person and institution creators alike."""
        payload = {
            "key": "ABCD1234",
            "version": 12,
            "data": {
                "key": "ABCD1234",
                "version": 12,
                "itemType": "book",
                "title": "Philosophical Investigations",
                "creators": [
                    {"creatorType": "author", "firstName": "Ludwig", "lastName": "Wittgenstein"},
                    {"creatorType": "editor", "name": "Blackwell"},
                    {"creatorType": "translator", "lastName": "Anscombe"},
                ],
                "abstractNote": "Language games.",
                "tags": [{"tag": "philosophy"}, {"tag": "language", "type": 1}],
                "dateAdded": "2025-01-15T10:00:00Z",
            },
        }

        item = ZoteroItem.from_api(payload)

        assert item.id == "ABCD1234"
        assert item.version == 12
        assert item.title == "Philosophical Investigations"
        assert item.creators == ["Wittgenstein, Ludwig", "Blackwell", "Anscombe"]
        assert item.abstract_text == "Language games."
        assert item.tags == ["philosophy", "language"]
        assert item.date_added == datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)

    def test_from_api_minimal(self):
        """Missing fields fall back to empty values."""
        item = ZoteroItem.from_api({"key": "K", "data": {"abstractNote": ""}})

        assert item.id == "K"
        assert item.title == ""
        assert item.abstract_text is None
        assert item.creators == []
        assert item.date_added is None

    def test_to_dict(self, sample_library):
        """Dates serialize as ISO strings."""
        item = sample_library.collections[0].items[0]

        data = item.to_dict()

        assert data["id"] == "ITEM1"
        assert data["date_added"] == "2025-01-15T10:00:00"


class TestCitations:
    """Tests for citation extraction."""

    def test_item_to_text(self, sample_library):
        """Title, period, space, abstract."""
        item = sample_library.collections[0].items[1]

        assert item_to_text(item) == (
            "How to Do Things With Words. Speech act theory and performative utterances"
        )

    def test_item_without_abstract(self, sample_library):
        """A missing abstract leaves a trailing space."""
        item = sample_library.collections[0].items[2]

        assert item_to_text(item) == "The Mysterious Flame. "

    def test_extract_citations(self, sample_library):
        """One citation per item in order."""
        citations = extract_citations(sample_library.collections[0])

        assert len(citations) == 3
        assert citations[0].startswith("Philosophical Investigations. ")


class TestInMemoryLibrary:
    """Tests for the in-memory library."""

    def test_get_items_across_collections(self, sample_library):
        """Items of every collection are returned."""
        assert [i.id for i in sample_library.get_items()] == ["ITEM1", "ITEM2", "ITEM3"]

    def test_find_collection(self, sample_library):
        """Collections are found by id."""
        assert find_collection(sample_library, "COLL1").name == "Philosophy of Language"
        assert find_collection(sample_library, "missing") is None

    def test_get_collection(self, sample_library):
        """get_collection() raises for unknown ids."""
        assert get_collection(sample_library, "EMPTY").items == []

        with pytest.raises(CollectionNotFoundError, match="NOPE"):
            get_collection(sample_library, "NOPE")

    def test_tag_with_analysis(self, sample_library):
        """Tags are prefixed and recorded on the item."""
        tag = tag_with_analysis(sample_library, "ITEM1", "analyzed")

        assert tag == "fogbinder:analyzed"
        assert sample_library.tags["ITEM1"] == ["fogbinder:analyzed"]
        assert "fogbinder:analyzed" in sample_library.collections[0].items[0].tags

    def test_create_fog_trail_note(self, sample_library):
        """Notes wrap the SVG under a heading."""
        note = create_fog_trail_note(sample_library, "ITEM2", "<svg></svg>")

        assert note == "<h2>FogTrail Visualization</h2>\n<svg></svg>"
        assert sample_library.notes["ITEM2"] == [note]

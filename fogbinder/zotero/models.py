"""Data models for document-library records."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class ZoteroItem:
    """A bibliographic item."""

    id: str
    title: str
    creators: list[str] = field(default_factory=list)
    abstract_text: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    date_added: Optional[datetime] = None
    version: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "creators": self.creators,
            "abstract_text": self.abstract_text,
            "tags": self.tags,
            "date_added": self.date_added.isoformat() if self.date_added else None,
        }

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "ZoteroItem":
        """Create from a Zotero Web API item object."""
        data = payload.get("data", payload)

        creators = []
        for creator in data.get("creators", []):
            if creator.get("name"):
                creators.append(creator["name"])
            else:
                last = creator.get("lastName", "")
                first = creator.get("firstName", "")
                creators.append(f"{last}, {first}" if first else last)

        date_added = None
        if raw_date := data.get("dateAdded"):
            try:
                date_added = datetime.fromisoformat(raw_date.replace("Z", "+00:00"))
            except ValueError:
                date_added = None

        return cls(
            id=data.get("key") or payload.get("key", ""),
            title=data.get("title", ""),
            creators=creators,
            abstract_text=data.get("abstractNote") or None,
            tags=[t["tag"] for t in data.get("tags", []) if "tag" in t],
            date_added=date_added,
            version=data.get("version", payload.get("version")),
        )


@dataclass
class ZoteroCollection:
    """A named collection of items."""

    id: str
    name: str
    items: list[ZoteroItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "items": [item.to_dict() for item in self.items],
        }

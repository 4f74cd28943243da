"""Shared pytest fixtures for Fogbinder tests."""

from datetime import datetime
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Isolate every test from environment-driven settings."""
    from fogbinder.config.settings import Settings, configure

    for var in (
        "ZOTERO_API_KEY",
        "ZOTERO_LIBRARY_ID",
        "ZOTERO_LIBRARY_TYPE",
        "ZOTERO_BASE_URL",
        "FOGBINDER_TITLE",
        "FOGBINDER_LAYOUT",
        "FOGBINDER_LAYOUT_SEED",
        "FOGBINDER_LOG_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    settings = Settings()
    configure(settings)
    yield settings
    configure(None)


@pytest.fixture
def philosophy_context():
    """Context for philosophy-of-language sources."""
    from fogbinder.core import Context

    return Context(
        domain="Philosophy of Language",
        conventions=["academic discourse", "analytic tradition"],
        participants=["philosophers", "linguists"],
        purpose="Understanding meaning",
    )


@pytest.fixture
def physics_context():
    """Context for physics sources."""
    from fogbinder.core import Context

    return Context(
        domain="Quantum Physics",
        conventions=["empirical observation"],
        participants=["physicists"],
        purpose="Understanding light",
    )


@pytest.fixture
def seeded_layout():
    """Reproducible node placement."""
    from fogbinder.engine import RandomLayout

    return RandomLayout(seed=42)


@pytest.fixture
def mystery_sources() -> list[str]:
    """Sources mixing known, vague, mysterious and contradictory claims."""
    return [
        "The meaning of a word is its use in the language.",
        "What it is like to be a bat is mysterious and ineffable.",
        "The boundary of the concept is unclear.",
        "This claim contradicts the previous one.",
        "Qualia are mysterious.",
    ]


@pytest.fixture
def sample_library():
    """In-memory library with one populated and one empty collection."""
    from fogbinder.zotero import InMemoryLibrary, ZoteroCollection, ZoteroItem

    items = [
        ZoteroItem(
            id="ITEM1",
            title="Philosophical Investigations",
            creators=["Wittgenstein, Ludwig"],
            abstract_text="A work on language games and family resemblance",
            date_added=datetime(2025, 1, 15, 10, 0, 0),
        ),
        ZoteroItem(
            id="ITEM2",
            title="How to Do Things With Words",
            creators=["Austin, J.L."],
            abstract_text="Speech act theory and performative utterances",
        ),
        ZoteroItem(
            id="ITEM3",
            title="The Mysterious Flame",
            creators=["McGinn, Colin"],
        ),
    ]

    return InMemoryLibrary([
        ZoteroCollection(id="COLL1", name="Philosophy of Language", items=items),
        ZoteroCollection(id="EMPTY", name="Empty Collection", items=[]),
    ])


@pytest.fixture
def sources_file(tmp_path: Path, mystery_sources: list[str]) -> Path:
    """Sources written one per line, with a blank line to skip."""
    path = tmp_path / "sources.txt"
    path.write_text("\n".join(mystery_sources[:2]) + "\n\n" + "\n".join(mystery_sources[2:]) + "\n")
    return path


@pytest.fixture
def context_file(tmp_path: Path) -> Path:
    """YAML context file."""
    path = tmp_path / "context.yaml"
    path.write_text(
        "domain: Philosophy of Mind\n"
        "conventions:\n"
        "  - phenomenological analysis\n"
        "participants:\n"
        "  - philosophers\n"
        "purpose: Understanding consciousness\n"
    )
    return path

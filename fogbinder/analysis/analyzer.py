"""Analysis pipeline orchestrator.

Runs the full pass over a list of sources:
1. Classify each source's certainty into an EpistemicState
2. Build a SpeechAct per source from its classified mood
3. Score moods
4. Detect contradictions between every pair of acts
5. Wrap mysterious states as Mysteries
6. Cluster mysteries by resistance type
7. Build the FogTrail graph
8. Summarize counts and opacity
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..config.settings import AnalysisConfig, get_settings
from ..core import epistemic_state, speech_act
from ..core.context import Context
from ..engine import contradiction_detector, fog_trail, mood_scorer, mystery_clustering
from ..engine.contradiction_detector import Contradiction
from ..engine.fog_trail import FogTrail, HashedLayout, Layout, RandomLayout
from ..engine.mood_scorer import Mood
from ..engine.mystery_clustering import MysteryCluster
from ..exceptions import CollectionNotFoundError, LibraryError
from ..utils.clock import now_ms
from ..utils.logging import get_logger
from ..zotero.library import (
    DocumentLibrary,
    create_fog_trail_note,
    extract_citations,
    get_collection,
    tag_with_analysis,
)
from .classifiers import (
    CertaintyClassifier,
    MoodClassifier,
    classify_certainty,
    classify_mood,
)


logger = get_logger(__name__)

# Mystery content when a state carries no evidence
UNKNOWN_CONTENT = "Unknown"

EMPTY_TITLE = "Empty"
COLLECTION_PURPOSE = "Research analysis"


@dataclass
class AnalysisOptions:
    """Overrides for a single analysis run.

    Unset fields fall back to settings and the built-in classifiers.
    """

    title: Optional[str] = None
    layout: Optional[Layout] = None
    certainty_classifier: CertaintyClassifier = classify_certainty
    mood_classifier: MoodClassifier = classify_mood


@dataclass(frozen=True)
class AnalysisMetadata:
    """Counts and opacity of an analysis."""

    analyzed: int
    total_sources: int
    total_contradictions: int
    total_mysteries: int
    overall_opacity: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "totalSources": self.total_sources,
            "totalContradictions": self.total_contradictions,
            "totalMysteries": self.total_mysteries,
            "overallOpacity": self.overall_opacity,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis produced."""

    contradictions: tuple[Contradiction, ...] = field(default_factory=tuple)
    moods: tuple[Mood, ...] = field(default_factory=tuple)
    mysteries: tuple[MysteryCluster, ...] = field(default_factory=tuple)
    fog_trail: FogTrail = field(default_factory=lambda: fog_trail.make(EMPTY_TITLE))
    metadata: AnalysisMetadata = field(
        default_factory=lambda: AnalysisMetadata(
            analyzed=now_ms(),
            total_sources=0,
            total_contradictions=0,
            total_mysteries=0,
            overall_opacity=0.0,
        )
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return to_dict(self)


def make_layout(config: AnalysisConfig) -> Layout:
    """Layout strategy named by the analysis config."""
    if config.layout == "hashed":
        return HashedLayout(size=config.canvas_size)
    return RandomLayout(seed=config.layout_seed, size=config.canvas_size)


def empty_result() -> AnalysisResult:
    """Zeroed result returned when there is nothing to analyze."""
    return AnalysisResult()


def analyze(
    sources: Sequence[str],
    context: Context,
    options: Optional[AnalysisOptions] = None,
) -> AnalysisResult:
    """Analyze sources read within one context.

    Never raises on well-typed input; an empty source list yields an
    empty, zero-opacity result.
    """
    options = options or AnalysisOptions()
    config = get_settings().analysis
    title = options.title or config.title
    layout = options.layout or make_layout(config)

    states = [
        epistemic_state.make(options.certainty_classifier(source), context, [source])
        for source in sources
    ]

    acts = [
        speech_act.make(source, options.mood_classifier(source, context).primary, context)
        for source in sources
    ]

    moods = [mood_scorer.score(act) for act in acts]
    contradictions = contradiction_detector.detect_multiple(acts)

    mysteries = [
        mystery_clustering.make(state.evidence[0] if state.evidence else UNKNOWN_CONTENT, state)
        for state in states
        if mystery_clustering.is_mystery(state)
    ]
    clusters = mystery_clustering.cluster(mysteries)

    trail = fog_trail.build_from_analysis(title, sources, contradictions, mysteries, layout=layout)

    logger.debug(
        "Analyzed %d sources: %d contradictions, %d mysteries in %d clusters",
        len(sources), len(contradictions), len(mysteries), len(clusters),
    )

    return AnalysisResult(
        contradictions=tuple(contradictions),
        moods=tuple(moods),
        mysteries=tuple(clusters),
        fog_trail=trail,
        metadata=AnalysisMetadata(
            analyzed=now_ms(),
            total_sources=len(sources),
            total_contradictions=len(contradictions),
            total_mysteries=len(mysteries),
            overall_opacity=trail.metadata.fog_density,
        ),
    )


def analyze_zotero_collection(
    library: DocumentLibrary,
    collection_id: str,
    options: Optional[AnalysisOptions] = None,
    attach_note: bool = False,
) -> AnalysisResult:
    """Analyze one library collection and tag its items.

    The collection name becomes the context domain. Every item is tagged
    ``fogbinder:analyzed``; with ``attach_note`` the FogTrail SVG is also
    attached to each item. A missing collection or a library failure
    while fetching yields ``empty_result()``. A failure while tagging one
    item is logged and the remaining items are still annotated.
    """
    try:
        collection = get_collection(library, collection_id)
    except CollectionNotFoundError as e:
        logger.warning("%s", e)
        return empty_result()
    except LibraryError as e:
        logger.error("Could not load collections: %s", e)
        return empty_result()

    context = Context(
        domain=collection.name,
        conventions=(),
        participants=(),
        purpose=COLLECTION_PURPOSE,
    )
    result = analyze(extract_citations(collection), context, options)

    svg = None
    if attach_note:
        render = get_settings().render
        svg = fog_trail.to_svg(result.fog_trail, render.svg_width, render.svg_height)

    for item in collection.items:
        try:
            tag_with_analysis(library, item.id, "analyzed")
            if svg is not None:
                create_fog_trail_note(library, item.id, svg)
        except LibraryError as e:
            logger.error("Could not annotate item %s: %s", item.id, e)

    return result


def to_dict(result: AnalysisResult) -> dict[str, Any]:
    """JSON projection: summary metadata plus the FogTrail."""
    return {
        "metadata": result.metadata.to_dict(),
        "fogTrail": fog_trail.to_dict(result.fog_trail),
    }

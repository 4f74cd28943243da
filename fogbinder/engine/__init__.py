"""Analysis engine: moods, contradictions, mysteries and the FogTrail graph."""

from .contradiction_detector import ConflictType, Contradiction
from .fog_trail import (
    Edge,
    EdgeType,
    FogTrail,
    FogTrailMetadata,
    HashedLayout,
    Layout,
    Node,
    NodeType,
    RandomLayout,
)
from .mood_scorer import Mood
from .mystery_clustering import (
    Mystery,
    MysteryCluster,
    OpacityKind,
    OpacityLevel,
    ResistanceType,
)

__all__ = [
    # Contradictions
    "ConflictType",
    "Contradiction",
    # FogTrail
    "Edge",
    "EdgeType",
    "FogTrail",
    "FogTrailMetadata",
    "HashedLayout",
    "Layout",
    "Node",
    "NodeType",
    "RandomLayout",
    # Moods
    "Mood",
    # Mysteries
    "Mystery",
    "MysteryCluster",
    "OpacityKind",
    "OpacityLevel",
    "ResistanceType",
]

"""Fogbinder - Navigating Epistemic Ambiguity.

Analyzes collections of short statements within a language game and
reports contradictions, mysteries and an epistemic-opacity graph.
"""

__version__ = "0.1.0"

from .analysis import AnalysisOptions, AnalysisResult, analyze, analyze_zotero_collection
from .core import Certainty, Context, EpistemicState, SpeechAct
from .engine import Contradiction, FogTrail, Mystery, MysteryCluster
from .reports import generate_report

__all__ = [
    "__version__",
    "AnalysisOptions",
    "AnalysisResult",
    "analyze",
    "analyze_zotero_collection",
    "Certainty",
    "Context",
    "EpistemicState",
    "SpeechAct",
    "Contradiction",
    "FogTrail",
    "Mystery",
    "MysteryCluster",
    "generate_report",
]

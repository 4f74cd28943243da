"""Analysis pipeline: sources and context in, AnalysisResult out."""

from .analyzer import (
    AnalysisMetadata,
    AnalysisOptions,
    AnalysisResult,
    analyze,
    analyze_zotero_collection,
    empty_result,
    make_layout,
    to_dict,
)
from .classifiers import classify_certainty, classify_mood

__all__ = [
    "AnalysisMetadata",
    "AnalysisOptions",
    "AnalysisResult",
    "analyze",
    "analyze_zotero_collection",
    "empty_result",
    "make_layout",
    "to_dict",
    "classify_certainty",
    "classify_mood",
]

"""Markdown report generation for analysis results."""

from datetime import datetime, timezone

from ..analysis.analyzer import AnalysisResult
from ..engine import contradiction_detector
from ..utils.clock import format_number


REPORT_FOOTER = "---\n\n*Generated by Fogbinder - Navigating Epistemic Ambiguity*"


def _format_analyzed(ms: int) -> str:
    """ISO-8601 UTC with milliseconds, e.g. ``2025-01-15T10:00:00.000Z``."""
    moment = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def format_header(result: AnalysisResult) -> str:
    """Title, timestamp, source count and opacity."""
    meta = result.metadata
    return (
        "# Fogbinder Analysis Report\n\n"
        f"Analyzed: {_format_analyzed(meta.analyzed)}\n"
        f"Total Sources: {meta.total_sources}\n"
        f"Overall Epistemic Opacity: {format_number(meta.overall_opacity)}\n\n"
    )


def format_contradictions(result: AnalysisResult) -> str:
    """Each contradicting pair and its suggested resolution; empty if none."""
    if not result.contradictions:
        return ""

    lines = []
    for c in result.contradictions:
        lines.append(
            f"- {c.utterance1.utterance} ⚔️ {c.utterance2.utterance}\n"
            f"  Resolution: {contradiction_detector.suggest_resolution(c)}\n"
        )

    return f"## Contradictions ({len(result.contradictions)})\n\n" + "".join(lines) + "\n\n"


def format_mystery_clusters(result: AnalysisResult) -> str:
    """Cluster labels with their sizes; empty if none."""
    if not result.mysteries:
        return ""

    lines = [
        f"- **{cluster.label}** ({len(cluster.mysteries)} mysteries)\n"
        for cluster in result.mysteries
    ]
    return "## Mystery Clusters\n\n" + "".join(lines) + "\n\n"


def generate_report(result: AnalysisResult) -> str:
    """
    Generate a Markdown report for an analysis.

    Args:
        result: Analysis to report on

    Returns:
        Markdown text
    """
    return (
        format_header(result)
        + format_contradictions(result)
        + format_mystery_clusters(result)
        + REPORT_FOOTER
    )

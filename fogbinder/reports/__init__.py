"""Report generation for Fogbinder analyses."""

from .markdown_report import (
    format_contradictions,
    format_header,
    format_mystery_clusters,
    generate_report,
)

__all__ = [
    "format_contradictions",
    "format_header",
    "format_mystery_clusters",
    "generate_report",
]

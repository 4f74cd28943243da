"""FogTrail: the analysis as a graph of sources, mysteries and conflicts.

Nodes and edges are keyed by literal text. The node list keeps every
node added, including repeated ids; lookups by id resolve to the first
match. Coordinates come from an injected layout so a build can be
reproduced exactly.
"""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Optional, Sequence
from xml.sax.saxutils import escape

from ..core.epistemic_state import EpistemicState
from ..utils.clock import format_number, now_ms
from ..utils.hash import hash_to_unit_pair
from . import contradiction_detector
from .contradiction_detector import Contradiction
from .mystery_clustering import Mystery


DEFAULT_CANVAS_SIZE = 1000.0
NODE_RADIUS = 10
LABEL_OFFSET = 15.0
EDGE_COLOR = "#95A5A6"


class NodeType(str, Enum):
    """Kinds of graph node."""

    SOURCE = "source"
    CONCEPT = "concept"
    MYSTERY = "mystery"
    CONTRADICTION = "contradiction"


class EdgeType(str, Enum):
    """Kinds of graph edge."""

    SUPPORTS = "supports"
    CONTRADICTS = "contradicts"
    RESEMBLES = "resembles"
    MYSTERY = "mystery"


NODE_COLORS = {
    NodeType.SOURCE: "#4A90E2",
    NodeType.CONCEPT: "#7B68EE",
    NodeType.MYSTERY: "#2C3E50",
    NodeType.CONTRADICTION: "#E74C3C",
}


@dataclass(frozen=True)
class Node:
    """A positioned graph node."""

    id: str
    label: str
    node_type: NodeType
    x: float = 0.0
    y: float = 0.0
    epistemic_state: Optional[EpistemicState] = None


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two node ids."""

    source: str
    target: str
    edge_type: EdgeType
    weight: float
    label: Optional[str] = None


@dataclass(frozen=True)
class FogTrailMetadata:
    """Title, creation time and opacity summary of a trail."""

    title: str
    created: int = field(default_factory=now_ms)
    total_opacity: float = 0.0
    fog_density: float = 0.0


@dataclass(frozen=True)
class FogTrail:
    """An immutable graph; every update returns a new trail."""

    nodes: tuple[Node, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)
    metadata: FogTrailMetadata = field(default_factory=lambda: FogTrailMetadata(title=""))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return to_dict(self)


# (index, node_id) -> (x, y)
Layout = Callable[[int, str], tuple[float, float]]


class RandomLayout:
    """Uniform random placement in [0, size)².

    With a seed, each coordinate pair is a pure function of the seed and
    the node's index, so the same build always lands the same way.
    Without one, placement uses the module-level random generator.
    """

    def __init__(self, seed: Optional[int] = None, size: float = DEFAULT_CANVAS_SIZE):
        self.seed = seed
        self.size = size

    def __call__(self, index: int, node_id: str) -> tuple[float, float]:
        rng = random if self.seed is None else random.Random(f"{self.seed}:{index}")
        return rng.random() * self.size, rng.random() * self.size


class HashedLayout:
    """Placement derived from the node's text; identical ids share a spot."""

    def __init__(self, size: float = DEFAULT_CANVAS_SIZE):
        self.size = size

    def __call__(self, index: int, node_id: str) -> tuple[float, float]:
        u, v = hash_to_unit_pair(node_id)
        return u * self.size, v * self.size


def make(title: str, created: Optional[int] = None) -> FogTrail:
    """Create an empty trail."""
    return FogTrail(
        nodes=(),
        edges=(),
        metadata=FogTrailMetadata(
            title=title,
            created=now_ms() if created is None else created,
            total_opacity=0.0,
            fog_density=0.0,
        ),
    )


def add_node(trail: FogTrail, node: Node) -> FogTrail:
    """Return a new trail with ``node`` appended."""
    return replace(trail, nodes=trail.nodes + (node,))


def add_edge(trail: FogTrail, edge: Edge) -> FogTrail:
    """Return a new trail with ``edge`` appended."""
    return replace(trail, edges=trail.edges + (edge,))


def get_node(trail: FogTrail, node_id: str) -> Optional[Node]:
    """First node with the given id, or None."""
    for node in trail.nodes:
        if node.id == node_id:
            return node
    return None


def calculate_fog_density(trail: FogTrail) -> float:
    """Fraction of nodes that are mysteries; 0.0 for an empty trail."""
    if not trail.nodes:
        return 0.0
    mystery_count = sum(1 for n in trail.nodes if n.node_type == NodeType.MYSTERY)
    return mystery_count / len(trail.nodes)


def build_from_analysis(
    title: str,
    sources: Sequence[str],
    contradictions: Sequence[Contradiction],
    mysteries: Sequence[Mystery],
    layout: Optional[Layout] = None,
    created: Optional[int] = None,
) -> FogTrail:
    """Assemble a trail from analysis results.

    Adds one Source node per source, one Contradicts edge per
    contradiction (weighted by severity, labelled with its resolution),
    then one Mystery node per mystery. Fog density is computed over the
    final node set and stored as both fog density and total opacity.
    """
    layout = layout or RandomLayout()
    trail = make(title, created=created)
    index = 0

    for source in sources:
        x, y = layout(index, source)
        trail = add_node(trail, Node(id=source, label=source, node_type=NodeType.SOURCE, x=x, y=y))
        index += 1

    for contradiction in contradictions:
        trail = add_edge(
            trail,
            Edge(
                source=contradiction.utterance1.utterance,
                target=contradiction.utterance2.utterance,
                edge_type=EdgeType.CONTRADICTS,
                weight=contradiction.severity,
                label=contradiction_detector.suggest_resolution(contradiction),
            ),
        )

    for mystery in mysteries:
        x, y = layout(index, mystery.content)
        trail = add_node(
            trail,
            Node(
                id=mystery.content,
                label=mystery.content,
                node_type=NodeType.MYSTERY,
                x=x,
                y=y,
                epistemic_state=mystery.epistemic_state,
            ),
        )
        index += 1

    fog_density = calculate_fog_density(trail)
    return replace(
        trail,
        metadata=replace(trail.metadata, total_opacity=fog_density, fog_density=fog_density),
    )


def to_dict(trail: FogTrail) -> dict[str, Any]:
    """JSON projection: positions, weights and title only.

    Node and edge types and edge labels are not exported.
    """
    return {
        "nodes": [
            {"id": n.id, "label": n.label, "x": n.x, "y": n.y}
            for n in trail.nodes
        ],
        "edges": [
            {"source": e.source, "target": e.target, "weight": e.weight}
            for e in trail.edges
        ],
        "metadata": {
            "title": trail.metadata.title,
            "fogDensity": trail.metadata.fog_density,
        },
    }


def _node_svg(node: Node) -> str:
    x, y = format_number(node.x), format_number(node.y)
    return (
        f'<circle cx="{x}" cy="{y}" r="{NODE_RADIUS}" fill="{NODE_COLORS[node.node_type]}" />\n'
        f'      <text x="{x}" y="{format_number(node.y - LABEL_OFFSET)}" '
        f'text-anchor="middle" font-size="10">{escape(node.label)}</text>'
    )


def _edge_svg(trail: FogTrail, edge: Edge) -> str:
    source = get_node(trail, edge.source)
    target = get_node(trail, edge.target)
    if source is None or target is None:
        return ""
    return (
        f'<line x1="{format_number(source.x)}" y1="{format_number(source.y)}" '
        f'x2="{format_number(target.x)}" y2="{format_number(target.y)}" '
        f'stroke="{EDGE_COLOR}" stroke-width="{format_number(edge.weight)}" />'
    )


def to_svg(trail: FogTrail, width: float = 1000.0, height: float = 800.0) -> str:
    """Render the trail as an SVG document.

    Circles colored by node type with the label above; straight lines
    for edges, skipped when an endpoint id has no node.
    """
    edges_svg = "\n".join(_edge_svg(trail, e) for e in trail.edges)
    nodes_svg = "\n".join(_node_svg(n) for n in trail.nodes)

    return (
        f'<svg width="{format_number(width)}" height="{format_number(height)}" '
        f'xmlns="http://www.w3.org/2000/svg">\n'
        f'    <g id="edges">\n'
        f"      {edges_svg}\n"
        f"    </g>\n"
        f'    <g id="nodes">\n'
        f"      {nodes_svg}\n"
        f"    </g>\n"
        f"  </svg>"
    )

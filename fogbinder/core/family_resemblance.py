"""Family-resemblance clustering.

Membership comes from weighted, overlapping features rather than a single
defining trait: no feature is individually necessary, an item belongs once
the weights of the features it exemplifies add up past a threshold.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional


# Summed feature weight an item must exceed to belong to a family
MEMBERSHIP_THRESHOLD = 0.5


class Boundaries(str, Enum):
    """How sharply a family is delimited."""

    VAGUE = "vague"
    CONTESTED = "contested"
    CLEAR = "clear"


@dataclass(frozen=True)
class Feature:
    """A weighted feature and the items exemplifying it."""

    name: str
    weight: float
    exemplars: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "exemplars", frozenset(self.exemplars))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "weight": self.weight,
            "exemplars": sorted(self.exemplars),
        }


@dataclass(frozen=True)
class FeatureCluster:
    """A family of members held together by shared features."""

    label: str
    features: tuple[Feature, ...] = field(default_factory=tuple)
    members: tuple[str, ...] = field(default_factory=tuple)
    center_of_gravity: Optional[str] = None
    boundaries: Boundaries = Boundaries.VAGUE

    def __post_init__(self):
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "members", tuple(self.members))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "label": self.label,
            "features": [f.to_dict() for f in self.features],
            "members": list(self.members),
            "center_of_gravity": self.center_of_gravity,
            "boundaries": self.boundaries.value,
        }


def make(
    label: str,
    features: Iterable[Feature],
    members: Iterable[str],
) -> FeatureCluster:
    """Create a family. New families start with vague boundaries."""
    return FeatureCluster(
        label=label,
        features=tuple(features),
        members=tuple(members),
        boundaries=Boundaries.VAGUE,
    )


def _features_of(item: str, cluster: FeatureCluster) -> list[Feature]:
    return [f for f in cluster.features if item in f.exemplars]


def _score(item: str, cluster: FeatureCluster) -> float:
    return sum(f.weight for f in _features_of(item, cluster))


def belongs_to_family(
    item: str,
    features: Optional[Iterable[Feature]],
    cluster: FeatureCluster,
) -> bool:
    """Check family membership.

    ``features`` is accepted for call compatibility and ignored; only the
    cluster's own features are weighed.
    """
    return _score(item, cluster) > MEMBERSHIP_THRESHOLD


def find_prototype(cluster: FeatureCluster) -> Optional[str]:
    """The member exemplifying the most feature weight.

    Ties go to the earliest member. Returns None for a family without
    members.
    """
    if not cluster.members:
        return None
    # sorted() is stable, so equal scores keep member order
    ranked = sorted(cluster.members, key=lambda m: _score(m, cluster), reverse=True)
    return ranked[0]


def resemblance_strength(x: str, y: str, cluster: FeatureCluster) -> float:
    """Summed weight of the features both items exemplify.

    Symmetric. Self-resemblance is the item's total feature weight.
    """
    names_y = {f.name for f in _features_of(y, cluster)}
    shared = [f for f in _features_of(x, cluster) if f.name in names_y]
    return sum(f.weight for f in shared)


def merge(f1: FeatureCluster, f2: FeatureCluster) -> FeatureCluster:
    """Combine two families. The result's boundaries are contested."""
    return FeatureCluster(
        label=f"{f1.label} + {f2.label}",
        features=f1.features + f2.features,
        members=f1.members + f2.members,
        center_of_gravity=None,
        boundaries=Boundaries.CONTESTED,
    )


def to_network(
    cluster: FeatureCluster,
    directed: bool = True,
) -> list[tuple[str, str, float]]:
    """Resemblance edges between distinct members.

    Every ordered pair with positive strength yields one
    ``(source, target, strength)`` triple, so (a, b) and (b, a) both
    appear. With ``directed=False`` only the first of each pair is kept.
    Members never connect to themselves.
    """
    edges: list[tuple[str, str, float]] = []
    seen: set[frozenset[str]] = set()

    for m1 in cluster.members:
        for m2 in cluster.members:
            if m1 == m2:
                continue
            strength = resemblance_strength(m1, m2, cluster)
            if strength <= 0.0:
                continue
            if not directed:
                pair = frozenset((m1, m2))
                if pair in seen:
                    continue
                seen.add(pair)
            edges.append((m1, m2, strength))

    return edges

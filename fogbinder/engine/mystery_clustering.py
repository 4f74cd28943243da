"""Mystery detection and clustering.

A mystery is content that resists being reduced to a plain factual claim.
Mysteries are grouped by how they resist (conceptually, evidentially,
logically, linguistically), each group carrying a family-resemblance
cluster over its contents.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from ..core import family_resemblance
from ..core.epistemic_state import CertaintyKind, EpistemicState
from ..core.family_resemblance import Feature, FeatureCluster
from ..utils.clock import format_number


# Ambiguity needs more interpretations than this to count as a mystery
MYSTERY_INTERPRETATION_THRESHOLD = 3

# Ambiguity with more interpretations than this becomes paradoxical
PARADOX_INTERPRETATION_THRESHOLD = 5


class OpacityKind(str, Enum):
    """How strongly content resists plain statement."""

    TRANSLUCENT = "translucent"
    OPAQUE = "opaque"
    PARADOXICAL = "paradoxical"
    INEFFABLE = "ineffable"


@dataclass(frozen=True)
class OpacityLevel:
    """Opacity tag; only TRANSLUCENT carries a degree."""

    kind: OpacityKind
    degree: Optional[float] = None

    @classmethod
    def translucent(cls, degree: float) -> "OpacityLevel":
        return cls(OpacityKind.TRANSLUCENT, float(degree))

    @classmethod
    def opaque(cls) -> "OpacityLevel":
        return cls(OpacityKind.OPAQUE)

    @classmethod
    def paradoxical(cls) -> "OpacityLevel":
        return cls(OpacityKind.PARADOXICAL)

    @classmethod
    def ineffable(cls) -> "OpacityLevel":
        return cls(OpacityKind.INEFFABLE)


class ResistanceType(str, Enum):
    """Mechanism by which content resists resolution."""

    CONCEPTUAL = "conceptual"
    EVIDENTIAL = "evidential"
    LOGICAL = "logical"
    LINGUISTIC = "linguistic"


EXPLORATION_SUGGESTIONS = {
    ResistanceType.CONCEPTUAL: "Examine family resemblances and language games",
    ResistanceType.EVIDENTIAL: "Acknowledge limits of empirical verification",
    ResistanceType.LOGICAL: "Explore paralogical frameworks",
    ResistanceType.LINGUISTIC: "Consider showing rather than saying (Wittgenstein)",
}


@dataclass(frozen=True)
class Mystery:
    """Content that resists factual resolution."""

    content: str
    opacity_level: OpacityLevel
    resistance_type: ResistanceType
    epistemic_state: EpistemicState
    related_concepts: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "content": self.content,
            "opacity": get_opacity_descriptor(self),
            "resistance_type": self.resistance_type.value,
            "related_concepts": list(self.related_concepts),
            "epistemic_state": self.epistemic_state.to_dict(),
        }


@dataclass(frozen=True)
class MysteryCluster:
    """Mysteries sharing a resistance type."""

    label: str
    mysteries: tuple[Mystery, ...]
    family_resemblance: FeatureCluster
    central_mystery: Mystery

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "label": self.label,
            "mysteries": [m.to_dict() for m in self.mysteries],
            "family_resemblance": self.family_resemblance.to_dict(),
            "central_mystery": self.central_mystery.content,
        }


def is_mystery(state: EpistemicState) -> bool:
    """Vague and Mysterious states are mysteries; so is heavy ambiguity."""
    kind = state.certainty.kind
    if kind in (CertaintyKind.VAGUE, CertaintyKind.MYSTERIOUS):
        return True
    if kind == CertaintyKind.AMBIGUOUS:
        return len(state.certainty.items) > MYSTERY_INTERPRETATION_THRESHOLD
    return False


def opacity_for(state: EpistemicState) -> OpacityLevel:
    """Opacity implied by a state's certainty."""
    certainty = state.certainty

    if certainty.kind == CertaintyKind.MYSTERIOUS:
        return OpacityLevel.opaque()
    if certainty.kind == CertaintyKind.CONTRADICTORY:
        return OpacityLevel.paradoxical()
    if certainty.kind == CertaintyKind.AMBIGUOUS:
        if len(certainty.items) > PARADOX_INTERPRETATION_THRESHOLD:
            return OpacityLevel.paradoxical()
        return OpacityLevel.translucent(0.3)
    if certainty.kind == CertaintyKind.VAGUE:
        return OpacityLevel.translucent(0.5)
    return OpacityLevel.translucent(0.3)


def resistance_for(content: str) -> ResistanceType:
    """Guess the resistance type from keywords in the content."""
    if "ineffable" in content or "inexpressible" in content:
        return ResistanceType.LINGUISTIC
    if "paradox" in content:
        return ResistanceType.LOGICAL
    if "unclear" in content or "ambiguous" in content:
        return ResistanceType.CONCEPTUAL
    return ResistanceType.EVIDENTIAL


def make(
    content: str,
    state: EpistemicState,
    related_concepts: Iterable[str] = (),
) -> Mystery:
    """Wrap a state as a mystery, deriving opacity and resistance."""
    return Mystery(
        content=content,
        opacity_level=opacity_for(state),
        resistance_type=resistance_for(content),
        epistemic_state=state,
        related_concepts=tuple(related_concepts),
    )


def cluster(mysteries: Sequence[Mystery]) -> list[MysteryCluster]:
    """Group mysteries by resistance type.

    Groups appear in order of first occurrence. Each group's central
    mystery is its first member.
    """
    grouped: dict[ResistanceType, list[Mystery]] = {}
    for mystery in mysteries:
        grouped.setdefault(mystery.resistance_type, []).append(mystery)

    clusters: list[MysteryCluster] = []
    for resistance, members in grouped.items():
        contents = [m.content for m in members]
        family = family_resemblance.make(
            resistance.value,
            [Feature(name="opacity", weight=1.0, exemplars=contents)],
            contents,
        )
        clusters.append(
            MysteryCluster(
                label=resistance.value,
                mysteries=tuple(members),
                family_resemblance=family,
                central_mystery=members[0],
            )
        )

    return clusters


def get_opacity_descriptor(mystery: Mystery) -> str:
    """E.g. ``"Translucent (0.3)"`` or ``"Opaque"``."""
    level = mystery.opacity_level
    if level.kind == OpacityKind.TRANSLUCENT:
        return f"Translucent ({format_number(level.degree)})"
    return level.kind.value.capitalize()


def suggest_exploration(mystery: Mystery) -> str:
    """How to approach a mystery, by its resistance type."""
    return EXPLORATION_SUGGESTIONS[mystery.resistance_type]

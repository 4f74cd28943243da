"""Contradiction detection between speech acts.

A contradiction here is a language-game conflict, not logical negation:
two utterances clash because they are played in different games, or
because the same kind of act says different things.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from ..core import speech_act
from ..core.speech_act import SpeechAct


class ConflictType(str, Enum):
    """Kinds of language-game conflict."""

    SAME_WORDS_DIFFERENT_GAMES = "same_words_different_games"
    DISCIPLINARY_CLASH = "disciplinary_clash"
    CONTEXTUAL_AMBIGUITY = "contextual_ambiguity"
    INCOMMENSURABLE_FRAMEWORKS = "incommensurable_frameworks"
    TEMPORAL_SHIFT = "temporal_shift"


EDGE_LABELS = {
    ConflictType.SAME_WORDS_DIFFERENT_GAMES: "Different Games",
    ConflictType.INCOMMENSURABLE_FRAMEWORKS: "Incommensurable",
    ConflictType.CONTEXTUAL_AMBIGUITY: "Context-Dependent",
    ConflictType.TEMPORAL_SHIFT: "Temporal Shift",
    ConflictType.DISCIPLINARY_CLASH: "Disciplinary",
}

INCOMMENSURABLE_RESOLUTION = "No resolution possible - acknowledge incommensurability"
GENERIC_RESOLUTION = "Investigate language games in play"


@dataclass(frozen=True)
class Contradiction:
    """A detected conflict between two utterances."""

    utterance1: SpeechAct
    utterance2: SpeechAct
    conflict_type: ConflictType
    severity: float
    resolution: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "utterance1": self.utterance1.utterance,
            "utterance2": self.utterance2.utterance,
            "conflict_type": self.conflict_type.value,
            "severity": self.severity,
            "resolution": suggest_resolution(self),
        }


def detect_contradiction(a: SpeechAct, b: SpeechAct) -> Optional[Contradiction]:
    """Classify the conflict between two acts, if any.

    Different domains and clashing forces together are the strongest
    signal; either alone is weaker. Returns None when neither holds.
    """
    different_games = not a.mood.context.same_game(b.mood.context)
    forces_conflict = speech_act.conflicts(a, b)

    if different_games and forces_conflict:
        return Contradiction(
            utterance1=a,
            utterance2=b,
            conflict_type=ConflictType.SAME_WORDS_DIFFERENT_GAMES,
            severity=0.8,
            resolution="Recognize different contexts of use",
        )
    if different_games:
        return Contradiction(
            utterance1=a,
            utterance2=b,
            conflict_type=ConflictType.DISCIPLINARY_CLASH,
            severity=0.5,
            resolution="Acknowledge different disciplinary frameworks",
        )
    if forces_conflict:
        return Contradiction(
            utterance1=a,
            utterance2=b,
            conflict_type=ConflictType.CONTEXTUAL_AMBIGUITY,
            severity=0.6,
            resolution="Clarify context of utterance",
        )
    return None


def detect_multiple(acts: Sequence[SpeechAct]) -> list[Contradiction]:
    """Check every unordered pair of acts.

    Pairs are taken by position (i < j), so output order follows input
    order and no act is compared with itself.
    """
    contradictions: list[Contradiction] = []
    n = len(acts)

    for i in range(n):
        for j in range(i + 1, n):
            contradiction = detect_contradiction(acts[i], acts[j])
            if contradiction:
                contradictions.append(contradiction)

    return contradictions


def to_edge(c: Contradiction) -> tuple[str, str, str]:
    """``(utterance1, utterance2, label)`` for graph export."""
    return (c.utterance1.utterance, c.utterance2.utterance, EDGE_LABELS[c.conflict_type])


def suggest_resolution(c: Contradiction) -> str:
    """The contradiction's own resolution, or a fallback by conflict type."""
    if c.resolution:
        return c.resolution
    if c.conflict_type == ConflictType.INCOMMENSURABLE_FRAMEWORKS:
        return INCOMMENSURABLE_RESOLUTION
    return GENERIC_RESOLUTION

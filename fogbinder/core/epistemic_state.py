"""Epistemic certainty lattice and the states built on it.

Certainty is ordered informally from most to least resolved:

    Known < Probable < {Vague, Ambiguous, Contradictory} < Mysterious

An EpistemicState pairs a certainty with the context it was judged in and
the evidence behind it. States are immutable; ``merge`` returns a new one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from ..utils.clock import format_number, now_ms
from .context import Context


# Placeholder that replaces interpretation lists when mismatched certainties merge
DEFAULT_INTERPRETATION = "Multiple interpretations from different contexts"


class CertaintyKind(str, Enum):
    """Variant tags of the certainty lattice."""

    KNOWN = "known"
    PROBABLE = "probable"
    VAGUE = "vague"
    AMBIGUOUS = "ambiguous"
    MYSTERIOUS = "mysterious"
    CONTRADICTORY = "contradictory"


@dataclass(frozen=True)
class Certainty:
    """A certainty value.

    Only ``PROBABLE`` carries ``probability``; only ``AMBIGUOUS`` (its
    interpretations) and ``CONTRADICTORY`` (its conflicts) carry ``items``.
    Use the classmethod constructors rather than building one directly.
    """

    kind: CertaintyKind
    probability: Optional[float] = None
    items: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def known(cls) -> "Certainty":
        return cls(CertaintyKind.KNOWN)

    @classmethod
    def probable(cls, probability: float) -> "Certainty":
        return cls(CertaintyKind.PROBABLE, probability=float(probability))

    @classmethod
    def vague(cls) -> "Certainty":
        return cls(CertaintyKind.VAGUE)

    @classmethod
    def ambiguous(cls, interpretations: Iterable[str]) -> "Certainty":
        return cls(CertaintyKind.AMBIGUOUS, items=tuple(interpretations))

    @classmethod
    def mysterious(cls) -> "Certainty":
        return cls(CertaintyKind.MYSTERIOUS)

    @classmethod
    def contradictory(cls, conflicts: Iterable[str]) -> "Certainty":
        return cls(CertaintyKind.CONTRADICTORY, items=tuple(conflicts))

    @property
    def tag(self) -> str:
        """Short string tag, e.g. ``"probable:0.8"``."""
        if self.kind == CertaintyKind.PROBABLE:
            return f"probable:{format_number(self.probability)}"
        return self.kind.value


@dataclass(frozen=True)
class EpistemicState:
    """A certainty judged within a context, backed by evidence."""

    certainty: Certainty
    context: Context
    evidence: tuple[str, ...] = field(default_factory=tuple)
    timestamp: int = field(default_factory=now_ms)

    def __post_init__(self):
        object.__setattr__(self, "evidence", tuple(self.evidence))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return to_dict(self)


def make(
    certainty: Certainty,
    context: Context,
    evidence: Iterable[str] = (),
    timestamp: Optional[int] = None,
) -> EpistemicState:
    """Create an epistemic state. Any certainty and context are accepted."""
    return EpistemicState(
        certainty=certainty,
        context=context,
        evidence=tuple(evidence),
        timestamp=now_ms() if timestamp is None else timestamp,
    )


def is_uncertain(state: EpistemicState) -> bool:
    """True unless the state is Known or Probable."""
    return state.certainty.kind not in (CertaintyKind.KNOWN, CertaintyKind.PROBABLE)


def is_genuinely_ambiguous(state: EpistemicState) -> bool:
    """True for everything except Known and Probable."""
    return state.certainty.kind not in (CertaintyKind.KNOWN, CertaintyKind.PROBABLE)


def get_interpretations(state: EpistemicState) -> list[str]:
    """Interpretations (Ambiguous) or conflicts (Contradictory), else empty."""
    if state.certainty.kind in (CertaintyKind.AMBIGUOUS, CertaintyKind.CONTRADICTORY):
        return list(state.certainty.items)
    return []


def merge_certainty(c1: Certainty, c2: Certainty) -> Certainty:
    """Join two certainties.

    Mysterious on either side absorbs the result. Same-kind pairs combine
    (Known stays Known, Probable averages, Ambiguous and Contradictory
    concatenate). Every other pairing, Vague with Vague included, becomes
    Ambiguous with the single default interpretation; prior interpretation
    lists are dropped.
    """
    if c1.kind == CertaintyKind.MYSTERIOUS or c2.kind == CertaintyKind.MYSTERIOUS:
        return Certainty.mysterious()

    if c1.kind == c2.kind:
        if c1.kind == CertaintyKind.KNOWN:
            return Certainty.known()
        if c1.kind == CertaintyKind.PROBABLE:
            return Certainty.probable((c1.probability + c2.probability) / 2.0)
        if c1.kind == CertaintyKind.AMBIGUOUS:
            return Certainty.ambiguous(c1.items + c2.items)
        if c1.kind == CertaintyKind.CONTRADICTORY:
            return Certainty.contradictory(c1.items + c2.items)

    return Certainty.ambiguous([DEFAULT_INTERPRETATION])


def merge(
    s1: EpistemicState,
    s2: EpistemicState,
    timestamp: Optional[int] = None,
) -> EpistemicState:
    """Merge two states into a new one.

    The result keeps ``s1``'s context and the concatenated evidence of
    both (order preserved, duplicates retained).
    """
    return EpistemicState(
        certainty=merge_certainty(s1.certainty, s2.certainty),
        context=s1.context,
        evidence=s1.evidence + s2.evidence,
        timestamp=now_ms() if timestamp is None else timestamp,
    )


def to_dict(state: EpistemicState) -> dict[str, Any]:
    """Serialize as ``{"certainty": <tag>, "timestamp": <ms>}``."""
    return {
        "certainty": state.certainty.tag,
        "timestamp": state.timestamp,
    }

"""Speech acts: utterances classified by illocutionary force.

Austin/Searle style: an utterance does something (asserts, directs,
commits, expresses, declares) and succeeds only when its felicity
conditions hold.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..utils.clock import now_ms
from .context import Context


class ForceKind(str, Enum):
    """Illocutionary force tags."""

    ASSERTIVE = "assertive"
    DIRECTIVE = "directive"
    COMMISSIVE = "commissive"
    EXPRESSIVE = "expressive"
    DECLARATION = "declaration"


# Verb used by get_mood_descriptor for each force
MOOD_VERBS = {
    ForceKind.ASSERTIVE: "Asserting",
    ForceKind.DIRECTIVE: "Directing",
    ForceKind.COMMISSIVE: "Committing",
    ForceKind.EXPRESSIVE: "Expressing",
    ForceKind.DECLARATION: "Declaring",
}

# Forces whose utterance is itself the act
PERFORMATIVE_FORCES = frozenset({ForceKind.COMMISSIVE, ForceKind.DECLARATION})

# Forces that can clash with another act of the same force
CONFLICTING_FORCES = frozenset({ForceKind.ASSERTIVE, ForceKind.DECLARATION})


@dataclass(frozen=True)
class IllocutionaryForce:
    """A force tag with its free-text descriptor."""

    kind: ForceKind
    content: str = ""

    @classmethod
    def assertive(cls, content: str) -> "IllocutionaryForce":
        return cls(ForceKind.ASSERTIVE, content)

    @classmethod
    def directive(cls, content: str) -> "IllocutionaryForce":
        return cls(ForceKind.DIRECTIVE, content)

    @classmethod
    def commissive(cls, content: str) -> "IllocutionaryForce":
        return cls(ForceKind.COMMISSIVE, content)

    @classmethod
    def expressive(cls, content: str) -> "IllocutionaryForce":
        return cls(ForceKind.EXPRESSIVE, content)

    @classmethod
    def declaration(cls, content: str) -> "IllocutionaryForce":
        return cls(ForceKind.DECLARATION, content)


@dataclass(frozen=True)
class Felicity:
    """Austin's felicity conditions."""

    conventional_procedure: bool = True
    appropriate_circumstances: bool = True
    executed_correctly: bool = True
    executed_completely: bool = True
    sincere_intentions: bool = True

    def to_dict(self) -> dict[str, bool]:
        """Convert to dictionary for JSON serialization."""
        return {
            "conventional_procedure": self.conventional_procedure,
            "appropriate_circumstances": self.appropriate_circumstances,
            "executed_correctly": self.executed_correctly,
            "executed_completely": self.executed_completely,
            "sincere_intentions": self.sincere_intentions,
        }


@dataclass(frozen=True)
class SpeechMood:
    """Force, felicity and context of an utterance."""

    force: IllocutionaryForce
    felicity: Felicity
    context: Context
    performative: bool


@dataclass(frozen=True)
class SpeechAct:
    """An utterance together with the act it performs."""

    utterance: str
    mood: SpeechMood
    timestamp: int = field(default_factory=now_ms)

    @property
    def force(self) -> IllocutionaryForce:
        return self.mood.force

    @property
    def context(self) -> Context:
        return self.mood.context

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "utterance": self.utterance,
            "force": self.mood.force.kind.value,
            "content": self.mood.force.content,
            "felicity": self.mood.felicity.to_dict(),
            "domain": self.mood.context.domain,
            "performative": self.mood.performative,
            "timestamp": self.timestamp,
        }


def make(
    utterance: str,
    force: IllocutionaryForce,
    context: Context,
    timestamp: Optional[int] = None,
) -> SpeechAct:
    """Create a speech act with every felicity condition satisfied."""
    return SpeechAct(
        utterance=utterance,
        mood=SpeechMood(
            force=force,
            felicity=Felicity(),
            context=context,
            performative=force.kind in PERFORMATIVE_FORCES,
        ),
        timestamp=now_ms() if timestamp is None else timestamp,
    )


def is_happy(act: SpeechAct) -> bool:
    """True iff all five felicity conditions hold."""
    f = act.mood.felicity
    return (
        f.conventional_procedure
        and f.appropriate_circumstances
        and f.executed_correctly
        and f.executed_completely
        and f.sincere_intentions
    )


def get_mood_descriptor(act: SpeechAct) -> str:
    """Human-readable "Verb: content", e.g. ``"Asserting: statement"``."""
    force = act.mood.force
    return f"{MOOD_VERBS[force.kind]}: {force.content}"


def get_emotional_tone(act: SpeechAct) -> Optional[str]:
    """The expressive payload, or None for any other force."""
    force = act.mood.force
    if force.kind == ForceKind.EXPRESSIVE:
        return force.content
    return None


def conflicts(a: SpeechAct, b: SpeechAct) -> bool:
    """Two assertives (or two declarations) with different content clash.

    Any other combination of forces never conflicts.
    """
    fa, fb = a.mood.force, b.mood.force
    if fa.kind != fb.kind or fa.kind not in CONFLICTING_FORCES:
        return False
    return fa.content != fb.content

"""Mood scoring for speech acts.

``analyze`` is the keyword classifier that guesses an illocutionary force
and emotional tone from raw text; ``score`` turns an already built
SpeechAct into a Mood.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..core import speech_act
from ..core.context import Context
from ..core.speech_act import ForceKind, IllocutionaryForce, SpeechAct


# Checked in order; the first matching keyword group decides the force
FORCE_KEYWORDS: list[tuple[tuple[str, ...], IllocutionaryForce]] = [
    (("promise", "vow"), IllocutionaryForce.commissive("commitment")),
    (("command", "request", "must"), IllocutionaryForce.directive("directive")),
    (("declare", "pronounce"), IllocutionaryForce.declaration("declaration")),
    (("thank", "apologize", "congratulate"), IllocutionaryForce.expressive("gratitude/apology")),
]

DEFAULT_FORCE = IllocutionaryForce.assertive("statement")

TONE_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("melancholy", "sad"), "melancholic"),
    (("anxious", "worried"), "anxious"),
    (("ecstatic", "joyful"), "ecstatic"),
]

DESCRIPTOR_VERBS = {
    ForceKind.ASSERTIVE: "Stating",
    ForceKind.DIRECTIVE: "Directing",
    ForceKind.COMMISSIVE: "Committing",
    ForceKind.EXPRESSIVE: "Expressing",
    ForceKind.DECLARATION: "Declaring",
}

CLASSIFIER_CONFIDENCE = 0.7
HAPPY_CONFIDENCE = 0.9
UNHAPPY_CONFIDENCE = 0.5


@dataclass(frozen=True)
class Mood:
    """Scored mood of an utterance."""

    primary: IllocutionaryForce
    secondary: Optional[IllocutionaryForce] = None
    felicitous: bool = True
    emotional_tone: Optional[str] = None
    confidence: float = CLASSIFIER_CONFIDENCE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return to_dict(self)


def analyze(text: str, context: Optional[Context] = None) -> Mood:
    """Classify raw text into a Mood by keyword matching.

    Always yields a valid force; text with no keyword is an assertion.
    """
    lower = text.lower()

    primary = DEFAULT_FORCE
    for keywords, force in FORCE_KEYWORDS:
        if any(k in lower for k in keywords):
            primary = force
            break

    tone = None
    for keywords, label in TONE_KEYWORDS:
        if any(k in lower for k in keywords):
            tone = label
            break

    return Mood(
        primary=primary,
        secondary=None,
        felicitous=True,
        emotional_tone=tone,
        confidence=CLASSIFIER_CONFIDENCE,
    )


def score(act: SpeechAct) -> Mood:
    """Score a speech act; infelicitous acts get lower confidence."""
    happy = speech_act.is_happy(act)
    return Mood(
        primary=act.mood.force,
        secondary=None,
        felicitous=happy,
        emotional_tone=speech_act.get_emotional_tone(act),
        confidence=HAPPY_CONFIDENCE if happy else UNHAPPY_CONFIDENCE,
    )


def get_descriptor(mood: Mood) -> str:
    """E.g. ``"Expressing [anxious] (infelicitous)"``."""
    descriptor = DESCRIPTOR_VERBS[mood.primary.kind]
    if mood.emotional_tone is not None:
        descriptor += f" [{mood.emotional_tone}]"
    if not mood.felicitous:
        descriptor += " (infelicitous)"
    return descriptor


def compare(m1: Mood, m2: Mood) -> str:
    """Compare two moods by force tag only."""
    if m1.primary.kind == m2.primary.kind:
        return "Similar illocutionary force"
    return "Different speech acts"


def to_dict(mood: Mood) -> dict[str, Any]:
    """Serialize as ``{"descriptor", "felicitous", "confidence"}``."""
    return {
        "descriptor": get_descriptor(mood),
        "felicitous": mood.felicitous,
        "confidence": mood.confidence,
    }

"""Keyword classifiers at the edge of the analysis core.

Each is a pure, total function of its text. The analyzer accepts
replacements with the same signatures.
"""

from typing import Callable, Optional

from ..core.context import Context
from ..core.epistemic_state import Certainty
from ..engine import mood_scorer
from ..engine.mood_scorer import Mood


CertaintyClassifier = Callable[[str], Certainty]
MoodClassifier = Callable[[str, Context], Mood]


def classify_certainty(text: str) -> Certainty:
    """Guess a source's certainty from keywords (case-sensitive)."""
    if "unclear" in text or "ambiguous" in text:
        return Certainty.vague()
    if "mysterious" in text:
        return Certainty.mysterious()
    if "contradicts" in text:
        return Certainty.contradictory(["self-contradiction"])
    return Certainty.known()


def classify_mood(text: str, context: Optional[Context] = None) -> Mood:
    """Guess force and tone; always yields a valid force."""
    return mood_scorer.analyze(text, context)

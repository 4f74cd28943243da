"""Core epistemic types: certainty, speech acts and family resemblance."""

from .context import Context
from .epistemic_state import (
    DEFAULT_INTERPRETATION,
    Certainty,
    CertaintyKind,
    EpistemicState,
)
from .family_resemblance import (
    MEMBERSHIP_THRESHOLD,
    Boundaries,
    Feature,
    FeatureCluster,
)
from .speech_act import (
    Felicity,
    ForceKind,
    IllocutionaryForce,
    SpeechAct,
    SpeechMood,
)

__all__ = [
    # Context
    "Context",
    # Epistemic state
    "DEFAULT_INTERPRETATION",
    "Certainty",
    "CertaintyKind",
    "EpistemicState",
    # Family resemblance
    "MEMBERSHIP_THRESHOLD",
    "Boundaries",
    "Feature",
    "FeatureCluster",
    # Speech acts
    "Felicity",
    "ForceKind",
    "IllocutionaryForce",
    "SpeechAct",
    "SpeechMood",
]

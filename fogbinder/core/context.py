"""Language-game context shared by epistemic states and speech acts."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Context:
    """The interpretive frame a source is read in.

    Two contexts belong to the same language game when their ``domain``
    strings are equal. Nothing else about a context is compared.
    """

    domain: str = ""
    conventions: tuple[str, ...] = field(default_factory=tuple)
    participants: tuple[str, ...] = field(default_factory=tuple)
    purpose: str = ""

    def __post_init__(self):
        object.__setattr__(self, "conventions", tuple(self.conventions))
        object.__setattr__(self, "participants", tuple(self.participants))

    def same_game(self, other: "Context") -> bool:
        """Check whether both contexts play the same language game."""
        return self.domain == other.domain

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "domain": self.domain,
            "conventions": list(self.conventions),
            "participants": list(self.participants),
            "purpose": self.purpose,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Context":
        """Create from dictionary.

        A scalar for ``conventions`` or ``participants`` counts as a
        single entry.
        """
        return cls(
            domain=str(data.get("domain") or ""),
            conventions=_as_tuple(data.get("conventions")),
            participants=_as_tuple(data.get("participants")),
            purpose=str(data.get("purpose") or ""),
        )


def _as_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if not isinstance(value, (list, tuple)):
        return (str(value),)
    return tuple(str(v) for v in value)

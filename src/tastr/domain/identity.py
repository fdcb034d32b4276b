"""Domain models for authenticated callers."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Identity:
    """Verified identity resolved from a session token."""

    email: str
    claims: dict[str, object] = field(default_factory=dict)

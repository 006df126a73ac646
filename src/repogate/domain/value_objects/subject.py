"""Subject - resolved identity of the current caller."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Subject:
    """Principal with the role names granted to it for one decision."""

    principal: str
    roles: frozenset[str] = field(default_factory=frozenset)

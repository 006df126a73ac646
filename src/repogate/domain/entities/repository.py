"""Repository entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Repository:
    """Hosted repository - unique name and content format (maven, npm, ...)."""

    name: str
    format: str
    url: str | None = None
    online: bool = True

"""Content selector configuration entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorConfiguration:
    """Named content selector. The expression is opaque to repogate."""

    name: str
    type: str
    description: str = ""
    expression: str = ""

"""BREAD actions for repository security."""

from enum import StrEnum


class BreadAction(StrEnum):
    """Browse, read, edit, add, delete."""

    BROWSE = "browse"
    READ = "read"
    EDIT = "edit"
    ADD = "add"
    DELETE = "delete"


WILDCARD = "*"

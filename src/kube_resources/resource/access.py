"""Access verbs a resource kind supports.

The mask is advisory: it tells a browsing UI which actions to offer for a
kind. Nothing in this package refuses an operation because of it.
"""

from __future__ import annotations

from enum import Flag, auto


class Access(Flag):
    """Bit flags for the verbs valid on a resource kind."""

    NONE = 0
    GET = auto()
    LIST = auto()
    EDIT = auto()
    DELETE = auto()
    VIEW = auto()
    NAMESPACE = auto()
    DESCRIBE = auto()
    SWITCH = auto()
    RUN = auto()

    CRUD = GET | LIST | DELETE | VIEW | EDIT
    ALL_VERBS = CRUD | NAMESPACE

    @property
    def verbs(self) -> list[str]:
        """Lowercase names of the single verbs set in this mask."""
        return [flag.name.lower() for flag in Access if flag.name and flag in self]

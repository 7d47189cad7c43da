"""Teams that issues can be routed to, and the labels that mark them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Label:
    """An issue label, identified by its name."""

    name: str


class Team(enum.Enum):
    """A team known to the bot."""

    LIBS = "libs"
    COMPILER = "compiler"
    LANG = "lang"

    def label(self) -> Label:
        """Return the label that assigns an issue to this team."""
        return Label(name=f"T-{self.value}")


def parse_team(text: str) -> Team:
    """Parse a team name such as ``"libs"``; unknown names raise ``ValueError``."""
    try:
        return Team(text)
    except ValueError:
        raise ValueError(f"unknown team: {text!r}") from None
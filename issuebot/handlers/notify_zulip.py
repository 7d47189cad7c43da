"""Zulip notifications triggered by label changes and issue state changes."""

from __future__ import annotations

import enum
from fnmatch import fnmatchcase
from typing import Iterable, Union

from issuebot.team import Label

MAX_TOPIC_CHARS = 60

LabelLike = Union[Label, str]


class NotificationType(enum.Enum):
    """What happened to the issue to trigger the notification."""

    LABELED = "labeled"
    UNLABELED = "unlabeled"
    CLOSED = "closed"
    REOPENED = "reopened"


def _name(label: LabelLike) -> str:
    return label.name if isinstance(label, Label) else label


def replace_team_to_be_nominated(labels: Iterable[LabelLike], msg: str) -> str:
    """Fill ``{team}`` from the issue's ``T-`` labels.

    A single team label is used as is; with several, ``compiler`` is chosen if
    present; otherwise the message is left unchanged.
    """
    teams = [
        name[len("T-"):] for name in map(_name, labels) if name.startswith("T-")
    ]
    if len(teams) == 1:
        return msg.replace("{team}", teams[0])
    if "compiler" in teams:
        return msg.replace("{team}", "compiler")
    return msg


def truncate_topic(topic: str) -> str:
    """Shorten a topic to the Zulip limit of 60 characters, ending in an ellipsis."""
    if len(topic) > MAX_TOPIC_CHARS:
        return topic[: MAX_TOPIC_CHARS - 1] + "…"
    return topic


def format_topic(template: str, number: int, title: str) -> str:
    """Fill ``{number}`` and ``{title}`` into a topic template and truncate it."""
    topic = template.replace("{number}", str(number)).replace("{title}", title)
    return truncate_topic(topic)


def has_all_required_labels(labels: Iterable[LabelLike], required: Iterable[str]) -> bool:
    """True when every required glob pattern matches at least one label."""
    names = [_name(label) for label in labels]
    return all(
        any(fnmatchcase(name, pattern) for name in names) for pattern in required
    )
"""Reminders and Zulip topics for project goal tracking issues."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Iterable, Optional, Union

MAX_ZULIP_TOPIC = 60
GOALS_STREAM = 435869
C_TRACKING_ISSUE = "C-tracking-issue"

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MESSAGE = """
Dear $OWNERS, it's been $DAYS days since the last update to your goal *$GOAL*.

We will begin drafting the next blog post collecting goal updates $NEXT_UPDATE.

Please comment on the github tracking issue goals#$GOALNUM before then. Thanks! <3

Here is a suggested template for updates (feel free to drop the items that don't apply):

* **Key developments:** *What has happened since the last time. It's perfectly ok to list "nothing" if that's the truth, we know people get busy.*
* **Blockers:** *List any teams you are waiting on and what you are waiting for.*
* **Help wanted:** *Are there places where you are looking for contribution or feedback from the broader community?*
"""


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def zulip_topic_name(title: str, number: int) -> str:
    """Build a topic from whole leading words of ``title`` and ``(goals#N)``.

    The topic stays under 60 bytes; a reference that alone is too long
    raises ``ValueError``.
    """
    goal_number = f"(goals#{number})"
    topic = ""
    for word in title.split():
        if _byte_len(topic) + _byte_len(word) + 1 + _byte_len(goal_number) >= MAX_ZULIP_TOPIC:
            break
        topic += word + " "
    topic += goal_number
    if _byte_len(topic) >= MAX_ZULIP_TOPIC:
        raise ValueError(f"goal reference {goal_number!r} does not fit in a topic")
    return topic


def ping_message(
    owners: str,
    days: Union[int, str, None],
    goal: str,
    goalnum: int,
    next_update: str,
) -> str:
    """Return the reminder sent to goal owners.

    ``days`` of None means no update was ever posted and is shown as ``∞``.
    """
    days_text = "∞" if days is None else str(days)
    return (
        MESSAGE.replace("$OWNERS", owners)
        .replace("$DAYS", days_text)
        .replace("$GOALNUM", str(goalnum))
        .replace("$GOAL", goal)
        .replace("$NEXT_UPDATE", next_update)
    )


def comment_fence(text: str) -> str:
    """Return a backtick fence of at least four ticks that does not occur in ``text``."""
    ticks = "````"
    while ticks in text:
        ticks += "`"
    return ticks


def third_monday(year: int, month: int) -> str:
    """Describe the third Monday of the month, e.g. ``"on Sep-16"``."""
    first_weekday = date(year, month, 1).weekday()
    first_monday = 1 + (calendar.MONDAY - first_weekday) % 7
    day = first_monday + 14
    return f"on {_MONTH_ABBREVIATIONS[month - 1]}-{day:02d}"


def join_owners(owners: Iterable[str]) -> Optional[str]:
    """Join owner mentions for a message; None when there are no owners.

    Two owners are joined with ``and``; with more, every name is followed by
    a comma and a space.
    """
    owners = list(owners)
    if not owners:
        return None
    if len(owners) == 1:
        return owners[0]
    if len(owners) == 2:
        return f"{owners[0]} and {owners[1]}"
    return "".join(f"{owner}, " for owner in owners)


def _owner_mention(login: str, zulip_id: Optional[int]) -> str:
    if zulip_id is not None:
        return f"@**|{zulip_id}**"
    return f"@{login} (register your zulip-id in the team database to get a real ping!)"
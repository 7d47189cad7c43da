"""Major change proposals: how they are recognised and what is announced."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

MAX_ZULIP_TOPIC = 60


class InvocationKind(enum.Enum):
    """The kind of event that triggers the major change handler."""

    NEW_PROPOSAL = "new_proposal"
    ACCEPTED_PROPOSAL = "accepted_proposal"
    RENAME = "rename"


@dataclass(frozen=True)
class Invocation:
    """A triggered action; a rename carries the issue's previous title."""

    kind: InvocationKind
    previous_title: Optional[str] = None

    @classmethod
    def new_proposal(cls) -> "Invocation":
        return cls(InvocationKind.NEW_PROPOSAL)

    @classmethod
    def accepted_proposal(cls) -> "Invocation":
        return cls(InvocationKind.ACCEPTED_PROPOSAL)

    @classmethod
    def rename(cls, previous_title: str) -> "Invocation":
        return cls(InvocationKind.RENAME, previous_title)


def zulip_topic_from_issue(title: str, topic_reference: str) -> str:
    """Join title and reference, truncating the title so the topic fits 60 characters."""
    keep = MAX_ZULIP_TOPIC - len(topic_reference) - 2
    if keep < 0:
        raise ValueError(f"topic reference {topic_reference!r} is too long")
    if len(title) >= keep + 2:
        return f"{title[:keep]}… {topic_reference}"
    return f"{title} {topic_reference}"


def new_proposal_message(title: str, number: int, url: str) -> str:
    """Return the announcement of a new proposal."""
    return (
        f"A new proposal has been announced: [{title} #{number}]({url}). It will be "
        "announced at the next meeting to try and draw attention to it, "
        "but usually MCPs are not discussed during triage meetings. If "
        "you think this would benefit from discussion amongst the "
        "team, consider proposing a design meeting."
    )


def accepted_message(number: int, url: str) -> str:
    """Return the announcement of an accepted proposal."""
    return f"This proposal has been accepted: [#{number}]({url})."


def seconded_message(ping: str, number: int, url: str) -> str:
    """Return the announcement of a seconded proposal, pinging ``ping``."""
    return (
        f"@*{ping}*: Proposal [#{number}]({url}) has been seconded, and will be "
        "approved in 10 days if no objections are raised."
    )
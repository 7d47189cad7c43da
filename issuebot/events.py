"""Webhook event names, payload decoding and review preference records."""

from __future__ import annotations

import enum
import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable

log = logging.getLogger(__name__)


class EventName(enum.Enum):
    """The name of a webhook event, as sent in the event header."""

    PULL_REQUEST = "pull_request"
    PULL_REQUEST_REVIEW = "pull_request_review"
    PULL_REQUEST_REVIEW_COMMENT = "pull_request_review_comment"
    ISSUE_COMMENT = "issue_comment"
    ISSUE = "issues"
    PUSH = "push"
    CREATE = "create"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


def parse_event_name(name: str) -> EventName:
    """Map an event header value to an ``EventName``; unknown names become OTHER."""
    try:
        return EventName(name)
    except ValueError:
        return EventName.OTHER


@dataclass
class ReviewPrefs:
    """A reviewer's stored preferences and assigned pull requests."""

    id: uuid.UUID
    username: str
    user_id: int
    assigned_prs: list[int] = field(default_factory=list)

    def summary(self) -> str:
        """Return a short human-readable description."""
        prs = ", ".join(f"#{pr}" for pr in self.assigned_prs)
        return f"Username: {self.username}\nAssigned PRs: {prs}"


class PayloadError(ValueError):
    """A webhook payload could not be decoded."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"at line {line} column {column}: {message}")
        self.line = line
        self.column = column


def deserialize_payload(text: str) -> Any:
    """Decode a JSON webhook payload, raising ``PayloadError`` with its position."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        log.error("failed to deserialize webhook payload: %s", text)
        raise PayloadError(exc.msg, exc.lineno, exc.colno) from exc


def combine_error_messages(messages: Iterable[str]) -> str:
    """Join handler error messages into one comment body, blank-line separated."""
    return "\n\n".join(message for message in messages if message)
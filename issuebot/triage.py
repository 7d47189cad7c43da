"""Rows of the pull-request triage dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional, Union

YELLOW_DAYS = 7
RED_DAYS = 14

_DAY = timedelta(days=1)


@dataclass
class PullRequestRow:
    """One pull request as shown on the triage page."""

    html_url: str
    number: int
    title: str
    assignee: str
    updated_at: str
    need_triage: str
    labels: str
    author: str
    wait_for_author: bool
    wait_for_review: bool
    days_from_last_updated_at: int


def _parse_time(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    return datetime.fromisoformat(text)


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def triage_color(updated_at: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Classify staleness: ``red`` after 14 days, ``yellow`` after 7, else ``green``."""
    now = _now(now)
    if updated_at is not None:
        if updated_at <= now - timedelta(days=RED_DAYS):
            return "red"
        if updated_at <= now - timedelta(days=YELLOW_DAYS):
            return "yellow"
    return "green"


def days_since(
    updated_at: Optional[datetime],
    created_at: Optional[datetime],
    now: Optional[datetime] = None,
) -> int:
    """Whole days since the last update, or since creation if never updated."""
    reference = updated_at if updated_at is not None else created_at
    if reference is None:
        raise ValueError("pull request has neither an update nor a creation time")
    return int((_now(now) - reference) / _DAY)


def _required(pull: Mapping[str, Any], key: str) -> Any:
    value = pull.get(key)
    if value is None:
        raise ValueError(f"pull request is missing `{key}`")
    return value


def build_row(pull: Mapping[str, Any], now: Optional[datetime] = None) -> PullRequestRow:
    """Build a dashboard row from a pull request as returned by the API."""
    now = _now(now)
    assignee = pull.get("assignee")
    updated = _parse_time(pull.get("updated_at"))
    created = _parse_time(pull.get("created_at"))
    label_names = [label["name"] for label in pull.get("labels") or []]
    labels = ", ".join(label_names)
    user = _required(pull, "user")

    return PullRequestRow(
        html_url=_required(pull, "html_url"),
        number=_required(pull, "number"),
        title=_required(pull, "title"),
        assignee=assignee["login"] if assignee else "",
        updated_at=updated.strftime("%Y-%m-%d") if updated is not None else "",
        need_triage=triage_color(updated, now),
        labels=labels,
        author=user["login"],
        wait_for_author="S-waiting-on-author" in labels,
        wait_for_review="S-waiting-on-review" in labels,
        days_from_last_updated_at=days_since(updated, created, now),
    )
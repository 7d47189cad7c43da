"""Final-comment-period records from the rfcbot API."""

from __future__ import annotations

import json
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object for {what}, got {type(data).__name__}")
    return data


def _get(
    data: Mapping[str, Any],
    key: str,
    check: Callable[[Any], bool],
    optional: bool = False,
) -> Any:
    value = data.get(key)
    if value is None:
        if optional:
            return None
        raise ValueError(f"missing field `{key}`")
    if not check(value):
        raise ValueError(f"invalid value for field `{key}`: {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list:
    return _get(data, key, lambda v: isinstance(v, list))


@dataclass
class FCP:
    """The state of a final comment period."""

    id: int
    fk_issue: int
    fk_initiator: int
    fk_initiating_comment: int
    disposition: Optional[str]
    fk_bot_tracking_comment: int
    fcp_start: Optional[str]
    fcp_closed: bool


@dataclass
class Reviewer:
    """A team member taking part in a review."""

    id: int
    login: str


@dataclass
class Review:
    """A reviewer's sign-off state."""

    reviewer: Reviewer
    approved: bool


@dataclass
class StatusComment:
    """A comment tracked by rfcbot."""

    id: int
    fk_issue: int
    fk_user: int
    body: str
    created_at: str
    updated_at: Optional[str]
    repository: str


@dataclass
class Concern:
    """A concern registered against a proposal."""

    name: str
    comment: StatusComment
    reviewer: Reviewer


@dataclass
class FCPIssue:
    """The issue or pull request a final comment period belongs to."""

    id: int
    number: int
    fk_milestone: Optional[int]
    fk_user: int
    fk_assignee: Optional[int]
    open: bool
    is_pull_request: bool
    title: str
    body: str
    locked: bool
    closed_at: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]
    labels: list[str]
    repository: str


@dataclass
class FullFCP:
    """A final comment period with its reviews, concerns and issue."""

    fcp: FCP
    reviews: list[Review]
    concerns: list[Concern]
    issue: FCPIssue
    status_comment: StatusComment


def _parse_fcp(data: Any) -> FCP:
    data = _object(data, "fcp")
    return FCP(
        id=_get(data, "id", _is_uint),
        fk_issue=_get(data, "fk_issue", _is_uint),
        fk_initiator=_get(data, "fk_initiator", _is_uint),
        fk_initiating_comment=_get(data, "fk_initiating_comment", _is_int),
        disposition=_get(data, "disposition", _is_str, optional=True),
        fk_bot_tracking_comment=_get(data, "fk_bot_tracking_comment", _is_int),
        fcp_start=_get(data, "fcp_start", _is_str, optional=True),
        fcp_closed=_get(data, "fcp_closed", _is_bool),
    )


def _parse_reviewer(data: Any) -> Reviewer:
    data = _object(data, "reviewer")
    return Reviewer(id=_get(data, "id", _is_uint), login=_get(data, "login", _is_str))


def _parse_review(data: Any) -> Review:
    data = _object(data, "review")
    return Review(
        reviewer=_parse_reviewer(_get(data, "reviewer", lambda v: True)),
        approved=_get(data, "approved", _is_bool),
    )


def _parse_status_comment(data: Any) -> StatusComment:
    data = _object(data, "comment")
    return StatusComment(
        id=_get(data, "id", _is_int),
        fk_issue=_get(data, "fk_issue", _is_uint),
        fk_user=_get(data, "fk_user", _is_uint),
        body=_get(data, "body", _is_str),
        created_at=_get(data, "created_at", _is_str),
        updated_at=_get(data, "updated_at", _is_str, optional=True),
        repository=_get(data, "repository", _is_str),
    )


def _parse_concern(data: Any) -> Concern:
    data = _object(data, "concern")
    return Concern(
        name=_get(data, "name", _is_str),
        comment=_parse_status_comment(_get(data, "comment", lambda v: True)),
        reviewer=_parse_reviewer(_get(data, "reviewer", lambda v: True)),
    )


def _parse_issue(data: Any) -> FCPIssue:
    data = _object(data, "issue")
    return FCPIssue(
        id=_get(data, "id", _is_uint),
        number=_get(data, "number", _is_uint),
        fk_milestone=_get(data, "fk_milestone", _is_uint, optional=True),
        fk_user=_get(data, "fk_user", _is_uint),
        fk_assignee=_get(data, "fk_assignee", _is_uint, optional=True),
        open=_get(data, "open", _is_bool),
        is_pull_request=_get(data, "is_pull_request", _is_bool),
        title=_get(data, "title", _is_str),
        body=_get(data, "body", _is_str),
        locked=_get(data, "locked", _is_bool),
        closed_at=_get(data, "closed_at", _is_str, optional=True),
        created_at=_get(data, "created_at", _is_str, optional=True),
        updated_at=_get(data, "updated_at", _is_str, optional=True),
        labels=list(_get(data, "labels", _is_str_list)),
        repository=_get(data, "repository", _is_str),
    )


def parse_full_fcp(data: Any) -> FullFCP:
    """Build a ``FullFCP`` from decoded JSON; malformed data raises ``ValueError``."""
    data = _object(data, "full fcp")
    return FullFCP(
        fcp=_parse_fcp(_get(data, "fcp", lambda v: True)),
        reviews=[_parse_review(item) for item in _list(data, "reviews")],
        concerns=[_parse_concern(item) for item in _list(data, "concerns")],
        issue=_parse_issue(_get(data, "issue", lambda v: True)),
        status_comment=_parse_status_comment(_get(data, "status_comment", lambda v: True)),
    )


def index_fcps(fcps: Iterable[FullFCP]) -> dict[str, FullFCP]:
    """Key each FCP by ``repository:number:title``; later entries win."""
    return {
        f"{full.issue.repository}:{full.issue.number}:{full.issue.title}": full
        for full in fcps
    }


def get_all_fcps(url: str) -> dict[str, FullFCP]:
    """Fetch every FCP from the API at ``url`` and index them."""
    with urllib.request.urlopen(url) as response:
        data = json.load(response)
    if not isinstance(data, list):
        raise ValueError("expected a list of final comment periods")
    return index_fcps(parse_full_fcp(item) for item in data)
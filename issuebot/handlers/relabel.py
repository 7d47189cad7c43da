"""Permission checks for labels that users set through comments."""

from __future__ import annotations

import enum
import logging
import re
from typing import Iterable

log = logging.getLogger(__name__)


class TeamMembership(enum.Enum):
    """Whether the commenting user belongs to a team."""

    MEMBER = "member"
    OUTSIDER = "outsider"
    UNKNOWN = "unknown"


class CheckFilterResult(enum.Enum):
    """Whether a user may set a label."""

    ALLOW = "allow"
    DENY = "deny"
    DENY_UNKNOWN = "deny_unknown"


class MatchPatternResult(enum.Enum):
    """How a single allow pattern relates to a label."""

    ALLOW = "allow"
    DENY = "deny"
    NO_MATCH = "no_match"


def _char_class(body: str, negate: bool) -> str:
    pieces = []
    chars = list(body)
    while chars:
        first = chars.pop(0)
        if len(chars) >= 2 and chars[0] == "-":
            last = chars[1]
            del chars[:2]
            if first <= last:
                pieces.append(f"{re.escape(first)}-{re.escape(last)}")
        else:
            pieces.append(re.escape(first))
    if not pieces:
        return "." if negate else "(?!)"
    return f"[{'^' if negate else ''}{''.join(pieces)}]"


def _compile_glob(pattern: str) -> "re.Pattern[str]":
    parts = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "?":
            parts.append(".")
            i += 1
        elif ch == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            count = j - i
            if count > 2:
                raise ValueError(f"invalid pattern {pattern!r}: too many wildcards")
            if count == 2:
                if (i > 0 and pattern[i - 1] != "/") or (j < n and pattern[j] != "/"):
                    raise ValueError(
                        f"invalid pattern {pattern!r}: recursive wildcards must form "
                        "a single path component"
                    )
                if j < n:
                    parts.append("(?:.*/)?")
                    j += 1
                else:
                    parts.append(".*")
            else:
                parts.append(".*")
            i = j
        elif ch == "[":
            j = i + 1
            negate = j < n and pattern[j] == "!"
            if negate:
                j += 1
            start = j
            if j < n and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end < 0:
                raise ValueError(f"invalid pattern {pattern!r}: unterminated range")
            parts.append(_char_class(pattern[start:end], negate))
            i = end + 1
        else:
            parts.append(re.escape(ch))
            i += 1
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def match_pattern(pattern: str, label: str) -> MatchPatternResult:
    """Match ``label`` case-insensitively against a glob; a leading ``!`` denies.

    Invalid patterns raise ``ValueError``.
    """
    inverse = pattern.startswith("!")
    if inverse:
        pattern = pattern[1:]
    if not _compile_glob(pattern).fullmatch(label):
        return MatchPatternResult.NO_MATCH
    return MatchPatternResult.DENY if inverse else MatchPatternResult.ALLOW


def check_filter(
    label: str,
    allow_unauthenticated: Iterable[str],
    membership: TeamMembership,
) -> CheckFilterResult:
    """Decide whether a user with ``membership`` may set ``label``.

    Team members may set any label; others only those allowed by a pattern
    and not later denied. A bad pattern raises ``ValueError``.
    """
    if membership is TeamMembership.MEMBER:
        return CheckFilterResult.ALLOW

    matched = False
    for pattern in allow_unauthenticated:
        try:
            result = match_pattern(pattern, label)
        except ValueError as exc:
            log.error("failed to match pattern %s: %s", pattern, exc)
            raise ValueError(f"failed to match pattern {pattern}") from exc
        if result is MatchPatternResult.ALLOW:
            matched = True
        elif result is MatchPatternResult.DENY:
            # An explicit deny overrides any allowed pattern.
            matched = False
            break

    if matched:
        return CheckFilterResult.ALLOW
    if membership is TeamMembership.OUTSIDER:
        return CheckFilterResult.DENY
    return CheckFilterResult.DENY_UNKNOWN
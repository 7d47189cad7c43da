"""Build-completion messages from the merge bot and the commits they announce."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Optional

BORS_GH_ID = 3372342

_START = "<!-- homu: "
_END = " -->"
_MERGE_PREFIX = "Auto merge of #"
_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class BorsMessage:
    """The JSON block the merge bot embeds in its comments."""

    type: str
    base_ref: str
    merge_sha: str


def parse_bors_message(body: str) -> Optional[BorsMessage]:
    """Extract the embedded build message from a comment body.

    Returns None when the markers are absent; malformed data raises ``ValueError``.
    """
    start = body.find(_START)
    end = body.find(_END)
    if start < 0 or end < 0:
        return None
    start += len(_START)
    if start > end:
        raise ValueError("build message end marker precedes its start")
    text = body[start:end]
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to parse build completion from {text!r}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"expected an object in build completion, got {text!r}")
    values = {}
    for key in ("type", "base_ref", "merge_sha"):
        if key not in data:
            raise ValueError(f"missing field `{key}`")
        if not isinstance(data[key], str):
            raise ValueError(f"invalid value for field `{key}`: {data[key]!r}")
        values[key] = data[key]
    return BorsMessage(**values)


def pr_number_from_message(message: str) -> Optional[int]:
    """Return the pull request number of an ``Auto merge of #N ...`` commit message."""
    if not message.startswith(_MERGE_PREFIX):
        return None
    tail = message[len(_MERGE_PREFIX):]
    end = tail.find(" ")
    if end < 0:
        return None
    digits = tail[:end]
    if not _NUMBER.fullmatch(digits):
        return None
    number = int(digits)
    return number if number < 2 ** 32 else None
"""Pings for interested people when a pull request touches configured paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Iterable, Mapping, Optional

MENTIONS_KEY = "mentions"


@dataclass
class MentionsPathConfig:
    """What to post when a path changes, and whom to cc."""

    message: Optional[str] = None
    cc: list[str] = field(default_factory=list)


def _starts_with(path: PurePosixPath, prefix: PurePosixPath) -> bool:
    return path.parts[: len(prefix.parts)] == prefix.parts


def paths_to_mention(
    paths_config: Mapping[str, MentionsPathConfig],
    file_paths: Iterable[str],
    author: str,
) -> list[str]:
    """Return the configured paths that the changed files fall under.

    A path whose only cc entry is the author is left out.
    """
    files = [PurePosixPath(p) for p in file_paths]
    result = []
    for key, config in paths_config.items():
        prefix = PurePosixPath(key)
        touches = any(_starts_with(f, prefix) for f in files)
        if len(config.cc) == 1:
            pings_non_author = config.cc[0].lstrip("@") != author
        else:
            pings_non_author = True
        if touches and pings_non_author:
            result.append(key)
    return result


def build_mentions_comment(
    paths_config: Mapping[str, MentionsPathConfig],
    to_mention: Iterable[str],
    already_mentioned: Iterable[str],
) -> tuple[str, list[str]]:
    """Build the comment for paths not mentioned before.

    Returns the comment text (empty when nothing is new) and the paths it
    mentions, in order. A path missing from the configuration raises ``KeyError``.
    """
    seen = set(already_mentioned)
    sections = []
    added = []
    for path in to_mention:
        if path in seen:
            continue
        config = paths_config[path]
        text = config.message if config.message is not None else f"Some changes occurred in {path}"
        if config.cc:
            text += f"\n\ncc {', '.join(config.cc)}"
        sections.append(text)
        seen.add(path)
        added.append(path)
    return "\n\n".join(sections), added
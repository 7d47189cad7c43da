"""Validation feedback for pull requests that change the bot's configuration file."""

from __future__ import annotations

from typing import Optional, Tuple

CONFIG_FILE_NAME = "issuebot.toml"


def translate_position(text: str, index: int) -> Tuple[int, int]:
    """Translate a byte offset into ``text`` to a 1-based ``(line, column)``.

    Empty text gives ``(0, index)``. Offsets past the end extend the column of
    the last character. An offset that splits a multi-byte character raises
    ``ValueError``.
    """
    if index < 0:
        raise ValueError(f"negative offset {index}")
    data = text.encode("utf-8")
    if not data:
        return 0, index

    safe_index = min(index, len(data) - 1)
    column_offset = index - safe_index

    newline = data.rfind(b"\n", 0, safe_index)
    line_start = newline + 1 if newline >= 0 else 0
    line = data.count(b"\n", 0, line_start)
    try:
        segment = data[line_start:safe_index + 1].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"offset {index} is not on a character boundary") from exc
    column = len(segment) - 1 + column_offset
    return line + 1, column + 1


def format_config_error(
    message: str,
    text: str,
    span: Optional[Tuple[int, int]],
    repo: str,
    sha: str,
) -> str:
    """Return the comment reporting a configuration parse error.

    When ``span`` is known and not ``(0, 0)`` the comment links to the line of
    the file at ``sha`` in ``repo``.
    """
    position = ""
    if span is not None and tuple(span) != (0, 0):
        line, column = translate_position(text, span[0])
        url = f"https://github.com/{repo}/blob/{sha}/{CONFIG_FILE_NAME}#L{line}"
        position = f" at position [{line}:{column}]({url})"
    return f"Invalid `{CONFIG_FILE_NAME}`{position}:\n`````\n{message}\n`````"
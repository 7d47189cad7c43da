"""Comment bodies posted by the bot and bot-managed sections of issue bodies."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Optional

START_BOT = "<!-- TRIAGEBOT_START -->\n\n"
END_BOT = "<!-- TRIAGEBOT_END -->"

HELP_TEXT = (
    "Please file an issue if there's a problem with this bot, "
    "or reach out to the infrastructure team."
)


def normalize_body(body: str) -> str:
    """Convert CRLF line endings to LF."""
    return body.replace("\r\n", "\n")


def error_comment_body(message: str) -> str:
    """Return the text of an error comment reporting ``message``."""
    return f"**Error**: {message}\n\n{HELP_TEXT}\n"


def ping_comment_body(users: Iterable[str]) -> str:
    """Return the text of a comment that mentions every user."""
    return "".join(f"@{user} " for user in users)


@dataclass
class EditIssueBody:
    """A named section of an issue body that the bot owns and rewrites."""

    body: str
    id: str

    @property
    def _start_section(self) -> str:
        return f"<!-- TRIAGEBOT_{self.id}_START -->\n"

    @property
    def _end_section(self) -> str:
        return f"\n<!-- TRIAGEBOT_{self.id}_END -->\n"

    @property
    def _data_start(self) -> str:
        return f"\n<!-- TRIAGEBOT_{self.id}_DATA_START$$"

    @property
    def _data_end(self) -> str:
        return f"$$TRIAGEBOT_{self.id}_DATA_END -->\n"

    def _data_section(self, data: Any) -> str:
        encoded = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return f"{self._data_start}{encoded}{self._data_end}"

    def _section_bounds(self, body: str) -> tuple[int, int]:
        start = body.find(self._start_section)
        end = body.find(self._end_section)
        if end < 0:
            raise ValueError(f"section {self.id} has no end marker")
        return start, end + len(self._end_section)

    def _current(self) -> Optional[str]:
        body = normalize_body(self.body)
        if START_BOT not in body or self._start_section not in body:
            return None
        start, end = self._section_bounds(body)
        return body[start:end]

    def current_data(self) -> Any:
        """Return the JSON data stored in the section, or None when absent."""
        section = self._current()
        if section is None:
            return None
        start = section.find(self._data_start)
        end = section.find(self._data_end)
        if start < 0 or end < 0:
            raise ValueError(f"section {self.id} has no data block")
        text = section[start + len(self._data_start):end]
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"deserializing data {text!r} failed: {exc}") from exc

    def apply(self, text: str, data: Any) -> str:
        """Return the issue body with the section set to ``text`` and ``data``."""
        body = normalize_body(self.body)
        bot_section = (
            f"{self._start_section}{text}{self._data_section(data)}{self._end_section}"
        )
        empty_section = f"{self._start_section}{self._end_section}"
        all_new = f"\n\n{START_BOT}{bot_section}{END_BOT}"

        if START_BOT not in body:
            return body + all_new

        if self._start_section in body:
            start, end = self._section_bounds(body)
            body = body[:start] + bot_section + body[end:]
            if all_new in body and bot_section == empty_section:
                idx = body.find(all_new)
                body = body[:idx] + body[idx + len(all_new):]
            return body

        idx = body.find(END_BOT)
        return body[:idx] + bot_section + body[idx:]
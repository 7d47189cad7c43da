"""Summary notes that users attach to an issue through comments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

log = logging.getLogger(__name__)

_FOOTER = "\n\nGenerated by issuebot; see the note command help for how to add more"


@dataclass
class NoteDataEntry:
    """One summary note pointing at the comment that created it."""

    title: str
    comment_url: str
    author: str

    def to_markdown(self) -> str:
        """Return the note as a markdown list item, preceded by a newline."""
        return f'\n- ["{self.title}" by @{self.author}]({self.comment_url})'

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "comment_url": self.comment_url, "author": self.author}


def _entry_from_dict(data: Any) -> NoteDataEntry:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object for a note entry, got {data!r}")
    try:
        values = {key: data[key] for key in ("title", "comment_url", "author")}
    except KeyError as exc:
        raise ValueError(f"missing field `{exc.args[0]}`") from None
    for key, value in values.items():
        if not isinstance(value, str):
            raise ValueError(f"invalid value for field `{key}`: {value!r}")
    return NoteDataEntry(**values)


@dataclass
class NoteData:
    """All summary notes of an issue, keyed by the URL of their comment."""

    entries_by_url: dict[str, NoteDataEntry] = field(default_factory=dict)

    def get_url_from_title(self, title: str) -> Optional[str]:
        """Return the smallest comment URL whose note has ``title``."""
        return next(
            (url for url, entry in sorted(self.entries_by_url.items(), key=lambda kv: kv[0])
             if entry.title == title),
            None,
        )

    def remove_by_title(self, title: str) -> Optional[NoteDataEntry]:
        """Remove and return the first note with ``title``, or None."""
        url = self.get_url_from_title(title)
        if url is None:
            log.debug("unable to remove entry with title %r", title)
            return None
        entry = self.entries_by_url.pop(url)
        log.debug("removed entry %r", entry)
        return entry

    def add_summary(self, comment_url: str, title: str, author: str) -> NoteDataEntry:
        """Add a note for ``comment_url``, or retitle the one already there."""
        existing = self.entries_by_url.get(comment_url)
        if existing is not None:
            existing.title = title
            return existing
        entry = NoteDataEntry(title=title, comment_url=comment_url, author=author)
        self.entries_by_url[comment_url] = entry
        return entry

    def to_markdown(self) -> str:
        """Render the notes section, or an empty string when there are none."""
        if not self.entries_by_url:
            return ""
        items = "".join(
            entry.to_markdown()
            for _, entry in sorted(self.entries_by_url.items(), key=lambda kv: kv[0])
        )
        return f"\n### Summary Notes\n{items}{_FOOTER}"

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible form stored in the issue body."""
        return {
            "entries_by_url": {
                url: entry.to_dict() for url, entry in self.entries_by_url.items()
            }
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "NoteData":
        """Build notes from stored data; None gives an empty set of notes."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object for note data, got {data!r}")
        if "entries_by_url" not in data:
            raise ValueError("missing field `entries_by_url`")
        entries = data["entries_by_url"]
        if not isinstance(entries, Mapping):
            raise ValueError(f"invalid value for field `entries_by_url`: {entries!r}")
        return cls({url: _entry_from_dict(value) for url, value in entries.items()})
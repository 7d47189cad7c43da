"""The "[Rendered]" link added to pull requests that change documents."""

from __future__ import annotations

from typing import Optional

_MARKER = "[Rendered]"
_LINK_START = "[Rendered]("

_PREFIXES = {
    ("rust-lang", "rfcs"): "text/",
    ("rust-lang", "blog.rust-lang.org"): "posts/",
}


class RenderedLinkError(ValueError):
    """The existing rendered link in a body could not be located."""


def rendered_prefix(organization: str, repository: str) -> Optional[str]:
    """Return the directory whose files get a rendered link, or None if unsupported."""
    return _PREFIXES.get((organization, repository))


def rendered_link(
    filename: str,
    merged: bool,
    closed: bool,
    repo_full_name: str,
    head_repo_full_name: str,
    base_ref: str,
    head_ref: str,
    head_sha: str,
) -> str:
    """Return the markdown link to the rendered file.

    Merged pull requests point at the base branch of the repository, closed
    ones at the head commit in the repository, open ones at the head branch
    of the fork.
    """
    owner = repo_full_name if merged or closed else head_repo_full_name
    if merged:
        ref = base_ref
    elif closed:
        ref = head_sha
    else:
        ref = head_ref
    return f"[Rendered](https://github.com/{owner}/blob/{ref}/{filename})"


def update_body(body: str, link: Optional[str]) -> str:
    """Return ``body`` with its rendered link added, replaced or removed."""
    if _MARKER not in body:
        return f"{body}\n\n{link}" if link is not None else body

    start = body.find(_LINK_START)
    if start < 0:
        raise RenderedLinkError(
            "found `[Rendered]` but not its associated link, can't replace it or remove it"
        )
    end = body.find(")", start)
    if end < 0:
        raise RenderedLinkError("no `)` after `[Rendered]` found")
    return body.replace(body[start:end + 1], link or "")
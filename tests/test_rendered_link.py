import pytest

from issuebot.handlers.rendered_link import (
    RenderedLinkError,
    rendered_link,
    rendered_prefix,
    update_body,
)


def _link(merged=False, closed=False):
    return rendered_link(
        "text/0001-foo.md",
        merged=merged,
        closed=closed,
        repo_full_name="octocat/REPO",
        head_repo_full_name="Bob/REPO",
        base_ref="master",
        head_ref="patch-1",
        head_sha="abc123",
    )


def test_prefixes():
    assert rendered_prefix("rust-lang", "rfcs") == "text/"
    assert rendered_prefix("rust-lang", "blog.rust-lang.org") == "posts/"
    assert rendered_prefix("rust-lang", "rust") is None


def test_open_pull_request_points_at_fork_branch():
    assert _link() == "[Rendered](https://github.com/Bob/REPO/blob/patch-1/text/0001-foo.md)"


def test_merged_pull_request_points_at_base_branch():
    assert _link(merged=True) == (
        "[Rendered](https://github.com/octocat/REPO/blob/master/text/0001-foo.md)"
    )
    assert _link(merged=True, closed=True) == _link(merged=True)


def test_closed_pull_request_points_at_head_sha():
    assert _link(closed=True) == (
        "[Rendered](https://github.com/octocat/REPO/blob/abc123/text/0001-foo.md)"
    )


def test_link_added_to_body_without_one():
    assert update_body("Body text", "[Rendered](x)") == "Body text\n\n[Rendered](x)"


def test_body_unchanged_without_link():
    assert update_body("Body text", None) == "Body text"


def test_existing_link_is_replaced():
    body = "Intro\n\n[Rendered](https://old/x.md)\n\nMore"
    result = update_body(body, "[Rendered](https://new/y.md)")
    assert result == "Intro\n\n[Rendered](https://new/y.md)\n\nMore"


def test_existing_link_is_removed():
    body = "Intro [Rendered](https://old/x.md) end"
    assert update_body(body, None) == "Intro  end"


def test_update_is_idempotent():
    link = _link()
    once = update_body("Summary", link)
    assert update_body(once, link) == once


def test_marker_without_link_raises():
    with pytest.raises(RenderedLinkError):
        update_body("see [Rendered] somewhere", "[Rendered](x)")


def test_link_without_closing_paren_raises():
    with pytest.raises(RenderedLinkError):
        update_body("see [Rendered](https://old", None)
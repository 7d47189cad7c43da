from issuebot.notification_listing import Notification, escape_html, render


def test_escape_html_all_special_characters():
    assert escape_html("<a href=\"x\">&'") == "&lt;a href=&quot;x&quot;&gt;&amp;&#39;"


def test_escape_html_leaves_plain_text():
    assert escape_html("plain text 123") == "plain text 123"


def test_empty_listing():
    page = render("alice", [])
    assert "<p><em>You have no pending notifications! :)</em></p>" in page
    assert "<ol>" not in page
    assert page.startswith("<html>")
    assert page.endswith("</html>")


def test_header_names_user():
    page = render("alice", [])
    assert "<h3>Pending notifications for alice</h3>" in page


def test_description_is_escaped():
    url = "https://example.com/issue/1"
    page = render("alice", [Notification(origin_url=url, short_description="a < b & c")])
    assert f"<a href='{url}'>{escape_html('a < b & c')}</a>" in page
    assert "a < b" not in page
    assert "You have no pending notifications" not in page


def test_url_used_when_no_description():
    url = "https://example.com/issue/2"
    page = render("alice", [Notification(origin_url=url)])
    assert f"<a href='{url}'>{url}</a>" in page


def test_metadata_rendered_as_sublist():
    page = render(
        "alice",
        [Notification(origin_url="https://example.com/1", metadata="<note>")],
    )
    assert f"<ul><li>{escape_html('<note>')}</li></ul>" in page


def test_notifications_keep_order():
    page = render(
        "alice",
        [
            Notification(origin_url="https://example.com/1", short_description="first"),
            Notification(origin_url="https://example.com/2", short_description="second"),
        ],
    )
    assert page.count("<li>") == 2
    assert page.index("first") < page.index("second")
    assert "<code>ack all</code>" in page
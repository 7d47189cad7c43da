"""HTML listing of a user's pending notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

BOT_NAME = "issuebot"

_EMPTY_MESSAGE = "<p><em>You have no pending notifications! :)</em></p>"

_ACK_HELP = (
    "<p><em>You can acknowledge a notification by sending </em><code>ack &lt;idx&gt;</code>"
    "<em> to </em><strong><code>@" + BOT_NAME + "</code></strong><em> on Zulip, or you can "
    "acknowledge all notifications by sending </em><code>ack all</code><em>.</em></p>"
)


@dataclass
class Notification:
    """A pending notification as shown to its recipient."""

    origin_url: str
    short_description: Optional[str] = None
    metadata: Optional[str] = None


def escape_html(text: str) -> str:
    """Escape the characters that are special in HTML text and attributes."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def render(user: str, notifications: Iterable[Notification]) -> str:
    """Render an HTML page listing ``user``'s notifications in order."""
    notifications = list(notifications)
    parts = [
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        "<title>Notification Data</title>",
        "</head>",
        "<body>",
        f"<h3>Pending notifications for {user}</h3>",
    ]

    if not notifications:
        parts.append(_EMPTY_MESSAGE)
    else:
        parts.append("<ol>")
        for notification in notifications:
            description = (
                notification.short_description
                if notification.short_description is not None
                else notification.origin_url
            )
            parts.append("<li>")
            parts.append(
                f"<a href='{notification.origin_url}'>{escape_html(description)}</a>"
            )
            if notification.metadata is not None:
                parts.append(f"<ul><li>{escape_html(notification.metadata)}</li></ul>")
            parts.append("</li>")
        parts.append("</ol>")
        parts.append(_ACK_HELP)

    parts.append("</body>")
    parts.append("</html>")
    return "".join(parts)
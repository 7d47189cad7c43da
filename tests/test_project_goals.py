from datetime import date

import pytest

from issuebot.handlers.project_goals import (
    MAX_ZULIP_TOPIC,
    comment_fence,
    join_owners,
    ping_message,
    third_monday,
    zulip_topic_name,
)


def test_short_title_keeps_all_words():
    topic = zulip_topic_name("Faster  builds", 12)
    assert topic.endswith("(goals#12)")
    assert topic.startswith("Faster builds ")
    assert len(topic.encode()) < MAX_ZULIP_TOPIC


def test_long_title_is_cut_at_word_boundary():
    title = " ".join(["word"] * 30)
    topic = zulip_topic_name(title, 345)
    assert len(topic.encode()) < MAX_ZULIP_TOPIC
    assert topic.endswith("(goals#345)")
    kept = topic[: -len("(goals#345)")].split()
    assert kept == title.split()[: len(kept)]
    assert len(kept) < 30


def test_topic_with_huge_reference_fails():
    with pytest.raises(ValueError):
        zulip_topic_name("title", 10 ** 60)


def test_ping_message_substitutions():
    msg = ping_message("@alice", 21, "Goal X", 7, "on Sep-16")
    assert "Dear @alice" in msg
    assert "21 days" in msg
    assert "*Goal X*" in msg
    assert "goals#7 " in msg
    assert "on Sep-16." in msg
    assert "$" not in msg


def test_ping_message_without_updates_uses_infinity():
    msg = ping_message("@bob", None, "G", 3, "soon")
    assert "∞ days" in msg


def test_comment_fence_plain():
    assert comment_fence("plain text") == "````"


@pytest.mark.parametrize("text", ["a ```` b", "``````", "x ````` y ```` z"])
def test_comment_fence_not_in_text(text):
    fence = comment_fence(text)
    assert fence not in text
    assert set(fence) == {"`"}
    assert len(fence) > 4


def test_third_monday_example():
    assert third_monday(2024, 9) == "on Sep-16"


@pytest.mark.parametrize("month", range(1, 13))
def test_third_monday_is_monday_in_third_week(month):
    text = third_monday(2025, month)
    day = int(text.split("-")[1])
    assert date(2025, month, day).weekday() == 0
    assert 15 <= day <= 21


def test_join_owners():
    assert join_owners([]) is None
    assert join_owners(["@a"]) == "@a"
    assert join_owners(["@a", "@b"]) == "@a and @b"
    assert join_owners(["@a", "@b", "@c"]) == "@a, @b, @c, "
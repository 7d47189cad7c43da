import pytest

from issuebot.handlers.major_change import (
    Invocation,
    InvocationKind,
    accepted_message,
    new_proposal_message,
    seconded_message,
    zulip_topic_from_issue,
    MAX_ZULIP_TOPIC,
)

REF = "rust-lang/compiler-team#1"


def test_short_title_is_kept():
    assert zulip_topic_from_issue("Short title", REF) == f"Short title {REF}"


def test_long_title_is_truncated_to_limit():
    title = "x" * 100
    topic = zulip_topic_from_issue(title, REF)
    assert len(topic) == MAX_ZULIP_TOPIC
    assert topic.endswith(f"… {REF}")
    assert title.startswith(topic[: -len(REF) - 2])


def test_title_one_over_keep_is_not_truncated():
    keep = MAX_ZULIP_TOPIC - len(REF) - 2
    title = "y" * (keep + 1)
    topic = zulip_topic_from_issue(title, REF)
    assert topic == f"{title} {REF}"
    assert len(topic) == MAX_ZULIP_TOPIC


def test_title_two_over_keep_is_truncated():
    keep = MAX_ZULIP_TOPIC - len(REF) - 2
    title = "z" * (keep + 2)
    topic = zulip_topic_from_issue(title, REF)
    assert topic == f"{'z' * keep}… {REF}"


def test_truncation_counts_characters_not_bytes():
    title = "é" * 80
    assert len(zulip_topic_from_issue(title, REF)) == MAX_ZULIP_TOPIC


def test_too_long_reference_raises():
    with pytest.raises(ValueError):
        zulip_topic_from_issue("title", "r" * 70)


def test_accepted_message():
    assert accepted_message(5, "https://example.com/5") == (
        "This proposal has been accepted: [#5](https://example.com/5)."
    )


def test_seconded_message():
    assert seconded_message("T-compiler", 7, "https://example.com/7") == (
        "@*T-compiler*: Proposal [#7](https://example.com/7) has been seconded, "
        "and will be approved in 10 days if no objections are raised."
    )


def test_new_proposal_message():
    message = new_proposal_message("Do things", 9, "https://example.com/9")
    assert message.startswith(
        "A new proposal has been announced: [Do things #9](https://example.com/9). It will be "
    )
    assert message.endswith("consider proposing a design meeting.")


def test_invocations():
    assert Invocation.rename("old") == Invocation.rename("old")
    assert Invocation.rename("old").previous_title == "old"
    assert Invocation.new_proposal().kind is InvocationKind.NEW_PROPOSAL
    assert Invocation.accepted_proposal() == Invocation(InvocationKind.ACCEPTED_PROPOSAL)
    assert Invocation.new_proposal() != Invocation.accepted_proposal()
import json

import pytest

from issuebot.handlers.rustc_commits import (
    BorsMessage,
    parse_bors_message,
    pr_number_from_message,
)


def _body(data):
    return f":sunny: Test successful\n<!-- homu: {json.dumps(data)} -->"


def test_parse_round_trip():
    data = {"type": "BuildCompleted", "base_ref": "master", "merge_sha": "abc123"}
    assert parse_bors_message(_body(data)) == BorsMessage(
        type="BuildCompleted", base_ref="master", merge_sha="abc123"
    )


def test_extra_fields_ignored():
    data = {"type": "T", "base_ref": "beta", "merge_sha": "f00", "builders": []}
    msg = parse_bors_message(_body(data))
    assert msg.base_ref == "beta"
    assert msg.merge_sha == "f00"


def test_no_markers_gives_none():
    assert parse_bors_message("Test successful, nothing embedded") is None


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        parse_bors_message("<!-- homu: {not json -->")


def test_missing_field_raises():
    with pytest.raises(ValueError):
        parse_bors_message(_body({"type": "BuildCompleted", "base_ref": "master"}))


def test_pr_number_found():
    assert pr_number_from_message("Auto merge of #123 - user:branch, r=me") == 123


@pytest.mark.parametrize(
    "message",
    [
        "Merge pull request #1 from x",
        "Auto merge of #123",
        "Auto merge of #abc - x",
        "Auto merge of #99999999999 - x",
    ],
)
def test_pr_number_absent(message):
    assert pr_number_from_message(message) is None
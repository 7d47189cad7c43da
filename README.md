# issuebot

The logic a bot needs to triage issues and pull requests and to relay
activity to a Zulip chat: checking webhook signatures, decoding webhook
payloads, deciding who may set which label, keeping a JSON-backed section
inside an issue body, and formatting the comments and chat messages such a
bot posts. Everything here is plain functions and data classes with no
dependencies outside the standard library.

## Installation

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

### Core

- `issuebot.team` – `Label` (a frozen dataclass holding a name), the `Team`
  enum (`LIBS`, `COMPILER`, `LANG`) whose `label()` returns `T-<team>`, and
  `parse_team`, which raises `ValueError` for unknown names.
- `issuebot.interactions` – `normalize_body` (CRLF to LF),
  `error_comment_body`, `ping_comment_body`, and `EditIssueBody(body, id)`.
  `EditIssueBody.current_data()` returns the JSON stored in the named
  bot section of an issue body (or `None`); `apply(text, data)` returns the
  new body with that section added, replaced, or removed when it is empty.
- `issuebot.payload` – `assert_signed(signature, payload, secret=None)`
  checks an HMAC-SHA1 `sha1=<hex>` signature and raises `SignedPayloadError`
  on a malformed or wrong signature. Without `secret` it reads
  `GITHUB_WEBHOOK_SECRET` from the environment and raises `RuntimeError` if
  that is unset.
- `issuebot.events` – the `EventName` enum and `parse_event_name` (unknown
  names become `EventName.OTHER`), `deserialize_payload` (JSON decoding that
  raises `PayloadError` carrying `line` and `column`),
  `combine_error_messages`, and the `ReviewPrefs` record with `summary()`.
- `issuebot.notification_listing` – `Notification`, `escape_html`, and
  `render(user, notifications)`, which returns an HTML page listing them.
- `issuebot.rfcbot` – final-comment-period records (`FCP`, `Reviewer`,
  `Review`, `Concern`, `FCPIssue`, `StatusComment`, `FullFCP`),
  `parse_full_fcp` (raises `ValueError` on malformed data), `index_fcps`
  (keys each by `repository:number:title`) and `get_all_fcps(url)`, which
  fetches a JSON list over HTTP with `urllib` and indexes it.
- `issuebot.triage` – `PullRequestRow`, `triage_color` (`red` after 14 days
  without update, `yellow` after 7, else `green`), `days_since` and
  `build_row`, which turns a pull request as returned by the API into a row.

### Handlers (`issuebot.handlers`)

- `relabel` – `match_pattern` (case-insensitive globs, a leading `!`
  denies) and `check_filter(label, allow_unauthenticated, membership)` with
  the enums `TeamMembership`, `CheckFilterResult` and `MatchPatternResult`.
- `note` – `NoteDataEntry` and `NoteData` for summary notes:
  `add_summary`, `get_url_from_title`, `remove_by_title`, `to_markdown`,
  `to_dict` and `NoteData.from_dict`.
- `notify_zulip` – `NotificationType`, `replace_team_to_be_nominated`,
  `truncate_topic` (60 characters, ending in `…`), `format_topic` and
  `has_all_required_labels`.
- `no_merges` – `NoMergesState`, `get_default_message`,
  `find_merge_commits` and `build_merge_message`, which lists only merge
  commits not mentioned before and records them in the state.
- `validate_config` – `translate_position` (byte offset to 1-based line and
  column) and `format_config_error`, which formats a parse error report for
  `issuebot.toml` (`CONFIG_FILE_NAME`).
- `rendered_link` – `rendered_prefix`, `rendered_link` and `update_body`,
  which adds, replaces or removes a `[Rendered](...)` link and raises
  `RenderedLinkError` when an existing one cannot be located.
- `major_change` – `Invocation` (with `InvocationKind`),
  `zulip_topic_from_issue`, `new_proposal_message`, `accepted_message` and
  `seconded_message`.
- `project_goals` – `zulip_topic_name`, `ping_message`, `comment_fence`,
  `third_monday` and `join_owners`.
- `rustc_commits` – `BorsMessage`, `parse_bors_message` and
  `pr_number_from_message`.
- `mentions` – `MentionsPathConfig`, `paths_to_mention` and
  `build_mentions_comment`.
- `shortcut` – `ShortcutCommand` and `status_label_changes`, which returns
  the status labels to remove and to add.

## Example

```python
from issuebot.handlers.relabel import check_filter, TeamMembership
from issuebot.interactions import EditIssueBody
from issuebot.payload import assert_signed, SignedPayloadError

allowed = ["T-*", "I-*", "!I-*nominated"]
print(check_filter("I-slow", allowed, TeamMembership.OUTSIDER))       # ALLOW
print(check_filter("I-nominated", allowed, TeamMembership.OUTSIDER))  # DENY

section = EditIssueBody(body="Issue text", id="SUMMARY")
new_body = section.apply("notes go here", {"count": 1})
print(EditIssueBody(body=new_body, id="SUMMARY").current_data())      # {'count': 1}

try:
    assert_signed("sha1=00", b"{}", "secret")
except SignedPayloadError as err:
    print(err)  # failed to validate payload
```

## What it does not do

This is a library of building blocks, not a running bot. It has no command
to start, no HTTP server that receives webhooks, no database for notifications,
review preferences or scheduled jobs, and no client that posts comments,
edits issues, sets labels or sends chat messages. Functions such as
`EditIssueBody.apply` or `build_mentions_comment` return the text to post;
sending it is left to the caller. The only network access is
`rfcbot.get_all_fcps`, which reads a URL the caller supplies.

## Running the tests

```
pytest
```
from issuebot.handlers.no_merges import (
    NoMergesState,
    build_merge_message,
    find_merge_commits,
    get_default_message,
)

EXPECTED = """
There are merge commits (commits with multiple parents) in your changes. We have a no merge policy so these commits will need to be removed for this pull request to be merged.

You can start a rebase with the following commands:
```shell-session
$ # rebase
$ git pull --rebase https://github.com/foo/bar.git baz
$ git push --force-with-lease
```

The following commits are merge commits:
- commit1
- commit2
- commit3
- commit4
"""


def test_message():
    state = NoMergesState()
    message = build_merge_message(
        get_default_message("foo/bar", "baz"),
        [f"commit{n}" for n in range(1, 5)],
        state,
    )
    assert message == EXPECTED
    assert state.mentioned_merge_commits == {"commit1", "commit2", "commit3", "commit4"}


def test_since_last_posted():
    state = NoMergesState(mentioned_merge_commits={"commit1"})
    message = build_merge_message("", ["commit1", "commit2"], state)
    assert message == (
        "The following commits are merge commits"
        " (since this message was last posted):\n- commit2\n"
    )


def test_nothing_new_returns_none():
    state = NoMergesState(mentioned_merge_commits={"a", "b"})
    assert build_merge_message("base", ["a"], state) is None
    assert state.mentioned_merge_commits == {"a", "b"}


def test_find_merge_commits():
    commits = [
        {"sha": "a", "parents": [{"sha": "p"}]},
        {"sha": "b", "parents": [{"sha": "p"}, {"sha": "q"}]},
        {"sha": "c", "parents": []},
    ]
    assert find_merge_commits(commits) == {"b"}


def test_default_message_mentions_repo():
    text = get_default_message("org/repo", "main")
    assert "https://github.com/org/repo.git main" in text
    assert text.startswith("\n")
    assert text.endswith("```\n\n")
"""Detection of merge commits in pull requests and the warning posted about them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional


@dataclass
class NoMergesState:
    """What the bot has already reported on a pull request."""

    mentioned_merge_commits: set[str] = field(default_factory=set)
    no_merge_comments: list[str] = field(default_factory=list)
    added_labels: list[str] = field(default_factory=list)


def get_default_message(repository_name: str, default_branch: str) -> str:
    """Return the standard explanation of the no-merge policy."""
    return (
        "\n"
        "There are merge commits (commits with multiple parents) in your changes. "
        "We have a no merge policy so these commits will need to be removed for "
        "this pull request to be merged.\n"
        "\n"
        "You can start a rebase with the following commands:\n"
        "```shell-session\n"
        "$ # rebase\n"
        f"$ git pull --rebase https://github.com/{repository_name}.git {default_branch}\n"
        "$ git push --force-with-lease\n"
        "```\n"
        "\n"
    )


def find_merge_commits(commits: Iterable[Mapping[str, Any]]) -> set[str]:
    """Return the hashes of commits that have more than one parent."""
    return {
        commit["sha"] for commit in commits if len(commit.get("parents") or ()) > 1
    }


def build_merge_message(
    base: str, merge_commits: Iterable[str], state: NoMergesState
) -> Optional[str]:
    """Append the list of not yet mentioned merge commits to ``base``.

    The new commits are recorded in ``state``. Returns None when every merge
    commit has been mentioned before.
    """
    first_time = not state.mentioned_merge_commits
    since = "" if first_time else " (since this message was last posted)"
    new = sorted(set(merge_commits) - state.mentioned_merge_commits)
    if not new:
        return None
    state.mentioned_merge_commits.update(new)
    lines = "".join(f"- {commit}\n" for commit in new)
    return f"{base}The following commits are merge commits{since}:\n{lines}"
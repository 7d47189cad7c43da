"""Single-word commands that set a pull request's status label."""

from __future__ import annotations

import enum
from typing import Iterable, Union

from issuebot.team import Label

WAITING_ON_REVIEW = "S-waiting-on-review"
WAITING_ON_AUTHOR = "S-waiting-on-author"
BLOCKED = "S-blocked"

STATUS_LABELS = (WAITING_ON_REVIEW, WAITING_ON_AUTHOR, BLOCKED)


class ShortcutCommand(enum.Enum):
    """A status shortcut and the label it sets."""

    READY = WAITING_ON_REVIEW
    AUTHOR = WAITING_ON_AUTHOR
    BLOCKED = BLOCKED

    @property
    def label(self) -> str:
        return self.value


def status_label_changes(
    command: ShortcutCommand, labels: Iterable[Union[Label, str]]
) -> tuple[list[str], list[str]]:
    """Return ``(to_remove, to_add)`` label names for applying ``command``.

    Nothing changes when the target label is already present; otherwise the
    other status labels are removed and the target added.
    """
    names = {label.name if isinstance(label, Label) else label for label in labels}
    add = command.label
    if add in names:
        return [], []
    return [name for name in STATUS_LABELS if name != add], [add]
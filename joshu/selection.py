"""Options controlling how entries are selected."""

from dataclasses import dataclass


@dataclass
class SelectOption:
    """Whether a selection toggles, covers all entries, or deselects."""

    toggle: bool = True
    all: bool = False
    reverse: bool = False

    def __str__(self) -> str:
        return (
            f"--toggle={str(self.toggle).lower()} --all={str(self.all).lower()} "
            f"--deselect={str(self.reverse).lower()}"
        )
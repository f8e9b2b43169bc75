"""Label for the tab indicator in the title bar."""

from joshu.textwidth import display_width

_ELLIPSIS = "…"


def tab_label(name: str, curr: int, length: int, width: int) -> str:
    """Return ``"<n>/<total>: <name>"``, eliding the name when it does not fit."""
    position = f"{curr + 1}/{length}"
    if display_width(position) >= width:
        space_avail = 0
    else:
        space_avail = width - len(position)
    shown = name if space_avail >= display_width(name) else _ELLIPSIS
    return f"{position}: {shown}"
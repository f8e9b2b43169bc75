"""Fitting file name and detail labels into a fixed number of columns."""

from __future__ import annotations

from joshu.textwidth import display_width, truncate

MIN_LEFT_LABEL_WIDTH = 15
ELLIPSIS = "…"


def trim_file_label(name: str, drawing_width: int) -> str:
    """Shorten a file name that is wider than ``drawing_width`` columns.

    The extension is kept where possible and the stem is cut with an
    ellipsis; names without a stem or without an extension are cut at the end.
    """
    dot = name.rfind(".")
    if dot == -1:
        stem, extension = name, ""
    else:
        stem, extension = name[:dot], name[dot:]

    if drawing_width < 1:
        return ""
    if not stem or not extension:
        return truncate(stem + extension, drawing_width - 1) + ELLIPSIS

    ext_width = display_width(extension)
    if ext_width > drawing_width:
        truncated_stem = truncate(stem, max(drawing_width - 3, 0))
        return f"{truncated_stem}{ELLIPSIS}.{ELLIPSIS}"
    if ext_width == drawing_width:
        return extension.replace(".", ELLIPSIS, 1)
    truncated_stem = truncate(stem, drawing_width - ext_width - 1)
    return f"{truncated_stem}{ELLIPSIS}{extension}"


def factor_labels_for_entry(
    left_label: str, right_label: str, drawing_width: int
) -> tuple[str, str]:
    """Split ``drawing_width`` columns between a name and its detail label.

    The detail label is dropped when keeping it would shrink the name below
    ``MIN_LEFT_LABEL_WIDTH`` columns.
    """
    left_width = display_width(left_label)
    right_width = display_width(right_label)

    left_width_remainder = drawing_width - right_width
    width_remainder = left_width_remainder - left_width

    if drawing_width == 0:
        return "", ""
    if width_remainder >= 0:
        return left_label, right_label
    if left_width_remainder < MIN_LEFT_LABEL_WIDTH:
        if left_width <= left_width_remainder:
            return trim_file_label(left_label, drawing_width), ""
        return left_label, ""
    return trim_file_label(left_label, left_width_remainder), right_label
"""Line selection helpers for included source snippets."""

from __future__ import annotations

import re

_ANCHOR_START = re.compile(r"ANCHOR:\s*(?P<anchor_name>[\w_-]+)")
_ANCHOR_END = re.compile(r"ANCHOR_END:\s*(?P<anchor_name>[\w_-]+)")


def _lines(text: str) -> list[str]:
    """Split on newlines, dropping a trailing empty line and any carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _in_range(index: int, start: int | None, end: int | None) -> bool:
    lower = 0 if start is None else start
    return index >= lower and (end is None or index < end)


def take_lines(text: str, start: int | None = None, end: int | None = None) -> str:
    """Return lines ``start`` (inclusive) to ``end`` (exclusive), joined by newlines.

    ``None`` leaves that side of the range open.
    """
    lower = 0 if start is None else start
    lines = _lines(text)[lower:]
    if end is not None:
        lines = lines[: max(end - lower, 0)]
    return "\n".join(lines)


def take_anchored_lines(text: str, anchor: str) -> str:
    """Return the lines between ``ANCHOR: anchor`` and ``ANCHOR_END: anchor``.

    Lines holding other anchor markers are left out.
    """
    retained: list[str] = []
    anchor_found = False

    for line in _lines(text):
        if anchor_found:
            end = _ANCHOR_END.search(line)
            if end is not None:
                if end["anchor_name"] == anchor:
                    break
            elif not _ANCHOR_START.search(line):
                retained.append(line)
        else:
            start = _ANCHOR_START.search(line)
            if start is not None and start["anchor_name"] == anchor:
                anchor_found = True

    return "\n".join(retained)


def take_rustdoc_include_lines(
    text: str, start: int | None = None, end: int | None = None
) -> str:
    """Keep lines in the range as they are and prefix every other line with ``# ``."""
    return "\n".join(
        line if _in_range(index, start, end) else f"# {line}"
        for index, line in enumerate(_lines(text))
    )


def take_rustdoc_include_anchored_lines(text: str, anchor: str) -> str:
    """Keep lines between the named anchors as they are and hide the rest with ``# ``."""
    output: list[str] = []
    within_section = False

    for line in _lines(text):
        if within_section:
            end = _ANCHOR_END.search(line)
            if end is not None:
                if end["anchor_name"] == anchor:
                    within_section = False
            elif not _ANCHOR_START.search(line):
                output.append(line)
        else:
            start = _ANCHOR_START.search(line)
            if start is not None:
                if start["anchor_name"] == anchor:
                    within_section = True
            elif not _ANCHOR_END.search(line):
                output.append(f"# {line}")

    return "\n".join(output)
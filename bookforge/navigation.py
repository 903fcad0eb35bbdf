"""Links to the previous and next chapter of the page being rendered."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Mapping

from .fsutil import path_to_root

log = logging.getLogger(__name__)


class Target(Enum):
    """Which neighbour of the current chapter to look for."""

    PREVIOUS = "previous"
    NEXT = "next"

    def find(
        self,
        base_path: str,
        current_path: str,
        current_item: dict[str, str],
        previous_item: dict[str, str],
    ) -> dict[str, str] | None:
        """Return the target chapter if this pair of chapters points to it."""
        if self is Target.NEXT:
            previous_path = previous_item.get("path")
            if previous_path is None:
                raise ValueError("No path found for chapter in JSON data")
            if previous_path == base_path:
                return dict(current_item)
        elif current_path == base_path:
            return dict(previous_item)
        return None


def _chapters(data: Mapping[str, Any]) -> list[dict[str, str]]:
    chapters = data.get("chapters")
    if not isinstance(chapters, list):
        raise ValueError("Could not decode the JSON data")
    for chapter in chapters:
        if not isinstance(chapter, Mapping) or not all(
            isinstance(key, str) and isinstance(value, str)
            for key, value in chapter.items()
        ):
            raise ValueError("Could not decode the JSON data")
    return [dict(chapter) for chapter in chapters]


def _base_path(data: Mapping[str, Any]) -> str:
    path = data.get("path")
    if not isinstance(path, str):
        raise TypeError("Type error for `path`, string expected")
    return path.replace('"', "")


def find_chapter(data: Mapping[str, Any], target: Target) -> dict[str, str] | None:
    """Return the chapter before or after the current page, or ``None``."""
    log.debug("Get data from context")
    chapters = _chapters(data)
    base_path = _base_path(data)

    if "is_index" in data:
        # The index page may be synthetic, so no chapter carries its path.
        if target is Target.PREVIOUS:
            return None
        with_path = [chapter for chapter in chapters if "path" in chapter]
        return dict(with_path[1]) if len(with_path) > 1 else None

    log.debug("Search for chapter")
    previous: dict[str, str] | None = None
    for item in chapters:
        path = item.get("path")
        if not path:
            continue
        if previous is not None:
            found = target.find(base_path, path, item, previous)
            if found is not None:
                return found
        previous = item
    return None


def chapter_link(data: Mapping[str, Any], chapter: Mapping[str, str]) -> dict[str, str]:
    """Return the template values for a link to ``chapter`` from the current page."""
    base_path = _base_path(data)

    name = chapter.get("name")
    if name is None:
        raise ValueError("No title found for chapter in JSON data")
    path = chapter.get("path")
    if path is None:
        raise ValueError("No path found for chapter in JSON data")

    pure = PurePosixPath(path)
    link = str(pure.with_suffix(".html")) if pure.name else path
    return {
        "path_to_root": path_to_root(base_path),
        "title": name,
        "link": link.replace("\\", "/"),
    }


def previous_link(data: Mapping[str, Any]) -> dict[str, str] | None:
    """Return the link values for the previous chapter, or ``None`` on the first page."""
    chapter = find_chapter(data, Target.PREVIOUS)
    return None if chapter is None else chapter_link(data, chapter)


def next_link(data: Mapping[str, Any]) -> dict[str, str] | None:
    """Return the link values for the next chapter, or ``None`` on the last page."""
    chapter = find_chapter(data, Target.NEXT)
    return None if chapter is None else chapter_link(data, chapter)
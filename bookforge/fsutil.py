"""File-system helpers used while rendering books."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path, PurePath
from typing import BinaryIO, Iterable

log = logging.getLogger(__name__)

_SEPARATORS = {sep for sep in (os.sep, os.altsep) if sep}


def normalize_path(path: str) -> str:
    """Replace every platform path separator with a forward slash."""
    return "".join("/" if ch in _SEPARATORS else ch for ch in path)


def create_file(path: os.PathLike | str) -> BinaryIO:
    """Create ``path`` for binary writing, making missing parent directories."""
    path = Path(path)
    log.debug("Creating %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("wb")


def write_file(
    build_dir: os.PathLike | str, filename: os.PathLike | str, content: bytes | str
) -> None:
    """Write ``content`` to ``build_dir / filename``, creating directories as needed."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    with create_file(Path(build_dir) / filename) as handle:
        handle.write(content)


def path_to_root(path: os.PathLike | str) -> str:
    """Return enough ``../`` segments to lead from ``path``'s directory back to its root."""
    parent = PurePath(path).parent
    result = ""
    for part in parent.parts:
        if part == "..":
            if len(result) < 3:
                raise ValueError(f"path {str(path)!r} leads above its root")
            result = result[:-3]
        elif part in (parent.anchor, "."):
            log.debug("Other path component... %r", part)
        else:
            result += "../"
    return result


def remove_dir_content(directory: os.PathLike | str) -> None:
    """Remove everything inside ``directory`` but keep the directory itself."""
    for item in Path(directory).iterdir():
        if item.is_dir() and not item.is_symlink():
            shutil.rmtree(item)
        else:
            item.unlink()


def copy_files_except_ext(
    source: os.PathLike | str,
    target: os.PathLike | str,
    recursive: bool,
    avoid_dir: os.PathLike | str | None,
    ext_blacklist: Iterable[str],
) -> None:
    """Copy files from ``source`` to ``target``, skipping blacklisted extensions.

    Subdirectories are copied when ``recursive`` is set, except ``target``
    itself and ``avoid_dir``.
    """
    source = Path(source)
    target = Path(target)
    avoid = Path(avoid_dir) if avoid_dir is not None else None
    blacklist = set(ext_blacklist)
    log.debug(
        "Copying all files from %s to %s (blacklist: %r), avoiding %r",
        source,
        target,
        sorted(blacklist),
        avoid,
    )

    if source == target:
        return

    for entry in source.iterdir():
        if entry.is_dir() and recursive:
            if entry == target or entry == avoid:
                continue
            destination = target / entry.name
            if not destination.exists():
                destination.mkdir()
            copy_files_except_ext(entry, destination, True, avoid, blacklist)
        elif entry.is_file():
            if entry.suffix and entry.suffix[1:] in blacklist:
                continue
            destination = target / entry.name
            log.debug("Copying %s to %s", entry, destination)
            shutil.copy(entry, destination)


def get_404_output_file(input_404: str | None) -> str:
    """Return the HTML file name for the configured 404 page source."""
    name = "404.md" if input_404 is None else input_404
    return name.replace(".md", ".html")
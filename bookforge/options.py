"""Theme and language menu entries for the page template."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any, Mapping


def theme_option(name: str, default_theme: str) -> str:
    """Return the label of a theme menu entry, marking the default theme."""
    if not isinstance(name, str):
        raise TypeError("Param 0 with String type is required for theme_option helper.")
    if not isinstance(default_theme, str):
        raise TypeError("Type error for `default_theme`, string expected")
    if name.lower() == default_theme.lower():
        return f"{name} (default)"
    return name


def _with_html_extension(path: str) -> str:
    pure = PurePosixPath(path)
    if not pure.name:
        return path
    return str(pure.with_suffix(".html"))


def language_option(identifier: str, data: Mapping[str, Any]) -> str:
    """Return the menu link that switches the current page to another language.

    ``data`` holds the page's ``path``, ``path_to_root`` and the
    ``language_config`` mapping of identifiers to language settings.
    """
    if not isinstance(identifier, str):
        raise TypeError(
            "Param 0 with String type is required for language_option helper."
        )

    languages = data.get("language_config")
    if not isinstance(languages, Mapping):
        raise ValueError("Could not decode the JSON data")

    current_path = data.get("path")
    if not isinstance(current_path, str):
        raise TypeError("Type error for `path`, string expected")
    rendered_path = _with_html_extension(current_path.replace('"', ""))

    path_to_root = data.get("path_to_root")
    if not isinstance(path_to_root, str):
        raise TypeError("Type error for `path_to_root`, string expected")

    language = languages.get(identifier)
    if language is None:
        raise ValueError(f"Unknown language identifier '{identifier}'")
    if not isinstance(language, Mapping) or not isinstance(language.get("name"), str):
        raise ValueError("Could not decode the JSON data")

    href = f"{path_to_root}../{identifier}/{rendered_path}"
    return (
        f'<a href="{href}"><button role="menuitem" class="language" id="light">'
        f"{language['name']}</button></a>"
    )
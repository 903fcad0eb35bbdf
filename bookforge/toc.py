"""Table of contents for the page sidebar."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, Mapping

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from .fsutil import path_to_root

_NAME_PARSER = MarkdownIt("commonmark")


def _li_open_tag(is_expanded: bool, is_affix: bool) -> str:
    classes = "chapter-item "
    if is_expanded:
        classes += "expanded "
    if is_affix:
        classes += "affix "
    return f'<li class="{classes}">'


def _escape_angles(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _render_name(name: str) -> str:
    """Render a chapter name keeping only its text, inline code and raw HTML."""
    parts: list[str] = []
    for token in _NAME_PARSER.parse(name):
        if token.type == "inline":
            for child in token.children or []:
                if child.type in ("text", "text_special"):
                    parts.append(escapeHtml(child.content))
                elif child.type == "code_inline":
                    parts.append(f"<code>{escapeHtml(child.content)}</code>")
                elif child.type == "html_inline":
                    parts.append(child.content)
        elif token.type in ("code_block", "fence"):
            parts.append(escapeHtml(token.content))
        elif token.type == "html_block":
            parts.append(token.content)
    return "".join(parts)


def _chapters(data: Mapping[str, Any]) -> list[dict[str, str]]:
    chapters = data.get("chapters")
    if not isinstance(chapters, list) or not all(
        isinstance(chapter, Mapping)
        and all(isinstance(k, str) and isinstance(v, str) for k, v in chapter.items())
        for chapter in chapters
    ):
        raise ValueError("Could not decode the JSON data")
    return [dict(chapter) for chapter in chapters]


@dataclass(frozen=True)
class TocRenderer:
    """Renders the chapter list as nested ordered lists."""

    no_section_label: bool = False

    def render(self, data: Mapping[str, Any]) -> str:
        """Return the table of contents HTML for the page described by ``data``."""
        chapters = _chapters(data)

        path = data.get("path")
        if not isinstance(path, str):
            raise TypeError("Type error for `path`, string expected")
        current_path = path.replace('"', "")

        section_value = data.get("section")
        current_section = section_value if isinstance(section_value, str) else ""

        fold_enable = data.get("fold_enable")
        if not isinstance(fold_enable, bool):
            raise TypeError("Type error for `fold_enable`, bool expected")

        fold_level = data.get("fold_level")
        if isinstance(fold_level, bool) or not isinstance(fold_level, int) or fold_level < 0:
            raise TypeError("Type error for `fold_level`, u64 expected")

        out: list[str] = ['<ol class="chapter">']
        current_level = 1

        for item in chapters:
            if "spacer" in item:
                out.append('<li class="spacer"></li>')
                continue

            section = item.get("section", "")
            level = section.count(".") if "section" in item else 1

            if not fold_enable or (section and current_section.startswith(section)):
                is_expanded = True
            else:
                is_expanded = level - 1 < fold_level

            if level > current_level:
                while level > current_level:
                    out.append('<li><ol class="section">')
                    current_level += 1
                out.append(_li_open_tag(is_expanded, False))
            elif level < current_level:
                while level < current_level:
                    out.append("</ol></li>")
                    current_level -= 1
                out.append(_li_open_tag(is_expanded, False))
            else:
                out.append(_li_open_tag(is_expanded, "section" not in item))

            if "part" in item:
                out.append(f'<li class="part-title">{_escape_angles(item["part"])}</li>')
                continue

            link_path = item.get("path")
            if link_path:
                pure = PurePosixPath(link_path)
                target = str(pure.with_suffix(".html")) if pure.name else link_path
                target = target.replace("\\", "/")
                active = ' class="active"' if link_path == current_path else ""
                out.append(f'<a href="{path_to_root(current_path)}{target}"{active}>')
            else:
                out.append("<div>")

            if not self.no_section_label and "section" in item:
                out.append(f'<strong aria-hidden="true">{item["section"]}</strong> ')

            name = item.get("name")
            if name is not None:
                out.append(_escape_angles(_render_name(name)))

            out.append("</a>" if link_path else "</div>")

            if fold_enable and item.get("has_sub_items") == "true":
                out.append('<a class="toggle"><div>❱</div></a>')
            out.append("</li>")

        while current_level > 1:
            out.append("</ol></li>")
            current_level -= 1

        out.append("</ol>")
        return "".join(out)
"""Markdown rendering with link fixing, heading ids and code-block cleanup."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Any, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .fsutil import path_to_root

log = logging.getLogger(__name__)

_SCHEME_LINK = re.compile(r"^[a-z][a-z0-9+.-]*:")
_MD_LINK = re.compile(r"(?P<link>.*)\.md(?P<anchor>#.*)?")
_WHITESPACE_RUN = re.compile(r"\s\s+")
_HTML_TAG = re.compile(r"(<.*?>)")
_HTML_LINK = re.compile(r'(<(?:a|img) [^>]*?(?:src|href)=")([^"]+?)"')
_TASK_MARKER = re.compile(r"^\[([ xX])\]\s+")
_ENTITIES = ("&lt;", "&gt;", "&amp;", "&#39;", "&quot;")


@dataclass
class RenderMarkdownContext:
    """Where the page being rendered lives, used to fix up its links.

    ``path`` is the page relative to its language directory, ``src_dir`` the
    source directory shared by all languages. ``language`` and
    ``fallback_language`` are set only for multilingual books.
    """

    path: PurePath
    src_dir: Path
    language: str | None = None
    fallback_language: str | None = None
    prepend_parent: bool = False

    def __post_init__(self) -> None:
        self.path = PurePath(self.path)
        self.src_dir = Path(self.src_dir)


def collapse_whitespace(text: str) -> str:
    """Replace runs of two or more whitespace characters with one space."""
    return _WHITESPACE_RUN.sub(" ", text)


def normalize_id(content: str) -> str:
    """Turn ``content`` into an HTML element id without any whitespace."""
    chars = []
    for ch in content:
        if ch.isalnum() or ch in "_-":
            chars.append(ch.lower() if ch.isascii() else ch)
        elif ch.isspace():
            chars.append("-")
    return "".join(chars)


def id_from_content(content: str) -> str:
    """Derive an anchor id from heading text, ignoring tags and entities."""
    content = _HTML_TAG.sub("", content)
    for entity in _ENTITIES:
        content = content.replace(entity, "")
    trimmed = content.strip().lstrip("#").strip()
    return normalize_id(trimmed)


def _path_str(path: PurePath) -> str:
    text = str(path)
    return "" if text == "." else text


def _fallback_prefix(
    base: PurePath, dest: str, src_dir: Path, language: str, fallback_language: str
) -> str:
    """Return the prefix that redirects ``dest`` to the fallback language, if needed."""
    path_on_disk = src_dir / language / base / dest
    log.debug("Checking if %s exists", path_on_disk)
    if path_on_disk.exists():
        return ""

    fallback_path = src_dir / fallback_language / base / dest
    log.debug("Not found, checking if fallback %s exists", fallback_path)
    if not fallback_path.exists():
        return ""

    prefix = path_to_root(base / dest) + f"../{fallback_language}/"
    log.debug("Rewriting link to be under fallback: %s", prefix)
    return prefix


def fix_link(dest: str, ctx: RenderMarkdownContext | None = None) -> str:
    """Adjust a link target: ``.md`` becomes ``.html`` and relative links are fixed."""
    if dest.startswith("#"):
        if ctx is not None and ctx.prepend_parent:
            base = str(ctx.path)
            if base.endswith(".md"):
                base = base[:-3] + ".html"
            return base + dest
        return dest

    if _SCHEME_LINK.match(dest):
        return dest

    fixed = ""
    if ctx is not None:
        base = ctx.path.parent
        if ctx.language is not None and ctx.fallback_language is not None:
            fixed = _fallback_prefix(
                base, dest, ctx.src_dir, ctx.language, ctx.fallback_language
            )
        if ctx.prepend_parent:
            base_text = _path_str(base)
            if base_text:
                fixed += f"{base_text}/"

    match = _MD_LINK.search(dest)
    if match is not None:
        fixed += match["link"] + ".html" + (match["anchor"] or "")
    else:
        fixed += dest

    log.debug("Fixed link: %r, %r => %r", dest, ctx, fixed)
    return fixed


def fix_html(html: str, ctx: RenderMarkdownContext | None = None) -> str:
    """Fix the ``href`` and ``src`` attributes of ``<a>`` and ``<img>`` tags in raw HTML."""
    return _HTML_LINK.sub(
        lambda m: f'{m[1]}{fix_link(m[2], ctx)}"',
        html,
    )


def _inline_children(state: Any) -> Iterator[Token]:
    for token in state.tokens:
        if token.type == "inline" and token.children:
            yield from token.children


def _smart_punctuation(state: Any) -> None:
    for child in _inline_children(state):
        if child.type == "text":
            child.content = (
                child.content.replace("---", "\u2014")
                .replace("--", "\u2013")
                .replace("...", "\u2026")
            )


def _task_lists(state: Any) -> None:
    tokens = state.tokens
    for item, _paragraph, inline in zip(tokens, tokens[1:], tokens[2:]):
        if item.type != "list_item_open" or inline.type != "inline":
            continue
        children = inline.children or []
        if not children or children[0].type != "text":
            continue
        first = children[0]
        marker = _TASK_MARKER.match(first.content)
        if marker is None:
            continue
        checked = ' checked=""' if marker[1] in "xX" else ""
        first.content = first.content[marker.end():]
        checkbox = Token(
            "html_inline",
            "",
            0,
            content=f'<input disabled="" type="checkbox"{checked}/>\n',
        )
        inline.children = [checkbox, *children]
        inline.content = inline.content[marker.end():]


def _clean_codeblock_headers(state: Any) -> None:
    for token in state.tokens:
        if token.type == "fence" and token.info:
            token.info = "".join(
                "," if ch in " \t" else ch
                for ch in token.info.strip()
                if ch in " \t" or not ch.isspace()
            )


def _strikethrough_tags(state: Any) -> None:
    for child in _inline_children(state):
        if child.type in ("s_open", "s_close"):
            child.tag = "del"


def new_parser(curly_quotes: bool) -> MarkdownIt:
    """Create a parser with tables, strikethrough and task lists enabled.

    With ``curly_quotes`` quotes, dashes and ellipses become typographic.
    """
    md = MarkdownIt(
        "commonmark",
        {"typographer": curly_quotes, "quotes": "\u201c\u201d\u2018\u2019"},
    )
    md.enable(["table", "strikethrough"])
    if curly_quotes:
        md.enable("smartquotes")
        md.core.ruler.push("smart_punctuation", _smart_punctuation)
    md.core.ruler.push("task_lists", _task_lists)
    md.core.ruler.push("clean_codeblock_headers", _clean_codeblock_headers)
    md.core.ruler.push("strikethrough_tags", _strikethrough_tags)
    return md


def _walk(tokens: list[Token]) -> Iterator[Token]:
    for token in tokens:
        yield token
        if token.children:
            yield from _walk(token.children)


def _adjust_links(tokens: list[Token], ctx: RenderMarkdownContext | None) -> None:
    for token in _walk(tokens):
        if token.type == "link_open":
            href = token.attrGet("href")
            if href is not None:
                token.attrSet("href", fix_link(str(href), ctx))
        elif token.type == "image":
            src = token.attrGet("src")
            if src is not None:
                token.attrSet("src", fix_link(str(src), ctx))
        elif token.type in ("html_block", "html_inline"):
            token.content = fix_html(token.content, ctx)


def render_markdown_with_path(
    text: str, curly_quotes: bool, ctx: RenderMarkdownContext | None = None
) -> str:
    """Render Markdown to HTML, fixing links relative to ``ctx``."""
    md = new_parser(curly_quotes)
    env: dict = {}
    tokens = md.parse(text, env)
    _adjust_links(tokens, ctx)
    return md.renderer.render(tokens, md.options, env)


def render_markdown(text: str, curly_quotes: bool) -> str:
    """Render Markdown to HTML."""
    return render_markdown_with_path(text, curly_quotes, None)


def log_error_chain(error: BaseException) -> None:
    """Log ``error`` followed by each exception that caused it."""
    log.error("Error: %s", error)
    seen = {id(error)}
    cause = error.__cause__ or error.__context__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        log.error("\tCaused By: %s", cause)
        cause = cause.__cause__ or cause.__context__
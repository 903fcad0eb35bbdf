"""Post-processing of rendered HTML: heading anchors and code-block classes."""

from __future__ import annotations

import re

from .markdown import id_from_content

_HEADER = re.compile(r"<h(\d)>(.*?)</h\d>")
_CODE_CLASS = re.compile(r'<code([^>]+)class="([^"]+)"([^>]*)>')


def insert_link_into_header(level: int, content: str, id_counter: dict[str, int]) -> str:
    """Wrap a heading's ``content`` in a self-link with a unique id.

    ``id_counter`` records how often each id has been used; repeated ids get
    a numeric suffix.
    """
    raw_id = id_from_content(content)
    count = id_counter.get(raw_id, 0)
    anchor = raw_id if count == 0 else f"{raw_id}-{count}"
    id_counter[raw_id] = count + 1
    return (
        f'<h{level} id="{anchor}"><a class="header" href="#{anchor}">'
        f"{content}</a></h{level}>"
    )


def build_header_links(html: str) -> str:
    """Give every plain heading tag in ``html`` an id and a link to itself."""
    id_counter: dict[str, int] = {}
    return _HEADER.sub(
        lambda m: insert_link_into_header(int(m[1]), m[2], id_counter),
        html,
    )


def fix_code_blocks(html: str) -> str:
    """Turn comma-separated code-block classes into space-separated ones."""
    return _CODE_CLASS.sub(
        lambda m: f'<code{m[1]}class="{m[2].replace(",", " ")}"{m[3]}>',
        html,
    )
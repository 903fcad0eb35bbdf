# bookforge

Building blocks for turning a Markdown book into HTML pages.

bookforge is a library with no command-line tool. It provides these modules:

- `bookforge.markdown`: renders Markdown to HTML with tables, strikethrough
  and task lists (`render_markdown`, `render_markdown_with_path`). It rewrites
  `.md` links to `.html`. Given a `RenderMarkdownContext`, it also fixes
  relative links, and in a translated book it points a link at the fallback
  language when the page is missing from the translation. With
  `curly_quotes=True`, quotes, dashes and ellipses become typographic. The
  module also builds anchor ids (`normalize_id`, `id_from_content`) and
  collapses whitespace (`collapse_whitespace`).
- `bookforge.headers`: gives every `<h1>`…`<h6>` tag a unique id and a link
  to itself (`build_header_links`). It also turns comma-separated code block
  classes into space-separated ones (`fix_code_blocks`).
- `bookforge.toc`: `TocRenderer` builds the sidebar table of contents, as
  nested ordered lists, from the page data. It supports folding and an
  optional section label.
- `bookforge.navigation`: finds the previous and next chapter of a page
  (`find_chapter`, `previous_link`, `next_link`). The link functions return
  the values `title`, `link` and `path_to_root`.
- `bookforge.options`: returns the text of a theme menu entry
  (`theme_option`) and builds a language switch link (`language_option`).
- `bookforge.strings`: picks line ranges or anchored sections out of included
  source files (`take_lines`, `take_anchored_lines`). The rustdoc variants
  (`take_rustdoc_include_lines`, `take_rustdoc_include_anchored_lines`) keep
  every line and prefix the ones outside the selection with `# `.
- `bookforge.tomlpath`: reads, inserts and deletes values in nested
  dictionaries using dotted keys (`read`, `insert`, `delete`).
- `bookforge.fsutil`: helpers for the output tree (`write_file`,
  `create_file`, `path_to_root`, `remove_dir_content`,
  `copy_files_except_ext`, `normalize_path`, `get_404_output_file`).

## Install

```
pip install bookforge
```

## Examples

Render a chapter, then add heading anchors:

```python
from bookforge.markdown import render_markdown
from bookforge.headers import build_header_links

html = render_markdown("# Intro\n\nSee [the next page](next.md).", curly_quotes=True)
html = build_header_links(html)
# <h1 id="intro"><a class="header" href="#intro">Intro</a></h1> ...
# the link now points at next.html
```

Find the neighbours of the current page:

```python
from bookforge.navigation import next_link

data = {
    "path": "one.md",
    "chapters": [
        {"name": "One", "path": "one.md"},
        {"name": "Two", "path": "two.md"},
    ],
}
assert next_link(data) == {"path_to_root": "", "title": "Two", "link": "two.html"}
```

Pick part of a source file by its anchor comments:

```python
from bookforge.strings import take_anchored_lines

source = "a\nANCHOR: demo\nb\nc\nANCHOR_END: demo\nd"
assert take_anchored_lines(source, "demo") == "b\nc"
```

Read a nested configuration value with a dotted key:

```python
from bookforge.tomlpath import read

config = {"output": {"html": {"optional": True}}}
assert read(config, "output.html.optional") is True
```

## What it does not do

bookforge gives you the parts of a renderer, not a whole one. It has no
page templates and no command-line tool, and it does not build a complete
site from a book. It does not wrap code blocks for a runnable playground,
does not build a search index, and does not pass books to external renderer
programs. You assemble pages yourself from the pieces above.

## Running the tests

```
pip install bookforge[test]
pytest
```
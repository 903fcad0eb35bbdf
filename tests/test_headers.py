import pytest

from bookforge.headers import build_header_links, fix_code_blocks, insert_link_into_header


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        (
            "blah blah <h1>Foo</h1>",
            'blah blah <h1 id="foo"><a class="header" href="#foo">Foo</a></h1>',
        ),
        (
            "<h1>Foo</h1>",
            '<h1 id="foo"><a class="header" href="#foo">Foo</a></h1>',
        ),
        (
            "<h3>Foo^bar</h3>",
            '<h3 id="foobar"><a class="header" href="#foobar">Foo^bar</a></h3>',
        ),
        (
            "<h4></h4>",
            '<h4 id=""><a class="header" href="#"></a></h4>',
        ),
        (
            "<h4><em>Hï</em></h4>",
            '<h4 id="hï"><a class="header" href="#hï"><em>Hï</em></a></h4>',
        ),
        (
            "<h1>Foo</h1><h3>Foo</h3>",
            '<h1 id="foo"><a class="header" href="#foo">Foo</a></h1>'
            '<h3 id="foo-1"><a class="header" href="#foo-1">Foo</a></h3>',
        ),
    ],
)
def test_original_build_header_links(src, expected):
    assert build_header_links(src) == expected


def test_counter_is_fresh_per_call():
    first = build_header_links("<h1>Foo</h1>")
    second = build_header_links("<h1>Foo</h1>")
    assert first == second


def test_insert_link_into_header_counts_ids():
    counter: dict[str, int] = {}
    first = insert_link_into_header(2, "Foo", counter)
    second = insert_link_into_header(2, "Foo", counter)
    assert first == '<h2 id="foo"><a class="header" href="#foo">Foo</a></h2>'
    assert second == '<h2 id="foo-1"><a class="header" href="#foo-1">Foo</a></h2>'
    assert counter == {"foo": 2}


def test_fix_code_blocks_replaces_commas():
    html = '<pre><code class="language-rust,no_run,should_panic,property_3"></code></pre>'
    assert fix_code_blocks(html) == (
        '<pre><code class="language-rust no_run should_panic property_3"></code></pre>'
    )


def test_fix_code_blocks_leaves_classless_code_alone():
    html = "<p><code>a,b</code></p>"
    assert fix_code_blocks(html) == html


def test_fix_code_blocks_keeps_other_attributes():
    html = '<code id="x" class="a,b" data-y="1">'
    assert fix_code_blocks(html) == '<code id="x" class="a b" data-y="1">'
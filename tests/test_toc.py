import pytest

from bookforge.toc import TocRenderer


def _data(chapters, path="intro.md", fold_enable=False, fold_level=0, **extra):
    data = {
        "chapters": chapters,
        "path": path,
        "fold_enable": fold_enable,
        "fold_level": fold_level,
    }
    data.update(extra)
    return data


CHAPTERS = [
    {"name": "Intro", "path": "intro.md", "has_sub_items": "false"},
    {"section": "1.", "name": "First", "path": "first.md", "has_sub_items": "true"},
    {"section": "1.1.", "name": "Nested", "path": "first/nested.md", "has_sub_items": "false"},
    {"spacer": "_spacer_"},
    {"section": "2.", "name": "Second", "path": "second.md", "has_sub_items": "false"},
]


def test_wrapped_in_chapter_list():
    html = TocRenderer().render(_data(CHAPTERS))
    assert html.startswith('<ol class="chapter">')
    assert html.endswith("</ol>")


def test_nested_lists_are_balanced():
    html = TocRenderer().render(_data(CHAPTERS))
    assert html.count("<ol") == html.count("</ol>")
    assert html.count('<ol class="section">') == 1


def test_current_page_is_active():
    html = TocRenderer().render(_data(CHAPTERS, path="second.md"))
    assert 'href="second.html" class="active"' in html
    assert html.count('class="active"') == 1


def test_links_are_relative_to_current_page():
    html = TocRenderer().render(_data(CHAPTERS, path="first/nested.md"))
    assert 'href="../first/nested.html"' in html


def test_spacer_rendered():
    html = TocRenderer().render(_data(CHAPTERS))
    assert '<li class="spacer"></li>' in html


def test_section_labels_can_be_hidden():
    with_labels = TocRenderer().render(_data(CHAPTERS))
    without = TocRenderer(no_section_label=True).render(_data(CHAPTERS))
    assert '<strong aria-hidden="true">1.1.</strong>' in with_labels
    assert "<strong" not in without


def test_toggle_only_when_folding():
    folded = TocRenderer().render(_data(CHAPTERS, fold_enable=True))
    unfolded = TocRenderer().render(_data(CHAPTERS, fold_enable=False))
    assert folded.count('<a class="toggle">') == 1
    assert '<a class="toggle">' not in unfolded


def test_folding_collapses_deep_levels_outside_current_section():
    chapters = [
        {"section": "1.", "name": "A", "path": "a.md"},
        {"section": "1.1.", "name": "B", "path": "b.md"},
    ]
    unfolded = TocRenderer().render(_data(chapters))
    folded = TocRenderer().render(_data(chapters, fold_enable=True, fold_level=0))
    current = TocRenderer().render(
        _data(chapters, fold_enable=True, fold_level=0, section="1.1.")
    )
    assert unfolded.count("expanded") == 2
    assert folded.count("expanded") == 0
    assert current.count("expanded") == 2


def test_unnumbered_chapter_is_affix():
    html = TocRenderer().render(_data([{"name": "Intro", "path": "intro.md"}]))
    assert "affix" in html


def test_part_title_escaped():
    html = TocRenderer().render(_data([{"part": "A<B>"}]))
    assert '<li class="part-title">A&lt;B&gt;</li>' in html


def test_name_angle_brackets_escaped():
    html = TocRenderer().render(_data([{"name": "x `<y>`", "path": "a.md"}]))
    assert "<y>" not in html
    assert "&lt;" in html


def test_chapter_without_path_uses_div():
    html = TocRenderer().render(_data([{"section": "1.", "name": "Draft", "path": ""}]))
    assert "<div>" in html
    assert "<a href" not in html


def test_fold_enable_must_be_bool():
    with pytest.raises(TypeError, match="fold_enable"):
        TocRenderer().render(_data(CHAPTERS, fold_enable="yes"))


def test_fold_level_must_be_unsigned():
    with pytest.raises(TypeError, match="fold_level"):
        TocRenderer().render(_data(CHAPTERS, fold_level=-1))


def test_path_must_be_string():
    with pytest.raises(TypeError, match="path"):
        TocRenderer().render(_data(CHAPTERS, path=None))


def test_bad_chapters():
    with pytest.raises(ValueError, match="Could not decode"):
        TocRenderer().render(_data([{"name": 1}]))
import pytest

from services.sanitizer_service import sanitize_html


def test_removes_script_event_handler_and_javascript_href():
    html = (
        '<p>Intro</p>'
        '<script>alert(1)</script>'
        '<a href="javascript:evil()" onclick="evil()">Click</a>'
    )
    cleaned = sanitize_html(html)

    assert "<p>Intro</p>" in cleaned
    assert "<script" not in cleaned
    assert "alert(1)" not in cleaned
    assert "onclick" not in cleaned
    assert "javascript:" not in cleaned
    assert cleaned == '<p>Intro</p><a href="#">Click</a>'


def test_removes_style_blocks_across_lines():
    html = "<STYLE type='text/css'>\nbody { display: none }\n</STYLE><p>Visible</p>"
    assert sanitize_html(html) == "<p>Visible</p>"


def test_single_quoted_attributes():
    html = "<img src='javascript:void(0)' onerror='steal()'>"
    assert sanitize_html(html) == "<img src='#'>"


def test_javascript_scheme_is_case_insensitive():
    assert sanitize_html('<a HREF = "JavaScript:x()">x</a>') == '<a HREF="#">x</a>'


def test_benign_markup_untouched():
    html = '<p class="lead">Price band <a href="https://example.com">here</a></p>'
    assert sanitize_html(html) == html


@pytest.mark.parametrize("value", [None, ""])
def test_empty_input(value):
    assert sanitize_html(value) == ""


def test_reassembled_script_removed():
    html = "<scr<script></script>ipt>alert(1)</script><p>ok</p>"
    assert sanitize_html(html) == "<p>ok</p>"


@pytest.mark.parametrize("html", [
    '<div onmouseover="x()"><script>1</script><a href=\'javascript:y\'>a</a></div>',
    "<scr<script></script>ipt>alert(1)</script>",
    "<p>plain</p>",
    '<a href="javascript:a" onclick=\'b\'>',
])
def test_idempotent(html):
    once = sanitize_html(html)
    assert sanitize_html(once) == once

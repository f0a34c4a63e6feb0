"""
Unit tests for helper functions used by templates and forms.
"""

from utils.helpers import clamp_level, form_bool, parse_bool, render_paragraphs


class TestRenderParagraphs:
    """Section text rendering."""

    def test_blank_lines_become_paragraphs(self):
        html = render_paragraphs('first\n\nsecond\nline')

        assert str(html) == '<p>first</p><p>second<br>\nline</p>'

    def test_html_is_escaped(self):
        html = render_paragraphs('<script>alert(1)</script>')

        assert '<script>' not in str(html)
        assert '&lt;script&gt;' in str(html)

    def test_empty_text(self):
        assert str(render_paragraphs('')) == ''
        assert str(render_paragraphs(None)) == ''


class TestClampLevel:
    """Skill level parsing from form input."""

    def test_clamps_to_range(self):
        assert clamp_level('150') == 100
        assert clamp_level('-5') == 0
        assert clamp_level(' 42 ') == 42

    def test_invalid_value_uses_default(self, app_context):
        assert clamp_level('abc') == 50
        assert clamp_level(None, default=10) == 10


def test_form_bool():
    assert form_bool({'flag': 'on'}, 'flag') is True
    assert form_bool({}, 'flag') is False


def test_parse_bool():
    assert parse_bool(' TRUE ') is True
    assert parse_bool(True) is True
    assert parse_bool('false') is False
    assert parse_bool('0') is False
    assert parse_bool(None) is False
    assert parse_bool(False) is False

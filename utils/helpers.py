"""
Helpers Module - Form parsing and text rendering utilities
"""

import re
from flask import current_app
from markupsafe import Markup, escape


def render_paragraphs(text: str) -> Markup:
    """Render narrative text as escaped HTML paragraphs.

    - Normalizes newlines and collapses runs of blank lines
    - Escapes HTML-sensitive characters
    - Blank-line separated blocks become <p> elements, single newlines become <br>
    """
    if not text:
        return Markup('')

    txt = text.replace('\r\n', '\n').replace('\r', '\n').strip()
    paragraphs = [p.strip() for p in re.split(r'\n\s*\n', txt) if p.strip()]
    wrapped = []
    for paragraph in paragraphs:
        lines = [escape(line) for line in paragraph.split('\n')]
        wrapped.append(Markup('<p>') + Markup('<br>\n').join(lines) + Markup('</p>'))
    return Markup('').join(wrapped)


def clamp_level(value, default=50):
    """Parse a skill level from a form field and clamp it to 0-100"""
    try:
        level = int(str(value).strip())
    except (TypeError, ValueError):
        current_app.logger.warning(f"Invalid skill level {value!r}, using {default}")
        return default
    return max(0, min(100, level))


TRUTHY_VALUES = ('on', 'true', '1', 'yes')


def parse_bool(value):
    """Boolean from a bool or a form-style string ('on', 'true', '1', 'yes')"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_VALUES


def form_bool(form, field):
    """Checkbox value from a submitted form"""
    return parse_bool(form.get(field))


__all__ = [
    'render_paragraphs',
    'clamp_level',
    'parse_bool',
    'form_bool',
]

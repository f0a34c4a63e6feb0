"""
Skill Icons - Fixed mapping from symbolic icon names to the icon slugs
rendered by the templates (``<i data-lucide="...">``).
"""

FALLBACK_ICON = 'code'

SKILL_ICONS = {
    'Figma': 'figma',
    'PenTool': 'pen-tool',
    'ImageIcon': 'image',
    'Layout': 'layout',
    'Globe': 'globe',
    'FileCode': 'file-code',
    'Code': 'code',
    'GitBranch': 'git-branch',
    'Palette': 'palette',
    'Database': 'database',
    'Server': 'server',
    'Terminal': 'terminal',
    'Smartphone': 'smartphone',
    'Camera': 'camera',
}


def resolve_icon(name):
    """Return the icon slug for a symbolic name, or the fallback icon"""
    return SKILL_ICONS.get(name, FALLBACK_ICON)


def icon_choices():
    """Symbolic names offered by the About page skill form"""
    return sorted(SKILL_ICONS)


__all__ = ['FALLBACK_ICON', 'SKILL_ICONS', 'resolve_icon', 'icon_choices']

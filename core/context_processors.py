"""
Context processors for sectionnav.

Exposes the rendered section navigation to templates so the menu can be
rendered from a single source of truth.
"""

from sectionnav.navigation import render, resolve_active_id
from sectionnav.sources import load_sections


def navigation(request):
    """
    Add navigation data to the template context.

    Returns a dictionary with a ``section_navigation`` key containing a tuple
    of ``NavItem`` values, with the section matching ``request.path`` marked
    active.
    """
    sections = load_sections()
    active_id = resolve_active_id(sections, getattr(request, "path", ""))
    return {
        "section_navigation": render(sections, active_id),
    }

from collections.abc import Mapping

from django import template
from django.conf import settings

from sectionnav.navigation import render, resolve_active_id

register = template.Library()

_FROM_REQUEST = object()


def _selected_class_name():
    return getattr(settings, "SECTIONNAV_SELECTED_CLASS", "selected") or "selected"


@register.inclusion_tag("sectionnav/navigation.html", takes_context=True)
def section_nav(context, sections, active_id=_FROM_REQUEST):
    """
    Render ``sections`` as a ``<nav><ul>`` list.

    Usage:
      {% section_nav sections %}            active section taken from request.path
      {% section_nav sections page.id %}    active section given explicitly

    The active ``<li>`` gets the ``SECTIONNAV_SELECTED_CLASS`` class (default
    "selected") and its link gets ``aria-current="page"``.
    """
    sections = tuple(sections or ())
    if active_id is _FROM_REQUEST:
        request = context.get("request")
        path = getattr(request, "path", "") if request is not None else ""
        active_id = resolve_active_id(sections, path) if path else None
    elif active_id == "":
        # An unresolved template variable arrives as string_if_invalid
        active_id = None

    return {
        "items": render(sections, active_id),
        "selected_class": _selected_class_name(),
    }


@register.simple_tag
def selected_class(item):
    """Return the selected class name when ``item`` is active, "" otherwise."""
    if isinstance(item, Mapping):
        is_active = item.get("is_active", False)
    else:
        is_active = getattr(item, "is_active", False)
    if is_active:
        return _selected_class_name()
    return ""

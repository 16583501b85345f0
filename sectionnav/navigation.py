"""
Navigation rendering for an ordered list of sections.

A section is a navigable content unit (a page of the site) with a title and a
url. ``render()`` turns the sections supplied by a content source, plus the id
of the section currently being viewed, into a tuple of ``NavItem`` values that
templates can loop over. The active section is passed in explicitly; use
``resolve_active_id()`` to derive it from a request path.

Usage::

    from sectionnav.navigation import Section, render

    items = render(
        [Section(id=1, title="Home", url="/"), Section(id=2, title="About", url="/about")],
        active_id=2,
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass


def _blank_if_none(value):
    return "" if value is None else value


@dataclass(frozen=True)
class Section:
    """A single navigable section."""
    id: object
    title: str = ""
    url: str = ""

    @classmethod
    def from_mapping(cls, data):
        """Build a section from a dict-like record, passing blanks through as ``""``."""
        return cls(
            id=data.get("id"),
            title=_blank_if_none(data.get("title")),
            url=_blank_if_none(data.get("url")),
        )


@dataclass(frozen=True)
class NavItem:
    """A rendered navigation entry: a section paired with its active flag."""
    section: Section
    is_active: bool = False

    @property
    def id(self):
        return self.section.id

    @property
    def title(self):
        return self.section.title

    @property
    def url(self):
        return self.section.url

    def as_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "is_active": self.is_active,
        }


def _as_section(value):
    if isinstance(value, Section):
        return value
    if isinstance(value, Mapping):
        return Section.from_mapping(value)
    raise TypeError(f"Expected a Section or a mapping, got {type(value).__name__}")


def render(sections, active_id=None):
    """
    Return one ``NavItem`` per section, in input order.

    An item is active when its section id equals ``active_id``. Every section
    sharing that id is marked, and ``active_id=None`` marks nothing.
    """
    items = []
    for section in sections:
        section = _as_section(section)
        is_active = active_id is not None and section.id == active_id
        items.append(NavItem(section=section, is_active=is_active))
    return tuple(items)


def build_navigation(sections, active_id=None):
    """
    Return the rendered navigation as plain dictionaries,
    suitable for serializing or passing to templates.
    """
    return tuple(item.as_dict() for item in render(sections, active_id))


def path_matches(path, base):
    """
    Return True when the request ``path`` belongs to the section url ``base``.

    Matching behaviour:
      - "/" only matches the site root, otherwise it would match every page.
      - A url ending with a slash ("/foo/") matches any path that starts with it.
      - A url without a trailing slash ("/foo") matches either exact equality or
        a prefix followed by "/" (to avoid false positives like "/foo-old/").
    """
    if not base:
        return False
    path = path or ""
    if base == "/":
        return path == "/"
    if base.endswith("/"):
        return path.startswith(base)
    return path == base or path.startswith(base + "/")


def resolve_active_id(sections, path):
    """
    Return the id of the section whose url best matches ``path``, or None.

    The longest matching url wins so "/shop/shoes/" beats "/shop/"; on a tie the
    earlier section is kept.
    """
    best_id = None
    best_length = -1
    for section in sections:
        section = _as_section(section)
        if path_matches(path, section.url) and len(section.url) > best_length:
            best_id = section.id
            best_length = len(section.url)
    return best_id


__all__ = [
    "Section",
    "NavItem",
    "render",
    "build_navigation",
    "path_matches",
    "resolve_active_id",
]

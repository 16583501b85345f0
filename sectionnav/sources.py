"""
Content sources that supply the sections to render.

The renderer never fetches sections itself. A source is any object with a
``get_sections()`` method returning an iterable of ``Section`` records (or
mappings). Two are provided:

    SettingsSectionSource   sections listed in ``settings.SECTIONNAV_SECTIONS``
    TomlSectionSource       ``[[sections]]`` tables in a TOML file

Pick one with ``SECTIONNAV_SOURCE`` (a dotted path) and call ``load_sections()``.
When the source is unavailable the failure is logged and an empty tuple is
returned, so the navigation simply renders empty.
"""

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path

from django.conf import settings as django_settings
from django.utils.module_loading import import_string

from sectionnav.navigation import Section

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "sectionnav.sources.SettingsSectionSource"


class SectionSourceUnavailable(Exception):
    """Raised by a content source that cannot produce its sections."""


def _to_sections(records, origin):
    sections = []
    for index, record in enumerate(records):
        if isinstance(record, Section):
            sections.append(record)
        elif isinstance(record, Mapping):
            sections.append(Section.from_mapping(record))
        else:
            raise SectionSourceUnavailable(
                f"{origin}: entry {index} is a {type(record).__name__}, expected a table"
            )
    return tuple(sections)


class SettingsSectionSource:
    """Sections declared inline in ``settings.SECTIONNAV_SECTIONS``."""

    def get_sections(self):
        records = getattr(django_settings, "SECTIONNAV_SECTIONS", ())
        if not isinstance(records, (list, tuple)):
            raise SectionSourceUnavailable(
                f"SECTIONNAV_SECTIONS must be a list, got {type(records).__name__}"
            )
        return _to_sections(records, "SECTIONNAV_SECTIONS")


# ---------------------------------------------------------------------------
# TOML file source
# ---------------------------------------------------------------------------

# Parsed files keyed by path: (mtime, sections)
_toml_cache: dict = {}


def clear_cache() -> None:
    """Reset the cached TOML sections.  Mainly useful in tests."""
    _toml_cache.clear()


def _default_toml_path() -> Path:
    configured = getattr(django_settings, "SECTIONNAV_SECTIONS_FILE", "")
    if configured:
        return Path(configured)
    return Path(django_settings.BASE_DIR) / "sections.toml"


class TomlSectionSource:
    """
    Sections read from a TOML file of ``[[sections]]`` tables::

        [[sections]]
        id = 1
        title = "Home"
        url = "/"

    The file's mtime is checked on every call so edits take effect without
    restarting the server.
    """

    def __init__(self, path=None):
        self.path = Path(path) if path else _default_toml_path()

    def get_sections(self):
        path = self.path
        try:
            mtime = path.stat().st_mtime
        except OSError as exc:
            raise SectionSourceUnavailable(f"Cannot read {path}: {exc}") from exc

        cached = _toml_cache.get(path)
        if cached is not None and cached[0] == mtime:
            return cached[1]

        try:
            with open(path, "rb") as fh:
                data = tomllib.load(fh)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise SectionSourceUnavailable(f"Failed to parse {path}: {exc}") from exc

        records = data.get("sections", [])
        if not isinstance(records, list):
            raise SectionSourceUnavailable(f"{path}: 'sections' must be an array of tables")

        sections = _to_sections(records, path)
        _toml_cache[path] = (mtime, sections)
        logger.info("Loaded %d sections from %s", len(sections), path)
        return sections


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def get_section_source():
    """Instantiate the source class named by ``settings.SECTIONNAV_SOURCE``."""
    dotted_path = getattr(django_settings, "SECTIONNAV_SOURCE", "") or DEFAULT_SOURCE
    return import_string(dotted_path)()


def load_sections(source=None):
    """
    Return the sections from *source* (the configured source by default).

    An unavailable source yields an empty tuple rather than an error.
    """
    if source is None:
        source = get_section_source()
    try:
        sections = tuple(source.get_sections())
    except SectionSourceUnavailable as exc:
        logger.warning("Section source %s unavailable: %s", type(source).__name__, exc)
        return ()
    logger.debug("Loaded %d sections from %s", len(sections), type(source).__name__)
    return sections

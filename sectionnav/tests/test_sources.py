"""
Tests for the section content sources.

Covers:
- SettingsSectionSource reading SECTIONNAV_SECTIONS
- TomlSectionSource parsing, caching and hot-reload
- get_section_source() honouring SECTIONNAV_SOURCE
- load_sections() turning an unavailable source into an empty tuple
"""

import os
import tempfile
import textwrap
from pathlib import Path

from django.test import SimpleTestCase, override_settings

from sectionnav.navigation import Section
from sectionnav.sources import (
    SectionSourceUnavailable,
    SettingsSectionSource,
    TomlSectionSource,
    clear_cache,
    get_section_source,
    load_sections,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write_config(path: Path, content: str) -> None:
    """Write a TOML file, stripping leading indentation."""
    path.write_text(textwrap.dedent(content))


class FailingSource:
    def get_sections(self):
        raise SectionSourceUnavailable("backend down")


# ======================================================================
# SettingsSectionSource
# ======================================================================


class SettingsSectionSourceTests(SimpleTestCase):

    @override_settings(SECTIONNAV_SECTIONS=[
        {"id": 1, "title": "Home", "url": "/"},
        {"id": 2, "title": "About"},
    ])
    def test_reads_sections_in_order(self):
        self.assertEqual(
            SettingsSectionSource().get_sections(),
            (Section(1, "Home", "/"), Section(2, "About", "")),
        )

    @override_settings(SECTIONNAV_SECTIONS=[])
    def test_empty_setting(self):
        self.assertEqual(SettingsSectionSource().get_sections(), ())

    @override_settings(SECTIONNAV_SECTIONS="home,about")
    def test_non_list_setting_is_unavailable(self):
        with self.assertRaises(SectionSourceUnavailable):
            SettingsSectionSource().get_sections()

    @override_settings(SECTIONNAV_SECTIONS=[{"id": 1}, "about"])
    def test_non_mapping_entry_is_unavailable(self):
        with self.assertRaises(SectionSourceUnavailable):
            SettingsSectionSource().get_sections()


# ======================================================================
# TomlSectionSource
# ======================================================================


class TomlSectionSourceTests(SimpleTestCase):

    def setUp(self):
        super().setUp()
        clear_cache()
        self._tmpdir = tempfile.TemporaryDirectory()
        self.path = Path(self._tmpdir.name) / "sections.toml"

    def tearDown(self):
        self._tmpdir.cleanup()
        clear_cache()
        super().tearDown()

    def test_reads_sections_tables(self):
        _write_config(self.path, """\
            [[sections]]
            id = 1
            title = "Home"
            url = "/"

            [[sections]]
            id = 2
            title = "About"
            url = "/about"
        """)
        self.assertEqual(
            TomlSectionSource(self.path).get_sections(),
            (Section(1, "Home", "/"), Section(2, "About", "/about")),
        )

    def test_file_without_sections_is_empty(self):
        _write_config(self.path, 'title = "nothing here"\n')
        self.assertEqual(TomlSectionSource(self.path).get_sections(), ())

    def test_missing_file_is_unavailable(self):
        with self.assertRaises(SectionSourceUnavailable):
            TomlSectionSource(self.path).get_sections()

    def test_malformed_file_is_unavailable(self):
        _write_config(self.path, "[[sections]\nid = \n")
        with self.assertRaises(SectionSourceUnavailable):
            TomlSectionSource(self.path).get_sections()

    def test_sections_must_be_array_of_tables(self):
        _write_config(self.path, 'sections = "home"\n')
        with self.assertRaises(SectionSourceUnavailable):
            TomlSectionSource(self.path).get_sections()

    def test_edits_are_picked_up(self):
        _write_config(self.path, '[[sections]]\nid = 1\ntitle = "Old"\n')
        source = TomlSectionSource(self.path)
        self.assertEqual(source.get_sections()[0].title, "Old")

        _write_config(self.path, '[[sections]]\nid = 1\ntitle = "New"\n')
        stat = self.path.stat()
        os.utime(self.path, (stat.st_atime, stat.st_mtime + 10))
        self.assertEqual(source.get_sections()[0].title, "New")

    def test_unchanged_file_is_served_from_cache(self):
        _write_config(self.path, '[[sections]]\nid = 1\n')
        source = TomlSectionSource(self.path)
        first = source.get_sections()
        self.assertIs(source.get_sections(), first)

    def test_default_path_comes_from_settings(self):
        with override_settings(SECTIONNAV_SECTIONS_FILE=str(self.path)):
            self.assertEqual(TomlSectionSource().path, self.path)

    def test_default_path_falls_back_to_base_dir(self):
        with override_settings(SECTIONNAV_SECTIONS_FILE="", BASE_DIR=self._tmpdir.name):
            self.assertEqual(TomlSectionSource().path, self.path)


# ======================================================================
# get_section_source() / load_sections()
# ======================================================================


class LoadSectionsTests(SimpleTestCase):

    @override_settings(SECTIONNAV_SOURCE="sectionnav.sources.SettingsSectionSource")
    def test_configured_source_is_used(self):
        self.assertIsInstance(get_section_source(), SettingsSectionSource)

    @override_settings(SECTIONNAV_SOURCE="")
    def test_blank_source_setting_falls_back_to_settings_source(self):
        self.assertIsInstance(get_section_source(), SettingsSectionSource)

    @override_settings(SECTIONNAV_SOURCE="sectionnav.sources.NoSuchSource")
    def test_bad_source_path_raises(self):
        with self.assertRaises(ImportError):
            get_section_source()

    @override_settings(
        SECTIONNAV_SOURCE="sectionnav.sources.SettingsSectionSource",
        SECTIONNAV_SECTIONS=[{"id": "home", "title": "Home", "url": "/"}],
    )
    def test_loads_from_default_source(self):
        self.assertEqual(load_sections(), (Section("home", "Home", "/"),))

    def test_unavailable_source_gives_empty_tuple(self):
        with self.assertLogs("sectionnav.sources", level="WARNING") as logs:
            self.assertEqual(load_sections(FailingSource()), ())
        self.assertIn("backend down", logs.output[0])

    @override_settings(
        SECTIONNAV_SOURCE="sectionnav.sources.SettingsSectionSource",
        SECTIONNAV_SECTIONS="broken",
    )
    def test_misconfigured_settings_source_gives_empty_tuple(self):
        with self.assertLogs("sectionnav.sources", level="WARNING"):
            self.assertEqual(load_sections(), ())

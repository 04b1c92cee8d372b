"""Tests for root-scope value sources."""

import os
from pathlib import Path

from css_var_fallback.core.value_sources import (
    MappingValueSource,
    NullValueSource,
    StylesheetValueSource,
)


def test_null_source_is_always_absent():
    assert NullValueSource().lookup("--bg") is None
    assert NullValueSource().version == 0


class TestMappingValueSource:
    def test_lookup_is_live(self):
        values = {"--bg": "black"}
        source = MappingValueSource(values)
        assert source.lookup("--bg") == "black"

        values["--bg"] = "white"
        assert source.lookup("--bg") == "white"

    def test_blank_values_are_absent(self):
        source = MappingValueSource({"--a": "   ", "--b": ""})

        assert source.lookup("--a") is None
        assert source.lookup("--b") is None
        assert source.lookup("--missing") is None

    def test_values_are_trimmed(self):
        assert MappingValueSource({"--a": " 1px "}).lookup("--a") == "1px"

    def test_mutations_bump_version(self):
        source = MappingValueSource()
        assert source.version == 0

        source.set_property("--a", "1px")
        assert source.version == 1
        assert source.lookup("--a") == "1px"

        source.remove_property("--a")
        assert source.version == 2
        assert source.lookup("--a") is None

        source.remove_property("--a")
        assert source.version == 2

        source.clear()
        assert source.version == 3


class TestStylesheetValueSource:
    def test_reads_root_properties(self, tmp_path: Path):
        css = tmp_path / "root.css"
        css.write_text(":root { --bg: black; --gap: 4px; }\n.a { --local: 1px; }\n", encoding="utf-8")

        source = StylesheetValueSource(css)

        assert source.lookup("--bg") == "black"
        assert source.lookup("--gap") == "4px"
        assert source.lookup("--local") is None

    def test_reloads_when_file_changes(self, tmp_path: Path):
        css = tmp_path / "root.css"
        css.write_text(":root { --bg: black; }", encoding="utf-8")
        source = StylesheetValueSource(css)
        assert source.lookup("--bg") == "black"
        first_version = source.version

        css.write_text(":root { --bg: rebeccapurple; }", encoding="utf-8")
        st = css.stat()
        os.utime(css, ns=(st.st_atime_ns, st.st_mtime_ns + 1_000_000_000))

        assert source.lookup("--bg") == "rebeccapurple"
        assert source.version == first_version + 1

    def test_missing_file_behaves_as_empty_scope(self, tmp_path: Path):
        source = StylesheetValueSource(tmp_path / "missing.css")

        assert source.lookup("--bg") is None
        assert source.version == 0

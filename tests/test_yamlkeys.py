"""
Key position resolver tests

Tests `key:` lookup in YAML text and the file-origin fallback.
"""

import pytest

from cssmodjump.lib.reader import TargetReadError
from cssmodjump.lib.yamlkeys import keyPosition_find, keyPosition_findInFile
from cssmodjump.models.location import Position


class TestKeyPositionFind:
    """Test scanning YAML text for a key declaration"""

    def test_nested_key(self):
        """Indentation is skipped, the column is the key's first character"""
        assert keyPosition_find('foo:\n  greeting: "hi"\n', "greeting") == Position(1, 2)

    def test_top_level_key(self):
        assert keyPosition_find("title: Form\nlabel: Submit\n", "label") == Position(1, 0)

    def test_missing_key_falls_back_to_origin(self):
        assert keyPosition_find('foo:\n  greeting: "hi"\n', "farewell") == Position(0, 0)

    def test_space_before_colon(self):
        assert keyPosition_find("a: 1\n  label   : x\n", "label") == Position(1, 2)

    def test_tab_indentation(self):
        assert keyPosition_find("a:\n\tlabel: x\n", "label") == Position(1, 1)

    def test_longer_key_is_not_a_match(self):
        assert keyPosition_find("greetings: x\ngreeting: y\n", "greeting") == Position(1, 0)

    def test_value_is_not_a_key(self):
        assert keyPosition_find("first: greeting\n", "greeting") == Position(0, 0)

    def test_key_with_pattern_characters(self):
        """Keys are compared literally"""
        assert keyPosition_find("a.b: 1\naxb: 2\n", "axb") == Position(1, 0)
        assert keyPosition_find("axb: 2\na.b: 1\n", "a.b") == Position(1, 0)

    def test_crlf_line_endings(self):
        assert keyPosition_find("a: 1\r\n  label: x\r\n", "label") == Position(1, 2)

    def test_empty_key(self):
        assert keyPosition_find("a: 1\n", "") == Position(0, 0)


class TestKeyPositionFindInFile:
    """Test reading YAML files"""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "labels.i18n.yaml"
        path.write_text("en:\n  ok: OK\n", encoding="utf-8")
        assert keyPosition_findInFile(path, "ok", 1024) == Position(1, 2)

    def test_missing_file(self, tmp_path):
        with pytest.raises(TargetReadError):
            keyPosition_findInFile(tmp_path / "gone.yaml", "ok", 1024)

"""
test_ids.py - id / timestamp tests
"""

import re

from src.core.ids import generate_document_id, is_safe_id, now_iso


class TestGenerateDocumentId:
    def test_unique(self):
        ids = {generate_document_id() for _ in range(100)}
        assert len(ids) == 100

    def test_safe_for_file_names(self):
        assert is_safe_id(generate_document_id())


class TestNowIso:
    def test_format(self):
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", now_iso())

    def test_sortable(self):
        first = now_iso()
        second = now_iso()
        assert first <= second


class TestIsSafeId:
    def test_valid(self):
        assert is_safe_id("abc-123_DEF")

    def test_path_tricks_rejected(self):
        assert not is_safe_id("../etc/passwd")
        assert not is_safe_id("a/b")
        assert not is_safe_id("")

    def test_too_long(self):
        assert not is_safe_id("a" * 65)

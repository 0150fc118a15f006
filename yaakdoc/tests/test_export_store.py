"""
Unit tests for the in-memory export store.
"""

import pytest

from yaakdoc.exceptions import ExportNotFoundError
from yaakdoc.models.export import YaakExport
from yaakdoc.services.export_store import ExportStore


def _export() -> YaakExport:
    return YaakExport.from_dict(
        {"yaakVersion": "1", "yaakSchema": 1, "timestamp": "2024-01-01T00:00:00"}
    )


class TestExportStore:
    def test_add_and_get(self):
        store = ExportStore()
        export = _export()
        export_id = store.add(export)
        assert store.get(export_id) is export

    def test_ids_are_unique(self):
        store = ExportStore()
        assert store.add(_export()) != store.add(_export())

    def test_get_unknown_raises(self):
        with pytest.raises(ExportNotFoundError):
            ExportStore().get("missing")

    def test_delete(self):
        store = ExportStore()
        export_id = store.add(_export())
        store.delete(export_id)
        with pytest.raises(ExportNotFoundError):
            store.get(export_id)

    def test_delete_unknown_raises(self):
        with pytest.raises(ExportNotFoundError):
            ExportStore().delete("missing")

    def test_oldest_export_is_evicted(self):
        store = ExportStore(max_exports=2)
        first = store.add(_export())
        second = store.add(_export())
        third = store.add(_export())

        assert [export_id for export_id, _ in store.items()] == [second, third]
        with pytest.raises(ExportNotFoundError):
            store.get(first)

    def test_clear(self):
        store = ExportStore()
        store.add(_export())
        store.clear()
        assert store.items() == []

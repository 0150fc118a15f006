"""In-memory store for loaded exports.

Loaded exports live only for the lifetime of the process. When the store
is full the oldest export is evicted.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from typing import TYPE_CHECKING

from ..config import settings
from ..exceptions import ExportNotFoundError

if TYPE_CHECKING:
    from ..models.export import YaakExport

logger = logging.getLogger(__name__)


class ExportStore:
    """Thread-safe in-memory registry of YaakExport models.

    Uses a reentrant lock so concurrent requests never observe a half
    registered export. Selection calls on a model are also made under the
    lock (see ``lock``).
    """

    def __init__(self, max_exports: int = 32):
        self._lock = threading.RLock()
        self._exports: OrderedDict[str, YaakExport] = OrderedDict()
        self.max_exports = max_exports

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def add(self, export: YaakExport) -> str:
        with self._lock:
            export_id = uuid.uuid4().hex
            self._exports[export_id] = export
            while len(self._exports) > self.max_exports:
                evicted_id, _ = self._exports.popitem(last=False)
                logger.warning("Export store full, evicted export %s", evicted_id)
            return export_id

    def get(self, export_id: str) -> YaakExport:
        with self._lock:
            export = self._exports.get(export_id)
            if export is None:
                raise ExportNotFoundError(export_id)
            return export

    def items(self) -> list[tuple[str, YaakExport]]:
        with self._lock:
            return list(self._exports.items())

    def delete(self, export_id: str) -> None:
        with self._lock:
            if self._exports.pop(export_id, None) is None:
                raise ExportNotFoundError(export_id)

    def clear(self) -> None:
        with self._lock:
            self._exports.clear()


export_store = ExportStore(max_exports=settings.max_exports)


def get_store() -> ExportStore:
    """
    Dependency function for FastAPI to get the process-wide export store.

    Usage:
        @router.get("/items")
        def get_items(store: ExportStore = Depends(get_store)):
            ...
    """
    return export_store

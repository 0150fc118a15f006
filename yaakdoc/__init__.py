"""
yaakdoc - derived views over Yaak workspace exports.

Load an export with ``YaakExport.from_file`` (or ``from_json``/``from_dict``)
and read ``tree`` and ``variable_map`` for the active workspace/environment.
"""

__version__ = "1.0.0"

from .exceptions import (
    EnvironmentNotFoundError,
    InvalidExportError,
    WorkspaceNotFoundError,
)
from .models.export import YaakExport

__all__ = [
    "__version__",
    "YaakExport",
    "WorkspaceNotFoundError",
    "EnvironmentNotFoundError",
    "InvalidExportError",
]

# Models package

from .export import YaakExport

__all__ = [
    "YaakExport",
]

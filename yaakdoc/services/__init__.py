# Services package

from .indexer import ResourceIndex, build_index
from .tree_builder import build_tree, iter_tree
from .variable_resolver import resolve_variables
from .variable_substitution import extract_variables, render, render_request
from .export_store import ExportStore, get_store

__all__ = [
    "ResourceIndex",
    "build_index",
    "build_tree",
    "iter_tree",
    "resolve_variables",
    "extract_variables",
    "render",
    "render_request",
    "ExportStore",
    "get_store",
]

"""FSML - ordered document trees encoded in filenames.

Numeric prefixes such as ``01-`` or ``02_`` give a folder of markdown
documents a total sibling order. This package parses such paths, sorts
them, builds navigation trees, and plans collision-free renames for
reordering.
"""

from fsml.config import NavConfig
from fsml.core.navigation import build_nav_tree, find_node
from fsml.core.paths import is_index_file, parse_path, title_from_filename
from fsml.core.reorder import compute_new_path, compute_reorder
from fsml.core.sorting import compare_paths, sort_paths
from fsml.core.types import (
    NavNode,
    PathDescriptor,
    Position,
    Rename,
    ReorderCase,
    ReorderPlan,
)

__all__ = [
    "NavConfig",
    "NavNode",
    "PathDescriptor",
    "Position",
    "Rename",
    "ReorderCase",
    "ReorderPlan",
    "build_nav_tree",
    "compare_paths",
    "compute_new_path",
    "compute_reorder",
    "find_node",
    "is_index_file",
    "parse_path",
    "sort_paths",
    "title_from_filename",
]

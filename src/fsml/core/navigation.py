"""Navigation tree builder.

Builds a forest of navigation nodes from a flat list of FSML paths.
Folder nodes are synthesized from the directories the paths imply;
directories with no surviving content are never represented.
"""

import logging
from collections.abc import Iterable

from fsml.config import NavConfig
from fsml.core.paths import parse_order, parse_path, title_from_filename
from fsml.core.sorting import sort_nodes, sort_paths
from fsml.core.types import NavNode, PathDescriptor

logger = logging.getLogger(__name__)


def build_nav_tree(
    paths: Iterable[str],
    config: NavConfig | None = None,
) -> list[NavNode]:
    """Build navigation tree from relative paths.

    Args:
        paths: Relative paths of project entries
        config: Index filenames and root manifest to apply (default: NavConfig())

    Returns:
        Sorted list of root NavNodes
    """
    if config is None:
        config = NavConfig()

    descriptors = _visible(paths, config)
    ordered = sort_paths(d.path for d in descriptors)
    by_path = {d.path: d for d in descriptors}

    folders: dict[str, NavNode] = {}
    leaves: list[PathDescriptor] = []
    roots: list[NavNode] = []

    for path in ordered:
        descriptor = by_path[path]
        segments = [segment for segment in path.split("/") if segment]

        for i, segment in enumerate(segments[:-1]):
            folder_path = "/".join(segments[: i + 1])
            if folder_path not in folders:
                folders[folder_path] = NavNode(
                    path=folder_path,
                    title=title_from_filename(segment),
                    order=parse_order(segment),
                    is_folder=True,
                )

        if config.is_index_file(segments[-1]):
            # A root-level index has no folder node to mark
            if descriptor.parent:
                folders[descriptor.parent].has_index = True
            continue

        if not descriptor.is_folder:
            leaves.append(descriptor)

    for descriptor in leaves:
        # A dotted directory name can also appear as a file path
        if descriptor.path in folders:
            continue
        leaf = NavNode(
            path=descriptor.path,
            title=descriptor.title,
            order=descriptor.order,
        )
        _attach(leaf, descriptor.parent, folders, roots)

    # Shallow first so every parent is linked before its descendants
    for folder in sorted(folders.values(), key=lambda node: node.path.count("/")):
        parent = folder.path.rpartition("/")[0]
        _attach(folder, parent, folders, roots)

    sort_nodes(roots)
    for folder in folders.values():
        sort_nodes(folder.children)

    logger.debug(
        f"Built navigation tree: {len(roots)} root nodes, {len(folders)} folders "
        f"from {len(descriptors)} paths",
    )
    return roots


def find_node(nodes: list[NavNode], path: str) -> NavNode | None:
    """Find a node by path anywhere in a navigation forest.

    Args:
        nodes: Root nodes to search
        path: Node path (e.g., "02-guide/01-setup.md")

    Returns:
        Matching NavNode, or None if not found
    """
    pending = list(nodes)
    while pending:
        node = pending.pop()
        if node.path == path:
            return node
        pending.extend(node.children)
    return None


def _visible(paths: Iterable[str], config: NavConfig) -> list[PathDescriptor]:
    """Parse paths, dropping hidden, system, empty and root manifest entries."""
    visible: list[PathDescriptor] = []
    seen: set[str] = set()
    for raw in paths:
        descriptor = parse_path(raw)
        if not descriptor.path or descriptor.path in seen:
            continue
        if descriptor.is_hidden or descriptor.is_system:
            continue
        if descriptor.depth == 0 and descriptor.path == config.root_manifest:
            continue
        seen.add(descriptor.path)
        visible.append(descriptor)
    return visible


def _attach(
    node: NavNode,
    parent: str,
    folders: dict[str, NavNode],
    roots: list[NavNode],
) -> None:
    if parent:
        folders[parent].children.append(node)
    else:
        roots.append(node)


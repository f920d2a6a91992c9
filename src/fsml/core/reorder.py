"""Reorder planner for drag and drop.

Computes the renames that reposition one entry among its numbered
siblings. Filenames are the only state: order lives in the numeric
prefix, so moving an entry means renumbering the siblings around it.

The planner never touches storage. It returns a plan whose renames,
applied strictly in order, never target a name still held by an entry
that has not been renamed yet.
"""

import logging
from collections.abc import Iterable

from fsml.core.paths import parse_path
from fsml.core.types import PathDescriptor, Position, Rename, ReorderCase, ReorderPlan

logger = logging.getLogger(__name__)

# Cases where affected orders grow; everything else shrinks or is a no-op
_INCREASING = frozenset({ReorderCase.SAME_DIR_UP, ReorderCase.CROSS_DIR_OR_UNNUMBERED})


def compute_reorder(
    source_path: str,
    target_path: str,
    position: Position,
    siblings: Iterable[str] = (),
) -> ReorderPlan:
    """Compute all renames needed to move an entry relative to a target.

    Args:
        source_path: Path being moved
        target_path: Drop target path
        position: Where to place the source relative to the target
        siblings: Current paths in the target directory (snapshot)

    Returns:
        ReorderPlan with the source's new path and renames in execution order

    Example:
        >>> plan = compute_reorder(
        ...     "02-config.md", "01-intro.md", "before", ["01-intro.md", "02-config.md"]
        ... )
        >>> plan.new_path
        '01-config.md'
    """
    source = parse_path(source_path)
    target = parse_path(target_path)

    target_dir = target.path if position == "inside" else target.parent
    group = sibling_group(siblings, target_dir)
    insert_order = insertion_order(position, target, group)
    case = select_case(source, target_dir, insert_order)

    logger.debug(
        f"Reorder {source_path!r} {position} {target_path!r}: {case.name}, "
        f"insert at {insert_order} among {len(group)} numbered siblings",
    )

    if case is ReorderCase.NO_OP:
        return ReorderPlan(new_path=source_path, renames=[], case=case)

    renames: list[Rename] = []

    if case is ReorderCase.SAME_DIR_DOWN:
        # The source's old slot counts in insert_order, so it lands one lower
        final_order = insert_order - 1
        for sibling in group:
            if sibling.path == source.path:
                continue
            if source.order < sibling.order <= final_order:
                _add_rename(renames, sibling, _renumbered(sibling, sibling.order - 1, target_dir))
    elif case is ReorderCase.SAME_DIR_UP:
        final_order = insert_order
        for sibling in group:
            if sibling.path == source.path:
                continue
            if insert_order <= sibling.order < source.order:
                _add_rename(renames, sibling, _renumbered(sibling, sibling.order + 1, target_dir))
    else:
        final_order = insert_order
        for sibling in group:
            if sibling.order >= insert_order:
                _add_rename(renames, sibling, _renumbered(sibling, sibling.order + 1, target_dir))

    renames = sort_for_execution(renames, increasing=case in _INCREASING)
    new_path = _renumbered(source, final_order, target_dir)
    if source_path != new_path:
        renames.append(Rename(source=source_path, target=new_path))

    return ReorderPlan(new_path=new_path, renames=sequence_renames(renames), case=case)


def compute_new_path(source_path: str, target_path: str, position: Position) -> ReorderPlan:
    """Compute the new path for a move without shifting siblings.

    Only the source rename is returned. Prefer compute_reorder(), which
    also renumbers the siblings that make room.

    Args:
        source_path: Path being moved
        target_path: Drop target path
        position: Where to place the source relative to the target

    Returns:
        ReorderPlan containing at most the source rename
    """
    source = parse_path(source_path)
    target = parse_path(target_path)

    if position == "inside":
        target_dir = target.path
        order = 1
    else:
        target_dir = target.parent
        order = insertion_order(position, target, [])

    new_path = _renumbered(source, order, target_dir)
    renames = [] if source_path == new_path else [Rename(source=source_path, target=new_path)]
    return ReorderPlan(new_path=new_path, renames=renames)


def sibling_group(siblings: Iterable[str], directory: str) -> list[PathDescriptor]:
    """Numbered entries directly inside a directory, sorted by order."""
    group = [
        descriptor
        for descriptor in map(parse_path, siblings)
        if descriptor.path and descriptor.parent == directory and descriptor.order is not None
    ]
    group.sort(key=lambda descriptor: descriptor.order)
    return group


def insertion_order(
    position: Position,
    target: PathDescriptor,
    group: list[PathDescriptor],
) -> int:
    """Order number the source should receive before any adjustment."""
    if position == "inside":
        return max((sibling.order for sibling in group), default=0) + 1
    if target.order is None:
        return 1
    if position == "before":
        return target.order
    return target.order + 1


def select_case(source: PathDescriptor, target_dir: str, insert_order: int) -> ReorderCase:
    """Pick the reorder scenario for a source and its insertion order."""
    if source.parent != target_dir or source.order is None:
        return ReorderCase.CROSS_DIR_OR_UNNUMBERED
    if source.order < insert_order:
        return ReorderCase.SAME_DIR_DOWN
    if source.order > insert_order:
        return ReorderCase.SAME_DIR_UP
    return ReorderCase.NO_OP


def sort_for_execution(renames: list[Rename], *, increasing: bool) -> list[Rename]:
    """Order renames so no step targets a name that is still occupied.

    When orders increase, rename the highest original order first;
    when they decrease, the lowest first. Unnumbered sources count as 0.
    """
    return sorted(
        renames,
        key=lambda rename: parse_path(rename.source).order or 0,
        reverse=increasing,
    )


def sequence_renames(renames: list[Rename]) -> list[Rename]:
    """Order renames so each step targets a name nobody holds anymore.

    A rename waits while another pending rename still holds its target;
    renames that are never blocked keep their relative order. Entries that
    share a stem can block each other in a ring (e.g. swapping 01-a.md and
    02-a.md). The last pending entry, which is always the moved source,
    then goes to a hidden staging name first and takes its real target at
    the end.
    """
    pending = list(renames)
    ordered: list[Rename] = []
    while pending:
        held = {rename.source for rename in pending}
        ready = next((rename for rename in pending if rename.target not in held), None)
        if ready is None:
            parked = pending.pop()
            staging = _staging_path(parked.source)
            ordered.append(Rename(source=parked.source, target=staging))
            pending.append(Rename(source=staging, target=parked.target))
            continue
        pending.remove(ready)
        ordered.append(ready)
    return ordered


def format_filename(order: int, descriptor: PathDescriptor) -> str:
    """Render an FSML filename: zero-padded order, stem, extension."""
    extension = "" if descriptor.is_folder else descriptor.extension
    return f"{order:02d}-{descriptor.name}{extension}"


def _renumbered(descriptor: PathDescriptor, order: int, directory: str) -> str:
    filename = format_filename(order, descriptor)
    return f"{directory}/{filename}" if directory else filename


def _staging_path(path: str) -> str:
    directory, _, filename = path.rpartition("/")
    staged = f".{filename}.reorder"
    return f"{directory}/{staged}" if directory else staged


def _add_rename(renames: list[Rename], sibling: PathDescriptor, new_path: str) -> None:
    if sibling.path != new_path:
        renames.append(Rename(source=sibling.path, target=new_path))

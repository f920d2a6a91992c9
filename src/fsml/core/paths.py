"""FSML path parsing.

Decomposes relative paths into structural attributes: numeric order
prefix, stem name, display title, extension and hierarchy position.
Purely string based, the filesystem is never consulted.
"""

import re
from collections.abc import Iterable

from fsml.core.types import PathDescriptor

DEFAULT_INDEX_FILENAMES = frozenset({"index.md", "index.qmd"})

_TRAILING_SEPARATORS = re.compile(r"/+\Z")
_HAS_EXTENSION = re.compile(r"\.[^./]+\Z")
_EXTENSION = re.compile(r"\.[^.]+\Z")
_ORDER_PREFIX = re.compile(r"^(\d+)[-_]", re.ASCII)
# Titles only drop hyphen-joined prefixes: "02_setup" keeps its number
_TITLE_PREFIX = re.compile(r"^\d+-", re.ASCII)
_WORD_SEPARATORS = re.compile(r"[-_]")

_EMPTY = PathDescriptor(
    path="",
    order=None,
    name="",
    title="",
    extension="",
    is_folder=False,
    is_hidden=False,
    is_system=False,
    depth=0,
    parent="",
)


def parse_path(relative_path: str) -> PathDescriptor:
    """Parse a relative path into FSML components.

    Args:
        relative_path: Path relative to project root
            (e.g., "02-getting-started/01-installation.md")

    Returns:
        PathDescriptor; empty input yields a descriptor with empty
        strings, no order, depth 0 and all flags false
    """
    path = _TRAILING_SEPARATORS.sub("", relative_path)
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return _EMPTY

    filename = segments[-1]
    stem = _EXTENSION.sub("", filename)
    extension_match = _EXTENSION.search(filename)

    order_match = _ORDER_PREFIX.match(stem)
    order = int(order_match.group(1)) if order_match else None
    name = stem[order_match.end() :] if order_match else stem

    first_segment = segments[0]

    return PathDescriptor(
        path=path,
        order=order,
        name=name,
        title=title_from_filename(filename),
        extension=extension_match.group(0) if extension_match else "",
        is_folder=_HAS_EXTENSION.search(filename) is None,
        is_hidden=first_segment.startswith("_"),
        is_system=first_segment.startswith("."),
        depth=len(segments) - 1,
        parent="/".join(segments[:-1]),
    )


def parse_order(segment: str) -> int | None:
    """Extract the numeric order prefix of a single path segment."""
    stem = _EXTENSION.sub("", segment)
    match = _ORDER_PREFIX.match(stem)
    return int(match.group(1)) if match else None


def title_from_filename(filename: str) -> str:
    """Derive a human-readable title from a filename.

    Examples:
        "01-getting-started.md" -> "Getting Started"
        "my_cool_doc.md" -> "My Cool Doc"
        "README.md" -> "README"
    """
    if not filename:
        return ""

    name = _EXTENSION.sub("", filename)
    name = _TITLE_PREFIX.sub("", name)
    name = _WORD_SEPARATORS.sub(" ", name)
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def is_index_file(
    filename: str,
    index_filenames: Iterable[str] = DEFAULT_INDEX_FILENAMES,
) -> bool:
    """Check whether a filename is a recognized index file (case-insensitive)."""
    if not filename:
        return False
    lowered = filename.lower()
    return any(lowered == candidate.lower() for candidate in index_filenames)

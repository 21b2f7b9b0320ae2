"""Core functionality for directory tree indexing.

This module contains the Node types and the DirTree builder. A DirTree is
built once per chosen root, depth-first and pre-order, and never mutated
afterwards.

Identity: directories and files are numbered from two independent
counters, both starting at 0, in the order nodes are created. The root
directory always receives directory id 0. The two id spaces are never
compared against each other.
"""

import itertools
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pdx_explorer.utils.logging import logger

from .content_type import ContentType, classify
from .exceptions import IndexerError, IndexIOError, PathEncodingError, RootNotADirectoryError


@dataclass(frozen=True)
class FileNode:
    """Leaf entry of the tree.

    Attributes:
        full_path: Absolute path of the file
        relative_path: full_path with the indexing root prefix removed
        name: Final path component
        content_type: Classification of relative_path
        id: Position in the file id space
    """

    full_path: str
    relative_path: str
    name: str
    content_type: ContentType
    id: int

    is_dir = False

    @property
    def path(self) -> Path:
        return Path(self.full_path)


@dataclass(frozen=True)
class DirectoryNode:
    """Directory entry owning its children in enumeration order."""

    full_path: str
    relative_path: str
    name: str
    content_type: ContentType
    id: int
    children: tuple["Node", ...] = field(default=())

    is_dir = True

    @property
    def path(self) -> Path:
        return Path(self.full_path)


Node = DirectoryNode | FileNode


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield node and all its descendants in pre-order."""
    yield node
    if isinstance(node, DirectoryNode):
        for child in node.children:
            yield from iter_nodes(child)


@dataclass
class _IdCounters:
    """Counter state threaded through one traversal."""

    directories: Iterator[int] = field(default_factory=itertools.count)
    files: Iterator[int] = field(default_factory=itertools.count)


class DirTree:
    """Immutable in-memory tree of a game/mod directory."""

    def __init__(self, root: DirectoryNode, stats: dict[str, int]):
        self._root = root
        self.stats = stats

    @classmethod
    def build(cls, root_path: Path | str, follow_symlinks: bool = True) -> "DirTree":
        """Walk root_path and build the tree.

        Args:
            root_path: Directory to index
            follow_symlinks: Descend into symlinked directories. When False
                symlinked directories are left out of the tree. A link back
                to a directory that is already being walked is always left out.

        Raises:
            RootNotADirectoryError: root_path is not a directory
            IndexIOError: any entry could not be read; no partial tree is returned
            PathEncodingError: a path is not valid UTF-8
        """
        root = Path(root_path)
        if not root.is_dir():
            raise RootNotADirectoryError(root)
        root = root.resolve()

        builder = _TreeBuilder(root, follow_symlinks)
        root_node = builder.create_node(root, is_dir=True)

        logger.debug(
            f"Built tree for {root}: {builder.stats['directories']} directories, "
            f"{builder.stats['files']} files"
        )
        return cls(root_node, builder.stats)

    @property
    def root(self) -> DirectoryNode:
        return self._root

    @property
    def root_path(self) -> Path:
        return self._root.path

    def nodes(self) -> Iterator[Node]:
        """All nodes in pre-order, root first."""
        return iter_nodes(self._root)

    def directories(self) -> Iterator[DirectoryNode]:
        return (node for node in self.nodes() if isinstance(node, DirectoryNode))

    def files(self) -> Iterator[FileNode]:
        return (node for node in self.nodes() if isinstance(node, FileNode))

    def localization_files(self) -> list[FileNode]:
        return [f for f in self.files() if f.content_type is ContentType.LOCALIZATION]

    def to_dict(self) -> dict[str, Any]:
        """Plain-data rendering of the tree (for JSON output)."""
        return _node_to_dict(self._root)


def _node_to_dict(node: Node) -> dict[str, Any]:
    data = {
        "kind": "directory" if node.is_dir else "file",
        "id": node.id,
        "name": node.name,
        "full_path": node.full_path,
        "relative_path": node.relative_path,
        "content_type": node.content_type.value,
    }
    if isinstance(node, DirectoryNode):
        data["children"] = [_node_to_dict(child) for child in node.children]
    return data


class _TreeBuilder:
    """Recursive depth-first construction of Node objects."""

    def __init__(self, root: Path, follow_symlinks: bool):
        self.root = root
        self.follow_symlinks = follow_symlinks
        self.counters = _IdCounters()
        self.stats = {
            "directories": 0,
            "files": 0,
            "localization_files": 0,
            "skipped_symlinks": 0,
        }
        # Real paths of the directories on the current descent
        self._active: set[str] = set()

    def create_node(self, path: Path, is_dir: bool) -> Node:
        full_path = _checked_text(path)
        relative_path = self._relative_path(path)
        content_type = classify(relative_path)

        if is_dir:
            node_id = next(self.counters.directories)
            self.stats["directories"] += 1

            real_path = os.path.realpath(path)
            self._active.add(real_path)
            try:
                children = self._create_children(path)
            finally:
                self._active.discard(real_path)

            return DirectoryNode(
                full_path=full_path,
                relative_path=relative_path,
                name=path.name,
                content_type=content_type,
                id=node_id,
                children=children,
            )

        node_id = next(self.counters.files)
        self.stats["files"] += 1
        if content_type is ContentType.LOCALIZATION:
            self.stats["localization_files"] += 1

        return FileNode(
            full_path=full_path,
            relative_path=relative_path,
            name=path.name,
            content_type=content_type,
            id=node_id,
        )

    def _create_children(self, path: Path) -> tuple[Node, ...]:
        try:
            with os.scandir(path) as it:
                entries = sorted(
                    ((entry.name, entry.is_dir(), entry.is_symlink()) for entry in it),
                    key=lambda item: item[0],
                )
        except OSError as e:
            raise IndexIOError(path, e.strerror or str(e)) from e

        children = []
        for name, is_dir, is_symlink in entries:
            child = path / name
            if is_dir and is_symlink and not self._should_follow(child):
                self.stats["skipped_symlinks"] += 1
                continue
            children.append(self.create_node(child, is_dir))
        return tuple(children)

    def _should_follow(self, link: Path) -> bool:
        if not self.follow_symlinks:
            logger.debug(f"Skipping symlinked directory {link}")
            return False
        if os.path.realpath(link) in self._active:
            logger.warning(f"Skipping symlink cycle at {link}")
            return False
        return True

    def _relative_path(self, path: Path) -> str:
        try:
            relative = path.relative_to(self.root)
        except ValueError as e:
            # Traversal only produces descendants of root
            raise IndexerError(f"Failed to strip root `{self.root}` from `{path}`") from e

        return str(relative) if relative.parts else ""


def _checked_text(path: Path) -> str:
    """Return the path as text, rejecting undecodable (surrogate-escaped) names."""
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathEncodingError(path) from e
    return text

# backend/app/services/file_tree.py
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass
class FileNode:
    name: str
    path: str
    type: str  # 'file' or 'folder'
    children: Optional[List["FileNode"]] = None
    file: Any = None

    @property
    def is_folder(self) -> bool:
        return self.type == "folder"


def split_path(path: str) -> List[str]:
    """Split a slash-separated path, dropping empty segments"""
    return [part for part in (path or "").split("/") if part]


def build_file_tree(files: Iterable[Any]) -> List[FileNode]:
    """
    Fold a flat list of records with a ``path`` attribute into a forest.

    Folders are keyed by their accumulated path so each one is created once,
    however many files share the prefix. Children keep the sorted file order.
    """
    tree: List[FileNode] = []
    node_map: Dict[str, FileNode] = {}

    for record in sorted(files, key=lambda f: "/".join(split_path(f.path))):
        parts = split_path(record.path)
        if not parts:
            continue

        parent: Optional[FileNode] = None
        current_path = ""
        for index, part in enumerate(parts):
            current_path = f"{current_path}/{part}" if current_path else part
            is_leaf = index == len(parts) - 1

            node = node_map.get(current_path)
            if node is None:
                node = FileNode(
                    name=part,
                    path=current_path,
                    type="file" if is_leaf else "folder",
                    children=None if is_leaf else [],
                    file=record if is_leaf else None,
                )
                node_map[current_path] = node
                siblings = parent.children if parent is not None else tree
                siblings.append(node)
            elif not node.is_folder:
                # Same path seen before, or a file sits where a folder is needed
                break

            parent = node

    return tree


def iter_leaves(nodes: List[FileNode], ancestors: Tuple[str, ...] = ()) -> Iterator[Tuple[Tuple[str, ...], FileNode]]:
    """Depth-first walk yielding (ancestor names, leaf) pairs"""
    for node in nodes:
        if node.is_folder:
            yield from iter_leaves(node.children or [], ancestors + (node.name,))
        else:
            yield ancestors, node

"""Fold a flat list of findings into a folder hierarchy."""

import os
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .models import FileNode, Finding, FolderNode, TreeMap


def relative_segments(path: str, workspace_root: str) -> list[str]:
    """Split ``path`` into segments relative to ``workspace_root``.

    Paths outside the root (or any path when the root is empty) keep their
    absolute form. A path equal to the root is keyed by the root's basename.
    """
    relative = path
    if workspace_root:
        try:
            candidate = os.path.relpath(path, workspace_root)
        except ValueError:
            # Different drives on Windows.
            candidate = path
        if candidate == os.curdir:
            relative = os.path.basename(os.path.normpath(workspace_root)) or path
        elif candidate != os.pardir and not candidate.startswith(os.pardir + os.sep):
            relative = candidate
    normalized = relative.replace(os.sep, "/").replace("\\", "/")
    return [segment for segment in normalized.split("/") if segment]


def _child(current: TreeMap, segment: str, node_type: type, factory: Callable[[], Any]) -> Any:
    """Return the ``node_type`` child stored for ``segment``, creating it if needed.

    A name used both as a file and as a folder keeps both nodes; the second
    one is stored under ``segment + "/"``.
    """
    for key in (segment, f"{segment}/"):
        node = current.get(key)
        if node is None:
            node = factory()
            current[key] = node
            return node
        if isinstance(node, node_type):
            return node
    raise AssertionError(f"both slots for {segment!r} hold the other node type")


def build_folder_tree(findings: Iterable[Finding], workspace_root: str) -> TreeMap:
    """Build a nested mapping of folders and files from ``findings``.

    Siblings keep the order in which they were first encountered; nothing is
    sorted.
    """
    root: TreeMap = {}

    for finding in findings:
        segments = relative_segments(finding.path, workspace_root) or [finding.path]
        current = root

        for segment in segments[:-1]:
            folder = _child(current, segment, FolderNode, lambda: FolderNode(name=segment))
            current = folder.children

        file_node = _child(current, segments[-1], FileNode, lambda: FileNode(path=finding.path))
        file_node.results.append(finding)

    return root


def get_folder_issue_count(node: FolderNode | FileNode) -> int:
    """Return the number of findings reachable under ``node``."""
    if isinstance(node, FileNode):
        return len(node.results)
    return sum(get_folder_issue_count(child) for child in node.children.values())


def get_tree_issue_count(tree: TreeMap) -> int:
    """Return the number of findings in a whole folded tree."""
    return sum(get_folder_issue_count(node) for node in tree.values())


def iter_folders(tree: TreeMap) -> Iterator[FolderNode]:
    """Yield every folder in ``tree`` depth-first, in tree order."""
    for node in tree.values():
        if isinstance(node, FolderNode):
            yield node
            yield from iter_folders(node.children)

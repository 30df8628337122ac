"""Result provider: view state over the current findings and the children query."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .events import EventEmitter
from .grouping import group_by_rule
from .items import (
    ItemKind,
    ResultItem,
    folder_item,
    line_item,
    node_item,
    rule_group_item,
)
from .models import Finding, Grouping, Layout, parse_grouping, parse_layout
from .tree_builder import build_folder_tree, iter_folders

logger = logging.getLogger(__name__)

WorkspaceRoot = str | Callable[[], str | None] | None


class SearchResultProvider:
    """Serve the results tree lazily, one level per ``get_children`` call.

    Holds the findings plus two toggles (layout and grouping). Every setter
    fires ``on_did_change_tree_data``; listeners are expected to re-query.
    Folder trees and rule buckets are rebuilt on each query from the stored
    findings.
    """

    def __init__(
        self,
        workspace_root: WorkspaceRoot = "",
        layout: str | Layout = Layout.FLAT,
        grouping: str | Grouping = Grouping.NONE,
    ) -> None:
        self._results: tuple[Finding, ...] = ()
        self._layout = parse_layout(layout)
        self._grouping = parse_grouping(grouping)
        self._workspace_root = workspace_root
        self.on_did_change_tree_data = EventEmitter()

    @property
    def layout(self) -> Layout:
        return self._layout

    @layout.setter
    def layout(self, value: str | Layout) -> None:
        self._layout = parse_layout(value)
        logger.debug("Layout set to %s", self._layout.value)
        self.on_did_change_tree_data.fire()

    @property
    def grouping(self) -> Grouping:
        return self._grouping

    @grouping.setter
    def grouping(self, value: str | Grouping) -> None:
        self._grouping = parse_grouping(value)
        logger.debug("Grouping set to %s", self._grouping.value)
        self.on_did_change_tree_data.fire()

    @property
    def results(self) -> tuple[Finding, ...]:
        return self._results

    @property
    def workspace_root(self) -> str:
        """Current workspace root, empty when unavailable."""
        root = self._workspace_root
        if callable(root):
            root = root()
        return root or ""

    def set_results(self, results: Iterable[Finding]) -> None:
        self._results = tuple(results)
        logger.debug("Installed %d results", len(self._results))
        self.on_did_change_tree_data.fire()

    def get_result_count(self) -> int:
        return len(self._results)

    def get_tree_item(self, element: ResultItem) -> ResultItem:
        return element

    def get_all_folder_items(self) -> list[ResultItem]:
        """Return a folder item for every folder, depth-first (hierarchical layout only)."""
        if self._layout != Layout.HIERARCHICAL:
            return []
        tree = build_folder_tree(self._results, self.workspace_root)
        return [folder_item(node) for node in iter_folders(tree)]

    def _layout_items(self, results: Iterable[Finding], layout: Layout) -> list[ResultItem]:
        if layout == Layout.FLAT:
            return [line_item(result) for result in results]
        root = self.workspace_root
        tree = build_folder_tree(results, root)
        return [node_item(node, root) for node in tree.values()]

    def get_children(self, element: ResultItem | None = None) -> list[ResultItem]:
        """Return the display items directly under ``element`` (root when None)."""
        if element is None:
            if self._grouping == Grouping.BY_RULE:
                items = [
                    rule_group_item(rule, results, self._layout)
                    for rule, results in group_by_rule(self._results).items()
                ]
            else:
                items = self._layout_items(self._results, self._layout)
            logger.debug("Root children: %d items", len(items))
            return items

        kind = getattr(element, "kind", None)
        if kind == ItemKind.RULE_GROUP:
            return self._layout_items(element.results, element.layout or self._layout)
        if kind == ItemKind.FOLDER and element.node is not None:
            root = self.workspace_root
            return [node_item(node, root) for node in element.node.children.values()]
        if kind == ItemKind.FILE:
            return [line_item(result) for result in element.results]
        return []

    async def get_children_async(self, element: ResultItem | None = None) -> list[ResultItem]:
        """Awaitable form of :meth:`get_children` for hosts with an async pull protocol."""
        return self.get_children(element)

    def snapshot(self) -> dict[str, Any]:
        """Return the current view state (for status lines and debug output)."""
        return {
            "results": len(self._results),
            "layout": self._layout.value,
            "grouping": self._grouping.value,
            "workspace_root": self.workspace_root,
        }

"""Terminal rendering of the results tree."""

from .tree_view import ICON_GLYPHS, build_rich_tree, render_item

__all__ = ["ICON_GLYPHS", "build_rich_tree", "render_item"]

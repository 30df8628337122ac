"""Render a result provider as a rich Tree by pulling children level by level."""

from rich.text import Text
from rich.tree import Tree

from lino.modules.results import (
    Collapsible,
    ItemKind,
    ResultItem,
    SearchResultProvider,
    issue_label,
)

ICON_GLYPHS = {
    "list-filter": "≡",
    "folder": "▸",
    "file": "•",
    "symbol-variable": "α",
    "symbol-keyword": "κ",
}

KIND_STYLES = {
    ItemKind.RULE_GROUP: "bold magenta",
    ItemKind.FOLDER: "bold blue",
    ItemKind.FILE: "cyan",
    ItemKind.LINE: "",
}


def render_item(item: ResultItem) -> Text:
    """Build the one-line label for a tree row."""
    text = Text()
    text.append(f"{ICON_GLYPHS.get(item.icon, '?')} ", style="dim")
    text.append(item.label, style=KIND_STYLES.get(item.kind, ""))
    if item.description:
        text.append(f"  {item.description}", style="dim")
    return text


def _add_children(
    provider: SearchResultProvider,
    branch: Tree,
    parent: ResultItem | None,
    expand_all: bool,
) -> None:
    for child in provider.get_children(parent):
        item = provider.get_tree_item(child)
        sub = branch.add(render_item(item))
        if item.collapsible == Collapsible.NONE:
            continue
        if item.collapsible == Collapsible.COLLAPSED and not expand_all:
            continue
        _add_children(provider, sub, item, expand_all)


def build_rich_tree(
    provider: SearchResultProvider,
    title: str | None = None,
    expand_all: bool = True,
) -> Tree:
    """Pull the whole visible tree out of ``provider``.

    With ``expand_all`` False, collapsed rows (files) are shown without
    their findings.
    """
    label = title or f"Lino: {issue_label(provider.get_result_count())}"
    tree = Tree(Text(label, style="bold"), guide_style="dim")
    _add_children(provider, tree, None, expand_all)
    return tree

"""Display items for the results tree.

Each item is a plain record carrying what a host needs to render one row:
a label, a description, an icon hint and, for findings, the command that
opens the file at the reported position. ``kind`` is the discriminator the
provider switches on when asked for children.
"""

from dataclasses import dataclass, field
from enum import Enum

from .models import FileNode, Finding, FolderNode, IssueType, Layout
from .tree_builder import get_folder_issue_count, relative_segments

OPEN_FILE_COMMAND = "lino.openFile"


class ItemKind(str, Enum):
    RULE_GROUP = "ruleGroup"
    FOLDER = "folder"
    FILE = "file"
    LINE = "line"


class Collapsible(str, Enum):
    NONE = "none"
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class OpenFileCommand:
    """Navigation payload handed to the host's "open file at position" action."""

    uri: str
    line: int
    column: int
    command: str = OPEN_FILE_COMMAND
    title: str = "Open File"

    @property
    def arguments(self) -> tuple[str, int, int]:
        return (self.uri, self.line, self.column)


@dataclass(frozen=True)
class ResultItem:
    """One row of the results tree."""

    kind: ItemKind
    label: str
    description: str
    icon: str
    context_value: str
    collapsible: Collapsible
    tooltip: str | None = None
    resource_path: str | None = None
    command: OpenFileCommand | None = None
    results: tuple[Finding, ...] = ()
    layout: Layout | None = None
    node: FolderNode | None = field(default=None, compare=False)


def issue_label(count: int) -> str:
    """Return ``"1 issue"`` or ``"<n> issues"``."""
    return f"{count} {'issue' if count == 1 else 'issues'}"


def rule_group_item(
    rule: str, results: list[Finding] | tuple[Finding, ...], layout: Layout
) -> ResultItem:
    return ResultItem(
        kind=ItemKind.RULE_GROUP,
        label=rule,
        description=issue_label(len(results)),
        icon="list-filter",
        context_value="LinoNodeRuleGroup",
        collapsible=Collapsible.EXPANDED,
        results=tuple(results),
        layout=layout,
    )


def folder_item(node: FolderNode) -> ResultItem:
    return ResultItem(
        kind=ItemKind.FOLDER,
        label=node.name,
        description=issue_label(get_folder_issue_count(node)),
        icon="folder",
        context_value="LinoNodeFolder",
        collapsible=Collapsible.EXPANDED,
        node=node,
    )


def file_item(
    path: str, results: list[Finding] | tuple[Finding, ...], workspace_root: str = ""
) -> ResultItem:
    segments = relative_segments(path, workspace_root)
    label = segments[-1] if segments else path
    return ResultItem(
        kind=ItemKind.FILE,
        label=label,
        description=issue_label(len(results)),
        icon="file",
        context_value="LinoNodeFile",
        collapsible=Collapsible.COLLAPSED,
        resource_path=path,
        results=tuple(results),
    )


def line_item(result: Finding) -> ResultItem:
    return ResultItem(
        kind=ItemKind.LINE,
        label=result.text,
        description=f"Ln {result.line + 1}, Col {result.column + 1}",
        icon="symbol-variable" if result.type == IssueType.COLON_ANY else "symbol-keyword",
        context_value="LinoNodeIssue",
        collapsible=Collapsible.NONE,
        tooltip=result.text,
        command=OpenFileCommand(uri=result.uri, line=result.line, column=result.column),
        results=(result,),
    )


def node_item(node: FolderNode | FileNode, workspace_root: str = "") -> ResultItem:
    """Wrap a folded tree node into its display item."""
    if isinstance(node, FolderNode):
        return folder_item(node)
    return file_item(node.path, node.results, workspace_root)

"""Result aggregation and the lazy results tree."""

from .events import EventEmitter
from .grouping import UNKNOWN_RULE, group_by_rule, rule_buckets
from .items import Collapsible, ItemKind, OpenFileCommand, ResultItem, issue_label
from .loader import FindingsLoadError, load_findings, parse_findings
from .models import (
    FileNode,
    Finding,
    FolderNode,
    Grouping,
    IssueType,
    Layout,
    RuleBucket,
    parse_grouping,
    parse_layout,
)
from .provider import SearchResultProvider
from .tree_builder import build_folder_tree, get_folder_issue_count, get_tree_issue_count

__all__ = [
    "Collapsible",
    "EventEmitter",
    "FileNode",
    "Finding",
    "FindingsLoadError",
    "FolderNode",
    "Grouping",
    "IssueType",
    "ItemKind",
    "Layout",
    "OpenFileCommand",
    "ResultItem",
    "RuleBucket",
    "SearchResultProvider",
    "UNKNOWN_RULE",
    "build_folder_tree",
    "get_folder_issue_count",
    "get_tree_issue_count",
    "group_by_rule",
    "issue_label",
    "load_findings",
    "parse_findings",
    "parse_grouping",
    "parse_layout",
    "rule_buckets",
]

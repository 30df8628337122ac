"""Data models for scan findings and the transient tree nodes built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Literal


class IssueType(str, Enum):
    """Kind of issue reported by the scanner."""

    COLON_ANY = "colonAny"
    KEYWORD = "keyword"

    @classmethod
    def parse(cls, value: Any) -> IssueType:
        """Map a raw scanner value onto a known kind (unknown -> keyword)."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.KEYWORD


class Layout(str, Enum):
    """Flat list vs. folder hierarchy."""

    FLAT = "flat"
    HIERARCHICAL = "hierarchical"


class Grouping(str, Enum):
    """Whether findings are bucketed by rule before layout is applied."""

    NONE = "none"
    BY_RULE = "byRule"


LAYOUT_ALIASES = {"list": Layout.FLAT, "tree": Layout.HIERARCHICAL}
GROUPING_ALIASES = {"default": Grouping.NONE, "rule": Grouping.BY_RULE}


def parse_layout(value: str | Layout) -> Layout:
    """Parse a layout name, accepting the ``list``/``tree`` aliases."""
    if isinstance(value, Layout):
        return value
    if value in LAYOUT_ALIASES:
        return LAYOUT_ALIASES[value]
    return Layout(value)


def parse_grouping(value: str | Grouping) -> Grouping:
    """Parse a grouping name, accepting the ``default``/``rule`` aliases."""
    if isinstance(value, Grouping):
        return value
    if value in GROUPING_ALIASES:
        return GROUPING_ALIASES[value]
    return Grouping(value)


@dataclass(frozen=True)
class Finding:
    """One reported issue at a file position."""

    uri: str
    path: str
    line: int
    column: int
    text: str
    rule: str | None = None
    type: IssueType = IssueType.KEYWORD

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Finding:
        """Build a finding from a scanner JSON record.

        Accepts ``path`` or ``file`` for the location, ``text`` or ``message``
        for the display string, and derives ``uri`` from the path when absent.
        """
        path = str(data.get("path") or data.get("file") or "")
        rule = data.get("rule")
        uri = data.get("uri") or (Path(path).as_uri() if Path(path).is_absolute() else path)
        return cls(
            uri=str(uri),
            path=path,
            line=int(data.get("line", 0) or 0),
            column=int(data.get("column", data.get("col", 0)) or 0),
            text=str(data.get("text") or data.get("message") or ""),
            rule=str(rule) if rule not in (None, "") else None,
            type=IssueType.parse(data.get("type")),
        )


@dataclass
class FileNode:
    """All findings that share one file path."""

    path: str
    results: list[Finding] = field(default_factory=list)
    type: Literal["file"] = "file"


@dataclass
class FolderNode:
    """One directory level relative to the workspace root."""

    name: str
    children: dict[str, FolderNode | FileNode] = field(default_factory=dict)
    type: Literal["folder"] = "folder"


TreeMap = dict[str, FolderNode | FileNode]


@dataclass(frozen=True)
class RuleBucket:
    """Findings reported by a single rule, in discovery order."""

    rule: str
    results: tuple[Finding, ...]

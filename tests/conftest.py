"""Test configuration and fixtures for lino."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from lino.modules.results import Finding, IssueType, SearchResultProvider


def _make_finding(
    path: str,
    line: int = 0,
    column: int = 0,
    rule: str | None = None,
    text: str = "issue",
    type: IssueType = IssueType.KEYWORD,
) -> Finding:
    return Finding(
        uri=f"file://{path}",
        path=path,
        line=line,
        column=column,
        text=text,
        rule=rule,
        type=type,
    )


@pytest.fixture
def make_finding():
    """Factory for findings with a file:// uri derived from the path."""
    return _make_finding


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def scenario_findings() -> list[Finding]:
    """Two findings under /root/a for rule r1 and one at /root/x.txt for r2."""
    return [
        _make_finding("/root/a/b.txt", 0, 0, rule="r1", text="first"),
        _make_finding("/root/a/c.txt", 1, 2, rule="r1", text="second"),
        _make_finding("/root/x.txt", 0, 0, rule="r2", text="third"),
    ]


@pytest.fixture
def provider(scenario_findings: list[Finding]) -> SearchResultProvider:
    """Provider rooted at /root holding the scenario findings."""
    provider = SearchResultProvider(workspace_root="/root")
    provider.set_results(scenario_findings)
    return provider

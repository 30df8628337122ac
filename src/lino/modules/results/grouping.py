"""Helpers for grouping findings."""

from collections.abc import Iterable

from .models import Finding, RuleBucket

UNKNOWN_RULE = "unknown"


def group_by_rule(findings: Iterable[Finding]) -> dict[str, list[Finding]]:
    """Group findings by rule, keyed in order of first occurrence."""
    grouped: dict[str, list[Finding]] = {}
    for finding in findings:
        rule = finding.rule or UNKNOWN_RULE
        grouped.setdefault(rule, []).append(finding)
    return grouped


def rule_buckets(findings: Iterable[Finding]) -> list[RuleBucket]:
    """Return :func:`group_by_rule` as a list of buckets."""
    return [
        RuleBucket(rule=rule, results=tuple(results))
        for rule, results in group_by_rule(findings).items()
    ]

"""Dispatch a snippet to its language rule set and aggregate the findings."""

import logging
from typing import Iterable, Mapping

from .languages import LANGUAGE_REGISTRY, RuleSet
from .models import AnalysisResult, Bug, Severity, Summary

logger = logging.getLogger(__name__)


def list_supported_languages(registry: Mapping[str, RuleSet] = LANGUAGE_REGISTRY) -> frozenset[str]:
    return frozenset(registry)


def sort_bugs(bugs: Iterable[Bug]) -> list[Bug]:
    """Order bugs by line; bugs on the same line keep their emission order."""
    return sorted(bugs, key=lambda bug: bug.line)


def summarize(bugs: Iterable[Bug]) -> Summary:
    counts = {severity: 0 for severity in Severity}
    for bug in bugs:
        counts[bug.severity] += 1
    return Summary(
        critical=counts[Severity.critical],
        warning=counts[Severity.warning],
        info=counts[Severity.info],
    )


def analyze(
    code: str,
    language: str,
    registry: Mapping[str, RuleSet] = LANGUAGE_REGISTRY,
) -> AnalysisResult:
    """
    Run the rule set registered for ``language`` over ``code``.

    An unregistered language gives an empty result. Errors raised by a rule
    set propagate to the caller; no partial result is returned.
    """
    rule_set = registry.get(language)
    if rule_set is None:
        logger.info(f"No rule set for language '{language}'")
        return AnalysisResult()

    bugs = sort_bugs(rule_set(code))
    summary = summarize(bugs)
    logger.info(
        f"Analyzed {language} snippet: {len(bugs)} bugs "
        f"({summary.critical} critical, {summary.warning} warning, {summary.info} info)"
    )
    return AnalysisResult(bugs=bugs, summary=summary)

"""Run the lint rules over a VariantConfig.

Linting is opt-in: resolution stays permissive whatever the rules report.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Iterable

from classvariance.model.config import VariantConfig
from classvariance.model.diagnostic import Diagnostic, Severity
from classvariance.validation.rules import ALL_RULES

logger = logging.getLogger(__name__)

RuleFunc = Callable[[VariantConfig], list[Diagnostic]]


class ValidationError(Exception):
    """A config has ERROR findings; ``diagnostics`` holds them."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        details = "; ".join(str(d) for d in diagnostics)
        super().__init__(f"Config has {len(diagnostics)} error(s): {details}")


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    """Number of findings per severity, with every severity present."""
    counts = Counter(d.severity for d in diagnostics)
    return {severity: counts.get(severity, 0) for severity in Severity}


def validate(
    config: VariantConfig, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Lint *config* with the built-in rules plus *extra_rules*, in that order."""
    rules = [*ALL_RULES, *(extra_rules or [])]
    diagnostics = [d for rule in rules for d in rule(config)]
    logger.debug(
        "Linted %d variant(s) with %d rule(s): %s",
        len(config.variant_names),
        len(rules),
        {s.value: n for s, n in count_by_severity(diagnostics).items()},
    )
    return diagnostics


def validate_or_raise(
    config: VariantConfig, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`validate`, but raise :class:`ValidationError` on ERROR findings.

    Returns the warnings and info findings otherwise.
    """
    diagnostics = validate(config, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics

"""Compound rule matching against an effective selection.

A rule matches when every one of its conditions holds:
    required value      -> selection value equals it
    collection of values -> selection value is one of them

Values match when they are equal or share a class-string form, so ``True``
and ``"true"`` are the same requirement.  Requirements and class fragments
that have no class-string form never match and contribute nothing.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from classvariance.classnames import is_class_value, to_class_string
from classvariance.model.config import CLASS_KEYS, MULTI_VALUE_TYPES, CompoundRule

__all__ = ["condition_holds", "rule_matches", "matching_classes"]


def _same_value(option: Any, actual: Any, actual_str: str) -> bool:
    if not is_class_value(option):
        return False
    # True == 1 in Python; booleans only match booleans or their string form
    if isinstance(option, bool) == isinstance(actual, bool) and option == actual:
        return True
    return to_class_string(option) == actual_str


def condition_holds(required: Any, actual: Any) -> bool:
    """Return True if *actual* satisfies the *required* value or values.

    Raises TypeError when *actual* has no class-string form.
    """
    actual_str = to_class_string(actual)
    if isinstance(required, MULTI_VALUE_TYPES):
        return any(_same_value(option, actual, actual_str) for option in required)
    return _same_value(required, actual, actual_str)


def rule_matches(rule: CompoundRule, selection: Mapping[str, Any]) -> bool:
    """Evaluate *rule* against an effective (defaults applied) *selection*.

    A rule without conditions matches unconditionally.
    """
    for key, required in rule.conditions.items():
        if key in CLASS_KEYS:
            continue
        if not condition_holds(required, selection.get(key)):
            return False
    return True


def matching_classes(
    rules: Iterable[CompoundRule], selection: Mapping[str, Any]
) -> list[str]:
    """Class fragments of every matching rule, in declaration order."""
    classes: list[str] = []
    for rule in rules:
        if not is_class_value(rule.class_name):
            continue
        if rule_matches(rule, selection):
            classes.append(to_class_string(rule.class_name))
    return classes

"""Lint rules for variant configurations.

Each rule is a function taking a VariantConfig and returning a list of
Diagnostic objects.  The resolver never runs these; they report what it
would otherwise ignore silently.
"""

from __future__ import annotations

from classvariance.classnames import is_class_value, to_class_string
from classvariance.model.config import CLASS_KEYS, MULTI_VALUE_TYPES, VariantConfig
from classvariance.model.diagnostic import Diagnostic, Severity


def _declared_values(config: VariantConfig, name: str) -> set[str]:
    if config.variants is None or name not in config.variants:
        return set()
    return set(config.variants[name])


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_reserved_variant_name(config: VariantConfig) -> list[Diagnostic]:
    """Variants may not use the reserved ``class`` keys as their name."""
    diagnostics: list[Diagnostic] = []
    for name in config.variant_names:
        if name in CLASS_KEYS:
            diagnostics.append(
                Diagnostic(
                    rule="check_reserved_variant_name",
                    severity=Severity.ERROR,
                    message=f"Variant name '{name}' is reserved for extra classes.",
                    variant=name,
                    fix="Rename the variant.",
                )
            )
    return diagnostics


def check_compound_has_class(config: VariantConfig) -> list[Diagnostic]:
    """Every compound rule must carry a non-empty class fragment."""
    diagnostics: list[Diagnostic] = []
    for index, rule in enumerate(config.compound_variants):
        if not is_class_value(rule.class_name):
            diagnostics.append(
                Diagnostic(
                    rule="check_compound_has_class",
                    severity=Severity.ERROR,
                    message=(
                        f"Compound rule {index} has a {type(rule.class_name).__name__} "
                        "class; it is never applied."
                    ),
                    compound_index=index,
                    fix="Use a space-separated class string.",
                )
            )
        elif not to_class_string(rule.class_name).strip():
            diagnostics.append(
                Diagnostic(
                    rule="check_compound_has_class",
                    severity=Severity.ERROR,
                    message=f"Compound rule {index} has no class to apply.",
                    compound_index=index,
                    fix="Add a 'class' entry to the compound rule.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Reference rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_variant_not_empty(config: VariantConfig) -> list[Diagnostic]:
    """A variant with no values makes every combination impossible."""
    diagnostics: list[Diagnostic] = []
    for name in config.variant_names:
        if not _declared_values(config, name):
            diagnostics.append(
                Diagnostic(
                    rule="check_variant_not_empty",
                    severity=Severity.WARNING,
                    message=f"Variant '{name}' declares no values.",
                    variant=name,
                    fix="Declare at least one value or remove the variant.",
                )
            )
    return diagnostics


def check_default_variant_known(config: VariantConfig) -> list[Diagnostic]:
    """Default selections should name declared variants."""
    known = set(config.variant_names)
    diagnostics: list[Diagnostic] = []
    for name in config.default_variants:
        if name not in known:
            diagnostics.append(
                Diagnostic(
                    rule="check_default_variant_known",
                    severity=Severity.WARNING,
                    message=f"Default given for undeclared variant '{name}'.",
                    variant=name,
                    fix="Declare the variant or drop the default.",
                )
            )
    return diagnostics


def check_default_value_known(config: VariantConfig) -> list[Diagnostic]:
    """Default values should be declared values of their variant."""
    known = set(config.variant_names)
    diagnostics: list[Diagnostic] = []
    for name, value in config.default_variants.items():
        if name not in known or value is None:
            continue
        if not is_class_value(value):
            diagnostics.append(
                Diagnostic(
                    rule="check_default_value_known",
                    severity=Severity.WARNING,
                    message=f"Default for variant '{name}' is a {type(value).__name__}; it is ignored.",
                    variant=name,
                    fix="Use a string, number or boolean default.",
                )
            )
            continue
        if to_class_string(value) not in _declared_values(config, name):
            diagnostics.append(
                Diagnostic(
                    rule="check_default_value_known",
                    severity=Severity.WARNING,
                    message=f"Default value '{to_class_string(value)}' is not declared for variant '{name}'.",
                    variant=name,
                    fix=f"Use one of: {', '.join(sorted(_declared_values(config, name)))}.",
                )
            )
    return diagnostics


def check_compound_variant_known(config: VariantConfig) -> list[Diagnostic]:
    """Compound conditions should reference declared variants."""
    known = set(config.variant_names)
    diagnostics: list[Diagnostic] = []
    for index, rule in enumerate(config.compound_variants):
        for name in rule.conditions:
            if name in CLASS_KEYS or name in known:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_compound_variant_known",
                    severity=Severity.WARNING,
                    message=f"Compound rule {index} references undeclared variant '{name}'.",
                    variant=name,
                    compound_index=index,
                    fix="Declare the variant or remove the condition.",
                )
            )
    return diagnostics


def check_compound_value_known(config: VariantConfig) -> list[Diagnostic]:
    """Compound conditions should require declared values."""
    known = set(config.variant_names)
    diagnostics: list[Diagnostic] = []
    for index, rule in enumerate(config.compound_variants):
        for name, required in rule.conditions.items():
            if name not in known:
                continue
            options = required if isinstance(required, MULTI_VALUE_TYPES) else (required,)
            declared = _declared_values(config, name)
            for option in options:
                if not is_class_value(option):
                    diagnostics.append(
                        Diagnostic(
                            rule="check_compound_value_known",
                            severity=Severity.WARNING,
                            message=(
                                f"Compound rule {index} requires a {type(option).__name__} "
                                f"for variant '{name}'."
                            ),
                            variant=name,
                            compound_index=index,
                            fix="Require a string, number or boolean, or a list of them.",
                        )
                    )
                    continue
                if to_class_string(option) in declared:
                    continue
                diagnostics.append(
                    Diagnostic(
                        rule="check_compound_value_known",
                        severity=Severity.WARNING,
                        message=(
                            f"Compound rule {index} requires undeclared value "
                            f"'{to_class_string(option)}' for variant '{name}'."
                        ),
                        variant=name,
                        compound_index=index,
                        fix="The rule can never match on this value.",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_reserved_variant_name,
    check_compound_has_class,
    check_variant_not_empty,
    check_default_variant_known,
    check_default_value_known,
    check_compound_variant_known,
    check_compound_value_known,
]

"""Configuration model: VariantConfig and CompoundRule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

# Keys that carry class text rather than a variant condition.
CLASS_KEYS = ("class", "className")

# Requirement values of these types mean "any of these values".
MULTI_VALUE_TYPES = (list, tuple, set, frozenset)


def _freeze_requirement(value: Any) -> Any:
    if isinstance(value, MULTI_VALUE_TYPES):
        return tuple(value)
    return value


@dataclass(frozen=True)
class CompoundRule:
    """Extra classes applied when every condition matches the selection.

    ``conditions`` maps a variant name to the required value, or to a
    tuple of allowed values.  An empty ``conditions`` always matches.
    """

    conditions: Mapping[str, Any] = field(default_factory=dict)
    class_name: str = ""

    def __post_init__(self) -> None:
        frozen = {
            key: _freeze_requirement(value) for key, value in self.conditions.items()
        }
        object.__setattr__(self, "conditions", MappingProxyType(frozen))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CompoundRule:
        """Build a rule from a flat mapping with a ``class`` key.

        ``{"size": "sm", "type": "primary", "class": "uppercase"}``
        """
        class_name = ""
        for key in CLASS_KEYS:
            if data.get(key) is not None:
                class_name = data[key]
                break
        conditions = {k: v for k, v in data.items() if k not in CLASS_KEYS}
        return cls(conditions=conditions, class_name=class_name)


@dataclass(frozen=True)
class VariantConfig:
    """Immutable variant configuration shared by every resolution.

    Attributes:
        base: Class fragments that are always applied.
        variants: Variant name -> value -> class fragment, or None for no schema.
        default_variants: Variant name -> value used when a selection omits it.
        compound_variants: Rules applied in declaration order.
    """

    base: tuple[str, ...] = ()
    variants: Mapping[str, Mapping[str, str]] | None = None
    default_variants: Mapping[str, Any] = field(default_factory=dict)
    compound_variants: tuple[CompoundRule, ...] = ()

    def __post_init__(self) -> None:
        base = (self.base,) if isinstance(self.base, str) else tuple(self.base or ())
        object.__setattr__(self, "base", base)

        if self.variants is not None:
            variants = {
                name: MappingProxyType(dict(values))
                for name, values in self.variants.items()
            }
            object.__setattr__(self, "variants", MappingProxyType(variants))

        object.__setattr__(
            self, "default_variants", MappingProxyType(dict(self.default_variants or {}))
        )
        object.__setattr__(
            self, "compound_variants", _freeze_rules(self.compound_variants or ())
        )

    @property
    def variant_names(self) -> list[str]:
        if self.variants is None:
            return []
        return list(self.variants)


def _freeze_rules(rules: Iterable[CompoundRule | Mapping[str, Any]]) -> tuple[CompoundRule, ...]:
    frozen: list[CompoundRule] = []
    for rule in rules:
        if isinstance(rule, CompoundRule):
            frozen.append(rule)
        else:
            frozen.append(CompoundRule.from_mapping(rule))
    return tuple(frozen)

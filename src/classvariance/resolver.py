"""Variant resolver: turns a selection into a class string.

Example::

    button = cva(
        base=["button", "font-semibold"],
        variants={
            "type": {
                "primary": "bg-blue-500 text-white",
                "secondary": "bg-gray-200 text-gray-900",
            },
            "size": {"sm": "text-sm px-2 py-1", "lg": "text-lg px-4 py-2"},
        },
        default_variants={"type": "primary", "size": "sm"},
    )

    button()                                 # defaults
    button({"type": "secondary", "size": "lg"})
    button(size="lg", class_="w-full")
"""

from __future__ import annotations

from itertools import product
from typing import Any, Iterable, Mapping

from classvariance.classnames import combine_classes, is_class_value, to_class_string
from classvariance.compound import matching_classes
from classvariance.model.config import CLASS_KEYS, CompoundRule, VariantConfig

__all__ = ["CVA", "cva"]

Selection = Mapping[str, Any]


def _extra_class(selection: Selection) -> Any:
    for key in CLASS_KEYS:
        value = selection.get(key)
        if value is not None:
            return value
    return None


def _merge_selection(selection: Selection | None, kwargs: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(selection) if selection else {}
    if "class_" in kwargs:
        kwargs["class"] = kwargs.pop("class_")
    merged.update(kwargs)
    return merged


class CVA:
    """Class variance resolver over an immutable :class:`VariantConfig`.

    The resolver holds no mutable state; one instance can be shared freely
    between threads.
    """

    def __init__(
        self,
        base: str | Iterable[str] = (),
        variants: Mapping[str, Mapping[str, str]] | None = None,
        default_variants: Mapping[str, Any] | None = None,
        compound_variants: Iterable[CompoundRule | Mapping[str, Any]] | None = None,
        *,
        config: VariantConfig | None = None,
    ) -> None:
        if config is None:
            config = VariantConfig(
                base=base,
                variants=variants,
                default_variants=default_variants or {},
                compound_variants=tuple(compound_variants or ()),
            )
        self._config = config

    # --- configuration --------------------------------------------------------

    @property
    def config(self) -> VariantConfig:
        return self._config

    @property
    def base(self) -> tuple[str, ...]:
        return self._config.base

    @property
    def variants(self) -> Mapping[str, Mapping[str, str]] | None:
        return self._config.variants

    @property
    def default_variants(self) -> Mapping[str, Any]:
        return self._config.default_variants

    @property
    def compound_variants(self) -> tuple[CompoundRule, ...]:
        return self._config.compound_variants

    # --- resolution -----------------------------------------------------------

    def effective_selection(self, selection: Selection | None = None) -> dict[str, Any]:
        """Return *selection* with defaults filled in for missing or empty keys.

        Defaults without a class-string form are left out.
        """
        effective = dict(selection) if selection else {}
        for name, default in self._config.default_variants.items():
            if to_class_string(effective.get(name)) == "" and is_class_value(default):
                effective[name] = default
        return effective

    def variant_classes(self, selection: Selection | None = None) -> list[str]:
        """Class fragments contributed by each variant, in schema order."""
        variants = self._config.variants
        if not variants:
            return []
        effective = self.effective_selection(selection)
        classes: list[str] = []
        for name, values in variants.items():
            key = to_class_string(effective.get(name))
            if not key:
                continue
            fragment = values.get(key)
            if fragment is not None:
                classes.append(fragment)
        return classes

    def resolve(self, selection: Selection | None = None, **kwargs: Any) -> str:
        """Build the class string for *selection*.

        Keyword arguments are merged into *selection*; ``class_`` stands in
        for the reserved ``class`` key.  Unknown variant names and values
        contribute nothing.
        """
        params = _merge_selection(selection, kwargs)
        extra = _extra_class(params)

        if self._config.variants is None:
            return combine_classes([*self._config.base, extra])

        effective = self.effective_selection(params)
        return combine_classes([
            *self._config.base,
            *self.variant_classes(params),
            *matching_classes(self._config.compound_variants, effective),
            extra,
        ])

    __call__ = resolve

    # --- enumeration ----------------------------------------------------------

    def enumerate_combinations(self) -> list[dict[str, str]]:
        """Every combination of declared variant values.

        The first variant is the outermost loop and the last varies fastest.
        Without variants the result is a single empty selection.
        """
        variants = self._config.variants
        if not variants:
            return [{}]
        names = list(variants)
        return [
            dict(zip(names, values))
            for values in product(*(list(variants[name]) for name in names))
        ]

    get_all_variant_combinations = enumerate_combinations

    def resolve_all(self) -> list[tuple[dict[str, str], str]]:
        """Pair every combination with its resolved class string."""
        return [(combo, self.resolve(combo)) for combo in self.enumerate_combinations()]

    def __repr__(self) -> str:
        cfg = self._config
        variants = None if cfg.variants is None else {k: dict(v) for k, v in cfg.variants.items()}
        return (
            f"CVA(base={list(cfg.base)!r}, variants={variants!r}, "
            f"default_variants={dict(cfg.default_variants)!r}, "
            f"compound_variants={list(cfg.compound_variants)!r})"
        )


def cva(
    base: str | Iterable[str] = (),
    variants: Mapping[str, Mapping[str, str]] | None = None,
    default_variants: Mapping[str, Any] | None = None,
    compound_variants: Iterable[CompoundRule | Mapping[str, Any]] | None = None,
) -> CVA:
    """Create a :class:`CVA` resolver.

    >>> button = cva(base=["button"], variants={"size": {"sm": "text-sm"}})
    >>> button(size="sm")
    'button text-sm'
    """
    return CVA(
        base=base,
        variants=variants,
        default_variants=default_variants,
        compound_variants=compound_variants,
    )

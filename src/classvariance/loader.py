"""Build a VariantConfig from a JSON document.

Document shape::

    {
      "base": ["button", "font-semibold"],
      "variants": {"size": {"sm": "text-sm", "lg": "text-lg"}},
      "defaultVariants": {"size": "sm"},
      "compoundVariants": [{"size": "lg", "class": "uppercase"}]
    }

``default_variants`` and ``compound_variants`` are accepted as aliases.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from classvariance.model.config import CLASS_KEYS, CompoundRule, VariantConfig

__all__ = ["ConfigError", "config_from_dict", "load_config"]

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool)


class ConfigError(ValueError):
    """Raised when a configuration document is malformed."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        if key:
            message = f"{key}: {message}"
        super().__init__(message)


def _pick(data: dict[str, Any], *names: str) -> Any:
    for name in names:
        if name in data:
            return data[name]
    return None


def _parse_base(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, list) or not all(isinstance(c, str) for c in raw):
        raise ConfigError("expected a string or a list of strings", key="base")
    return tuple(raw)


def _parse_variants(raw: Any) -> dict[str, dict[str, str]] | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ConfigError("expected an object", key="variants")
    variants: dict[str, dict[str, str]] = {}
    for name, values in raw.items():
        if not isinstance(values, dict):
            raise ConfigError("expected an object of value -> classes", key=f"variants.{name}")
        for value, classes in values.items():
            if not isinstance(classes, str):
                raise ConfigError("expected a class string", key=f"variants.{name}.{value}")
        variants[name] = dict(values)
    return variants


def _parse_defaults(raw: Any) -> dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("expected an object", key="defaultVariants")
    for name, value in raw.items():
        if value is not None and not isinstance(value, _SCALARS):
            raise ConfigError("expected a scalar value", key=f"defaultVariants.{name}")
    return dict(raw)


def _parse_compound(raw: Any) -> tuple[CompoundRule, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError("expected a list", key="compoundVariants")
    rules: list[CompoundRule] = []
    for index, entry in enumerate(raw):
        key = f"compoundVariants[{index}]"
        if not isinstance(entry, dict):
            raise ConfigError("expected an object", key=key)
        class_name = _pick(entry, *CLASS_KEYS)
        if class_name is not None and not isinstance(class_name, str):
            raise ConfigError("'class' must be a string", key=key)
        for name, required in entry.items():
            if name in CLASS_KEYS:
                continue
            options = required if isinstance(required, list) else [required]
            if not all(o is None or isinstance(o, _SCALARS) for o in options):
                raise ConfigError("expected a scalar or a list of scalars", key=f"{key}.{name}")
        rules.append(CompoundRule.from_mapping(entry))
    return tuple(rules)


def config_from_dict(data: Any) -> VariantConfig:
    """Build a :class:`VariantConfig` from a decoded JSON object."""
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")
    return VariantConfig(
        base=_parse_base(data.get("base")),
        variants=_parse_variants(data.get("variants")),
        default_variants=_parse_defaults(_pick(data, "defaultVariants", "default_variants")),
        compound_variants=_parse_compound(_pick(data, "compoundVariants", "compound_variants")),
    )


def load_config(path: Path | str) -> VariantConfig:
    """Read and parse the JSON configuration at *path*."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON at line {exc.lineno}: {exc.msg}") from exc
    config = config_from_dict(data)
    logger.debug(
        "Loaded %s: %d variant(s), %d compound rule(s)",
        path,
        len(config.variant_names),
        len(config.compound_variants),
    )
    return config

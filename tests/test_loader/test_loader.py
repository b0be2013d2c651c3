"""Tests for building variant configs from JSON documents."""

import json

import pytest

from classvariance import CVA
from classvariance.loader import ConfigError, config_from_dict, load_config


BUTTON = {
    "base": ["button", "font-semibold"],
    "variants": {
        "type": {"primary": "bg-blue-500 text-white", "secondary": "bg-gray-200 text-gray-900"},
        "size": {"sm": "text-sm px-2 py-1", "lg": "text-lg px-4 py-2"},
    },
    "defaultVariants": {"type": "primary", "size": "sm"},
    "compoundVariants": [{"size": "lg", "type": ["primary", "secondary"], "class": "uppercase"}],
}


# ---------------------------------------------------------------------------
# config_from_dict
# ---------------------------------------------------------------------------


class TestConfigFromDict:
    def test_full_document(self):
        config = config_from_dict(BUTTON)
        assert config.base == ("button", "font-semibold")
        assert config.variant_names == ["type", "size"]
        assert dict(config.default_variants) == {"type": "primary", "size": "sm"}
        assert len(config.compound_variants) == 1
        assert config.compound_variants[0].class_name == "uppercase"

    def test_resolves_like_keyword_config(self):
        resolver = CVA(config=config_from_dict(BUTTON))
        assert resolver() == "button font-semibold bg-blue-500 text-white text-sm px-2 py-1"
        assert resolver(size="lg").endswith("uppercase")

    def test_snake_case_aliases(self):
        config = config_from_dict({
            "variants": {"size": {"sm": "text-sm"}},
            "default_variants": {"size": "sm"},
            "compound_variants": [{"size": "sm", "class": "x"}],
        })
        assert dict(config.default_variants) == {"size": "sm"}
        assert len(config.compound_variants) == 1

    def test_empty_document(self):
        config = config_from_dict({})
        assert config.base == ()
        assert config.variants is None

    def test_string_base(self):
        assert config_from_dict({"base": "btn"}).base == ("btn",)


class TestConfigErrors:
    def test_not_an_object(self):
        with pytest.raises(ConfigError, match="JSON object"):
            config_from_dict([1, 2])

    def test_bad_base(self):
        with pytest.raises(ConfigError) as exc_info:
            config_from_dict({"base": [1]})
        assert exc_info.value.key == "base"

    def test_bad_variant_values(self):
        with pytest.raises(ConfigError, match="variants.size"):
            config_from_dict({"variants": {"size": ["sm"]}})

    def test_bad_variant_fragment(self):
        with pytest.raises(ConfigError, match="variants.size.sm"):
            config_from_dict({"variants": {"size": {"sm": 3}}})

    def test_bad_default(self):
        with pytest.raises(ConfigError, match="defaultVariants.size"):
            config_from_dict({"defaultVariants": {"size": {"x": 1}}})

    def test_bad_compound_list(self):
        with pytest.raises(ConfigError, match="compoundVariants"):
            config_from_dict({"compoundVariants": {"size": "sm"}})

    def test_bad_compound_class(self):
        with pytest.raises(ConfigError, match=r"compoundVariants\[0\]"):
            config_from_dict({"compoundVariants": [{"class": ["a"]}]})

    def test_bad_compound_condition(self):
        with pytest.raises(ConfigError, match=r"compoundVariants\[0\]\.size"):
            config_from_dict({"compoundVariants": [{"size": {"a": 1}, "class": "x"}]})

    def test_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_load_file(self, tmp_path):
        path = tmp_path / "button.json"
        path.write_text(json.dumps(BUTTON), encoding="utf-8")
        config = load_config(path)
        assert config.variant_names == ["type", "size"]

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "button.json"
        path.write_text(json.dumps(BUTTON), encoding="utf-8")
        assert load_config(str(path)).base == ("button", "font-semibold")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_config(path)

"""
Tests for rules loading and the config builders.
"""

import pytest

from primkit.components.encoding import EncodingConfig
from primkit.components.formatting import FormatConfig
from primkit.components.strings import StringsConfig
from primkit.components.validation import PasswordPolicy
from primkit.rules.loader import (
    build_component_configs,
    build_encoding_config,
    build_format_config,
    build_password_policy,
    build_strings_config,
    load_rules,
)
from primkit.rules.models import Rules


class TestLoadRules:
    def test_project_rules_match_defaults(self, rules) -> None:
        assert rules == Rules()

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_empty_file_means_defaults(self, write_rules) -> None:
        assert load_rules(write_rules("")) == Rules()

    def test_partial_override(self, write_rules) -> None:
        rules = load_rules(write_rules("formatting:\n  locale: de-DE\n"))
        assert rules.formatting.locale == "de-DE"
        assert rules.formatting.currency == "USD"

    def test_yaml_in_markdown_fence(self, write_rules) -> None:
        content = "# Rules\n\nSome notes.\n\n```yaml\nstrings:\n  truncate_suffix: '~'\n```\n"
        rules = load_rules(write_rules(content, "rules.md"))
        assert rules.strings.truncate_suffix == "~"

    def test_invalid_yaml(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write_rules("strings: [unclosed\n"))

    def test_unknown_section(self, write_rules) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write_rules("database:\n  path: x.db\n"))

    def test_unsupported_locale(self, write_rules) -> None:
        with pytest.raises(ValueError):
            load_rules(write_rules("formatting:\n  locale: xx-XX\n"))

    def test_negative_min_length(self, write_rules) -> None:
        with pytest.raises(ValueError):
            load_rules(write_rules("validation:\n  password:\n    min_length: -1\n"))

    @pytest.mark.parametrize("content", [
        "validation:\n  password:\n    min_lenght: 10\n",
        "strings:\n  truncate_sufix: '~'\n",
        "formatting:\n  curency: EUR\n",
        "encoding:\n  password:\n    lenght: 20\n",
    ])
    def test_misspelt_nested_key(self, write_rules, content: str) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write_rules(content))

    def test_logs_success(self, rules_path, caplog) -> None:
        with caplog.at_level("INFO", logger="primkit.rules.loader"):
            load_rules(rules_path)
        assert "Rules loaded" in caplog.text


class TestBuilders:
    def test_defaults_build_default_configs(self, rules) -> None:
        assert build_strings_config(rules) == StringsConfig()
        assert build_password_policy(rules) == PasswordPolicy()
        assert build_format_config(rules) == FormatConfig()
        assert build_encoding_config(rules) == EncodingConfig()

    def test_overrides_flow_through(self, write_rules) -> None:
        rules = load_rules(write_rules(
            "formatting:\n  currency: eur\n"
            "validation:\n  password:\n    min_length: 12\n"
            "encoding:\n  password:\n    length: 20\n    include_symbols: false\n"
        ))
        assert build_format_config(rules).currency == "EUR"
        assert build_password_policy(rules).min_length == 12
        options = build_encoding_config(rules).password
        assert options.length == 20
        assert not options.include_symbols

    def test_component_configs_keyed_by_parameter(self, rules) -> None:
        configs = build_component_configs(rules)
        assert set(configs) == {"strings", "validation", "formatting", "encoding"}
        assert isinstance(configs["validation"]["policy"], PasswordPolicy)
        assert isinstance(configs["formatting"]["config"], FormatConfig)

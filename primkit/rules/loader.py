import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from primkit.components.encoding.models import EncodingConfig, PasswordOptions
from primkit.components.formatting.models import FormatConfig
from primkit.components.strings.models import StringsConfig
from primkit.components.validation.models import PasswordPolicy
from primkit.rules.models import Rules

logger = logging.getLogger(__name__)


def _extract_yaml(content: str) -> str:
    """Return the first ```yaml fenced block, or the whole text if there is none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_rules(path: Path) -> Rules:
    """
    Load and validate a rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        logger.error("Invalid YAML in rules file %s", path)
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        logger.error("Rules validation failed for %s", path)
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Rules loaded from %s", path)
    return rules


# --- Config Builders ---


def build_strings_config(rules: Rules) -> StringsConfig:
    return StringsConfig(
        default_charset=rules.strings.default_charset,
        truncate_suffix=rules.strings.truncate_suffix,
    )


def build_password_policy(rules: Rules) -> PasswordPolicy:
    policy = rules.validation.password
    return PasswordPolicy(
        min_length=policy.min_length,
        require_uppercase=policy.require_uppercase,
        require_lowercase=policy.require_lowercase,
        require_numbers=policy.require_numbers,
        require_special_chars=policy.require_special_chars,
    )


def build_format_config(rules: Rules) -> FormatConfig:
    return FormatConfig(
        locale=rules.formatting.locale,
        currency=rules.formatting.currency.upper(),
        title_small_words=tuple(w.lower() for w in rules.formatting.title_small_words),
    )


def build_encoding_config(rules: Rules) -> EncodingConfig:
    generator = rules.encoding.password
    return EncodingConfig(
        default_charset=rules.encoding.default_charset,
        password=PasswordOptions(
            length=generator.length,
            include_uppercase=generator.include_uppercase,
            include_lowercase=generator.include_lowercase,
            include_numbers=generator.include_numbers,
            include_symbols=generator.include_symbols,
        ),
    )


def build_component_configs(rules: Rules) -> dict[str, dict[str, Any]]:
    """
    Keyword overrides per component, keyed by the parameter name each
    component's functions accept.
    """
    return {
        "strings": {"config": build_strings_config(rules)},
        "validation": {"policy": build_password_policy(rules)},
        "formatting": {"config": build_format_config(rules)},
        "encoding": {"config": build_encoding_config(rules)},
    }

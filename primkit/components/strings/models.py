"""
Strings component configuration.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


@dataclass(frozen=True)
class StringsConfig:
    """Defaults for string helpers."""

    default_charset: str = ALPHANUMERIC
    truncate_suffix: str = "..."


DEFAULT_CONFIG = StringsConfig()

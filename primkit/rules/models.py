from pydantic import BaseModel, ConfigDict, Field, field_validator

from primkit.components.encoding.models import ALPHANUMERIC
from primkit.components.formatting.models import LOCALES, SMALL_TITLE_WORDS


class StringsRules(BaseModel):
    default_charset: str = Field(default=ALPHANUMERIC, min_length=1)
    truncate_suffix: str = "..."

    model_config = ConfigDict(extra="forbid")

class PasswordPolicyRules(BaseModel):
    min_length: int = Field(default=8, ge=0)
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = False

    model_config = ConfigDict(extra="forbid")

class ValidationRules(BaseModel):
    password: PasswordPolicyRules = Field(default_factory=PasswordPolicyRules)

    model_config = ConfigDict(extra="forbid")

class FormattingRules(BaseModel):
    locale: str = "en-US"
    currency: str = Field(default="USD", min_length=3, max_length=3)
    title_small_words: list[str] = Field(default_factory=lambda: list(SMALL_TITLE_WORDS))

    model_config = ConfigDict(extra="forbid")

    @field_validator("locale")
    @classmethod
    def locale_supported(cls, value: str) -> str:
        if value not in LOCALES:
            raise ValueError(f"unsupported locale, expected one of {sorted(LOCALES)}")
        return value

class PasswordGeneratorRules(BaseModel):
    length: int = Field(default=12, ge=1)
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    model_config = ConfigDict(extra="forbid")

class EncodingRules(BaseModel):
    default_charset: str = Field(default=ALPHANUMERIC, min_length=1)
    password: PasswordGeneratorRules = Field(default_factory=PasswordGeneratorRules)

    model_config = ConfigDict(extra="forbid")

class Rules(BaseModel):
    strings: StringsRules = Field(default_factory=StringsRules)
    validation: ValidationRules = Field(default_factory=ValidationRules)
    formatting: FormattingRules = Field(default_factory=FormattingRules)
    encoding: EncodingRules = Field(default_factory=EncodingRules)

    model_config = ConfigDict(extra="forbid")

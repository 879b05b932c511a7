"""Formatter configuration

Defaults reproduce the standard report layout: four spaces per indent
level, conditions starting one level in, `#` comment lines and a blank
line between numbered entries. Values can be overridden from the
environment (APL_FORMATTER_*) or by keyword.
"""

import os
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


ENV_PREFIX = "APL_FORMATTER_"


class FormatterConfig(BaseModel):
    """Layout options shared by the transformer, grouper and report"""
    model_config = ConfigDict(frozen=True)

    indent_width: int = Field(default=4, ge=1)
    base_indent: int = Field(default=1, ge=0)
    comment_prefix: str = Field(default="#", min_length=1)
    entry_separator: str = "\n\n"


DEFAULT_CONFIG = FormatterConfig()


def load_config(**overrides: Any) -> FormatterConfig:
    """Build a config from APL_FORMATTER_* environment variables and overrides.

    Keyword overrides win over the environment; None overrides are ignored.
    Raises pydantic.ValidationError for invalid values.
    """
    values: Dict[str, Any] = {}
    for name in ("indent_width", "base_indent", "comment_prefix"):
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    values.update({k: v for k, v in overrides.items() if v is not None})
    return FormatterConfig(**values)

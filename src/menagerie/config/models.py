"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, menagerie.toml only contains
overrides.  An absent file behaves exactly like the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from menagerie.domain.types import ParsePolicy


class CollectConfig(BaseModel):
    """[collect] section."""

    model_config = {"frozen": True}

    parse_policy: ParsePolicy = ParsePolicy.RETRY
    sentinel: str = "no"
    require_text: bool = False

    @field_validator("sentinel")
    @classmethod
    def _sentinel_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "sentinel must not be blank"
            raise ValueError(msg)
        return value


class PromptConfig(BaseModel):
    """[prompts] section."""

    model_config = {"frozen": True}

    name: str = "Name: "
    species: str = "Species: "
    age: str = "Age: "
    again: str = "Add another? (type 'no' to finish): "

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, enskit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from enskit.domain.validation import DEFAULT_RESERVED, LabelPolicy

# --- enskit.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section.

    Reserved words are stored lowercased and stripped, so ``"ETH "`` in the
    file reserves ``eth``.
    """

    model_config = {"frozen": True}

    min_length: int = Field(default=3, ge=0)
    max_length: int = Field(default=63, ge=0)
    reserved: frozenset[str] = DEFAULT_RESERVED

    @field_validator("reserved", mode="after")
    @classmethod
    def _normalize_reserved(cls, value: frozenset[str]) -> frozenset[str]:
        words = frozenset(word.strip().lower() for word in value)
        if "" in words:
            raise ValueError("reserved words must not be blank")
        return words

    @model_validator(mode="after")
    def _check_bounds(self) -> ValidationConfig:
        if self.min_length > self.max_length:
            msg = f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            raise ValueError(msg)
        return self

    def to_policy(self) -> LabelPolicy:
        return LabelPolicy(
            min_length=self.min_length,
            max_length=self.max_length,
            reserved=self.reserved,
        )


class NamesConfig(BaseModel):
    """[names] section."""

    model_config = {"frozen": True}

    suffix: str = "eth"

    @field_validator("suffix", mode="after")
    @classmethod
    def _strip_dots(cls, value: str) -> str:
        return value.strip().strip(".")


class NetworkConfig(BaseModel):
    """[network] section."""

    model_config = {"frozen": True}

    default: str = "mainnet"


# Known top-level tables in enskit.toml, mapped to their models.
SECTIONS: dict[str, type[BaseModel]] = {
    "validation": ValidationConfig,
    "names": NamesConfig,
    "network": NetworkConfig,
}

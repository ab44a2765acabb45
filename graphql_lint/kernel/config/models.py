"""Configuration data models for graphql-lint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_FILENAME = ".graphql-linter.yml"


class LinterSettings(BaseModel):
    """Boolean switches from the ``settings`` section.

    Attributes
    ----------
    strict_mode : bool, default=True
        Count SDL parse errors as lint errors (``strictMode``)
    validate_federation : bool, default=True
        Run the directive validator and the federation composition check
        (``validateFederation``)
    check_descriptions : bool, default=True
        Run the description rules (``checkDescriptions``)

    Examples
    --------
    YAML configuration:

    ```yaml
    settings:
      strictMode: true
      validateFederation: false
      checkDescriptions: true
    ```
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    strict_mode: bool = Field(default=True, alias="strictMode")
    validate_federation: bool = Field(default=True, alias="validateFederation")
    check_descriptions: bool = Field(default=True, alias="checkDescriptions")

    @field_validator("strict_mode", "validate_federation", "check_descriptions", mode="before")
    @classmethod
    def _null_is_default(cls, value: Any) -> Any:
        return True if value is None else value


class Suppression(BaseModel):
    """One suppression entry; empty fields match anything.

    ``file`` is a path suffix, ``line`` 0 means any line, ``reason`` is
    informational only.
    """

    model_config = ConfigDict(frozen=True)

    file: str = ""
    line: int = Field(default=0, ge=0)
    rule: str = ""
    value: str = ""
    reason: str = ""

    @field_validator("file", "rule", "value", "reason", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        return str(value) if isinstance(value, int | float) else value

    @field_validator("line", mode="before")
    @classmethod
    def _null_is_any_line(cls, value: Any) -> Any:
        return 0 if value is None else value


class LinterConfig(BaseModel):
    """Settings plus suppression list, loaded once per run."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    settings: LinterSettings = Field(default_factory=LinterSettings)
    suppressions: tuple[Suppression, ...] = ()

    @field_validator("settings", mode="before")
    @classmethod
    def _null_settings(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("suppressions", mode="before")
    @classmethod
    def _null_suppressions(cls, value: Any) -> Any:
        return () if value is None else value


def get_default_config() -> LinterConfig:
    """All settings enabled, no suppressions."""
    return LinterConfig()

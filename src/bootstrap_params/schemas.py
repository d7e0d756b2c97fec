"""Pydantic schemas for the raw option bags handed over by the CLI layer."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bootstrap_params.errors import OptionsError


class BootstrapOptions(BaseModel):
    """Raw bootstrap-launcher options."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output: str | None = None
    force: bool = False
    standalone: bool | None = None
    hybrid: bool | None = None
    assembly: bool | None = None
    embed_files: bool = True
    java_opt: list[str] = Field(default_factory=list)
    bat: bool | None = None
    assembly_rule: list[str] = Field(default_factory=list)
    default_assembly_rules: bool = True
    preamble: bool = True
    deterministic: bool = False
    proguarded: bool = True
    disable_jar_checking: bool | None = None


class DependencyOptions(BaseModel):
    """Raw dependency-selection options."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    exclude: list[str] = Field(default_factory=list)
    local_exclude_file: str = ""
    intransitive: list[str] = Field(default_factory=list)
    sbt_plugin: list[str] = Field(default_factory=list)
    sbt_version: str = "1.0"
    scala_js: bool = False
    native: bool = False

    @field_validator("sbt_version")
    @classmethod
    def _validate_sbt_version(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("sbt_version cannot be empty.")
        return value


def parse_bootstrap_options(raw: Mapping[str, object]) -> BootstrapOptions:
    """Validate a raw bootstrap option bag.

    Raises
    ------
    OptionsError
        If the option bag has unknown keys or wrongly typed values.
    """
    try:
        return BootstrapOptions.model_validate(dict(raw))
    except ValidationError as exc:
        raise OptionsError(f"Invalid bootstrap options: {exc}") from exc


def parse_dependency_options(raw: Mapping[str, object]) -> DependencyOptions:
    """Validate a raw dependency option bag.

    Raises
    ------
    OptionsError
        If the option bag has unknown keys or wrongly typed values.
    """
    try:
        return DependencyOptions.model_validate(dict(raw))
    except ValidationError as exc:
        raise OptionsError(f"Invalid dependency options: {exc}") from exc

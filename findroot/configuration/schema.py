"""Validated configuration models."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator

from findroot.finder import SelectionMode

# Names accepted for a selection mode besides the canonical values.
MODE_ALIASES = {
    "closest": SelectionMode.NEAREST,
}


def parse_mode(value: Any) -> SelectionMode:
    """Normalize a user-supplied mode name (case-insensitive, aliases allowed)."""
    if isinstance(value, SelectionMode):
        return value
    name = str(value).strip().lower()
    if name in MODE_ALIASES:
        return MODE_ALIASES[name]
    try:
        return SelectionMode(name)
    except ValueError:
        choices = [mode.value for mode in SelectionMode] + sorted(MODE_ALIASES)
        raise ValueError(
            f"unknown mode {value!r}; expected one of: {', '.join(choices)}"
        ) from None


class SearchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: SelectionMode = SelectionMode.NEAREST
    span_file_systems: bool = False

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: Any) -> SelectionMode:
        return parse_mode(value)


class CLIConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    verbose: bool = False


class FindRootConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    search: SearchConfig = SearchConfig()
    cli: CLIConfig = CLIConfig()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FindRootConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

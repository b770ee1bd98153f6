"""Pydantic schemas for structured row fragments and writer configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from alfred_workflows.types import IconType


class IconParam(BaseModel):
    """Validated ``icon`` object."""

    model_config = ConfigDict(extra="forbid", strict=True)

    path: str = Field(min_length=1)
    type: IconType | None = None


class TextParam(BaseModel):
    """Validated value of one ``text`` entry."""

    model_config = ConfigDict(extra="forbid", strict=True)

    value: str


class ModParam(BaseModel):
    """Validated per-modifier entry of the ``mods`` object."""

    model_config = ConfigDict(extra="forbid", strict=True)

    subtitle: str
    arg: str
    valid: bool = True


class ArgParam(BaseModel):
    """Validated ``arg``: one string or a list of strings."""

    model_config = ConfigDict(extra="forbid", strict=True)

    value: str | list[str]


class WorkflowOutputConfig(BaseModel):
    """Validated raw input for JSON rendering options."""

    model_config = ConfigDict(extra="forbid")

    indent: int | None = Field(default=None, ge=0)
    ensure_ascii: bool = False

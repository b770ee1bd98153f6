"""Typed option objects for rendering Script Filter output."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from alfred_workflows.errors import OutputError
from alfred_workflows.schemas import WorkflowOutputConfig


@dataclass(frozen=True)
class OutputOptions:
    """JSON rendering configuration."""

    indent: int | None = None
    ensure_ascii: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> OutputOptions:
        """Build options from an untyped mapping.

        Parameters
        ----------
        raw : Mapping[str, object]
            Keys ``indent`` and ``ensure_ascii``; anything else is rejected.

        Returns
        -------
        OutputOptions
            Validated options.

        Raises
        ------
        OutputError
            If the mapping contains unknown keys or invalid values.
        """
        try:
            payload = WorkflowOutputConfig.model_validate(dict(raw))
        except ValidationError as exc:
            raise OutputError(f"Invalid output options: {exc}") from exc
        return cls(indent=payload.indent, ensure_ascii=payload.ensure_ascii)

"""Script Filter result list and JSON writer."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Self, TextIO

from alfred_workflows.errors import OutputError
from alfred_workflows.item import ResultItem
from alfred_workflows.options import OutputOptions

logger = logging.getLogger(__name__)


class Workflow:
    """Ordered collection of result rows rendered as ``{"items": [...]}``."""

    def __init__(self, options: OutputOptions | None = None) -> None:
        self.options = options or OutputOptions()
        self._items: list[ResultItem] = []

    def item(self) -> ResultItem:
        """Create a row, append it and return it for chaining."""
        row = ResultItem()
        self._items.append(row)
        return row

    def add(self, item: ResultItem) -> Self:
        """Append an existing row."""
        self._items.append(item)
        return self

    @property
    def items(self) -> tuple[ResultItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def export(self) -> dict[str, list[dict[str, Any]]]:
        """Return the Script Filter document with rows in insertion order."""
        return {"items": [row.export() for row in self._items]}

    def to_json(self) -> str:
        """Render the document as JSON text.

        Raises
        ------
        OutputError
            If a row holds a value the JSON encoder cannot serialize.
        """
        try:
            rendered = json.dumps(
                self.export(),
                indent=self.options.indent,
                ensure_ascii=self.options.ensure_ascii,
            )
        except (TypeError, ValueError) as exc:
            raise OutputError(f"Unable to encode Script Filter output: {exc}") from exc
        logger.debug("rendered %d result rows", len(self._items))
        return rendered

    def output(self, stream: TextIO | None = None) -> str:
        """Write the JSON document to ``stream`` (stdout by default).

        Returns
        -------
        str
            The JSON text that was written.

        Raises
        ------
        OutputError
            If rendering or writing fails.
        """
        rendered = self.to_json()
        target = stream if stream is not None else sys.stdout
        try:
            target.write(rendered)
            target.flush()
        except OSError as exc:
            raise OutputError(f"Unable to write Script Filter output: {exc}") from exc
        return rendered

"""Build Alfred Script Filter result rows and render them as JSON."""

from __future__ import annotations

from alfred_workflows.errors import InvalidFieldValue, OutputError, WorkflowError
from alfred_workflows.item import Item, ResultItem
from alfred_workflows.options import OutputOptions
from alfred_workflows.types import (
    ArgValue,
    IconType,
    ItemField,
    ItemType,
    ModKey,
    TextType,
)
from alfred_workflows.workflow import Workflow

__version__ = "0.1.0"

__all__ = [
    "ArgValue",
    "IconType",
    "InvalidFieldValue",
    "Item",
    "ItemField",
    "ItemType",
    "ModKey",
    "OutputError",
    "OutputOptions",
    "ResultItem",
    "TextType",
    "Workflow",
    "WorkflowError",
]

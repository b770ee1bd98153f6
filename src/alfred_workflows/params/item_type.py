"""Validator for the ``type`` field."""

from __future__ import annotations

from alfred_workflows.params.base import coerce_choice
from alfred_workflows.types import ItemField, ItemType


def handle(kind: ItemType | str, verify_existence: bool = True) -> str:
    """Return the ``type`` value Alfred expects.

    ``file`` results are checked for existence by Alfred unless
    ``verify_existence`` is false, in which case ``file:skipcheck`` is
    emitted. ``verify_existence`` is ignored for other kinds.
    """
    resolved = coerce_choice(ItemField.TYPE.value, kind, ItemType)
    if resolved is ItemType.FILE and not verify_existence:
        return ItemType.FILE_SKIPCHECK.value
    return resolved.value

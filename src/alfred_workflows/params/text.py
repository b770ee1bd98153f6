"""Validator for the ``text`` field."""

from __future__ import annotations

from pydantic import ValidationError

from alfred_workflows.errors import InvalidFieldValue
from alfred_workflows.params.base import coerce_choice
from alfred_workflows.schemas import TextParam
from alfred_workflows.types import Fragment, ItemField, TextType


def handle(text_type: TextType | str, value: str) -> Fragment:
    """Return a one-key ``text`` fragment, e.g. ``{"copy": value}``.

    Raises
    ------
    InvalidFieldValue
        If ``text_type`` is unknown or ``value`` is not a string.
    """
    resolved = coerce_choice(ItemField.TEXT.value, text_type, TextType)
    try:
        param = TextParam(value=value)
    except ValidationError as exc:
        raise InvalidFieldValue(
            f"{ItemField.TEXT}.{resolved}", value, reason=exc.errors()[0]["msg"]
        ) from exc
    return {resolved.value: param.value}

"""Validator for the ``arg`` field."""

from __future__ import annotations

from pydantic import ValidationError

from alfred_workflows.errors import InvalidFieldValue
from alfred_workflows.schemas import ArgParam
from alfred_workflows.types import ArgValue, ItemField


def handle(value: ArgValue) -> ArgValue:
    """Return ``value`` as a string or a new list of strings.

    Tuples are accepted and stored as lists.

    Raises
    ------
    InvalidFieldValue
        If ``value`` is neither a string nor a sequence of strings.
    """
    if isinstance(value, tuple):
        value = list(value)
    try:
        param = ArgParam(value=value)
    except ValidationError as exc:
        raise InvalidFieldValue(
            ItemField.ARG.value,
            value,
            reason="expected a string or a list of strings",
        ) from exc
    if isinstance(param.value, list):
        return list(param.value)
    return param.value

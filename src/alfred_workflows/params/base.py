"""Helpers shared by the field validators."""

from __future__ import annotations

import logging
from enum import StrEnum

from alfred_workflows.errors import InvalidFieldValue

logger = logging.getLogger(__name__)


def coerce_choice[E: StrEnum](field: str, value: object, choices: type[E]) -> E:
    """Resolve ``value`` to a member of ``choices``.

    Parameters
    ----------
    field : str
        Field name used in the error message.
    value : object
        Enum member or its string value.
    choices : type[StrEnum]
        Closed set of accepted values.

    Returns
    -------
    StrEnum
        Matching enum member.

    Raises
    ------
    InvalidFieldValue
        If ``value`` is not one of the accepted values.
    """
    if isinstance(value, choices):
        return value
    if isinstance(value, str):
        try:
            return choices(value)
        except ValueError:
            pass
    accepted = [member.value for member in choices]
    logger.debug("rejected %r for %s; accepted %s", value, field, accepted)
    raise InvalidFieldValue(field, value, accepted)

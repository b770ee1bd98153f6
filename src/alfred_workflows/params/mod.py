"""Validator for entries of the ``mods`` field."""

from __future__ import annotations

from pydantic import ValidationError

from alfred_workflows.errors import InvalidFieldValue
from alfred_workflows.params.base import coerce_choice
from alfred_workflows.schemas import ModParam
from alfred_workflows.types import Fragment, ItemField, ModKey


def handle(
    key: ModKey | str,
    subtitle: str,
    arg: str,
    valid: bool = True,
) -> Fragment:
    """Return a one-key ``mods`` fragment.

    Parameters
    ----------
    key : ModKey | str
        Modifier key the entry applies to.
    subtitle : str
        Subtitle shown while the modifier is held.
    arg : str
        Argument passed on when actioned with the modifier.
    valid : bool, default=True
        Whether the row can be actioned with the modifier.

    Returns
    -------
    dict
        ``{key: {"subtitle": ..., "arg": ..., "valid": ...}}``.

    Raises
    ------
    InvalidFieldValue
        If ``key`` is unknown or the entry values have the wrong types.
    """
    resolved = coerce_choice(ItemField.MODS.value, key, ModKey)
    try:
        param = ModParam(subtitle=subtitle, arg=arg, valid=valid)
    except ValidationError as exc:
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise InvalidFieldValue(
            f"{ItemField.MODS}.{resolved}.{location}",
            error.get("input"),
            reason=error["msg"],
        ) from exc
    return {resolved.value: param.model_dump()}

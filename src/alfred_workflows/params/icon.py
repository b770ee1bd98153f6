"""Validator for the ``icon`` field."""

from __future__ import annotations

from pydantic import ValidationError

from alfred_workflows.errors import InvalidFieldValue
from alfred_workflows.params.base import coerce_choice
from alfred_workflows.schemas import IconParam
from alfred_workflows.types import Fragment, IconType, ItemField


def handle(path: str, icon_type: IconType | str | None = None) -> Fragment:
    """Build the ``icon`` object.

    Parameters
    ----------
    path : str
        Image path, file path (``fileicon``) or UTI/extension (``filetype``).
    icon_type : IconType | str | None, optional
        How Alfred should interpret ``path``. ``None`` loads the image itself.

    Returns
    -------
    dict
        ``{"path": ...}`` with ``"type"`` only when ``icon_type`` is given.

    Raises
    ------
    InvalidFieldValue
        If ``icon_type`` is unknown or ``path`` is empty.
    """
    resolved = (
        None
        if icon_type is None
        else coerce_choice(f"{ItemField.ICON}.type", icon_type, IconType)
    )
    try:
        param = IconParam(path=path, type=resolved)
    except ValidationError as exc:
        raise InvalidFieldValue(
            f"{ItemField.ICON}.path", path, reason=exc.errors()[0]["msg"]
        ) from exc
    return param.model_dump(mode="json", exclude_none=True)

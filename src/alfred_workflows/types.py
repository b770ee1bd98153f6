"""Shared enumerations and type aliases for Script Filter result rows."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ItemField(StrEnum):
    """Closed set of keys a result row may carry."""

    ARG = "arg"
    AUTOCOMPLETE = "autocomplete"
    ICON = "icon"
    MATCH = "match"
    MODS = "mods"
    QUICKLOOKURL = "quicklookurl"
    SUBTITLE = "subtitle"
    TEXT = "text"
    TITLE = "title"
    TYPE = "type"
    UID = "uid"
    VALID = "valid"


class ItemType(StrEnum):
    """Values accepted for the ``type`` field."""

    DEFAULT = "default"
    FILE = "file"
    FILE_SKIPCHECK = "file:skipcheck"


class IconType(StrEnum):
    """Optional ``icon.type`` values."""

    FILEICON = "fileicon"
    FILETYPE = "filetype"


class TextType(StrEnum):
    """Keys of the ``text`` object."""

    COPY = "copy"
    LARGETYPE = "largetype"


class ModKey(StrEnum):
    """Modifier keys understood by the ``mods`` object."""

    ALT = "alt"
    CMD = "cmd"
    CTRL = "ctrl"
    FN = "fn"
    SHIFT = "shift"


type ArgValue = str | list[str]
type Fragment = dict[str, Any]
type FieldValue = bool | str | list[str] | Fragment
type ItemPayload = dict[str, FieldValue]

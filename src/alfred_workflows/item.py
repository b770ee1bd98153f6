"""Fluent builder for a single Script Filter result row.

Each setter stores one field of Alfred's Script Filter JSON format and
returns the item, so rows read as a chain::

    Item().title("Open File").arg("/tmp/x").cmd("Reveal", "/tmp/x")

See https://www.alfredapp.com/help/workflows/inputs/script-filter/json/
for the meaning of each field.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Self

from alfred_workflows.params import arg as arg_param
from alfred_workflows.params import icon as icon_param
from alfred_workflows.params import item_type as type_param
from alfred_workflows.params import mod as mod_param
from alfred_workflows.params import text as text_param
from alfred_workflows.types import (
    ArgValue,
    FieldValue,
    Fragment,
    IconType,
    ItemField,
    ItemPayload,
    ItemType,
    ModKey,
    TextType,
)


class ResultItem:
    """One result row; accumulates fields and exports them key-sorted."""

    def __init__(self) -> None:
        self._params: dict[ItemField, FieldValue] = {}

    def valid(self, valid: bool = True) -> Self:
        """Mark whether Alfred actions the row when the user presses return."""
        self._params[ItemField.VALID] = bool(valid)
        return self

    def type(self, kind: ItemType | str, verify_existence: bool = True) -> Self:
        """Set the row type.

        With ``file``, Alfred treats the row as a file on disk and checks
        that it exists. Pass ``verify_existence=False`` to emit
        ``file:skipcheck`` when the files are known to exist.

        Raises
        ------
        InvalidFieldValue
            If ``kind`` is not a known row type.
        """
        self._params[ItemField.TYPE] = type_param.handle(kind, verify_existence)
        return self

    def icon(self, path: str, icon_type: IconType | str | None = None) -> Self:
        """Set the row icon.

        Without ``icon_type`` Alfred loads the image at ``path``. ``fileicon``
        uses the icon of the file at ``path``; ``filetype`` uses the icon of
        a type such as ``public.png`` or ``pdf``.

        Raises
        ------
        InvalidFieldValue
            If ``icon_type`` is unknown or ``path`` is empty.
        """
        self._params[ItemField.ICON] = icon_param.handle(path, icon_type)
        return self

    def icon_from_file(self, path: str) -> Self:
        """Use the icon of the file at ``path`` (``Alfred.app``, ``doc.pdf``)."""
        return self.icon(path, IconType.FILEICON)

    def icon_from_file_type(self, file_type: str) -> Self:
        """Use the icon of a file type (``public.folder``, ``jpg``, ``pdf``)."""
        return self.icon(file_type, IconType.FILETYPE)

    def subtitle(self, subtitle: str) -> Self:
        self._params[ItemField.SUBTITLE] = subtitle
        return self

    def text(self, text_type: TextType | str, text: str) -> Self:
        """Set the text copied with ⌘C or shown as Large Type with ⌘L.

        Calls for different ``text_type`` values accumulate.
        """
        self._merge(ItemField.TEXT, text_param.handle(text_type, text))
        return self

    def copy(self, copy: str) -> Self:
        return self.text(TextType.COPY, copy)

    def largetype(self, largetype: str) -> Self:
        return self.text(TextType.LARGETYPE, largetype)

    def mod(
        self,
        key: ModKey | str,
        subtitle: str,
        arg: str,
        valid: bool = True,
    ) -> Self:
        """Override subtitle, arg and validity while a modifier key is held.

        Entries for different keys accumulate; a second call for the same
        key replaces only that key's entry.

        Raises
        ------
        InvalidFieldValue
            If ``key`` is not a known modifier.
        """
        self._merge(ItemField.MODS, mod_param.handle(key, subtitle, arg, valid))
        return self

    def cmd(self, subtitle: str, arg: str, valid: bool = True) -> Self:
        return self.mod(ModKey.CMD, subtitle, arg, valid)

    def shift(self, subtitle: str, arg: str, valid: bool = True) -> Self:
        return self.mod(ModKey.SHIFT, subtitle, arg, valid)

    def fn(self, subtitle: str, arg: str, valid: bool = True) -> Self:
        return self.mod(ModKey.FN, subtitle, arg, valid)

    def ctrl(self, subtitle: str, arg: str, valid: bool = True) -> Self:
        return self.mod(ModKey.CTRL, subtitle, arg, valid)

    def alt(self, subtitle: str, arg: str, valid: bool = True) -> Self:
        return self.mod(ModKey.ALT, subtitle, arg, valid)

    def match(self, match: str) -> Self:
        """Text Alfred filters against instead of the title.

        Matching is case insensitive and, unless the query contains one,
        diacritic insensitive.
        """
        self._params[ItemField.MATCH] = match
        return self

    def uid(self, uid: str) -> Self:
        """Stable identifier Alfred uses to learn ordering across runs.

        Leave unset to keep results in the order they are returned.
        """
        self._params[ItemField.UID] = uid
        return self

    def title(self, title: str) -> Self:
        self._params[ItemField.TITLE] = title
        return self

    def quicklookurl(self, url: str) -> Self:
        """URL, absolute path or ``~/`` path shown with Quick Look (⇧ or ⌘Y)."""
        self._params[ItemField.QUICKLOOKURL] = url
        return self

    def arg(self, arg: ArgValue) -> Self:
        """Argument passed to the connected output action.

        A list passes several arguments; it is copied on the way in.

        Raises
        ------
        InvalidFieldValue
            If ``arg`` is neither a string nor a list of strings.
        """
        self._params[ItemField.ARG] = arg_param.handle(arg)
        return self

    def autocomplete(self, autocomplete: str) -> Self:
        """Text put into Alfred's search field on ⇥, or on return if invalid."""
        self._params[ItemField.AUTOCOMPLETE] = autocomplete
        return self

    def get(self, field: ItemField | str) -> FieldValue | None:
        """Return a copy of the stored value for ``field``.

        ``None`` when the field is unset or is not a row field name.
        """
        try:
            resolved = ItemField(field)
        except ValueError:
            return None
        return deepcopy(self._params.get(resolved))

    def export(self) -> ItemPayload:
        """Return the row as a plain mapping with keys in ascending order.

        Keys of structured fields (``icon``, ``text``, ``mods``) are ordered
        the same way, so two rows with equal values serialize byte for byte
        identically whatever order their setters ran in.
        """
        return {key.value: _snapshot(self._params[key]) for key in sorted(self._params)}

    to_dict = export

    def _merge(self, field: ItemField, fragment: Fragment) -> None:
        current = self._params.get(field)
        if isinstance(current, dict):
            current.update(deepcopy(fragment))
        else:
            self._params[field] = deepcopy(fragment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultItem):
            return NotImplemented
        return self.export() == other.export()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.export()!r})"


def _snapshot(value: FieldValue) -> FieldValue:
    if isinstance(value, dict):
        return {key: deepcopy(value[key]) for key in sorted(value)}
    return deepcopy(value)


Item = ResultItem

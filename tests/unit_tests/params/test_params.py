"""Unit tests for the field validators."""

from __future__ import annotations

import pytest

from alfred_workflows.errors import InvalidFieldValue
from alfred_workflows.params import arg, coerce_choice, icon, item_type, mod, text
from alfred_workflows.types import IconType, ItemType, ModKey, TextType


def test_coerce_choice_accepts_member_and_value() -> None:
    assert coerce_choice("mods", ModKey.CMD, ModKey) is ModKey.CMD
    assert coerce_choice("mods", "cmd", ModKey) is ModKey.CMD


@pytest.mark.parametrize("value", ["CMD", "", None, 3, ["cmd"]])
def test_coerce_choice_rejects_unknown(value: object) -> None:
    """Reject anything that is not an exact member value."""
    with pytest.raises(InvalidFieldValue) as excinfo:
        coerce_choice("mods", value, ModKey)
    assert excinfo.value.accepted == ("alt", "cmd", "ctrl", "fn", "shift")
    assert excinfo.value.exit_code == 2


def test_item_type_handle() -> None:
    assert item_type.handle(ItemType.DEFAULT) == "default"
    assert item_type.handle("file") == "file"
    assert item_type.handle("file", verify_existence=False) == "file:skipcheck"
    assert item_type.handle("file:skipcheck") == "file:skipcheck"
    assert item_type.handle("default", verify_existence=False) == "default"


def test_item_type_handle_rejects_unknown() -> None:
    with pytest.raises(InvalidFieldValue, match="'folder'"):
        item_type.handle("folder")


def test_icon_handle_omits_missing_type() -> None:
    assert icon.handle("icon.png") == {"path": "icon.png"}
    assert icon.handle("pdf", IconType.FILETYPE) == {"path": "pdf", "type": "filetype"}
    assert icon.handle("a.app", "fileicon") == {"path": "a.app", "type": "fileicon"}


def test_icon_handle_rejects_empty_path() -> None:
    with pytest.raises(InvalidFieldValue) as excinfo:
        icon.handle("")
    assert excinfo.value.field == "icon.path"


def test_icon_handle_rejects_unknown_type() -> None:
    with pytest.raises(InvalidFieldValue) as excinfo:
        icon.handle("a.png", "thumbnail")
    assert excinfo.value.field == "icon.type"
    assert excinfo.value.accepted == ("fileicon", "filetype")


def test_text_handle() -> None:
    assert text.handle(TextType.COPY, "x") == {"copy": "x"}
    assert text.handle("largetype", "y") == {"largetype": "y"}
    with pytest.raises(InvalidFieldValue):
        text.handle("paste", "z")


def test_mod_handle() -> None:
    assert mod.handle("ctrl", "sub", "arg") == {
        "ctrl": {"subtitle": "sub", "arg": "arg", "valid": True}
    }
    assert mod.handle(ModKey.FN, "sub", "arg", False) == {
        "fn": {"subtitle": "sub", "arg": "arg", "valid": False}
    }


def test_mod_handle_rejects_non_string_arg() -> None:
    with pytest.raises(InvalidFieldValue) as excinfo:
        mod.handle("cmd", "sub", 42)  # type: ignore[arg-type]
    assert excinfo.value.field == "mods.cmd.arg"
    assert excinfo.value.value == 42


def test_mod_handle_rejects_unknown_key() -> None:
    with pytest.raises(InvalidFieldValue, match="expected one of"):
        mod.handle("hyper", "sub", "arg")


def test_icon_handle_keeps_whitespace_path() -> None:
    """Only an empty path is rejected; whitespace is passed through."""
    assert icon.handle("  ") == {"path": "  "}


def test_text_handle_rejects_non_string_value() -> None:
    with pytest.raises(InvalidFieldValue) as excinfo:
        text.handle("copy", ["x"])  # type: ignore[arg-type]
    assert excinfo.value.field == "text.copy"


def test_arg_handle() -> None:
    assert arg.handle("x") == "x"
    values = ["a", "b"]
    handled = arg.handle(values)
    assert handled == ["a", "b"]
    assert handled is not values
    assert arg.handle(("a",)) == ["a"]


def test_arg_handle_rejects_mixed_list() -> None:
    with pytest.raises(InvalidFieldValue, match="list of strings"):
        arg.handle(["a", 2])  # type: ignore[list-item]

"""Unit tests for the Script Filter result list and writer."""

from __future__ import annotations

import io
import json

import pytest

from alfred_workflows.errors import OutputError
from alfred_workflows.item import ResultItem
from alfred_workflows.options import OutputOptions
from alfred_workflows.workflow import Workflow


def test_empty_workflow_exports_empty_items() -> None:
    workflow = Workflow()
    assert workflow.export() == {"items": []}
    assert workflow.to_json() == '{"items": []}'
    assert len(workflow) == 0


def test_item_creates_and_appends_rows_in_order() -> None:
    workflow = Workflow()
    workflow.item().title("first").uid("1")
    workflow.item().title("second")

    assert len(workflow) == 2
    assert [row.get("title") for row in workflow.items] == ["first", "second"]
    assert workflow.export() == {
        "items": [{"title": "first", "uid": "1"}, {"title": "second"}]
    }


def test_add_is_chainable() -> None:
    row = ResultItem().title("x")
    workflow = Workflow().add(row).add(ResultItem().title("y"))
    assert workflow.items[0] is row
    assert len(workflow) == 2


def test_to_json_keeps_sorted_row_keys() -> None:
    """Rows serialize with keys in ascending order."""
    workflow = Workflow()
    workflow.item().valid(True).title("T").arg(["a", "b"])
    assert workflow.to_json() == (
        '{"items": [{"arg": ["a", "b"], "title": "T", "valid": true}]}'
    )


def test_to_json_respects_options() -> None:
    workflow = Workflow(OutputOptions(indent=2))
    workflow.item().title("Café")
    rendered = workflow.to_json()
    assert "\n" in rendered
    assert "Café" in rendered
    escaped = Workflow(OutputOptions(ensure_ascii=True))
    escaped.item().title("Café")
    assert "\\u00e9" in escaped.to_json()


def test_to_json_wraps_encoding_errors() -> None:
    workflow = Workflow()
    workflow.item().title(object())  # type: ignore[arg-type]
    with pytest.raises(OutputError, match="Unable to encode"):
        workflow.to_json()


def test_output_writes_to_stream() -> None:
    workflow = Workflow()
    workflow.item().title("hello")
    stream = io.StringIO()
    rendered = workflow.output(stream)
    assert stream.getvalue() == rendered
    assert json.loads(rendered) == {"items": [{"title": "hello"}]}


def test_output_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    workflow = Workflow()
    workflow.item().title("hello")
    workflow.output()
    assert json.loads(capsys.readouterr().out) == {"items": [{"title": "hello"}]}


def test_output_wraps_write_errors() -> None:
    class _BrokenStream(io.StringIO):
        def write(self, s: str) -> int:
            raise OSError("pipe closed")

    workflow = Workflow()
    with pytest.raises(OutputError, match="pipe closed"):
        workflow.output(_BrokenStream())


def test_output_options_from_mapping() -> None:
    assert OutputOptions.from_mapping({"indent": 4}) == OutputOptions(indent=4)
    with pytest.raises(OutputError, match="Invalid output options"):
        OutputOptions.from_mapping({"indent": -1})
    with pytest.raises(OutputError):
        OutputOptions.from_mapping({"colour": True})

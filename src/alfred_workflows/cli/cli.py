#!/usr/bin/env python3
"""
alfred_workflows.cli.cli

Typer-based CLI that prints a one-row Alfred Script Filter document.

Handy for shell-based script filters and for checking what a row looks like
before wiring it into a workflow.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Emit a file row with a cmd modifier:

    alfred-item item --title "Open File" --arg /tmp/x --type file \\
        --mod "cmd=Reveal in Finder=/tmp/x"
"""

from __future__ import annotations

import logging
import traceback

import typer

from alfred_workflows.errors import WorkflowError
from alfred_workflows.item import ResultItem
from alfred_workflows.options import OutputOptions
from alfred_workflows.types import ArgValue
from alfred_workflows.workflow import Workflow

app = typer.Typer(
    name="alfred-item",
    help="Build Alfred Script Filter JSON result rows.",
    no_args_is_help=True,
)

MOD_HELP = "Modifier override KEY=SUBTITLE=ARG (repeatable), e.g. cmd=Reveal=/tmp/x."
ARG_HELP = "Argument passed to the output action (repeat for several)."


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code.

    Parameters
    ----------
    exc : Exception
        Exception raised while building the row.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_mods(mod_items: list[str] | None) -> list[tuple[str, str, str]]:
    """Parse repeated KEY=SUBTITLE=ARG modifier entries."""
    parsed: list[tuple[str, str, str]] = []
    for entry in mod_items or []:
        parts = entry.split("=", 2)
        if len(parts) != 3:
            raise typer.BadParameter(
                f"Invalid mod entry '{entry}'. Use KEY=SUBTITLE=ARG format."
            )
        key, subtitle, arg = parts
        key = key.strip()
        if not key:
            raise typer.BadParameter("Mod key cannot be empty.")
        parsed.append((key, subtitle, arg))
    return parsed


def _collapse_args(args: list[str] | None) -> ArgValue | None:
    """Return ``None``, a single string, or the list of strings."""
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    return list(args)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("item")
def item_cmd(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Title of the result row."),
    subtitle: str | None = typer.Option(None, "--subtitle", help="Row subtitle."),
    arg: list[str] | None = typer.Option(None, "--arg", help=ARG_HELP),
    uid: str | None = typer.Option(None, "--uid", help="Stable row identifier."),
    match: str | None = typer.Option(
        None, "--match", help="Text to filter against instead of the title."
    ),
    autocomplete: str | None = typer.Option(
        None, "--autocomplete", help="Text inserted into the search field on tab."
    ),
    quicklookurl: str | None = typer.Option(
        None, "--quicklookurl", help="URL or path shown with Quick Look."
    ),
    valid: bool | None = typer.Option(
        None, "--valid/--invalid", help="Whether the row can be actioned."
    ),
    item_type: str | None = typer.Option(
        None, "--type", help="Row type: default or file."
    ),
    skip_check: bool = typer.Option(
        False, "--skip-check", help="With --type file, skip Alfred's existence check."
    ),
    icon: str | None = typer.Option(None, "--icon", help="Icon path."),
    icon_type: str | None = typer.Option(
        None, "--icon-type", help="Icon interpretation: fileicon or filetype."
    ),
    copy: str | None = typer.Option(None, "--copy", help="Text copied with cmd+C."),
    largetype: str | None = typer.Option(
        None, "--largetype", help="Text shown as Large Type with cmd+L."
    ),
    mod: list[str] | None = typer.Option(None, "--mod", help=MOD_HELP),
    invalid_mod: list[str] | None = typer.Option(
        None, "--invalid-mod", help="Modifier key whose override is not actionable."
    ),
    indent: int | None = typer.Option(
        None, "--indent", min=0, help="Pretty-print with this indent."
    ),
) -> None:
    """Print a Script Filter document holding one result row.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    title : str
        Row title; Alfred expects every row to have one.
    arg : list[str] | None
        One value is emitted as a string, several as a list.
    mod : list[str] | None
        ``KEY=SUBTITLE=ARG`` entries; the ARG part may itself contain ``=``.

    Notes
    -----
    - Unknown ``--type``, ``--icon-type`` or modifier keys exit with code 2.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    mods = _parse_mods(mod)
    invalid_keys = set(invalid_mod or [])
    if icon_type is not None and icon is None:
        raise typer.BadParameter("--icon-type requires --icon.")
    unmatched = ", ".join(sorted(invalid_keys - {key for key, _, _ in mods}))
    if unmatched:
        raise typer.BadParameter(f"--invalid-mod keys lack a --mod entry: {unmatched}")

    try:
        row = ResultItem().title(title)
        if subtitle is not None:
            row.subtitle(subtitle)
        arg_value = _collapse_args(arg)
        if arg_value is not None:
            row.arg(arg_value)
        if uid is not None:
            row.uid(uid)
        if match is not None:
            row.match(match)
        if autocomplete is not None:
            row.autocomplete(autocomplete)
        if quicklookurl is not None:
            row.quicklookurl(quicklookurl)
        if valid is not None:
            row.valid(valid)
        if item_type is not None:
            row.type(item_type, verify_existence=not skip_check)
        if icon is not None:
            row.icon(icon, icon_type)
        if copy is not None:
            row.copy(copy)
        if largetype is not None:
            row.largetype(largetype)
        for key, mod_subtitle, mod_arg in mods:
            row.mod(key, mod_subtitle, mod_arg, valid=key not in invalid_keys)

        workflow = Workflow(OutputOptions(indent=indent)).add(row)
        typer.echo(workflow.to_json())
    except WorkflowError as exc:
        raise typer.Exit(code=_print_error(exc, debug))


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()

# src/saga/cli.py
"""
saga Command Line Interface (CLI).

This module implements the user-facing terminal interface using `typer` and `rich`.
Every subcommand is one transaction: read the document(s), work in memory,
then write the result back in a single final step. Any error aborts the
subcommand before that write and exits with code 1.

Subcommands
-----------
- **new**: write a blank document.
- **add**: interactively add an event under a node.
- **edit**: apply one edit command to a node or event.
- **shell**: edit a node or event with a REPL over the same command language.
- **cat**: concatenate documents into a new one.
- **print** / **grep**: inspect documents (best-effort across files).
- **render**: write an SVG next to each document (best-effort across files).

Usage
-----
    $ saga new history.json
    $ saga add history.json 1
    $ saga edit history.json 1:2 +desc Signed in Paris
    $ saga render history.json
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from saga.core.commands import HELP, Exit, Help, parse_command
from saga.core.contracts.document import Document
from saga.core.contracts.event import Event
from saga.core.contracts.node import Query
from saga.core.dates import Date
from saga.core.errors import AddToEvent, SagaError
from saga.core.path import NodePath, format_path, parse_path
from saga.core.settings import get_logger, load_settings
from saga.core.storage import load_document, save_document
from saga.render import render_document, save_svg

# Ensure env vars (like SAGA_CANVAS_WIDTH) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help=(
        "saga: compose, edit and render timeline documents.\n\n"
        "PATH arguments are 1-based and colon separated (`1:3:2`); an empty "
        "PATH (`''`) is the root. Description indices are 0-based."
    ),
    rich_markup_mode="markdown",
    no_args_is_help=True,
)
console = Console()
log = get_logger("saga.cli")


# --------------------------------------------------------------------------- #
# Helpers: Errors & I/O
# --------------------------------------------------------------------------- #


def _print_error(exc: SagaError) -> None:
    console.print(f"[bold red]❌ {exc.category} Error:[/bold red] {escape(str(exc))}")


@contextmanager
def _abort_on_error() -> Iterator[None]:
    """Turn any `SagaError` raised inside the block into exit code 1."""
    try:
        yield
    except SagaError as exc:
        _print_error(exc)
        raise typer.Exit(code=1) from exc


def _resolve(doc: Document, raw_path: str) -> tuple[NodePath, Query]:
    """Helper: parse a PATH argument and look it up in `doc`."""
    path = parse_path(raw_path).unwrap_or_raise()
    return path, doc.query_mut(path).unwrap_or_raise()


def _describe(path: NodePath, target: Query) -> str:
    where = format_path(path) or "(root)"
    name = target.name if target.name is not None else "(No name)"
    return f"{target.kind.value} {where}: {name}"


def _editor(initial: str) -> str | None:
    """Helper: open `$EDITOR` on `initial` for descriptions given without text."""
    return typer.edit(initial)


def _ask_line(prompt: str) -> str | None:
    """Helper: one blocking prompt; EOF is reported as `None`."""
    try:
        return Prompt.ask(prompt, console=console)
    except EOFError:
        return None


# --------------------------------------------------------------------------- #
# Commands: Writing
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def new(
    file: Annotated[Path, typer.Argument(dir_okay=False, help="Where to write the new document.")],
) -> None:
    """Create a blank saga document at FILE, replacing any existing file."""
    doc = Document.blank()
    with _abort_on_error():
        save_document(doc, file)
    console.print(f"Created [u]{escape(str(file))}[/u] ({doc.x:g}x{doc.y:g} canvas).")


@app.command()  # type: ignore[misc]
def add(
    file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True)],
    path: Annotated[str, typer.Argument(help="Node to add the event under, e.g. `1:2`.")],
) -> None:
    """
    Interactively add an event under the node at PATH.

    Prompts for a name, a date (`dd/mm/yyyy hh:mm`, or `start - end`) and
    any number of descriptions. End the descriptions with `n` or EOF.
    """
    with _abort_on_error():
        doc = load_document(file)
        node_path = parse_path(path).unwrap_or_raise()
        # Fail on a bad path before asking the user anything.
        if isinstance(doc.query_mut(node_path).unwrap_or_raise(), Event):
            raise AddToEvent(path=node_path)

        name = _ask_line("Name")
        raw_date = _ask_line("Date")
        if name is None or raw_date is None:
            console.print("[bold red]❌ Input Error:[/bold red] input ended before the event was complete")
            raise typer.Exit(code=1)
        event = Event.new(name.strip(), Date.parse(raw_date).unwrap_or_raise())

        while True:
            try:
                wants_more = Confirm.ask("Description", default=False, console=console)
            except EOFError:
                break
            if not wants_more:
                break
            text = _ask_line("Text")
            if text is None:
                break
            if text.strip():
                event.add_description(text.strip())

        doc.add_event(node_path, event).unwrap_or_raise()
        save_document(doc, file)
    console.print(f"Added [bold]{escape(event.name)}[/bold] at {escape(path or '(root)')}.")


@app.command(context_settings={"ignore_unknown_options": True})  # type: ignore[misc]
def edit(
    file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True)],
    path: Annotated[str, typer.Argument(help="Node or event to edit, e.g. `1:2`.")],
    command: Annotated[list[str], typer.Argument(help="Edit command, e.g. `+desc Some text`.")],
) -> None:
    """
    Apply one edit COMMAND to the node or event at PATH.

    Run `saga edit FILE PATH help` to list the commands.
    """
    with _abort_on_error():
        parsed = parse_command(" ".join(command)).unwrap_or_raise()
        if isinstance(parsed, Help):
            console.print(HELP, markup=False, highlight=False)
            return
        if isinstance(parsed, Exit):
            return
        doc = load_document(file)
        _, target = _resolve(doc, path)
        parsed.eval(target, editor=_editor).unwrap_or_raise()
        save_document(doc, file)
    log.debug("applied %r to %s at %r", parsed, file, path)


@app.command()  # type: ignore[misc]
def shell(
    file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True)],
    path: Annotated[str, typer.Argument(help="Node or event to edit, e.g. `1:2`.")] = "",
) -> None:
    """
    Edit the node or event at PATH interactively.

    Each line is one edit command. `help` lists them, `exit` (or EOF) saves
    and quits. Errors are reported and the session continues.
    """
    with _abort_on_error():
        doc = load_document(file)
        node_path, target = _resolve(doc, path)

    console.print(
        Panel.fit(
            f"[bold cyan]saga shell[/bold cyan]\n{escape(_describe(node_path, target))}",
            border_style="cyan",
        )
    )
    while True:
        line = _ask_line("saga")
        if line is None:
            break
        parsed = parse_command(line)
        if parsed.is_err():
            _print_error(parsed.unwrap_err())
            continue
        cmd = parsed.unwrap()
        if isinstance(cmd, Exit):
            break
        if isinstance(cmd, Help):
            console.print(HELP, markup=False, highlight=False)
            continue
        outcome = cmd.eval(target, editor=_editor)
        if outcome.is_err():
            _print_error(outcome.unwrap_err())

    with _abort_on_error():
        save_document(doc, file)
    console.print(f"Saved [u]{escape(str(file))}[/u].")


@app.command("cat")  # type: ignore[misc]
def catenate(
    files: Annotated[list[Path], typer.Argument(exists=True, dir_okay=False, readable=True)],
    dest: Annotated[Path, typer.Argument(dir_okay=False, help="Document to write.")],
) -> None:
    """Concatenate the roots of every FILE into DEST."""
    with _abort_on_error():
        docs = [load_document(fp) for fp in files]
        merged = Document.catenate(docs)
        save_document(merged, dest)
    console.print(
        f"Wrote [u]{escape(str(dest))}[/u] ({len(merged.data.children)} top-level entries)."
    )


# --------------------------------------------------------------------------- #
# Commands: Reading (best-effort across files)
# --------------------------------------------------------------------------- #


@app.command("print")  # type: ignore[misc]
def print_(
    files: Annotated[list[Path], typer.Argument(dir_okay=False)],
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show offsets, scales, lines and descriptions.")
    ] = False,
) -> None:
    """Print an indented overview of each FILE."""
    failures = 0
    for fp in files:
        try:
            doc = load_document(fp)
        except SagaError as exc:
            _print_error(exc)
            failures += 1
            continue
        console.print(f"\n{fp}", markup=False, highlight=False)
        console.print(doc.print(verbose), markup=False, highlight=False, soft_wrap=True)
    if failures:
        raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def grep(
    pattern: Annotated[str, typer.Argument(help="Regular expression (case-insensitive).")],
    files: Annotated[list[Path], typer.Argument(dir_okay=False)],
) -> None:
    """List the events whose name or descriptions match PATTERN."""
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise typer.BadParameter(str(exc), param_hint="PATTERN") from exc

    failures = 0
    for fp in files:
        try:
            doc = load_document(fp)
        except SagaError as exc:
            _print_error(exc)
            failures += 1
            continue
        for found_path, event in doc.data.find_events(regex):
            console.print(
                f"{fp}:{format_path(found_path)}: {event.name}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
    if failures:
        raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def render(
    files: Annotated[list[Path], typer.Argument(dir_okay=False)],
) -> None:
    """Write a vector image next to each FILE (same stem, `.svg` by default)."""
    extension = load_settings().render_extension
    failures = 0
    for fp in files:
        target = fp.with_suffix(extension)
        try:
            scene = render_document(load_document(fp))
            save_svg(scene, target)
        except SagaError as exc:
            _print_error(exc)
            failures += 1
            continue
        console.print(f"Wrote [u]{escape(str(target))}[/u] successfully ({len(scene)} shapes).")
    if failures:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

# bcs — viewer for the Bash Coding Standard documents
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Command-line interface.

``bcs [tier]`` is shorthand for ``bcs display [tier]``: any invocation
whose first word is not a subcommand is routed to ``display``.

Exit status: 0 on success, 1 for missing documents, unknown codes or no
search matches, 2 for an invalid tier or other usage errors.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from bcs.config import VERSION, Settings, effective_default_tier, load_settings
from bcs.documents import (
    DocumentReader,
    default_link,
    detect_default_tier,
    find_data_dir,
    set_default_tier,
)
from bcs.errors import BcsError
from bcs.rules import (
    RuleEntry,
    decode_all,
    format_matches,
    iter_rules,
    list_sections,
    search as search_text,
)
from bcs.rules import decode as decode_code
from bcs.templates import DEFAULT_KIND, TEMPLATE_KINDS, TemplateEngine
from bcs.tiers import TIER_NAMES, Tier, TierSelection, parse_tier, select

logger = logging.getLogger(__name__)

PROG_NAME = "bcs"
COMMANDS = (
    "display",
    "default",
    "sections",
    "search",
    "grep",
    "codes",
    "list-codes",
    "decode",
    "template",
)
_GLOBAL_VALUE_OPTIONS = ("--data-dir",)
_EAGER_OPTIONS = ("--help", "--version")

app = typer.Typer(
    add_completion=False,
    help="Display and query the Bash Coding Standard.",
    no_args_is_help=False,
)


@dataclass
class _State:
    settings: Settings
    data_dir_option: Optional[Path] = None
    _data_dir: Optional[Path] = field(default=None, init=False)

    def data_dir(self) -> Path:
        if self._data_dir is None:
            self._data_dir = find_data_dir(self.data_dir_option or self.settings.data_dir)
        return self._data_dir

    def default_tier(self) -> Tier:
        return effective_default_tier(self.settings, self.data_dir())

    def reader(self) -> DocumentReader:
        return DocumentReader(self.data_dir())

    def selection(self, tier: Optional[str]) -> TierSelection:
        # An explicit tier never consults the configured default
        if tier:
            return select(parse_tier(tier), None)
        return select(None, self.default_tier())


def _prog(ctx: typer.Context) -> str:
    return ctx.find_root().info_name or PROG_NAME


def _fail(ctx: typer.Context, exc: BcsError) -> NoReturn:
    typer.echo(f"{_prog(ctx)}: error: {exc}", err=True)
    raise typer.Exit(code=exc.exit_code)


def _state(ctx: typer.Context) -> _State:
    return ctx.find_root().obj


def _binary_stdout():
    sys.stdout.flush()
    return sys.stdout.buffer


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {VERSION}")
        raise typer.Exit()


@app.callback()
def _main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", help="Directory holding the standard's documents."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Display and query the Bash Coding Standard."""
    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if (verbose or settings.verbose) else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = _State(settings=settings, data_dir_option=data_dir)


@app.command()
def display(
    ctx: typer.Context,
    tier: Optional[str] = typer.Argument(
        None, help=f"Tier to display: {' | '.join(TIER_NAMES)}. Default: configured tier."
    ),
) -> None:
    """Display the standard at the selected tier."""
    state = _state(ctx)
    try:
        selection = state.selection(tier)
        state.reader().stream(selection.document_path, _binary_stdout())
    except BcsError as e:
        _fail(ctx, e)


@app.command("default")
def default_tier(
    ctx: typer.Context,
    tier: Optional[str] = typer.Argument(
        None, help=f"New default tier: {' | '.join(TIER_NAMES)}."
    ),
    list_tiers: bool = typer.Option(
        False, "--list", "-l", help="List tiers, marking the current default with *."
    ),
    show_file: bool = typer.Option(
        False, "--file", "-f", help="Show the default-tier symlink and its target."
    ),
) -> None:
    """Show or change the default tier (bcs default [complete|summary|abstract])."""
    if tier and (list_tiers or show_file):
        typer.echo(
            f"{_prog(ctx)}: error: a tier cannot be combined with --list or --file",
            err=True,
        )
        raise typer.Exit(code=2)

    state = _state(ctx)
    try:
        new_tier = parse_tier(tier) if tier else None
        data_dir = state.data_dir()

        if list_tiers:
            current = state.default_tier()
            for t in Tier:
                typer.echo(f"{'*' if t is current else ' '} {t.value}")
            return

        if show_file:
            link = default_link(data_dir)
            if link.is_symlink():
                typer.echo(f"{link} -> {link.readlink()}")
            else:
                typer.echo(str(link))
            return

        if new_tier is None:
            typer.echo(state.default_tier().value)
            return

        previous = detect_default_tier(data_dir)
        if previous is new_tier:
            typer.echo(f"Default tier is already {new_tier.value}")
            return
        set_default_tier(data_dir, new_tier)
    except BcsError as e:
        _fail(ctx, e)
    except OSError as e:
        typer.echo(f"{_prog(ctx)}: error: Cannot change default tier: {e}", err=True)
        raise typer.Exit(code=1)

    old = previous.value if previous else "none"
    typer.echo(f"Default tier changed: {old} -> {new_tier.value}")
    if state.settings.default_tier not in (None, new_tier.value):
        logger.warning(
            "BCS_DEFAULT_TIER=%s still overrides the installed default",
            state.settings.default_tier,
        )


@app.command()
def sections(
    ctx: typer.Context,
    tier: Optional[str] = typer.Argument(None, help="Tier to read sections from."),
) -> None:
    """List the numbered sections of the standard (bcs sections)."""
    state = _state(ctx)
    try:
        selection = state.selection(tier)
        text = state.reader().read(selection.document_path)
    except BcsError as e:
        _fail(ctx, e)
    for number, title in enumerate(list_sections(text), start=1):
        typer.echo(f"{number}. {title}")


@app.command()
def search(
    ctx: typer.Context,
    pattern: str = typer.Argument(..., help="Regular expression to search for."),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Case-insensitive match."),
    context: int = typer.Option(0, "--context", "-C", min=0, help="Lines of context."),
    tier: Optional[str] = typer.Option(None, "--tier", "-t", help="Tier to search."),
) -> None:
    """Search the standard (bcs search [-i] [-C N] PATTERN)."""
    state = _state(ctx)
    try:
        selection = state.selection(tier)
        text = state.reader().read(selection.document_path)
        matches = search_text(text, pattern, ignore_case=ignore_case, context=context)
    except BcsError as e:
        _fail(ctx, e)
    if not matches:
        typer.echo(f"{_prog(ctx)}: No matches found for {pattern!r}", err=True)
        raise typer.Exit(code=1)
    for line in format_matches(matches):
        typer.echo(line)


app.command("grep", hidden=True)(search)


@app.command()
def codes(
    ctx: typer.Context,
    tier: Optional[str] = typer.Option(None, "--tier", "-t", help="Tier to index."),
) -> None:
    """List all BCS codes as CODE:path:title (bcs codes)."""
    state = _state(ctx)
    try:
        selection = state.selection(tier)
        entries = list(iter_rules(state.data_dir(), selection.resolved))
    except BcsError as e:
        _fail(ctx, e)
    for entry in entries:
        typer.echo(entry.to_line())


app.command("list-codes", hidden=True)(codes)


def _format_entry(entry: RuleEntry, relative: bool, basename: bool) -> str:
    if basename:
        return entry.path.name
    if relative:
        return entry.relative_path
    return str(entry.path)


@app.command()
def decode(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="BCS code, with or without the BCS prefix."),
    abstract: bool = typer.Option(False, "--abstract", "-a", help="Use the abstract tier."),
    summary: bool = typer.Option(False, "--summary", "-s", help="Use the summary tier."),
    complete: bool = typer.Option(False, "--complete", "-c", help="Use the complete tier."),
    all_tiers: bool = typer.Option(False, "--all", help="Show the file for every tier."),
    relative: bool = typer.Option(False, "--relative", help="Print paths relative to the install."),
    basename: bool = typer.Option(False, "--basename", help="Print file names only."),
    exists: bool = typer.Option(False, "--exists", help="Exit 0 if the code exists, 1 otherwise."),
    show: bool = typer.Option(False, "--print", "-p", help="Print file contents instead of paths."),
) -> None:
    """Decode a BCS code to its rule file (bcs decode BCS0102)."""
    chosen = [t for t, flag in
              ((Tier.ABSTRACT, abstract), (Tier.SUMMARY, summary), (Tier.COMPLETE, complete))
              if flag]
    if len(chosen) > 1:
        typer.echo(f"{_prog(ctx)}: error: choose at most one of -a, -s, -c", err=True)
        raise typer.Exit(code=2)

    state = _state(ctx)
    try:
        data_dir = state.data_dir()
        if all_tiers:
            entries = decode_all(code, data_dir)
        else:
            tier = chosen[0] if chosen else state.default_tier()
            entries = {tier: decode_code(code, data_dir, tier)}
    except BcsError as e:
        if exists:
            raise typer.Exit(code=1)
        _fail(ctx, e)

    if exists:
        return
    for tier, entry in entries.items():
        if show:
            if all_tiers:
                typer.echo(f"=== {tier.label}: {entry.code} ===")
            typer.echo(entry.path.read_text(encoding="utf-8"), nl=False)
        elif all_tiers:
            typer.echo(f"{tier.label}: {_format_entry(entry, relative, basename)}")
        else:
            typer.echo(_format_entry(entry, relative, basename))


@app.command()
def template(
    ctx: typer.Context,
    kind: str = typer.Option(
        DEFAULT_KIND, "--type", "-t", help=f"Template type: {' | '.join(TEMPLATE_KINDS)}."
    ),
    name: str = typer.Option("myscript", "--name", "-n", help="Script name."),
    description: str = typer.Option("", "--description", "-d", help="One-line description."),
    version: str = typer.Option("1.0.0", "--version", "-v", help="Script version."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to FILE."),
    executable: bool = typer.Option(False, "--executable", "-x", help="Make FILE executable."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing FILE."),
    install: bool = typer.Option(
        False, "--install", help="Copy the shipped templates into BCS_TEMPLATE_DIR for editing."
    ),
) -> None:
    """Generate a BCS-compliant Bash script skeleton (bcs template)."""
    state = _state(ctx)
    engine = TemplateEngine(user_dir=state.settings.template_dir)
    if install:
        try:
            written = engine.install_defaults()
        except BcsError as e:
            _fail(ctx, e)
        for path in written:
            typer.echo(f"Installed {path}")
        if not written:
            typer.echo(f"Templates already installed in {engine.user_dir}")
        return

    try:
        script = engine.render_script(
            kind, name=name, description=description, version=version
        )
    except BcsError as e:
        _fail(ctx, e)

    if output is None:
        typer.echo(script, nl=False)
        return
    if output.exists() and not force:
        typer.echo(
            f"{_prog(ctx)}: error: {output} already exists (use --force to overwrite)",
            err=True,
        )
        raise typer.Exit(code=1)
    output.write_text(script, encoding="utf-8")
    if executable:
        output.chmod(0o755)
    logger.info("Wrote %s template to %s", kind, output)
    typer.echo(f"Created {output}")


def route_args(args: List[str]) -> List[str]:
    """Insert ``display`` when no subcommand is named."""
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in _EAGER_OPTIONS:
            return list(args)
        if arg in _GLOBAL_VALUE_OPTIONS:
            i += 2
            continue
        if arg.startswith("-"):
            i += 1
            continue
        break
    if i < len(args) and args[i] in COMMANDS:
        return list(args)
    return list(args[:i]) + ["display"] + list(args[i:])


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else PROG_NAME
    if prog in ("__main__.py", "-c", ""):
        prog = PROG_NAME
    app(args=route_args(list(args)), prog_name=prog)


if __name__ == "__main__":
    main()

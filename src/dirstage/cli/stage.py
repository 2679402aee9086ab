"""CLI commands for publishing files and directories through a staging area."""

from __future__ import annotations

import importlib
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

if TYPE_CHECKING:  # pragma: no cover - typing only
    import typer
    from typer import Typer as TyperType
else:  # pragma: no cover - runtime fallback for typing
    typer = importlib.import_module("typer")
    TyperType = Any

from rich.console import Console
from rich.tree import Tree

from dirstage.core.config import load_context
from dirstage.core.errors import InvalidConfiguration
from dirstage.fs.workspace import StagingContext
from dirstage.utils.log import configure_logging

app: TyperType = typer.Typer(
    help="Publish files and directories atomically via a staging area."
)


SourceArgument = Annotated[
    Path,
    typer.Argument(exists=True, help="File or directory to publish."),
]
NameArgument = Annotated[
    str,
    typer.Argument(help="Destination name relative to the destination root."),
]
DestRootOption = Annotated[
    Path | None,
    typer.Option("--dest-root", help="Destination root (or DIRSTAGE_DEST_ROOT)."),
]
TempRootOption = Annotated[
    Path | None,
    typer.Option("--temp-root", help="Staging root (or DIRSTAGE_TEMP_ROOT)."),
]
SuffixOption = Annotated[
    str | None,
    typer.Option("--suffix", help="Suffix for staged names (or DIRSTAGE_TEMP_SUFFIX)."),
]
CleanupOption = Annotated[
    bool | None,
    typer.Option(
        "--cleanup/--no-cleanup",
        help="Remove staged artifacts on failure (or DIRSTAGE_CLEANUP).",
    ),
]
TreeFlag = Annotated[
    bool,
    typer.Option("--tree", help="Print the published tree."),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", help="Log staging events to stderr."),
]


def copy_into(ctx: StagingContext, source: Path) -> None:
    """Replicate the children of ``source`` inside ``ctx``.

    Sub-directories are staged with their own nested context so each level
    is committed by a rename inside the enclosing staged directory.
    """
    for entry in sorted(source.iterdir()):
        if entry.is_dir() and not entry.is_symlink():
            ctx.stage_directory(entry.name, lambda sub, src=entry: copy_into(sub, src))
        else:
            ctx.stage_file(entry.name, lambda temp, src=entry: _copy_file(src, temp))


def _copy_file(src: Path, temp: str) -> None:
    shutil.copy2(src, temp, follow_symlinks=False)


def publish_path(ctx: StagingContext, source: Path, name: str) -> Path:
    """Stage a copy of ``source`` and commit it as ``name``."""
    if source.is_dir() and not source.is_symlink():
        return ctx.stage_directory(name, lambda sub: copy_into(sub, source))
    return ctx.stage_file(name, lambda temp: _copy_file(source, temp))


def render_tree(path: Path) -> Tree:
    """Build a Rich tree of ``path`` and everything below it."""
    tree = Tree(f"[bold]{path}")
    if path.is_dir():
        _add_children(tree, path)
    return tree


def _add_children(tree: Tree, directory: Path) -> None:
    for entry in sorted(directory.iterdir()):
        if entry.is_dir() and not entry.is_symlink():
            branch = tree.add(f"[bold blue]{entry.name}/")
            _add_children(branch, entry)
        else:
            tree.add(entry.name)


def _load(
    dest_root: Path | None,
    temp_root: Path | None,
    suffix: str | None,
    cleanup: bool | None,
) -> StagingContext:
    try:
        return load_context(
            destination_root=dest_root,
            temp_root=temp_root,
            temp_suffix=suffix,
            cleanup=cleanup,
        )
    except InvalidConfiguration as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


def publish(
    source: SourceArgument,
    name: NameArgument,
    dest_root: DestRootOption = None,
    temp_root: TempRootOption = None,
    suffix: SuffixOption = None,
    cleanup: CleanupOption = None,
    show_tree: TreeFlag = False,
    verbose: VerboseFlag = False,
) -> None:
    """Copy SOURCE into the destination root as NAME, all or nothing."""

    configure_logging(verbose)
    ctx = _load(dest_root, temp_root, suffix, cleanup)

    try:
        dest = publish_path(ctx, source, name)
    except OSError as exc:
        typer.secho(f"Failed to publish {source}: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.secho(f"Published {dest}", fg=typer.colors.GREEN)
    if show_tree:
        Console().print(render_tree(dest))


def paths(
    name: NameArgument,
    dest_root: DestRootOption = None,
    temp_root: TempRootOption = None,
    suffix: SuffixOption = None,
) -> None:
    """Show the staging and destination paths NAME would use."""

    ctx = _load(dest_root, temp_root, suffix, cleanup=False)
    typer.echo(f"temp: {ctx.temp_path(name)}")
    typer.echo(f"dest: {ctx.dest_path(name)}")


def run_cli(args: Sequence[str] | None = None) -> None:
    app(args=args)


app.command("publish")(publish)
app.command("paths")(paths)

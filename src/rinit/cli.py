"""CLI interface for rinit - R project scaffolding."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.logging import RichHandler

from .config import get_settings
from .errors import RinitError
from .project import ProjectContext, ensure_project_root_absent, materialize
from .sync import ClickDecisionSource, ConflictMode, sync_user_templates
from .templates import LocateMode, build_manifest, list_variants, resolve_template_root
from .utils import console, err_console
from .vcs import init_dvc, init_git


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"Error: {error}", style="bold red")
    raise SystemExit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """A modern R project scaffolding tool."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@cli.command("new")
@click.argument("project_name")
@click.option(
    "--lang",
    "variant",
    default=None,
    help="Language variant of the project metadata (e.g. en, zh).",
)
@click.option("--git/--no-git", "use_git", default=None, help="Initialize a git repository.")
@click.option("--dvc/--no-dvc", "use_dvc", default=None, help="Initialize DVC.")
def new_cmd(
    project_name: str,
    variant: Optional[str],
    use_git: Optional[bool],
    use_dvc: Optional[bool],
) -> None:
    """
    Create a new R project in ./PROJECT_NAME.

    Sets up the standard directory layout (R/, raw/, out/, ...), copies the
    templates with the project name filled in, adds the metadata for the
    chosen language, then initializes git and DVC when available.
    """
    try:
        settings = get_settings()
    except (OSError, ValueError) as e:
        _fail(e)
    context = ProjectContext(
        name=project_name,
        root=Path.cwd() / project_name,
        variant=variant or settings["lang"],
    )

    try:
        ensure_project_root_absent(context.root)
        template_root = resolve_template_root()
        manifest = build_manifest(template_root, context.name, context.variant)
    except RinitError as e:
        _fail(e)

    console.print(f"🚀 Initializing R project: {context.name} ...", style="blue")
    for warning in manifest.warnings:
        console.print(f"⚠️  {warning}", style="yellow")
    if manifest.warnings:
        available = ", ".join(list_variants(template_root)) or "none"
        console.print(f"   available: {available}", style="yellow")

    try:
        materialize(context.root, manifest)
    except RinitError as e:
        _fail(e)
    console.print("✅ Directory structure created", style="green")
    console.print("✅ Configuration files created", style="green")

    if use_git is None:
        use_git = settings["git"]
    if use_dvc is None:
        use_dvc = settings["dvc"]
    if use_git:
        init_git(context.root)
    if use_dvc:
        init_dvc(context.root)

    console.print(
        f"\n🎉 Project '{context.name}' initialized successfully!", style="blue"
    )
    console.print("👉 Next steps:")
    console.print(f"   cd {context.name}")
    console.print("   Or run: R")


@cli.command("setup")
@click.option(
    "--target",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to install templates into (default: user template directory).",
)
@click.option(
    "--overwrite",
    "on_conflict",
    flag_value=ConflictMode.OVERWRITE_ALL.value,
    help="Overwrite existing files without asking.",
)
@click.option(
    "--skip-existing",
    "on_conflict",
    flag_value=ConflictMode.SKIP_ALL.value,
    help="Keep existing files without asking.",
)
def setup_cmd(target: Optional[Path], on_conflict: Optional[str]) -> None:
    """
    Copy the bundled templates into the user template directory.

    Files that are not there yet are copied. For files that already exist you
    are asked: y (overwrite), n (keep, default), a (overwrite all remaining),
    none (keep all remaining). Once installed, the user copy takes precedence
    over the bundled templates when creating projects.
    """
    mode = ConflictMode(on_conflict) if on_conflict else ConflictMode.ASK_EACH_TIME
    try:
        source, destination, report = sync_user_templates(
            ClickDecisionSource(), target_root=target, mode=mode
        )
    except RinitError as e:
        _fail(e)

    console.print(f"Synced templates from {source} to {destination}", style="green")
    for key, count in report.to_dict().items():
        console.print(f"  {key}: {count}")
    if report.failed:
        console.print("Failed files:", style="red")
        for name in report.failed:
            console.print(f"  - {name}", style="red")
        raise SystemExit(1)


@cli.command("where")
@click.option(
    "--dist-only",
    is_flag=True,
    default=False,
    help="Ignore the user template directory.",
)
def where_cmd(dist_only: bool) -> None:
    """Print the template directory that would be used."""
    mode = LocateMode.DIST_ONLY if dist_only else LocateMode.FULL
    try:
        root = resolve_template_root(mode)
    except RinitError as e:
        _fail(e)
    print(root)


@cli.command("variants")
def variants_cmd() -> None:
    """List the language variants the templates provide."""
    try:
        root = resolve_template_root()
    except RinitError as e:
        _fail(e)
    variants = list_variants(root)
    if not variants:
        console.print(f"No variant metadata found in {root}", style="yellow")
        return
    for code in variants:
        print(code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

"""Catalogue and manifest CLI commands."""

import logging

import click
from rich.console import Console
from rich.markup import escape

from asm_packages.config.loader import load_settings
from asm_packages.config.models import AsmSettings
from asm_packages.errors import AsmPackagesError, VersionError
from asm_packages.packages.catalog import find_package
from asm_packages.panel.builder import RichPanelBuilder
from asm_packages.panel.controller import PackagePanel
from asm_packages.panel.models import RowAction
from asm_packages.utils.links import open_url
from asm_packages.utils.versioning import read_version, resolve_version, stamp_version

logger = logging.getLogger(__name__)

console = Console()


def _fail(error: Exception) -> None:
    console.print(f"[red]{escape(str(error))}[/red]")
    raise SystemExit(1)


def _auto_stamp(settings: AsmSettings) -> None:
    """Stamp the running version on load, when the version file exists.

    Failures are logged and do not stop the command.
    """
    path = settings.version_file_path
    if not path.is_file():
        logger.debug(f"No version file at {path}, skipping version stamp")
        return
    try:
        current = resolve_version(settings.version_resource_path, settings.fallback_version)
        stamp_version(path, current)
    except VersionError as e:
        logger.warning(f"Skipping version stamp: {e}")


def _load_settings(ctx) -> AsmSettings:
    return load_settings(ctx.obj["project"], ctx.obj["config_path"])


def _load_panel(ctx, show_ids: bool = True) -> PackagePanel:
    settings = _load_settings(ctx)
    if settings.auto_stamp:
        _auto_stamp(settings)
    return PackagePanel(settings, builder=RichPanelBuilder(show_ids=show_ids))


@click.command("list")
@click.option("--no-ids", is_flag=True, help="Hide package ids")
@click.pass_context
def list_packages(ctx, no_ids):
    """Show ASM dependencies, plugins and samples."""
    try:
        panel = _load_panel(ctx, show_ids=not no_ids)
        console.print(panel.create_extension_ui())
    except AsmPackagesError as e:
        _fail(e)


def _set(ctx, package_id: str, enabled: bool) -> None:
    try:
        panel = _load_panel(ctx)
        descriptor = find_package(package_id)
        if descriptor.is_example:
            console.print(
                f"[red]{package_id} is a sample and is not added to the manifest.[/red]"
            )
            console.print(f"Open it with: asm-packages open {package_id}")
            raise SystemExit(1)
        changed = panel.manifest.set_dependency(
            descriptor.id, panel.resolve_uri(descriptor), enabled=enabled
        )
    except AsmPackagesError as e:
        _fail(e)
        return

    if not changed:
        state = "already in" if enabled else "not in"
        console.print(f"{descriptor.display_name} is {state} the manifest.")
    elif enabled:
        console.print(f"[green]Added {descriptor.display_name} ({descriptor.id})[/green]")
    else:
        console.print(f"[green]Removed {descriptor.display_name} ({descriptor.id})[/green]")


@click.command()
@click.argument("package_id")
@click.pass_context
def install(ctx, package_id):
    """Add a dependency or plugin to the project manifest."""
    _set(ctx, package_id, enabled=True)


@click.command()
@click.argument("package_id")
@click.pass_context
def remove(ctx, package_id):
    """Remove a dependency or plugin from the project manifest."""
    _set(ctx, package_id, enabled=False)


@click.command()
@click.argument("package_id")
@click.pass_context
def activate(ctx, package_id):
    """Do what the package's panel button does."""
    try:
        panel = _load_panel(ctx)
        descriptor = find_package(package_id)
        action = panel.activate(package_id)
    except AsmPackagesError as e:
        _fail(e)
        return

    messages = {
        RowAction.INSTALL: f"[green]Added {descriptor.display_name}[/green]",
        RowAction.REMOVE: f"[green]Removed {descriptor.display_name}[/green]",
        RowAction.OPEN_LINK: f"Opened {panel.resolve_uri(descriptor)}",
        RowAction.NONE: f"{descriptor.display_name} is already installed.",
    }
    console.print(messages[action])


@click.command("open")
@click.argument("package_id")
@click.pass_context
def open_package(ctx, package_id):
    """Open a package's repository in the browser."""
    try:
        panel = _load_panel(ctx)
        uri = panel.resolve_uri(find_package(package_id))
    except AsmPackagesError as e:
        _fail(e)
        return

    if not uri.startswith(("http://", "https://")):
        console.print(f"[yellow]{package_id} has no link (source: {uri})[/yellow]")
        raise SystemExit(1)
    if not open_url(uri):
        console.print(f"[yellow]Could not open a browser. URL: {uri}[/yellow]")


def _open_setting(ctx, attr: str) -> None:
    try:
        url = getattr(_load_settings(ctx), attr)
    except AsmPackagesError as e:
        _fail(e)
        return
    if not open_url(url):
        console.print(f"[yellow]Could not open a browser. URL: {url}[/yellow]")


@click.command()
@click.pass_context
def docs(ctx):
    """Open the ASM documentation."""
    _open_setting(ctx, "documentation_url")


@click.command()
@click.pass_context
def changelog(ctx):
    """Open the ASM changelog."""
    _open_setting(ctx, "changelog_url")


@click.command("stamp-version")
@click.option("--version", "version", default=None, help="Version to stamp (default: resolved ASM version)")
@click.pass_context
def stamp_version_command(ctx, version):
    """Write the running ASM version into the package version file."""
    try:
        settings = _load_settings(ctx)
        current = version or resolve_version(
            settings.version_resource_path, settings.fallback_version
        )
        previous = read_version(settings.version_file_path)
        changed = stamp_version(settings.version_file_path, current)
    except AsmPackagesError as e:
        _fail(e)
        return

    if changed:
        console.print(f"[green]Stamped version {current}[/green] (was {previous})")
    else:
        console.print(f"Version already {current}.")


@click.command()
@click.argument("package_name")
@click.pass_context
def select(ctx, package_name):
    """Show the panel as the host would after selecting PACKAGE_NAME."""
    try:
        panel = _load_panel(ctx)
        panel.create_extension_ui()
        visible = panel.on_package_selection_change(package_name)
    except AsmPackagesError as e:
        _fail(e)
        return

    if not visible:
        console.print(f"{package_name} is not an ASM package; panel hidden.")
        return
    console.print(panel.node)

"""asm-packages CLI - Main entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from asm_packages import __version__

console = Console()

_LOG_FORMAT = "[%(name)s] %(message)s"
_logging_configured = False


def _setup_logging(verbose: bool) -> None:
    """Configure the root logger with a rich handler on stderr."""
    global _logging_configured
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if _logging_configured:
        return

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root_logger.addHandler(handler)
    _logging_configured = True


@click.group()
@click.version_option(version=__version__, prog_name="asm-packages")
@click.option(
    "--project",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Unity project root",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: asm-packages.yaml in the project root)",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, project, config_path, verbose):
    """asm-packages - Advanced Scene Manager package tools

    Lists ASM plugins, samples and dependencies and adds or removes them
    from a Unity project's package manifest.
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["project"] = project
    ctx.obj["config_path"] = config_path


from .package_commands import (  # noqa: E402
    activate,
    changelog,
    docs,
    install,
    list_packages,
    open_package,
    remove,
    select,
    stamp_version_command,
)

cli.add_command(list_packages)
cli.add_command(install)
cli.add_command(remove)
cli.add_command(activate)
cli.add_command(open_package)
cli.add_command(docs)
cli.add_command(changelog)
cli.add_command(stamp_version_command)
cli.add_command(select)


if __name__ == "__main__":
    cli()

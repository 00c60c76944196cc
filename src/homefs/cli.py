"""homefs command line."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Annotated

import typer

from homefs.const import HOMEFS_CONFIG, HOMEFS_ROOT
from homefs.logger import setup_logging
from homefs.version import __version__

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Serve one directory tree over HTTP.")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "-c",
        "--config",
        metavar="path_to_config_file",
        help="YAML file with homefs configuration",
    ),
]
RootOption = Annotated[
    Path | None,
    typer.Option(
        "-r",
        "--root",
        envvar=HOMEFS_ROOT,
        help="Directory to serve. Overrides root_dir from config.",
    ),
]
DebugOption = Annotated[
    int,
    typer.Option("-d", "--debug", count=True, help="Start homefs in debug mode"),
]


def _load(config: Path | None, root: Path | None):
    from homefs.fs import resolve_root
    from homefs.yaml import load_config

    config_file_path = config.resolve() if config is not None else None
    if config_file_path is not None:
        os.environ[HOMEFS_CONFIG] = str(config_file_path)
    config_parsed = load_config(config_file_path=config_file_path)
    if root is not None:
        config_parsed.root_dir = root
    return config_parsed, resolve_root(config_parsed.root_dir)


@app.command()
def run(
    config: ConfigOption = None,
    root: RootOption = None,
    debug: DebugOption = 0,
) -> None:
    """Run homefs web server."""
    from homefs.runner import run as run_service
    from homefs.yaml import ConfigurationError

    setup_logging(debug_level=debug)
    _LOGGER.info("homefs %s starting.", __version__)
    try:
        config_parsed, root_parsed = _load(config, root)
    except ConfigurationError as err:
        _LOGGER.error("Failed to load config. %s Exiting.", err)
        raise typer.Exit(1)
    backend_options = {}
    if debug >= 2:
        backend_options["debug"] = True
    run_service(
        config=config_parsed,
        root=root_parsed,
        debug=debug,
        backend_options=backend_options,
    )
    _LOGGER.info("homefs %s exiting.", __version__)


@app.command("ls")
def list_path(
    path: Annotated[str, typer.Argument(help="Path relative to root")] = "",
    config: ConfigOption = None,
    root: RootOption = None,
    content: Annotated[
        bool, typer.Option(help="Include file text for file paths")
    ] = False,
) -> None:
    """Print what homefs serves at path, as JSON."""
    from homefs.fs import DirectoryLister, PathGuard
    from homefs.helper.exceptions import HomeFSError

    try:
        _config, root_parsed = _load(config, root)
        guard = PathGuard(root_parsed)
        lister = DirectoryLister(guard)
        resolved = guard.resolve(path)
        if resolved.is_dir():
            result = lister.list(resolved)
        else:
            result = lister.describe(resolved, with_content=content)
    except HomeFSError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1)
    typer.echo(result.model_dump_json(indent=2))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Serve one directory tree over HTTP."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def main() -> int:
    """Start homefs with typer."""
    try:
        app()
        return 0
    except typer.Exit as e:
        return e.exit_code if e.exit_code is not None else 0


if __name__ == "__main__":
    sys.exit(main())

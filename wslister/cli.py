"""wslister CLI - command line interface for the project lister."""

import json
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from . import __version__
from .config import ConfigError, ListerConfig, get_config_paths, load_config
from .lister import WorkspaceError, list_open_project_names
from .log import logger
from .workspace import WorkspaceSource


def load_cli_config(config_path: Optional[str]) -> ListerConfig:
    """Load config, exiting with a message on a broken file."""
    try:
        return load_config(Path(config_path) if config_path else None)
    except yaml.YAMLError as e:
        click.echo(f"Error: config is not valid YAML: {e}", err=True)
        sys.exit(1)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def render_lines(names: list[str], config: ListerConfig, greeting: bool) -> list[str]:
    """Console lines: optional greeting, then one line per project."""
    lines = []
    if greeting and config.greeting:
        lines.append(config.greeting)
    lines.extend(config.line_format.format(name=name) for name in names)
    return lines


# --- CLI Groups ---


@click.group()
@click.version_option(version=__version__, prog_name="wslister")
def cli():
    """wslister - list the open projects in a workspace."""
    pass


# --- Core Commands ---


@cli.command("list")
@click.option("--workspace", "-w", type=click.Path(), help="Workspace snapshot file")
@click.option("--config", "-c", type=click.Path(exists=True), help="Config file path")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-greeting", is_flag=True, help="Skip the greeting line")
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
def list_projects(
    workspace: Optional[str],
    config: Optional[str],
    as_json: bool,
    no_greeting: bool,
    debug: bool,
):
    """List the names of open projects."""
    cfg = load_cli_config(config)
    problems = cfg.validate()
    if problems:
        click.echo(f"Error: {problems[0]}", err=True)
        sys.exit(1)

    logger.set_level("debug" if debug else cfg.log_level)
    if cfg.source:
        logger.debug("config", f"Loaded from {cfg.source}")

    source = WorkspaceSource.from_config(cfg, workspace)
    try:
        names = list_open_project_names(source.projects())
    except WorkspaceError as e:
        logger.error("workspace", str(e), path=source.path)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.debug("list", f"{len(names)} open project(s)")

    if as_json:
        click.echo(json.dumps({"projects": names}, indent=2))
        return

    for line in render_lines(names, cfg, greeting=not no_greeting):
        click.echo(line)


# --- Config Commands ---


@cli.group()
def config():
    """Configuration commands."""
    pass


@config.command("show")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
def config_show(config_path: Optional[str]):
    """Show the effective configuration."""
    cfg = load_cli_config(config_path)
    click.echo(f"# Source: {cfg.source or 'defaults'}")
    click.echo(yaml.safe_dump(cfg.to_dict(), default_flow_style=False, sort_keys=False), nl=False)


@config.command("validate")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
def config_validate(config_path: Optional[str]):
    """Check the configuration for problems."""
    cfg = load_cli_config(config_path)
    problems = cfg.validate()
    if problems:
        for problem in problems:
            click.echo(f"✗ {problem}", err=True)
        sys.exit(1)
    click.echo("✓ Config is valid")


@config.command("paths")
def config_paths():
    """Show where config files are looked up."""
    home_config, local_config = get_config_paths()
    for path in (home_config, local_config):
        marker = "✓" if path.exists() else "-"
        click.echo(f"{marker} {path}")


def main():
    cli()


if __name__ == "__main__":
    main()

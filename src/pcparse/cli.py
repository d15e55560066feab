"""CLI entry point for pcparse.

Commands take a PACKAGE argument that is either a path to a .pc file or a
package name looked up in PKG_CONFIG_PATH and the configured search paths.
"""

from __future__ import annotations

import sys
from dataclasses import fields
from pathlib import Path
from typing import NoReturn

import click
import yaml

from pcparse.config import ConfigError, PcParseConfig, find_config, load_config
from pcparse.exceptions import PackageNotFoundError, ParseError
from pcparse.loader import load, load_package
from pcparse.logging import get_logger, setup_logging
from pcparse.models import Package
from pcparse.schemas import package_to_response

logger = get_logger("cli")

OUTPUT_FORMATS = ("text", "json", "yaml")

DEPENDENCY_KINDS = {
    "requires": "requires",
    "private": "requires_private",
    "internal": "requires_internal",
    "provides": "provides",
}


def _load_config(config_path: Path | None) -> PcParseConfig:
    """Load the given config, or the nearest pcparse.yaml, or defaults."""
    if config_path is None:
        try:
            config_path = find_config()
        except ConfigError:
            return PcParseConfig(root_path=Path.cwd())
    return load_config(config_path)


def _fail(message: str) -> NoReturn:
    click.echo(message, err=True)
    sys.exit(1)


def _load(ctx: click.Context, package: str) -> Package:
    """Load PACKAGE for a command, exiting with a message on failure."""
    search_paths: list[Path] = ctx.obj["search_paths"]
    try:
        return load_package(package, search_paths)
    except PackageNotFoundError as e:
        _fail(f"Package not found: {e}")
    except ParseError as e:
        _fail(f"Parse error in {package}: {e}")
    except OSError as e:
        _fail(f"Cannot read {package}: {e}")


@click.group()
@click.version_option(package_name="pcparse")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to pcparse.yaml (auto-detected if not specified)",
)
@click.option(
    "-p",
    "--search-path",
    "extra_paths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to search for <name>.pc before the configured ones (repeatable)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def main(
    ctx: click.Context, config_path: Path | None, extra_paths: tuple[Path, ...], verbose: bool
) -> None:
    """pcparse - inspect pkg-config (.pc) files."""
    try:
        config = _load_config(config_path)
    except ConfigError as e:
        _fail(f"Configuration error: {e}")

    setup_logging(
        log_dir=config.get_log_path(),
        level="DEBUG" if verbose else config.logging.level,
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["search_paths"] = [*extra_paths, *config.get_search_paths()]
    logger.debug("Search paths: %s", ctx.obj["search_paths"])


@main.command()
@click.argument("package")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.pass_context
def show(ctx: click.Context, package: str, output_format: str) -> None:
    """Print every field of a parsed package."""
    pkg = _load(ctx, package)
    response = package_to_response(pkg)

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(response.model_dump_json(indent=2))
        return
    if output_format == "yaml":
        click.echo(yaml.safe_dump(response.model_dump(mode="json"), sort_keys=False), nl=False)
        return

    for field in fields(pkg):
        if field.name == "vars":
            continue
        value = getattr(pkg, field.name)
        if isinstance(value, tuple):
            value = ", ".join(str(d) for d in value)
        click.echo(f"{field.name}: {value}")
    if pkg.vars:
        click.echo("vars:")
        for name, value in pkg.vars.items():
            click.echo(f"  {name} = {value}")


@main.command()
@click.argument("package")
@click.option("--private", "include_private", is_flag=True, help="Include Cflags.private")
@click.pass_context
def cflags(ctx: click.Context, package: str, include_private: bool) -> None:
    """Print the compiler flags of a package."""
    pkg = _load(ctx, package)
    flags = [pkg.cflags]
    if include_private:
        flags.append(pkg.cflags_private)
    click.echo(" ".join(f for f in flags if f))


@main.command()
@click.argument("package")
@click.option("--private", "include_private", is_flag=True, help="Include Libs.private")
@click.pass_context
def libs(ctx: click.Context, package: str, include_private: bool) -> None:
    """Print the linker flags of a package."""
    pkg = _load(ctx, package)
    flags = [pkg.libs]
    if include_private:
        flags.append(pkg.libs_private)
    click.echo(" ".join(f for f in flags if f))


@main.command()
@click.argument("package")
@click.option(
    "-k",
    "--kind",
    type=click.Choice(list(DEPENDENCY_KINDS), case_sensitive=False),
    default="requires",
    help="Which list to print (default: requires)",
)
@click.pass_context
def requires(ctx: click.Context, package: str, kind: str) -> None:
    """List the dependencies of a package, one per line."""
    pkg = _load(ctx, package)
    dependencies = getattr(pkg, DEPENDENCY_KINDS[kind.lower()])
    for dependency in dependencies:
        click.echo(str(dependency))


@main.command()
@click.argument("package")
@click.argument("name")
@click.pass_context
def variable(ctx: click.Context, package: str, name: str) -> None:
    """Print the resolved value of a variable."""
    pkg = _load(ctx, package)
    value = pkg.get_variable(name)
    if value is None:
        _fail(f"Variable '{name}' is not defined in {package}")
    click.echo(value)


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
def validate(files: tuple[Path, ...]) -> None:
    """Check that each file parses."""
    failures = 0
    for path in files:
        try:
            load(path)
        except ParseError as e:
            failures += 1
            click.echo(f"{path}: {e}", err=True)
        except OSError as e:
            failures += 1
            click.echo(f"{path}: cannot read: {e}", err=True)
        else:
            click.echo(f"{path}: ok")

    if failures:
        _fail(f"{failures} of {len(files)} file(s) failed to parse")

# SPDX-License-Identifier: MIT
"""CLI entry point for the toolchain-version command."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from .compare import is_prerelease
from .config import ConfigError, load_config
from .errors import ToolchainVersionError
from .probe import probe_toolchain


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


@click.command()
@click.version_option(package_name="toolchain-version")
@click.option(
    "--toolchain",
    metavar="PATH",
    help="Toolchain executable to probe (default: $RUSTC, then pyproject.toml, then rustc).",
)
@click.option(
    "--minimum",
    metavar="VERSION",
    help="Fail unless the toolchain is at least this major.minor.patch version.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project directory containing pyproject.toml.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
def cli(
    toolchain: Optional[str],
    minimum: Optional[str],
    directory: Optional[Path],
    verbose: bool,
) -> None:
    """Print the release version of a compiler toolchain.

    \b
    Examples:
        toolchain-version
        toolchain-version --toolchain /usr/local/bin/rustc
        toolchain-version --minimum 1.70.0
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(directory)
        config = replace(
            config,
            toolchain=toolchain or config.toolchain,
            minimum=minimum or config.minimum,
        )
        version = probe_toolchain(config)
    except (ConfigError, ToolchainVersionError) as e:
        echo_error(str(e))
        sys.exit(1)

    click.echo(str(version))
    if verbose and is_prerelease(version):
        click.echo("Pre-release toolchain channel detected")

    required = config.minimum_version
    if required is not None:
        if version < required:
            echo_error(f"{config.toolchain} {version} is older than required {required}")
            sys.exit(1)
        echo_success(f"{config.toolchain} {version} satisfies minimum {required}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

"""
Township Resolver — CLI Entry Point
====================================
Installed as the ``township-resolve`` command via ``pyproject.toml``.

Usage:
    township-resolve --input addresses.txt --output output.csv

When ``--input`` is omitted the command prompts for the path.  The API key
is read from ``--api-key``, or from ``API_KEY`` / ``GOOGLE_MAPS_API_KEY`` in
the environment or a ``.env`` file.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from township_resolver.common.exceptions import TownshipResolverError
from township_resolver.config import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TIMEOUT,
    load_api_key,
)
from township_resolver.geocoder import GeocodeClient
from township_resolver.pipeline import TownshipResolver


@click.command(
    name="township-resolve",
    help=(
        "Resolve a newline-delimited list of addresses to townships.\n\n"
        "Geocodes each address with the Google Geocoding API and writes an "
        "Address,Township CSV."
    ),
)
@click.option(
    "--input", "-i", "input_path",
    prompt="Please input path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the address list (one address per line).",
)
@click.option(
    "--output", "-o", "output_path",
    default=DEFAULT_OUTPUT_PATH,
    show_default=True,
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    help="Path for the output CSV. Replaced if it already exists.",
)
@click.option(
    "--api-key",
    default=None,
    help="Google Maps API key. Defaults to API_KEY or GOOGLE_MAPS_API_KEY "
         "from the environment or a .env file.",
)
@click.option(
    "--env-file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Load environment variables from this file instead of ./.env.",
)
@click.option(
    "--timeout",
    default=DEFAULT_TIMEOUT,
    show_default=True,
    type=float,
    help="HTTP timeout in seconds for each geocoding request.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def main(
    input_path: Path,
    output_path: Path,
    api_key: str | None,
    env_file: Path | None,
    timeout: float,
    verbose: bool,
) -> None:
    """CLI entry point — wires Click options into TownshipResolver."""
    try:
        key = api_key or load_api_key(env_file)
        with GeocodeClient(api_key=key, timeout=timeout) as client:
            tool = TownshipResolver(
                input_path=input_path,
                output_path=output_path,
                client=client,
                verbose=verbose,
            )
            tool.run()
    except TownshipResolverError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    click.echo(f"\nTownship table written to: {output_path}")
    click.echo(tool.summary())


if __name__ == "__main__":
    main()

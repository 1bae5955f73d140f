"""
Township Resolver — Batch Pipeline
===================================
Geocodes a list of addresses one at a time and resolves each answer to a
township.

Error policy:
    * A :class:`~township_resolver.common.exceptions.TransportError` (or any
      other client failure) aborts the whole batch.  Nothing is returned, so
      nothing reaches the output file.
    * An address whose answer does not resolve (non-``"OK"`` status, no
      results) is skipped and the batch continues.

Classes:
    TownshipResolver    File-to-file tool (inherits BatchTool).

Usage::

    from pathlib import Path
    from township_resolver.geocoder import GeocodeClient
    from township_resolver.pipeline import TownshipResolver

    with GeocodeClient(api_key="...") as client:
        TownshipResolver(
            input_path=Path("addresses.txt"),
            output_path=Path("output.csv"),
            client=client,
        ).run()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Protocol

from township_resolver.common.base_tool import BatchTool
from township_resolver.common.exceptions import OutputWriteError
from township_resolver.common.validators import Validators
from township_resolver.files import read_addresses, write_townships
from township_resolver.models import GeocodeResponse, ResolvedTownship
from township_resolver.resolver import resolve_township

logger = logging.getLogger("township_resolver.pipeline")


class Geocoder(Protocol):
    """Anything with a ``geocode(address) -> GeocodeResponse`` method."""

    def geocode(self, address: str) -> GeocodeResponse: ...


Resolver = Callable[[GeocodeResponse], ResolvedTownship | None]


def resolve_addresses(
    addresses: Iterable[str],
    client: Geocoder,
    resolver: Resolver = resolve_township,
) -> list[ResolvedTownship]:
    """Geocode and resolve every address, preserving input order.

    Args:
        addresses: Address strings, sent to the geocoder verbatim.
        client: Geocoder used for each lookup.
        resolver: Extraction rule applied to each response.

    Returns:
        One :class:`ResolvedTownship` per resolvable address.  Unresolvable
        addresses contribute nothing; duplicates are kept.

    Raises:
        TransportError: From the client; aborts the batch immediately.
    """
    resolved: list[ResolvedTownship] = []
    total = 0
    for address in addresses:
        total += 1
        logger.info("Processing %s", address)
        response = client.geocode(address)

        row = resolver(response)
        if row is None:
            logger.debug("  skipped %r (status %s)", address, response.status)
            continue
        resolved.append(row)

    logger.info("Geocoded %d addresses, resolved %d townships.", total, len(resolved))
    return resolved


class TownshipResolver(BatchTool):
    """Resolve every address in a text file and write an ``Address,Township`` CSV.

    The output file is removed before geocoding starts and written only
    after the whole batch has completed, so a fatal error leaves no output
    file behind.

    Args:
        input_path: Newline-delimited address list.
        output_path: Destination CSV.  Replaced if it exists.
        client: Geocoder used for each address.
        verbose: Enable DEBUG-level logging.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        client: Geocoder,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(input_path, output_path, verbose=verbose)
        self.client = client

        self._results: list[ResolvedTownship] = []
        self._addresses_read = 0

    # ------------------------------------------------------------------
    # BatchTool abstract method implementations
    # ------------------------------------------------------------------

    def validate_inputs(self) -> None:
        """Check the address list exists and the output location is usable.

        Raises:
            AddressSourceError: If the address list is missing.
            InputValidationError: If the output path is the address list.
            OutputWriteError: If the output directory cannot be created.
        """
        Validators.assert_file_exists(self.input_path)
        Validators.assert_paths_distinct(self.input_path, self.output_path)
        Validators.assert_output_dir_writable(self.output_path)
        logger.debug("Inputs validated successfully.")

    def process(self) -> None:
        """Read addresses, resolve them, and write the CSV.

        Raises:
            AddressSourceError: If the address list cannot be read.
            TransportError: If any geocode call fails.
            OutputWriteError: If writing the CSV fails.
        """
        self._results = []
        self._remove_previous_output()

        addresses = read_addresses(self.input_path)
        self._addresses_read = len(addresses)
        logger.info("Read %d addresses from %s", len(addresses), self.input_path)

        results = resolve_addresses(addresses, self.client)
        write_townships(results, self.output_path)
        self._results = results

    def _report_success(self, elapsed: float) -> None:
        logger.info("%s Finished in %.2fs → %s", self.summary(), elapsed, self.output_path)

    def summary(self) -> str:
        """One-line outcome of the last run, e.g. ``"Resolved: 4/5 addresses."``."""
        return f"Resolved: {len(self._results)}/{self._addresses_read} addresses."

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _remove_previous_output(self) -> None:
        try:
            self.output_path.unlink()
        except FileNotFoundError:
            logger.debug("No previous output at %s", self.output_path)
        except OSError as exc:
            raise OutputWriteError(str(self.output_path), str(exc)) from exc
        else:
            logger.debug("Removed previous output at %s", self.output_path)

    @property
    def results(self) -> list[ResolvedTownship]:
        """Rows written by the last run, or ``[]``."""
        return self._results

    @property
    def addresses_read(self) -> int:
        """Number of addresses read by the last run."""
        return self._addresses_read

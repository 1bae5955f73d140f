"""
Township Resolver — File I/O
=============================
Reads the newline-delimited address list and writes the
``Address,Township`` CSV table.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from township_resolver.common.exceptions import AddressSourceError, OutputWriteError
from township_resolver.models import ResolvedTownship

OUTPUT_COLUMNS = ["Address", "Township"]


def read_addresses(path: Path) -> list[str]:
    """Read one address per line from *path*.

    Lines are split on ``"\\n"`` only and kept verbatim: nothing is trimmed
    and blank lines are not dropped, so a trailing newline produces a final
    empty-string address.

    Raises:
        AddressSourceError: If the file cannot be read or decoded.
    """
    try:
        # newline="" keeps any "\r" so only "\n" separates addresses
        with open(path, encoding="utf-8", newline="") as fh:
            contents = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise AddressSourceError(str(path), str(exc)) from exc
    return contents.split("\n")


def write_townships(rows: Iterable[ResolvedTownship], output_path: Path) -> int:
    """Write *rows* as a CSV table, replacing any existing file.

    Args:
        rows: Resolved rows, written in the order given.
        output_path: Destination CSV path.

    Returns:
        The number of data rows written.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    df = pd.DataFrame([row.to_row() for row in rows], columns=OUTPUT_COLUMNS)
    try:
        df.to_csv(output_path, index=False)
    except OSError as exc:
        raise OutputWriteError(str(output_path), str(exc)) from exc
    return len(df)

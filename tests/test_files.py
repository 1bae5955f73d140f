"""
Tests — File I/O
=================
Address list reading and CSV writing.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from township_resolver.common.exceptions import AddressSourceError, OutputWriteError
from township_resolver.files import read_addresses, write_townships
from township_resolver.models import ResolvedTownship


class TestReadAddresses:
    def test_one_address_per_line(self, tmp_path: Path) -> None:
        path = tmp_path / "addresses.txt"
        path.write_text("1 Main St\n2 Elm St", encoding="utf-8")
        assert read_addresses(path) == ["1 Main St", "2 Elm St"]

    def test_trailing_newline_yields_empty_address(self, tmp_path: Path) -> None:
        path = tmp_path / "addresses.txt"
        path.write_text("1 Main St\n2 Elm St\n", encoding="utf-8")
        assert read_addresses(path) == ["1 Main St", "2 Elm St", ""]

    def test_lines_are_not_trimmed(self, tmp_path: Path) -> None:
        path = tmp_path / "addresses.txt"
        path.write_bytes(b"  1 Main St \r\n\n2 Elm St")
        assert read_addresses(path) == ["  1 Main St \r", "", "2 Elm St"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "addresses.txt"
        path.write_text("", encoding="utf-8")
        assert read_addresses(path) == [""]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(AddressSourceError):
            read_addresses(tmp_path / "nope.txt")

    def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "addresses.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(AddressSourceError):
            read_addresses(path)


class TestWriteTownships:
    def test_header_and_rows_in_order(self, tmp_path: Path) -> None:
        output = tmp_path / "output.csv"
        rows = [
            ResolvedTownship("B St, Town B, USA", "Town B"),
            ResolvedTownship("A St, Town A, USA", "Town A"),
        ]
        assert write_townships(rows, output) == 2
        df = pd.read_csv(output, keep_default_na=False)
        assert list(df.columns) == ["Address", "Township"]
        assert df["Township"].tolist() == ["Town B", "Town A"]

    def test_header_only_when_no_rows(self, tmp_path: Path) -> None:
        output = tmp_path / "output.csv"
        write_townships([], output)
        assert output.read_text(encoding="utf-8").splitlines() == ["Address,Township"]

    def test_empty_township_is_blank_cell(self, tmp_path: Path) -> None:
        output = tmp_path / "output.csv"
        write_townships([ResolvedTownship("California, USA", "")], output)
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[1] == '"California, USA",'

    def test_existing_file_is_replaced(self, tmp_path: Path) -> None:
        output = tmp_path / "output.csv"
        output.write_text("stale,data\n1,2\n3,4\n", encoding="utf-8")
        write_townships([ResolvedTownship("X", "Y")], output)
        assert output.read_text(encoding="utf-8").splitlines() == ["Address,Township", "X,Y"]

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OutputWriteError):
            write_townships([], tmp_path / "missing_dir" / "output.csv")

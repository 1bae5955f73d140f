"""
Township Resolver — Input Validators
=====================================
Static precondition checks run by :meth:`BatchTool.validate_inputs`
before any geocoding request is made.

All methods raise an exception from
:mod:`township_resolver.common.exceptions` rather than returning booleans::

    class MyTool(BatchTool):
        def validate_inputs(self) -> None:
            Validators.assert_file_exists(self.input_path)
            Validators.assert_paths_distinct(self.input_path, self.output_path)
            Validators.assert_output_dir_writable(self.output_path)
"""

from __future__ import annotations

from pathlib import Path

from township_resolver.common.exceptions import (
    AddressSourceError,
    InputValidationError,
    MissingCredentialError,
    OutputWriteError,
)
from township_resolver.config import API_KEY_ENV_VARS


class Validators:
    """Collection of static precondition checks.

    All methods are ``@staticmethod`` — this class is never instantiated.
    """

    # ------------------------------------------------------------------
    # File-system checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_file_exists(path: Path) -> None:
        """Assert that *path* points to an existing regular file.

        Args:
            path: Path object to check.

        Raises:
            AddressSourceError: If *path* does not exist or is a
                directory rather than a file.
        """
        path = Path(path)
        if not path.exists():
            raise AddressSourceError(
                str(path),
                "file not found. Check that the path is correct and the file exists.",
            )
        if path.is_dir():
            raise AddressSourceError(str(path), "expected a file but got a directory.")

    @staticmethod
    def assert_paths_distinct(input_path: Path, output_path: Path) -> None:
        """Assert that *output_path* is not the same file as *input_path*.

        Symlinks and relative paths are resolved before comparing.

        Raises:
            InputValidationError: If both paths name the same file.
        """
        if Path(output_path).resolve() == Path(input_path).resolve():
            raise InputValidationError(
                f"Output path '{output_path}' is the same file as the address "
                f"list '{input_path}'. Choose a different --output."
            )

    @staticmethod
    def assert_output_dir_writable(output_path: Path) -> None:
        """Assert that the parent directory of *output_path* is usable.

        Creates the parent directory (and any missing parents) if it does
        not yet exist.

        Raises:
            OutputWriteError: If the parent directory cannot be created,
                or *output_path* itself is a directory.
        """
        output_path = Path(output_path)
        if output_path.is_dir():
            raise OutputWriteError(str(output_path), "path is a directory")
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(str(output_path), str(exc)) from exc

    # ------------------------------------------------------------------
    # Configuration checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_credential_present(api_key: str | None) -> None:
        """Assert that a non-blank API key was supplied.

        Raises:
            MissingCredentialError: If *api_key* is ``None``, empty or
                whitespace only.
        """
        if not api_key or not api_key.strip():
            raise MissingCredentialError(API_KEY_ENV_VARS)

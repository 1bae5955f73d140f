"""
Township Resolver — Exception Hierarchy
========================================
Every module in the package raises exceptions from this module so the CLI
(and any other caller) can catch them at the right level of granularity.

Hierarchy::

    TownshipResolverError                ← catch-all base
    ├── InputValidationError             ← bad input paths
    │   └── AddressSourceError           ← address list cannot be read
    ├── ConfigurationError               ← bad or missing settings
    │   └── MissingCredentialError       ← no geocoding API key
    ├── GeocodingError                   ← geocoder API failures
    │   └── TransportError               ← network / HTTP / decode failure
    └── OutputWriteError                 ← cannot write to output path

An address the geocoder cannot resolve (``ZERO_RESULTS`` and friends) is
*not* an exception: the resolver returns ``None`` and the batch skips it.

Usage::

    from township_resolver.common.exceptions import TransportError

    raise TransportError(address, "Connection refused")
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class TownshipResolverError(Exception):
    """Base exception for the township resolver.

    Args:
        message: Human-readable description of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(TownshipResolverError):
    """Raised when the tool's inputs fail pre-processing validation."""


class AddressSourceError(InputValidationError):
    """Raised when the address list cannot be read.

    Args:
        path: String representation of the address list path.
        reason: Underlying OS error message.

    Example::

        raise AddressSourceError("data/addresses.txt", "No such file or directory")
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read address list '{path}': {reason}")
        self.path: str = path
        self.reason: str = reason


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(TownshipResolverError):
    """Raised when runtime configuration is missing or malformed."""


class MissingCredentialError(ConfigurationError):
    """Raised when no geocoding API key is configured.

    Args:
        env_vars: Environment variable names that were consulted.
    """

    def __init__(self, env_vars: tuple[str, ...] = ("API_KEY",)) -> None:
        names = " or ".join(env_vars)
        super().__init__(
            f"No geocoding API key configured. Set {names} in the environment "
            "or a .env file, or pass --api-key."
        )
        self.env_vars: tuple[str, ...] = env_vars


# ---------------------------------------------------------------------------
# Geocoding
# ---------------------------------------------------------------------------


class GeocodingError(TownshipResolverError):
    """Raised when a geocoding call fails for any reason."""


class TransportError(GeocodingError):
    """Raised when a geocode request cannot complete or its body cannot be decoded.

    Args:
        address: The address being geocoded when the failure happened.
        reason: Short explanation (network error, HTTP status, bad JSON).
    """

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"Geocode request for {address!r} failed: {reason}")
        self.address: str = address
        self.reason: str = reason


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class OutputWriteError(TownshipResolverError):
    """Raised when the tool cannot write its output to disk.

    Args:
        output_path: String representation of the path that failed.
        reason: Underlying OS or library error message.

    Example::

        raise OutputWriteError("/read-only/dir/output.csv", "Permission denied")
    """

    def __init__(self, output_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to write output to '{output_path}': {reason}"
        )
        self.output_path: str = output_path
        self.reason: str = reason

"""
Township Resolver — Common Layer
=================================
Re-exports the base tool class, exception hierarchy, and validators::

    from township_resolver.common import BatchTool, Validators
    from township_resolver.common.exceptions import TransportError
"""

from township_resolver.common.base_tool import BatchTool
from township_resolver.common.exceptions import (
    AddressSourceError,
    ConfigurationError,
    GeocodingError,
    InputValidationError,
    MissingCredentialError,
    OutputWriteError,
    TownshipResolverError,
    TransportError,
)
from township_resolver.common.validators import Validators

__all__ = [
    "BatchTool",
    "Validators",
    "TownshipResolverError",
    "InputValidationError",
    "AddressSourceError",
    "ConfigurationError",
    "MissingCredentialError",
    "GeocodingError",
    "TransportError",
    "OutputWriteError",
]

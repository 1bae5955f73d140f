"""
Township Resolver
==================
Resolve a list of street addresses to their townships via the Google
Geocoding API and write an ``Address,Township`` CSV.

Public API::

    from township_resolver import GeocodeClient, TownshipResolver, resolve_township
"""

from township_resolver.geocoder import GeocodeClient
from township_resolver.models import (
    AddressComponent,
    AddressResult,
    GeocodeResponse,
    ResolvedTownship,
)
from township_resolver.pipeline import TownshipResolver, resolve_addresses
from township_resolver.resolver import resolve_township

__all__ = [
    "GeocodeClient",
    "TownshipResolver",
    "resolve_addresses",
    "resolve_township",
    "AddressComponent",
    "AddressResult",
    "GeocodeResponse",
    "ResolvedTownship",
]
__version__ = "1.0.0"

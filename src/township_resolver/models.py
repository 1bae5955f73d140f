"""
Township Resolver — Data Model
===============================
Immutable records for the Google Geocoding API response and the resolved
``(formatted_address, township)`` rows written to the output table.

Classes:
    AddressComponent    One administrative-area label on a result.
    AddressResult       One candidate match for a query.
    GeocodeResponse     The full service answer for one address.
    ResolvedTownship    One output row.

The ``from_dict`` constructors raise :class:`KeyError` or :class:`TypeError`
on a body of the wrong shape; the geocode client turns those into a
:class:`~township_resolver.common.exceptions.TransportError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

#: The only ``status`` value that marks a usable answer.
STATUS_OK = "OK"


def _as_list(value: Any, field_name: str) -> list[Any]:
    if not isinstance(value, list):
        raise TypeError(f"'{field_name}' must be a list, got {type(value).__name__}")
    return value


def _as_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"'{field_name}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class AddressComponent:
    """One administrative-area label attached to a result.

    Attributes:
        long_name: Full-form name, e.g. ``"Mountain View"``.
        short_name: Abbreviated name, e.g. ``"CA"``.
        types: Type tags such as ``"locality"`` or
               ``"administrative_area_level_2"``, in service order.
    """

    long_name: str
    short_name: str
    types: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddressComponent:
        types = _as_list(data["types"], "types")
        return cls(
            long_name=_as_str(data["long_name"], "long_name"),
            short_name=_as_str(data["short_name"], "short_name"),
            types=tuple(_as_str(t, "types[]") for t in types),
        )

    def has_type(self, tag: str) -> bool:
        """Return ``True`` if *tag* is one of this component's types."""
        return tag in self.types


@dataclass(frozen=True)
class AddressResult:
    """One candidate match returned for an address query.

    Attributes:
        address_components: Components in the order the service returned them.
        formatted_address: Canonical human-readable address, used as the
                           output row key.
    """

    address_components: tuple[AddressComponent, ...]
    formatted_address: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddressResult:
        components = _as_list(data["address_components"], "address_components")
        return cls(
            address_components=tuple(AddressComponent.from_dict(c) for c in components),
            formatted_address=_as_str(data["formatted_address"], "formatted_address"),
        )


@dataclass(frozen=True)
class GeocodeResponse:
    """One service answer for one address query.

    Only ``status == "OK"`` marks a usable answer, and only the first
    element of ``results`` is ever consulted.
    """

    status: str
    results: tuple[AddressResult, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeocodeResponse:
        """Decode a Geocoding API JSON body.

        Extra keys (``error_message``, ``geometry``, ``place_id`` ...) are
        ignored.

        Raises:
            KeyError: If a required field is absent.
            TypeError: If *data* or a field has the wrong JSON type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"response body must be a JSON object, got {type(data).__name__}")
        results = _as_list(data["results"], "results")
        return cls(
            status=_as_str(data["status"], "status"),
            results=tuple(AddressResult.from_dict(r) for r in results),
        )

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def first_result(self) -> AddressResult | None:
        """The service's best match, or ``None`` if there are no results."""
        return self.results[0] if self.results else None


@dataclass(frozen=True)
class ResolvedTownship:
    """One output row: the formatted address and its township.

    ``township`` may be an empty string when no component carried a
    recognised administrative-area tag.
    """

    formatted_address: str
    township: str

    def to_row(self) -> dict[str, str]:
        """Return the row as a dict keyed by the output CSV headers."""
        return {"Address": self.formatted_address, "Township": self.township}

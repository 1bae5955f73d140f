"""
Township Resolver — Extraction Rule
====================================
Picks one township name out of the administrative-area components of a
geocode response.

Only the first result is consulted.  Its components are scanned once, in
service order; the first component carrying any tag in
:data:`TOWNSHIP_TYPES` supplies the township.  Within a single component
the tags are checked most-specific first, so a component tagged both
``locality`` and ``administrative_area_level_3`` counts as a locality.  A
later component never overrides an earlier match, even with a
higher-priority tag.
"""

from __future__ import annotations

import logging

from township_resolver.models import AddressComponent, GeocodeResponse, ResolvedTownship

logger = logging.getLogger("township_resolver.resolver")

#: Recognised administrative-area tags, most specific first.
TOWNSHIP_TYPES: tuple[str, ...] = (
    "locality",
    "administrative_area_level_3",
    "administrative_area_level_2",
)

#: Exact-match renames for names shared by several townships.
TOWNSHIP_OVERRIDES: dict[str, str] = {
    "Springfield": "Springfield City",
}


def match_township_type(component: AddressComponent) -> str | None:
    """Return the highest-priority township tag on *component*, or ``None``."""
    for tag in TOWNSHIP_TYPES:
        if component.has_type(tag):
            return tag
    return None


def extract_township(components: tuple[AddressComponent, ...]) -> str:
    """Return the ``long_name`` of the first component with a township tag.

    Returns an empty string when no component matches.
    """
    for component in components:
        if match_township_type(component) is not None:
            return component.long_name
    return ""


def apply_overrides(township: str) -> str:
    return TOWNSHIP_OVERRIDES.get(township, township)


def resolve_township(response: GeocodeResponse) -> ResolvedTownship | None:
    """Resolve a geocode response to a ``(formatted_address, township)`` row.

    Returns ``None`` when the status is not ``"OK"`` or there are no
    results.  A response whose first result has no recognised component
    still resolves, with an empty township.
    """
    if not response.ok:
        return None

    first = response.first_result
    if first is None:
        return None

    township = apply_overrides(extract_township(first.address_components))
    logger.debug("Township for %s is %s", first.formatted_address, township)
    return ResolvedTownship(first.formatted_address, township)

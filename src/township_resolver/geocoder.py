"""
Township Resolver — Geocode Client
===================================
Thin client for the Google Maps Geocoding API.  One call to
:meth:`GeocodeClient.geocode` issues exactly one HTTP GET and decodes the
body into a :class:`~township_resolver.models.GeocodeResponse`.

A non-``"OK"`` status (``ZERO_RESULTS``, ``REQUEST_DENIED`` ...) is a
successfully decoded answer, not an error.  Anything that prevents an
answer from being decoded is a :class:`TransportError`.

The client never retries, caches, rate-limits or logs.

Usage::

    from township_resolver.geocoder import GeocodeClient

    with GeocodeClient(api_key="...") as client:
        response = client.geocode("1600 Amphitheatre Parkway, Mountain View, CA")

Reference:
    https://developers.google.com/maps/documentation/geocoding
"""

from __future__ import annotations

import requests

from township_resolver.common.exceptions import TransportError
from township_resolver.common.validators import Validators
from township_resolver.config import DEFAULT_TIMEOUT, GOOGLE_GEOCODE_URL
from township_resolver.models import GeocodeResponse


class GeocodeClient:
    """Google Geocoding API client.

    Args:
        api_key: Google Maps API key with the Geocoding API enabled.  Never
                 commit this value to version control — use an environment
                 variable or ``.env`` file instead.
        base_url: Geocoding endpoint.  Override for testing or proxies.
        timeout: HTTP request timeout in seconds.
        session: Optional pre-configured :class:`requests.Session`.

    Raises:
        MissingCredentialError: If *api_key* is empty.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = GOOGLE_GEOCODE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        Validators.assert_credential_present(api_key)
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def geocode(self, address: str) -> GeocodeResponse:
        """Look up *address* and return the decoded service answer.

        The address is sent verbatim as the ``address`` query parameter.

        Raises:
            TransportError: If the request fails, the server responds with
                a non-2xx HTTP status, or the body is not a well-formed
                geocode response.
        """
        params = {"key": self.api_key, "address": address}
        try:
            response = self._session.get(
                self.base_url, params=params, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(address, str(exc)) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(address, f"response body is not valid JSON: {exc}") from exc

        try:
            return GeocodeResponse.from_dict(body)
        except KeyError as exc:
            raise TransportError(address, f"response is missing field {exc}") from exc
        except TypeError as exc:
            raise TransportError(address, f"malformed response: {exc}") from exc

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> GeocodeClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

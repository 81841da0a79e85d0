"""HTTP client for the location and pokemon endpoints, with a response cache."""

from __future__ import annotations

from typing import Callable, TypeVar

import requests

from .cache import Cache
from .models import (
    Location,
    LocationPage,
    Pokemon,
    parse_location,
    parse_location_page,
    parse_pokemon,
)

BASE_URL = "https://pokeapi.co/api/v2"

T = TypeVar("T")


class ApiError(Exception):
    """A request failed or its response could not be understood."""


class PokeClient:
    """Fetches documents from the API and caches the raw responses by URL."""

    def __init__(self, timeout: float = 5.0, cache_interval: float = 300.0) -> None:
        self._timeout = timeout
        self._cache = Cache(cache_interval)
        self._session = requests.Session()

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page when ``page_url`` is None."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._fetch(url, parse_location_page)

    def get_location(self, location_name: str) -> Location:
        """Return the location area with the given name."""
        return self._fetch(f"{BASE_URL}/location-area/{location_name}", parse_location)

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the pokemon with the given name."""
        return self._fetch(f"{BASE_URL}/pokemon/{pokemon_name}", parse_pokemon)

    def close(self) -> None:
        """Release the HTTP session and stop the cache reaper."""
        self._session.close()
        self._cache.close()

    def __enter__(self) -> PokeClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, url: str, parse: Callable[[bytes], T]) -> T:
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(url, cached, parse)
        try:
            response = self._session.get(url, timeout=self._timeout)
            body = response.content
        except requests.RequestException as exc:
            raise ApiError(f"request to {url} failed: {exc}") from exc
        result = self._decode(url, body, parse)
        self._cache.add(url, body)
        return result

    @staticmethod
    def _decode(url: str, body: bytes, parse: Callable[[bytes], T]) -> T:
        try:
            return parse(body)
        except ValueError as exc:
            raise ApiError(f"invalid response from {url}: {exc}") from exc
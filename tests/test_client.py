import json

import pytest
import requests
import responses

from pokedex.client import BASE_URL, ApiError, PokeClient

LOCATIONS_URL = f"{BASE_URL}/location-area"
PAGE_TWO_URL = f"{BASE_URL}/location-area/page-two"

FIRST_PAGE = {
    "count": 2,
    "next": PAGE_TWO_URL,
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": f"{BASE_URL}/location-area/1/"},
        {"name": "eterna-city-area", "url": f"{BASE_URL}/location-area/2/"},
    ],
}

SECOND_PAGE = {
    "count": 2,
    "next": None,
    "previous": LOCATIONS_URL,
    "results": [{"name": "pastoria-city-area", "url": f"{BASE_URL}/location-area/3/"}],
}

LOCATION = {
    "id": 1,
    "name": "canalave-city-area",
    "game_index": 1,
    "location": {"name": "canalave-city", "url": f"{BASE_URL}/location/1/"},
    "pokemon_encounters": [
        {"pokemon": {"name": "tentacool", "url": f"{BASE_URL}/pokemon/72/"}},
        {"pokemon": {"name": "tentacruel", "url": f"{BASE_URL}/pokemon/73/"}},
    ],
}

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "weight": 60,
    "height": 4,
    "stats": [{"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}}],
    "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    with PokeClient(timeout=1.0, cache_interval=60.0) as api:
        yield api


def test_list_locations_defaults_to_first_page(mocked, client):
    mocked.add(responses.GET, LOCATIONS_URL, json=FIRST_PAGE)
    page = client.list_locations(None)
    assert page.next == PAGE_TWO_URL
    assert page.previous is None
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]
    assert mocked.calls[0].request.url == LOCATIONS_URL


def test_list_locations_follows_page_url(mocked, client):
    mocked.add(responses.GET, PAGE_TWO_URL, json=SECOND_PAGE)
    page = client.list_locations(PAGE_TWO_URL)
    assert page.previous == LOCATIONS_URL
    assert page.next is None
    assert [r.name for r in page.results] == ["pastoria-city-area"]


def test_list_locations_is_cached(mocked, client):
    mocked.add(responses.GET, LOCATIONS_URL, json=FIRST_PAGE)
    first = client.list_locations(None)
    second = client.list_locations(None)
    assert first == second
    assert len(mocked.calls) == 1


def test_get_location(mocked, client):
    mocked.add(responses.GET, f"{LOCATIONS_URL}/canalave-city-area", json=LOCATION)
    location = client.get_location("canalave-city-area")
    assert location.name == "canalave-city-area"
    assert [e.pokemon.name for e in location.pokemon_encounters] == ["tentacool", "tentacruel"]


def test_get_location_is_cached(mocked, client):
    mocked.add(responses.GET, f"{LOCATIONS_URL}/canalave-city-area", json=LOCATION)
    first = client.get_location("canalave-city-area")
    second = client.get_location("canalave-city-area")
    assert second.name == "canalave-city-area"
    assert [e.pokemon.name for e in second.pokemon_encounters] == ["tentacool", "tentacruel"]
    assert first == second
    assert len(mocked.calls) == 1


def test_get_pokemon(mocked, client):
    mocked.add(responses.GET, f"{BASE_URL}/pokemon/pikachu", json=PIKACHU)
    pokemon = client.get_pokemon("pikachu")
    assert pokemon.name == "pikachu"
    assert pokemon.base_experience == 112
    assert pokemon.weight == 60
    assert [s.stat.name for s in pokemon.stats] == ["hp"]
    assert [t.type.name for t in pokemon.types] == ["electric"]


def test_invalid_body_raises_and_is_not_cached(mocked, client):
    url = f"{BASE_URL}/pokemon/missingno"
    mocked.add(responses.GET, url, body=b"Not Found", status=404)
    with pytest.raises(ApiError):
        client.get_pokemon("missingno")
    with pytest.raises(ApiError):
        client.get_pokemon("missingno")
    assert len(mocked.calls) == 2


def test_connection_failure_raises_api_error(mocked, client):
    mocked.add(
        responses.GET,
        f"{BASE_URL}/pokemon/pikachu",
        body=requests.ConnectionError("refused"),
    )
    with pytest.raises(ApiError) as info:
        client.get_pokemon("pikachu")
    assert isinstance(info.value.__cause__, requests.ConnectionError)


def test_cached_body_round_trips(mocked, client):
    mocked.add(responses.GET, f"{BASE_URL}/pokemon/pikachu", body=json.dumps(PIKACHU))
    fetched = client.get_pokemon("pikachu")
    again = client.get_pokemon("pikachu")
    assert fetched == again
    assert again.id == PIKACHU["id"]
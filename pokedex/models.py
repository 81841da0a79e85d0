"""Typed views of the location and pokemon documents served by the API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()


@dataclass(frozen=True)
class PokemonEncounter:
    """A pokemon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)


@dataclass(frozen=True)
class Location:
    """A location area with the pokemon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: tuple[str, ...] = ()
    pokemon_encounters: tuple[PokemonEncounter, ...] = ()


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)


@dataclass(frozen=True)
class PokemonType:
    """One of a pokemon's types."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)


@dataclass(frozen=True)
class Pokemon:
    """The parts of a pokemon document that the pokedex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    abilities: tuple[NamedResource, ...] = ()
    forms: tuple[NamedResource, ...] = ()
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[PokemonType, ...] = ()


def _load(data: Any) -> Mapping[str, Any]:
    if isinstance(data, (bytes, bytearray, str)):
        data = json.loads(data)
    return _as_object(data, "document")


def _as_object(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, where: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected an array, got {type(value).__name__}")
    return value


def _as_int(value: Any, where: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}: expected an integer, got {value!r}")
    return value


def _as_str(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected a string, got {value!r}")
    return value


def _as_optional_str(value: Any, where: str) -> str | None:
    if value is None:
        return None
    return _as_str(value, where)


def _as_bool(value: Any, where: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{where}: expected a boolean, got {value!r}")
    return value


def _resource(value: Any, where: str) -> NamedResource:
    obj = _as_object(value, where)
    return NamedResource(
        name=_as_str(obj.get("name"), f"{where}.name"),
        url=_as_str(obj.get("url"), f"{where}.url"),
    )


def parse_named_resource(data: Any) -> NamedResource:
    """Parse a ``{"name": ..., "url": ...}`` object."""
    return _resource(_load(data), "resource")


def parse_location_page(data: Any) -> LocationPage:
    """Parse one page of the location-area listing."""
    obj = _load(data)
    return LocationPage(
        count=_as_int(obj.get("count"), "count"),
        next=_as_optional_str(obj.get("next"), "next"),
        previous=_as_optional_str(obj.get("previous"), "previous"),
        results=tuple(
            _resource(item, "results[]") for item in _as_list(obj.get("results"), "results")
        ),
    )


def parse_location(data: Any) -> Location:
    """Parse a location-area document."""
    obj = _load(data)
    names = tuple(
        _as_str(_as_object(item, "names[]").get("name"), "names[].name")
        for item in _as_list(obj.get("names"), "names")
    )
    encounters = tuple(
        PokemonEncounter(
            pokemon=_resource(_as_object(item, "pokemon_encounters[]").get("pokemon"),
                              "pokemon_encounters[].pokemon")
        )
        for item in _as_list(obj.get("pokemon_encounters"), "pokemon_encounters")
    )
    return Location(
        id=_as_int(obj.get("id"), "id"),
        name=_as_str(obj.get("name"), "name"),
        game_index=_as_int(obj.get("game_index"), "game_index"),
        location=_resource(obj.get("location"), "location"),
        names=names,
        pokemon_encounters=encounters,
    )


def _stat(value: Any) -> PokemonStat:
    obj = _as_object(value, "stats[]")
    return PokemonStat(
        base_stat=_as_int(obj.get("base_stat"), "stats[].base_stat"),
        effort=_as_int(obj.get("effort"), "stats[].effort"),
        stat=_resource(obj.get("stat"), "stats[].stat"),
    )


def _type(value: Any) -> PokemonType:
    obj = _as_object(value, "types[]")
    return PokemonType(
        slot=_as_int(obj.get("slot"), "types[].slot"),
        type=_resource(obj.get("type"), "types[].type"),
    )


def parse_pokemon(data: Any) -> Pokemon:
    """Parse a pokemon document."""
    obj = _load(data)
    abilities = tuple(
        _resource(_as_object(item, "abilities[]").get("ability"), "abilities[].ability")
        for item in _as_list(obj.get("abilities"), "abilities")
    )
    return Pokemon(
        id=_as_int(obj.get("id"), "id"),
        name=_as_str(obj.get("name"), "name"),
        base_experience=_as_int(obj.get("base_experience"), "base_experience"),
        height=_as_int(obj.get("height"), "height"),
        weight=_as_int(obj.get("weight"), "weight"),
        order=_as_int(obj.get("order"), "order"),
        is_default=_as_bool(obj.get("is_default"), "is_default"),
        location_area_encounters=_as_str(
            obj.get("location_area_encounters"), "location_area_encounters"
        ),
        species=_resource(obj.get("species"), "species"),
        abilities=abilities,
        forms=tuple(_resource(item, "forms[]") for item in _as_list(obj.get("forms"), "forms")),
        stats=tuple(_stat(item) for item in _as_list(obj.get("stats"), "stats")),
        types=tuple(_type(item) for item in _as_list(obj.get("types"), "types")),
    )
"""Interactive command loop for exploring locations and catching pokemon."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable

from .client import ApiError, PokeClient
from .models import LocationPage, Pokemon

PROMPT = "Pokedex > "
CATCH_ROLL_LIMIT = 255


class CommandError(Exception):
    """A command was used wrongly or cannot run in the current state."""


@dataclass
class Config:
    """State shared by the commands of one session."""

    client: PokeClient
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class CliCommand:
    """A command's usage line, description and handler."""

    name: str
    description: str
    callback: Callable[..., None]


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def try_to_catch(required_xp: int, rng: random.Random) -> bool:
    """Roll for a catch; succeeds when the roll reaches ``required_xp``."""
    return rng.randrange(CATCH_ROLL_LIMIT) >= required_xp


def command_help(cfg: Config, *args: str) -> None:
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_exit(cfg: Config, *args: str) -> None:
    print("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def command_pokedex(cfg: Config, *args: str) -> None:
    print("Your Pokedex:")
    for name in cfg.pokedex:
        print(f" - {name}")


def _show_page(cfg: Config, page: LocationPage) -> None:
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_mapf(cfg: Config, *args: str) -> None:
    _show_page(cfg, cfg.client.list_locations(cfg.next_locations_url))


def command_mapb(cfg: Config, *args: str) -> None:
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.client.list_locations(cfg.prev_locations_url))


def command_explore(cfg: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    (name,) = args
    print(f"Exploring {name}...")
    location = cfg.client.get_location(name)
    print("Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def command_catch(cfg: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    (name,) = args
    print(f"Throwing a Pokeball at {name}...")
    pokemon = cfg.client.get_pokemon(name)
    if not try_to_catch(pokemon.base_experience, cfg.rng):
        print(f"{name} escaped!")
        return
    cfg.pokedex[pokemon.name] = pokemon
    print(f"{pokemon.name} was caught!")


def command_inspect(cfg: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    (name,) = args
    pokemon = cfg.pokedex.get(name)
    if pokemon is None:
        print("you have not caught that pokemon")
        return
    print(f"Name: {pokemon.name}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for kind in pokemon.types:
        print(f"  - {kind.type.name}")


def get_commands() -> dict[str, CliCommand]:
    """Return the available commands keyed by the word that invokes them."""
    return {
        "help": CliCommand("help", "Displays a help message", command_help),
        "exit": CliCommand("exit", "Exit the Pokedex", command_exit),
        "pokedex": CliCommand("pokedex", "Get a list of pokemons in Pokedex", command_pokedex),
        "map": CliCommand("map", "Get the next page of locations", command_mapf),
        "mapb": CliCommand("mapb", "Get the previous page of locations", command_mapb),
        "explore": CliCommand("explore <location_name>", "Explore a location", command_explore),
        "catch": CliCommand("catch <pokemon_name>", "Try to catch a pokemon", command_catch),
        "inspect": CliCommand(
            "inspect <pokemon_name>", "Try to inspect a pokemon", command_inspect
        ),
    }


def _dispatch(cfg: Config, commands: dict[str, CliCommand], line: str) -> None:
    words = clean_input(line)
    if not words:
        return
    name, *args = words
    command = commands.get(name)
    if command is None:
        print("Unknown command")
        return
    try:
        command.callback(cfg, *args)
    except (CommandError, ApiError) as exc:
        print(exc)


def start_repl(cfg: Config, stream: Iterable[str] | None = None) -> None:
    """Read commands line by line from ``stream`` (stdin by default) until it ends."""
    lines = sys.stdin if stream is None else stream
    commands = get_commands()
    print(PROMPT, end="", flush=True)
    for line in lines:
        _dispatch(cfg, commands, line)
        print(PROMPT, end="", flush=True)
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pokedex", description="Explore locations and catch pokemon interactively."
    )
    parser.parse_args(argv)
    with PokeClient(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0
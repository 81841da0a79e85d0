# pokedex

An interactive command-line Pokedex. Browse location areas, explore them to
see which Pokemon live there, try to catch Pokemon, and inspect the ones you
have caught. Data comes from the public PokeAPI. Raw responses are cached in
memory by URL for five minutes, so repeated lookups do not go back to the
network.

## Installation

```
pip install .
```

## Usage

Start the interactive prompt:

```
pokedex
```

The command takes no options besides `--help`. You will see the prompt
`Pokedex > `. Input is lower-cased and split on whitespace, so case and extra
spaces do not matter. The session ends with `exit` or at the end of input
(for example Ctrl-D).

| Command                    | What it does                                  |
|----------------------------|-----------------------------------------------|
| `help`                     | Displays a help message                       |
| `exit`                     | Exit the Pokedex                              |
| `pokedex`                  | Get a list of pokemons in Pokedex             |
| `map`                      | Get the next page of locations                |
| `mapb`                     | Get the previous page of locations            |
| `explore <location_name>`  | Explore a location                            |
| `catch <pokemon_name>`     | Try to catch a pokemon                        |
| `inspect <pokemon_name>`   | Try to inspect a pokemon                      |

An unrecognised word prints `Unknown command`. A command given the wrong
number of arguments, or a request that fails or returns something that cannot
be read, prints a message and the prompt comes back.

### Example session

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 - tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
Pokedex > inspect tentacool
Name: tentacool
Weight: 455
Stats:
  -hp: 40
  ...
Types:
  - water
  - poison
Pokedex > exit
Closing the Pokedex... Goodbye!
```

Catching is a matter of luck: a roll from 0 to 254 must reach the Pokemon's
base experience, so Pokemon with more base experience are harder to catch.
A failed attempt prints `<name> escaped!`. Calling `mapb` before any earlier
page is known prints `you're on the first page`. `inspect` only works on
Pokemon you have caught.

Caught Pokemon live only for the length of the session; nothing is saved to
disk.

## Using it as a library

```python
from pokedex.client import ApiError, PokeClient

with PokeClient(timeout=5.0, cache_interval=300.0) as client:
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)

    location = client.get_location("canalave-city-area")
    for encounter in location.pokemon_encounters:
        print(encounter.pokemon.name)

    pokemon = client.get_pokemon("pikachu")
    print(pokemon.name, pokemon.weight, pokemon.base_experience)
```

`list_locations` returns a `LocationPage` whose `next` and `previous` are the
URLs of neighbouring pages (or `None`); pass one of them back to fetch that
page. Failures raise `pokedex.client.ApiError`.

`pokedex.models` holds the frozen dataclasses (`LocationPage`, `Location`,
`Pokemon`, `PokemonStat`, `PokemonType`, `NamedResource`, ...) and the
functions `parse_location_page`, `parse_location`, `parse_pokemon` and
`parse_named_resource`, which accept JSON text, bytes or an already decoded
mapping and raise `ValueError` on malformed data.

`pokedex.cache.Cache(interval)` is the time-expiring in-memory cache the
client uses. `add(key, value)` stores bytes, `get(key)` returns them or
`None`, `reap(now, last)` drops entries older than `last` seconds before
`now`, and a background thread reaps expired entries once per interval until
`close()` is called. It also supports `in`, `len()` and `with`.

`pokedex.cli` exposes the commands (`command_catch`, `command_map f`-style
handlers such as `command_mapf` and `command_mapb`, and so on), `get_commands()`,
`clean_input()`, `try_to_catch()` and `start_repl(cfg, stream)`, which reads
commands from any iterable of lines.

## Development

```
pip install -e ".[test]"
pytest
```
import logging

import requests

from .core import GAME_ROSTER, POKEAPI_BASE, POKEMON_LIMIT, REQUEST_TIMEOUT, has_shiny
from .pokeapi import fetch_json, fetch_pokemon_listing
from .transform import build_pokemon_record, evolution_chain_url, map_versions_to_shortcodes

logger = logging.getLogger(__name__)

# Failures that only cost us a single Pokémon
ENTRY_ERRORS = (requests.RequestException, KeyError, TypeError, ValueError, AttributeError)


def _entry_name(entry) -> str:
    if isinstance(entry, dict):
        return entry.get('name') or entry.get('url') or '?'
    return repr(entry)


class Importer:
    """Loads the game roster and every Pokémon from PokeAPI into a store, once.

    Entries are fetched one at a time (detail, species, evolution chain) to
    stay polite to PokeAPI. A failing entry is logged and skipped; a failing
    roster or listing aborts initialize().
    """

    def __init__(self, store, base_url: str = POKEAPI_BASE, limit: int = POKEMON_LIMIT,
                 timeout: int = REQUEST_TIMEOUT, fetch=fetch_json):
        self.store = store
        self.base_url = base_url
        self.limit = limit
        self.timeout = timeout
        self._fetch = fetch
        self.initialized = False
        self.listed = 0
        self.failed = []  # names of entries that could not be imported

    def initialize(self) -> None:
        if self.initialized:
            return
        try:
            self._initialize_games()
            self._initialize_pokemon()
        except Exception:
            logger.exception("Error initializing storage")
            raise
        self.initialized = True

    def status(self) -> dict:
        return {
            'initialized': self.initialized,
            'pokemonCount': self.store.count_pokemon(),
            'gameCount': self.store.count_games(),
            'listedEntries': self.listed,
            'failedEntries': list(self.failed),
            'complete': self.initialized and not self.failed,
        }

    def _initialize_games(self) -> None:
        for row in GAME_ROSTER:
            self.store.create_game({**row, 'hasShiny': has_shiny(row['generation'])})
        logger.info("Seeded %d games", len(GAME_ROSTER))

    def _initialize_pokemon(self) -> None:
        results = fetch_pokemon_listing(self.base_url, self.limit, self.timeout, fetch=self._fetch)
        self.listed = len(results)
        logger.info("Fetching data for %d Pokémon...", len(results))
        count = 0
        for entry in results:
            name = _entry_name(entry)
            try:
                self._process_pokemon(entry['url'])
            except ENTRY_ERRORS as e:
                logger.warning("Error processing Pokémon %s: %s", name, e)
                self.failed.append(name)
                continue
            count += 1
            if count % 50 == 0:
                logger.info("Processed %d/%d Pokémon", count, len(results))
        if self.failed:
            logger.warning("Loaded %d Pokémon, %d skipped after errors", count, len(self.failed))
        else:
            logger.info("Successfully loaded all %d Pokémon", count)

    def _process_pokemon(self, url: str) -> dict:
        detail = self._fetch(url, timeout=self.timeout)
        species = self._fetch(detail['species']['url'], timeout=self.timeout)
        chain = None
        chain_url = evolution_chain_url(species)
        if chain_url:
            chain = self._fetch(chain_url, timeout=self.timeout)
        record = build_pokemon_record(detail, species, chain)
        # Nothing is stored until the whole entry has been normalized
        game_ids = self._map_pokemon_to_games(detail)
        created = self.store.create_pokemon(record)
        self.store.set_pokemon_games(created['id'], game_ids)
        return created

    def _map_pokemon_to_games(self, detail: dict) -> list[int]:
        game_ids = []
        for code in map_versions_to_shortcodes(detail):
            game = self.store.get_game_by_short_code(code)
            if game:
                game_ids.append(game['id'])
        return game_ids

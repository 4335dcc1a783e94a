"""In-memory catalog of Pokémon, games and which games each Pokémon is in.

Written once by the importer at startup, read-only afterwards, so readers
need no locking. Every query is a linear scan; the catalog holds about a
thousand records.
"""

DEFAULT_SORT = 'id'

# sort option -> (key, reverse)
SORT_OPTIONS = {
    'id': (lambda p: p['pokeId'], False),
    'id-desc': (lambda p: p['pokeId'], True),
    'name': (lambda p: p['name'], False),
    'name-desc': (lambda p: p['name'], True),
}


class PokemonStore:

    def __init__(self):
        self._pokemon = {}        # internal id -> record
        self._games = {}          # internal id -> game
        self._pokemon_games = {}  # pokemon internal id -> [game ids]
        self._next_pokemon_id = 1
        self._next_game_id = 1

    # --- writes (importer only) ---

    def create_game(self, data: dict) -> dict:
        gid = self._next_game_id
        self._next_game_id += 1
        game = {'id': gid, **data}
        self._games[gid] = game
        return game

    def create_pokemon(self, data: dict) -> dict:
        pid = self._next_pokemon_id
        self._next_pokemon_id += 1
        pokemon = {'id': pid, **data}
        self._pokemon[pid] = pokemon
        return pokemon

    def set_pokemon_games(self, pokemon_id: int, game_ids) -> None:
        ids = []
        for gid in game_ids:
            if gid not in ids:
                ids.append(gid)
        self._pokemon_games[pokemon_id] = ids

    # --- pokemon reads ---

    def get_pokemon(self, pokemon_id: int):
        """Lookup by internal id."""
        pokemon = self._pokemon.get(pokemon_id)
        if pokemon is None:
            return None
        return self._attach_games(pokemon)

    def get_pokemon_by_id(self, poke_id: int):
        """Lookup by PokeAPI id (the public identifier)."""
        for p in self._pokemon.values():
            if p['pokeId'] == poke_id:
                return self._attach_games(p)
        return None

    def get_pokemon_by_name(self, name: str):
        normalized = (name or '').lower()
        for p in self._pokemon.values():
            if p['name'].lower() == normalized:
                return self._attach_games(p)
        return None

    def get_pokemon_list(self, limit: int, offset: int, generations=None,
                         type_name=None, sort: str = DEFAULT_SORT) -> list[dict]:
        """One page of Pokémon, sorted, then filtered by generation and type.
        Unknown sort options fall back to Pokédex order.
        """
        key, reverse = SORT_OPTIONS.get(sort, SORT_OPTIONS[DEFAULT_SORT])
        lst = sorted(self._pokemon.values(), key=key, reverse=reverse)
        if generations:
            lst = [p for p in lst if p.get('generation') in generations]
        if type_name:
            wanted = type_name.lower()
            lst = [p for p in lst if any(t.lower() == wanted for t in p.get('types') or [])]
        return [self._attach_games(p) for p in lst[offset:offset + limit]]

    def search_pokemon(self, query: str) -> list[dict]:
        q = (query or '').lower()
        matches = [
            p for p in self._sorted_pokemon()
            if q in p['name'].lower() or q in str(p['pokeId'])
        ]
        return [self._attach_games(p) for p in matches]

    def get_pokemon_by_game(self, game_id: int) -> list[dict]:
        pokemon_ids = [pid for pid, gids in self._pokemon_games.items() if game_id in gids]
        found = [self._pokemon[pid] for pid in pokemon_ids if pid in self._pokemon]
        found.sort(key=lambda p: p['pokeId'])
        return [self._attach_games(p) for p in found]

    def count_pokemon(self) -> int:
        return len(self._pokemon)

    # --- game reads ---

    def get_all_games(self) -> list[dict]:
        return [dict(g) for g in sorted(self._games.values(), key=lambda g: g['generation'])]

    def get_game(self, game_id: int):
        game = self._games.get(game_id)
        return dict(game) if game else None

    def get_game_by_name(self, name: str):
        normalized = (name or '').lower()
        for g in self._games.values():
            if g['name'].lower() == normalized:
                return dict(g)
        return None

    def get_game_by_short_code(self, short_code: str):
        normalized = (short_code or '').lower()
        for g in self._games.values():
            if g['shortCode'].lower() == normalized:
                return dict(g)
        return None

    def count_games(self) -> int:
        return len(self._games)

    # --- helpers ---

    def _sorted_pokemon(self):
        return sorted(self._pokemon.values(), key=lambda p: p['pokeId'])

    def _attach_games(self, pokemon: dict) -> dict:
        game_ids = self._pokemon_games.get(pokemon['id'], [])
        games = [dict(self._games[gid]) for gid in game_ids if gid in self._games]
        return {**pokemon, 'games': games}

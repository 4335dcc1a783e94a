import os

# Defaults (overridable through the environment, see load_settings)
POKEAPI_BASE = 'https://pokeapi.co/api/v2'
POKEMON_LIMIT = 1025  # every species up to Scarlet/Violet
REQUEST_TIMEOUT = 20
LOG_LEVEL = 'INFO'

# Generation ID ranges (National Dex), inclusive
GEN_ID_RANGES = {
    1: (1, 151),
    2: (152, 251),
    3: (252, 386),
    4: (387, 493),
    5: (494, 649),
    6: (650, 721),
    7: (722, 809),
    8: (810, 905),
    9: (906, 1025),  # update if new gens are added
}

STAT_NAMES = (
    'hp',
    'attack',
    'defense',
    'special-attack',
    'special-defense',
    'speed',
)

# Hand-maintained roster: PokeAPI has no game entity shaped like this.
GAME_ROSTER = (
    {'name': 'Red/Blue', 'shortCode': 'RB', 'color': '#EE1515', 'generation': 1},
    {'name': 'Yellow', 'shortCode': 'Y', 'color': '#FFD733', 'generation': 1},
    {'name': 'Gold/Silver', 'shortCode': 'GS', 'color': '#B69E00', 'generation': 2},
    {'name': 'Crystal', 'shortCode': 'C', 'color': '#7B63E7', 'generation': 2},
    {'name': 'Ruby/Sapphire', 'shortCode': 'RS', 'color': '#A00000', 'generation': 3},
    {'name': 'Emerald', 'shortCode': 'E', 'color': '#00A000', 'generation': 3},
    {'name': 'FireRed/LeafGreen', 'shortCode': 'FRLG', 'color': '#FF7327', 'generation': 3},
    {'name': 'Diamond/Pearl', 'shortCode': 'DP', 'color': '#5A5A5A', 'generation': 4},
    {'name': 'Platinum', 'shortCode': 'Pt', 'color': '#999999', 'generation': 4},
    {'name': 'HeartGold/SoulSilver', 'shortCode': 'HGSS', 'color': '#B69E00', 'generation': 4},
    {'name': 'Black/White', 'shortCode': 'BW', 'color': '#444444', 'generation': 5},
    {'name': 'Black 2/White 2', 'shortCode': 'B2W2', 'color': '#222222', 'generation': 5},
    {'name': 'X/Y', 'shortCode': 'XY', 'color': '#025DA6', 'generation': 6},
    {'name': 'Omega Ruby/Alpha Sapphire', 'shortCode': 'ORAS', 'color': '#AB2813', 'generation': 6},
    {'name': 'Sun/Moon', 'shortCode': 'SM', 'color': '#F1912B', 'generation': 7},
    {'name': 'Ultra Sun/Ultra Moon', 'shortCode': 'USUM', 'color': '#E95B2B', 'generation': 7},
    {'name': "Let's Go Pikachu/Eevee", 'shortCode': 'LGPE', 'color': '#FFC524', 'generation': 7},
    {'name': 'Sword/Shield', 'shortCode': 'SwSh', 'color': '#00A1E9', 'generation': 8},
    {'name': 'Brilliant Diamond/Shining Pearl', 'shortCode': 'BDSP', 'color': '#AAAAAA', 'generation': 8},
    {'name': 'Legends: Arceus', 'shortCode': 'LA', 'color': '#3A4A77', 'generation': 8},
    {'name': 'Scarlet/Violet', 'shortCode': 'SV', 'color': '#BF004F', 'generation': 9},
)

# PokeAPI version slug -> roster shortCode
VERSION_TO_SHORTCODE = {
    'red': 'RB',
    'blue': 'RB',
    'yellow': 'Y',
    'gold': 'GS',
    'silver': 'GS',
    'crystal': 'C',
    'ruby': 'RS',
    'sapphire': 'RS',
    'emerald': 'E',
    'firered': 'FRLG',
    'leafgreen': 'FRLG',
    'diamond': 'DP',
    'pearl': 'DP',
    'platinum': 'Pt',
    'heartgold': 'HGSS',
    'soulsilver': 'HGSS',
    'black': 'BW',
    'white': 'BW',
    'black-2': 'B2W2',
    'white-2': 'B2W2',
    'x': 'XY',
    'y': 'XY',
    'omega-ruby': 'ORAS',
    'alpha-sapphire': 'ORAS',
    'sun': 'SM',
    'moon': 'SM',
    'ultra-sun': 'USUM',
    'ultra-moon': 'USUM',
    'lets-go-pikachu': 'LGPE',
    'lets-go-eevee': 'LGPE',
    'sword': 'SwSh',
    'shield': 'SwSh',
    'brilliant-diamond': 'BDSP',
    'shining-pearl': 'BDSP',
    'legends-arceus': 'LA',
    'scarlet': 'SV',
    'violet': 'SV',
}

# Shinies were introduced in Gold/Silver; no Gen 1 game can show one.
SHINY_MIN_GENERATION = 2

_RANDOM_GUIDE = 'Just encounter wild Pokémon in grass, caves, or while surfing.'
_GEN3_BREEDING_GUIDE = "Unlike Gen 2, having a shiny parent doesn't increase odds in Gen 3."


def _method(method_id, name, odds, estimated_time, guide):
    return {'id': method_id, 'name': name, 'odds': odds, 'estimatedTime': estimated_time, 'guide': guide}


# Shiny hunting methods per roster shortCode. Games missing here have none listed yet.
HUNTING_METHODS = {
    'RB': [
        _method('rb-random', 'Random Encounter', '1/8192', 'Very long',
                _RANDOM_GUIDE + ' In Gen 1, there are no method-specific shiny odds increases.'),
    ],
    'Y': [
        _method('y-random', 'Random Encounter', '1/8192', 'Very long',
                _RANDOM_GUIDE + ' In Gen 1, there are no method-specific shiny odds increases.'),
    ],
    'GS': [
        _method('gs-random', 'Random Encounter', '1/8192', 'Very long', _RANDOM_GUIDE),
        _method('gs-breeding', 'Breeding', '1/64 (with shiny parent)', 'Medium',
                'Breed with a shiny Pokémon to increase odds significantly.'),
    ],
    'C': [
        _method('c-random', 'Random Encounter', '1/8192', 'Very long', _RANDOM_GUIDE),
        _method('c-breeding', 'Breeding', '1/64 (with shiny parent)', 'Medium',
                'Breed with a shiny Pokémon to increase odds significantly.'),
    ],
    'RS': [
        _method('rs-random', 'Random Encounter', '1/8192', 'Very long', _RANDOM_GUIDE),
        _method('rs-breeding', 'Breeding', '1/8192', 'Very long', _GEN3_BREEDING_GUIDE),
    ],
    'E': [
        _method('e-random', 'Random Encounter', '1/8192', 'Very long', _RANDOM_GUIDE),
        _method('e-breeding', 'Breeding', '1/8192', 'Very long', _GEN3_BREEDING_GUIDE),
    ],
    'FRLG': [
        _method('frlg-random', 'Random Encounter', '1/8192', 'Very long', _RANDOM_GUIDE),
        _method('frlg-breeding', 'Breeding', '1/8192', 'Very long', _GEN3_BREEDING_GUIDE),
    ],
    'DP': [
        _method('dp-random', 'Random Encounter', '1/8192', 'Very long', _RANDOM_GUIDE),
        _method('dp-masuda', 'Masuda Method', '1/1638', 'Long',
                'Breed two Pokémon from games of different languages.'),
        _method('dp-chain', 'PokéRadar Chaining', '1/200 at chain of 40+', 'Medium',
                'Use the PokéRadar to chain encounters of the same Pokémon.'),
    ],
    'SwSh': [
        _method('swsh-random', 'Random Encounter', '1/4096 (1/1365 w/ Shiny Charm)', 'Long',
                'Find the Pokémon in the wild and encounter it.'),
        _method('swsh-masuda', 'Masuda Method', '1/683 with Shiny Charm', 'Medium',
                'Breed Pokémon from parents of different language games.'),
        _method('swsh-dynamax', 'Max Raid Battles', 'Varies', 'Medium',
                'Join or host Max Raid Battles to find special raid dens with increased shiny odds.'),
    ],
    'SV': [
        _method('sv-random', 'Random Encounter', '1/4096 (1/1365 w/ Shiny Charm)', 'Medium',
                'Find the Pokémon in the wild and encounter it.'),
        _method('sv-masuda', 'Masuda Method', '1/683 with Shiny Charm', 'Medium',
                'Breed Pokémon from parents of different language games.'),
        _method('sv-outbreaks', 'Mass Outbreaks', '1/1365 (with Shiny Charm)', 'Short-Medium',
                'Find mass outbreaks on the map and encounter the Pokémon there.'),
        _method('sv-sandwich', 'Sparkling Power', 'Increases base chances', 'Medium',
                "Make sandwiches with the Sparkling Power effect for the Pokémon's type."),
    ],
}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from None


def load_settings() -> dict:
    """Read runtime settings from the environment.
    Keys match the Flask config keys the app uses.
    """
    return {
        'POKEAPI_BASE': (os.environ.get('POKEAPI_BASE') or POKEAPI_BASE).rstrip('/'),
        'POKEMON_LIMIT': _env_int('POKEMON_LIMIT', POKEMON_LIMIT),
        'REQUEST_TIMEOUT': _env_int('REQUEST_TIMEOUT', REQUEST_TIMEOUT),
        'LOG_LEVEL': os.environ.get('LOG_LEVEL') or LOG_LEVEL,
        'HOST': os.environ.get('HOST') or '0.0.0.0',
        'PORT': _env_int('PORT', 5000),
    }


def generation_for_id(poke_id) -> int | None:
    """Return the generation number whose National Dex range holds poke_id, else None."""
    try:
        pid = int(poke_id)
    except (TypeError, ValueError):
        return None
    for gen, (lo, hi) in GEN_ID_RANGES.items():
        if lo <= pid <= hi:
            return gen
    return None


def parse_generations(gen) -> set[int] | None:
    """Parse a generation filter.
    - Accepts 'all', '', None -> no filtering (None).
    - Accepts single gen like '3'.
    - Accepts CSV like '1,3,5' (order and spaces ignored).
    If no valid gens are recognized, return None.
    """
    if gen is None:
        return None
    g = str(gen).lower().strip()
    if not g or g in {'all', 'any', '0'}:
        return None
    gens = set()
    for s in g.replace('|', ',').split(','):
        s = s.strip()
        if s.isascii() and s.isdigit() and int(s) in GEN_ID_RANGES:
            gens.add(int(s))
    return gens or None


def hunting_methods_for(short_code: str) -> list[dict]:
    """Copies of the shiny hunting methods listed for a game shortCode ([] if none)."""
    return [dict(m) for m in HUNTING_METHODS.get(short_code, [])]


def has_shiny(generation) -> bool:
    try:
        return int(generation) >= SHINY_MIN_GENERATION
    except (TypeError, ValueError):
        return False

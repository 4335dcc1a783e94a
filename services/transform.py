"""Flatten PokeAPI documents into catalog records.

Everything here is pure: the importer does the fetching and hands the raw
JSON documents in.
"""
from .core import STAT_NAMES, VERSION_TO_SHORTCODE, generation_for_id

MAX_EVOLUTION_DEPTH = 3


def extract_types(detail: dict) -> list[str]:
    # Types ordered by slot (primary first)
    types_data = sorted(detail.get('types') or [], key=lambda t: t.get('slot', 99))
    return [t['type']['name'] for t in types_data]


def extract_sprites(detail: dict):
    """Return (normal, shiny) sprite URLs.
    Official artwork first, then the default sprite, then ''.
    """
    sprites = detail.get('sprites') or {}
    art = (sprites.get('other') or {}).get('official-artwork') or {}
    normal = art.get('front_default') or sprites.get('front_default') or ''
    shiny = art.get('front_shiny') or sprites.get('front_shiny') or ''
    return normal, shiny


def extract_abilities(detail: dict) -> list[str]:
    abilities = []
    for a in detail.get('abilities') or []:
        name = a['ability']['name']
        if a.get('is_hidden'):
            name = f"{name} (Hidden)"
        abilities.append(name)
    return abilities


def extract_stats(detail: dict) -> dict:
    stats = {s['stat']['name']: s['base_stat'] for s in detail.get('stats') or []}
    missing = [name for name in STAT_NAMES if name not in stats]
    if missing:
        raise ValueError(f"missing base stats: {', '.join(missing)}")
    return {name: int(stats[name]) for name in STAT_NAMES}


def extract_description(species: dict) -> str:
    """First English flavor text with form feeds turned into spaces."""
    for e in species.get('flavor_text_entries') or []:
        lang_name = (e.get('language') or {}).get('name')
        if lang_name == 'en':
            return (e.get('flavor_text') or '').replace('\f', ' ')
    return ''


def evolution_chain_url(species: dict):
    return (species.get('evolution_chain') or {}).get('url')


def trim_evolution_chain(node, depth: int = MAX_EVOLUTION_DEPTH):
    """Keep species, trigger details and up to `depth` stages of a chain node."""
    if not node or depth <= 0:
        return None
    out = {'species': node.get('species')}
    if 'evolution_details' in node:
        out['evolution_details'] = [
            {
                'trigger': d.get('trigger'),
                'item': d.get('item'),
                'min_level': d.get('min_level'),
                'min_happiness': d.get('min_happiness'),
            }
            for d in node.get('evolution_details') or []
        ]
    children = []
    if depth > 1:
        for nxt in node.get('evolves_to') or []:
            child = trim_evolution_chain(nxt, depth - 1)
            if child:
                children.append(child)
    out['evolves_to'] = children
    return out


def map_versions_to_shortcodes(detail: dict) -> list[str]:
    """Roster shortCodes for every version the Pokémon has a game index in.
    De-duplicated, first-seen order; unmapped versions are dropped.
    """
    codes = []
    for gi in detail.get('game_indices') or []:
        version = (gi.get('version') or {}).get('name')
        code = VERSION_TO_SHORTCODE.get(version)
        if code and code not in codes:
            codes.append(code)
    return codes


def build_pokemon_record(detail: dict, species: dict, chain=None) -> dict:
    """Normalize detail/species/evolution-chain documents into a record
    ready for PokemonStore.create_pokemon (no internal id yet)."""
    poke_id = int(detail['id'])
    sprite, shiny_sprite = extract_sprites(detail)
    evolution = None
    if chain:
        evolution = trim_evolution_chain(chain.get('chain'))
    return {
        'pokeId': poke_id,
        'name': str(detail['name']).lower(),
        'types': extract_types(detail),
        'sprite': sprite,
        'shinySprite': shiny_sprite,
        'height': detail.get('height'),
        'weight': detail.get('weight'),
        'abilities': extract_abilities(detail),
        'stats': extract_stats(detail),
        'gameIndices': detail.get('game_indices') or [],
        'description': extract_description(species),
        'evolutionChain': evolution,
        'generation': generation_for_id(poke_id),
    }

"""Fake PokeAPI documents and a fetch stand-in shared by the test suites."""
import requests

BASE = 'https://pokeapi.test/api/v2'


def make_detail(pid, name, versions=(), types=('normal',), hidden=None):
    stats = [
        {'base_stat': 10 * (i + 1), 'effort': 0, 'stat': {'name': n, 'url': ''}}
        for i, n in enumerate(['hp', 'attack', 'defense', 'special-attack', 'special-defense', 'speed'])
    ]
    abilities = [{'ability': {'name': 'overgrow', 'url': ''}, 'is_hidden': False, 'slot': 1}]
    if hidden:
        abilities.append({'ability': {'name': hidden, 'url': ''}, 'is_hidden': True, 'slot': 3})
    return {
        'id': pid,
        'name': name,
        'types': [{'slot': i + 1, 'type': {'name': t, 'url': ''}} for i, t in enumerate(types)],
        'sprites': {
            'front_default': f'https://img.test/{pid}.png',
            'front_shiny': f'https://img.test/shiny/{pid}.png',
            'other': {'official-artwork': {
                'front_default': f'https://img.test/art/{pid}.png',
                'front_shiny': f'https://img.test/art/shiny/{pid}.png',
            }},
        },
        'height': 7,
        'weight': 69,
        'abilities': abilities,
        'stats': stats,
        'game_indices': [
            {'game_index': pid, 'version': {'name': v, 'url': ''}} for v in versions
        ],
        'species': {'name': name, 'url': f'{BASE}/pokemon-species/{pid}/'},
    }


def make_species(pid, text='A strange seed was\fplanted on its back at birth.', chain_id=1):
    species = {
        'flavor_text_entries': [
            {'flavor_text': 'Une graine.', 'language': {'name': 'fr', 'url': ''}, 'version': {'name': 'x', 'url': ''}},
            {'flavor_text': text, 'language': {'name': 'en', 'url': ''}, 'version': {'name': 'red', 'url': ''}},
        ],
        'evolution_chain': None,
    }
    if chain_id is not None:
        species['evolution_chain'] = {'url': f'{BASE}/evolution-chain/{chain_id}/'}
    return species


def make_chain(*names):
    """Linear chain over the given species names."""
    node = None
    for name in reversed(names):
        current = {
            'species': {'name': name, 'url': ''},
            'evolution_details': [{
                'trigger': {'name': 'level-up', 'url': ''},
                'item': None,
                'min_level': 16,
                'min_happiness': None,
            }],
            'evolves_to': [node] if node else [],
        }
        node = current
    node['evolution_details'] = []
    return {'id': 1, 'chain': node}


class FakePokeApi:
    """Serves documents from a dict keyed by URL and records every request."""

    def __init__(self):
        self.docs = {}
        self.calls = []

    def add_pokemon(self, pid, name, versions=(), chain_id=1, **kwargs):
        self.docs[f'{BASE}/pokemon/{pid}/'] = make_detail(pid, name, versions, **kwargs)
        self.docs[f'{BASE}/pokemon-species/{pid}/'] = make_species(pid, chain_id=chain_id)
        if chain_id is not None:
            self.docs.setdefault(f'{BASE}/evolution-chain/{chain_id}/', make_chain(name))

    def set_listing(self, limit, names_and_ids):
        self.docs[f'{BASE}/pokemon?limit={limit}'] = {
            'count': len(names_and_ids),
            'next': None,
            'previous': None,
            'results': [{'name': n, 'url': f'{BASE}/pokemon/{pid}/'} for pid, n in names_and_ids],
        }

    def __call__(self, url, timeout=None):
        self.calls.append(url)
        if url not in self.docs:
            raise requests.HTTPError(f'404 Client Error: Not Found for url: {url}')
        return self.docs[url]

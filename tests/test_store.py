#!/usr/bin/env python3
"""
Tests for services/store.py.

Run with:
    python -m pytest tests/test_store.py
"""
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.core import GAME_ROSTER
from services.store import PokemonStore


def _pokemon(poke_id, name, generation=1, types=('normal',)):
    return {
        'pokeId': poke_id,
        'name': name,
        'types': list(types),
        'sprite': '',
        'shinySprite': '',
        'height': 1,
        'weight': 1,
        'abilities': [],
        'stats': {},
        'gameIndices': [],
        'description': '',
        'evolutionChain': None,
        'generation': generation,
    }


class StoreMixin(unittest.TestCase):
    """Store with the full game roster and a handful of Pokémon created out of dex order."""

    def setUp(self):
        self.store = PokemonStore()
        for row in GAME_ROSTER:
            self.store.create_game(dict(row))
        self.rb = self.store.get_game_by_short_code('RB')
        self.swsh = self.store.get_game_by_short_code('SwSh')
        self.pikachu = self.store.create_pokemon(_pokemon(25, 'pikachu', types=('electric',)))
        self.bulbasaur = self.store.create_pokemon(_pokemon(1, 'bulbasaur', types=('grass', 'poison')))
        self.grookey = self.store.create_pokemon(_pokemon(810, 'grookey', generation=8, types=('grass',)))
        self.ivysaur = self.store.create_pokemon(_pokemon(2, 'ivysaur', types=('grass', 'poison')))
        self.store.set_pokemon_games(self.pikachu['id'], [self.rb['id'], self.swsh['id']])
        self.store.set_pokemon_games(self.bulbasaur['id'], [self.rb['id']])
        self.store.set_pokemon_games(self.grookey['id'], [self.swsh['id'], self.swsh['id']])


class TestCreate(StoreMixin):

    def test_internal_ids_are_sequential(self):
        self.assertEqual(
            [self.pikachu['id'], self.bulbasaur['id'], self.grookey['id'], self.ivysaur['id']],
            [1, 2, 3, 4],
        )
        self.assertEqual(self.store.count_pokemon(), 4)
        self.assertEqual(self.store.count_games(), len(GAME_ROSTER))

    def test_membership_is_deduplicated(self):
        games = self.store.get_pokemon_by_id(810)['games']
        self.assertEqual([g['shortCode'] for g in games], ['SwSh'])


class TestPokemonLookups(StoreMixin):

    def test_get_by_internal_id(self):
        self.assertEqual(self.store.get_pokemon(self.pikachu['id'])['name'], 'pikachu')
        self.assertIsNone(self.store.get_pokemon(999))

    def test_get_by_external_id(self):
        self.assertEqual(self.store.get_pokemon_by_id(25)['name'], 'pikachu')
        self.assertIsNone(self.store.get_pokemon_by_id(26))

    def test_get_by_name_case_insensitive(self):
        self.assertEqual(self.store.get_pokemon_by_name('PikaChu')['pokeId'], 25)
        self.assertIsNone(self.store.get_pokemon_by_name('pika'))

    def test_games_attached(self):
        p = self.store.get_pokemon_by_name('pikachu')
        self.assertEqual([g['shortCode'] for g in p['games']], ['RB', 'SwSh'])

    def test_no_membership_gives_empty_games(self):
        self.assertEqual(self.store.get_pokemon_by_id(2)['games'], [])

    def test_reads_do_not_mutate_stored_record(self):
        p = self.store.get_pokemon_by_id(25)
        p['name'] = 'raichu'
        p['games'].clear()
        again = self.store.get_pokemon_by_id(25)
        self.assertEqual(again['name'], 'pikachu')
        self.assertEqual(len(again['games']), 2)

    def test_unresolvable_game_ids_dropped(self):
        self.store.set_pokemon_games(self.ivysaur['id'], [self.rb['id'], 9999])
        games = self.store.get_pokemon_by_id(2)['games']
        self.assertEqual([g['id'] for g in games], [self.rb['id']])


class TestPokemonList(StoreMixin):

    def test_ordered_by_external_id(self):
        lst = self.store.get_pokemon_list(20, 0)
        self.assertEqual([p['pokeId'] for p in lst], [1, 2, 25, 810])

    def test_limit_and_offset(self):
        lst = self.store.get_pokemon_list(2, 1)
        self.assertEqual([p['pokeId'] for p in lst], [2, 25])

    def test_offset_past_end(self):
        self.assertEqual(self.store.get_pokemon_list(20, 10), [])

    def test_generation_filter(self):
        lst = self.store.get_pokemon_list(20, 0, {8})
        self.assertEqual([p['name'] for p in lst], ['grookey'])

    def test_type_filter_case_insensitive(self):
        lst = self.store.get_pokemon_list(20, 0, type_name='Grass')
        self.assertEqual([p['pokeId'] for p in lst], [1, 2, 810])
        lst = self.store.get_pokemon_list(20, 0, {1}, type_name='poison')
        self.assertEqual([p['name'] for p in lst], ['bulbasaur', 'ivysaur'])

    def test_sorted_by_name_descending(self):
        lst = self.store.get_pokemon_list(20, 0, sort='name-desc')
        self.assertEqual([p['name'] for p in lst], ['pikachu', 'ivysaur', 'grookey', 'bulbasaur'])

    def test_filters_apply_before_paging(self):
        lst = self.store.get_pokemon_list(1, 1, type_name='grass', sort='id-desc')
        self.assertEqual([p['pokeId'] for p in lst], [2])

    def test_unknown_sort_uses_dex_order(self):
        lst = self.store.get_pokemon_list(20, 0, sort='random')
        self.assertEqual([p['pokeId'] for p in lst], [1, 2, 25, 810])


class TestSearch(StoreMixin):

    def test_substring_on_name(self):
        names = [p['name'] for p in self.store.search_pokemon('SAUR')]
        self.assertEqual(names, ['bulbasaur', 'ivysaur'])

    def test_substring_on_external_id(self):
        ids = [p['pokeId'] for p in self.store.search_pokemon('2')]
        self.assertEqual(ids, [2, 25])

    def test_exact_name_and_id_always_found(self):
        for p in self.store.get_pokemon_list(100, 0):
            by_name = [r['pokeId'] for r in self.store.search_pokemon(p['name'])]
            by_id = [r['pokeId'] for r in self.store.search_pokemon(str(p['pokeId']))]
            self.assertIn(p['pokeId'], by_name)
            self.assertIn(p['pokeId'], by_id)

    def test_no_match(self):
        self.assertEqual(self.store.search_pokemon('zzz'), [])


class TestGames(StoreMixin):

    def test_all_games_sorted_by_generation(self):
        gens = [g['generation'] for g in self.store.get_all_games()]
        self.assertEqual(gens, sorted(gens))
        self.assertEqual(self.store.get_all_games()[0]['shortCode'], 'RB')

    def test_get_game(self):
        self.assertEqual(self.store.get_game(self.swsh['id'])['name'], 'Sword/Shield')
        self.assertIsNone(self.store.get_game(999))

    def test_get_game_by_name(self):
        self.assertEqual(self.store.get_game_by_name('sword/shield')['shortCode'], 'SwSh')
        self.assertIsNone(self.store.get_game_by_name('Stadium'))

    def test_get_game_by_short_code(self):
        self.assertEqual(self.store.get_game_by_short_code('swsh')['id'], self.swsh['id'])
        self.assertIsNone(self.store.get_game_by_short_code('XD'))

    def test_pokemon_by_game(self):
        lst = self.store.get_pokemon_by_game(self.swsh['id'])
        self.assertEqual([p['pokeId'] for p in lst], [25, 810])

    def test_pokemon_by_game_without_members(self):
        sv = self.store.get_game_by_short_code('SV')
        self.assertEqual(self.store.get_pokemon_by_game(sv['id']), [])
        self.assertEqual(self.store.get_pokemon_by_game(999), [])


if __name__ == '__main__':
    unittest.main()

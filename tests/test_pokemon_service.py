from unittest.mock import patch

import pytest
import requests

from conftest import fake_response
from pokeglobe.core import NO_DESCRIPTION, POKEAPI_BASE
from pokeglobe.errors import NotFoundError, UpstreamError
from pokeglobe.pokemon import (
    artwork_url,
    get_description,
    get_pokemon,
    pick_flavor_text,
    sample_pokemon_of_type,
    summarize_pokemon,
)

PIKACHU = {
    'id': 25,
    'height': 4,
    'weight': 60,
    'types': [{'slot': 1, 'type': {'name': 'electric'}}],
    'abilities': [
        {'ability': {'name': 'static'}},
        {'ability': {'name': 'lightning-rod-extra'}},
    ],
    'stats': [
        {'base_stat': 35, 'stat': {'name': 'hp'}},
        {'base_stat': 50, 'stat': {'name': 'special-attack'}},
        {'base_stat': 50, 'stat': {'name': 'special-defense'}},
        {'base_stat': 90, 'stat': {'name': 'speed'}},
    ],
    'species': {'url': f'{POKEAPI_BASE}/pokemon-species/25/'},
}


def test_summarize_pokemon():
    s = summarize_pokemon(PIKACHU)
    assert s['id'] == 25
    assert s['types'] == ['electric']
    assert s['height'] == 0.4
    assert s['weight'] == 6.0
    assert s['abilities'] == ['static', 'lightning rod extra']
    assert s['stats'] == {'hp': 35, 'sp-attack': 50, 'sp-defense': 50, 'speed': 90}


def test_get_pokemon_not_found():
    with patch('requests.get', return_value=fake_response({}, 404)):
        with pytest.raises(NotFoundError) as exc_info:
            get_pokemon('missingno')
    assert 'missingno' in exc_info.value.message


@pytest.mark.parametrize('kwargs', [
    {'return_value': fake_response({}, 500)},
    {'side_effect': requests.ConnectionError('down')},
])
def test_get_pokemon_upstream_error(kwargs):
    with patch('requests.get', **kwargs):
        with pytest.raises(UpstreamError):
            get_pokemon('pikachu')


def entry(text, lang):
    return {'flavor_text': text, 'language': {'name': lang}}


def test_flavor_text_prefers_language_then_fallback():
    entries = [entry('Mouse\fPokémon.', 'en'), entry('Rato\nelétrico.', 'pt')]
    assert pick_flavor_text(entries, 'pt', 'en') == 'Rato elétrico.'
    assert pick_flavor_text(entries[:1], 'pt', 'en') == 'Mouse Pokémon.'
    assert pick_flavor_text([entry('Souris', 'fr')], 'pt', 'en') is None


def test_description_falls_back_to_literal():
    url = f'{POKEAPI_BASE}/pokemon-species/25/'
    with patch('requests.get', return_value=fake_response({'flavor_text_entries': [entry('x', 'ja')]})):
        assert get_description(url) == NO_DESCRIPTION
    with patch('requests.get', side_effect=requests.Timeout('slow')):
        assert get_description(url) == NO_DESCRIPTION
    assert get_description(None) == NO_DESCRIPTION


def type_listing(ids):
    return {'pokemon': [
        {'pokemon': {'name': f'mon-{i}', 'url': f'{POKEAPI_BASE}/pokemon/{i}/'}}
        for i in ids
    ]}


def test_sample_filters_ceiling_and_limits():
    ids = [1024, 1025, 10001, 3, 7, 9, 11, 13, 15, 17, 19, 21]
    with patch('requests.get', return_value=fake_response(type_listing(ids))) as mock_get:
        sample = sample_pokemon_of_type('water', max_id=1025, size=8)
    assert mock_get.call_args.args[0] == f'{POKEAPI_BASE}/type/water'
    assert [p['name'] for p in sample] == [
        'mon-1024', 'mon-3', 'mon-7', 'mon-9', 'mon-11', 'mon-13', 'mon-15', 'mon-17',
    ]
    assert sample[1]['imageUrl'] == artwork_url(3)
    assert artwork_url(3).endswith('/official-artwork/3.png')


def test_sample_upstream_error():
    with patch('requests.get', side_effect=requests.ConnectionError('down')):
        with pytest.raises(UpstreamError) as exc_info:
            sample_pokemon_of_type('ghost')
    assert 'ghost' in exc_info.value.message

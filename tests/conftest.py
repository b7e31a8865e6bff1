from unittest.mock import MagicMock

import pytest
import requests

from app import create_app
from pokeglobe.caches import CountryCache, NameCache
from pokeglobe.countries import build_country_records


def _country(code, name, capital, subregion='', region='', area=1000.0, population=1000):
    return {
        'cca2': code,
        'name': {'common': name},
        'capital': [capital] if capital else [],
        'region': region,
        'subregion': subregion,
        'landlocked': False,
        'area': area,
        'population': population,
        'flags': {'svg': f'https://flagcdn.com/{code.lower()}.svg'},
    }


RAW_COUNTRIES = [
    _country('JP', 'Japan', 'Tokyo', 'Eastern Asia', 'Asia'),
    _country('BR', 'Brazil', 'Brasília', 'South America', 'Americas'),
    _country('PH', 'Philippines', 'Manila', 'South-Eastern Asia', 'Asia'),
    _country('JM', 'Jamaica', 'Kingston', 'Caribbean', 'Americas'),
    _country('WS', 'Samoa', 'Apia', 'Polynesia', 'Oceania'),
    _country('CU', 'Cuba', 'Havana', 'Caribbean', 'Americas'),
    _country('NO', 'Norway', 'Oslo', 'Northern Europe', 'Europe'),
    _country('BE', 'Belgium', 'Brussels', 'Western Europe', 'Europe'),
    _country('BO', 'Bolivia', 'Sucre', 'South America', 'Americas'),
]


@pytest.fixture
def raw_countries():
    return [dict(c) for c in RAW_COUNTRIES]


@pytest.fixture
def country_cache(raw_countries):
    cache = CountryCache()
    cache.populate(build_country_records(raw_countries))
    return cache


@pytest.fixture
def name_cache():
    cache = NameCache()
    cache.populate([
        {'name': 'bulbasaur', 'id': 1},
        {'name': 'pikachu', 'id': 25},
        {'name': 'pichu', 'id': 172},
        {'name': 'pidgey', 'id': 16},
        {'name': 'pidgeotto', 'id': 17},
        {'name': 'pidgeot', 'id': 18},
        {'name': 'pinsir', 'id': 127},
        {'name': 'piplup', 'id': 393},
    ])
    return cache


@pytest.fixture
def app(country_cache, name_cache):
    return create_app(
        config={'TESTING': True, 'OPENWEATHER_API_KEY': 'test-key'},
        country_cache=country_cache,
        name_cache=name_cache,
        warmup=False,
    )


@pytest.fixture
def client(app):
    return app.test_client()


def fake_response(payload=None, status_code=200):
    """A stand-in for requests.Response as used by the upstream helpers."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f'{status_code} error', response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


def url_router(routes):
    """Build a requests.get side effect that answers by url prefix.

    routes maps url prefixes to a response or an exception instance.
    """
    def _get(url, *args, **kwargs):
        for prefix, answer in routes.items():
            if url.startswith(prefix):
                if isinstance(answer, Exception):
                    raise answer
                return answer
        raise AssertionError(f'unexpected request to {url}')
    return _get

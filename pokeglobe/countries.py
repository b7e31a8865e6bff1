import logging

import requests

from .classifier import classify
from .core import COUNTRIES_TIMEOUT, RESTCOUNTRIES_FIELDS, RESTCOUNTRIES_URL
from .errors import CountrySourceError

logger = logging.getLogger(__name__)


def fetch_all_countries():
    """Return the raw REST Countries list (only the fields we classify on)."""
    r = requests.get(RESTCOUNTRIES_URL, params={'fields': RESTCOUNTRIES_FIELDS}, timeout=COUNTRIES_TIMEOUT)
    r.raise_for_status()
    data = r.json()
    if not isinstance(data, list):
        raise ValueError('unexpected country payload')
    return data


def is_complete(country: dict) -> bool:
    """A country is cached only with a code, a capital, a positive area and a known population."""
    if not country.get('cca2'):
        return False
    capitals = country.get('capital') or []
    if not capitals or not capitals[0]:
        return False
    area = country.get('area')
    if not isinstance(area, (int, float)) or area <= 0:
        return False
    return country.get('population') is not None


def to_record(country: dict) -> dict:
    return {
        'name': (country.get('name') or {}).get('common') or country['cca2'],
        'capital': country['capital'][0],
        'type': classify(country),
        'flagUrl': (country.get('flags') or {}).get('svg') or '',
    }


def build_country_records(countries) -> dict:
    records = {}
    for c in countries:
        if not is_complete(c):
            continue
        records[c['cca2'].upper()] = to_record(c)
    return records


def initialize_country_cache(cache):
    """Fetch, classify and publish every complete country into cache."""
    logger.info('Fetching country list')
    try:
        records = build_country_records(fetch_all_countries())
    except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
        raise CountrySourceError(f'could not load countries: {e}') from e
    cache.populate(records)
    logger.info('Country data loaded: %d countries', len(records))
    return len(records)

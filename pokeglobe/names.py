import logging

import requests

from .core import NAME_CATALOG_LIMIT, NAMES_TIMEOUT, POKEAPI_BASE
from .errors import NameSourceError
from .pokemon import id_from_url

logger = logging.getLogger(__name__)


def fetch_pokemon_names():
    """Return [{ name, id }] for the whole /pokemon listing, in upstream order."""
    url = f"{POKEAPI_BASE}/pokemon?limit={NAME_CATALOG_LIMIT}"
    r = requests.get(url, timeout=NAMES_TIMEOUT)
    r.raise_for_status()
    results = r.json().get('results')
    if not isinstance(results, list):
        raise TypeError('catalog results is not a list')
    out = []
    for item in results:
        pid = id_from_url(item.get('url'))
        if not item.get('name') or pid is None:
            continue
        out.append({'name': item['name'], 'id': pid})
    return out


def initialize_name_cache(cache):
    logger.info('Fetching Pokémon name catalog')
    try:
        entries = fetch_pokemon_names()
    except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
        raise NameSourceError(f'could not load Pokémon names: {e}') from e
    cache.populate(entries)
    logger.info('%d Pokémon names loaded', len(entries))
    return len(entries)

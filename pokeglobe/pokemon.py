import logging
from urllib.parse import quote, urlparse

import requests

from .core import (
    ARTWORK_URL,
    MAX_SPECIES_ID,
    NO_DESCRIPTION,
    POKEAPI_BASE,
    POKEAPI_TIMEOUT,
    SAMPLE_SIZE,
)
from .errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

# Shapes a 200 response can arrive in that we cannot reshape
MALFORMED = (KeyError, IndexError, TypeError, AttributeError, ValueError)


def id_from_url(u):
    """Extract the numeric id from a PokeAPI resource url ('.../pokemon/25/' -> 25)."""
    try:
        path = urlparse(u or '').path.strip('/').split('/')
        return int(path[-1])
    except (ValueError, IndexError):
        return None


def artwork_url(poke_id) -> str:
    return ARTWORK_URL.format(id=poke_id)


def get_pokemon(name: str) -> dict:
    """Fetch /pokemon/<name>. Raises NotFoundError on 404, UpstreamError otherwise."""
    url = f"{POKEAPI_BASE}/pokemon/{quote(name, safe='')}"
    try:
        r = requests.get(url, timeout=POKEAPI_TIMEOUT)
        r.raise_for_status()
        j = r.json()
        if not isinstance(j, dict):
            raise ValueError('unexpected pokemon payload')
        return j
    except requests.HTTPError as e:
        if e.response is not None and e.response.status_code == 404:
            raise NotFoundError(f'Pokémon "{name}" not found.') from e
        logger.error('PokeAPI error fetching pokemon %s: %s', name, e)
        raise UpstreamError('Failed to communicate with PokéAPI.') from e
    except (requests.RequestException, ValueError) as e:
        logger.error('PokeAPI error fetching pokemon %s: %s', name, e)
        raise UpstreamError('Failed to communicate with PokéAPI.') from e


def summarize_pokemon(j: dict) -> dict:
    """Reshape a /pokemon payload into the fields shown in the details panel.

    Raises UpstreamError if the payload is missing the expected structure.
    """
    try:
        types = [t['type']['name'] for t in j.get('types') or []]
        abilities = [a['ability']['name'].replace('-', ' ') for a in j.get('abilities') or []]
        stats = {}
        for s in j.get('stats') or []:
            stat_name = s['stat']['name']
            if stat_name.startswith('special-'):
                stat_name = 'sp-' + stat_name[len('special-'):]
            stats[stat_name] = s['base_stat']
        return {
            'id': j.get('id'),
            'types': types,
            'height': (j.get('height') or 0) / 10,
            'weight': (j.get('weight') or 0) / 10,
            'abilities': abilities,
            'stats': stats,
        }
    except MALFORMED as e:
        logger.error('Malformed PokeAPI pokemon payload for %s: %r', j.get('name') if isinstance(j, dict) else j, e)
        raise UpstreamError('Failed to communicate with PokéAPI.') from e


def _clean(txt: str) -> str:
    # Replace form feed and newlines with spaces, compress spaces
    txt = txt.replace('\f', ' ').replace('\n', ' ').replace('\r', ' ')
    return ' '.join(txt.split())


def pick_flavor_text(entries, lang: str, fallback_lang: str):
    for wanted in (lang, fallback_lang):
        for e in entries or []:
            lang_name = (e.get('language') or {}).get('name')
            if lang_name == wanted and e.get('flavor_text'):
                return _clean(e['flavor_text'])
    return None


def get_description(species_url: str, lang: str = 'pt', fallback_lang: str = 'en') -> str:
    """Best-effort species description; never raises."""
    if not species_url:
        return NO_DESCRIPTION
    try:
        r = requests.get(species_url, timeout=POKEAPI_TIMEOUT)
        r.raise_for_status()
        entries = r.json().get('flavor_text_entries')
        text = pick_flavor_text(entries, lang, fallback_lang)
    except (requests.RequestException,) + MALFORMED as e:
        logger.warning('Could not fetch description from %s: %r', species_url, e)
        return NO_DESCRIPTION
    return text or NO_DESCRIPTION


def sample_pokemon_of_type(type_label: str, max_id: int = MAX_SPECIES_ID, size: int = SAMPLE_SIZE):
    """First `size` Pokémon of a type (upstream order) with id below max_id."""
    url = f"{POKEAPI_BASE}/type/{type_label}"
    try:
        r = requests.get(url, timeout=POKEAPI_TIMEOUT)
        r.raise_for_status()
        members = r.json()['pokemon']
        if not isinstance(members, list):
            raise TypeError('type listing is not a list')
        sample = []
        for m in members:
            p = m.get('pokemon') or {}
            pid = id_from_url(p.get('url'))
            if pid is None or pid >= max_id:
                continue
            sample.append({'name': p.get('name'), 'imageUrl': artwork_url(pid)})
            if len(sample) >= size:
                break
    except (requests.RequestException,) + MALFORMED as e:
        logger.error('Failed to fetch Pokémon of type %s: %r', type_label, e)
        raise UpstreamError(f'Could not fetch Pokémon for the {type_label} biome.') from e
    return sample

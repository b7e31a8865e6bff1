from flask import Blueprint, current_app, jsonify, request

from pokeglobe.core import HABITAT_LIMIT
from pokeglobe.errors import BadRequestError, NotFoundError
from pokeglobe.pokemon import get_description, get_pokemon, summarize_pokemon
from .common import ready_country_cache

bp = Blueprint('pokemon', __name__, url_prefix='/api')


@bp.route('/pokemon-locations')
def pokemon_locations():
    name = (request.args.get('name') or '').strip().lower()
    if not name:
        raise BadRequestError('The Pokémon name is required.')
    cache = ready_country_cache("Country data isn't ready yet.")

    raw = get_pokemon(name)
    summary = summarize_pokemon(raw)
    primary_type = summary['types'][0] if summary['types'] else None

    description = get_description(
        (raw.get('species') or {}).get('url'),
        current_app.config['DESCRIPTION_LANG'],
        current_app.config['DESCRIPTION_FALLBACK_LANG'],
    )

    countries = [
        {'code': code, 'name': rec['name'], 'flag': rec['flagUrl']}
        for code, rec in cache.by_type(primary_type, limit=HABITAT_LIMIT)
    ]
    if not countries:
        raise NotFoundError(f'No main biome found for type "{primary_type}".')

    return jsonify({
        'name': name,
        'id': summary['id'],
        'types': summary['types'],
        'countries': countries,
        'height': summary['height'],
        'weight': summary['weight'],
        'description': description,
        'abilities': summary['abilities'],
        'stats': summary['stats'],
    })

from flask import Blueprint, current_app, jsonify, request

from pokeglobe.errors import ConfigError, NotFoundError
from pokeglobe.pokemon import sample_pokemon_of_type
from pokeglobe.weather import try_fetch_weather
from .common import country_cache

bp = Blueprint('country', __name__, url_prefix='/api')


def _lookup(code, message='Country not found.'):
    code = (code or '').strip().upper()
    record = country_cache().get(code)
    if not record:
        raise NotFoundError(message)
    return code, record


@bp.route('/country-info/<code>')
def country_info(code):
    code, record = _lookup(code)
    api_key = current_app.config.get('OPENWEATHER_API_KEY')
    if not api_key:
        raise ConfigError('Weather API key is not configured.')
    # Weather is optional: a failed call still returns the country
    weather = try_fetch_weather(
        record['capital'],
        api_key,
        lang=current_app.config['WEATHER_LANG'],
        context=f'(country {code})',
    )
    return jsonify({'code': code, **record, 'weather': weather})


@bp.route('/pokemon-by-country')
def pokemon_by_country():
    code, record = _lookup(request.args.get('countryCode'), 'Invalid or unknown country code.')
    pokemon = sample_pokemon_of_type(record['type'], max_id=current_app.config['MAX_SPECIES_ID'])
    return jsonify({'country': {'code': code, **record}, 'pokemon': pokemon})

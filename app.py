import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from blueprints.autocomplete import bp as autocomplete_bp
from blueprints.biomes import bp as biomes_bp
from blueprints.common import register_error_handlers
from blueprints.country import bp as country_bp
from blueprints.health import bp as health_bp
from blueprints.pokemon import bp as pokemon_bp
from pokeglobe.caches import CountryCache, NameCache
from pokeglobe.core import MAX_SPECIES_ID
from pokeglobe.warmup import start_warmup

logger = logging.getLogger('pokeglobe')


def _settings_from_env():
    return {
        'OPENWEATHER_API_KEY': os.environ.get('OPENWEATHER_API_KEY') or None,
        'WEATHER_LANG': os.environ.get('WEATHER_LANG', 'pt_br'),
        'DESCRIPTION_LANG': os.environ.get('DESCRIPTION_LANG', 'pt'),
        'DESCRIPTION_FALLBACK_LANG': os.environ.get('DESCRIPTION_FALLBACK_LANG', 'en'),
        'MAX_SPECIES_ID': int(os.environ.get('MAX_SPECIES_ID', MAX_SPECIES_ID)),
        'CORS_ORIGINS': os.environ.get('CORS_ORIGINS', '*'),
    }


_LOGGING_CONFIGURED = False


def configure_logging():
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    _LOGGING_CONFIGURED = True
    level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def create_app(config=None, country_cache=None, name_cache=None, warmup=True):
    """Build the Flask app.

    Unless warmup is False, the country and name caches start loading in the
    background right away; the app serves requests meanwhile.
    """
    load_dotenv()
    configure_logging()
    app = Flask(__name__)
    app.config.update(_settings_from_env())
    if config:
        app.config.update(config)
    app.json.sort_keys = False

    origins = app.config['CORS_ORIGINS']
    if isinstance(origins, str) and origins != '*':
        origins = [o.strip() for o in origins.split(',') if o.strip()]
    CORS(app, resources={r'/api/*': {'origins': origins}}, send_wildcard=(origins == '*'))

    countries = country_cache if country_cache is not None else CountryCache()
    names = name_cache if name_cache is not None else NameCache()
    app.extensions['pokeglobe'] = {'countries': countries, 'names': names}

    app.register_blueprint(biomes_bp)
    app.register_blueprint(country_bp)
    app.register_blueprint(pokemon_bp)
    app.register_blueprint(autocomplete_bp)
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    if not app.config['OPENWEATHER_API_KEY']:
        logger.warning('OPENWEATHER_API_KEY is not set; country weather is disabled')

    if warmup:
        start_warmup(countries, names)
    return app


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 3000))
    app = create_app()
    logger.info('PokéGlobe server running on http://localhost:%d', port)
    # Reloader off: a second process would warm the caches again
    app.run(host='0.0.0.0', port=port, debug=os.environ.get('FLASK_DEBUG') == '1', use_reloader=False)

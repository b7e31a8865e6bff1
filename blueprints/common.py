from flask import current_app, jsonify

from pokeglobe.errors import NotReadyError, PokeGlobeError


def country_cache():
    return current_app.extensions['pokeglobe']['countries']


def name_cache():
    return current_app.extensions['pokeglobe']['names']


def ready_country_cache(message='Country data is still loading.'):
    cache = country_cache()
    if not cache.is_ready():
        raise NotReadyError(message)
    return cache


def handle_pokeglobe_error(e: PokeGlobeError):
    return jsonify({'error': e.message}), e.status_code


def register_error_handlers(app):
    app.register_error_handler(PokeGlobeError, handle_pokeglobe_error)

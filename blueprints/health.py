from flask import Blueprint, jsonify

from .common import country_cache, name_cache

bp = Blueprint('health', __name__)


@bp.route('/health')
def health():
    return jsonify({'ok': True})


@bp.route('/ready')
def ready():
    countries = country_cache()
    ok = countries.is_ready()
    body = {'ready': ok, 'countries': len(countries), 'names': len(name_cache())}
    return jsonify(body), (200 if ok else 503)

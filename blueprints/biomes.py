from flask import Blueprint, jsonify

from .common import ready_country_cache

bp = Blueprint('biomes', __name__, url_prefix='/api')


@bp.route('/country-biomes')
def country_biomes():
    return jsonify(ready_country_cache().biomes())

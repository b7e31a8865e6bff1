from flask import Blueprint, jsonify, request

from .common import country_cache, name_cache

bp = Blueprint('autocomplete', __name__, url_prefix='/api/autocomplete')


@bp.route('/pokemon')
def pokemon():
    return jsonify(name_cache().suggest(request.args.get('query') or ''))


@bp.route('/country')
def country():
    # An empty list while countries are loading keeps the search box quiet
    return jsonify(country_cache().suggest(request.args.get('query') or ''))

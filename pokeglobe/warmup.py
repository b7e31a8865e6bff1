"""Startup population of the country and name caches.

Both tasks run on the shared executor so the server can accept requests
while they load. Requests that need countries get a 503 until the country
task finishes.
"""
import logging
import os

from .core import EXECUTOR
from .countries import initialize_country_cache
from .errors import CountrySourceError, NameSourceError
from .names import initialize_name_cache

logger = logging.getLogger(__name__)


def terminate_process():
    logging.shutdown()
    os._exit(1)


def warm_up_countries(cache, on_fatal=terminate_process):
    try:
        initialize_country_cache(cache)
    except CountrySourceError as e:
        logger.critical('Failed to load country data, shutting down: %s', e)
        on_fatal()
    except Exception:
        logger.exception('Unexpected error loading country data, shutting down')
        on_fatal()


def warm_up_names(cache):
    try:
        initialize_name_cache(cache)
    except NameSourceError as e:
        logger.warning('%s; autocomplete will be empty', e)
        cache.populate([])
    except Exception:
        logger.exception('Unexpected error loading Pokémon names; autocomplete will be empty')
        cache.populate([])


def start_warmup(country_cache, name_cache, executor=EXECUTOR, on_fatal=terminate_process):
    """Submit both warm-up tasks and return their futures (countries, names)."""
    return (
        executor.submit(warm_up_countries, country_cache, on_fatal),
        executor.submit(warm_up_names, name_cache),
    )

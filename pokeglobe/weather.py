import logging

import requests

from .core import OPENWEATHER_ICON_URL, OPENWEATHER_URL, WEATHER_TIMEOUT

logger = logging.getLogger(__name__)

# OpenWeatherMap "main" condition -> event type
CONDITION_EVENTS = {
    'Rain': 'water',
    'Drizzle': 'water',
    'Thunderstorm': 'electric',
    'Snow': 'ice',
}
HEAT_THRESHOLD = 30


def derive_event(condition: str, temperature):
    """Map current conditions to a type event, or None."""
    if condition in CONDITION_EVENTS:
        return CONDITION_EVENTS[condition]
    if condition == 'Clear' and temperature is not None and temperature > HEAT_THRESHOLD:
        return 'fire'
    return None


def to_snapshot(payload: dict) -> dict:
    current = payload['weather'][0]
    temp = float(payload['main']['temp'])
    return {
        'temperature': round(temp, 1),
        'condition': current.get('description') or current['main'],
        'icon': OPENWEATHER_ICON_URL.format(icon=current['icon']),
        'eventType': derive_event(current['main'], temp),
    }


def fetch_weather(city: str, api_key: str, lang: str = 'pt_br') -> dict:
    """Current weather for a city. Raises on any network or payload problem."""
    r = requests.get(
        OPENWEATHER_URL,
        params={'q': city, 'appid': api_key, 'units': 'metric', 'lang': lang},
        timeout=WEATHER_TIMEOUT,
    )
    r.raise_for_status()
    return to_snapshot(r.json())


def try_fetch_weather(city: str, api_key: str, lang: str = 'pt_br', context: str = ''):
    """Like fetch_weather, but logs and returns None on failure."""
    try:
        return fetch_weather(city, api_key, lang)
    except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
        logger.warning('Failed to fetch weather for %s %s: %s', city, context, e)
        return None

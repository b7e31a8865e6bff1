from concurrent.futures import ThreadPoolExecutor

# Upstream endpoints
POKEAPI_BASE = 'https://pokeapi.co/api/v2'
RESTCOUNTRIES_URL = 'https://restcountries.com/v3.1/all'
RESTCOUNTRIES_FIELDS = 'name,capital,cca2,region,subregion,landlocked,area,population,flags'
OPENWEATHER_URL = 'https://api.openweathermap.org/data/2.5/weather'
OPENWEATHER_ICON_URL = 'https://openweathermap.org/img/wn/{icon}@2x.png'
ARTWORK_URL = (
    'https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/'
    'other/official-artwork/{id}.png'
)

# Size of the /pokemon listing used for autocomplete (includes alternate forms)
NAME_CATALOG_LIMIT = 1302

# National Dex size; ids at or above this are forms/variants without artwork
MAX_SPECIES_ID = 1025

HABITAT_LIMIT = 3
SAMPLE_SIZE = 8
AUTOCOMPLETE_LIMIT = 5

NO_DESCRIPTION = 'No description found.'

# Request timeouts (seconds)
COUNTRIES_TIMEOUT = 30
NAMES_TIMEOUT = 20
POKEAPI_TIMEOUT = 12
WEATHER_TIMEOUT = 10

# The 18 elemental types; 'normal' doubles as the classifier default
TYPE_LABELS = (
    'normal', 'fire', 'water', 'electric', 'grass', 'ice',
    'fighting', 'poison', 'ground', 'flying', 'psychic', 'bug',
    'rock', 'ghost', 'dragon', 'dark', 'steel', 'fairy',
)
DEFAULT_TYPE = 'normal'

# Thread pool for the two startup warm-up tasks
EXECUTOR = ThreadPoolExecutor(max_workers=2, thread_name_prefix='warmup')

"""Country -> elemental type classification.

The rules are an ordered table of (predicate, label) pairs. The first
predicate that matches decides the label, so a country covered by more than
one rule (e.g. Sweden is both listed as 'steel' and part of Northern Europe)
gets the label of the earliest rule. Do not reorder entries.
"""
from .core import DEFAULT_TYPE


def _codes(*codes):
    wanted = frozenset(codes)
    return lambda c: c.get('cca2') in wanted


def _subregion(*names):
    wanted = frozenset(names)
    return lambda c: c.get('subregion') in wanted


def _any(*predicates):
    return lambda c: any(p(c) for p in predicates)


RULES = [
    # Hand-picked countries so that every type shows up on the map
    (_codes('JP', 'KR', 'US'), 'electric'),
    (_codes('GB', 'RO', 'MX'), 'ghost'),
    (_codes('DE', 'SE'), 'steel'),
    (_codes('FR', 'CH'), 'fairy'),
    (_codes('CN', 'VN'), 'dragon'),
    (_codes('IN', 'EG', 'GR', 'PE'), 'psychic'),
    (_codes('BR', 'CG', 'ID', 'VE'), 'grass'),
    (_codes('AU', 'CL', 'MN', 'SA'), 'ground'),
    (_codes('PL', 'AT'), 'normal'),
    (_codes('TH', 'MG', 'CR', 'PG'), 'bug'),
    (_codes('ZA', 'IT', 'AF'), 'rock'),
    (_codes('GH', 'BG', 'RS'), 'fighting'),
    (_codes('AR', 'NZ', 'KE'), 'flying'),
    (_codes('IR', 'TR', 'ES'), 'fire'),
    (_codes('NG', 'SD'), 'dark'),
    (_codes('CO', 'MY'), 'poison'),
    # Geographic fallbacks
    (_subregion('South-Eastern Asia', 'Caribbean', 'Polynesia'), 'water'),
    (_any(_subregion('Northern Europe'), _codes('GL', 'RU')), 'ice'),
    (_subregion('Northern Africa', 'Western Asia'), 'ground'),
]


def classify(country: dict) -> str:
    """Return the type label for a REST Countries record.

    Expects at least 'cca2' and 'subregion'; other fields are ignored by the
    current rules. Never raises for a mapping input and falls back to 'normal'.
    """
    for predicate, label in RULES:
        if predicate(country):
            return label
    return DEFAULT_TYPE

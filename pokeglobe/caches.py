from .core import AUTOCOMPLETE_LIMIT


class CountryCache:
    """Write-once mapping of country code -> { name, capital, type, flagUrl }.

    Stays "not ready" until populate() is called; the mapping is published
    with a single assignment so readers never see a partial build.
    """

    def __init__(self):
        self._records = None

    def populate(self, records: dict):
        self._records = {code.upper(): dict(rec) for code, rec in records.items()}

    def is_ready(self) -> bool:
        return self._records is not None

    def get(self, code):
        if not self._records or not code:
            return None
        return self._records.get(str(code).strip().upper())

    def items(self):
        return list((self._records or {}).items())

    def __len__(self):
        return len(self._records or {})

    def biomes(self):
        return {code: {'name': rec['name'], 'type': rec['type']} for code, rec in self.items()}

    def by_type(self, type_label: str, limit=None):
        """Countries whose type equals type_label, in cache order."""
        out = []
        for code, rec in self.items():
            if rec['type'] != type_label:
                continue
            out.append((code, rec))
            if limit is not None and len(out) >= limit:
                break
        return out

    def suggest(self, query: str, limit: int = AUTOCOMPLETE_LIMIT):
        q = (query or '').lower()
        if not q:
            return []
        out = []
        for code, rec in self.items():
            if rec['name'].lower().startswith(q):
                out.append({'code': code, 'name': rec['name'], 'flag': rec['flagUrl']})
                if len(out) >= limit:
                    break
        return out


class NameCache:
    """Ordered list of { name, id } entries for Pokémon autocomplete."""

    def __init__(self):
        self._entries = None

    def populate(self, entries):
        self._entries = [dict(e) for e in entries]

    def is_ready(self) -> bool:
        return self._entries is not None

    def entries(self):
        return list(self._entries or [])

    def __len__(self):
        return len(self._entries or [])

    def suggest(self, query: str, limit: int = AUTOCOMPLETE_LIMIT):
        q = (query or '').lower()
        if not q:
            return []
        out = []
        for e in self._entries or []:
            if e['name'].lower().startswith(q):
                out.append({'name': e['name'], 'id': e['id']})
                if len(out) >= limit:
                    break
        return out

class PokeGlobeError(Exception):
    """Base error for failures that map to an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(PokeGlobeError):
    status_code = 400


class NotFoundError(PokeGlobeError):
    status_code = 404


class ConfigError(PokeGlobeError):
    status_code = 500


class UpstreamError(PokeGlobeError):
    status_code = 500


class NotReadyError(PokeGlobeError):
    status_code = 503


class CountrySourceError(Exception):
    """The country list could not be fetched or parsed at startup."""


class NameSourceError(Exception):
    """The Pokémon name catalog could not be fetched or parsed at startup."""

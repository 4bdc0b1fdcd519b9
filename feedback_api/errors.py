"""
errors.py
----------
Palvelun virheluokat.

Asiakkaalle näytetään vain `public_message`; varsinainen syy (ajurin viesti,
pinojälki) kirjataan lokiin palvelimen päässä.
"""


class ServiceError(Exception):
    """Kaikkien palvelun virheiden kantaluokka."""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)


class InvalidInput(ServiceError):
    """Asiakkaan virheellinen syöte (4xx)."""

    status_code = 400
    public_message = "Feedback content is required"

    def __init__(self, message: str | None = None):
        super().__init__(message)
        # syötevirheen viesti on turvallinen näyttää sellaisenaan
        self.public_message = str(self)


class ValidationError(InvalidInput):
    """Feedback-entiteetin rakentaminen epäonnistui."""


class StoreError(ServiceError):
    """Tietokantakerroksen virhe (5xx)."""


class StoreUnavailable(StoreError):
    """Tietokantaan ei saada yhteyttä."""


class StoreWriteError(StoreError):
    pass


class StoreReadError(StoreError):
    pass


class UnexpectedError(ServiceError):
    """Odottamaton virhe, joka ei kuulu mihinkään muuhun luokkaan."""

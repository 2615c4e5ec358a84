"""
Root of the domain error hierarchy.

Every bounded context derives its errors from DomainError so that the
interface layer can map anything it does not know to a generic 500.
No framework imports allowed.
"""


class DomainError(Exception):
    """Base error for all TradeHub domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

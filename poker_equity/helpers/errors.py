from __future__ import annotations


class ParseError(ValueError):
    """Malformed card text, a card repeated in one string, or too many cards for a role."""


class ConfigurationError(ValueError):
    """Inputs that cannot describe a legal deal (card in two roles, bad sample count, ...)."""


class InsufficientCards(ConfigurationError):
    """The deck cannot satisfy a deal request."""

    def __init__(self, requested: int, remaining: int):
        super().__init__(f"Cannot deal {requested} cards, only {remaining} remain")
        self.requested = requested
        self.remaining = remaining

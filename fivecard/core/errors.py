"""
Exceptions raised by the FiveCard core.

All of them derive from ValueError, which is what the deck raised before
these types existed, so older callers catching ValueError still work.
"""

from typing import Any


class PokerError(ValueError):
    """Base class for recoverable poker errors."""


class InvalidRankError(PokerError):
    """A rank value outside the numeric range 2-10, or an unknown symbol."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid rank: {value!r} (numeric ranks must be 2-10)")


class InsufficientCardsError(PokerError):
    """A deal asked for more cards than the deck holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough cards in deck: requested {requested} but only {available} available"
        )


class EmptyInputError(PokerError):
    """Winner resolution was called without any hands."""

    def __init__(self, message: str = "Cannot determine a winner from zero hands"):
        super().__init__(message)


class InvalidHandError(PokerError):
    """A hand that does not hold exactly five cards."""

    def __init__(self, size: int, expected: int = 5):
        self.size = size
        self.expected = expected
        super().__init__(f"Need exactly {expected} cards, got {size}")

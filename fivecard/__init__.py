"""
FiveCard - Five-card poker hand evaluation

A small five-card poker project with:
- Pure Python deck, dealing and hand ranking logic (no poker dependencies)
- A command line showdown scenario
- A FastAPI service for evaluating and comparing hands

Usage:
    from fivecard.core import Deck, evaluate_hand, determine_winner
"""

__version__ = "0.1.0"

from fivecard.core.card import Card, Deck
from fivecard.core.hand import HandRank, evaluate_hand
from fivecard.core.showdown import determine_winner

__all__ = [
    "Card",
    "Deck",
    "HandRank",
    "evaluate_hand",
    "determine_winner",
    "__version__",
]

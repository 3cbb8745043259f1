"""
FiveCard Core - Pure Python five-card poker logic

This module contains the deck, hand evaluation and showdown logic without
any network dependencies.
"""

from fivecard.core.card import Card, Deck, Rank, Suit, deal, generate_deck, parse_cards
from fivecard.core.errors import (
    PokerError, InvalidRankError, InsufficientCardsError,
    EmptyInputError, InvalidHandError,
)
from fivecard.core.hand import Category, HandRank, evaluate_hand, compare_hands
from fivecard.core.showdown import (
    HandResult, determine_winner, determine_winners, pick_winner, rank_hands, winning_indices,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "deal",
    "generate_deck",
    "parse_cards",
    "PokerError",
    "InvalidRankError",
    "InsufficientCardsError",
    "EmptyInputError",
    "InvalidHandError",
    "Category",
    "HandRank",
    "evaluate_hand",
    "compare_hands",
    "HandResult",
    "determine_winner",
    "determine_winners",
    "rank_hands",
    "pick_winner",
    "winning_indices",
]

"""
Command line showdown.

Deals a fresh shuffled deck to the default table, prints every hand with
its classification and announces the winner.

Usage:
    fivecard
    python -m fivecard.cli
"""

import logging
import sys
from typing import List, Optional, TextIO

from fivecard.core.card import Card, Deck, deal, format_hand
from fivecard.core.errors import PokerError
from fivecard.core.rules import DEFAULT_CARDS_PER_HAND, DEFAULT_NUM_HANDS
from fivecard.core.showdown import pick_winner, rank_hands

logger = logging.getLogger(__name__)


def run_showdown(
    deck: Deck,
    num_hands: int = DEFAULT_NUM_HANDS,
    cards_per_hand: int = DEFAULT_CARDS_PER_HAND,
    out: Optional[TextIO] = None,
    color: bool = True,
) -> int:
    """
    Deal, print each hand with its rank and return the winning index.

    Raises:
        InsufficientCardsError: If the deck cannot cover the deal.
    """
    if out is None:
        out = sys.stdout
    hands: List[List[Card]] = deal(deck, cards_per_hand, num_hands)
    logger.debug(f"Dealt {num_hands} hands, {deck.remaining} cards left")

    results = rank_hands(hands)
    for result in results:
        print(f"Hand {result.index + 1}:", file=out)
        print(format_hand(result.cards, color=color), file=out)
        print(f"-> Poker Rank: {result.rank} ({result.description})", file=out)
        print(file=out)

    winner = pick_winner(results)
    print(f"Hand {winner + 1} wins!", file=out)
    return winner


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        run_showdown(Deck(shuffle=False), color=sys.stdout.isatty())
    except PokerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

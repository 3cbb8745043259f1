"""
Showdown: evaluate several hands and pick the best one.

Tie policy: determine_winner returns a single index, the lowest one among
the hands sharing the best HandRank. determine_winners lists every tied
index for callers that need to split.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence
import logging

from fivecard.core.card import Card
from fivecard.core.errors import EmptyInputError
from fivecard.core.hand import HandRank, evaluate_hand, get_hand_description


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandResult:
    """Evaluation of one hand at showdown."""
    index: int
    cards: tuple
    rank: HandRank
    description: str

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "cards": [card.to_dict() for card in self.cards],
            "rank": self.rank.to_dict(),
            "description": self.description,
        }


def rank_hands(hands: Sequence[Sequence[Card]]) -> List[HandResult]:
    """Evaluate every hand, keeping input order."""
    results = []
    for i, hand in enumerate(hands):
        rank = evaluate_hand(hand)
        logger.debug(f"Hand {i}: {' '.join(str(c) for c in hand)} -> {rank}")
        results.append(HandResult(
            index=i,
            cards=tuple(hand),
            rank=rank,
            description=get_hand_description(rank),
        ))
    return results


def winning_indices(results: Sequence[HandResult]) -> List[int]:
    """
    Return the indices of every already-ranked hand tied for the best
    HandRank, ascending.

    Raises:
        EmptyInputError: If results is empty.
    """
    if not results:
        raise EmptyInputError()

    best = max(r.rank for r in results)
    return [r.index for r in results if r.rank == best]


def pick_winner(results: Sequence[HandResult]) -> int:
    """
    Return the winning index among already-ranked hands, lowest index on ties.

    Raises:
        EmptyInputError: If results is empty.
    """
    winners = winning_indices(results)
    if len(winners) > 1:
        logger.info(f"Hands {winners} tie for best; awarding hand {winners[0]}")
    else:
        logger.info(f"Hand {winners[0]} wins")
    return winners[0]


def determine_winners(hands: Sequence[Sequence[Card]]) -> List[int]:
    """
    Return the indices of every hand tied for the best HandRank, ascending.

    Raises:
        EmptyInputError: If hands is empty.
    """
    return winning_indices(rank_hands(hands))


def determine_winner(hands: Sequence[Sequence[Card]]) -> int:
    """
    Return the index of the winning hand.

    Equal best hands are not reported as a tie: the lowest index wins.

    Raises:
        EmptyInputError: If hands is empty.
    """
    return pick_winner(rank_hands(hands))

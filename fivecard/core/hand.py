"""
Hand Evaluation for five-card poker.

This module classifies exactly 5 cards into a HandRank. A HandRank is a
category plus the ranks needed to break ties inside that category, and
HandRanks compare directly: higher = better hand.

Hand Rankings (best to worst):
1. Royal Flush: A♠ K♠ Q♠ J♠ 10♠
2. Straight Flush: 5 consecutive cards of same suit
3. Four of a Kind: 4 cards of same rank
4. Full House: 3 of a kind + pair
5. Flush: 5 cards of same suit
6. Straight: 5 consecutive cards
7. Three of a Kind: 3 cards of same rank
8. Two Pair: 2 different pairs
9. One Pair: 2 cards of same rank
10. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel). A suited wheel is a
five-high Straight Flush, never a Royal Flush.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from fivecard.core.card import Card, Rank, RANK_CHARS
from fivecard.core.errors import InvalidHandError
from fivecard.core.rules import HAND_SIZE, WHEEL_VALUES


class Category(IntEnum):
    """Hand categories from worst (lowest value) to best (highest value)."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


# Category names for display
CATEGORY_NAMES = {
    Category.ROYAL_FLUSH: "Royal Flush",
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.FLUSH: "Flush",
    Category.STRAIGHT: "Straight",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.TWO_PAIR: "Two Pair",
    Category.ONE_PAIR: "One Pair",
    Category.HIGH_CARD: "High Card",
}

# Compact labels used by str(HandRank), e.g. "FullHouse(K, 2)"
CATEGORY_LABELS = {
    category: name.title().replace(" ", "")
    for category, name in CATEGORY_NAMES.items()
}

# Number of tie-break ranks each category carries
PAYLOAD_SIZES = {
    Category.HIGH_CARD: 5,
    Category.ONE_PAIR: 1,
    Category.TWO_PAIR: 2,
    Category.THREE_OF_A_KIND: 1,
    Category.STRAIGHT: 1,
    Category.FLUSH: 5,
    Category.FULL_HOUSE: 2,
    Category.FOUR_OF_A_KIND: 1,
    Category.STRAIGHT_FLUSH: 1,
    Category.ROYAL_FLUSH: 0,
}

# Categories whose payload order carries no meaning and is stored descending
SORTED_PAYLOADS = (Category.HIGH_CARD, Category.TWO_PAIR, Category.FLUSH)


@total_ordering
@dataclass(frozen=True)
class HandRank:
    """
    A classified hand: its category and the tie-break ranks for it.

    Payload per category:
    - HIGH_CARD, FLUSH: all five ranks, descending
    - ONE_PAIR, THREE_OF_A_KIND, FOUR_OF_A_KIND: the paired rank
    - TWO_PAIR: higher pair, lower pair
    - FULL_HOUSE: triple rank, pair rank
    - STRAIGHT, STRAIGHT_FLUSH: the straight's high card (FIVE for a wheel)
    - ROYAL_FLUSH: nothing

    HIGH_CARD, TWO_PAIR and FLUSH payloads are sorted descending on
    construction, whatever order they are given in.

    Ordering compares the category first. Payload ranks only take part when
    both hands share a category.
    """
    category: Category
    ranks: Tuple[Rank, ...] = field(default_factory=tuple)

    def __post_init__(self):
        category = Category(self.category)
        ranks = tuple(Rank(r) for r in self.ranks)
        if len(ranks) != PAYLOAD_SIZES[category]:
            raise ValueError(
                f"{CATEGORY_LABELS[category]} takes {PAYLOAD_SIZES[category]} "
                f"ranks, got {len(ranks)}"
            )
        if category in SORTED_PAYLOADS:
            ranks = tuple(sorted(ranks, reverse=True))
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "ranks", ranks)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        if self.category != other.category:
            return self.category < other.category
        return self.ranks < other.ranks

    # Named constructors, one per category

    @classmethod
    def high_card(cls, ranks: Iterable[Rank]) -> HandRank:
        return cls(Category.HIGH_CARD, tuple(ranks))

    @classmethod
    def one_pair(cls, pair: Rank) -> HandRank:
        return cls(Category.ONE_PAIR, (pair,))

    @classmethod
    def two_pair(cls, first: Rank, second: Rank) -> HandRank:
        """Pairs may be given in any order; the higher one is stored first."""
        return cls(Category.TWO_PAIR, (first, second))

    @classmethod
    def three_of_a_kind(cls, triple: Rank) -> HandRank:
        return cls(Category.THREE_OF_A_KIND, (triple,))

    @classmethod
    def straight(cls, high: Rank) -> HandRank:
        return cls(Category.STRAIGHT, (high,))

    @classmethod
    def flush(cls, ranks: Iterable[Rank]) -> HandRank:
        return cls(Category.FLUSH, tuple(ranks))

    @classmethod
    def full_house(cls, triple: Rank, pair: Rank) -> HandRank:
        return cls(Category.FULL_HOUSE, (triple, pair))

    @classmethod
    def four_of_a_kind(cls, quad: Rank) -> HandRank:
        return cls(Category.FOUR_OF_A_KIND, (quad,))

    @classmethod
    def straight_flush(cls, high: Rank) -> HandRank:
        return cls(Category.STRAIGHT_FLUSH, (high,))

    @classmethod
    def royal_flush(cls) -> HandRank:
        return cls(Category.ROYAL_FLUSH)

    @property
    def name(self) -> str:
        """Display name of the category, e.g. 'Full House'."""
        return CATEGORY_NAMES[self.category]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "category": self.category.name,
            "name": self.name,
            "ordinal": int(self.category),
            "ranks": [RANK_CHARS[r] for r in self.ranks],
            "text": str(self),
        }

    def __str__(self) -> str:
        label = CATEGORY_LABELS[self.category]
        if not self.ranks:
            return label
        return f"{label}({', '.join(RANK_CHARS[r] for r in self.ranks)})"


def evaluate_hand(cards: Sequence[Card]) -> HandRank:
    """
    Classify a 5-card poker hand.

    Card order does not matter, and duplicate cards are not rejected: the
    category checks below run in a fixed priority order over whatever rank
    counts the hand contains.

    Args:
        cards: Exactly 5 Card objects

    Returns:
        The HandRank of the hand

    Raises:
        InvalidHandError: If not exactly 5 cards provided
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandError(len(cards), HAND_SIZE)

    ranks = sorted((c.rank for c in cards), reverse=True)
    is_flush = len({c.suit for c in cards}) == 1
    straight_high = _straight_high(ranks)

    # (rank, count) pairs by count descending, then rank descending
    rank_counts = sorted(
        Counter(ranks).items(),
        key=lambda item: (item[1], item[0]),
        reverse=True,
    )
    counts = [count for _, count in rank_counts]

    if counts == [4, 1]:
        return HandRank.four_of_a_kind(rank_counts[0][0])

    if counts == [3, 2]:
        return HandRank.full_house(rank_counts[0][0], rank_counts[1][0])

    if is_flush and straight_high is not None:
        if straight_high == Rank.ACE:
            return HandRank.royal_flush()
        return HandRank.straight_flush(straight_high)

    if counts[0] == 3:
        return HandRank.three_of_a_kind(rank_counts[0][0])

    if counts[:2] == [2, 2]:
        return HandRank.two_pair(rank_counts[0][0], rank_counts[1][0])

    if counts[0] == 2:
        return HandRank.one_pair(rank_counts[0][0])

    if is_flush:
        return HandRank.flush(ranks)

    if straight_high is not None:
        return HandRank.straight(straight_high)

    return HandRank.high_card(ranks)


def _straight_high(ranks: List[Rank]) -> Optional[Rank]:
    """
    Return the high card of the straight the ranks form, or None.

    The wheel (A-2-3-4-5) is five-high.
    """
    unique = sorted(set(ranks))
    if len(unique) != HAND_SIZE:
        return None

    if unique[-1] - unique[0] == HAND_SIZE - 1:
        return unique[-1]

    if tuple(unique) == WHEEL_VALUES:
        return Rank.FIVE

    return None


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
    """
    Compare two hands.

    Returns:
        1 if cards1 wins, -1 if cards2 wins, 0 if tie
    """
    rank1 = evaluate_hand(cards1)
    rank2 = evaluate_hand(cards2)

    if rank1 > rank2:
        return 1
    elif rank1 < rank2:
        return -1
    else:
        return 0


def get_hand_description(hand: Union[HandRank, Sequence[Card]]) -> str:
    """Get a human-readable description of a hand or of its HandRank."""
    rank = hand if isinstance(hand, HandRank) else evaluate_hand(hand)
    category = rank.category
    payload = rank.ranks

    if category == Category.ROYAL_FLUSH:
        return "Royal Flush"
    elif category == Category.STRAIGHT_FLUSH:
        if payload[0] == Rank.FIVE:
            return "Straight Flush, Five high (Steel Wheel)"
        return f"Straight Flush, {_rank_name(payload[0])} high"
    elif category == Category.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_plural(payload[0])}"
    elif category == Category.FULL_HOUSE:
        return f"Full House, {_plural(payload[0])} full of {_plural(payload[1])}"
    elif category == Category.FLUSH:
        return f"Flush, {_rank_name(payload[0])} high"
    elif category == Category.STRAIGHT:
        if payload[0] == Rank.FIVE:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_rank_name(payload[0])} high"
    elif category == Category.THREE_OF_A_KIND:
        return f"Three of a Kind, {_plural(payload[0])}"
    elif category == Category.TWO_PAIR:
        return f"Two Pair, {_plural(payload[0])} and {_plural(payload[1])}"
    elif category == Category.ONE_PAIR:
        return f"Pair of {_plural(payload[0])}"
    else:
        return f"High Card, {_rank_name(payload[0])}"


def _rank_name(rank: Rank) -> str:
    """Get the name of a rank."""
    names = {
        Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
        Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
        Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
        Rank.ACE: "Ace"
    }
    return names[rank]


def _plural(rank: Rank) -> str:
    return "Sixes" if rank == Rank.SIX else f"{_rank_name(rank)}s"

"""
Card and Deck classes for five-card poker.

A Rank's integer value is its poker value (Two=2 ... Ten=10, Jack=11,
Queen=12, King=13, Ace=14), so ranks sort and subtract directly during
hand evaluation.
"""

from __future__ import annotations
import random
from typing import Any, Iterable, List, Optional, Sequence
from enum import IntEnum

from fivecard.core.errors import InsufficientCardsError, InvalidRankError
from fivecard.core.rules import MIN_NUMBER_RANK, MAX_NUMBER_RANK


class Suit(IntEnum):
    """Card suits. Suits carry no ordering in poker; values are only identifiers."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (highest), valued by poker strength."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def number(cls, n: int) -> Rank:
        """
        Build a numeric rank (2-10).

        Raises:
            InvalidRankError: If n is not an integer in [2, 10].
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidRankError(n)
        if not MIN_NUMBER_RANK <= n <= MAX_NUMBER_RANK:
            raise InvalidRankError(n)
        return cls(n)

    @property
    def is_face(self) -> bool:
        """True for Jack, Queen, King and Ace."""
        return self > Rank.TEN


# String mappings
SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Reverse mappings
CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["T"] = Rank.TEN  # Also accept "T"
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Terminal colors
ANSI_RED = "\x1b[31m"
ANSI_WHITE = "\x1b[37m"
ANSI_RESET = "\x1b[0m"

RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)


class Card:
    """
    An immutable playing card made of a rank and a suit.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("10h")
      or Card.from_string("A♠")

    Cards compare equal when rank and suit match, and order by rank only.
    """

    __slots__ = ("rank", "suit")

    def __init__(self, rank: Rank, suit: Suit):
        try:
            rank = Rank(rank)
        except ValueError:
            raise InvalidRankError(rank) from None
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", Suit(suit))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Card is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Card is immutable")

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "10d", "Td", "2c" (rank + suit char)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)

        Raises:
            InvalidRankError: If the rank part is not a known rank.
            ValueError: If the string is too short or the suit is unknown.
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in CHAR_TO_RANK:
            raise InvalidRankError(rank_part)

        # Try suit char first, then symbol
        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part!r}")

        return cls(CHAR_TO_RANK[rank_part], suit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self.rank == other.rank and self.suit == other.suit
        return False

    def __hash__(self) -> int:
        return hash((int(self.rank), int(self.suit)))

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self.rank < other.rank

    def __repr__(self) -> str:
        return f"Card({RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in RED_SUITS else "black"

    @property
    def ansi_str(self) -> str:
        """Terminal string, red for hearts/diamonds and white for clubs/spades."""
        code = ANSI_RED if self.suit in RED_SUITS else ANSI_WHITE
        return f"{code}{self}{ANSI_RESET}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_CHARS[self.rank],
            "suit": SUIT_SYMBOLS[self.suit],
            "text": str(self),
            "code": self.short_str,
            "color": self.color,
        }


def generate_deck() -> List[Card]:
    """Return the 52 standard cards, suit by suit, Two through Ace."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A standard 52-card deck.

    The shuffle source is pluggable: pass any object with a ``shuffle(list)``
    method, e.g. ``random.Random(42)`` for a reproducible deal.

    Usage:
        deck = Deck(rng=random.Random(7))
        hands = deck.deal_hands(cards_per_hand=5, num_hands=4)
    """

    def __init__(self, shuffle: bool = True, rng: Optional[Any] = None):
        """Initialize a new deck, optionally shuffled."""
        self._rng = rng if rng is not None else random.Random()
        self.reset()
        if shuffle:
            self.shuffle()

    def reset(self) -> None:
        """Reset the deck to a full 52 cards in order."""
        self._cards: List[Card] = generate_deck()
        self._dealt: List[Card] = []

    def shuffle(self) -> None:
        """Shuffle the remaining cards in the deck."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> List[Card]:
        """
        Deal n cards from the top of the deck.

        Raises:
            InsufficientCardsError: If not enough cards remain.
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientCardsError(n, len(self._cards))

        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        self._dealt.extend(dealt)
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def deal_hands(self, cards_per_hand: int, num_hands: int) -> List[List[Card]]:
        """
        Deal num_hands hands of cards_per_hand cards, one card at a time
        around the table.

        The deck is left untouched when the request cannot be met.

        Raises:
            ValueError: If either count is below 1.
            InsufficientCardsError: If cards_per_hand * num_hands exceeds
                the cards remaining.
        """
        _check_deal_counts(cards_per_hand, num_hands)
        dealt = self.deal(cards_per_hand * num_hands)
        hands: List[List[Card]] = [[] for _ in range(num_hands)]
        for i, card in enumerate(dealt):
            hands[i % num_hands].append(card)
        return hands

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    @property
    def dealt_cards(self) -> List[Card]:
        """List of cards that have been dealt."""
        return self._dealt.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def _check_deal_counts(cards_per_hand: int, num_hands: int) -> None:
    if cards_per_hand < 1 or num_hands < 1:
        raise ValueError(
            f"cards_per_hand and num_hands must be positive, "
            f"got {cards_per_hand} and {num_hands}"
        )


def deal(deck: Deck, cards_per_hand: int, num_hands: int) -> List[List[Card]]:
    """
    Shuffle the deck and deal hands from it without replacement.

    Both checks happen before the shuffle, so a failed deal leaves the
    deck exactly as it was.

    Raises:
        ValueError: If either count is below 1.
        InsufficientCardsError: If the deck cannot cover every hand.
    """
    _check_deal_counts(cards_per_hand, num_hands)
    needed = cards_per_hand * num_hands
    if needed > deck.remaining:
        raise InsufficientCardsError(needed, deck.remaining)
    deck.shuffle()
    return deck.deal_hands(cards_per_hand, num_hands)


def format_hand(cards: Iterable[Card], color: bool = False) -> str:
    """Join cards for display, optionally with terminal colors."""
    return " ".join(card.ansi_str if color else str(card) for card in cards)


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple cards from a string.

    Accepts formats:
    - "As Kh 10d" (whitespace-separated)
    - "AsKh10d" or "AsKhTd" (no separator)
    - "A♠ K♥ 10♦" (with symbols)

    Returns:
        List of Card objects
    """
    cards_str = cards_str.strip()

    # Try whitespace-separated first
    parts = cards_str.split()
    if len(parts) > 1:
        return [Card.from_string(s) for s in parts]

    result = []
    i = 0
    while i < len(cards_str):
        width = 3 if cards_str.startswith("10", i) else 2
        chunk = cards_str[i:i + width]
        if len(chunk) < width:
            raise ValueError(f"Cannot parse card at position {i}: {cards_str[i:]}")
        result.append(Card.from_string(chunk))
        i += width

    return result


def parse_hand(card_strings: Sequence[str]) -> List[Card]:
    """Parse a list of card strings such as ["As", "Kh", "10d"]."""
    return [Card.from_string(s) for s in card_strings]

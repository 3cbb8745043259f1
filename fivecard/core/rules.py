"""
Five-card poker constants.

Hand rankings (worst to best):
High Card < One Pair < Two Pair < Three of a Kind < Straight < Flush
< Full House < Four of a Kind < Straight Flush < Royal Flush

The Ace plays high, except in the A-2-3-4-5 straight (the wheel) where it
plays low and the straight is five-high.
"""

# Deck
DECK_SIZE = 52

# Numeric ranks (Two through Ten); faces are valued Jack=11 .. Ace=14
MIN_NUMBER_RANK = 2
MAX_NUMBER_RANK = 10

# Hand evaluation
HAND_SIZE = 5
WHEEL_VALUES = (2, 3, 4, 5, 14)

# Default deal for the command line scenario
DEFAULT_NUM_HANDS = 4
DEFAULT_CARDS_PER_HAND = HAND_SIZE

# Upper bound on hands accepted by the HTTP service (10 x 5 = 50 <= 52)
MAX_HANDS = 10

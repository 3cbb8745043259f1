"""
Tests for hand evaluation and HandRank ordering.
"""

import itertools

import pytest
from fivecard.core.card import Card, Rank, Suit, generate_deck, parse_cards
from fivecard.core.errors import InvalidHandError
from fivecard.core.hand import (
    Category, HandRank, compare_hands, evaluate_hand, get_hand_description,
)


class TestHandRanking:
    """Tests for hand classification."""

    def test_royal_flush(self, royal_flush):
        """Test royal flush recognition."""
        rank = evaluate_hand(royal_flush)
        assert rank == HandRank.royal_flush()
        assert rank.ranks == ()

    def test_straight_flush(self, straight_flush):
        """Test straight flush recognition."""
        rank = evaluate_hand(straight_flush)
        assert rank == HandRank.straight_flush(Rank.NINE)

    def test_suited_wheel_is_not_royal(self, steel_wheel):
        """A-2-3-4-5 of one suit is a five-high straight flush."""
        rank = evaluate_hand(steel_wheel)
        assert rank.category == Category.STRAIGHT_FLUSH
        assert rank == HandRank.straight_flush(Rank.FIVE)
        assert rank < HandRank.straight_flush(Rank.SIX)
        assert rank < HandRank.royal_flush()

    def test_king_high_straight_flush(self):
        rank = evaluate_hand(parse_cards("Kd Qd Jd 10d 9d"))
        assert rank == HandRank.straight_flush(Rank.KING)

    def test_four_of_a_kind(self):
        """Test four of a kind recognition."""
        hand = [
            Card(Rank.ACE, Suit.SPADES),
            Card(Rank.ACE, Suit.HEARTS),
            Card(Rank.ACE, Suit.DIAMONDS),
            Card(Rank.ACE, Suit.CLUBS),
            Card(Rank.KING, Suit.SPADES),
        ]
        assert evaluate_hand(hand) == HandRank.four_of_a_kind(Rank.ACE)

    def test_full_house(self):
        """Test full house recognition."""
        hand = [
            Card(Rank.TWO, Suit.SPADES),
            Card(Rank.KING, Suit.HEARTS),
            Card(Rank.TWO, Suit.DIAMONDS),
            Card(Rank.KING, Suit.CLUBS),
            Card(Rank.TWO, Suit.HEARTS),
        ]
        assert evaluate_hand(hand) == HandRank.full_house(Rank.TWO, Rank.KING)

    def test_flush(self):
        """Test flush recognition."""
        hand = [
            Card(Rank.TWO, Suit.SPADES),
            Card(Rank.KING, Suit.SPADES),
            Card(Rank.JACK, Suit.SPADES),
            Card(Rank.NINE, Suit.SPADES),
            Card(Rank.ACE, Suit.SPADES),
        ]
        rank = evaluate_hand(hand)
        assert rank.category == Category.FLUSH
        assert rank.ranks == (Rank.ACE, Rank.KING, Rank.JACK, Rank.NINE, Rank.TWO)

    def test_straight(self):
        """5-6-7-8-9 is a nine-high straight."""
        rank = evaluate_hand(parse_cards("7h 5s 9d 6c 8s"))
        assert rank == HandRank.straight(Rank.NINE)

    def test_broadway_straight(self):
        """Unsuited A-K-Q-J-10 is an ace-high straight."""
        rank = evaluate_hand(parse_cards("As Kh Qd Jc 10s"))
        assert rank == HandRank.straight(Rank.ACE)

    def test_wheel_straight(self, wheel_straight):
        """Test wheel straight (A-2-3-4-5) recognition."""
        rank = evaluate_hand(wheel_straight)
        assert rank == HandRank.straight(Rank.FIVE)

        # Wheel should be 5-high, not ace-high
        desc = get_hand_description(wheel_straight)
        assert "Five high" in desc or "Wheel" in desc

    def test_no_wrap_around_straight(self):
        """Q-K-A-2-3 is not a straight."""
        rank = evaluate_hand(parse_cards("Qs Kh Ad 2c 3s"))
        assert rank.category == Category.HIGH_CARD

    def test_three_of_a_kind(self):
        """Test three of a kind recognition."""
        hand = [
            Card(Rank.SEVEN, Suit.SPADES),
            Card(Rank.SEVEN, Suit.HEARTS),
            Card(Rank.SEVEN, Suit.DIAMONDS),
            Card(Rank.KING, Suit.CLUBS),
            Card(Rank.QUEEN, Suit.SPADES),
        ]
        assert evaluate_hand(hand) == HandRank.three_of_a_kind(Rank.SEVEN)

    def test_two_pair(self):
        """Higher pair is stored first whatever the card order."""
        rank = evaluate_hand(parse_cards("3s 3h Qd Qc As"))
        assert rank.category == Category.TWO_PAIR
        assert rank.ranks == (Rank.QUEEN, Rank.THREE)

    def test_one_pair(self, sample_hand):
        """Test one pair recognition."""
        assert evaluate_hand(sample_hand) == HandRank.one_pair(Rank.ACE)

    def test_high_card(self):
        """Test high card recognition."""
        rank = evaluate_hand(parse_cards("2s Kh Jd 9c As"))
        assert rank.category == Category.HIGH_CARD
        assert rank.ranks == (Rank.ACE, Rank.KING, Rank.JACK, Rank.NINE, Rank.TWO)

    def test_card_order_does_not_matter(self, straight_flush):
        expected = evaluate_hand(straight_flush)
        for perm in itertools.permutations(straight_flush):
            assert evaluate_hand(list(perm)) == expected

    @pytest.mark.parametrize("size", [0, 4, 6, 7])
    def test_wrong_hand_size(self, size):
        with pytest.raises(InvalidHandError):
            evaluate_hand(generate_deck()[:size])


class TestDuplicateCards:
    """The evaluator does not assume the cards are distinct."""

    def test_duplicate_pair_is_counted(self):
        hand = parse_cards("As As Kd Qc Jh")
        assert evaluate_hand(hand) == HandRank.one_pair(Rank.ACE)

    def test_five_of_a_rank_suited(self):
        """No pattern matches five equal ranks; it falls through to flush."""
        hand = [Card(Rank.ACE, Suit.SPADES)] * 5
        assert evaluate_hand(hand) == HandRank.flush([Rank.ACE] * 5)

    def test_five_of_a_rank_mixed_suits(self):
        hand = parse_cards("As Ah Ad Ac As")
        assert evaluate_hand(hand).category == Category.HIGH_CARD


class TestEveryHand:
    """Classification across all 2,598,960 hands is too slow; use a sample."""

    def test_every_hand_in_sample_classifies(self):
        deck = generate_deck()
        seen = set()
        for combo in itertools.islice(itertools.combinations(deck, 5), 0, None, 997):
            rank = evaluate_hand(list(combo))
            assert isinstance(rank, HandRank)
            seen.add(rank.category)
        assert Category.HIGH_CARD in seen
        assert Category.ONE_PAIR in seen


class TestHandRankOrdering:
    """Tests for comparing HandRanks."""

    def test_category_order(self):
        """Every category beats all categories below it."""
        ladder = [
            HandRank.high_card([Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.NINE]),
            HandRank.one_pair(Rank.TWO),
            HandRank.two_pair(Rank.THREE, Rank.TWO),
            HandRank.three_of_a_kind(Rank.TWO),
            HandRank.straight(Rank.FIVE),
            HandRank.flush([Rank.SEVEN, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]),
            HandRank.full_house(Rank.TWO, Rank.THREE),
            HandRank.four_of_a_kind(Rank.TWO),
            HandRank.straight_flush(Rank.FIVE),
            HandRank.royal_flush(),
        ]
        for lower, higher in zip(ladder, ladder[1:]):
            assert lower < higher
        assert sorted(reversed(ladder)) == ladder

    def test_trips_beat_any_two_pair(self):
        """Payload ranks never matter across categories."""
        assert HandRank.three_of_a_kind(Rank.TWO) > HandRank.two_pair(Rank.ACE, Rank.KING)

    def test_high_card_kicker(self):
        a = HandRank.high_card([Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.NINE])
        b = HandRank.high_card([Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.EIGHT])
        assert a > b

    def test_flush_kicker(self):
        a = HandRank.flush([Rank.KING, Rank.TEN, Rank.EIGHT, Rank.FIVE, Rank.THREE])
        b = HandRank.flush([Rank.KING, Rank.TEN, Rank.EIGHT, Rank.FIVE, Rank.TWO])
        assert a > b

    def test_full_house_triple_dominates(self):
        assert HandRank.full_house(Rank.KING, Rank.TWO) > HandRank.full_house(Rank.QUEEN, Rank.ACE)

    def test_two_pair_order(self):
        assert HandRank.two_pair(Rank.KING, Rank.TWO) > HandRank.two_pair(Rank.QUEEN, Rank.JACK)
        assert HandRank.two_pair(Rank.TWO, Rank.KING) == HandRank.two_pair(Rank.KING, Rank.TWO)

    def test_equal_ranks(self):
        a = HandRank.straight(Rank.TEN)
        b = HandRank.straight(Rank.TEN)
        assert a == b
        assert not a < b
        assert a <= b and a >= b
        assert hash(a) == hash(b)

    def test_transitive(self):
        ranks = [
            HandRank.one_pair(Rank.ACE),
            HandRank.two_pair(Rank.THREE, Rank.TWO),
            HandRank.two_pair(Rank.FOUR, Rank.TWO),
            HandRank.straight(Rank.FIVE),
            HandRank.straight(Rank.ACE),
        ]
        for a, b, c in itertools.permutations(ranks, 3):
            if a < b and b < c:
                assert a < c

    def test_payload_size_checked(self):
        with pytest.raises(ValueError):
            HandRank(Category.ONE_PAIR, (Rank.ACE, Rank.KING))

    def test_unordered_payloads_are_normalized(self):
        """Two pair, high card and flush ranks are stored highest first."""
        assert HandRank(Category.TWO_PAIR, (Rank.TWO, Rank.KING)) == HandRank.two_pair(Rank.KING, Rank.TWO)

        scattered = (Rank.NINE, Rank.ACE, Rank.JACK, Rank.KING, Rank.QUEEN)
        ordered = (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.NINE)
        assert HandRank(Category.HIGH_CARD, scattered).ranks == ordered
        assert HandRank(Category.FLUSH, scattered) == HandRank(Category.FLUSH, ordered)

    def test_ordered_payloads_keep_their_order(self):
        """Full house payload is triple then pair, not sorted."""
        assert HandRank(Category.FULL_HOUSE, (Rank.TWO, Rank.KING)).ranks == (Rank.TWO, Rank.KING)

    def test_str(self):
        assert str(HandRank.full_house(Rank.KING, Rank.TWO)) == "FullHouse(K, 2)"
        assert str(HandRank.royal_flush()) == "RoyalFlush"
        assert str(HandRank.three_of_a_kind(Rank.TEN)) == "ThreeOfAKind(10)"

    def test_to_dict(self):
        data = HandRank.two_pair(Rank.KING, Rank.TWO).to_dict()
        assert data == {
            "category": "TWO_PAIR",
            "name": "Two Pair",
            "ordinal": 3,
            "ranks": ["K", "2"],
            "text": "TwoPair(K, 2)",
        }


class TestHandComparison:
    """Tests for comparing hands."""

    def test_royal_flush_beats_straight_flush(self, royal_flush, straight_flush):
        """Royal flush beats straight flush."""
        assert compare_hands(royal_flush, straight_flush) == 1
        assert compare_hands(straight_flush, royal_flush) == -1

    def test_flush_beats_straight(self):
        """Flush beats straight."""
        flush = parse_cards("Ks Js 9s 7s 2s")
        straight = parse_cards("As Kh Qd Jc 10h")
        assert compare_hands(flush, straight) == 1

    def test_higher_pair_wins(self):
        """Higher pair beats lower pair."""
        pair_aces = parse_cards("As Ah 4d 3c 2s")
        pair_kings = parse_cards("Ks Kh Qd Jc 10s")
        assert compare_hands(pair_aces, pair_kings) == 1

    def test_tie(self):
        """Identical ranks in different suits tie."""
        hand1 = parse_cards("As Kh Qd Jc 9s")
        hand2 = parse_cards("Ah Kd Qc Js 9h")
        assert compare_hands(hand1, hand2) == 0


class TestHandDescription:
    """Tests for hand description."""

    def test_royal_flush_description(self, royal_flush):
        """Test royal flush description."""
        desc = get_hand_description(royal_flush)
        assert "Royal Flush" in desc

    def test_pair_description(self, sample_hand):
        """Test pair description."""
        desc = get_hand_description(sample_hand)
        assert desc == "Pair of Aces"

    def test_full_house_description(self):
        rank = HandRank.full_house(Rank.SIX, Rank.TWO)
        assert get_hand_description(rank) == "Full House, Sixes full of Twos"

    def test_steel_wheel_description(self, steel_wheel):
        assert "Five high" in get_hand_description(steel_wheel)

"""
Tests for move legality, turn order and card effects
"""

import pytest
from fish_core import Card, Suit, Rank, Seat, create_deck, is_valid_move, next_player, compute_effect
from fish_core.rules import draw_count, get_valid_moves


def c(name):
    return Card.from_string(name)


class TestLegality:
    """Test the move legality predicate"""

    def test_no_top_card_means_no_move(self):
        """Nothing can be played before the start card is flipped"""
        for card in create_deck():
            assert not is_valid_move(card, None, Suit.HEARTS, 0)

    @pytest.mark.parametrize("stack", [2, 4, 8])
    def test_only_twos_under_attack(self, stack):
        """Any non-2 card is illegal while an attack is pending"""
        top = c("2H")
        for card in create_deck():
            for suit in Suit:
                if card.rank != Rank.TWO:
                    assert not is_valid_move(card, top, suit, stack)

    def test_any_two_answers_attack(self):
        """A 2 of any suit may be stacked on an attack"""
        top = c("2H")
        for suit in Suit:
            card = Card(f"2-{suit}", suit, Rank.TWO)
            assert is_valid_move(card, top, Suit.SPADES, 2)

    def test_jack_cannot_answer_attack(self):
        """The wildcard does not defeat an attack"""
        assert not is_valid_move(c("JH"), c("2H"), Suit.HEARTS, 2)

    def test_jack_always_legal_without_attack(self):
        """Jack can be played on every top card and active suit"""
        for top in create_deck():
            for suit in Suit:
                for jack_suit in Suit:
                    jack = Card("jack", jack_suit, Rank.JACK)
                    assert is_valid_move(jack, top, suit, 0)

    def test_match_active_suit_not_top_suit(self):
        """After a suit change the active suit governs, not the top card's suit"""
        top = c("7H")
        assert is_valid_move(c("3S"), top, Suit.SPADES, 0)
        assert not is_valid_move(c("3H"), top, Suit.SPADES, 0)

    def test_rank_match(self):
        """Same rank as the top card is legal in any suit"""
        top = c("7H")
        assert is_valid_move(c("7C"), top, Suit.SPADES, 0)
        assert not is_valid_move(c("8C"), top, Suit.SPADES, 0)

    def test_get_valid_moves_keeps_hand_order(self):
        """Legal cards are returned in hand order"""
        hand = [c("3C"), c("9H"), c("JD"), c("9S"), c("KH")]
        valid = get_valid_moves(hand, c("9D"), Suit.HEARTS, 0)
        assert [card.id for card in valid] == ["9H", "JD", "9S", "KH"]


class TestTurnOrder:
    """Test the fixed seat cycle"""

    def test_single_step(self):
        """Play moves south, west, north, east"""
        assert next_player(Seat.SOUTH) == Seat.WEST
        assert next_player(Seat.WEST) == Seat.NORTH
        assert next_player(Seat.NORTH) == Seat.EAST
        assert next_player(Seat.EAST) == Seat.SOUTH

    def test_skip_moves_two(self):
        """Skip jumps over the next seat"""
        assert next_player(Seat.SOUTH, skip=True) == Seat.NORTH
        assert next_player(Seat.NORTH, skip=True) == Seat.SOUTH
        assert next_player(Seat.EAST, skip=True) == Seat.WEST

    def test_full_cycle(self):
        """Four steps return to the start"""
        for start in Seat:
            seat = start
            for _ in range(4):
                seat = next_player(seat)
            assert seat == start


class TestEffects:
    """Test card effect computation"""

    def test_ace_skips(self):
        effect = compute_effect(c("AD"))
        assert effect.skip is True
        assert effect.new_suit == Suit.DIAMONDS
        assert effect.attack_delta == 0

    def test_two_attacks(self):
        effect = compute_effect(c("2C"))
        assert effect.attack_delta == 2
        assert effect.new_suit == Suit.CLUBS
        assert effect.skip is False

    def test_jack_requires_suit_choice(self):
        effect = compute_effect(c("JS"))
        assert effect.suit_choice_required is True
        assert effect.new_suit is None

    def test_plain_card_sets_suit(self):
        effect = compute_effect(c("9H"))
        assert effect.new_suit == Suit.HEARTS
        assert not effect.skip
        assert not effect.suit_choice_required
        assert effect.attack_delta == 0

    def test_draw_count(self):
        """Attack stack is owed in full, otherwise one card"""
        assert draw_count(0) == 1
        assert draw_count(2) == 2
        assert draw_count(6) == 6

"""端到端场景测试: 手牌 → 校验 → 出牌 → 砍牌判定"""
import pytest

from tienlen.cards import str_to_cards as C
from tienlen.combinations import CardCombinationType, MoveGenerator
from tienlen.config import GameConfig
from tienlen.deck import deal, smallest_card
from tienlen.hand import Hand, CardNotInHandError
from tienlen.rules import RuleEngine
from tienlen.validator import PlayValidator, PlayValidationReason


class TestChopScenarios:

    def test_quad_chops_single_two(self):
        hand = Hand(C("3S 3C 3D 3H"))
        board = C("2H")
        selection = C("3S 3C 3D 3H")

        result = PlayValidator.validate_play(hand.cards, selection, board)
        assert result.is_valid is True
        assert RuleEngine.try_detect_chop(board, selection) == (True, "Quad")

        hand.remove_cards(selection)
        assert hand.is_empty

    def test_pine_over_pine(self):
        hand = Hand(C("4S 4C 5S 5C 6S 6C"))
        board = C("3S 3C 4D 4H 5D 5H")
        selection = list(hand.cards)

        result = PlayValidator.validate_play(hand.cards, selection, board)
        assert result.is_valid is True
        assert RuleEngine.max_power(selection) > RuleEngine.max_power(board)
        assert RuleEngine.identify_combination(selection).type == CardCombinationType.BOMB
        assert RuleEngine.try_detect_chop(board, selection) == (True, "3-Pine")

    def test_ordinary_pair_is_not_chop(self):
        hand = Hand(C("9S 9C KD"))
        board = C("8S 8H")
        selection = C("9S 9C")

        assert PlayValidator.validate_play(hand.cards, selection, board).is_valid is True
        assert RuleEngine.try_detect_chop(board, selection) == (False, "")


class TestTurnFlow:

    def test_lead_then_follow(self):
        leader = Hand(C("3S 4C 5D 9H"))
        follower = Hand(C("6S 7S 8S KD"))

        assert PlayValidator.can_pass([]) is False
        lead = C("3S 4C 5D")
        assert PlayValidator.validate_play(leader.cards, lead, []).is_valid
        leader.remove_cards(lead)

        board = lead
        assert PlayValidator.can_pass(board) is True
        assert PlayValidator.has_playable_move(follower.cards, board) is True

        reply = C("6S 7S 8S")
        assert PlayValidator.validate_play(follower.cards, reply, board).is_valid
        follower.remove_cards(reply)

        board = reply
        assert PlayValidator.has_playable_move(leader.cards, board) is False
        assert list(leader.cards) == C("9H")

    def test_rejected_play_leaves_hand_alone(self):
        hand = Hand(C("3S 4C"))
        selection = C("3S 4C")
        result = PlayValidator.validate_play(hand.cards, selection, [])
        assert result.reason == PlayValidationReason.INVALID_COMBINATION
        assert len(hand) == 2

    def test_removing_unvalidated_cards_raises(self):
        hand = Hand(C("3S 4C"))
        with pytest.raises(CardNotInHandError):
            hand.remove_cards(C("5D"))


class TestDealtTable:

    def test_every_seat_has_a_legal_lead(self):
        hands = deal(GameConfig(seed=2024))
        for cards in hands:
            hand = Hand(cards)
            lowest = smallest_card(hand.cards)
            assert PlayValidator.validate_play(hand.cards, [lowest], []).is_valid

    @pytest.mark.parametrize("seed", [3, 11, 29])
    def test_heart_two_only_falls_to_bombs(self, seed):
        board = C("2H")
        for cards in deal(GameConfig(seed=seed)):
            if board[0] in cards:
                continue
            has_bomb = any(combo.is_bomb for combo in MoveGenerator(cards).generate_all())
            assert PlayValidator.has_playable_move(cards, board) is has_bomb

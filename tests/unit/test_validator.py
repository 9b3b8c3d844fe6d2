"""出牌校验测试"""
import logging

import pytest

from tienlen.cards import str_to_cards as C
from tienlen.validator import (
    PlayValidationReason,
    PlayValidationResult,
    PlayValidator,
)


class TestPlayValidationResult:
    """PlayValidationResult 测试"""

    def test_valid(self):
        result = PlayValidationResult.valid()
        assert result.is_valid is True
        assert result.reason == PlayValidationReason.NONE

    def test_invalid(self):
        result = PlayValidationResult.invalid(PlayValidationReason.CANNOT_BEAT)
        assert result.is_valid is False
        assert result.reason == PlayValidationReason.CANNOT_BEAT

    def test_reason_values(self):
        assert [r.name for r in PlayValidationReason] == [
            "NONE", "NO_SELECTION", "CARDS_NOT_IN_HAND", "INVALID_COMBINATION", "CANNOT_BEAT",
        ]


class TestValidatePlay:
    """validate_play 测试"""

    def test_no_selection(self):
        result = PlayValidator.validate_play(C("3S"), [], [])
        assert result.is_valid is False
        assert result.reason == PlayValidationReason.NO_SELECTION

    def test_none_selection(self):
        result = PlayValidator.validate_play(C("3S"), None, None)
        assert result.reason == PlayValidationReason.NO_SELECTION

    def test_no_selection_checked_before_hand(self):
        result = PlayValidator.validate_play([], [], [])
        assert result.reason == PlayValidationReason.NO_SELECTION

    def test_empty_hand(self):
        result = PlayValidator.validate_play([], C("3S"), [])
        assert result.reason == PlayValidationReason.CARDS_NOT_IN_HAND

    def test_cards_not_in_hand(self):
        result = PlayValidator.validate_play(C("3S"), C("4C"), [])
        assert result.is_valid is False
        assert result.reason == PlayValidationReason.CARDS_NOT_IN_HAND

    def test_not_in_hand_even_if_shape_valid(self):
        result = PlayValidator.validate_play(C("3S 3C 9H"), C("3S 3D"), [])
        assert result.reason == PlayValidationReason.CARDS_NOT_IN_HAND

    def test_duplicate_selection_not_in_hand(self):
        result = PlayValidator.validate_play(C("3S 4C"), C("3S 3S"), [])
        assert result.reason == PlayValidationReason.CARDS_NOT_IN_HAND

    def test_invalid_combination(self):
        result = PlayValidator.validate_play(C("3S 4C"), C("3S 4C"), [])
        assert result.is_valid is False
        assert result.reason == PlayValidationReason.INVALID_COMBINATION

    def test_cannot_beat(self):
        result = PlayValidator.validate_play(C("3S"), C("3S"), C("4H"))
        assert result.is_valid is False
        assert result.reason == PlayValidationReason.CANNOT_BEAT

    def test_invalid_shape_checked_before_beat(self):
        result = PlayValidator.validate_play(C("3S 4C"), C("3S 4C"), C("2H"))
        assert result.reason == PlayValidationReason.INVALID_COMBINATION

    def test_valid_on_new_round(self):
        result = PlayValidator.validate_play(C("3S 3C"), C("3S 3C"), [])
        assert result.is_valid is True
        assert result.reason == PlayValidationReason.NONE

    def test_valid_on_none_board(self):
        assert PlayValidator.validate_play(C("3S 3C"), C("3S 3C"), None).is_valid is True

    def test_valid_beat(self):
        result = PlayValidator.validate_play(C("5S 9C KD"), C("9C"), C("9S"))
        assert result.is_valid is True

    def test_does_not_mutate_inputs(self):
        hand = C("3S 3C 4D")
        selection = C("3C 3S")
        PlayValidator.validate_play(hand, selection, [])
        assert hand == C("3S 3C 4D")
        assert selection == C("3C 3S")

    def test_rejection_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tienlen.validator"):
            PlayValidator.validate_play(C("3S"), C("3S"), C("4H"))
        assert "cannot beat" in caplog.text


class TestHasCards:
    """has_cards 测试"""

    def test_counts(self):
        assert PlayValidator.has_cards(C("3S 3C"), C("3S")) is True
        assert PlayValidator.has_cards(C("3S 3C"), C("3S 3S")) is False
        assert PlayValidator.has_cards(C("3S 3S 3C"), C("3S 3S")) is True


class TestCanPass:
    """can_pass 测试"""

    def test_new_round(self):
        assert PlayValidator.can_pass([]) is False
        assert PlayValidator.can_pass(None) is False

    def test_board_has_cards(self):
        assert PlayValidator.can_pass(C("3S")) is True


class TestHasPlayableMove:
    """has_playable_move 测试"""

    def test_empty_board(self):
        assert PlayValidator.has_playable_move(C("3S"), []) is False
        assert PlayValidator.has_playable_move(C("3S"), None) is False

    def test_empty_hand(self):
        assert PlayValidator.has_playable_move([], C("3S")) is False

    def test_higher_single(self):
        assert PlayValidator.has_playable_move(C("3C"), C("3S")) is True

    def test_single_two_cannot_be_beaten(self):
        assert PlayValidator.has_playable_move(C("AS KC 3H"), C("2H")) is False

    def test_quad_against_single_two(self):
        assert PlayValidator.has_playable_move(C("3S 3C 3D 3H"), C("2H")) is True

    def test_pine_against_single_two(self):
        assert PlayValidator.has_playable_move(C("5S 5C 6S 6C 7S 7C 9D"), C("2H")) is True

    def test_higher_two_against_lower_two(self):
        assert PlayValidator.has_playable_move(C("2H"), C("2S")) is True

    def test_pair_two_needs_quad_or_long_pine(self):
        assert PlayValidator.has_playable_move(C("5S 5C 6S 6C 7S 7C"), C("2S 2D")) is False
        assert PlayValidator.has_playable_move(C("8S 8C 8D 8H"), C("2S 2D")) is True

    def test_straight_needs_same_length(self):
        board = C("3S 4S 5S 6S")
        assert PlayValidator.has_playable_move(C("7S 8S 9S"), board) is False
        assert PlayValidator.has_playable_move(C("5D 6D 7D 8D"), board) is True

    @pytest.mark.parametrize("board", ["9S", "9S 9C", "3D 4D 5D", "2H"])
    def test_agrees_with_validate_play(self, board):
        hand = C("3S 3C 3D 3H 9H 10C JD QS 2S")
        board_cards = C(board)
        has_move = PlayValidator.has_playable_move(hand, board_cards)

        from tienlen.combinations import MoveGenerator
        valid = [
            c for c in MoveGenerator(hand).generate_all()
            if PlayValidator.validate_play(hand, list(c.cards), board_cards).is_valid
        ]
        assert has_move is bool(valid)

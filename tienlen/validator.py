"""
出牌校验

在把出牌发给服务端之前做本地校验，组合手牌包含检查与规则引擎
"""
from enum import IntEnum
from dataclasses import dataclass
from collections import Counter
from typing import Optional, Sequence
import logging

from .cards import Card
from .combinations import MoveGenerator
from .rules import RuleEngine

logger = logging.getLogger(__name__)


class PlayValidationReason(IntEnum):
    """校验失败原因"""
    NONE = 0
    NO_SELECTION = 1         # 没有选牌
    CARDS_NOT_IN_HAND = 2    # 选的牌不在手牌中
    INVALID_COMBINATION = 3  # 非法牌型
    CANNOT_BEAT = 4          # 压不过桌面


@dataclass(frozen=True, slots=True)
class PlayValidationResult:
    """
    校验结果

    Attributes:
        is_valid: 是否通过
        reason: 失败原因，通过时为 NONE
    """
    is_valid: bool
    reason: PlayValidationReason = PlayValidationReason.NONE

    @classmethod
    def valid(cls) -> 'PlayValidationResult':
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: PlayValidationReason) -> 'PlayValidationResult':
        return cls(is_valid=False, reason=reason)


class PlayValidator:
    """
    出牌校验器

    所有方法都是静态方法，无状态
    """

    @staticmethod
    def has_cards(hand_cards: Sequence[Card], selected_cards: Sequence[Card]) -> bool:
        """
        检查手牌是否包含选中的牌 (按张数计)

        Args:
            hand_cards: 手牌
            selected_cards: 选中的牌

        Returns:
            是否全部包含
        """
        hand_counter = Counter(hand_cards)
        for card, count in Counter(selected_cards).items():
            if hand_counter.get(card, 0) < count:
                return False
        return True

    @staticmethod
    def validate_play(
        hand_cards: Optional[Sequence[Card]],
        selected_cards: Optional[Sequence[Card]],
        current_board: Optional[Sequence[Card]],
    ) -> PlayValidationResult:
        """
        校验出牌

        按顺序检查，第一个失败即返回:
        没选牌 → 不在手牌 → 非法牌型 → 压不过桌面

        Args:
            hand_cards: 手牌
            selected_cards: 选中的牌
            current_board: 桌面上的牌，空表示新一轮

        Returns:
            校验结果
        """
        if not selected_cards:
            return PlayValidationResult.invalid(PlayValidationReason.NO_SELECTION)

        if not hand_cards or not PlayValidator.has_cards(hand_cards, selected_cards):
            logger.debug("Selection not in hand: %s", [c.code for c in selected_cards])
            return PlayValidationResult.invalid(PlayValidationReason.CARDS_NOT_IN_HAND)

        if not RuleEngine.is_valid_set(selected_cards):
            logger.debug("Invalid combination: %s", [c.code for c in selected_cards])
            return PlayValidationResult.invalid(PlayValidationReason.INVALID_COMBINATION)

        if current_board and not RuleEngine.can_beat(current_board, selected_cards):
            logger.debug(
                "%s cannot beat %s",
                [c.code for c in selected_cards],
                [c.code for c in current_board],
            )
            return PlayValidationResult.invalid(PlayValidationReason.CANNOT_BEAT)

        return PlayValidationResult.valid()

    @staticmethod
    def can_pass(current_board: Optional[Sequence[Card]]) -> bool:
        """新一轮 (桌面为空) 不能过牌"""
        return bool(current_board)

    @staticmethod
    def has_playable_move(
        hand_cards: Optional[Sequence[Card]],
        current_board: Optional[Sequence[Card]],
    ) -> bool:
        """
        检查手牌中是否有能压过桌面的牌

        桌面为空时返回 False (必须出牌，不存在“能不能压”的问题)。
        单张红桃 2 只能被炸弹砍，不存在更大的单张

        Args:
            hand_cards: 手牌
            current_board: 桌面上的牌

        Returns:
            是否有可出的牌
        """
        if not current_board or not hand_cards:
            return False

        return bool(MoveGenerator(hand_cards).generate_responses(current_board))

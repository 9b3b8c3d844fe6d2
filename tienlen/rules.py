"""
规则引擎 - 牌型检测、大小比较、砍牌判定

所有方法都是纯函数，无状态，必须与服务端规则逐条一致
"""
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .cards import Card, Rank, sort_by_power
from .combinations import (
    CardCombination,
    ComboShape,
    SHAPE_TO_TYPE,
    PINE_SHAPES,
    MIN_STRAIGHT_LEN,
    MIN_PINE_PAIRS,
)


class ChopType(str, Enum):
    """砍牌类型 (界面/音效使用的标签)"""
    PINE3 = "3-Pine"
    QUAD = "Quad"
    PINE4 = "4-Pine"
    PINE5 = "5-Pine"


class _Target(Enum):
    """可被炸弹砍的桌面牌"""
    SINGLE_TWO = "single-two"
    PAIR_TWO = "pair-two"
    QUAD = "quad"
    PINE3 = "3-pine"
    PINE4 = "4-pine"
    PINE5 = "5-pine"


_SHAPE_TO_TARGET: Dict[ComboShape, _Target] = {
    ComboShape.QUAD: _Target.QUAD,
    ComboShape.PINE3: _Target.PINE3,
    ComboShape.PINE4: _Target.PINE4,
    ComboShape.PINE5: _Target.PINE5,
}

# 炸弹等级: 每种炸弹无条件可砍的桌面牌
BOMB_LADDER: Dict[ComboShape, FrozenSet[_Target]] = {
    ComboShape.PINE5: frozenset({
        _Target.SINGLE_TWO, _Target.PAIR_TWO, _Target.QUAD, _Target.PINE4, _Target.PINE3,
    }),
    ComboShape.PINE4: frozenset({
        _Target.SINGLE_TWO, _Target.PAIR_TWO, _Target.QUAD, _Target.PINE3,
    }),
    ComboShape.QUAD: frozenset({
        _Target.SINGLE_TWO, _Target.PAIR_TWO, _Target.PINE3,
    }),
    ComboShape.PINE3: frozenset({
        _Target.SINGLE_TWO,
    }),
}

# 砍牌标签的判定顺序 (先匹配先得)，None 表示只要能压过就算
CHOP_RULES: Tuple[Tuple[ComboShape, Optional[FrozenSet[_Target]], ChopType], ...] = (
    (ComboShape.PINE3, frozenset({_Target.SINGLE_TWO, _Target.PINE3}), ChopType.PINE3),
    (ComboShape.QUAD, frozenset({
        _Target.SINGLE_TWO, _Target.PAIR_TWO, _Target.PINE3, _Target.QUAD,
    }), ChopType.QUAD),
    (ComboShape.PINE4, frozenset({
        _Target.SINGLE_TWO, _Target.PAIR_TWO, _Target.QUAD, _Target.PINE3, _Target.PINE4,
    }), ChopType.PINE4),
    (ComboShape.PINE5, None, ChopType.PINE5),
)

assert set(BOMB_LADDER) == set(_SHAPE_TO_TARGET), "every bomb shape needs a ladder tier"
assert {shape for shape, _, _ in CHOP_RULES} == set(BOMB_LADDER), "every bomb shape needs a chop label"


class RuleEngine:
    """
    进攻越南规则引擎

    提供牌型检测、压牌判定、砍牌判定
    所有方法都是静态方法，无状态，None/空列表不会抛异常
    """

    @staticmethod
    def all_same_rank(cards: Optional[Sequence[Card]]) -> bool:
        """检查是否全部同点数"""
        if not cards:
            return False
        rank = cards[0].rank
        return all(c.rank == rank for c in cards)

    @staticmethod
    def max_power(cards: Optional[Sequence[Card]]) -> int:
        """最大牌力值，空列表返回 -1"""
        if not cards:
            return -1
        return max(c.power for c in cards)

    @staticmethod
    def _sorted_ranks(cards: Sequence[Card]) -> Optional[List[int]]:
        """排序后的点数列表，含 2 时返回 None"""
        ranks = []
        for card in cards:
            if card.rank == Rank.TWO:
                return None
            ranks.append(int(card.rank))
        ranks.sort()
        return ranks

    @staticmethod
    def is_straight(cards: Optional[Sequence[Card]]) -> bool:
        """
        检查是否为顺子

        至少 3 张，点数互不相同且连续，不能含 2
        """
        if not cards or len(cards) < MIN_STRAIGHT_LEN:
            return False

        ranks = RuleEngine._sorted_ranks(cards)
        if ranks is None:
            return False

        for i in range(1, len(ranks)):
            if ranks[i] != ranks[i - 1] + 1:
                return False
        return True

    @staticmethod
    def is_consecutive_pairs(cards: Optional[Sequence[Card]]) -> bool:
        """
        检查是否为连对

        偶数张且至少 3 对，每个点数恰好 2 张，点数连续，不能含 2
        """
        if not cards or len(cards) < MIN_PINE_PAIRS * 2 or len(cards) % 2 != 0:
            return False

        ranks = RuleEngine._sorted_ranks(cards)
        if ranks is None:
            return False

        pair_ranks = []
        for i in range(0, len(ranks), 2):
            if ranks[i] != ranks[i + 1]:
                return False
            pair_ranks.append(ranks[i])

        for i in range(1, len(pair_ranks)):
            if pair_ranks[i] != pair_ranks[i - 1] + 1:
                return False
        return True

    @staticmethod
    def shape_of(cards: Optional[Sequence[Card]]) -> ComboShape:
        """
        检测牌型形状

        Args:
            cards: 牌列表 (任意顺序)

        Returns:
            ComboShape，不合法时为 INVALID
        """
        if not cards:
            return ComboShape.INVALID

        n = len(cards)
        if n == 1:
            return ComboShape.SINGLE

        if RuleEngine.all_same_rank(cards):
            if n == 2:
                return ComboShape.PAIR
            if n == 3:
                return ComboShape.TRIPLE
            if n == 4:
                return ComboShape.QUAD
            return ComboShape.INVALID

        if RuleEngine.is_straight(cards):
            return ComboShape.STRAIGHT

        if RuleEngine.is_consecutive_pairs(cards):
            return PINE_SHAPES.get(n // 2, ComboShape.PINE)

        return ComboShape.INVALID

    @staticmethod
    def is_valid_set(cards: Optional[Sequence[Card]]) -> bool:
        """
        检查是否为合法牌型

        Args:
            cards: 牌列表

        Returns:
            是否合法
        """
        return RuleEngine.shape_of(cards) != ComboShape.INVALID

    @staticmethod
    def identify_combination(cards: Optional[Sequence[Card]]) -> CardCombination:
        """
        识别牌型

        Args:
            cards: 牌列表

        Returns:
            CardCombination，不合法时返回 CardCombination.invalid()
        """
        shape = RuleEngine.shape_of(cards)
        if shape == ComboShape.INVALID:
            return CardCombination.invalid()

        sorted_cards = tuple(sort_by_power(cards))
        return CardCombination(
            type=SHAPE_TO_TYPE[shape],
            cards=sorted_cards,
            value=sorted_cards[-1].power,
        )

    @staticmethod
    def _target_of(cards: Sequence[Card]) -> Optional[_Target]:
        """桌面牌在炸弹等级中的位置，普通牌型返回 None"""
        if len(cards) == 1 and cards[0].rank == Rank.TWO:
            return _Target.SINGLE_TWO
        if len(cards) == 2 and RuleEngine.all_same_rank(cards) and cards[0].rank == Rank.TWO:
            return _Target.PAIR_TWO
        return _SHAPE_TO_TARGET.get(RuleEngine.shape_of(cards))

    @staticmethod
    def _bomb_shape_of(cards: Sequence[Card]) -> Optional[ComboShape]:
        """出的牌如果是参与砍牌的炸弹则返回其形状"""
        shape = RuleEngine.shape_of(cards)
        return shape if shape in BOMB_LADDER else None

    @staticmethod
    def can_beat(prev_cards: Optional[Sequence[Card]],
                 new_cards: Optional[Sequence[Card]]) -> bool:
        """
        判断新出的牌能否压过上家

        判定顺序:
        1. 炸弹等级: 五连对 > 四连对 > 四条 > 三连对，
           每级无条件砍其列表内的牌，同级只比大小
        2. 其他情况: 张数必须相同，比最大一张的牌力

        Args:
            prev_cards: 上家的牌
            new_cards: 新出的牌

        Returns:
            能否压过
        """
        if prev_cards is None or new_cards is None:
            return False

        new_bomb = RuleEngine._bomb_shape_of(new_cards)
        if new_bomb is not None:
            target = RuleEngine._target_of(prev_cards)
            if target in BOMB_LADDER[new_bomb]:
                return True
            if target == _SHAPE_TO_TARGET[new_bomb]:
                if new_bomb == ComboShape.QUAD:
                    return new_cards[0].rank > prev_cards[0].rank
                return RuleEngine.max_power(new_cards) > RuleEngine.max_power(prev_cards)

        if len(prev_cards) != len(new_cards):
            return False

        return RuleEngine.max_power(new_cards) > RuleEngine.max_power(prev_cards)

    @staticmethod
    def try_detect_chop(prev_cards: Optional[Sequence[Card]],
                        new_cards: Optional[Sequence[Card]]) -> Tuple[bool, str]:
        """
        判断是否为砍牌

        砍牌只指炸弹压牌，同牌型比大小不算。
        标签按 三连对 → 四条 → 四连对 → 五连对 的顺序匹配

        Args:
            prev_cards: 上家的牌
            new_cards: 新出的牌

        Returns:
            (是否砍牌, 砍牌类型标签)，非砍牌时标签为空串
        """
        if not RuleEngine.can_beat(prev_cards, new_cards):
            return False, ""

        new_bomb = RuleEngine._bomb_shape_of(new_cards)
        if new_bomb is None:
            return False, ""

        target = RuleEngine._target_of(prev_cards)
        for shape, targets, chop_type in CHOP_RULES:
            if new_bomb != shape:
                continue
            if targets is None or target in targets:
                return True, chop_type.value

        return False, ""

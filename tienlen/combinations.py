"""
牌型定义与出牌生成器

牌型分两层:
- CardCombinationType: 与服务端一致的对外分类 (四条和连对都归为 BOMB)
- ComboShape: 规则引擎内部使用的封闭形状集合，区分 3/4/5 连对
"""
from enum import Enum, IntEnum
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
from collections import defaultdict
import itertools

from .cards import Card, Rank, sort_by_power


class CardCombinationType(IntEnum):
    """牌型 (与服务端枚举保持一致)"""
    INVALID = 0   # 非法牌型
    SINGLE = 1    # 单张
    PAIR = 2      # 对子
    TRIPLE = 3    # 三张
    QUAD = 4      # 保留值，分类时四条归为 BOMB
    STRAIGHT = 5  # 顺子 (至少3张，不含2)
    BOMB = 6      # 炸弹: 四条 / 连对


class ComboShape(Enum):
    """牌型形状 (规则引擎内部使用)"""
    INVALID = "invalid"
    SINGLE = "single"
    PAIR = "pair"
    TRIPLE = "triple"
    QUAD = "quad"
    STRAIGHT = "straight"
    PINE3 = "3-pine"   # 三连对
    PINE4 = "4-pine"   # 四连对
    PINE5 = "5-pine"   # 五连对
    PINE = "pine"      # 六连对及以上，不参与砍牌


SHAPE_TO_TYPE: Dict[ComboShape, CardCombinationType] = {
    ComboShape.INVALID: CardCombinationType.INVALID,
    ComboShape.SINGLE: CardCombinationType.SINGLE,
    ComboShape.PAIR: CardCombinationType.PAIR,
    ComboShape.TRIPLE: CardCombinationType.TRIPLE,
    ComboShape.QUAD: CardCombinationType.BOMB,
    ComboShape.STRAIGHT: CardCombinationType.STRAIGHT,
    ComboShape.PINE3: CardCombinationType.BOMB,
    ComboShape.PINE4: CardCombinationType.BOMB,
    ComboShape.PINE5: CardCombinationType.BOMB,
    ComboShape.PINE: CardCombinationType.BOMB,
}

# 连对长度 (对数) 到形状的映射
PINE_SHAPES: Dict[int, ComboShape] = {
    3: ComboShape.PINE3,
    4: ComboShape.PINE4,
    5: ComboShape.PINE5,
}

assert set(SHAPE_TO_TYPE) == set(ComboShape), "every shape needs a combination type"

# 顺子/连对的最小长度
MIN_STRAIGHT_LEN = 3       # 顺子至少 3 张
MIN_PINE_PAIRS = 3         # 连对至少 3 对


@dataclass(frozen=True, slots=True)
class CardCombination:
    """
    牌型识别结果

    Attributes:
        type: 牌型
        cards: 组成牌型的牌 (按牌力升序)
        value: 最大一张牌的牌力值
    """
    type: CardCombinationType
    cards: Tuple[Card, ...]
    value: int

    @classmethod
    def invalid(cls) -> 'CardCombination':
        """非法牌型哨兵值"""
        return cls(type=CardCombinationType.INVALID, cards=(), value=0)

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> 'CardCombination':
        """从牌列表识别牌型"""
        from .rules import RuleEngine
        return RuleEngine.identify_combination(cards)

    @property
    def is_valid(self) -> bool:
        return self.type != CardCombinationType.INVALID

    @property
    def is_bomb(self) -> bool:
        return self.type == CardCombinationType.BOMB

    @property
    def count(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)


class MoveGenerator:
    """
    出牌生成器

    根据手牌枚举所有合法牌型 (含所有花色组合)
    """

    def __init__(self, hand_cards: Sequence[Card]):
        """
        Args:
            hand_cards: 手牌列表
        """
        self.hand = sort_by_power(hand_cards)
        self.by_rank: defaultdict[Rank, List[Card]] = defaultdict(list)

        for card in self.hand:
            self.by_rank[card.rank].append(card)

    def gen_groups(self, size: int) -> List[List[Card]]:
        """
        生成同点数的组合

        Args:
            size: 1=单张, 2=对子, 3=三张, 4=四条
        """
        result = []
        for rank in sorted(self.by_rank):
            for combo in itertools.combinations(self.by_rank[rank], size):
                result.append(list(combo))
        return result

    def gen_singles(self) -> List[List[Card]]:
        """生成所有单张"""
        return self.gen_groups(1)

    def gen_pairs(self) -> List[List[Card]]:
        """生成所有对子"""
        return self.gen_groups(2)

    def gen_triples(self) -> List[List[Card]]:
        """生成所有三张"""
        return self.gen_groups(3)

    def gen_quads(self) -> List[List[Card]]:
        """生成所有四条"""
        return self.gen_groups(4)

    def _rank_windows(self, min_len: int, repeat: int,
                      required_len: int = 0) -> List[List[Rank]]:
        """
        找出所有连续点数区间

        Args:
            min_len: 最小连续长度
            repeat: 每个点数需要的张数 (1=顺子, 2=连对)
            required_len: 要求的精确长度，0 表示不限制
        """
        # 2 不能参与顺子和连对
        ranks = sorted(
            r for r, cards in self.by_rank.items()
            if r != Rank.TWO and len(cards) >= repeat
        )

        windows = []
        for start in range(len(ranks)):
            for end in range(start + min_len - 1, len(ranks)):
                window = ranks[start:end + 1]
                if window[-1] - window[0] != len(window) - 1:
                    break
                if required_len and len(window) != required_len:
                    continue
                windows.append(window)
        return windows

    def _gen_serial(self, min_len: int, repeat: int,
                    required_len: int = 0) -> List[List[Card]]:
        """生成连续牌型，每个点数取 repeat 张的所有组合"""
        result = []
        for window in self._rank_windows(min_len, repeat, required_len):
            choices = [
                list(itertools.combinations(self.by_rank[rank], repeat))
                for rank in window
            ]
            for picked in itertools.product(*choices):
                cards = []
                for group in picked:
                    cards.extend(group)
                result.append(cards)
        return result

    def gen_straights(self, required_len: int = 0) -> List[List[Card]]:
        """生成顺子"""
        return self._gen_serial(MIN_STRAIGHT_LEN, 1, required_len)

    def gen_pines(self, required_pairs: int = 0) -> List[List[Card]]:
        """生成连对"""
        return self._gen_serial(MIN_PINE_PAIRS, 2, required_pairs)

    def generate_all(self) -> List[CardCombination]:
        """
        生成所有可能的出牌 (主动出牌)

        Returns:
            所有合法牌型列表
        """
        candidates: List[List[Card]] = []
        for size in (1, 2, 3, 4):
            candidates.extend(self.gen_groups(size))
        candidates.extend(self.gen_straights())
        candidates.extend(self.gen_pines())

        return [CardCombination.from_cards(cards) for cards in candidates]

    def generate_responses(self, board: Optional[Sequence[Card]]) -> List[CardCombination]:
        """
        生成能压过桌面牌的出牌

        Args:
            board: 桌面上的牌，空表示新一轮

        Returns:
            所有能压过桌面的牌型列表 (不含过牌)
        """
        from .rules import RuleEngine

        combos = self.generate_all()
        if not board:
            return combos

        return [c for c in combos if RuleEngine.can_beat(board, c.cards)]

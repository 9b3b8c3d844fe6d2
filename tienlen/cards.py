"""
牌的定义与编码

进攻越南 (Tien Len) 使用标准 52 张牌：
- 3-10, J, Q, K, A, 2 各 4 张，2 最大
- 同点数按花色比较: 黑桃 < 梅花 < 方块 < 红桃
"""
from enum import IntEnum
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import re

import numpy as np


class Rank(IntEnum):
    """点数 (按牌力从小到大)"""
    THREE = 0
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    EIGHT = 5
    NINE = 6
    TEN = 7
    JACK = 8
    QUEEN = 9
    KING = 10
    ACE = 11
    TWO = 12


class Suit(IntEnum):
    """花色 (仅用于同点数比较)"""
    SPADES = 0
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3


NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)
DECK_SIZE = NUM_RANKS * NUM_SUITS

# 点数到显示字符的映射
RANK_TO_STR: Dict[Rank, str] = {
    Rank.THREE: '3', Rank.FOUR: '4', Rank.FIVE: '5', Rank.SIX: '6',
    Rank.SEVEN: '7', Rank.EIGHT: '8', Rank.NINE: '9', Rank.TEN: '10',
    Rank.JACK: 'J', Rank.QUEEN: 'Q', Rank.KING: 'K', Rank.ACE: 'A',
    Rank.TWO: '2',
}

# 显示字符到点数的映射
STR_TO_RANK: Dict[str, Rank] = {v: k for k, v in RANK_TO_STR.items()}

SUIT_TO_SYMBOL: Dict[Suit, str] = {
    Suit.SPADES: '♠',
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
    Suit.HEARTS: '♥',
}

SUIT_TO_LETTER: Dict[Suit, str] = {
    Suit.SPADES: 'S',
    Suit.CLUBS: 'C',
    Suit.DIAMONDS: 'D',
    Suit.HEARTS: 'H',
}

# 字母和符号都可以表示花色
STR_TO_SUIT: Dict[str, Suit] = {
    **{v: k for k, v in SUIT_TO_LETTER.items()},
    **{v: k for k, v in SUIT_TO_SYMBOL.items()},
}

_TOKEN_SPLIT = re.compile(r'[\s,]+')


@dataclass(frozen=True, order=True, slots=True)
class Card:
    """
    不可变的单张牌

    字段顺序 (rank, suit) 决定了排序，与 power 的大小顺序一致

    Attributes:
        rank: 点数
        suit: 花色
    """
    rank: Rank
    suit: Suit

    @classmethod
    def from_power(cls, power: int) -> 'Card':
        """从牌力值还原牌"""
        if not 0 <= power < DECK_SIZE:
            raise ValueError(f"power out of range: {power}")
        return cls(Rank(power // NUM_SUITS), Suit(power % NUM_SUITS))

    @property
    def power(self) -> int:
        """牌力值: 点数为主，花色为辅，52 张牌两两不同"""
        return int(self.rank) * NUM_SUITS + int(self.suit)

    @property
    def code(self) -> str:
        """ASCII 编码，如 "10H" / "2S" """
        return f"{RANK_TO_STR[self.rank]}{SUIT_TO_LETTER[self.suit]}"

    def short(self) -> str:
        """界面显示用的短标签，如 "A♠" """
        return f"{RANK_TO_STR[self.rank]}{SUIT_TO_SYMBOL[self.suit]}"

    def __str__(self) -> str:
        return self.short()


# 完整牌组 (52 张，按牌力排序)
FULL_DECK: Tuple[Card, ...] = tuple(
    Card(rank, suit) for rank in Rank for suit in Suit
)


def sort_by_power(cards: Iterable[Card]) -> List[Card]:
    """按牌力升序排序"""
    return sorted(cards, key=lambda c: c.power)


def str_to_card(token: str) -> Card:
    """
    解析单张牌

    Args:
        token: 如 "3S", "10h", "2♥"

    Returns:
        Card
    """
    text = token.strip().upper()
    if len(text) < 2:
        raise ValueError(f"invalid card token '{token}'")
    rank = STR_TO_RANK.get(text[:-1])
    suit = STR_TO_SUIT.get(text[-1])
    if rank is None or suit is None:
        raise ValueError(f"invalid card token '{token}'")
    return Card(rank, suit)


def str_to_cards(s: str) -> List[Card]:
    """
    将字符串转换为牌列表

    Args:
        s: 空格或逗号分隔的牌，如 "3S 3C 4D"

    Returns:
        牌列表 (保持输入顺序)
    """
    return [str_to_card(tok) for tok in _TOKEN_SPLIT.split(s.strip()) if tok]


def cards_to_str(cards: Sequence[Card]) -> str:
    """
    将牌列表转换为可读字符串

    Returns:
        如 "3♠ 3♣ 4♦"，空列表返回空串
    """
    return ' '.join(c.short() for c in sort_by_power(cards))


def cards_to_array(cards: Iterable[Card]) -> np.ndarray:
    """
    将牌列表转换为 52 维 one-hot 向量

    第 i 维对应牌力值为 i 的牌

    Args:
        cards: 牌列表

    Returns:
        52 维 numpy 数组
    """
    array = np.zeros(DECK_SIZE, dtype=np.float32)
    for card in cards:
        array[card.power] = 1
    return array


def array_to_cards(array: np.ndarray) -> List[Card]:
    """
    将 52 维数组转换回牌列表

    Returns:
        按牌力排序的牌列表
    """
    return [Card.from_power(int(i)) for i in np.flatnonzero(array[:DECK_SIZE] > 0)]


def cards_to_matrix(cards: Iterable[Card]) -> np.ndarray:
    """
    将牌列表转换为 4×13 的矩阵

    行为花色，列为点数 (3 ... 2)

    Returns:
        (4, 13) numpy 数组
    """
    matrix = np.zeros((NUM_SUITS, NUM_RANKS), dtype=np.float32)
    for card in cards:
        matrix[int(card.suit), int(card.rank)] = 1
    return matrix


def max_card(cards: Sequence[Card]) -> Optional[Card]:
    """牌力最大的牌，空列表返回 None"""
    if not cards:
        return None
    return max(cards, key=lambda c: c.power)

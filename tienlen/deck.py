"""
牌组、洗牌与发牌
"""
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import logging
import random

from .cards import Card, FULL_DECK, sort_by_power
from .config import GameConfig, MAX_PLAYERS, CARDS_PER_PLAYER

logger = logging.getLogger(__name__)


def new_deck() -> List[Card]:
    """按牌力排序的 52 张牌"""
    return list(FULL_DECK)


def shuffle_deck(deck: Sequence[Card], seed: Optional[int] = None) -> List[Card]:
    """
    返回洗好的副本

    Args:
        deck: 原牌组 (不会被修改)
        seed: 随机种子

    Returns:
        洗牌后的新列表
    """
    out = list(deck)
    random.Random(seed).shuffle(out)
    return out


class Deck:
    """
    洗好的 52 张牌

    可传入 seed 以便测试中复现
    """

    def __init__(self, seed: Optional[int] = None):
        self._cards = shuffle_deck(FULL_DECK, seed)

    @property
    def count(self) -> int:
        """剩余张数"""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def draw_all(self) -> Iterator[Card]:
        """从牌堆顶 (列表末尾) 依次取出所有牌"""
        while self._cards:
            yield self._cards.pop()


def deal(config: Optional[GameConfig] = None) -> List[List[Card]]:
    """
    发牌

    Args:
        config: 对局配置，默认 4 人各 13 张

    Returns:
        每个玩家的手牌 (按牌力排序)
    """
    config = config or GameConfig()
    deck = shuffle_deck(FULL_DECK, config.seed)

    n = config.cards_per_player
    hands = [
        sort_by_power(deck[i * n:(i + 1) * n])
        for i in range(config.num_players)
    ]
    logger.info("Dealt %d hands of %d cards (seed=%s)", config.num_players, n, config.seed)
    return hands


def smallest_card(cards: Sequence[Card]) -> Optional[Card]:
    """牌力最小的牌，空列表返回 None"""
    if not cards:
        return None
    return min(cards, key=lambda c: c.power)


def validate_rigged_hands(hands: Optional[Dict[int, Sequence[Card]]]) -> Tuple[bool, Optional[str]]:
    """
    校验调试用的指定发牌请求

    Args:
        hands: 座位号 -> 该座位的牌

    Returns:
        (是否合法, 错误信息)
    """
    if not hands:
        return False, "Rigged deck requires at least one seat entry."

    seen_cards = set()
    for seat, cards in hands.items():
        if not 0 <= seat < MAX_PLAYERS:
            return False, f"Seat {seat} is out of range."

        cards = cards or ()
        if len(cards) > CARDS_PER_PLAYER:
            return False, f"Seat {seat} has more than {CARDS_PER_PLAYER} cards."

        for card in cards:
            if card in seen_cards:
                return False, "Duplicate card detected across rigged hands."
            seen_cards.add(card)

    return True, None

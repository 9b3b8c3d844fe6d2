"""
玩家手牌

手牌只归属一个玩家/对局，由持有者串行修改，模块本身不加锁
"""
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from .cards import Card, sort_by_power, cards_to_str

logger = logging.getLogger(__name__)


class CardNotInHandError(ValueError):
    """移除手牌中不存在的牌时抛出 (调用方应先用 has_cards 校验)"""

    def __init__(self, card: Card):
        super().__init__(f"Card {card} not found in hand.")
        self.card = card


class Hand:
    """
    可变手牌

    始终按牌力升序排列
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = []
        if cards is not None:
            self.add_cards(cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        """手牌快照 (只读)"""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Hand({cards_to_str(self._cards)})"

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def add_cards(self, cards: Iterable[Card]) -> None:
        """加入手牌并重新排序"""
        added = list(cards)
        self._cards = sort_by_power(self._cards + added)
        logger.debug("Added %d cards, hand size %d", len(added), len(self._cards))

    def has_cards(self, target_cards: Sequence[Card]) -> bool:
        """
        检查手牌是否包含指定的牌 (按张数计)

        Args:
            target_cards: 待检查的牌

        Returns:
            是否全部包含
        """
        return not (Counter(target_cards) - Counter(self._cards))

    def remove_cards(self, cards_to_remove: Iterable[Card]) -> None:
        """
        移除指定的牌

        任意一张不在手牌中时抛出 CardNotInHandError，手牌保持不变

        Args:
            cards_to_remove: 待移除的牌
        """
        remaining = Counter(self._cards)
        for card in cards_to_remove:
            if remaining[card] == 0:
                logger.warning("Refusing to remove %s: not in %r", card, self)
                raise CardNotInHandError(card)
            remaining[card] -= 1

        kept = []
        for card in self._cards:
            if remaining[card] > 0:
                kept.append(card)
                remaining[card] -= 1
        self._cards = kept
        logger.debug("Removed cards, hand size %d", len(self._cards))

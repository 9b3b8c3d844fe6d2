"""
手牌结构分析

贪心拆牌: 先拆连对，再拆顺子，剩余按点数分组统计
"""
from dataclasses import dataclass
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from .cards import Card, Rank, sort_by_power
from .combinations import MIN_STRAIGHT_LEN, MIN_PINE_PAIRS


@dataclass
class HandProfile:
    """手牌结构统计"""
    total_cards: int = 0
    singles: int = 0
    pairs: int = 0
    triples: int = 0
    quads: int = 0
    straights: int = 0
    straight_cards: int = 0
    max_straight_len: int = 0
    pines: int = 0
    pine_cards: int = 0
    max_pine_pairs: int = 0
    twos: int = 0


def _longest_run(ranks: List[int], min_len: int) -> Tuple[int, int]:
    """
    在排序后的点数中找最长连续段

    Returns:
        (起始下标, 长度)，不足 min_len 时长度为 0
    """
    best_start, best_len = -1, 0
    for i in range(len(ranks)):
        curr = 1
        for j in range(i + 1, len(ranks)):
            if ranks[j] != ranks[j - 1] + 1:
                break
            curr += 1
        if curr >= min_len and curr > best_len:
            best_start, best_len = i, curr
    return best_start, best_len


def _extract_pines(cards: List[Card], profile: HandProfile) -> List[Card]:
    """反复拆出最长的连对，返回剩余的牌"""
    counts: Dict[Rank, int] = Counter(c.rank for c in cards)

    while True:
        ranks = sorted(int(r) for r, n in counts.items() if r != Rank.TWO and n >= 2)
        start, length = _longest_run(ranks, MIN_PINE_PAIRS)
        if length == 0:
            break

        for k in range(length):
            counts[Rank(ranks[start + k])] -= 2

        profile.pines += 1
        profile.pine_cards += length * 2
        profile.max_pine_pairs = max(profile.max_pine_pairs, length)

    remaining = []
    for card in cards:
        if counts[card.rank] > 0:
            remaining.append(card)
            counts[card.rank] -= 1
    return remaining


def _extract_straights(cards: List[Card], profile: HandProfile) -> List[Card]:
    """反复拆出最长的顺子 (每个点数取牌力最小的一张)，返回剩余的牌"""
    while True:
        by_rank: Dict[int, Card] = {}
        for card in cards:
            if card.rank != Rank.TWO and int(card.rank) not in by_rank:
                by_rank[int(card.rank)] = card

        ranks = sorted(by_rank)
        start, length = _longest_run(ranks, MIN_STRAIGHT_LEN)
        if length == 0:
            break

        straight = Counter(by_rank[r] for r in ranks[start:start + length])
        remaining = []
        for card in cards:
            if straight[card] > 0:
                straight[card] -= 1
            else:
                remaining.append(card)
        cards = remaining

        profile.straights += 1
        profile.straight_cards += length
        profile.max_straight_len = max(profile.max_straight_len, length)

    return cards


def profile_hand(hand: Sequence[Card]) -> HandProfile:
    """
    分析手牌结构

    Args:
        hand: 手牌

    Returns:
        HandProfile
    """
    profile = HandProfile(total_cards=len(hand))
    if not hand:
        return profile

    cards = sort_by_power(hand)
    profile.twos = sum(1 for c in cards if c.rank == Rank.TWO)

    cards = _extract_pines(cards, profile)
    cards = _extract_straights(cards, profile)

    for count in Counter(c.rank for c in cards).values():
        if count == 4:
            profile.quads += 1
        elif count == 3:
            profile.triples += 1
        elif count == 2:
            profile.pairs += 1
        elif count == 1:
            profile.singles += 1

    return profile

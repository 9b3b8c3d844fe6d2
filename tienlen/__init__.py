"""
Tien Len - 进攻越南规则引擎 (纯逻辑，无 I/O)

Modules:
    cards: 牌定义与编码
    hand: 玩家手牌
    combinations: 牌型与出牌生成
    rules: 规则引擎
    validator: 出牌校验
    deck: 洗牌与发牌
    profile: 手牌结构分析
    config: 对局配置
"""
from .cards import (
    Rank,
    Suit,
    Card,
    FULL_DECK,
    DECK_SIZE,
    sort_by_power,
    str_to_card,
    str_to_cards,
    cards_to_str,
    cards_to_array,
    array_to_cards,
    cards_to_matrix,
)

from .hand import Hand, CardNotInHandError

from .combinations import (
    CardCombinationType,
    ComboShape,
    CardCombination,
    MoveGenerator,
    MIN_STRAIGHT_LEN,
    MIN_PINE_PAIRS,
)

from .rules import RuleEngine, ChopType

from .validator import (
    PlayValidationReason,
    PlayValidationResult,
    PlayValidator,
)

from .deck import (
    Deck,
    new_deck,
    shuffle_deck,
    deal,
    smallest_card,
    validate_rigged_hands,
)

from .profile import HandProfile, profile_hand

from .config import GameConfig, MAX_PLAYERS, CARDS_PER_PLAYER

__all__ = [
    # cards
    "Rank",
    "Suit",
    "Card",
    "FULL_DECK",
    "DECK_SIZE",
    "sort_by_power",
    "str_to_card",
    "str_to_cards",
    "cards_to_str",
    "cards_to_array",
    "array_to_cards",
    "cards_to_matrix",
    # hand
    "Hand",
    "CardNotInHandError",
    # combinations
    "CardCombinationType",
    "ComboShape",
    "CardCombination",
    "MoveGenerator",
    "MIN_STRAIGHT_LEN",
    "MIN_PINE_PAIRS",
    # rules
    "RuleEngine",
    "ChopType",
    # validator
    "PlayValidationReason",
    "PlayValidationResult",
    "PlayValidator",
    # deck
    "Deck",
    "new_deck",
    "shuffle_deck",
    "deal",
    "smallest_card",
    "validate_rigged_hands",
    # profile
    "HandProfile",
    "profile_hand",
    # config
    "GameConfig",
    "MAX_PLAYERS",
    "CARDS_PER_PLAYER",
]
